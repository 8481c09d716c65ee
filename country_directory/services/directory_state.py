"""
Session state for the country directory.
Owns the loaded snapshot, the load outcome and the user's FilterState.
"""
import asyncio
import logging
from enum import Enum
from typing import Optional, Sequence
from country_directory.models.country import Country
from country_directory.models.errors import FetchError
from country_directory.models.filters import FilterState, SortKey
from country_directory.services.filter_engine import derive

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    """Loader lifecycle: loading, then exactly one of ready or failed."""
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class DirectoryState:
    """Single mutable state object shared by the loader and the API."""

    def __init__(self):
        self.status = LoadStatus.LOADING
        self.countries: list[Country] = []
        self.error: Optional[FetchError] = None
        self.filters = FilterState()
        self._loaded = asyncio.Event()

    @property
    def loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def displayed(self) -> list[Country]:
        """Countries to render under the current filters."""
        return derive(self.countries, self.filters)

    # Load outcome
    def complete(self, countries: Sequence[Country]) -> None:
        """Publish the loaded snapshot."""
        self._leave_loading(LoadStatus.READY)
        self.countries = list(countries)
        logger.info(f"Directory ready with {len(self.countries)} countries")

    def fail(self, error: FetchError) -> None:
        """Publish the load failure."""
        self._leave_loading(LoadStatus.FAILED)
        self.error = error
        logger.warning(f"Directory failed to load: {error.kind.value}: {error.message}")

    def _leave_loading(self, status: LoadStatus) -> None:
        if self.status is not LoadStatus.LOADING:
            raise RuntimeError(f"Directory already {self.status.value}, cannot move to {status.value}")
        self.status = status
        self._loaded.set()

    async def wait_loaded(self) -> LoadStatus:
        """Block until the loader has published its outcome."""
        await self._loaded.wait()
        return self.status

    # Filter mutators
    def set_region(self, value: Optional[str]) -> FilterState:
        self.filters.region = value or None
        return self.filters

    def set_continent(self, value: Optional[str]) -> FilterState:
        self.filters.continent = value or None
        return self.filters

    def toggle(self, sort_key: SortKey) -> FilterState:
        """Flip one sort toggle; the others are left as they are."""
        field = sort_key.field_name
        setattr(self.filters, field, not getattr(self.filters, field))
        return self.filters
