"""
Country loader service.
Fetches the country list from the REST Countries API once per session.
"""
import httpx
import logging
from typing import Optional
from pydantic import ValidationError
from country_directory.config import get_settings
from country_directory.models.country import Country, RawCountry
from country_directory.models.errors import FetchError, FetchErrorKind
from country_directory.services.directory_state import DirectoryState

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


def normalize_country(raw: dict) -> Country:
    """Map one upstream record to a display-ready Country."""
    record = RawCountry.model_validate(raw)

    capital = record.capital[0] if record.capital else ""
    continent = record.continents[0] if record.continents else ""
    languages = ", ".join((record.languages or {}).values())
    currencies = ", ".join(
        currency.name for currency in (record.currencies or {}).values() if currency.name
    )

    return Country(
        name=record.name.common,
        flag_image_url=record.flags.png,
        capital=capital or UNKNOWN,
        population=record.population,
        languages=languages or UNKNOWN,
        currencies=currencies or UNKNOWN,
        area=record.area,
        region=record.region,
        continent=continent or UNKNOWN,
        map_url=record.maps.google_maps,
    )


class CountryLoader:
    """Loads and normalizes the country list."""

    def __init__(self, url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = get_settings()
        self.url = url or self.settings.countries_api_url
        self._transport = transport

    async def fetch(self) -> list:
        """Fetch the raw country list. Raises FetchError."""
        logger.info(f"Fetching countries from {self.url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.fetch_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                FetchErrorKind.NETWORK_ERROR,
                f"Network response was not ok (HTTP {e.response.status_code})",
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(FetchErrorKind.NETWORK_ERROR, f"Request failed: {e}") from e

        try:
            data = response.json()
        except (ValueError, RecursionError) as e:
            raise FetchError(FetchErrorKind.PARSE_ERROR, f"Response is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise FetchError(
                FetchErrorKind.PARSE_ERROR,
                f"Expected a list of countries, got {type(data).__name__}",
            )

        logger.info(f"Fetched {len(data)} country records")
        return data

    async def load_countries(self) -> list[Country]:
        """Fetch and normalize every record. Raises FetchError."""
        data = await self.fetch()
        try:
            return [normalize_country(item) for item in data]
        except ValidationError as e:
            raise FetchError(
                FetchErrorKind.PARSE_ERROR,
                f"Unexpected country record shape: {e.error_count()} validation error(s)",
            ) from e

    async def load(self, state: DirectoryState) -> None:
        """Run the one-time load and publish the outcome to `state`."""
        try:
            countries = await self.load_countries()
        except FetchError as e:
            logger.error(f"Failed to load countries: {e.kind.value}: {e.message}")
            state.fail(e)
            return
        except Exception as e:
            # The load must always leave LOADING
            logger.error(f"Unexpected error loading countries: {e}", exc_info=True)
            state.fail(FetchError(FetchErrorKind.PARSE_ERROR, f"Unexpected error loading countries: {e}"))
            return
        state.complete(countries)


# Singleton
_loader: Optional[CountryLoader] = None


def get_loader() -> CountryLoader:
    """Get or create loader singleton."""
    global _loader
    if _loader is None:
        _loader = CountryLoader()
    return _loader
