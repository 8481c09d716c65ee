"""
Filter and sort engine.
Derives the displayed country list from the loaded snapshot and a FilterState.
"""
import unicodedata
from operator import attrgetter
from typing import Sequence
from country_directory.models.country import Country
from country_directory.models.filters import FilterState


def collation_key(name: str) -> str:
    """Case- and accent-insensitive sort key for display names."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def derive(source: Sequence[Country], filters: FilterState) -> list[Country]:
    """
    Apply filters, then sorts, in a fixed order.

    Each enabled sort re-orders the whole list, so a later sort overrides an
    earlier one: population, then area, then alphabetical. All sorts are
    stable. `source` is never modified.
    """
    countries = list(source)

    if filters.region is not None:
        countries = [c for c in countries if c.region == filters.region]
    if filters.continent is not None:
        countries = [c for c in countries if c.continent == filters.continent]

    if filters.sort_by_population_desc:
        countries = sorted(countries, key=attrgetter("population"), reverse=True)
    if filters.sort_by_area_desc:
        countries = sorted(countries, key=attrgetter("area"), reverse=True)
    if filters.sort_alphabetical:
        # Equal keys: lowercase before uppercase
        countries = sorted(countries, key=lambda c: (collation_key(c.name), c.name.swapcase()))

    return countries
