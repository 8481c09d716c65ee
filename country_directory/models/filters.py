"""
Filter and sort models, plus the fixed option lists offered to filter controls.
"""
from enum import Enum
from pydantic import BaseModel
from typing import Optional


REGION_OPTIONS: tuple[str, ...] = (
    "Caribbean", "Western Europe", "Western Africa", "Central Europe",
    "East Asia", "Polynesia", "Northern Africa", "South Africa",
    "South East Asia", "Eastern Africa", "Northern America",
    "Middle Africa", "Micronesia", "Southern Europe", "West Asia",
    "North Europe", "Melanesia", "Central Asia", "Southern Asia",
    "South America", "Australian and New Zealand", "Central America",
    "East Europe",
)

CONTINENT_OPTIONS: tuple[str, ...] = (
    "Antarctica", "North America", "Europe", "Africa", "Asia",
    "Oceania", "South America",
)


class SortKey(str, Enum):
    """Sort toggles exposed to the client."""
    POPULATION = "population"
    AREA = "area"
    ALPHABETICAL = "alphabetical"

    @property
    def field_name(self) -> str:
        """FilterState attribute backing this toggle."""
        return _SORT_FIELDS[self]


_SORT_FIELDS = {
    SortKey.POPULATION: "sort_by_population_desc",
    SortKey.AREA: "sort_by_area_desc",
    SortKey.ALPHABETICAL: "sort_alphabetical",
}


class FilterState(BaseModel):
    """Current filter selection and sort toggles for a session."""
    region: Optional[str] = None
    continent: Optional[str] = None
    sort_by_population_desc: bool = False
    sort_by_area_desc: bool = False
    sort_alphabetical: bool = False


class FilterValueRequest(BaseModel):
    """Dropdown selection; null clears the filter."""
    value: Optional[str] = None
