"""
Country data models.
Maps to the REST Countries v3.1 schema and the normalized display record.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class RawName(BaseModel):
    """Country name block; only the common name is displayed."""
    common: str
    official: Optional[str] = None


class RawFlags(BaseModel):
    """Flag image references."""
    png: str
    svg: Optional[str] = None
    alt: Optional[str] = None


class RawCurrency(BaseModel):
    """Currency entry keyed by ISO 4217 code in the upstream map."""
    name: Optional[str] = None
    symbol: Optional[str] = None


class RawMaps(BaseModel):
    """Map links for a country."""
    google_maps: str = Field(alias="googleMaps")
    open_street_maps: Optional[str] = Field(default=None, alias="openStreetMaps")


class RawCountry(BaseModel):
    """Country record as returned by restcountries.com/v3.1/all."""
    name: RawName
    flags: RawFlags
    capital: Optional[list[str]] = None
    population: int = Field(ge=0)
    languages: Optional[dict[str, str]] = None
    currencies: Optional[dict[str, RawCurrency]] = None
    area: float = Field(ge=0)
    region: str
    continents: Optional[list[str]] = None
    maps: RawMaps


class Country(BaseModel):
    """Normalized country record ready for display."""
    model_config = ConfigDict(frozen=True)

    name: str
    flag_image_url: str
    capital: str
    population: int = Field(ge=0)
    languages: str
    currencies: str
    area: float = Field(ge=0)
    region: str
    continent: str
    map_url: str
