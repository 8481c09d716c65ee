"""
Pytest configuration and fixtures for country directory tests.
"""
import pytest
from country_directory.models.country import Country
from country_directory.rate_limit import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate-limit counters."""
    limiter.reset()
    yield


def make_country(name, population=0, area=0.0, region="Europe", continent="Europe", **overrides):
    """Build a normalized Country with display defaults."""
    fields = {
        "name": name,
        "flag_image_url": f"https://flagcdn.com/w320/{name.lower()[:2]}.png",
        "capital": "Unknown",
        "population": population,
        "languages": "Unknown",
        "currencies": "Unknown",
        "area": area,
        "region": region,
        "continent": continent,
        "map_url": f"https://goo.gl/maps/{name}",
    }
    fields.update(overrides)
    return Country(**fields)


@pytest.fixture
def country_factory():
    """Factory for normalized Country records."""
    return make_country


@pytest.fixture
def sample_raw_country():
    """A complete REST Countries v3.1 record."""
    return {
        "name": {"common": "Germany", "official": "Federal Republic of Germany"},
        "flags": {"png": "https://flagcdn.com/w320/de.png", "svg": "https://flagcdn.com/de.svg"},
        "capital": ["Berlin"],
        "population": 83240525,
        "languages": {"deu": "German"},
        "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
        "area": 357114.0,
        "region": "Europe",
        "subregion": "Western Europe",
        "continents": ["Europe"],
        "maps": {
            "googleMaps": "https://goo.gl/maps/mD9FBMq1nvXUBrkv6",
            "openStreetMaps": "https://www.openstreetmap.org/relation/51477",
        },
    }


@pytest.fixture
def sample_raw_sparse_country():
    """A record with no capital, languages, currencies or continents."""
    return {
        "name": {"common": "Heard Island and McDonald Islands"},
        "flags": {"png": "https://flagcdn.com/w320/hm.png"},
        "population": 0,
        "area": 412.0,
        "region": "Antarctic",
        "maps": {"googleMaps": "https://goo.gl/maps/k5ZEMfF2Y8vsGMdT6"},
    }


@pytest.fixture
def sample_raw_countries(sample_raw_country, sample_raw_sparse_country):
    """Payload as served by /v3.1/all."""
    return [
        sample_raw_country,
        sample_raw_sparse_country,
        {
            "name": {"common": "Switzerland"},
            "flags": {"png": "https://flagcdn.com/w320/ch.png"},
            "capital": ["Bern"],
            "population": 8654622,
            "languages": {"fra": "French", "gsw": "Swiss German", "ita": "Italian", "roh": "Romansh"},
            "currencies": {"CHF": {"name": "Swiss franc", "symbol": "Fr."}},
            "area": 41284.0,
            "region": "Europe",
            "continents": ["Europe"],
            "maps": {"googleMaps": "https://goo.gl/maps/uVuZcXaxSx5jLyEC9"},
        },
    ]
