"""
Country directory API endpoints.
Exposes the displayed list, load status, filter options and filter mutators.
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from country_directory.models.filters import (
    CONTINENT_OPTIONS,
    REGION_OPTIONS,
    FilterValueRequest,
    SortKey,
)
from country_directory.rate_limit import default_rate_limit, limiter
from country_directory.services.directory_state import DirectoryState

router = APIRouter(prefix="/api", tags=["countries"])


def get_directory(request: Request) -> DirectoryState:
    """Session state attached to the running app."""
    return request.app.state.directory


def _error_payload(directory: DirectoryState):
    return directory.error.to_dict() if directory.error is not None else None


@router.get("/countries")
@limiter.limit(default_rate_limit)
async def list_countries(request: Request, directory: DirectoryState = Depends(get_directory)):
    """
    List countries under the current filters and sort toggles.

    Empty while loading or after a failed load; check `loading` and `error`.
    """
    countries = directory.displayed
    return {
        "countries": [country.model_dump() for country in countries],
        "total": len(countries),
        "loading": directory.loading,
        "error": _error_payload(directory),
        "filters": directory.filters.model_dump(),
    }


@router.get("/status")
@limiter.limit(default_rate_limit)
async def get_status(request: Request, directory: DirectoryState = Depends(get_directory)):
    """Loader status."""
    return {
        "status": directory.status.value,
        "total_countries": len(directory.countries),
        "error": _error_payload(directory),
    }


@router.get("/options")
@limiter.limit(default_rate_limit)
async def list_options(request: Request):
    """Values accepted by the region and continent filters, and the sort toggles."""
    return {
        "regions": list(REGION_OPTIONS),
        "continents": list(CONTINENT_OPTIONS),
        "sort_keys": [key.value for key in SortKey],
    }


@router.get("/filters")
@limiter.limit(default_rate_limit)
async def get_filters(request: Request, directory: DirectoryState = Depends(get_directory)):
    """Current filter selection and sort toggles."""
    return directory.filters.model_dump()


@router.put("/filters/region")
@limiter.limit(default_rate_limit)
async def set_region(
    request: Request,
    body: FilterValueRequest,
    directory: DirectoryState = Depends(get_directory),
):
    """Select a region, or clear it with null."""
    if body.value and body.value not in REGION_OPTIONS:
        raise HTTPException(status_code=400, detail=f"Unknown region: {body.value}")
    return directory.set_region(body.value).model_dump()


@router.put("/filters/continent")
@limiter.limit(default_rate_limit)
async def set_continent(
    request: Request,
    body: FilterValueRequest,
    directory: DirectoryState = Depends(get_directory),
):
    """Select a continent, or clear it with null."""
    if body.value and body.value not in CONTINENT_OPTIONS:
        raise HTTPException(status_code=400, detail=f"Unknown continent: {body.value}")
    return directory.set_continent(body.value).model_dump()


@router.post("/filters/sort/{sort_key}/toggle")
@limiter.limit(default_rate_limit)
async def toggle_sort(request: Request, sort_key: SortKey, directory: DirectoryState = Depends(get_directory)):
    """Flip a sort toggle (population, area or alphabetical)."""
    return directory.toggle(sort_key).model_dump()
