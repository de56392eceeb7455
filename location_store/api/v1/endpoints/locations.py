"""
Location and location tag management endpoints.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from location_store.core.locale import get_locale, normalize_locale
from location_store.db.session import get_db
from location_store.models.location import Location, LocationTag
from location_store.schemas.location import (
    LocationCreate,
    LocationListResponse,
    LocationResponse,
    LocationTagCreate,
    LocationTagListResponse,
    LocationTagResponse,
    LocationUpdate,
    RetireRequest,
)
from location_store.services.location_service import LocationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/locations", tags=["Locations"])

_LOCATION_FIELDS = (
    "name", "description", "address1", "address2", "city_village",
    "state_province", "country", "postal_code", "latitude", "longitude",
)


def get_location_service(db: Session = Depends(get_db)) -> LocationService:
    return LocationService(db)


def get_request_locale(lang: Optional[str] = Header(None)) -> str:
    """Locale of the request, taken from the ``lang`` header."""
    if not lang:
        return get_locale()
    try:
        return normalize_locale(lang)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _apply_location(service: LocationService, location: Location, data: dict) -> None:
    for field in _LOCATION_FIELDS:
        if field in data:
            setattr(location, field, data[field])
    if "parent_uuid" in data:
        parent_uuid = data["parent_uuid"]
        parent = service.require_location(parent_uuid) if parent_uuid else None
        service.set_parent_location(location, parent)
    if data.get("tag_uuids") is not None:
        location.tags = [service.require_location_tag(uuid) for uuid in data["tag_uuids"]]
    service.set_localized_names(location, data.get("translations") or {})


# ==================== Location Tag Endpoints ====================

@router.get("/tags", response_model=LocationTagListResponse)
def list_location_tags(
    search: Optional[str] = Query(None, description="Name prefix"),
    include_retired: bool = Query(False),
    service: LocationService = Depends(get_location_service),
    locale: str = Depends(get_request_locale),
):
    if search:
        tags = service.get_location_tags(search, locale=locale)
        if not include_retired:
            tags = [tag for tag in tags if not tag.retired]
    else:
        tags = service.get_all_location_tags(include_retired, locale=locale)
    return LocationTagListResponse(
        total_count=len(tags),
        tags=[LocationTagResponse.from_model(tag, locale) for tag in tags],
    )


@router.post("/tags", response_model=LocationTagResponse, status_code=201)
def create_location_tag(
    item: LocationTagCreate,
    service: LocationService = Depends(get_location_service),
    locale: str = Depends(get_request_locale),
):
    tag = LocationTag(name=item.name, description=item.description)
    service.set_localized_names(tag, item.translations)
    service.save_location_tag(tag)
    return LocationTagResponse.from_model(tag, locale)


@router.get("/tags/{uuid}", response_model=LocationTagResponse)
def read_location_tag(
    uuid: str,
    service: LocationService = Depends(get_location_service),
    locale: str = Depends(get_request_locale),
):
    return LocationTagResponse.from_model(service.require_location_tag(uuid), locale)


@router.post("/tags/{uuid}/retire", response_model=LocationTagResponse)
def retire_location_tag(
    uuid: str,
    item: RetireRequest,
    service: LocationService = Depends(get_location_service),
    locale: str = Depends(get_request_locale),
):
    tag = service.retire_location_tag(service.require_location_tag(uuid), item.reason)
    return LocationTagResponse.from_model(tag, locale)


@router.delete("/tags/{uuid}", status_code=204)
def delete_location_tag(uuid: str, service: LocationService = Depends(get_location_service)):
    service.purge_location_tag(service.require_location_tag(uuid))


# ==================== Location Endpoints ====================

@router.get("", response_model=LocationListResponse)
def list_locations(
    search: Optional[str] = Query(None, description="Name prefix"),
    include_retired: bool = Query(False),
    service: LocationService = Depends(get_location_service),
    locale: str = Depends(get_request_locale),
):
    """
    List locations, optionally filtered by a name prefix.
    """
    if search:
        locations = service.get_locations(search, locale=locale)
        if not include_retired:
            locations = [loc for loc in locations if not loc.retired]
    else:
        locations = service.get_all_locations(include_retired, locale=locale)

    logger.info(f"Listing locations: search={search!r}, found={len(locations)}")
    return LocationListResponse(
        total_count=len(locations),
        locations=[LocationResponse.from_model(loc, locale) for loc in locations],
    )


@router.post("", response_model=LocationResponse, status_code=201)
def create_location(
    item: LocationCreate,
    service: LocationService = Depends(get_location_service),
    locale: str = Depends(get_request_locale),
):
    location = Location()
    _apply_location(service, location, item.model_dump())
    service.save_location(location)
    return LocationResponse.from_model(location, locale)


@router.get("/{uuid}", response_model=LocationResponse)
def read_location(
    uuid: str,
    service: LocationService = Depends(get_location_service),
    locale: str = Depends(get_request_locale),
):
    return LocationResponse.from_model(service.require_location(uuid), locale)


@router.put("/{uuid}", response_model=LocationResponse)
def update_location(
    uuid: str,
    item: LocationUpdate,
    service: LocationService = Depends(get_location_service),
    locale: str = Depends(get_request_locale),
):
    location = service.require_location(uuid)
    _apply_location(service, location, item.model_dump(exclude_unset=True))
    service.save_location(location)
    return LocationResponse.from_model(location, locale)


@router.post("/{uuid}/retire", response_model=LocationResponse)
def retire_location(
    uuid: str,
    item: RetireRequest,
    service: LocationService = Depends(get_location_service),
    locale: str = Depends(get_request_locale),
):
    location = service.retire_location(service.require_location(uuid), item.reason)
    return LocationResponse.from_model(location, locale)


@router.delete("/{uuid}", status_code=204)
def delete_location(uuid: str, service: LocationService = Depends(get_location_service)):
    service.purge_location(service.require_location(uuid))
