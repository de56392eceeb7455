from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from location_store.models.location import Location, LocationTag


class LocationTagBase(BaseModel):
    """Schema base para etiquetas de ubicación"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    translations: Dict[str, str] = Field(default_factory=dict, description="Locale -> translated name")


class LocationTagCreate(LocationTagBase):
    pass


class LocationTagResponse(BaseModel):
    uuid: str
    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    retired: bool = False
    retire_reason: Optional[str] = None
    date_created: Optional[datetime] = None

    class Config:
        from_attributes = True

    @classmethod
    def from_model(cls, tag: LocationTag, locale: Optional[str] = None) -> "LocationTagResponse":
        return cls(
            uuid=tag.uuid,
            name=tag.name,
            display_name=tag.localized_name(locale),
            description=tag.description,
            retired=tag.retired,
            retire_reason=tag.retire_reason,
            date_created=tag.date_created,
        )


class LocationBase(BaseModel):
    """Schema base para ubicaciones"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city_village: Optional[str] = None
    state_province: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    parent_uuid: Optional[str] = Field(None, description="UUID de la ubicación padre")
    tag_uuids: List[str] = Field(default_factory=list)
    translations: Dict[str, str] = Field(default_factory=dict, description="Locale -> translated name")


class LocationCreate(LocationBase):
    pass


class LocationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city_village: Optional[str] = None
    state_province: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    parent_uuid: Optional[str] = None
    tag_uuids: Optional[List[str]] = None
    translations: Optional[Dict[str, str]] = None


class RetireRequest(BaseModel):
    reason: str = Field(..., min_length=1)


class LocationResponse(BaseModel):
    uuid: str
    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city_village: Optional[str] = None
    state_province: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    retired: bool = False
    retire_reason: Optional[str] = None
    parent_uuid: Optional[str] = None
    child_uuids: List[str] = Field(default_factory=list)
    tags: List[LocationTagResponse] = Field(default_factory=list)
    date_created: Optional[datetime] = None

    class Config:
        from_attributes = True

    @classmethod
    def from_model(cls, location: Location, locale: Optional[str] = None) -> "LocationResponse":
        """
        Convierte un Location a LocationResponse

        Args:
            location: Ubicación persistida
            locale: Locale del nombre mostrado
        """
        return cls(
            uuid=location.uuid,
            name=location.name,
            display_name=location.localized_name(locale),
            description=location.description,
            address1=location.address1,
            address2=location.address2,
            city_village=location.city_village,
            state_province=location.state_province,
            country=location.country,
            postal_code=location.postal_code,
            latitude=location.latitude,
            longitude=location.longitude,
            retired=location.retired,
            retire_reason=location.retire_reason,
            parent_uuid=location.parent_location.uuid if location.parent_location else None,
            child_uuids=[child.uuid for child in location.child_locations],
            tags=[LocationTagResponse.from_model(tag, locale) for tag in location.tags],
            date_created=location.date_created,
        )


class LocationListResponse(BaseModel):
    total_count: int
    locations: List[LocationResponse]


class LocationTagListResponse(BaseModel):
    total_count: int
    tags: List[LocationTagResponse]
