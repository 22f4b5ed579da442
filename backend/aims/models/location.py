"""Location and area models."""

from pydantic import Field

from aims.models.base import CamelModel


class LocationBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    is_nested: bool = False
    parent_id: str | None = None


class Location(LocationBase):
    id: str


class AreaBase(CamelModel):
    location_id: str
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    square_feet: int | None = Field(None, ge=0)
    is_quality_area: bool = False


class Area(AreaBase):
    id: str
