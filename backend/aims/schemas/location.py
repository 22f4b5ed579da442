"""Location and area schemas."""

from aims.models.location import AreaBase, LocationBase


class LocationCreate(LocationBase):
    pass


class AreaCreate(AreaBase):
    pass
