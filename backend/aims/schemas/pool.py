"""Pool schemas for request/response."""

from aims.models.base import CamelModel
from aims.models.pool import PoolBase, PoolNature, PoolSubtype


class PoolCreate(PoolBase):
    """Schema for creating or replacing a pool."""
    pass


class PoolNatureOption(CamelModel):
    """A nature and the subtypes allowed under it."""
    nature: PoolNature
    subtypes: list[PoolSubtype]
