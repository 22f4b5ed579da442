"""Permission grant schemas."""

from aims.models.role import GrantBase


class GrantCreate(GrantBase):
    """Schema for creating or replacing a permission grant."""
    pass
