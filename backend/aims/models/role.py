"""Role, action vocabulary and permission grant models."""

import enum
import uuid

from pydantic import Field

from aims.models.base import CamelModel


class Action(str, enum.Enum):
    """All actions a permission grant can authorize."""
    # Dashboard
    VIEW_DASHBOARD = "VIEW_DASHBOARD"
    # Pools
    VIEW_POOLS = "VIEW_POOLS"
    MANAGE_POOLS = "MANAGE_POOLS"
    # Locations
    VIEW_LOCATIONS = "VIEW_LOCATIONS"
    MANAGE_LOCATIONS = "MANAGE_LOCATIONS"
    # Areas
    VIEW_AREAS = "VIEW_AREAS"
    MANAGE_AREAS = "MANAGE_AREAS"
    # Stock selection criteria
    VIEW_SSC = "VIEW_SSC"
    MANAGE_SSC = "MANAGE_SSC"
    # Permissions admin
    VIEW_PERMISSIONS = "VIEW_PERMISSIONS"
    MANAGE_PERMISSIONS = "MANAGE_PERMISSIONS"
    # Stock operations
    ALLOCATE_STOCK = "ALLOCATE_STOCK"
    CHANGE_STOCK_STATE = "CHANGE_STOCK_STATE"


def _grant_id() -> str:
    return f"grant-{uuid.uuid4().hex[:12]}"


class RoleBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""


class Role(RoleBase):
    id: str


class Constraints(CamelModel):
    """Restrictions on the stock lot a grant applies to.

    A field left as None imposes no restriction of that kind. An empty
    list is a restriction that nothing satisfies.
    """
    allowed_pool_ids: list[str] | None = None
    allowed_area_ids: list[str] | None = None
    matching_ssc_ids: list[str] | None = None


class GrantBase(CamelModel):
    role_id: str
    action: Action
    constraints: Constraints | None = None


class PermissionGrant(GrantBase):
    id: str = Field(default_factory=_grant_id)

    @property
    def is_unconstrained(self) -> bool:
        """Only a grant without a constraints object applies outright.

        An empty constraints object still needs a stock lot to decide on.
        """
        return self.constraints is None

    def __repr__(self) -> str:
        return f"<PermissionGrant {self.role_id}:{self.action.value}>"
