"""Auth request/response schemas."""

from aims.models.base import CamelModel
from aims.models.role import Action, PermissionGrant, Role


# ── Current User ───────────────────────────────────
class CurrentUser(CamelModel):
    id: str
    name: str
    email: str
    role_ids: list[str]
    roles: list[Role]
    grants: list[PermissionGrant]


# ── Authorization check ────────────────────────────
class CanResponse(CamelModel):
    action: Action
    stock_lot_id: str | None = None
    allowed: bool
