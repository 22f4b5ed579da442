"""Reference data models for AIMS."""

from aims.models.role import Action, Role, Constraints, PermissionGrant
from aims.models.user import User
from aims.models.pool import Pool, PoolNature, PoolSubtype, POOL_SUBTYPE_MAP
from aims.models.location import Location, Area
from aims.models.stock import RAGState, StockLot, StockSelectionCriteria

__all__ = [
    "Action",
    "Role",
    "Constraints",
    "PermissionGrant",
    "User",
    "Pool",
    "PoolNature",
    "PoolSubtype",
    "POOL_SUBTYPE_MAP",
    "Location",
    "Area",
    "RAGState",
    "StockLot",
    "StockSelectionCriteria",
]
