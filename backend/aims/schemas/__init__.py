from aims.schemas.auth import CurrentUser, CanResponse
from aims.schemas.permission import GrantCreate
from aims.schemas.pool import PoolCreate, PoolNatureOption
from aims.schemas.location import LocationCreate, AreaCreate
from aims.schemas.ssc import SSCCreate
from aims.schemas.stock import (
    DerivedStockState, StockSummaryResponse, StockAssignRequest, StockStateChange,
    StockLotListResponse,
)

__all__ = [
    "CurrentUser", "CanResponse",
    "GrantCreate",
    "PoolCreate", "PoolNatureOption",
    "LocationCreate", "AreaCreate",
    "SSCCreate",
    "DerivedStockState", "StockSummaryResponse", "StockAssignRequest", "StockStateChange",
    "StockLotListResponse",
]
