"""Dashboard summary endpoints."""

from fastapi import APIRouter, Depends

from aims.core.config import Settings, get_settings
from aims.core.deps import get_repository, require_action
from aims.db.repository import DataRepository
from aims.models.role import Action
from aims.schemas.stock import StockSummaryResponse
from aims.services.authorization import AccessContext
from aims.services.stock_classification import classify

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stock-summary", response_model=StockSummaryResponse)
async def stock_summary(
    access: AccessContext = Depends(require_action(Action.VIEW_DASHBOARD)),
    repo: DataRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    """Ownership/custody aggregates over all stock lots, computed on every call."""
    lots = repo.get_stock_lots()
    return StockSummaryResponse(
        items=classify(lots, settings.MY_POOL_IDS),
        lot_count=len(lots),
    )
