"""Stock lot endpoints: listing, inbound assignment and state changes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from aims.core.config import Settings, get_settings
from aims.core.deps import ensure_can, get_access_context, get_repository, require_action
from aims.db.repository import Collection, DataRepository, EntityNotFoundError
from aims.models.role import Action
from aims.models.stock import RAGState, StockLot
from aims.schemas.stock import StockAssignRequest, StockLotListResponse, StockStateChange
from aims.services.authorization import AccessContext
from aims.services.receiving import AssignmentError, assign_lot, pending_lots

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stock-lots", tags=["stock"])


def _get_lot_or_404(repo: DataRepository, lot_id: str) -> StockLot:
    lot = repo.get(Collection.STOCK_LOTS, lot_id)
    if not lot:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stock lot not found",
        )
    return lot


async def _save_lot(repo: DataRepository, lot: StockLot) -> StockLot:
    try:
        return await repo.update(Collection.STOCK_LOTS, lot)
    except EntityNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stock lot not found",
        )


@router.get("", response_model=StockLotListResponse)
async def list_stock_lots(
    pool_id: str | None = Query(None, alias="poolId"),
    area_id: str | None = Query(None, alias="areaId"),
    stock_state: RAGState | None = Query(None, alias="stockState"),
    access: AccessContext = Depends(require_action(Action.VIEW_DASHBOARD)),
    repo: DataRepository = Depends(get_repository),
):
    """List stock lots, optionally filtered by owning pool, area or stock state."""
    lots = repo.get_stock_lots()

    # Apply filters
    if pool_id:
        lots = [lot for lot in lots if lot.mp_id == pool_id]
    if area_id:
        lots = [lot for lot in lots if lot.area_id == area_id]
    if stock_state:
        lots = [lot for lot in lots if lot.stock_state == stock_state]

    return StockLotListResponse(items=lots, total=len(lots))


@router.get("/inbound", response_model=StockLotListResponse)
async def list_inbound_lots(
    access: AccessContext = Depends(require_action(Action.VIEW_DASHBOARD)),
    repo: DataRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    """Lots still held by the receiving pool, waiting to be assigned."""
    lots = pending_lots(repo.get_stock_lots(), settings.RECEIVING_POOL_ID)
    return StockLotListResponse(items=lots, total=len(lots))


@router.get("/{lot_id}", response_model=StockLot)
async def get_stock_lot(
    lot_id: str,
    access: AccessContext = Depends(require_action(Action.VIEW_DASHBOARD)),
    repo: DataRepository = Depends(get_repository),
):
    return _get_lot_or_404(repo, lot_id)


@router.post("/{lot_id}/assign", response_model=StockLot)
async def assign_stock_lot(
    lot_id: str,
    body: StockAssignRequest,
    access: AccessContext = Depends(get_access_context),
    repo: DataRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    """
    Assign a received lot to an owner pool and storage area.

    Requires ALLOCATE_STOCK for the lot as it will be after assignment,
    so pool/area constraints on the grant describe where the user may
    put stock away.
    """
    # Without any ALLOCATE_STOCK grant there is nothing to evaluate
    if not access.holds(Action.ALLOCATE_STOCK):
        ensure_can(access, Action.ALLOCATE_STOCK)

    lot = _get_lot_or_404(repo, lot_id)
    if lot.mp_id != settings.RECEIVING_POOL_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Stock lot is not pending assignment",
        )

    pool = repo.get(Collection.POOLS, body.destination_pool_id)
    area = repo.get(Collection.AREAS, body.destination_area_id)
    if not pool or not area:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Destination pool or area not found",
        )

    try:
        assigned = assign_lot(lot, pool, area, settings.RECEIVING_AREA_ID)
    except AssignmentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    ensure_can(access, Action.ALLOCATE_STOCK, assigned)

    saved = await _save_lot(repo, assigned)
    logger.info("Lot %s assigned to %s/%s by %s", lot_id, pool.id, area.id, access.actor)
    return saved


@router.patch("/{lot_id}/state", response_model=StockLot)
async def change_stock_state(
    lot_id: str,
    body: StockStateChange,
    access: AccessContext = Depends(get_access_context),
    repo: DataRepository = Depends(get_repository),
):
    """Change RAG states of a lot (requires CHANGE_STOCK_STATE on the lot as it is now)."""
    lot = _get_lot_or_404(repo, lot_id)
    ensure_can(access, Action.CHANGE_STOCK_STATE, lot)

    updated = lot.model_copy(update=body.model_dump(exclude_none=True))
    saved = await _save_lot(repo, updated)
    logger.info("Lot %s state changed by %s", lot_id, access.actor)
    return saved
