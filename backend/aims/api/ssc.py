"""Stock Selection Criteria endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from aims.core.deps import get_repository, require_action
from aims.db.repository import Collection, DataRepository, EntityNotFoundError
from aims.models.role import Action
from aims.models.stock import StockLot, StockSelectionCriteria
from aims.schemas.ssc import SSCCreate
from aims.services.authorization import AccessContext
from aims.services.constraints import lots_matching

router = APIRouter(prefix="/ssc", tags=["ssc"])


def _check_references(repo: DataRepository, body: SSCCreate) -> None:
    if not repo.get(Collection.POOLS, body.pool_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown pool '{body.pool_id}'",
        )
    if not repo.get(Collection.AREAS, body.area_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown area '{body.area_id}'",
        )


def _get_or_404(repo: DataRepository, ssc_id: str) -> StockSelectionCriteria:
    ssc = repo.get(Collection.SSC, ssc_id)
    if not ssc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stock selection criteria not found",
        )
    return ssc


@router.get("", response_model=list[StockSelectionCriteria])
async def list_ssc(
    access: AccessContext = Depends(require_action(Action.VIEW_SSC)),
    repo: DataRepository = Depends(get_repository),
):
    return repo.get_stock_selection_criteria()


@router.get("/{ssc_id}", response_model=StockSelectionCriteria)
async def get_ssc(
    ssc_id: str,
    access: AccessContext = Depends(require_action(Action.VIEW_SSC)),
    repo: DataRepository = Depends(get_repository),
):
    return _get_or_404(repo, ssc_id)


@router.get("/{ssc_id}/lots", response_model=list[StockLot])
async def get_ssc_lots(
    ssc_id: str,
    access: AccessContext = Depends(require_action(Action.VIEW_SSC)),
    repo: DataRepository = Depends(get_repository),
):
    """Stock lots currently selected by this criteria (pool, area and stock state)."""
    ssc = _get_or_404(repo, ssc_id)
    return lots_matching(ssc, repo.get_stock_lots())


@router.post("", response_model=StockSelectionCriteria, status_code=status.HTTP_201_CREATED)
async def create_ssc(
    body: SSCCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_SSC)),
    repo: DataRepository = Depends(get_repository),
):
    _check_references(repo, body)
    return await repo.create(Collection.SSC, body)


@router.put("/{ssc_id}", response_model=StockSelectionCriteria)
async def replace_ssc(
    ssc_id: str,
    body: SSCCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_SSC)),
    repo: DataRepository = Depends(get_repository),
):
    _check_references(repo, body)
    try:
        return await repo.update(
            Collection.SSC, StockSelectionCriteria(id=ssc_id, **body.model_dump())
        )
    except EntityNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stock selection criteria not found",
        )


@router.delete("/{ssc_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ssc(
    ssc_id: str,
    access: AccessContext = Depends(require_action(Action.MANAGE_SSC)),
    repo: DataRepository = Depends(get_repository),
):
    """Delete an SSC. Grants still naming it simply stop matching through it."""
    try:
        await repo.delete(Collection.SSC, ssc_id)
    except EntityNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stock selection criteria not found",
        )
