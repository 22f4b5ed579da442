"""Current user and authorization query endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from aims.core.deps import get_access_context, get_repository
from aims.db.repository import Collection, DataRepository
from aims.models.role import Action, PermissionGrant
from aims.schemas.auth import CanResponse, CurrentUser
from aims.services.authorization import AccessContext

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=CurrentUser)
async def get_me(
    access: AccessContext = Depends(get_access_context),
    repo: DataRepository = Depends(get_repository),
):
    """Return the current user with their roles and the grants attached to them."""
    if access.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No current user",
        )
    user = access.user
    return CurrentUser(
        id=user.id,
        name=user.name,
        email=user.email,
        role_ids=user.role_ids,
        roles=[role for role in repo.get_roles() if role.id in user.role_ids],
        grants=access.grants,
    )


@router.get("/can", response_model=CanResponse)
async def check_action(
    action: Action,
    stock_lot_id: str | None = Query(None, alias="stockLotId"),
    access: AccessContext = Depends(get_access_context),
    repo: DataRepository = Depends(get_repository),
):
    """Ask whether the current user may perform ``action``, optionally on one lot."""
    stock_lot = None
    if stock_lot_id is not None:
        stock_lot = repo.get(Collection.STOCK_LOTS, stock_lot_id)
        if not stock_lot:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Stock lot not found",
            )
    return CanResponse(
        action=action,
        stock_lot_id=stock_lot_id,
        allowed=access.can(action, stock_lot),
    )


@router.get("/permissions", response_model=list[PermissionGrant])
async def my_permissions(access: AccessContext = Depends(get_access_context)):
    """Grants held by the current user (empty when nobody is identified)."""
    return access.grants
