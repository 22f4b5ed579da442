"""Dependency injection: repository access, current user, action enforcement."""

import logging

from fastapi import Depends, Header, HTTPException, Request, status

from aims.db.repository import Collection, DataRepository
from aims.models.role import Action
from aims.models.stock import StockLot
from aims.models.user import User
from aims.services.authorization import AccessContext

logger = logging.getLogger(__name__)


def get_repository(request: Request) -> DataRepository:
    return request.app.state.repository


def get_current_user(
    x_user_id: str | None = Header(None),
    repo: DataRepository = Depends(get_repository),
) -> User | None:
    """Resolve the user the application shell has identified, if any."""
    if not x_user_id:
        return None
    return repo.get(Collection.USERS, x_user_id)


def get_access_context(
    user: User | None = Depends(get_current_user),
    repo: DataRepository = Depends(get_repository),
) -> AccessContext:
    return AccessContext.from_snapshot(
        user, repo.get_permissions(), repo.get_stock_selection_criteria()
    )


def ensure_can(
    access: AccessContext, action: Action, stock_lot: StockLot | None = None
) -> None:
    """Raise 403 unless the action is allowed (against the lot, if given)."""
    if not access.can(action, stock_lot):
        logger.info(
            "Denied %s to %s%s",
            action.value,
            access.actor,
            f" on lot {stock_lot.id}" if stock_lot else "",
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not allowed: {action.value}",
        )


def require_action(action: Action):
    """Dependency factory: the current user must be allowed ``action`` outright."""

    async def checker(access: AccessContext = Depends(get_access_context)) -> AccessContext:
        ensure_can(access, action)
        return access

    return checker
