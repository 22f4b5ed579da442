"""Read-only user and role listings. Users and roles are maintained outside AIMS."""

from fastapi import APIRouter, Depends

from aims.core.deps import get_repository, require_action
from aims.db.repository import DataRepository
from aims.models.role import Action, Role
from aims.models.user import User
from aims.services.authorization import AccessContext

router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[User])
async def list_users(
    access: AccessContext = Depends(require_action(Action.VIEW_PERMISSIONS)),
    repo: DataRepository = Depends(get_repository),
):
    return repo.get_users()


@router.get("/roles", response_model=list[Role])
async def list_roles(
    access: AccessContext = Depends(require_action(Action.VIEW_PERMISSIONS)),
    repo: DataRepository = Depends(get_repository),
):
    return repo.get_roles()
