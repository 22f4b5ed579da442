"""Permission grant administration. Grants are addressed by their own id."""

from fastapi import APIRouter, Depends, HTTPException, status

from aims.core.deps import get_repository, require_action
from aims.db.repository import Collection, DataRepository, EntityNotFoundError
from aims.models.role import Action, PermissionGrant
from aims.schemas.permission import GrantCreate
from aims.services.authorization import AccessContext

router = APIRouter(prefix="/permissions", tags=["permissions"])


def _check_role(repo: DataRepository, role_id: str) -> None:
    if not repo.get(Collection.ROLES, role_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown role '{role_id}'",
        )


@router.get("", response_model=list[PermissionGrant])
async def list_grants(
    role_id: str | None = None,
    access: AccessContext = Depends(require_action(Action.VIEW_PERMISSIONS)),
    repo: DataRepository = Depends(get_repository),
):
    """List all grants, optionally only those of one role."""
    grants = repo.get_permissions()
    if role_id:
        grants = [g for g in grants if g.role_id == role_id]
    return grants


@router.get("/{grant_id}", response_model=PermissionGrant)
async def get_grant(
    grant_id: str,
    access: AccessContext = Depends(require_action(Action.VIEW_PERMISSIONS)),
    repo: DataRepository = Depends(get_repository),
):
    grant = repo.get(Collection.PERMISSIONS, grant_id)
    if not grant:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Grant not found")
    return grant


@router.post("", response_model=PermissionGrant, status_code=status.HTTP_201_CREATED)
async def create_grant(
    body: GrantCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_PERMISSIONS)),
    repo: DataRepository = Depends(get_repository),
):
    """Create a grant. SSC, pool and area ids in constraints are not checked."""
    _check_role(repo, body.role_id)
    return await repo.create(Collection.PERMISSIONS, body)


@router.put("/{grant_id}", response_model=PermissionGrant)
async def replace_grant(
    grant_id: str,
    body: GrantCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_PERMISSIONS)),
    repo: DataRepository = Depends(get_repository),
):
    _check_role(repo, body.role_id)
    try:
        return await repo.update(
            Collection.PERMISSIONS, PermissionGrant(id=grant_id, **body.model_dump())
        )
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Grant not found")


@router.delete("/{grant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_grant(
    grant_id: str,
    access: AccessContext = Depends(require_action(Action.MANAGE_PERMISSIONS)),
    repo: DataRepository = Depends(get_repository),
):
    try:
        await repo.delete(Collection.PERMISSIONS, grant_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Grant not found")
