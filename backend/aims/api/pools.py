"""Pool management endpoints with action enforcement."""

from fastapi import APIRouter, Depends, HTTPException, status

from aims.core.deps import get_repository, require_action
from aims.db.repository import Collection, DataRepository, EntityNotFoundError
from aims.models.pool import POOL_SUBTYPE_MAP, Pool
from aims.models.role import Action
from aims.schemas.pool import PoolCreate, PoolNatureOption
from aims.services.authorization import AccessContext
from aims.services.hierarchy import build_tree, would_cycle

router = APIRouter(prefix="/pools", tags=["pools"])


def _validate_pool(repo: DataRepository, body: PoolCreate, pool_id: str | None = None) -> None:
    """Codes are unique; a nested pool needs an existing parent outside its own subtree."""
    for other in repo.get_pools():
        if other.code == body.code and other.id != pool_id:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Pool code '{body.code}' already exists",
            )
    if body.is_nested:
        if not body.parent_id or body.parent_id == pool_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="A nested pool needs a parent pool other than itself",
            )
        if not repo.get(Collection.POOLS, body.parent_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Parent pool not found",
            )
        if would_cycle(repo.get_pools(), pool_id, body.parent_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="A pool cannot be nested under its own descendant",
            )


@router.get("", response_model=list[Pool])
async def list_pools(
    access: AccessContext = Depends(require_action(Action.VIEW_POOLS)),
    repo: DataRepository = Depends(get_repository),
):
    return repo.get_pools()


@router.get("/tree")
async def pool_tree(
    access: AccessContext = Depends(require_action(Action.VIEW_POOLS)),
    repo: DataRepository = Depends(get_repository),
) -> list[dict]:
    """Pools nested under their parents."""
    return build_tree(repo.get_pools())


@router.get("/natures", response_model=list[PoolNatureOption])
async def pool_natures(
    access: AccessContext = Depends(require_action(Action.VIEW_POOLS)),
):
    """Each pool nature with the subtypes it allows."""
    return [
        PoolNatureOption(nature=nature, subtypes=subtypes)
        for nature, subtypes in POOL_SUBTYPE_MAP.items()
    ]


@router.get("/{pool_id}", response_model=Pool)
async def get_pool(
    pool_id: str,
    access: AccessContext = Depends(require_action(Action.VIEW_POOLS)),
    repo: DataRepository = Depends(get_repository),
):
    pool = repo.get(Collection.POOLS, pool_id)
    if not pool:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pool not found")
    return pool


@router.post("", response_model=Pool, status_code=status.HTTP_201_CREATED)
async def create_pool(
    body: PoolCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_POOLS)),
    repo: DataRepository = Depends(get_repository),
):
    _validate_pool(repo, body)
    return await repo.create(Collection.POOLS, body)


@router.put("/{pool_id}", response_model=Pool)
async def replace_pool(
    pool_id: str,
    body: PoolCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_POOLS)),
    repo: DataRepository = Depends(get_repository),
):
    if not repo.get(Collection.POOLS, pool_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pool not found")
    _validate_pool(repo, body, pool_id)
    try:
        return await repo.update(Collection.POOLS, Pool(id=pool_id, **body.model_dump()))
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pool not found")


@router.delete("/{pool_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pool(
    pool_id: str,
    access: AccessContext = Depends(require_action(Action.MANAGE_POOLS)),
    repo: DataRepository = Depends(get_repository),
):
    """Delete a pool; its child pools become top-level pools."""
    try:
        await repo.delete(Collection.POOLS, pool_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pool not found")
