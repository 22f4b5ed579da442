"""Location management endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from aims.core.deps import get_repository, require_action
from aims.db.repository import Collection, DataRepository, EntityNotFoundError
from aims.models.location import Location
from aims.models.role import Action
from aims.schemas.location import LocationCreate
from aims.services.authorization import AccessContext
from aims.services.hierarchy import build_tree, would_cycle

router = APIRouter(prefix="/locations", tags=["locations"])


def _check_parent(repo: DataRepository, body: LocationCreate, location_id: str | None = None) -> None:
    if not body.is_nested:
        return
    if not body.parent_id or body.parent_id == location_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A nested location needs a parent location other than itself",
        )
    if not repo.get(Collection.LOCATIONS, body.parent_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Parent location not found",
        )
    if would_cycle(repo.get_locations(), location_id, body.parent_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A location cannot be nested under its own descendant",
        )


@router.get("", response_model=list[Location])
async def list_locations(
    access: AccessContext = Depends(require_action(Action.VIEW_LOCATIONS)),
    repo: DataRepository = Depends(get_repository),
):
    return repo.get_locations()


@router.get("/tree")
async def location_tree(
    access: AccessContext = Depends(require_action(Action.VIEW_LOCATIONS)),
    repo: DataRepository = Depends(get_repository),
) -> list[dict]:
    return build_tree(repo.get_locations())


@router.get("/{location_id}", response_model=Location)
async def get_location(
    location_id: str,
    access: AccessContext = Depends(require_action(Action.VIEW_LOCATIONS)),
    repo: DataRepository = Depends(get_repository),
):
    location = repo.get(Collection.LOCATIONS, location_id)
    if not location:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return location


@router.post("", response_model=Location, status_code=status.HTTP_201_CREATED)
async def create_location(
    body: LocationCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_LOCATIONS)),
    repo: DataRepository = Depends(get_repository),
):
    _check_parent(repo, body)
    return await repo.create(Collection.LOCATIONS, body)


@router.put("/{location_id}", response_model=Location)
async def replace_location(
    location_id: str,
    body: LocationCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_LOCATIONS)),
    repo: DataRepository = Depends(get_repository),
):
    _check_parent(repo, body, location_id)
    try:
        return await repo.update(
            Collection.LOCATIONS, Location(id=location_id, **body.model_dump())
        )
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(
    location_id: str,
    access: AccessContext = Depends(require_action(Action.MANAGE_LOCATIONS)),
    repo: DataRepository = Depends(get_repository),
):
    """Delete a location; nested locations under it become top-level."""
    try:
        await repo.delete(Collection.LOCATIONS, location_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
