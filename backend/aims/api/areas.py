"""Area (zone) management endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from aims.core.deps import get_repository, require_action
from aims.db.repository import Collection, DataRepository, EntityNotFoundError
from aims.models.location import Area
from aims.models.role import Action
from aims.schemas.location import AreaCreate
from aims.services.authorization import AccessContext

router = APIRouter(prefix="/areas", tags=["areas"])


def _check_location(repo: DataRepository, location_id: str) -> None:
    if not repo.get(Collection.LOCATIONS, location_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown location '{location_id}'",
        )


@router.get("", response_model=list[Area])
async def list_areas(
    location_id: str | None = None,
    access: AccessContext = Depends(require_action(Action.VIEW_AREAS)),
    repo: DataRepository = Depends(get_repository),
):
    """List areas, optionally only those inside one location."""
    areas = repo.get_areas()
    if location_id:
        areas = [a for a in areas if a.location_id == location_id]
    return areas


@router.get("/{area_id}", response_model=Area)
async def get_area(
    area_id: str,
    access: AccessContext = Depends(require_action(Action.VIEW_AREAS)),
    repo: DataRepository = Depends(get_repository),
):
    area = repo.get(Collection.AREAS, area_id)
    if not area:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Area not found")
    return area


@router.post("", response_model=Area, status_code=status.HTTP_201_CREATED)
async def create_area(
    body: AreaCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_AREAS)),
    repo: DataRepository = Depends(get_repository),
):
    _check_location(repo, body.location_id)
    return await repo.create(Collection.AREAS, body)


@router.put("/{area_id}", response_model=Area)
async def replace_area(
    area_id: str,
    body: AreaCreate,
    access: AccessContext = Depends(require_action(Action.MANAGE_AREAS)),
    repo: DataRepository = Depends(get_repository),
):
    _check_location(repo, body.location_id)
    try:
        return await repo.update(Collection.AREAS, Area(id=area_id, **body.model_dump()))
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Area not found")


@router.delete("/{area_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_area(
    area_id: str,
    access: AccessContext = Depends(require_action(Action.MANAGE_AREAS)),
    repo: DataRepository = Depends(get_repository),
):
    try:
        await repo.delete(Collection.AREAS, area_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Area not found")
