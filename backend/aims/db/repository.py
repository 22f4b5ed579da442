"""In-memory reference data repository backed by per-entity JSON documents.

Each collection is one JSON array loaded in full at startup. Reads are
synchronous and return deep copies; writes are async, serialized by a
lock, and last-write-wins.
"""

import asyncio
import enum
import json
import logging
import uuid
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from aims.models.location import Area, Location
from aims.models.pool import Pool
from aims.models.role import PermissionGrant, Role
from aims.models.stock import StockLot, StockSelectionCriteria
from aims.models.user import User

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


class Collection(str, enum.Enum):
    USERS = "users"
    ROLES = "roles"
    PERMISSIONS = "permissions"
    POOLS = "pools"
    LOCATIONS = "locations"
    AREAS = "areas"
    SSC = "stockSelectionCriteria"
    STOCK_LOTS = "stockLots"


# collection -> (entity model, id prefix for generated ids)
ENTITY_TYPES: dict[Collection, tuple[type[BaseModel], str]] = {
    Collection.USERS: (User, "user"),
    Collection.ROLES: (Role, "role"),
    Collection.PERMISSIONS: (PermissionGrant, "grant"),
    Collection.POOLS: (Pool, "pool"),
    Collection.LOCATIONS: (Location, "location"),
    Collection.AREAS: (Area, "area"),
    Collection.SSC: (StockSelectionCriteria, "ssc"),
    Collection.STOCK_LOTS: (StockLot, "lot"),
}


class EntityNotFoundError(LookupError):
    def __init__(self, collection: Collection, entity_id: str):
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"{collection.value}: no item with id '{entity_id}'")


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def _load_document(path: Path, model: type[EntityT]) -> list[EntityT]:
    """Read one JSON array; any failure to read the document yields []."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.error("Data document missing: %s", path)
        return []
    except (OSError, ValueError) as e:
        logger.error("Failed to read data document %s: %s", path, e)
        return []

    if not isinstance(raw, list):
        logger.error("Data document %s is not a JSON array", path)
        return []

    items: list[EntityT] = []
    for index, record in enumerate(raw):
        try:
            items.append(model.model_validate(record))
        except ValidationError as e:
            logger.warning(
                "Skipping invalid record #%d in %s: %s", index, path.name, e.errors()[0]["msg"]
            )
    return items


class DataRepository:
    def __init__(self, data: dict[Collection, list[BaseModel]] | None = None):
        data = data or {}
        self._stores: dict[Collection, list[BaseModel]] = {
            c: list(data.get(c, [])) for c in Collection
        }
        self._lock = asyncio.Lock()

    @classmethod
    def load(cls, data_dir: str | Path) -> "DataRepository":
        data_dir = Path(data_dir)
        data: dict[Collection, list[BaseModel]] = {}
        for collection, (model, _) in ENTITY_TYPES.items():
            data[collection] = _load_document(data_dir / f"{collection.value}.json", model)
        repo = cls(data)
        logger.info(
            "Reference data loaded from %s: %s",
            data_dir,
            ", ".join(f"{c.value}={len(items)}" for c, items in data.items()),
        )
        return repo

    # ── Reads ──────────────────────────────────────

    def all(self, collection: Collection) -> list:
        return [item.model_copy(deep=True) for item in self._stores[collection]]

    def get(self, collection: Collection, entity_id: str):
        for item in self._stores[collection]:
            if item.id == entity_id:
                return item.model_copy(deep=True)
        return None

    def get_users(self) -> list[User]:
        return self.all(Collection.USERS)

    def get_roles(self) -> list[Role]:
        return self.all(Collection.ROLES)

    def get_permissions(self) -> list[PermissionGrant]:
        return self.all(Collection.PERMISSIONS)

    def get_pools(self) -> list[Pool]:
        return self.all(Collection.POOLS)

    def get_locations(self) -> list[Location]:
        return self.all(Collection.LOCATIONS)

    def get_areas(self) -> list[Area]:
        return self.all(Collection.AREAS)

    def get_stock_selection_criteria(self) -> list[StockSelectionCriteria]:
        return self.all(Collection.SSC)

    def get_stock_lots(self) -> list[StockLot]:
        return self.all(Collection.STOCK_LOTS)

    # ── Writes ─────────────────────────────────────

    async def create(self, collection: Collection, payload: BaseModel):
        """Store a new entity built from ``payload`` under a generated id."""
        model, prefix = ENTITY_TYPES[collection]
        item = model.model_validate({**payload.model_dump(), "id": _new_id(prefix)})
        async with self._lock:
            self._stores[collection].append(item)
        logger.info("Created %s %s", collection.value, item.id)
        return item.model_copy(deep=True)

    async def update(self, collection: Collection, item: BaseModel):
        async with self._lock:
            store = self._stores[collection]
            for index, existing in enumerate(store):
                if existing.id == item.id:
                    store[index] = item.model_copy(deep=True)
                    break
            else:
                raise EntityNotFoundError(collection, item.id)
        logger.info("Updated %s %s", collection.value, item.id)
        return item.model_copy(deep=True)

    async def delete(self, collection: Collection, entity_id: str) -> None:
        """Remove an entity; children pointing at it become roots."""
        async with self._lock:
            store = self._stores[collection]
            for index, existing in enumerate(store):
                if existing.id == entity_id:
                    del store[index]
                    break
            else:
                raise EntityNotFoundError(collection, entity_id)
            for item in store:
                if getattr(item, "parent_id", None) == entity_id:
                    item.parent_id = None
                    item.is_nested = False
        logger.info("Deleted %s %s", collection.value, entity_id)

    def seed_defaults(self) -> bool:
        """Install the default roles and grant matrix into an empty RBAC store."""
        from aims.db.seed_rbac import default_grants, default_roles

        if self._stores[Collection.ROLES] or self._stores[Collection.PERMISSIONS]:
            return False
        self._stores[Collection.ROLES] = default_roles()
        self._stores[Collection.PERMISSIONS] = default_grants()
        logger.info(
            "Seeded %d roles and %d grants",
            len(self._stores[Collection.ROLES]),
            len(self._stores[Collection.PERMISSIONS]),
        )
        return True
