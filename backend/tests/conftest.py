"""Shared test fixtures: a small reference data snapshot and an HTTP client."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from aims.core.deps import get_repository
from aims.db.repository import Collection, DataRepository
from aims.main import app
from aims.models import (
    Action,
    Area,
    Constraints,
    Location,
    PermissionGrant,
    Pool,
    RAGState,
    Role,
    StockLot,
    StockSelectionCriteria,
    User,
)
from aims.services.authorization import AccessContext


def make_lot(lot_id="lot-1", mp="pool-main", sp=None, cp=None, quantity=10, **kwargs) -> StockLot:
    """Stock lot with sp/cp defaulting to the owning pool."""
    fields = dict(
        id=lot_id,
        sku="item-1",
        mp_id=mp,
        sp_id=sp or mp,
        cp_id=cp or mp,
        quantity=quantity,
        location_id="loc-1",
        area_id="area-2",
        stock_state=RAGState.GREEN,
        quality_state=RAGState.GREEN,
        supply_state=RAGState.GREEN,
    )
    fields.update(kwargs)
    return StockLot(**fields)


@pytest.fixture
def users() -> list[User]:
    return [
        User(id="user-manager", name="Mia Manager", email="manager@example.com", role_ids=["role-manager"]),
        User(id="user-operator", name="Omar Operator", email="operator@example.com", role_ids=["role-operator"]),
        User(id="user-nobody", name="No Roles", email="nobody@example.com", role_ids=[]),
    ]


@pytest.fixture
def grants() -> list[PermissionGrant]:
    manager = [PermissionGrant(role_id="role-manager", action=a) for a in Action]
    operator = [
        PermissionGrant(role_id="role-operator", action=Action.VIEW_DASHBOARD),
        PermissionGrant(role_id="role-operator", action=Action.VIEW_POOLS),
        PermissionGrant(
            role_id="role-operator",
            action=Action.ALLOCATE_STOCK,
            constraints=Constraints(allowed_pool_ids=["pool-main"]),
        ),
        PermissionGrant(
            role_id="role-operator",
            action=Action.CHANGE_STOCK_STATE,
            constraints=Constraints(matching_ssc_ids=["ssc-1"]),
        ),
    ]
    return manager + operator


@pytest.fixture
def sscs() -> list[StockSelectionCriteria]:
    return [
        StockSelectionCriteria(id="ssc-1", pool_id="pool-main", area_id="area-2", status=RAGState.AMBER, classes="A, B"),
        StockSelectionCriteria(id="ssc-2", pool_id="pool-assets", area_id="area-3", status=RAGState.RED),
    ]


@pytest.fixture
def repository(users, grants, sscs) -> DataRepository:
    return DataRepository({
        Collection.USERS: users,
        Collection.ROLES: [
            Role(id="role-manager", name="Manager"),
            Role(id="role-operator", name="Operator"),
        ],
        Collection.PERMISSIONS: grants,
        Collection.POOLS: [
            Pool(id="pool-main", code="MAIN", name="Main Stock", nature="Inventory", subtype="Stock in Trade"),
            Pool(id="pool-assets", code="AST", name="Assets", nature="Assets", subtype="Fixed Assets"),
            Pool(id="pool-receiving", code="RCV", name="Receiving", nature="Control Account", subtype="Purchase"),
            Pool(id="pool-vendor", code="VND", name="Vendor", nature="3rd Party", subtype="N/A"),
        ],
        Collection.LOCATIONS: [
            Location(id="loc-1", name="Main Warehouse"),
            Location(id="loc-2", name="Overflow"),
        ],
        Collection.AREAS: [
            Area(id="area-1", location_id="loc-1", name="Receiving Dock"),
            Area(id="area-2", location_id="loc-1", name="Aisle 2"),
            Area(id="area-3", location_id="loc-2", name="Yard"),
        ],
        Collection.SSC: sscs,
        Collection.STOCK_LOTS: [
            make_lot("lot-own", quantity=10),
            make_lot("lot-i3ps", sp="pool-vendor", quantity=5),
            make_lot("lot-pending", mp="pool-receiving", sp="pool-vendor", area_id="area-1",
                     stock_state=RAGState.AMBER, supply_state=RAGState.AMBER, quantity=7),
            make_lot("lot-amber", stock_state=RAGState.AMBER, quantity=3),
        ],
    })


def access_for(repository: DataRepository, user_id: str | None) -> AccessContext:
    user = repository.get(Collection.USERS, user_id) if user_id else None
    return AccessContext.from_snapshot(
        user, repository.get_permissions(), repository.get_stock_selection_criteria()
    )


@pytest.fixture
def manager_access(repository) -> AccessContext:
    return access_for(repository, "user-manager")


@pytest.fixture
def operator_access(repository) -> AccessContext:
    return access_for(repository, "user-operator")


@pytest_asyncio.fixture
async def client(repository) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client over the app with the test repository injected."""
    app.dependency_overrides[get_repository] = lambda: repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
