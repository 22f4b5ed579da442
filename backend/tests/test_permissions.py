"""Unit tests for permission grant administration and SSC endpoints."""

import pytest
from fastapi import HTTPException

from aims.db.repository import Collection
from aims.models import Action, Constraints, RAGState
from aims.schemas.permission import GrantCreate
from aims.schemas.ssc import SSCCreate


# ── Grants ────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_grant_unknown_role(repository, manager_access):
    from aims.api.permissions import create_grant

    body = GrantCreate(role_id="role-missing", action=Action.VIEW_SSC)
    with pytest.raises(HTTPException) as exc_info:
        await create_grant(body, manager_access, repository)
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_grant_lifecycle_by_id(repository, manager_access, operator_access):
    from aims.api.permissions import create_grant, delete_grant, replace_grant

    grant = await create_grant(
        GrantCreate(role_id="role-operator", action=Action.MANAGE_AREAS), manager_access, repository
    )
    assert grant.id.startswith("grant-")

    # Decisions use the repository snapshot of the request
    from conftest import access_for
    assert access_for(repository, "user-operator").can(Action.MANAGE_AREAS)
    assert not operator_access.can(Action.MANAGE_AREAS)

    replaced = await replace_grant(
        grant.id,
        GrantCreate(role_id="role-operator", action=Action.MANAGE_AREAS,
                    constraints=Constraints(allowed_area_ids=["area-2"])),
        manager_access,
        repository,
    )
    assert replaced.id == grant.id
    assert not access_for(repository, "user-operator").can(Action.MANAGE_AREAS)

    await delete_grant(grant.id, manager_access, repository)
    assert repository.get(Collection.PERMISSIONS, grant.id) is None


@pytest.mark.asyncio
async def test_replace_unknown_grant(repository, manager_access):
    from aims.api.permissions import replace_grant

    with pytest.raises(HTTPException) as exc_info:
        await replace_grant(
            "grant-missing", GrantCreate(role_id="role-manager", action=Action.VIEW_SSC),
            manager_access, repository,
        )
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_list_grants_by_role(repository, manager_access):
    from aims.api.permissions import list_grants

    grants = await list_grants("role-operator", manager_access, repository)
    assert len(grants) == 4
    assert all(g.role_id == "role-operator" for g in grants)


# ── SSC ───────────────────────────────────────────

@pytest.mark.asyncio
async def test_ssc_requires_existing_pool_and_area(repository, manager_access):
    from aims.api.ssc import create_ssc

    body = SSCCreate(pool_id="pool-main", area_id="area-missing", status=RAGState.GREEN)
    with pytest.raises(HTTPException) as exc_info:
        await create_ssc(body, manager_access, repository)
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_ssc_lots(repository, manager_access):
    from aims.api.ssc import get_ssc_lots

    lots = await get_ssc_lots("ssc-1", manager_access, repository)
    assert [lot.id for lot in lots] == ["lot-amber"]


@pytest.mark.asyncio
async def test_deleting_ssc_revokes_ssc_constrained_access(repository, manager_access):
    from aims.api.ssc import delete_ssc
    from conftest import access_for

    lot = repository.get(Collection.STOCK_LOTS, "lot-amber")
    assert access_for(repository, "user-operator").can(Action.CHANGE_STOCK_STATE, lot)

    await delete_ssc("ssc-1", manager_access, repository)
    assert not access_for(repository, "user-operator").can(Action.CHANGE_STOCK_STATE, lot)


@pytest.mark.asyncio
async def test_ssc_over_http_includes_class_list(client):
    resp = await client.get("/ssc/ssc-1", headers={"X-User-Id": "user-manager"})
    assert resp.status_code == 200
    assert resp.json()["classList"] == ["A", "B"]

    resp = await client.get("/ssc", headers={"X-User-Id": "user-operator"})
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_grant_with_empty_constraints_is_not_outright(client, repository):
    from conftest import access_for

    resp = await client.post(
        "/permissions",
        json={"roleId": "role-operator", "action": "MANAGE_AREAS", "constraints": {}},
        headers={"X-User-Id": "user-manager"},
    )
    assert resp.status_code == 201
    assert resp.json()["constraints"] == {
        "allowedPoolIds": None, "allowedAreaIds": None, "matchingSscIds": None,
    }

    resp = await client.post(
        "/areas", json={"locationId": "loc-1", "name": "Cage"},
        headers={"X-User-Id": "user-operator"},
    )
    assert resp.status_code == 403
    assert not access_for(repository, "user-operator").can(Action.MANAGE_AREAS)
