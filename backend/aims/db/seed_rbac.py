"""Seed default roles and permission grants.

RBAC Matrix:
┌─────────────────────┬─────────┬──────────┬────────┐
│ Action              │ Manager │ Operator │ Viewer │
├─────────────────────┼─────────┼──────────┼────────┤
│ VIEW_DASHBOARD      │   ✓     │   ✓      │   ✓    │
│ VIEW_POOLS          │   ✓     │   ✓      │   ✓    │
│ MANAGE_POOLS        │   ✓     │          │        │
│ VIEW_LOCATIONS      │   ✓     │   ✓      │   ✓    │
│ MANAGE_LOCATIONS    │   ✓     │          │        │
│ VIEW_AREAS          │   ✓     │   ✓      │   ✓    │
│ MANAGE_AREAS        │   ✓     │          │        │
│ VIEW_SSC            │   ✓     │   ✓      │        │
│ MANAGE_SSC          │   ✓     │          │        │
│ VIEW_PERMISSIONS    │   ✓     │   ✓      │   ✓    │
│ MANAGE_PERMISSIONS  │   ✓     │          │        │
│ ALLOCATE_STOCK      │   ✓     │   ✓*     │        │
│ CHANGE_STOCK_STATE  │   ✓     │   ✓*     │        │
└─────────────────────┴─────────┴──────────┴────────┘
* constrained to the main pool (allocation) and the receiving and
  main storage areas (state changes)
"""

from aims.models.role import Action, Constraints, PermissionGrant, Role

MANAGER = "role-manager"
OPERATOR = "role-operator"
VIEWER = "role-viewer"

ROLES: list[tuple[str, str, str]] = [
    (MANAGER, "Manager", "Full administrative access"),
    (OPERATOR, "Warehouse Operator", "Day-to-day stock handling"),
    (VIEWER, "Viewer", "Read-only access"),
]

_VIEWER_ACTIONS: list[Action] = [
    Action.VIEW_DASHBOARD,
    Action.VIEW_POOLS,
    Action.VIEW_LOCATIONS,
    Action.VIEW_AREAS,
    Action.VIEW_PERMISSIONS,
]

ROLE_ACTIONS: dict[str, list[Action]] = {
    MANAGER: list(Action),  # All actions
    OPERATOR: [*_VIEWER_ACTIONS, Action.VIEW_SSC],
    VIEWER: _VIEWER_ACTIONS,
}

ROLE_CONSTRAINED_ACTIONS: dict[str, list[tuple[Action, Constraints]]] = {
    OPERATOR: [
        (Action.ALLOCATE_STOCK, Constraints(allowed_pool_ids=["pool-main"])),
        (Action.CHANGE_STOCK_STATE, Constraints(allowed_area_ids=["area-1", "area-2"])),
    ],
}


def default_roles() -> list[Role]:
    return [Role(id=rid, name=name, description=desc) for rid, name, desc in ROLES]


def default_grants() -> list[PermissionGrant]:
    grants = [
        PermissionGrant(role_id=role_id, action=action)
        for role_id, actions in ROLE_ACTIONS.items()
        for action in actions
    ]
    grants.extend(
        PermissionGrant(role_id=role_id, action=action, constraints=constraints)
        for role_id, constrained in ROLE_CONSTRAINED_ACTIONS.items()
        for action, constraints in constrained
    )
    return grants
