"""Authorization engine.

Decides whether a user may perform an action, optionally against a
specific stock lot. Decisions are computed from the snapshot passed in
on every call and are never cached. Anything missing or ambiguous
resolves to deny; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from aims.models.role import Action, PermissionGrant
from aims.models.stock import StockLot, StockSelectionCriteria
from aims.models.user import User
from aims.services.constraints import matches


def grants_for_user(
    user: User | None, grants: Iterable[PermissionGrant]
) -> list[PermissionGrant]:
    """All grants attached to any of the user's roles."""
    if user is None:
        return []
    role_ids = set(user.role_ids)
    return [g for g in grants if g.role_id in role_ids]


def can(
    user: User | None,
    action: Action,
    grants: Iterable[PermissionGrant],
    ssc_index: Mapping[str, StockSelectionCriteria],
    stock_lot: StockLot | None = None,
) -> bool:
    if user is None:
        return False

    relevant = [g for g in grants_for_user(user, grants) if g.action == action]
    if not relevant:
        return False

    # An unconstrained grant wins over any constrained ones
    if any(g.is_unconstrained for g in relevant):
        return True

    # Constrained grants cannot be decided without a lot
    if stock_lot is None:
        return False

    return any(matches(stock_lot, g.constraints, ssc_index) for g in relevant)


@dataclass
class AccessContext:
    """Who is asking, bound to the reference data snapshot of one request."""

    user: User | None = None
    all_grants: list[PermissionGrant] = field(default_factory=list)
    ssc_index: dict[str, StockSelectionCriteria] = field(default_factory=dict)

    @classmethod
    def from_snapshot(
        cls,
        user: User | None,
        grants: Iterable[PermissionGrant],
        sscs: Iterable[StockSelectionCriteria],
    ) -> AccessContext:
        return cls(
            user=user,
            all_grants=list(grants),
            ssc_index={ssc.id: ssc for ssc in sscs},
        )

    @property
    def grants(self) -> list[PermissionGrant]:
        """The current user's own grants."""
        return grants_for_user(self.user, self.all_grants)

    def holds(self, action: Action) -> bool:
        """Whether any of the user's grants names ``action``, constrained or not."""
        return any(g.action == action for g in self.grants)

    def can(self, action: Action, stock_lot: StockLot | None = None) -> bool:
        return can(self.user, action, self.all_grants, self.ssc_index, stock_lot)

    @property
    def actor(self) -> str:
        """Identity string for logging."""
        return self.user.id if self.user else "anonymous"
