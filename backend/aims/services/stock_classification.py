"""Stock ownership/custody classification for the dashboard.

Every lot carries three pool references: mp (owner), sp (source) and
cp (custody). Each metric is an independent filter over those
references, summing quantity. "Total Current Stock" (mp is mine) is
partitioned by My Owned Stock, I3PS In-hand, O3PS Owned and Chain
Consigned.
"""

from collections.abc import Callable, Collection, Iterable

from aims.models.stock import StockLot
from aims.schemas.stock import DerivedStockState

LotFilter = Callable[[StockLot, Callable[[str], bool]], bool]

# (label, description, filter) in display order
METRICS: list[tuple[str, str, LotFilter]] = [
    (
        "Total Stock-in-hand",
        "All stock physically in our custody (CP = Me)",
        lambda lot, mine: mine(lot.cp_id),
    ),
    (
        "Total Current Stock",
        "All stock we are tracking (MP = Me), incl. I3PS & O3PS",
        lambda lot, mine: mine(lot.mp_id),
    ),
    (
        "My Owned Stock (My Custody)",
        "Stock we own and hold (MP = SP = CP = Me)",
        lambda lot, mine: (
            mine(lot.mp_id) and lot.sp_id == lot.mp_id and lot.cp_id == lot.mp_id
        ),
    ),
    (
        "I3PS In-hand",
        "Others' stock we hold ((MP=CP=Me) <> SP)",
        lambda lot, mine: mine(lot.mp_id) and mine(lot.cp_id) and not mine(lot.sp_id),
    ),
    (
        "O3PS Owned",
        "Our stock held by others ((MP=SP=Me) <> CP)",
        lambda lot, mine: (
            mine(lot.mp_id) and lot.sp_id == lot.mp_id and not mine(lot.cp_id)
        ),
    ),
    (
        "Chain Consigned",
        "Our tracked stock, from others, held by others (MP=Me, SP<>Me, CP<>Me)",
        lambda lot, mine: not mine(lot.sp_id) and not mine(lot.cp_id) and mine(lot.mp_id),
    ),
]


def classify(
    lots: Iterable[StockLot], my_pools: Collection[str]
) -> list[DerivedStockState]:
    """Compute the six aggregates, in display order. Empty input gives zeros."""
    lots = list(lots)
    pool_set = frozenset(my_pools)

    def mine(pool_id: str) -> bool:
        return pool_id in pool_set

    return [
        DerivedStockState(
            label=label,
            value=sum(lot.quantity for lot in lots if lot_filter(lot, mine)),
            description=description,
        )
        for label, description, lot_filter in METRICS
    ]
