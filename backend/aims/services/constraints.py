"""Constraint evaluation: does a stock lot satisfy a grant's constraints?"""

from collections.abc import Iterable, Mapping

from aims.models.role import Constraints
from aims.models.stock import StockLot, StockSelectionCriteria


def ssc_matches(lot: StockLot, ssc: StockSelectionCriteria) -> bool:
    """A lot matches an SSC when pool, area and stock state are all equal."""
    return (
        lot.mp_id == ssc.pool_id
        and lot.area_id == ssc.area_id
        and lot.stock_state == ssc.status
    )


def lots_matching(
    ssc: StockSelectionCriteria, lots: Iterable[StockLot]
) -> list[StockLot]:
    return [lot for lot in lots if ssc_matches(lot, ssc)]


def matches(
    lot: StockLot,
    constraints: Constraints,
    ssc_index: Mapping[str, StockSelectionCriteria],
) -> bool:
    """Check a lot against every constraint kind present on a grant.

    Constraint kinds are ANDed. Within ``matching_ssc_ids`` any one
    matching SSC is enough; ids missing from ``ssc_index`` never match.
    """
    result = True

    if constraints.allowed_pool_ids is not None:
        result = result and lot.mp_id in constraints.allowed_pool_ids

    if constraints.allowed_area_ids is not None:
        result = result and (
            lot.area_id is not None and lot.area_id in constraints.allowed_area_ids
        )

    if constraints.matching_ssc_ids is not None:
        result = result and any(
            ssc_id in ssc_index and ssc_matches(lot, ssc_index[ssc_id])
            for ssc_id in constraints.matching_ssc_ids
        )

    return result
