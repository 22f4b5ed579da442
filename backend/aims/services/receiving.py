"""Inbound receiving: assign lots parked in the receiving pool to an owner pool."""

from collections.abc import Iterable

from aims.models.location import Area
from aims.models.pool import OWNER_POOL_NATURES, Pool
from aims.models.stock import RAGState, StockLot


class AssignmentError(ValueError):
    """The requested destination cannot take the lot."""


def pending_lots(lots: Iterable[StockLot], receiving_pool_id: str) -> list[StockLot]:
    return [lot for lot in lots if lot.mp_id == receiving_pool_id]


def assign_lot(
    lot: StockLot,
    destination_pool: Pool,
    destination_area: Area,
    receiving_area_id: str,
) -> StockLot:
    """
    Return the lot as it looks once assigned.

    Ownership and custody both move to the destination pool, the lot is
    put away in the destination area and becomes available and fully
    supplied. Quality state is left for the separate QC process.
    """
    if destination_pool.nature not in OWNER_POOL_NATURES:
        raise AssignmentError(
            f"Pool '{destination_pool.id}' ({destination_pool.nature.value}) cannot own stock"
        )
    if destination_area.location_id != lot.location_id:
        raise AssignmentError(
            f"Area '{destination_area.id}' is not in location '{lot.location_id}'"
        )
    if destination_area.id == receiving_area_id:
        raise AssignmentError("Lot cannot be assigned back to the receiving area")

    return lot.model_copy(
        update={
            "mp_id": destination_pool.id,
            "cp_id": destination_pool.id,
            "area_id": destination_area.id,
            "stock_state": RAGState.GREEN,
            "supply_state": RAGState.GREEN,
        }
    )
