"""Tests for the inbound receiving rules."""

import pytest

from aims.models import Area, Pool, RAGState
from aims.services.receiving import AssignmentError, assign_lot, pending_lots
from conftest import make_lot


@pytest.fixture
def received():
    return make_lot("lot-new", mp="pool-receiving", sp="pool-vendor", area_id="area-1",
                    stock_state=RAGState.AMBER, supply_state=RAGState.RED,
                    quality_state=RAGState.AMBER)


def _pool(nature, subtype, pool_id="pool-x"):
    return Pool(id=pool_id, code=pool_id.upper(), name=pool_id, nature=nature, subtype=subtype)


def _area(area_id="area-2", location_id="loc-1"):
    return Area(id=area_id, location_id=location_id, name=area_id)


@pytest.mark.parametrize(
    "nature, subtype",
    [("Inventory", "Spares"), ("Assets", "Fixed Assets"), ("Off-Inventory", "Tools")],
)
def test_owner_natures_accept_stock(received, nature, subtype):
    lot = assign_lot(received, _pool(nature, subtype), _area(), "area-1")

    assert (lot.mp_id, lot.sp_id, lot.cp_id) == ("pool-x", "pool-vendor", "pool-x")
    assert lot.area_id == "area-2"
    assert lot.stock_state == RAGState.GREEN
    assert lot.supply_state == RAGState.GREEN
    assert lot.quality_state == RAGState.AMBER
    # Input untouched
    assert received.mp_id == "pool-receiving"


@pytest.mark.parametrize(
    "nature, subtype",
    [("Off-Assets", "Expensed Assets"), ("Control Account", "Repair"), ("3rd Party", "N/A")],
)
def test_other_natures_rejected(received, nature, subtype):
    with pytest.raises(AssignmentError, match="cannot own stock"):
        assign_lot(received, _pool(nature, subtype), _area(), "area-1")


def test_area_must_be_in_lot_location(received):
    with pytest.raises(AssignmentError, match="not in location"):
        assign_lot(received, _pool("Inventory", "MRO"), _area("area-9", "loc-2"), "area-1")


def test_cannot_assign_back_to_receiving_area(received):
    with pytest.raises(AssignmentError, match="receiving area"):
        assign_lot(received, _pool("Inventory", "MRO"), _area("area-1"), "area-1")


def test_pending_lots(received):
    lots = [received, make_lot("lot-own")]
    assert pending_lots(lots, "pool-receiving") == [received]
    assert pending_lots(lots, "pool-none") == []
