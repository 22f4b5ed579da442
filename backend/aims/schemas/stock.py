"""Stock lot schemas for request/response."""

from pydantic import Field, model_validator

from aims.models.base import CamelModel
from aims.models.stock import RAGState, StockLot


class DerivedStockState(CamelModel):
    """One dashboard aggregate."""
    label: str
    value: int = Field(..., ge=0)
    description: str


class StockSummaryResponse(CamelModel):
    items: list[DerivedStockState]
    lot_count: int


class StockAssignRequest(CamelModel):
    """Assign a received lot to an owner pool and storage area."""
    destination_pool_id: str = Field(..., min_length=1)
    destination_area_id: str = Field(..., min_length=1)


class StockStateChange(CamelModel):
    """Change one or more RAG states of a lot. Omitted states are left as is."""
    stock_state: RAGState | None = None
    quality_state: RAGState | None = None
    supply_state: RAGState | None = None

    @model_validator(mode="after")
    def _at_least_one(self):
        if self.stock_state is None and self.quality_state is None and self.supply_state is None:
            raise ValueError("At least one state must be given")
        return self


class StockLotListResponse(CamelModel):
    items: list[StockLot]
    total: int
