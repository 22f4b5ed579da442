"""Stock lot and stock selection criteria models."""

import enum

from pydantic import Field, computed_field

from aims.models.base import CamelModel


class RAGState(str, enum.Enum):
    """Categorical status. Green = unrestricted, Amber = pending, Red = blocked."""
    RED = "Red"
    AMBER = "Amber"
    GREEN = "Green"


class StockLot(CamelModel):
    id: str
    sku: str
    mp_id: str = Field(..., description="My (owning) pool")
    sp_id: str = Field(..., description="Source pool")
    cp_id: str = Field(..., description="Custody pool")
    quantity: int = Field(..., ge=0)
    location_id: str
    area_id: str | None = None
    stock_state: RAGState
    quality_state: RAGState
    supply_state: RAGState
    marking_ids: list[str] = Field(default_factory=list)

    def __repr__(self) -> str:
        return f"<StockLot {self.id} sku={self.sku} qty={self.quantity}>"


class StockSelectionCriteriaBase(CamelModel):
    """Reusable rule: stock in this pool, in this area, with this status."""
    pool_id: str
    area_id: str
    status: RAGState
    classes: str = ""

    @computed_field(alias="classList")
    @property
    def class_list(self) -> list[str]:
        return [c.strip() for c in self.classes.split(",") if c.strip()]


class StockSelectionCriteria(StockSelectionCriteriaBase):
    id: str
