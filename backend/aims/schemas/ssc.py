"""Stock selection criteria schemas."""

from aims.models.stock import StockSelectionCriteriaBase


class SSCCreate(StockSelectionCriteriaBase):
    """Schema for creating or replacing an SSC."""
    pass
