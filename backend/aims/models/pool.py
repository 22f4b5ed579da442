"""Pool model: an ownership/accounting bucket for inventory."""

import enum

from pydantic import Field, model_validator

from aims.models.base import CamelModel


class PoolNature(str, enum.Enum):
    INVENTORY = "Inventory"
    ASSETS = "Assets"
    OFF_INVENTORY = "Off-Inventory"
    OFF_ASSETS = "Off-Assets"
    RESOURCES = "Resources"
    BOOKABLES = "Bookables"
    TRACKABLES = "Trackables"
    CONTROL_ACCOUNT = "Control Account"
    THIRD_PARTY = "3rd Party"


class PoolSubtype(str, enum.Enum):
    # Inventory
    STOCK_IN_TRADE = "Stock in Trade"
    PRODUCTION = "Production"
    MRO = "MRO"
    SPARES = "Spares"
    CONSUMABLES = "Consumables"
    # Assets
    FIXED_ASSETS = "Fixed Assets"
    # Off-Inventory
    SUPPLIES = "Supplies"
    PACKING_MATERIALS = "Packing Materials"
    SECURITY_TAGS = "Security Tags"
    MARKETING_MATERIALS = "Marketing Materials"
    OFFICE_SUPPLIES = "Office Supplies"
    HOUSEKEEPING = "Housekeeping"
    ELECTRICAL = "Electrical"
    IT_CONSUMABLES = "IT Consumables"
    TOOLS = "Tools"
    SAFETY = "Safety"
    UNIFORMS = "Uniforms"
    # Off-Assets
    EXPENSED_ASSETS = "Expensed Assets"
    # Resources
    PROVIDERS = "Providers"
    # Bookables
    STOCK_KITS = "Stock Kits"
    DELUXE_ROOMS = "Deluxe Rooms"
    SURGERY_SETS = "Surgery Sets"
    DEMO_KITS = "Demo Kits"
    # Trackables
    INTERACTIONS = "Interactions"
    EVENTS = "Events"
    KPIS = "KPIs"
    # Control account
    PURCHASE = "Purchase"
    CONSIGNMENT = "Consignment"
    REPAIR = "Repair"
    # 3rd party
    NONE = "N/A"


POOL_SUBTYPE_MAP: dict[PoolNature, list[PoolSubtype]] = {
    PoolNature.INVENTORY: [
        PoolSubtype.STOCK_IN_TRADE,
        PoolSubtype.PRODUCTION,
        PoolSubtype.MRO,
        PoolSubtype.SPARES,
        PoolSubtype.CONSUMABLES,
    ],
    PoolNature.ASSETS: [PoolSubtype.FIXED_ASSETS],
    PoolNature.OFF_INVENTORY: [
        PoolSubtype.SUPPLIES,
        PoolSubtype.PACKING_MATERIALS,
        PoolSubtype.SECURITY_TAGS,
        PoolSubtype.MARKETING_MATERIALS,
        PoolSubtype.OFFICE_SUPPLIES,
        PoolSubtype.HOUSEKEEPING,
        PoolSubtype.ELECTRICAL,
        PoolSubtype.IT_CONSUMABLES,
        PoolSubtype.TOOLS,
        PoolSubtype.SAFETY,
        PoolSubtype.UNIFORMS,
    ],
    PoolNature.OFF_ASSETS: [PoolSubtype.EXPENSED_ASSETS],
    PoolNature.RESOURCES: [PoolSubtype.PROVIDERS],
    PoolNature.BOOKABLES: [
        PoolSubtype.STOCK_KITS,
        PoolSubtype.DELUXE_ROOMS,
        PoolSubtype.SURGERY_SETS,
        PoolSubtype.DEMO_KITS,
    ],
    PoolNature.TRACKABLES: [
        PoolSubtype.INTERACTIONS,
        PoolSubtype.EVENTS,
        PoolSubtype.KPIS,
    ],
    PoolNature.CONTROL_ACCOUNT: [
        PoolSubtype.PURCHASE,
        PoolSubtype.CONSIGNMENT,
        PoolSubtype.REPAIR,
    ],
    PoolNature.THIRD_PARTY: [PoolSubtype.NONE],
}

# Natures a received lot can be assigned into
OWNER_POOL_NATURES = {PoolNature.INVENTORY, PoolNature.ASSETS, PoolNature.OFF_INVENTORY}


class PoolBase(CamelModel):
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    nature: PoolNature
    subtype: PoolSubtype
    is_nested: bool = False
    parent_id: str | None = None

    @model_validator(mode="after")
    def _check_subtype(self):
        if self.subtype not in POOL_SUBTYPE_MAP[self.nature]:
            raise ValueError(
                f"Subtype '{self.subtype.value}' is not valid for nature '{self.nature.value}'"
            )
        return self


class Pool(PoolBase):
    id: str

    def __repr__(self) -> str:
        return f"<Pool {self.code}: {self.name}>"
