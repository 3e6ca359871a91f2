"""Export/import snapshot of every ledger collection."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from src.core.entities.group import ProcessGroup
from src.core.entities.output import (
    FinishedGood,
    LeftoverMaterial,
    NonConformingItem,
    ProcessSummary,
    RejectedItem,
    WeightLossItem,
)
from src.core.entities.process import Process
from src.core.entities.stock import InventoryTransaction, KnownDiameter, RodStockEntry


class CollectionKind(str, Enum):
    """Collection names, as used as keys of a snapshot document."""

    RODS = "rods"
    PROCESSES = "processes"
    FINISHED_GOODS = "finishedGoods"
    NON_CONFORMING = "nonConformingItems"
    REJECTED = "rejectedItems"
    WEIGHT_LOSS = "weightLossItems"
    LEFTOVER_MATERIALS = "leftoverMaterials"
    PROCESS_SUMMARY = "processSummary"
    DIAMETERS = "diameters"
    BLADE_DIAMETERS = "bladeDiameters"
    INVENTORY_HISTORY = "inventoryHistory"
    PROCESS_GROUPS = "processGroups"


COLLECTION_MODELS: dict[CollectionKind, type[BaseModel]] = {
    CollectionKind.RODS: RodStockEntry,
    CollectionKind.PROCESSES: Process,
    CollectionKind.FINISHED_GOODS: FinishedGood,
    CollectionKind.NON_CONFORMING: NonConformingItem,
    CollectionKind.REJECTED: RejectedItem,
    CollectionKind.WEIGHT_LOSS: WeightLossItem,
    CollectionKind.LEFTOVER_MATERIALS: LeftoverMaterial,
    CollectionKind.PROCESS_SUMMARY: ProcessSummary,
    CollectionKind.DIAMETERS: KnownDiameter,
    CollectionKind.BLADE_DIAMETERS: KnownDiameter,
    CollectionKind.INVENTORY_HISTORY: InventoryTransaction,
    CollectionKind.PROCESS_GROUPS: ProcessGroup,
}


class InventorySnapshot(BaseModel):
    """
    One ordered collection per entity kind.

    A collection left as None is absent from the document: import leaves the
    stored collection untouched. Unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    rods: list[RodStockEntry] | None = None
    processes: list[Process] | None = None
    finished_goods: list[FinishedGood] | None = Field(default=None, alias="finishedGoods")
    non_conforming_items: list[NonConformingItem] | None = Field(
        default=None, alias="nonConformingItems"
    )
    rejected_items: list[RejectedItem] | None = Field(default=None, alias="rejectedItems")
    weight_loss_items: list[WeightLossItem] | None = Field(
        default=None, alias="weightLossItems"
    )
    leftover_materials: list[LeftoverMaterial] | None = Field(
        default=None, alias="leftoverMaterials"
    )
    process_summary: list[ProcessSummary] | None = Field(default=None, alias="processSummary")
    diameters: list[KnownDiameter] | None = None
    blade_diameters: list[KnownDiameter] | None = Field(default=None, alias="bladeDiameters")
    inventory_history: list[InventoryTransaction] | None = Field(
        default=None, alias="inventoryHistory"
    )
    process_groups: list[ProcessGroup] | None = Field(default=None, alias="processGroups")

    def collections(self) -> dict[CollectionKind, list[BaseModel]]:
        """Collections present in this snapshot, keyed by kind, in declaration order."""
        present: dict[CollectionKind, list[BaseModel]] = {}
        for name, field in type(self).model_fields.items():
            records = getattr(self, name)
            if records is not None:
                present[CollectionKind(field.alias or name)] = records
        return present
