"""Abstract interface for process output storage."""

from abc import ABC, abstractmethod

from src.core.entities.output import (
    FinishedGood,
    LeftoverMaterial,
    NonConformingItem,
    ProcessSummary,
    RejectedItem,
    WeightLossItem,
)


class IOutputStore(ABC):
    """Interface for output records and summaries of completed processes."""

    @abstractmethod
    async def add_finished_good(self, item: FinishedGood) -> FinishedGood:
        pass

    @abstractmethod
    async def add_non_conforming(self, item: NonConformingItem) -> NonConformingItem:
        pass

    @abstractmethod
    async def add_rejected(self, item: RejectedItem) -> RejectedItem:
        pass

    @abstractmethod
    async def add_weight_loss(self, item: WeightLossItem) -> WeightLossItem:
        pass

    @abstractmethod
    async def add_leftover(self, item: LeftoverMaterial) -> LeftoverMaterial:
        pass

    @abstractmethod
    async def add_summary(self, summary: ProcessSummary) -> ProcessSummary:
        """Store the completion summary. At most one per process."""
        pass

    @abstractmethod
    async def get_summary(self, process_id: str) -> ProcessSummary | None:
        pass

    @abstractmethod
    async def list_finished_goods(
        self, process_ids: list[str] | None = None
    ) -> list[FinishedGood]:
        """List records in insertion order, optionally restricted to some processes."""
        pass

    @abstractmethod
    async def list_non_conforming(
        self, process_ids: list[str] | None = None
    ) -> list[NonConformingItem]:
        pass

    @abstractmethod
    async def list_rejected(self, process_ids: list[str] | None = None) -> list[RejectedItem]:
        pass

    @abstractmethod
    async def list_weight_loss(
        self, process_ids: list[str] | None = None
    ) -> list[WeightLossItem]:
        pass

    @abstractmethod
    async def list_leftovers(
        self, process_ids: list[str] | None = None
    ) -> list[LeftoverMaterial]:
        pass

    @abstractmethod
    async def list_summaries(
        self, process_ids: list[str] | None = None
    ) -> list[ProcessSummary]:
        pass
