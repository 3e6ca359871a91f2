"""Abstract interface for rod stock and inventory history storage."""

from abc import ABC, abstractmethod

from src.core.entities.stock import InventoryTransaction, RodStockEntry


class IStockStore(ABC):
    """Interface for rod stock entries, the inventory ledger and known diameters."""

    # Stock entries
    @abstractmethod
    async def add_entry(self, entry: RodStockEntry) -> RodStockEntry:
        """Store a new stock entry."""
        pass

    @abstractmethod
    async def list_entries(self, diameter: float | None = None) -> list[RodStockEntry]:
        """List stock entries in insertion order, optionally for one diameter."""
        pass

    @abstractmethod
    async def update_entry_weight(self, entry_id: str, weight: float) -> bool:
        """Set the remaining weight of an entry. Returns False if it does not exist."""
        pass

    @abstractmethod
    async def delete_entry(self, entry_id: str) -> bool:
        """Remove a fully consumed entry."""
        pass

    @abstractmethod
    async def total_weight(self, diameter: float) -> float:
        """Sum of entry weights for a diameter (0.0 when none)."""
        pass

    @abstractmethod
    async def weight_by_diameter(self) -> list[tuple[float, float, int]]:
        """(diameter, total weight, entry count) per diameter, ordered by diameter."""
        pass

    # Inventory ledger
    @abstractmethod
    async def add_transaction(self, transaction: InventoryTransaction) -> InventoryTransaction:
        """Append a ledger line. Ledger lines are never updated."""
        pass

    @abstractmethod
    async def list_transactions(
        self,
        process_id: str | None = None,
        newest_first: bool = False,
        limit: int | None = None,
    ) -> list[InventoryTransaction]:
        """List ledger lines in append order (or reversed)."""
        pass

    # Known diameters
    @abstractmethod
    async def add_diameter(self, diameter: float) -> bool:
        """Register a rod diameter. Returns False if it was already known."""
        pass

    @abstractmethod
    async def list_diameters(self) -> list[float]:
        """Known rod diameters, ascending."""
        pass

    @abstractmethod
    async def add_blade_diameter(self, diameter: float) -> bool:
        """Register a blade diameter. Returns False if it was already known."""
        pass

    @abstractmethod
    async def list_blade_diameters(self) -> list[float]:
        """Known blade diameters, ascending."""
        pass
