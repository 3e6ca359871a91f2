"""Abstract interface for bulk collection dump and replace."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from src.core.entities.snapshot import CollectionKind


class ISnapshotStore(ABC):
    """Whole-collection access used by export and import."""

    @abstractmethod
    async def dump(self, kind: CollectionKind) -> list[dict[str, Any]]:
        """Every record of a collection in insertion order, as entity field values."""
        pass

    @abstractmethod
    async def replace(self, kind: CollectionKind, records: list[BaseModel]) -> int:
        """Clear a collection and insert the given records. Returns the count."""
        pass
