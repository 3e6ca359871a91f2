"""
Snapshot service.

Exports every ledger collection as one document and imports such a document
back, replacing each collection it contains wholesale.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger, operation_context
from src.core.entities.snapshot import COLLECTION_MODELS, CollectionKind, InventorySnapshot
from src.core.exceptions import SnapshotError
from src.core.interfaces.snapshot_store import ISnapshotStore
from src.core.interfaces.unit_of_work import IUnitOfWork

logger = get_logger(__name__)


def parse_snapshot(raw: Any) -> InventorySnapshot:
    """
    Validate an import document.

    Raises:
        SnapshotError: Not an object, unknown collection keys, or malformed records.
    """
    if not isinstance(raw, dict):
        raise SnapshotError("document must be a JSON object")

    known = {kind.value for kind in CollectionKind}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise SnapshotError(
            "unknown collections",
            [f"{key}: not a known collection" for key in unknown],
        )

    try:
        return InventorySnapshot.model_validate(raw)
    except PydanticValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise SnapshotError("malformed records", errors) from e


class SnapshotService:
    """Structured export and wholesale import of all collections."""

    def __init__(self, snapshot_store: ISnapshotStore, unit_of_work: IUnitOfWork):
        self._store = snapshot_store
        self._uow = unit_of_work

    async def export_snapshot(self) -> InventorySnapshot:
        """Every collection, each in insertion order, read in one transaction."""
        collections: dict[str, list] = {}
        async with self._uow.transaction():
            for kind in CollectionKind:
                model = COLLECTION_MODELS[kind]
                rows = await self._store.dump(kind)
                collections[kind.value] = [model.model_validate(row) for row in rows]

        logger.info(
            "snapshot_exported",
            counts={kind: len(records) for kind, records in collections.items()},
        )
        return InventorySnapshot.model_validate(collections)

    async def import_snapshot(self, snapshot: InventorySnapshot) -> dict[str, int]:
        """
        Replace every collection present in the snapshot.

        Collections absent from the snapshot are left untouched. All
        replacements commit together.

        Returns:
            Record count per replaced collection.
        """
        present = snapshot.collections()
        counts: dict[str, int] = {}
        with operation_context("import_snapshot"):
            async with self._uow.transaction():
                for kind, records in present.items():
                    counts[kind.value] = await self._store.replace(kind, records)

            logger.info("snapshot_imported", counts=counts)
        return counts

    async def import_raw(self, raw: Any) -> dict[str, int]:
        """Parse and import a decoded JSON document."""
        return await self.import_snapshot(parse_snapshot(raw))
