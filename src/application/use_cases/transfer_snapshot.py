"""Export / Import Use Cases: JSON snapshots of every collection."""

import json
from pathlib import Path
from typing import Any

from src.config import get_logger
from src.core.exceptions import SnapshotError
from src.core.services.snapshot import SnapshotService

logger = get_logger(__name__)


class ExportSnapshotUseCase:
    """Produce the snapshot document (camelCase keys) of all collections."""

    def __init__(self, snapshot_service: SnapshotService | None = None):
        self._service = snapshot_service

    def _get_service(self) -> SnapshotService:
        if self._service is None:
            from src.application.services import get_snapshot_service

            self._service = get_snapshot_service()
        return self._service

    async def execute(self) -> dict[str, Any]:
        snapshot = await self._get_service().export_snapshot()
        return snapshot.model_dump(mode="json", by_alias=True)

    async def to_file(self, path: Path) -> dict[str, Any]:
        """Write the snapshot document to a JSON file."""
        document = await self.execute()
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        logger.info("snapshot_written", path=str(path))
        return document


class ImportSnapshotUseCase:
    """Replace every collection present in a snapshot document."""

    def __init__(self, snapshot_service: SnapshotService | None = None):
        self._service = snapshot_service

    def _get_service(self) -> SnapshotService:
        if self._service is None:
            from src.application.services import get_snapshot_service

            self._service = get_snapshot_service()
        return self._service

    async def execute(self, document: Any) -> dict[str, int]:
        return await self._get_service().import_raw(document)

    async def from_file(self, path: Path) -> dict[str, int]:
        """Read and import a JSON snapshot file."""
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise SnapshotError(f"not valid JSON: {e.msg}") from e
        logger.info("snapshot_read", path=str(path))
        return await self.execute(document)
