"""Tests for snapshot parsing and SnapshotService."""

from unittest.mock import AsyncMock

import pytest

from src.core.entities import CollectionKind, RodStockEntry
from src.core.exceptions import SnapshotError
from src.core.services import SnapshotService, parse_snapshot


@pytest.fixture
def snapshot_store():
    store = AsyncMock()
    store.dump.return_value = []
    store.replace.side_effect = lambda kind, records: len(records)
    return store


@pytest.fixture
def service(snapshot_store, uow) -> SnapshotService:
    return SnapshotService(snapshot_store, uow)


class TestParseSnapshot:
    def test_valid_document(self):
        snapshot = parse_snapshot(
            {"rods": [{"id": "r1", "diameter": 12, "weight": 3, "createdAt": "2024-01-01T00:00:00Z"}]}
        )
        assert snapshot.rods[0].id == "r1"

    def test_not_an_object(self):
        with pytest.raises(SnapshotError) as exc_info:
            parse_snapshot([1, 2, 3])
        assert "JSON object" in exc_info.value.message

    def test_unknown_collection(self):
        with pytest.raises(SnapshotError) as exc_info:
            parse_snapshot({"rods": [], "widgets": []})
        assert exc_info.value.details["errors"] == ["widgets: not a known collection"]

    def test_malformed_record_lists_location(self):
        with pytest.raises(SnapshotError) as exc_info:
            parse_snapshot({"rods": [{"diameter": 12}]})
        errors = exc_info.value.details["errors"]
        assert any(e.startswith("rods.0.weight") for e in errors)

    def test_negative_diameter_rejected(self):
        with pytest.raises(SnapshotError) as exc_info:
            parse_snapshot(
                {"rods": [{"id": "r1", "diameter": -5, "weight": 3, "createdAt": "2024-01-01T00:00:00Z"}]}
            )
        assert any(e.startswith("rods.0.diameter") for e in exc_info.value.details["errors"])

    def test_process_and_output_invariants_enforced(self):
        document = {
            "processes": [
                {
                    "id": "p1",
                    "name": "Batch",
                    "processId": "PROC-1",
                    "diameter": 12,
                    "weightUsed": -4,
                    "bladeDiameter": 300,
                    "numberOfRods": 0,
                    "lengthPerRod": 500,
                    "weightPerRod": 1.0,
                }
            ],
            "finishedGoods": [
                {"id": "f1", "processId": "p1", "count": -3, "weightPerItem": 1.0, "weight": -3}
            ],
        }

        with pytest.raises(SnapshotError) as exc_info:
            parse_snapshot(document)

        errors = exc_info.value.details["errors"]
        assert sum(e.startswith("processes.0.") for e in errors) == 2
        assert sum(e.startswith("finishedGoods.0.") for e in errors) == 2

    def test_empty_document_is_valid(self):
        assert parse_snapshot({}).collections() == {}


class TestSnapshotService:
    async def test_export_reads_every_collection(self, service, snapshot_store, uow):
        snapshot_store.dump.side_effect = lambda kind: (
            [{"id": "r1", "diameter": 12.0, "weight": 3.0, "total_length": None,
              "created_at": "2024-01-01T00:00:00+00:00"}]
            if kind == CollectionKind.RODS
            else []
        )

        snapshot = await service.export_snapshot()

        assert snapshot_store.dump.await_count == len(CollectionKind)
        assert snapshot.rods[0].weight == 3.0
        assert snapshot.processes == []
        assert uow.opened == 1

    async def test_import_replaces_only_present(self, service, snapshot_store):
        counts = await service.import_raw(
            {"rods": [RodStockEntry(diameter=12.0, weight=1.0).model_dump(by_alias=True)],
             "diameters": []}
        )

        assert counts == {"rods": 1, "diameters": 0}
        replaced = [call.args[0] for call in snapshot_store.replace.await_args_list]
        assert replaced == [CollectionKind.RODS, CollectionKind.DIAMETERS]

    async def test_invalid_document_touches_nothing(self, service, snapshot_store):
        with pytest.raises(SnapshotError):
            await service.import_raw({"rods": [{"weight": "heavy"}]})
        snapshot_store.replace.assert_not_awaited()
