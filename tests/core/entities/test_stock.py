"""Tests for stock entities."""

from src.core.entities import InventoryTransaction, RodStockEntry, TransactionType


class TestRodStockEntry:
    def test_defaults(self):
        entry = RodStockEntry(diameter=12.0, weight=10.0)
        assert entry.id
        assert entry.total_length is None
        assert entry.created_at.tzinfo is not None

    def test_ids_are_unique(self):
        a = RodStockEntry(diameter=12.0, weight=1.0)
        b = RodStockEntry(diameter=12.0, weight=1.0)
        assert a.id != b.id

    def test_serializes_camel_case(self):
        entry = RodStockEntry(diameter=12.0, weight=10.0, total_length=6000.0)
        data = entry.model_dump(by_alias=True)
        assert "totalLength" in data
        assert "createdAt" in data

    def test_accepts_camel_case_input(self):
        entry = RodStockEntry.model_validate(
            {"diameter": 8.0, "weight": 2.0, "totalLength": 1000.0}
        )
        assert entry.total_length == 1000.0


class TestInventoryTransaction:
    def test_type_values(self):
        assert TransactionType.IN.value == "in"
        assert TransactionType.OUT.value == "out"

    def test_process_fields_optional(self):
        line = InventoryTransaction(diameter=12.0, weight=5.0, type=TransactionType.IN)
        assert line.process_id is None
        assert line.process_name is None

    def test_from_snapshot_record(self):
        line = InventoryTransaction.model_validate(
            {
                "id": "t-1",
                "date": "2024-03-01T10:00:00+00:00",
                "diameter": 12,
                "weight": 3,
                "type": "out",
                "processId": "p-1",
                "processName": "Batch",
            }
        )
        assert line.type == TransactionType.OUT
        assert line.process_id == "p-1"
