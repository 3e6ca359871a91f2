"""Tests for the inventory snapshot model."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.core.entities import (
    COLLECTION_MODELS,
    CollectionKind,
    InventorySnapshot,
    RodStockEntry,
)


class TestInventorySnapshot:
    def test_every_kind_has_a_model(self):
        assert set(COLLECTION_MODELS) == set(CollectionKind)

    def test_every_kind_is_a_field_alias(self):
        aliases = {f.alias or name for name, f in InventorySnapshot.model_fields.items()}
        assert aliases == {kind.value for kind in CollectionKind}

    def test_absent_collections_are_none(self):
        snapshot = InventorySnapshot.model_validate({"rods": []})
        assert snapshot.rods == []
        assert snapshot.processes is None
        assert list(snapshot.collections()) == [CollectionKind.RODS]

    def test_collections_in_declaration_order(self):
        snapshot = InventorySnapshot.model_validate(
            {"processGroups": [], "rods": [], "bladeDiameters": [{"diameter": 300}]}
        )
        assert list(snapshot.collections()) == [
            CollectionKind.RODS,
            CollectionKind.BLADE_DIAMETERS,
            CollectionKind.PROCESS_GROUPS,
        ]

    def test_unknown_key_rejected(self):
        with pytest.raises(PydanticValidationError):
            InventorySnapshot.model_validate({"widgets": []})

    def test_dump_uses_camel_case(self):
        snapshot = InventorySnapshot(
            rods=[RodStockEntry(diameter=12.0, weight=1.0)],
            inventory_history=[],
        )
        data = snapshot.model_dump(mode="json", by_alias=True, exclude_none=True)
        assert set(data) == {"rods", "inventoryHistory"}
        assert "totalLength" in data["rods"][0]
