"""API tests for snapshot export and import endpoints."""

from httpx import AsyncClient

from src.core.entities import InventorySnapshot, RodStockEntry
from src.core.exceptions import SnapshotError


class TestDataAPI:
    async def test_export_is_camel_case(self, client: AsyncClient, mock_snapshot):
        mock_snapshot.export_snapshot.return_value = InventorySnapshot(
            rods=[RodStockEntry(diameter=12.0, weight=3.0)]
        )

        response = await client.get("/api/data/export")

        assert response.status_code == 200
        rod = response.json()["rods"][0]
        assert "createdAt" in rod
        assert "totalLength" in rod

    async def test_import(self, client: AsyncClient, mock_snapshot):
        mock_snapshot.import_raw.return_value = {"rods": 1}

        response = await client.post("/api/data/import", json={"rods": []})

        assert response.json() == {"replaced": {"rods": 1}}
        mock_snapshot.import_raw.assert_awaited_once_with({"rods": []})

    async def test_invalid_snapshot(self, client: AsyncClient, mock_snapshot):
        mock_snapshot.import_raw.side_effect = SnapshotError(
            "unknown collections", ["widgets: not a known collection"]
        )

        response = await client.post("/api/data/import", json={"widgets": []})

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "SNAPSHOT_INVALID"
        assert data["details"]["errors"] == ["widgets: not a known collection"]
