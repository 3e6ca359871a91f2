"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.core.entities import Process


@pytest.fixture
async def initialized_db(temp_db_path: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """Temporary database with the full schema applied, no global pool."""
    from src.infrastructure.storage.sqlite.migrations import migrator

    with patch.object(migrator, "get_settings", return_value=mock_settings):
        await migrator.initialize_database(temp_db_path, create_backup_before=False)
    yield temp_db_path


@pytest.fixture
def sample_process() -> Process:
    return Process(
        name="Batch 42 cut",
        process_id="PROC-TEST-00001",
        diameter=12.0,
        weight_used=12.0,
        blade_diameter=300.0,
        number_of_rods=8,
        length_per_rod=100.0,
        weight_per_rod=1.0,
        wastage_per_rod=0.125,
    )
