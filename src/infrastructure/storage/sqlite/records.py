"""Row encoding shared by the SQLite stores.

Table columns carry the same names as the entity fields, so an entity maps to
a row by encoding each field value for SQLite.
"""

import json
from datetime import datetime
from enum import Enum
from typing import Any

import aiosqlite
from pydantic import BaseModel

from src.core.entities.snapshot import CollectionKind

COLLECTION_TABLES: dict[CollectionKind, str] = {
    CollectionKind.RODS: "rod_stock",
    CollectionKind.PROCESSES: "processes",
    CollectionKind.FINISHED_GOODS: "finished_goods",
    CollectionKind.NON_CONFORMING: "non_conforming_items",
    CollectionKind.REJECTED: "rejected_items",
    CollectionKind.WEIGHT_LOSS: "weight_loss_items",
    CollectionKind.LEFTOVER_MATERIALS: "leftover_materials",
    CollectionKind.PROCESS_SUMMARY: "process_summaries",
    CollectionKind.DIAMETERS: "diameters",
    CollectionKind.BLADE_DIAMETERS: "blade_diameters",
    CollectionKind.INVENTORY_HISTORY: "inventory_transactions",
    CollectionKind.PROCESS_GROUPS: "process_groups",
}

# Columns holding JSON arrays
_JSON_COLUMNS = {"process_ids"}


def encode_value(value: Any) -> Any:
    """Encode a field value as a SQLite parameter."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return value


def model_to_row(model: BaseModel) -> dict[str, Any]:
    """Map an entity to column values."""
    return {name: encode_value(getattr(model, name)) for name in type(model).model_fields}


def row_to_dict(row: aiosqlite.Row) -> dict[str, Any]:
    """Map a row back to entity field values (the seq column is dropped)."""
    data = {key: row[key] for key in row.keys() if key != "seq"}
    for key in _JSON_COLUMNS & data.keys():
        data[key] = json.loads(data[key]) if data[key] else []
    return data


async def insert_model(conn: aiosqlite.Connection, table: str, model: BaseModel) -> None:
    """Insert an entity into its table."""
    row = model_to_row(model)
    columns = ", ".join(row)
    placeholders = ", ".join("?" for _ in row)
    await conn.execute(
        f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
        tuple(row.values()),
    )
