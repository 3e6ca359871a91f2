"""
Versioned schema migrations for the ledger database.

Migration files live next to this module as vNNN_<name>.sql and are applied
in version order. A migration and the schema_migrations row recording it
commit together, so a failing script leaves no half-built schema behind.
A recorded migration whose file has since changed stops the run instead of
being re-applied over live stock data.
"""

import hashlib
import re
import shutil
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import aiosqlite

from src.config import get_logger, get_settings
from src.core.exceptions import DatabaseError

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent

_FILENAME = re.compile(r"v(\d+)_(\w+)\.sql")

REQUIRED_TABLES = [
    "rod_stock",
    "inventory_transactions",
    "diameters",
    "blade_diameters",
    "processes",
    "finished_goods",
    "non_conforming_items",
    "rejected_items",
    "weight_loss_items",
    "leftover_materials",
    "process_summaries",
    "process_groups",
    "schema_migrations",
]

# Each query counts rows violating a ledger invariant
LEDGER_CHECKS: dict[str, str] = {
    "positive_stock_weights": "SELECT COUNT(*) FROM rod_stock WHERE weight <= 0",
    "completed_processes_summarized": """
        SELECT COUNT(*) FROM processes p
        WHERE p.status = 'completed'
          AND NOT EXISTS (SELECT 1 FROM process_summaries s WHERE s.process_id = p.id)
    """,
    "summaries_match_completed_processes": """
        SELECT COUNT(*) FROM process_summaries s
        JOIN processes p ON p.id = s.process_id
        WHERE p.status != 'completed'
    """,
}

APPEND_ONLY_TRIGGER = "trg_inventory_transactions_append_only"

_MIGRATIONS_TABLE = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    version TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    checksum TEXT NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (datetime('now')),
    execution_time_ms INTEGER
)
"""


@dataclass(frozen=True)
class MigrationInfo:
    """One vNNN_<name>.sql file."""

    version: str
    name: str
    path: Path
    checksum: str

    @classmethod
    def from_file(cls, path: Path) -> "MigrationInfo":
        match = _FILENAME.fullmatch(path.name)
        if not match:
            raise ValueError(f"Invalid migration filename: {path.name}")
        checksum = hashlib.sha256(path.read_bytes()).hexdigest()[:16]
        return cls(version=match.group(1), name=match.group(2), path=path, checksum=checksum)

    @property
    def sql(self) -> str:
        return self.path.read_text(encoding="utf-8")


@dataclass
class MigrationResult:
    version: str
    name: str
    success: bool
    execution_time_ms: int
    error: str | None = None


def discover_migrations() -> list[MigrationInfo]:
    """Migration files in MIGRATIONS_DIR, ordered by version."""
    migrations = []
    for path in MIGRATIONS_DIR.glob("v*.sql"):
        try:
            migrations.append(MigrationInfo.from_file(path))
        except ValueError as e:
            logger.warning("skipping_invalid_migration", path=str(path), error=str(e))
    return sorted(migrations, key=lambda m: int(m.version))


async def get_applied_migrations(conn: aiosqlite.Connection) -> dict[str, str]:
    """Applied version -> recorded checksum; empty for a fresh database."""
    cursor = await conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'schema_migrations'"
    )
    if await cursor.fetchone() is None:
        return {}
    cursor = await conn.execute("SELECT version, checksum FROM schema_migrations")
    return {row[0]: row[1] for row in await cursor.fetchall()}


async def get_current_version(conn: aiosqlite.Connection) -> str | None:
    applied = await get_applied_migrations(conn)
    return max(applied, key=int) if applied else None


async def apply_migration(
    conn: aiosqlite.Connection,
    migration: MigrationInfo,
) -> MigrationResult:
    """Run one migration script and record it in a single transaction."""
    logger.info("applying_migration", version=migration.version, name=migration.name)
    start = time.perf_counter()

    # version and name are \w+ and checksum is hex, so inlining them is safe
    script = (
        "BEGIN IMMEDIATE;\n"
        f"{migration.sql}\n;\n"
        "INSERT INTO schema_migrations (version, name, checksum) VALUES "
        f"('{migration.version}', '{migration.name}', '{migration.checksum}');\n"
        "COMMIT;"
    )
    try:
        await conn.executescript(script)
    except aiosqlite.Error as e:
        await conn.rollback()
        elapsed = int((time.perf_counter() - start) * 1000)
        logger.error("migration_failed", version=migration.version, error=str(e))
        return MigrationResult(migration.version, migration.name, False, elapsed, str(e))

    elapsed = int((time.perf_counter() - start) * 1000)
    await conn.execute(
        "UPDATE schema_migrations SET execution_time_ms = ? WHERE version = ?",
        (elapsed, migration.version),
    )
    await conn.commit()
    logger.info("migration_applied", version=migration.version, execution_time_ms=elapsed)
    return MigrationResult(migration.version, migration.name, True, elapsed)


def create_backup(db_path: Path) -> Path:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = db_path.with_suffix(f".backup_{timestamp}.db")
    shutil.copy2(db_path, backup_path)
    logger.info("database_backup_created", backup_path=str(backup_path))
    return backup_path


def restore_backup(db_path: Path, backup_path: Path) -> None:
    shutil.copy2(backup_path, db_path)
    logger.info("database_restored_from_backup", backup_path=str(backup_path))


async def initialize_database(
    db_path: Path | None = None,
    create_backup_before: bool = True,
) -> list[MigrationResult]:
    """
    Apply every pending migration.

    An existing database is copied aside first and restored if the run
    raises; the copy is removed once all migrations succeed.

    Returns:
        One result per migration attempted; empty when up to date.

    Raises:
        DatabaseError: An applied migration's file no longer matches its checksum.
    """
    db_path = db_path or get_settings().storage.db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("initializing_database", db_path=str(db_path))

    backup_path = create_backup(db_path) if create_backup_before and db_path.exists() else None
    results: list[MigrationResult] = []

    try:
        async with aiosqlite.connect(db_path) as conn:
            await conn.execute("PRAGMA journal_mode=WAL")
            await conn.execute("PRAGMA foreign_keys=ON")
            await conn.execute(_MIGRATIONS_TABLE)
            await conn.commit()

            applied = await get_applied_migrations(conn)
            for migration in discover_migrations():
                recorded = applied.get(migration.version)
                if recorded == migration.checksum:
                    continue
                if recorded is not None:
                    raise DatabaseError(
                        "migrate",
                        f"migration v{migration.version} changed after it was applied",
                    )

                result = await apply_migration(conn, migration)
                results.append(result)
                if not result.success:
                    break
    except Exception as e:
        logger.error("database_initialization_failed", error=str(e))
        if backup_path is not None:
            restore_backup(db_path, backup_path)
        raise

    if backup_path is not None and all(r.success for r in results):
        backup_path.unlink()

    return results


# Alias used by the API lifespan
run_migrations = initialize_database


async def get_migration_status(db_path: Path | None = None) -> dict:
    """Current version plus applied and pending migration versions."""
    db_path = db_path or get_settings().storage.db_path
    discovered = discover_migrations()

    if not db_path.exists():
        return {
            "exists": False,
            "current_version": None,
            "applied_migrations": [],
            "pending_migrations": [m.version for m in discovered],
        }

    async with aiosqlite.connect(db_path) as conn:
        applied = await get_applied_migrations(conn)
        current = await get_current_version(conn)

    return {
        "exists": True,
        "current_version": current,
        "applied_migrations": sorted(applied, key=int),
        "pending_migrations": [m.version for m in discovered if m.version not in applied],
    }


def _check(name: str, passed: bool, **info) -> dict:
    return {"check": name, "status": "PASS" if passed else "FAIL", **info}


async def verify_schema_integrity(db_path: Path | None = None) -> list[dict]:
    """
    Check SQLite integrity, the ledger tables and the stored-data invariants.

    Returns:
        One {"check", "status", ...} dict per check; status is PASS or FAIL.
    """
    db_path = db_path or get_settings().storage.db_path
    if not db_path.exists():
        return [_check("database_exists", False, path=str(db_path))]

    checks = []
    async with aiosqlite.connect(db_path) as conn:
        cursor = await conn.execute("PRAGMA integrity_check")
        result = (await cursor.fetchone())[0]
        checks.append(_check("integrity", result == "ok", result=result))

        cursor = await conn.execute("SELECT type, name FROM sqlite_master")
        objects = {(row[0], row[1]) for row in await cursor.fetchall()}
        missing = [t for t in REQUIRED_TABLES if ("table", t) not in objects]
        checks.append(_check("required_tables", not missing, missing=missing))
        checks.append(
            _check("append_only_history", ("trigger", APPEND_ONLY_TRIGGER) in objects)
        )
        if missing:
            return checks

        for name, query in LEDGER_CHECKS.items():
            cursor = await conn.execute(query)
            violations = (await cursor.fetchone())[0]
            checks.append(_check(name, violations == 0, violations=violations))

    return checks
