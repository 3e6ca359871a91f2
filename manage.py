#!/usr/bin/env python3
"""
Rod stock ledger management CLI.

Usage:
    python manage.py start            Start the API server in the background
    python manage.py stop             Graceful shutdown
    python manage.py status           Check if server is running
    python manage.py dev              Run the API server with reload
    python manage.py migrate          Apply pending database migrations
    python manage.py migrations       Show applied and pending migrations
    python manage.py verify           Check database schema integrity
    python manage.py export FILE      Write an inventory snapshot to FILE
    python manage.py import FILE      Replace collections from a snapshot FILE
"""

import argparse
import asyncio
import os
import signal
import socket
import subprocess
import sys
import time
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
PID_FILE = ROOT_DIR / ".rodstock.pid"


def _read_pid() -> int | None:
    """Read PID from the pid file, return None if missing or stale."""
    if not PID_FILE.exists():
        return None
    try:
        pid = int(PID_FILE.read_text().strip())
    except (ValueError, OSError):
        return None
    if _is_pid_alive(pid):
        return pid
    # Stale PID file
    PID_FILE.unlink(missing_ok=True)
    return None


def _is_pid_alive(pid: int) -> bool:
    try:
        os.kill(pid, 0)
        return True
    except OSError:
        return False


def _is_port_free(port: int) -> bool:
    """Check if a port is available for binding."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("127.0.0.1", port))
        return True
    except OSError:
        return False


def _uvicorn_cmd(host: str, port: int, *extra: str) -> list[str]:
    return [
        sys.executable, "-m", "uvicorn",
        "src.api.main:app",
        "--host", host,
        "--port", str(port),
        *extra,
    ]


def cmd_start(args: argparse.Namespace) -> None:
    """Start the server as a background process."""
    existing_pid = _read_pid()
    if existing_pid is not None:
        print(f"Server already running (PID {existing_pid}). Use 'stop' first.")
        sys.exit(1)

    if not _is_port_free(args.port):
        print(f"Error: Port {args.port} is in use.")
        sys.exit(1)

    extra = ["--workers", str(args.workers)] if args.workers > 1 else []
    print(f"Starting server on {args.host}:{args.port}...")
    proc = subprocess.Popen(_uvicorn_cmd(args.host, args.port, *extra), cwd=str(ROOT_DIR))

    PID_FILE.write_text(str(proc.pid))
    print(f"Server started (PID {proc.pid}).")
    print(f"  API:      http://{args.host}:{args.port}/api")
    print(f"  PID file: {PID_FILE}")


def cmd_stop(args: argparse.Namespace) -> None:
    """Stop the running server."""
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
        return

    print(f"Stopping server (PID {pid})...")
    try:
        os.kill(pid, signal.SIGTERM)
    except OSError:
        pass
    for _ in range(30):
        if not _is_pid_alive(pid):
            break
        time.sleep(0.1)
    else:
        print("Warning: Process did not exit within 3 seconds.")

    PID_FILE.unlink(missing_ok=True)
    if not _is_pid_alive(pid):
        print("Server stopped.")


def cmd_status(args: argparse.Namespace) -> None:
    """Check if the server is running."""
    pid = _read_pid()
    if pid is not None:
        print(f"Server is running (PID {pid}).")
    elif not _is_port_free(args.port):
        print(f"No PID file. Port {args.port} is in use by another process.")
    else:
        print(f"Server is not running (port {args.port} is free).")


def cmd_dev(args: argparse.Namespace) -> None:
    """Run the server in the foreground with --reload."""
    print(f"Starting backend on {args.host}:{args.port} (reload mode)...")
    try:
        subprocess.run(_uvicorn_cmd(args.host, args.port, "--reload"), cwd=str(ROOT_DIR))
    except KeyboardInterrupt:
        print("\nDev server stopped.")


def cmd_migrate(args: argparse.Namespace) -> None:
    """Apply pending migrations."""
    from src.core.exceptions import DatabaseError
    from src.infrastructure.storage.sqlite.migrations.migrator import initialize_database

    try:
        results = asyncio.run(
            initialize_database(args.db_path, create_backup_before=not args.no_backup)
        )
    except DatabaseError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
    if not results:
        print("Database is up to date.")
    for result in results:
        state = "OK" if result.success else "FAILED"
        print(f"[{state}] v{result.version}_{result.name} ({result.execution_time_ms}ms)")
        if result.error:
            print(f"       {result.error}")
    if any(not r.success for r in results):
        sys.exit(1)


def cmd_migrations(args: argparse.Namespace) -> None:
    """Show applied and pending migrations."""
    from src.infrastructure.storage.sqlite.migrations.migrator import get_migration_status

    status = asyncio.run(get_migration_status(args.db_path))
    if not status["exists"]:
        print("Database does not exist yet.")
    else:
        print(f"Current version: {status['current_version'] or 'none'}")
        print(f"Applied: {', '.join(status['applied_migrations']) or 'none'}")
    print(f"Pending: {', '.join(status['pending_migrations']) or 'none'}")


def cmd_verify(args: argparse.Namespace) -> None:
    """Verify schema integrity."""
    from src.infrastructure.storage.sqlite.migrations.migrator import verify_schema_integrity

    checks = asyncio.run(verify_schema_integrity(args.db_path))
    for check in checks:
        print(f"[{check['status']}] {check['check']}")
    if any(c["status"] != "PASS" for c in checks):
        sys.exit(1)


async def _with_database(coro_factory):
    """Run a coroutine against a migrated database, closing the pool afterwards."""
    from src.infrastructure.storage.sqlite import close_pool
    from src.infrastructure.storage.sqlite.migrations.migrator import initialize_database

    await initialize_database()
    try:
        return await coro_factory()
    finally:
        await close_pool()


def cmd_export(args: argparse.Namespace) -> None:
    """Write every collection to a JSON snapshot."""
    from src.application.use_cases import ExportSnapshotUseCase

    document = asyncio.run(_with_database(lambda: ExportSnapshotUseCase().to_file(args.file)))
    counts = {key: len(records or []) for key, records in document.items()}
    print(f"Snapshot written to {args.file}")
    for key, count in counts.items():
        print(f"  {key}: {count}")


def cmd_import(args: argparse.Namespace) -> None:
    """Replace the collections present in a JSON snapshot."""
    from src.application.use_cases import ImportSnapshotUseCase
    from src.core.exceptions import SnapshotError

    try:
        replaced = asyncio.run(
            _with_database(lambda: ImportSnapshotUseCase().from_file(args.file))
        )
    except SnapshotError as e:
        print(f"Error: {e.message}")
        for error in e.details.get("errors", []):
            print(f"  {error}")
        sys.exit(1)

    print(f"Snapshot imported from {args.file}")
    for key, count in replaced.items():
        print(f"  {key}: {count}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Rod stock ledger management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # start
    p_start = sub.add_parser("start", help="Start the server")
    p_start.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    p_start.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    p_start.add_argument("--workers", type=int, default=1, help="Number of uvicorn workers")
    p_start.set_defaults(func=cmd_start)

    # stop
    p_stop = sub.add_parser("stop", help="Stop the server")
    p_stop.set_defaults(func=cmd_stop)

    # status
    p_status = sub.add_parser("status", help="Check if server is running")
    p_status.add_argument("--port", type=int, default=8000, help="Port to check (default: 8000)")
    p_status.set_defaults(func=cmd_status)

    # dev
    p_dev = sub.add_parser("dev", help="Run the server with reload")
    p_dev.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    p_dev.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    p_dev.set_defaults(func=cmd_dev)

    # migrate
    p_migrate = sub.add_parser("migrate", help="Apply pending migrations")
    p_migrate.add_argument("--db-path", type=Path, help="Database path (default from settings)")
    p_migrate.add_argument("--no-backup", action="store_true", help="Skip backup before migrating")
    p_migrate.set_defaults(func=cmd_migrate)

    # migrations
    p_migrations = sub.add_parser("migrations", help="Show migration status")
    p_migrations.add_argument("--db-path", type=Path, help="Database path (default from settings)")
    p_migrations.set_defaults(func=cmd_migrations)

    # verify
    p_verify = sub.add_parser("verify", help="Verify schema integrity")
    p_verify.add_argument("--db-path", type=Path, help="Database path (default from settings)")
    p_verify.set_defaults(func=cmd_verify)

    # export
    p_export = sub.add_parser("export", help="Write an inventory snapshot")
    p_export.add_argument("file", type=Path, help="Destination JSON file")
    p_export.set_defaults(func=cmd_export)

    # import
    p_import = sub.add_parser("import", help="Replace collections from a snapshot")
    p_import.add_argument("file", type=Path, help="Source JSON file")
    p_import.set_defaults(func=cmd_import)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
