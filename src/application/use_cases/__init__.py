"""Application use cases."""

from src.application.use_cases.finalize_process import FinalizeProcessUseCase
from src.application.use_cases.issue_stock import IssueStockUseCase
from src.application.use_cases.receive_stock import ReceiveStockUseCase
from src.application.use_cases.start_process import StartProcessUseCase
from src.application.use_cases.transfer_snapshot import (
    ExportSnapshotUseCase,
    ImportSnapshotUseCase,
)

__all__ = [
    "ReceiveStockUseCase",
    "IssueStockUseCase",
    "StartProcessUseCase",
    "FinalizeProcessUseCase",
    "ExportSnapshotUseCase",
    "ImportSnapshotUseCase",
]
