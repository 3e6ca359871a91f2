"""Abstract interface for process storage."""

from abc import ABC, abstractmethod
from datetime import datetime

from src.core.entities.process import Process, ProcessStatus


class IProcessStore(ABC):
    """Interface for manufacturing process persistence."""

    @abstractmethod
    async def create_process(self, process: Process) -> Process:
        """Store a new process."""
        pass

    @abstractmethod
    async def get_process(self, process_id: str) -> Process | None:
        """Get process by internal ID."""
        pass

    @abstractmethod
    async def get_by_process_code(self, code: str) -> Process | None:
        """Get process by its human-readable process id."""
        pass

    @abstractmethod
    async def list_processes(self, status: ProcessStatus | None = None) -> list[Process]:
        """List processes in creation order, optionally filtered by status."""
        pass

    @abstractmethod
    async def mark_completed(self, process_id: str, completed_at: datetime) -> bool:
        """
        Move an in-progress process to completed.

        Conditional on the current status: returns False when the process is
        missing or already completed, so concurrent completions cannot both win.
        """
        pass
