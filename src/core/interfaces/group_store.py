"""Abstract interface for process group storage."""

from abc import ABC, abstractmethod

from src.core.entities.group import ProcessGroup


class IGroupStore(ABC):
    """Interface for process group persistence."""

    @abstractmethod
    async def create_group(self, group: ProcessGroup) -> ProcessGroup:
        pass

    @abstractmethod
    async def get_group(self, group_id: str) -> ProcessGroup | None:
        pass

    @abstractmethod
    async def list_groups(self) -> list[ProcessGroup]:
        """List groups in creation order."""
        pass

    @abstractmethod
    async def update_group(self, group: ProcessGroup) -> bool:
        """Replace name and members. Returns False if the group does not exist."""
        pass

    @abstractmethod
    async def delete_group(self, group_id: str) -> bool:
        pass
