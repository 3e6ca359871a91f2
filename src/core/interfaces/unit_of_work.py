"""Abstract interface for atomic multi-store operations."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class IUnitOfWork(ABC):
    """
    Scope in which every store write either commits together or not at all.

    Nested scopes join the outermost one.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open (or join) a transaction covering all stores."""
        pass
