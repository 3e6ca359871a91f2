"""Process grouping entities."""

from datetime import datetime

from pydantic import Field

from src.core.entities.base import LedgerModel, new_id, utcnow


class ProcessGroup(LedgerModel):
    """User-defined named set of process ids, used only for reporting."""

    id: str = Field(default_factory=new_id)
    name: str
    process_ids: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
