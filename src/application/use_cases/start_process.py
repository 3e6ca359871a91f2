"""Start Process Use Case: create a process and reserve its stock."""

from src.application.dto.requests import CreateProcessRequest
from src.config import get_logger
from src.core.entities.process import Process, ProcessSpec
from src.core.services.process_lifecycle import ProcessLifecycleService

logger = get_logger(__name__)


class StartProcessUseCase:
    """Create a process; the reserved weight leaves stock immediately."""

    def __init__(self, lifecycle: ProcessLifecycleService | None = None):
        self._lifecycle = lifecycle

    def _get_lifecycle(self) -> ProcessLifecycleService:
        if self._lifecycle is None:
            from src.application.services import get_process_lifecycle_service

            self._lifecycle = get_process_lifecycle_service()
        return self._lifecycle

    async def execute(self, request: CreateProcessRequest) -> Process:
        """Execute start process use case."""
        logger.info(
            "start_process_started",
            name=request.name,
            diameter=request.diameter,
            weight_used=request.weight_used,
        )
        spec = ProcessSpec.model_validate(request.model_dump())
        return await self._get_lifecycle().create_process(spec)
