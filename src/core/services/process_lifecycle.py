"""
Process lifecycle service.

A process reserves its material from stock when it is created and moves
from in-progress to completed exactly once. Completed is terminal; there is
no cancellation and the reservation is never released.
"""

import secrets
import string
import time

from src.config import get_logger, operation_context
from src.core.entities.base import utcnow
from src.core.entities.output import ProcessSummary
from src.core.entities.process import Process, ProcessSpec, ProcessStatus
from src.core.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    InvalidStateError,
    ProcessNotFoundError,
    ValidationError,
)
from src.core.interfaces.output_store import IOutputStore
from src.core.interfaces.process_store import IProcessStore
from src.core.interfaces.unit_of_work import IUnitOfWork
from src.core.services.stock_ledger import (
    StockLedgerService,
    require_non_negative,
    require_positive,
)
from src.core.units import DEFAULT_WEIGHT_DECIMALS, round_weight, to_kg, to_mm

logger = get_logger(__name__)

_BASE36 = string.digits + string.ascii_uppercase


def _to_base36(value: int) -> str:
    digits = []
    while True:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
        if value == 0:
            return "".join(reversed(digits))


class ProcessLifecycleService:
    """Create processes against stock and complete them."""

    def __init__(
        self,
        ledger: StockLedgerService,
        process_store: IProcessStore,
        output_store: IOutputStore,
        unit_of_work: IUnitOfWork,
        process_id_prefix: str = "PROC",
        weight_decimals: int = DEFAULT_WEIGHT_DECIMALS,
    ):
        self._ledger = ledger
        self._processes = process_store
        self._outputs = output_store
        self._uow = unit_of_work
        self._prefix = process_id_prefix
        self._decimals = weight_decimals

    def generate_process_code(self) -> str:
        """Human-readable process id: PREFIX-<base36 millis>-<5 random base36>."""
        millis = _to_base36(int(time.time() * 1000))
        suffix = "".join(secrets.choice(_BASE36) for _ in range(5))
        return f"{self._prefix}-{millis}-{suffix}".upper()

    @staticmethod
    def _validate(spec: ProcessSpec) -> None:
        if not spec.name.strip():
            raise ValidationError("name", "must not be empty", spec.name)
        require_positive("diameter", spec.diameter)
        require_positive("weight_used", spec.weight_used)
        require_positive("blade_diameter", spec.blade_diameter)
        require_positive("number_of_rods", spec.number_of_rods)
        require_non_negative("length_per_rod", spec.length_per_rod)
        require_non_negative("weight_per_rod", spec.weight_per_rod)
        require_non_negative("wastage_per_rod", spec.wastage_per_rod)
        require_non_negative("total_length", spec.total_length)

    async def create_process(self, spec: ProcessSpec) -> Process:
        """
        Start a process, reserving its weight from stock.

        The withdrawal, the process record and the blade diameter registration
        commit together.

        Raises:
            ValidationError: Empty name or duplicate process id.
            InvalidQuantityError: Non-positive or negative numeric input.
            InsufficientStockError: Less than weight_used is available.
        """
        self._validate(spec)
        if round_weight(spec.weight_used, self._decimals) <= 0:
            raise InvalidQuantityError("weight_used", spec.weight_used, "rounds to zero")

        code = spec.process_id.strip() if spec.process_id else self.generate_process_code()
        process = Process(
            name=spec.name.strip(),
            process_id=code,
            diameter=spec.diameter,
            weight_used=round_weight(spec.weight_used, self._decimals),
            blade_diameter=spec.blade_diameter,
            total_length=spec.total_length,
            number_of_rods=spec.number_of_rods,
            length_per_rod=to_mm(spec.length_per_rod, spec.length_unit),
            length_unit=spec.length_unit,
            weight_per_rod=round_weight(spec.weight_per_rod, self._decimals),
            wastage_per_rod=round_weight(
                to_kg(spec.wastage_per_rod, spec.wastage_unit), self._decimals
            ),
            wastage_unit=spec.wastage_unit,
        )

        with operation_context("create_process", process_id=process.id, diameter=spec.diameter):
            async with self._uow.transaction():
                if await self._processes.get_by_process_code(code) is not None:
                    raise ValidationError("process_id", "already exists", code)

                available = await self._ledger.available_weight(process.diameter)
                if process.weight_used > available:
                    raise InsufficientStockError(
                        process.diameter, process.weight_used, available
                    )

                await self._ledger.withdraw(
                    process.diameter,
                    process.weight_used,
                    process_id=process.id,
                    process_name=process.name,
                )
                await self._processes.create_process(process)
                await self._ledger.register_blade_diameter(process.blade_diameter)

            logger.info(
                "process_created",
                process_code=process.process_id,
                weight_used=process.weight_used,
                number_of_rods=process.number_of_rods,
            )

        return process

    async def complete_process(self, process_id: str, summary: ProcessSummary) -> Process:
        """
        Record the summary and move the process to completed.

        Raises:
            ProcessNotFoundError: Unknown process id.
            InvalidStateError: The process is not in progress.
        """
        async with self._uow.transaction():
            process = await self._processes.get_process(process_id)
            if process is None:
                raise ProcessNotFoundError(process_id)
            if not process.is_in_progress:
                raise InvalidStateError(
                    process_id, process.status.value, ProcessStatus.IN_PROGRESS.value
                )

            completed_at = utcnow()
            if not await self._processes.mark_completed(process_id, completed_at):
                raise InvalidStateError(
                    process_id, ProcessStatus.COMPLETED.value, ProcessStatus.IN_PROGRESS.value
                )
            await self._outputs.add_summary(summary)

        logger.info("process_completed", process_id=process_id)
        return process.model_copy(
            update={"status": ProcessStatus.COMPLETED, "completed_at": completed_at}
        )

    async def get_process(self, process_id: str) -> Process:
        """
        Look a process up by internal id or human-readable process id.

        Raises:
            ProcessNotFoundError: Neither matches.
        """
        process = await self._processes.get_process(process_id)
        if process is None:
            process = await self._processes.get_by_process_code(process_id)
        if process is None:
            raise ProcessNotFoundError(process_id)
        return process

    async def list_processes(self, status: ProcessStatus | None = None) -> list[Process]:
        return await self._processes.list_processes(status)
