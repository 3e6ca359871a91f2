"""
Output reconciliation service.

Balances what a process reports (finished goods, non-conforming items,
rejects, weight loss) against the weight it reserved, derives the leftover,
and finalizes the process atomically.
"""

from dataclasses import dataclass

from src.config import get_logger, operation_context
from src.core.entities.output import (
    FinishedGood,
    FinishedGoodsInput,
    LeftoverMaterial,
    NonConformingItem,
    ProcessOutputs,
    ProcessSummary,
    Reconciliation,
    RejectedItem,
    WeightLossItem,
)
from src.core.entities.process import Process, ProcessStatus
from src.core.exceptions import InvalidStateError, ProcessNotFoundError
from src.core.interfaces.output_store import IOutputStore
from src.core.interfaces.process_store import IProcessStore
from src.core.interfaces.unit_of_work import IUnitOfWork
from src.core.services.process_lifecycle import ProcessLifecycleService
from src.core.services.stock_ledger import (
    DepositResult,
    StockLedgerService,
    require_non_negative,
)
from src.core.units import DEFAULT_WEIGHT_DECIMALS, round_weight, to_mm

logger = get_logger(__name__)


@dataclass
class FinalizeResult:
    """Everything written when a process is finalized."""

    process: Process
    summary: ProcessSummary
    reconciliation: Reconciliation
    finished_good: FinishedGood | None = None
    non_conforming: NonConformingItem | None = None
    rejected: RejectedItem | None = None
    weight_loss: WeightLossItem | None = None
    leftover: LeftoverMaterial | None = None
    deposit: DepositResult | None = None


def validate_outputs(outputs: ProcessOutputs) -> None:
    """Raise InvalidQuantityError for any negative count, weight or override."""
    for prefix, line in (
        ("finished_goods", outputs.finished_goods),
        ("non_conforming", outputs.non_conforming),
        ("rejected", outputs.rejected),
    ):
        if line is None:
            continue
        require_non_negative(f"{prefix}.count", line.count)
        require_non_negative(f"{prefix}.weight_per_item", line.weight_per_item)
        require_non_negative(f"{prefix}.height", getattr(line, "height", None))
    require_non_negative("weight_loss_per_rod", outputs.weight_loss_per_rod)
    require_non_negative("weight_loss_override", outputs.weight_loss_override)
    require_non_negative("leftover_override", outputs.leftover_override)


class OutputReconciliationService:
    """Reconcile process outputs and finalize processes."""

    def __init__(
        self,
        lifecycle: ProcessLifecycleService,
        ledger: StockLedgerService,
        process_store: IProcessStore,
        output_store: IOutputStore,
        unit_of_work: IUnitOfWork,
        weight_decimals: int = DEFAULT_WEIGHT_DECIMALS,
        warn_on_clamp: bool = True,
    ):
        self._lifecycle = lifecycle
        self._ledger = ledger
        self._processes = process_store
        self._outputs = output_store
        self._uow = unit_of_work
        self._decimals = weight_decimals
        self._warn_on_clamp = warn_on_clamp

    def _round(self, value: float) -> float:
        return round_weight(value, self._decimals)

    def default_outputs(self, process: Process) -> ProcessOutputs:
        """Prefill: every rod becomes one finished item at the planned weight."""
        return ProcessOutputs(
            finished_goods=FinishedGoodsInput(
                count=process.number_of_rods,
                weight_per_item=process.weight_per_rod,
                height=process.length_per_rod,
            ),
            weight_loss_per_rod=process.wastage_per_rod,
        )

    def _line_weight(self, line) -> tuple[int, float]:
        if line is None:
            return 0, 0.0
        return line.count, self._round(line.count * line.weight_per_item)

    def reconcile(self, process: Process, outputs: ProcessOutputs) -> Reconciliation:
        """
        Compute the mass balance of a process. Reads and writes nothing.

        A derived leftover below zero is clamped to 0; the reconciliation then
        carries clamped=True and the raw negative discrepancy.
        """
        finished_count, finished = self._line_weight(outputs.finished_goods)
        nc_count, non_conforming = self._line_weight(outputs.non_conforming)
        rejected_count, rejected = self._line_weight(outputs.rejected)

        per_rod = (
            outputs.weight_loss_per_rod
            if outputs.weight_loss_per_rod is not None
            else process.wastage_per_rod
        )
        if outputs.weight_loss_override is not None:
            weight_loss = self._round(outputs.weight_loss_override)
        else:
            weight_loss = self._round(per_rod * (finished_count + nc_count + rejected_count))

        consumed = self._round(finished + non_conforming + rejected + weight_loss)
        discrepancy = self._round(process.weight_used - consumed)

        clamped = False
        if outputs.leftover_override is not None:
            leftover = self._round(outputs.leftover_override)
        else:
            leftover = max(0.0, discrepancy)
            clamped = discrepancy < 0

        if clamped and self._warn_on_clamp:
            logger.warning(
                "conservation_discrepancy_clamped",
                process_id=process.id,
                weight_used=process.weight_used,
                accounted=consumed,
                discrepancy=discrepancy,
            )

        return Reconciliation(
            weight_used=process.weight_used,
            finished_weight=finished,
            non_conforming_weight=non_conforming,
            rejected_weight=rejected,
            weight_loss_per_rod=self._round(per_rod),
            weight_loss_weight=weight_loss,
            leftover_weight=leftover,
            total_accounted=self._round(consumed + leftover),
            discrepancy=discrepancy,
            clamped=clamped,
        )

    async def preview(self, process_id: str, outputs: ProcessOutputs) -> Reconciliation:
        """Reconcile against a stored process without writing anything."""
        validate_outputs(outputs)
        process = await self._lifecycle.get_process(process_id)
        return self.reconcile(process, outputs)

    async def finalize(
        self,
        process_id: str,
        outputs: ProcessOutputs,
        add_leftover_to_stock: bool = False,
    ) -> FinalizeResult:
        """
        Record outputs, summary and leftover, and complete the process.

        Everything commits in one transaction or not at all.

        Raises:
            InvalidQuantityError: Negative count, weight or override.
            ProcessNotFoundError: Unknown process.
            InvalidStateError: The process is already completed.
        """
        validate_outputs(outputs)

        with operation_context("finalize", process_id=process_id):
            async with self._uow.transaction():
                process = await self._processes.get_process(process_id)
                if process is None:
                    process = await self._processes.get_by_process_code(process_id)
                if process is None:
                    raise ProcessNotFoundError(process_id)
                if not process.is_in_progress:
                    raise InvalidStateError(
                        process.id, process.status.value, ProcessStatus.IN_PROGRESS.value
                    )

                rec = self.reconcile(process, outputs)
                result = FinalizeResult(
                    process=process,
                    reconciliation=rec,
                    summary=ProcessSummary(
                        process_id=process.id,
                        total_weight_used=process.weight_used,
                        total_weight_loss=rec.weight_loss_weight,
                        remaining_weight=rec.leftover_weight,
                        weight_loss_per_rod=rec.weight_loss_per_rod,
                        added_back_to_stock=add_leftover_to_stock,
                    ),
                )
                await self._record_outputs(process, outputs, rec, result)

                if add_leftover_to_stock and rec.leftover_weight > 0:
                    result.deposit = await self._ledger.deposit(
                        process.diameter,
                        rec.leftover_weight,
                        register=False,
                        process_id=process.id,
                        process_name=process.name,
                    )
                    result.leftover = await self._outputs.add_leftover(
                        LeftoverMaterial(
                            process_id=process.id,
                            diameter=process.diameter,
                            weight=rec.leftover_weight,
                        )
                    )

                result.process = await self._lifecycle.complete_process(
                    process.id, result.summary
                )

            logger.info(
                "process_finalized",
                finished_weight=rec.finished_weight,
                weight_loss=rec.weight_loss_weight,
                leftover=rec.leftover_weight,
                added_back_to_stock=result.deposit is not None,
            )

        return result

    async def _record_outputs(
        self,
        process: Process,
        outputs: ProcessOutputs,
        rec: Reconciliation,
        result: FinalizeResult,
    ) -> None:
        """Create one record per reported category with a non-zero count."""
        finished = outputs.finished_goods
        if finished is not None and finished.count:
            result.finished_good = await self._outputs.add_finished_good(
                FinishedGood(
                    process_id=process.id,
                    count=finished.count,
                    height=self._height_mm(finished),
                    weight_per_item=finished.weight_per_item,
                    weight=rec.finished_weight,
                )
            )

        nc = outputs.non_conforming
        if nc is not None and nc.count:
            result.non_conforming = await self._outputs.add_non_conforming(
                NonConformingItem(
                    process_id=process.id,
                    count=nc.count,
                    height=self._height_mm(nc),
                    weight_per_item=nc.weight_per_item,
                    weight=rec.non_conforming_weight,
                    include_in_report=nc.include_in_report,
                )
            )

        rejected = outputs.rejected
        if rejected is not None and rejected.count:
            result.rejected = await self._outputs.add_rejected(
                RejectedItem(
                    process_id=process.id,
                    count=rejected.count,
                    weight_per_item=rejected.weight_per_item,
                    weight=rec.rejected_weight,
                    reason=rejected.reason,
                    include_in_report=rejected.include_in_report,
                )
            )

        if rec.weight_loss_weight > 0:
            result.weight_loss = await self._outputs.add_weight_loss(
                WeightLossItem(
                    process_id=process.id,
                    weight=rec.weight_loss_weight,
                    weight_loss_per_rod=rec.weight_loss_per_rod,
                )
            )

    @staticmethod
    def _height_mm(line: FinishedGoodsInput) -> float | None:
        if line.height is None:
            return None
        return to_mm(line.height, line.height_unit)
