"""
Grouping and reporting service.

Read-only rollups over processes and their outputs, filtered by a single
process or by a process group, plus management of the groups themselves.
A process filter takes precedence over a group filter.
"""

from src.config import get_logger
from src.core.entities.group import ProcessGroup
from src.core.entities.process import Process
from src.core.entities.report import (
    FinishedGoodRow,
    NonConformingRow,
    ProcessDetailRow,
    RejectedRow,
    ReportKind,
    ReportRow,
    WeightLossRow,
)
from src.core.entities.stock import DiameterStock
from src.core.exceptions import ProcessGroupNotFoundError, ValidationError
from src.core.interfaces.group_store import IGroupStore
from src.core.interfaces.output_store import IOutputStore
from src.core.interfaces.process_store import IProcessStore
from src.core.interfaces.stock_store import IStockStore
from src.core.interfaces.unit_of_work import IUnitOfWork
from src.core.units import DEFAULT_WEIGHT_DECIMALS, round_weight

logger = get_logger(__name__)


def percentage(part: float, whole: float) -> float:
    """part / whole as a percentage with 2 decimals, 0 when whole is 0."""
    if whole <= 0:
        return 0.0
    return round(part / whole * 100, 2)


class ReportingService:
    """Reports by diameter, process and group."""

    def __init__(
        self,
        stock_store: IStockStore,
        process_store: IProcessStore,
        output_store: IOutputStore,
        group_store: IGroupStore,
        unit_of_work: IUnitOfWork,
        weight_decimals: int = DEFAULT_WEIGHT_DECIMALS,
    ):
        self._stock = stock_store
        self._processes = process_store
        self._outputs = output_store
        self._groups = group_store
        self._uow = unit_of_work
        self._decimals = weight_decimals

    def _round(self, value: float) -> float:
        return round_weight(value, self._decimals)

    async def stats_by_diameter(self) -> list[DiameterStock]:
        """Available weight and entry count per diameter."""
        rows = await self._stock.weight_by_diameter()
        return [
            DiameterStock(diameter=diameter, weight=self._round(weight), entries=count)
            for diameter, weight, count in rows
        ]

    async def _resolve_process_id(self, ref: str) -> str:
        """Internal id for an internal or human-readable process id."""
        if await self._processes.get_process(ref) is not None:
            return ref
        process = await self._processes.get_by_process_code(ref)
        return process.id if process is not None else ref

    async def _scope(
        self,
        process_id: str | None,
        group_id: str | None,
    ) -> list[str] | None:
        """Process ids a report is restricted to, or None for all processes."""
        if process_id:
            return [await self._resolve_process_id(process_id)]
        if group_id:
            group = await self._groups.get_group(group_id)
            if group is None:
                raise ProcessGroupNotFoundError(group_id)
            return list(group.process_ids)
        return None

    async def _process_map(self, scope: list[str] | None) -> dict[str, Process]:
        processes = await self._processes.list_processes()
        if scope is not None:
            wanted = set(scope)
            processes = [p for p in processes if p.id in wanted]
        return {p.id: p for p in processes}

    async def process_details(
        self,
        process_id: str | None = None,
        group_id: str | None = None,
    ) -> list[ProcessDetailRow]:
        """Each process joined with its outputs, summary and efficiency figures."""
        scope = await self._scope(process_id, group_id)
        processes = await self._process_map(scope)
        ids = list(processes)

        finished = await self._outputs.list_finished_goods(ids)
        non_conforming = await self._outputs.list_non_conforming(ids)
        rejected = await self._outputs.list_rejected(ids)
        weight_loss = await self._outputs.list_weight_loss(ids)
        summaries = {s.process_id: s for s in await self._outputs.list_summaries(ids)}

        rows = []
        for process in processes.values():
            pf = [r for r in finished if r.process_id == process.id]
            pn = [r for r in non_conforming if r.process_id == process.id]
            pr = [r for r in rejected if r.process_id == process.id]
            pw = [r for r in weight_loss if r.process_id == process.id]
            summary = summaries.get(process.id)

            finished_weight = self._round(sum(r.weight for r in pf))
            rejected_weight = self._round(sum(r.weight for r in pr))
            total_loss = self._round(sum(r.weight for r in pw))

            rows.append(
                ProcessDetailRow(
                    id=process.id,
                    process_id=process.process_id,
                    process_name=process.name,
                    diameter=process.diameter,
                    weight_used=process.weight_used,
                    blade_diameter=process.blade_diameter,
                    number_of_rods=process.number_of_rods,
                    status=process.status,
                    created_at=process.created_at,
                    finished_goods_count=sum(r.count for r in pf),
                    finished_goods_weight=finished_weight,
                    non_conforming_count=sum(r.count for r in pn),
                    non_conforming_weight=self._round(sum(r.weight for r in pn)),
                    rejected_count=sum(r.count for r in pr),
                    rejected_weight=rejected_weight,
                    total_weight_loss=total_loss,
                    remaining_weight=summary.remaining_weight if summary else 0.0,
                    added_back_to_stock=summary.added_back_to_stock if summary else False,
                    efficiency=percentage(finished_weight, process.weight_used),
                    waste_percentage=percentage(total_loss + rejected_weight, process.weight_used),
                )
            )
        return rows

    async def report(
        self,
        kind: ReportKind,
        process_id: str | None = None,
        group_id: str | None = None,
    ) -> list[ReportRow]:
        """
        Rows of the fixed schema for a report kind.

        Raises:
            ProcessGroupNotFoundError: group_id given (without process_id) and unknown.
        """
        if kind == ReportKind.PROCESS_DETAILS:
            return await self.process_details(process_id, group_id)

        scope = await self._scope(process_id, group_id)
        names = {p.id: p.name for p in (await self._process_map(None)).values()}

        if kind == ReportKind.FINISHED_GOODS:
            return [
                FinishedGoodRow(process_name=names.get(r.process_id, ""), **r.model_dump())
                for r in await self._outputs.list_finished_goods(scope)
            ]
        if kind == ReportKind.NON_CONFORMING:
            return [
                NonConformingRow(process_name=names.get(r.process_id, ""), **r.model_dump())
                for r in await self._outputs.list_non_conforming(scope)
            ]
        if kind == ReportKind.REJECTED:
            return [
                RejectedRow(process_name=names.get(r.process_id, ""), **r.model_dump())
                for r in await self._outputs.list_rejected(scope)
            ]
        return [
            WeightLossRow(process_name=names.get(r.process_id, ""), **r.model_dump())
            for r in await self._outputs.list_weight_loss(scope)
        ]

    # Process groups

    async def _validate_members(self, process_ids: list[str]) -> list[str]:
        if not process_ids:
            raise ValidationError("process_ids", "must not be empty")
        members: list[str] = []
        for ref in process_ids:
            process = await self._processes.get_process(ref)
            if process is None:
                process = await self._processes.get_by_process_code(ref)
            if process is None:
                raise ValidationError("process_ids", "unknown process", ref)
            if process.id not in members:
                members.append(process.id)
        return members

    @staticmethod
    def _validate_name(name: str) -> str:
        if not name or not name.strip():
            raise ValidationError("name", "must not be empty", name)
        return name.strip()

    async def create_group(self, name: str, process_ids: list[str]) -> ProcessGroup:
        """
        Create a named set of existing processes.

        Raises:
            ValidationError: Empty name, empty id list or unknown process id.
        """
        name = self._validate_name(name)
        async with self._uow.transaction():
            members = await self._validate_members(process_ids)
            return await self._groups.create_group(
                ProcessGroup(name=name, process_ids=members)
            )

    async def get_group(self, group_id: str) -> ProcessGroup:
        group = await self._groups.get_group(group_id)
        if group is None:
            raise ProcessGroupNotFoundError(group_id)
        return group

    async def list_groups(self) -> list[ProcessGroup]:
        return await self._groups.list_groups()

    async def update_group(
        self,
        group_id: str,
        name: str | None = None,
        process_ids: list[str] | None = None,
    ) -> ProcessGroup:
        """Rename a group and/or replace its members."""
        async with self._uow.transaction():
            group = await self.get_group(group_id)
            if name is not None:
                group.name = self._validate_name(name)
            if process_ids is not None:
                group.process_ids = await self._validate_members(process_ids)
            await self._groups.update_group(group)
        return group

    async def delete_group(self, group_id: str) -> None:
        async with self._uow.transaction():
            if not await self._groups.delete_group(group_id):
                raise ProcessGroupNotFoundError(group_id)
