"""
Stock ledger service.

Owns rod stock entries and the append-only inventory history. Stock is held
as discrete entries per diameter; withdrawals consume entries oldest first,
deleting the ones taken whole and shrinking the one that absorbs the
remainder. Every deposit and withdrawal appends exactly one ledger line.
"""

import math
from dataclasses import dataclass, field

from src.config import get_logger, operation_context
from src.core.entities.stock import (
    DiameterStock,
    InventoryStats,
    InventoryTransaction,
    RodStockEntry,
    TransactionType,
)
from src.core.exceptions import InsufficientStockError, InvalidQuantityError
from src.core.interfaces.stock_store import IStockStore
from src.core.interfaces.unit_of_work import IUnitOfWork
from src.core.units import DEFAULT_WEIGHT_DECIMALS, round_weight

logger = get_logger(__name__)


def require_positive(name: str, value: float) -> None:
    """Raise InvalidQuantityError unless value is a finite number > 0."""
    if not math.isfinite(value) or value <= 0:
        raise InvalidQuantityError(name, value)


def require_non_negative(name: str, value: float | None) -> None:
    """Raise InvalidQuantityError for negative or non-finite values (None passes)."""
    if value is not None and (not math.isfinite(value) or value < 0):
        raise InvalidQuantityError(name, value, "must not be negative")


@dataclass(frozen=True)
class EntryConsumption:
    """How much one withdrawal takes from one stock entry."""

    entry_id: str
    taken: float
    remaining: float

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0


@dataclass
class DepositResult:
    """Result of a deposit."""

    entry: RodStockEntry
    transaction: InventoryTransaction
    available: float
    diameter_registered: bool = False


@dataclass
class WithdrawalResult:
    """Result of a withdrawal."""

    transaction: InventoryTransaction
    available: float
    consumptions: list[EntryConsumption] = field(default_factory=list)


def plan_withdrawal(
    entries: list[RodStockEntry],
    amount: float,
    decimals: int = DEFAULT_WEIGHT_DECIMALS,
) -> list[EntryConsumption]:
    """
    Decide how a withdrawal of `amount` consumes `entries`.

    Entries are consumed in the order given (insertion order). An entry whose
    weight does not exceed what is still owed is taken whole; the next one
    absorbs the remainder and keeps the difference.

    Raises:
        InsufficientStockError: If the entries together hold less than amount.
    """
    available = round_weight(sum(e.weight for e in entries), decimals)
    if amount > available:
        diameter = entries[0].diameter if entries else 0.0
        raise InsufficientStockError(diameter, amount, available)

    plan: list[EntryConsumption] = []
    owed = round_weight(amount, decimals)
    for entry in entries:
        if owed <= 0:
            break
        if entry.weight <= owed:
            plan.append(EntryConsumption(entry.id, entry.weight, 0.0))
            owed = round_weight(owed - entry.weight, decimals)
        else:
            remaining = round_weight(entry.weight - owed, decimals)
            plan.append(EntryConsumption(entry.id, owed, max(remaining, 0.0)))
            owed = 0.0
    return plan


class StockLedgerService:
    """
    Deposit, withdraw and query rod stock.

    Every mutating call runs in a unit-of-work transaction, joining the
    caller's transaction when one is open.
    """

    def __init__(
        self,
        stock_store: IStockStore,
        unit_of_work: IUnitOfWork,
        weight_decimals: int = DEFAULT_WEIGHT_DECIMALS,
    ):
        self._store = stock_store
        self._uow = unit_of_work
        self._decimals = weight_decimals

    def _round(self, value: float) -> float:
        return round_weight(value, self._decimals)

    async def deposit(
        self,
        diameter: float,
        weight: float,
        length: float | None = None,
        *,
        register: bool = True,
        process_id: str | None = None,
        process_name: str | None = None,
    ) -> DepositResult:
        """
        Add a new stock entry and record an 'in' ledger line.

        Args:
            diameter: Rod diameter in mm.
            weight: Weight in kg.
            length: Optional total length in mm.
            register: Add the diameter to the known set. Leftover returns
                from a process pass False.
            process_id: Process the deposit comes from, if any.
            process_name: Name of that process.

        Raises:
            InvalidQuantityError: If diameter or weight is not positive.
        """
        require_positive("diameter", diameter)
        require_positive("weight", weight)
        require_non_negative("length", length)
        weight = self._round(weight)
        if weight <= 0:
            raise InvalidQuantityError("weight", weight, "rounds to zero")

        with operation_context("deposit", diameter=diameter, process_id=process_id):
            async with self._uow.transaction():
                entry = await self._store.add_entry(
                    RodStockEntry(diameter=diameter, weight=weight, total_length=length)
                )
                transaction = await self._store.add_transaction(
                    InventoryTransaction(
                        diameter=diameter,
                        weight=weight,
                        length=length,
                        type=TransactionType.IN,
                        process_id=process_id,
                        process_name=process_name,
                    )
                )
                registered = False
                if register:
                    registered = await self._store.add_diameter(diameter)
                available = self._round(await self._store.total_weight(diameter))

            logger.info("stock_deposited", weight=weight, available=available)

        return DepositResult(
            entry=entry,
            transaction=transaction,
            available=available,
            diameter_registered=registered,
        )

    async def available_weight(self, diameter: float) -> float:
        """Total weight held for a diameter (0.0 when none)."""
        return self._round(await self._store.total_weight(diameter))

    async def withdraw(
        self,
        diameter: float,
        amount: float,
        *,
        process_id: str | None = None,
        process_name: str | None = None,
    ) -> WithdrawalResult:
        """
        Remove `amount` kg of a diameter from stock.

        Either the full amount is withdrawn and one 'out' ledger line is
        appended, or nothing changes.

        Raises:
            InvalidQuantityError: If amount is not positive.
            InsufficientStockError: If less than amount is available.
        """
        require_positive("diameter", diameter)
        require_positive("amount", amount)
        amount = self._round(amount)

        with operation_context("withdraw", diameter=diameter, process_id=process_id):
            async with self._uow.transaction():
                entries = await self._store.list_entries(diameter)
                available = self._round(sum(e.weight for e in entries))
                if amount > available:
                    logger.warning(
                        "withdrawal_rejected",
                        requested=amount,
                        available=available,
                    )
                    raise InsufficientStockError(diameter, amount, available)

                plan = plan_withdrawal(entries, amount, self._decimals)
                for step in plan:
                    if step.exhausted:
                        await self._store.delete_entry(step.entry_id)
                    else:
                        await self._store.update_entry_weight(step.entry_id, step.remaining)

                transaction = await self._store.add_transaction(
                    InventoryTransaction(
                        diameter=diameter,
                        weight=amount,
                        type=TransactionType.OUT,
                        process_id=process_id,
                        process_name=process_name,
                    )
                )
                available_after = self._round(available - amount)

            logger.info(
                "stock_withdrawn",
                weight=amount,
                entries_touched=len(plan),
                available=available_after,
            )

        return WithdrawalResult(
            transaction=transaction,
            available=available_after,
            consumptions=plan,
        )

    async def register_diameter(self, diameter: float) -> bool:
        """Add a rod diameter to the known set. Returns True if it was new."""
        require_positive("diameter", diameter)
        async with self._uow.transaction():
            return await self._store.add_diameter(diameter)

    async def register_blade_diameter(self, diameter: float) -> bool:
        """Add a blade diameter to the known set. Returns True if it was new."""
        require_positive("blade_diameter", diameter)
        async with self._uow.transaction():
            return await self._store.add_blade_diameter(diameter)

    async def list_entries(self, diameter: float | None = None) -> list[RodStockEntry]:
        return await self._store.list_entries(diameter)

    async def list_diameters(self) -> list[float]:
        return await self._store.list_diameters()

    async def list_blade_diameters(self) -> list[float]:
        return await self._store.list_blade_diameters()

    async def history(
        self,
        newest_first: bool = False,
        process_id: str | None = None,
        limit: int | None = None,
    ) -> list[InventoryTransaction]:
        """Ledger lines, oldest first unless newest_first is set."""
        return await self._store.list_transactions(
            process_id=process_id,
            newest_first=newest_first,
            limit=limit,
        )

    async def inventory_stats(self) -> InventoryStats:
        """Overall totals with a per-diameter breakdown."""
        rows = await self._store.weight_by_diameter()
        by_diameter = [
            DiameterStock(diameter=diameter, weight=self._round(weight), entries=count)
            for diameter, weight, count in rows
        ]
        return InventoryStats(
            total_entries=sum(d.entries for d in by_diameter),
            total_weight=self._round(sum(d.weight for d in by_diameter)),
            by_diameter=by_diameter,
        )
