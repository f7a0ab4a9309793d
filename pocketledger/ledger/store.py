"""Mini README: In-memory transaction ledger backing the home screen.

Structure:
    * LedgerError / ValidationError / DuplicateIdError - rejection hierarchy.
    * Transaction - immutable money-movement record with export helpers.
    * LedgerStore - owns the ordered history and derives the balance.

The balance is never stored. Every read sums the amounts of the current
history, so the displayed figure and the transaction list cannot drift apart.
History is append-only apart from ``clear_history``, which wipes it in one
step. All access goes through a single lock so UI handlers running on
different threads observe whole operations only.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from datetime import datetime
from numbers import Real
from typing import Dict, List, Set, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class LedgerError(ValueError):
    """Base class for transactions the ledger refuses to record."""


class ValidationError(LedgerError):
    """Raised when a transaction is malformed; ``field`` names the culprit."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid transaction {field}: {message}")
        self.field = field


class DuplicateIdError(LedgerError):
    """Raised when a transaction id is already present in the history."""

    def __init__(self, transaction_id: str) -> None:
        super().__init__(f"Transaction {transaction_id} already exists.")
        self.transaction_id = transaction_id


@dataclass(frozen=True, slots=True)
class Transaction:
    """Single money movement; positive amounts are credits."""

    id: str
    title: str
    amount: float
    date: datetime

    @property
    def is_credit(self) -> bool:
        """True when the transaction brings money in."""

        return self.amount > 0

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.id,
            "title": self.title,
            "amount": self.amount,
            "date": self.date.isoformat(),
        }


def _validate(transaction: object) -> None:
    """Check every field before the transaction may touch the history."""

    if not isinstance(transaction, Transaction):
        raise ValidationError("transaction", f"expected Transaction, got {type(transaction).__name__}")
    if not isinstance(transaction.id, str) or not transaction.id.strip():
        raise ValidationError("id", "must be a non-empty string")
    if not isinstance(transaction.title, str) or not transaction.title.strip():
        raise ValidationError("title", "must be a non-empty string")
    amount = transaction.amount
    # bool is a Real subclass but never a sensible amount
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise ValidationError("amount", f"must be numeric, got {amount!r}")
    if not math.isfinite(amount):
        raise ValidationError("amount", f"must be finite, got {amount!r}")
    if not isinstance(transaction.date, datetime):
        raise ValidationError("date", "must be a datetime instance")


class LedgerStore:
    """Ordered transaction history with a derived balance."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._history: List[Transaction] = []
        self._ids: Set[str] = set()
        LOGGER.debug("Ledger store initialised with an empty history")

    def __len__(self) -> int:
        with self._lock:
            return len(self._history)

    def balance(self) -> float:
        """Return the sum of all amounts, recomputed from the live history."""

        with self._lock:
            return self._sum_locked()

    def history(self) -> Tuple[Transaction, ...]:
        """Return a snapshot of the history in insertion order."""

        with self._lock:
            return tuple(self._history)

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a validated transaction to the end of the history.

        Raises ``ValidationError`` for malformed input and ``DuplicateIdError``
        when the id is already recorded. Either way nothing is appended.
        """

        try:
            _validate(transaction)
        except ValidationError as error:
            LOGGER.warning("Rejected transaction: %s", error)
            raise
        with self._lock:
            if transaction.id in self._ids:
                LOGGER.warning("Rejected duplicate transaction id %s", transaction.id)
                raise DuplicateIdError(transaction.id)
            self._history.append(transaction)
            self._ids.add(transaction.id)
            count = len(self._history)
        LOGGER.info(
            "Recorded transaction %s '%s' amount=%s (history size %s)",
            transaction.id,
            transaction.title,
            transaction.amount,
            count,
        )

    def clear_history(self) -> None:
        """Drop every transaction; the balance returns to zero."""

        with self._lock:
            removed = len(self._history)
            self._history = []
            self._ids = set()
        LOGGER.info("Cleared ledger history (%s transactions removed)", removed)

    def export_snapshot(self) -> Dict[str, object]:
        """Export balance and transactions captured under one lock hold."""

        with self._lock:
            transactions = [transaction.as_dict() for transaction in self._history]
            balance = self._sum_locked()
        LOGGER.debug("Exported snapshot with %s transactions", len(transactions))
        return {"balance": balance, "transactions": transactions}

    def _sum_locked(self) -> float:
        return float(sum(transaction.amount for transaction in self._history))
