"""Mini README: Ledger core for the Pocketledger home screen.

This package holds the in-memory transaction history and the balance derived
from it. Interfaces receive a ``LedgerStore`` instance from their owner rather
than importing a shared global, which keeps the store easy to test and lets
several surfaces read the same state.
"""

from .store import DuplicateIdError, LedgerError, LedgerStore, Transaction, ValidationError

__all__ = ["DuplicateIdError", "LedgerError", "LedgerStore", "Transaction", "ValidationError"]
