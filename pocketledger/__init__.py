"""Mini README: Core package initializer for Pocketledger.

Exposes the ledger primitives and the logger factory so callers can reach the
common entry points without knowing the module layout. Heavy interface
dependencies (FastAPI, Jinja2) stay behind ``pocketledger.interface``.
"""

from .ledger import LedgerStore, Transaction
from .logging_utils import get_logger

__all__ = ["LedgerStore", "Transaction", "get_logger"]
