"""Mini README: Interactive interfaces for Pocketledger.

Exports the FastAPI application factory that serves the home screen and its
JSON API. Other surfaces reading the same ledger should live alongside it.
"""

from .web_app import create_application

__all__ = ["create_application"]
