"""Mini README: FastAPI-powered home screen for Pocketledger.

Structure:
    * create_application - application factory wiring routes and templates.
    * Quick actions - "Add money" credits a fixed amount, "Exchange" resets.
    * JSON API - balance, transaction list, and caller-described additions.

The interface is a thin collaborator of ``LedgerStore``: it stamps ids and
dates for new transactions, calls the store, and renders whatever the store
reports on the next read. Ledger rejections become HTTP errors and never
leave a partial change behind.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from ..configuration import PocketLedgerSettings, get_settings
from ..ledger import DuplicateIdError, LedgerStore, Transaction, ValidationError
from ..logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)


def _new_transaction_id() -> str:
    return uuid.uuid4().hex


def create_application(
    store: Optional[LedgerStore] = None,
    settings: Optional[PocketLedgerSettings] = None,
) -> FastAPI:
    """Create the FastAPI application around an injected ledger store."""

    app = FastAPI(title="Pocketledger Home", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

    ledger = store if store is not None else LedgerStore()
    settings = settings or get_settings()
    configure_root_logger(settings.effective_log_level)
    app.state.ledger = ledger

    def record(transaction: Transaction) -> JSONResponse:
        try:
            ledger.add_transaction(transaction)
        except ValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        except DuplicateIdError as error:
            raise HTTPException(status_code=409, detail=str(error)) from error
        return JSONResponse(
            {"transaction": transaction.as_dict(), "balance": ledger.balance()},
            status_code=201,
        )

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the balance and transaction list."""

        transactions = ledger.history()
        balance = sum(transaction.amount for transaction in transactions)
        LOGGER.debug("Rendering dashboard with %s transactions", len(transactions))
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "balance": balance,
                "transactions": transactions,
                "currency": settings.currency_symbol,
                "quick_deposit_title": settings.quick_deposit_title,
            },
        )

    @app.get("/api/balance")
    async def read_balance() -> JSONResponse:
        """Return the current derived balance."""

        return JSONResponse({"balance": ledger.balance(), "currency": settings.currency_symbol})

    @app.get("/api/transactions")
    async def list_transactions() -> JSONResponse:
        """Return the balance and history captured together."""

        return JSONResponse(ledger.export_snapshot())

    @app.post("/api/transactions")
    async def add_transaction(
        title: str = Form(...),
        amount: float = Form(...),
        transaction_id: Optional[str] = Form(None),
        occurred_at: Optional[datetime] = Form(None),
    ) -> JSONResponse:
        """Record a transaction described by the caller."""

        transaction = Transaction(
            id=transaction_id if transaction_id is not None else _new_transaction_id(),
            title=title,
            amount=amount,
            date=occurred_at or datetime.now(timezone.utc),
        )
        return record(transaction)

    @app.post("/add-money")
    async def add_money() -> JSONResponse:
        """Credit the configured quick deposit."""

        transaction = Transaction(
            id=_new_transaction_id(),
            title=settings.quick_deposit_title,
            amount=settings.quick_deposit_amount,
            date=datetime.now(timezone.utc),
        )
        return record(transaction)

    @app.post("/exchange")
    async def exchange() -> JSONResponse:
        """Reset the ledger to its empty state."""

        ledger.clear_history()
        return JSONResponse(ledger.export_snapshot())

    return app
