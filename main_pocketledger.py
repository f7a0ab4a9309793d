"""Mini README: Entry point CLI for launching the Pocketledger home screen.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port, and production flags. Logging is configured from
settings before the server boots.
"""

from __future__ import annotations

import typer
import uvicorn

from pocketledger.configuration import get_settings
from pocketledger.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch and manage the Pocketledger home screen service.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload even in development)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.effective_log_level)

    # Browsers cannot open the 0.0.0.0 wildcard, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Pocketledger on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "pocketledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=settings.is_development and not production,
    )


if __name__ == "__main__":
    cli()
