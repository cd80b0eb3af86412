from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Optional

import typer

from crypto_tracker.config import load_config
from crypto_tracker.providers.coingecko import CoinGeckoClient
from crypto_tracker.ui.tui.app import CryptoTrackerTUI
from crypto_tracker.utils.errors import ConfigurationError, CryptoTrackerError
from crypto_tracker.utils.logging import get_logger


logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Crypto Tracker CLI")


@app.command()
def run(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file overriding the defaults"),
    refresh_interval: Optional[float] = typer.Option(
        None, "--refresh-interval", "-r", min=0, help="Seconds between refreshes (0 disables)"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override logging level, e.g. DEBUG"),
):
    """Show live prices in a full-screen table. Press 'q' to quit."""

    if log_level:
        os.environ["LOG_LEVEL"] = log_level

    try:
        cfg = load_config(config)
    except ConfigurationError as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    client = CoinGeckoClient(base_url=cfg.coingecko_base_url)
    tui = CryptoTrackerTUI(
        client,
        refresh_interval=cfg.refresh_interval if refresh_interval is None else refresh_interval,
    )

    try:
        asyncio.run(tui.run())
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except CryptoTrackerError as e:
        logger.error(f"Crypto Tracker failed: {e}")
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
