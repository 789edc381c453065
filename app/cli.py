from __future__ import annotations

import datetime
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich import print

from core.config import START_YEAR, GeneratorConfig
from core.exceptions import GeneratorError
from core.log import configure_logging
from engine.runner import generate_journal_file
from prices.sources import (
    DEFAULT_COMMODITIES,
    ConstantPriceSource,
    CsvPriceSource,
    PriceSource,
    RemotePriceSource,
    load_price_index,
)

from .config_file import JOURNAL_FILE_NAME, write_sample_config

__version__ = "0.1.0"

app = typer.Typer(help="Sample personal-finance journal generator")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def init(
    directory: Optional[Path] = typer.Option(None, "--directory", "-d", help="Where to write paisa.yaml and personal.ledger"),
    seed: int = typer.Option(7, help="Random seed for salary/rent increments and expense fuzz"),
    start_year: int = typer.Option(START_YEAR, help="First simulated year (starts in January)"),
    prices_dir: Optional[Path] = typer.Option(None, help="Read <NAME>.csv price files instead of fetching"),
    constant_price: Optional[float] = typer.Option(None, help="Use a flat price for every commodity (offline)"),
    log_level: str = typer.Option("INFO", help="Log level"),
):
    """
    Generate a sample config file and a journal file.
    """
    configure_logging(log_level)
    directory = directory or Path.cwd()

    if prices_dir is not None and constant_price is not None:
        raise typer.BadParameter("use either --prices-dir or --constant-price, not both")

    try:
        config = GeneratorConfig(start_date=datetime.date(start_year, 1, 1), seed=seed)

        source: PriceSource
        if prices_dir is not None:
            source = CsvPriceSource(prices_dir)
        elif constant_price is not None:
            source = ConstantPriceSource(constant_price, config.start_date)
        else:
            source = RemotePriceSource()

        directory.mkdir(parents=True, exist_ok=True)
        write_sample_config(directory)
        prices = load_price_index(DEFAULT_COMMODITIES, source, start_date=config.start_date)
        generate_journal_file(directory / JOURNAL_FILE_NAME, config, prices)
    except GeneratorError as exc:
        logger.error("{}", exc)
        raise typer.Exit(code=1)

    print(f"[green]Wrote {directory / JOURNAL_FILE_NAME}[/green]")


def main():
    app()


if __name__ == "__main__":
    main()
