"""
Simulation runner — advances the calendar one month at a time and applies
the salary, expense and investment rules.

Two entry points:
  1. SimulationEngine.run(): drive the rules against any PostingSink
  2. generate_journal_file(): run into a file, all-or-nothing

The price index and the random generator are passed in explicitly; the
engine holds no process-wide state, so a seeded run is reproducible.
"""

from __future__ import annotations

import datetime
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import numpy as np
from loguru import logger

from core.config import GeneratorConfig
from core.exceptions import OutputError
from core.schema import REQUIRED_COMMODITIES
from core.utils import month_starts
from journal.commodity import CommodityLedger
from journal.sink import PostingSink
from prices.series import PriceIndex

from .rules import emit_expense, emit_investment, emit_salary
from .state import SimulationState

JOURNAL_FILE_MODE = 0o644


class SimulationEngine:
    """
    Usage:
        engine = SimulationEngine(config, prices, PostingSink(stream))
        state = engine.run()
    """

    def __init__(
        self,
        config: GeneratorConfig,
        prices: PriceIndex,
        sink: PostingSink,
        *,
        rng: Optional[np.random.Generator] = None,
    ):
        prices.require(REQUIRED_COMMODITIES)
        self.config = config
        self.prices = prices
        self.sink = sink
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.ledger = CommodityLedger(prices, sink)
        self.state = SimulationState.from_config(config)

    def step(self, month: datetime.date) -> None:
        """Apply one month of rules, in order: salary, expense, investment."""
        emit_salary(self.state, month, sink=self.sink, ledger=self.ledger, rng=self.rng)
        emit_expense(self.state, month, sink=self.sink, rng=self.rng)
        emit_investment(self.state, month, sink=self.sink, ledger=self.ledger)
        logger.debug(
            "{}: cash={:.2f} epf={:.2f} primary_equity_units={:.4f}",
            month,
            self.state.cash_balance,
            self.state.epf_balance,
            self.state.primary_equity_units,
        )

    def run(self, end: Optional[datetime.date] = None) -> SimulationState:
        """Step every month from the start date while the cursor is before `end`."""
        end = end or self.config.resolved_end_date()
        months = month_starts(self.config.start_date, end)
        for month in months:
            self.step(month)
        logger.info(
            "Simulated {} months ({} .. {}), {} postings",
            len(months),
            self.config.start_date,
            end,
            self.sink.count,
        )
        return self.state


def generate_journal_file(
    path: Union[str, Path],
    config: GeneratorConfig,
    prices: PriceIndex,
    *,
    rng: Optional[np.random.Generator] = None,
) -> SimulationState:
    """
    Run the simulation into `path`. The journal is written to a temporary file
    next to `path` and moved into place only when the whole run succeeded;
    on any error the temporary file is removed and the error propagates.
    """
    path = Path(path)
    logger.info("Generating journal file: {}", path)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as exc:
        raise OutputError(f"Cannot create journal file in {path.parent}: {exc}") from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as stream:
            engine = SimulationEngine(config, prices, PostingSink(stream, config.currency), rng=rng)
            state = engine.run()
        os.chmod(tmp_name, JOURNAL_FILE_MODE)
        os.replace(tmp_name, path)
    except OSError as exc:
        _discard(tmp_name)
        raise OutputError(f"Failed to write journal file {path}: {exc}") from exc
    except BaseException:
        _discard(tmp_name)
        raise
    return state


def _discard(tmp_name: str) -> None:
    if os.path.exists(tmp_name):
        os.unlink(tmp_name)
