# tests/conftest.py
from __future__ import annotations

import datetime
import io
from typing import List

import numpy as np
import pytest
from loguru import logger

from core.config import GeneratorConfig
from core.schema import REQUIRED_COMMODITIES
from journal.posting import Posting
from journal.sink import PostingSink
from prices.series import PriceIndex


@pytest.fixture(autouse=True)
def disable_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


class RecordingSink(PostingSink):
    """PostingSink that also keeps every emitted Posting for assertions."""

    def __init__(self, currency: str = "INR"):
        super().__init__(io.StringIO(), currency)
        self.postings: List[Posting] = []

    def emit(self, posting: Posting) -> None:
        super().emit(posting)
        self.postings.append(posting)

    @property
    def text(self) -> str:
        return self.stream.getvalue()


class MinRng:
    """Stand-in for np.random.Generator that always draws the lower bound."""

    def integers(self, low, high):
        return low


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def min_rng() -> MinRng:
    return MinRng()


@pytest.fixture
def start() -> datetime.date:
    return datetime.date(2014, 1, 1)


@pytest.fixture
def constant_index(start) -> PriceIndex:
    """Every commodity priced at 10 from the simulation start onward."""
    return PriceIndex.from_prices({c: [(start, 10.0)] for c in REQUIRED_COMMODITIES})


@pytest.fixture
def config(start) -> GeneratorConfig:
    return GeneratorConfig(
        start_date=start,
        end_date=datetime.date(2016, 1, 1),
        initial_balance=0.0,
        yearly_salary=500000.0,
        rent=10000.0,
        seed=7,
    )
