"""
Sample paisa.yaml written next to the generated journal.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

import yaml
from loguru import logger
from pydantic import BaseModel

from core.exceptions import OutputError
from prices.sources import DEFAULT_COMMODITIES, CommodityConfig

CONFIG_FILE_NAME = "paisa.yaml"
JOURNAL_FILE_NAME = "personal.ledger"
DB_FILE_NAME = "paisa.db"


class AllocationTarget(BaseModel):
    name: str
    target: int
    accounts: List[str]


DEFAULT_ALLOCATION_TARGETS = (
    AllocationTarget(name="Debt", target=40, accounts=["Assets:Debt:*"]),
    AllocationTarget(name="Equity", target=60, accounts=["Assets:Equity:*"]),
)


class SampleConfig(BaseModel):
    journal_path: str
    db_path: str
    allocation_targets: List[AllocationTarget]
    commodities: List[CommodityConfig]

    @classmethod
    def for_directory(
        cls,
        directory: Union[str, Path],
        commodities: Sequence[CommodityConfig] = DEFAULT_COMMODITIES,
    ) -> "SampleConfig":
        directory = Path(directory).resolve()
        return cls(
            journal_path=str(directory / JOURNAL_FILE_NAME),
            db_path=str(directory / DB_FILE_NAME),
            allocation_targets=list(DEFAULT_ALLOCATION_TARGETS),
            commodities=list(commodities),
        )

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.model_dump(exclude_none=True), sort_keys=False)


def write_sample_config(
    directory: Union[str, Path],
    commodities: Sequence[CommodityConfig] = DEFAULT_COMMODITIES,
) -> Path:
    path = Path(directory) / CONFIG_FILE_NAME
    logger.info("Generating config file: {}", path)
    config = SampleConfig.for_directory(directory, commodities)
    try:
        path.write_text(config.to_yaml(), encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Failed to write config file {path}: {exc}") from exc
    return path
