from __future__ import annotations

from dataclasses import dataclass

from core.config import GeneratorConfig


@dataclass
class SimulationState:
    """Running balances of one simulation. Only the engine rules mutate it."""
    cash_balance: float
    epf_balance: float
    yearly_salary: float
    rent: float
    primary_equity_units: float = 0.0  # drawn down by the March sell

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "SimulationState":
        return cls(
            cash_balance=float(config.initial_balance),
            epf_balance=0.0,
            yearly_salary=float(config.yearly_salary),
            rent=float(config.rent),
        )
