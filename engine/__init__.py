"""
Simulation engine — monthly salary/expense/investment rules and the runner.
"""

from .state import SimulationState
from .rules import emit_salary, emit_expense, emit_investment, emit_transaction
from .runner import SimulationEngine, generate_journal_file

__all__ = [
    "SimulationState",
    "SimulationEngine",
    "generate_journal_file",
    "emit_salary",
    "emit_expense",
    "emit_investment",
    "emit_transaction",
]
