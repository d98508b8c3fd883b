"""Configuration models — the three input records and their bundle."""

from trade_benefits.config.footprint import TradeFootprint
from trade_benefits.config.process import ProcessCostProfile
from trade_benefits.config.accounting import AccountingProfile
from trade_benefits.config.state import CalculatorState, build_state, default_state

__all__ = [
    "TradeFootprint",
    "ProcessCostProfile",
    "AccountingProfile",
    "CalculatorState",
    "build_state",
    "default_state",
]
