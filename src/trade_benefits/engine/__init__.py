"""Engine — pure, stateless benefit calculators."""

from trade_benefits.engine.accounting import compute_financials
from trade_benefits.engine.process_savings import compute_process_savings
from trade_benefits.engine.cash_conversion import compute_cash_conversion
from trade_benefits.engine.scenario import compute_scenario, compute_all_results

__all__ = [
    "compute_financials",
    "compute_process_savings",
    "compute_cash_conversion",
    "compute_scenario",
    "compute_all_results",
]
