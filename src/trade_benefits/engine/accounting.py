"""Accounting summary — revenue, cost of sale, opex → gross & net profit."""

from __future__ import annotations

from trade_benefits.config.accounting import AccountingProfile
from trade_benefits.models.results import FinancialSummary


def compute_financials(accounting: AccountingProfile) -> FinancialSummary:
    """Derive gross and net profit.  Results are not clamped."""
    gross_profit = accounting.revenue - accounting.cost_of_sale
    net_profit = gross_profit - accounting.operational_costs

    return FinancialSummary(
        revenue=accounting.revenue,
        cost_of_sale=accounting.cost_of_sale,
        gross_profit=gross_profit,
        operational_costs=accounting.operational_costs,
        net_profit=net_profit,
    )
