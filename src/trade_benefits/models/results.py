"""Result types — the contract between engine, analysis, and API.

Every model here is frozen: results are computed once and never mutated.
Monetary values are annual and in the currency of the inputs; day values
are calendar days.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


# ═══════════════════════════════════════════════════════════════════════════
# Calculator outputs
# ═══════════════════════════════════════════════════════════════════════════

class FinancialSummary(_Result):
    """Baseline P&L derived from the accounting profile."""

    revenue: float
    cost_of_sale: float
    gross_profit: float
    """revenue − cost_of_sale.  May be negative."""
    operational_costs: float
    net_profit: float
    """gross_profit − operational_costs.  May be negative."""


class ProcessSavings(_Result):
    """Annual process-cost savings from digitalisation.

    Two independent, additive streams: people cost and per-shipment cost,
    each scaled by the same efficiency factor.
    """

    efficiency: float
    """Efficiency as a fraction in [0, 1]."""
    people_cost_baseline: float
    """cost_per_person × (logistics/compliance + AP headcount)."""
    people_savings: float
    per_shipment_baseline: float
    """(customs + ancillary cost per shipment) × shipments per year."""
    per_shipment_savings: float
    total_process_savings: float
    """people_savings + per_shipment_savings."""


class CashConversionResult(_Result):
    """Cash-conversion-cycle change for one payment-timing choice.

    Sign conventions:
      - delta_ccc > 0               → cycle lengthens, more capital tied up
      - working_capital_change > 0  → more capital required
      - cash_released > 0           → cash freed
      - funding_impact > 0          → a COST; < 0 → a benefit
    """

    dso: float
    dio: float
    current_dpo: float
    """Days payable outstanding today = current payment terms."""
    new_dpo: float
    """Days payable outstanding under the scenario."""
    ccc_current: float
    """DIO + DSO − current_dpo."""
    ccc_new: float
    """DIO + DSO − new_dpo."""
    delta_ccc: float
    """ccc_new − ccc_current."""
    annual_cogs: float
    trade_cogs: float
    """annual_cogs × trade COGS share."""
    trade_cogs_share_percent: float
    working_capital_change: float
    """(trade_cogs / 365) × delta_ccc."""
    cash_released: float
    """−working_capital_change."""
    funding_impact: float
    """−cash_released × funding rate."""


class ScenarioInputs(_Result):
    """Normalised inputs echoed into the workings for traceability."""

    total_shipment_value_usd: float
    discount_percent: float
    uptake_percent: float
    funding_rate_percent: float
    current_payment_terms_days: float
    new_dpo: float


class ScenarioWorkings(_Result):
    """Full audit trail of one scenario — every intermediate value."""

    label: str
    inputs: ScenarioInputs
    process: ProcessSavings
    discount_benefit: float
    cash_conversion: CashConversionResult
    net_financing_benefit: float
    total_annual_benefit: float
    net_profit_before: float
    net_profit_after: float


class ScenarioResult(_Result):
    """Headline figures for one payment-timing scenario."""

    label: str
    discount_benefit: float
    """Shipment value × discount × uptake."""
    funding_impact: float
    """Positive = funding cost of the CCC change; negative = benefit."""
    net_financing_benefit: float
    """discount_benefit − funding_impact."""
    process_savings: float
    total_annual_benefit: float
    """process_savings + net_financing_benefit."""
    net_profit_before: float
    net_profit_after: float
    """net_profit_before + total_annual_benefit."""
    workings: ScenarioWorkings


class ResultsMeta(_Result):
    """Lane metadata passed through for display."""

    transit_and_clearance_days: float


class CalculatorResults(_Result):
    """Everything the results view needs: baseline plus both scenarios."""

    accounting: FinancialSummary
    at_shipment: ScenarioResult
    after_delivery: ScenarioResult
    meta: ResultsMeta

    @property
    def scenarios(self) -> list[ScenarioResult]:
        return [self.at_shipment, self.after_delivery]


# ═══════════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════════

class RankedScenario(_Result):
    """One scenario's place in the comparison."""

    rank: int
    label: str
    total_annual_benefit: float
    net_profit_after: float
    profit_improvement_pct: float | None = None
    """None when baseline net profit is zero."""


class ScenarioComparison(_Result):
    """Side-by-side ranking of the payment-timing scenarios."""

    ranking: list[RankedScenario]
    """Sorted by total_annual_benefit, best first."""
    best_label: str
    benefit_spread: float
    """Best minus worst total_annual_benefit (≥ 0)."""
