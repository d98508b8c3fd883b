"""Narrative generator — plain-English interpretation of calculator results.

Converts raw ``CalculatorResults`` into structured text covering the
baseline P&L, each payment scenario, and which option comes out ahead.
Amounts are shown without a currency symbol; the inputs carry no currency.
"""

from __future__ import annotations

from trade_benefits.analysis.comparison import compare_scenarios, profit_improvement_pct
from trade_benefits.models.results import CalculatorResults, ScenarioResult


def _banner(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def _improvement_text(scenario: ScenarioResult) -> str:
    pct = profit_improvement_pct(scenario)
    return "n/a (zero baseline net profit)" if pct is None else f"{pct:+.1f}%"


def _scenario_section(s: ScenarioResult) -> list[str]:
    cc = s.workings.cash_conversion
    funding_word = "cost" if s.funding_impact > 0 else "benefit" if s.funding_impact < 0 else "neutral"
    cycle_word = "lengthens" if cc.delta_ccc > 0 else "shortens" if cc.delta_ccc < 0 else "is unchanged"

    return [
        "",
        *_banner(s.label.upper()),
        f"Process savings: {s.process_savings:,.0f}\n"
        f"Discount benefit (uptake-adjusted): {s.discount_benefit:,.0f}\n"
        f"Funding impact of CCC change: {s.funding_impact:,.0f} ({funding_word})\n"
        f"Net financing benefit: {s.net_financing_benefit:,.0f}\n"
        f"Total annual benefit: {s.total_annual_benefit:,.0f}",
        f"\nDPO moves from {cc.current_dpo:.0f} to {cc.new_dpo:.0f} days, so the cash "
        f"conversion cycle {cycle_word} by {abs(cc.delta_ccc):.0f} days "
        f"({cc.ccc_current:.0f} → {cc.ccc_new:.0f}).\n"
        f"Working capital change on {cc.trade_cogs:,.0f} of trade COGS: "
        f"{cc.working_capital_change:,.0f}",
        f"\nNet profit: {s.net_profit_before:,.0f} → {s.net_profit_after:,.0f} "
        f"({_improvement_text(s)})",
    ]


def generate_narrative(results: CalculatorResults) -> str:
    """Generate a plain-English narrative from calculator results.

    Returns a text block covering:
      1. Baseline accounting
      2. One section per payment scenario
      3. Recommendation
    """
    acc = results.accounting
    comparison = compare_scenarios(results)

    sections: list[str] = []

    # ── 1. Baseline ──
    sections.extend(_banner("BASELINE ACCOUNTING"))
    sections.append(
        f"Revenue: {acc.revenue:,.0f}\n"
        f"Cost of sale: {acc.cost_of_sale:,.0f}\n"
        f"Gross profit: {acc.gross_profit:,.0f}\n"
        f"Operational costs: {acc.operational_costs:,.0f}\n"
        f"Net profit: {acc.net_profit:,.0f}\n"
        f"Transit & clearance: {results.meta.transit_and_clearance_days:.0f} days"
    )

    # ── 2. Scenarios ──
    for scenario in results.scenarios:
        sections.extend(_scenario_section(scenario))

    # ── 3. Recommendation ──
    sections.append("")
    sections.extend(_banner("RECOMMENDATION"))
    best = comparison.ranking[0]
    sections.append(
        f"Best option: {best.label} "
        f"(total annual benefit {best.total_annual_benefit:,.0f})."
    )
    if comparison.benefit_spread > 0:
        sections.append(
            f"Beats the alternative by {comparison.benefit_spread:,.0f} per year."
        )
    else:
        sections.append("Both options deliver the same annual benefit.")
    if best.total_annual_benefit < 0:
        sections.append(
            "Even the best option reduces profit: the funding cost of paying "
            "earlier outweighs discount capture and process savings. Consider "
            "negotiating larger discounts or a lower funding rate."
        )

    return "\n".join(sections)
