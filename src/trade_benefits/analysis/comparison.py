"""Scenario comparison — rank the payment options, profit uplift.

The engine hands back two profit figures per scenario; turning them into a
percentage is done here, where a zero baseline can be handled explicitly.
"""

from __future__ import annotations

from trade_benefits.models.results import (
    CalculatorResults,
    RankedScenario,
    ScenarioComparison,
    ScenarioResult,
)


def profit_improvement_pct(scenario: ScenarioResult) -> float | None:
    """Net-profit uplift in percent, or ``None`` for a zero baseline.

    A negative baseline gives a ratio whose sign is hard to read; it is
    still returned as computed.
    """
    if scenario.net_profit_before == 0:
        return None
    return (scenario.net_profit_after / scenario.net_profit_before - 1.0) * 100.0


def compare_scenarios(results: CalculatorResults) -> ScenarioComparison:
    """Rank scenarios by total annual benefit (best first, ties keep order)."""
    ordered = sorted(results.scenarios, key=lambda s: s.total_annual_benefit, reverse=True)

    ranking = [
        RankedScenario(
            rank=i,
            label=s.label,
            total_annual_benefit=s.total_annual_benefit,
            net_profit_after=s.net_profit_after,
            profit_improvement_pct=profit_improvement_pct(s),
        )
        for i, s in enumerate(ordered, start=1)
    ]

    return ScenarioComparison(
        ranking=ranking,
        best_label=ordered[0].label,
        benefit_spread=ordered[0].total_annual_benefit - ordered[-1].total_annual_benefit,
    )
