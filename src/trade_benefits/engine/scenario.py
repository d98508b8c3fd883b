"""Scenario engine — process savings + discount capture + funding impact.

Entry point: ``compute_all_results(state)``
  Runs the two payment-timing scenarios side by side:
    (a) "Payment at shipment"     → new DPO = 0
    (b) "Payment after delivery"  → new DPO = transit & clearance + days after delivery

Both scenarios share the same process savings and baseline P&L; they differ
only in discount, uptake and the DPO they move the cash cycle to.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from trade_benefits.config.accounting import AccountingProfile
from trade_benefits.config.footprint import TradeFootprint
from trade_benefits.config.normalize import non_negative, percent
from trade_benefits.config.process import ProcessCostProfile
from trade_benefits.config.state import CalculatorState
from trade_benefits.engine.accounting import compute_financials
from trade_benefits.engine.cash_conversion import compute_cash_conversion
from trade_benefits.engine.process_savings import compute_process_savings
from trade_benefits.models.results import (
    CalculatorResults,
    ResultsMeta,
    ScenarioInputs,
    ScenarioResult,
    ScenarioWorkings,
)

AT_SHIPMENT_LABEL = "Payment at shipment"
AFTER_DELIVERY_LABEL = "Payment after delivery"


def compute_scenario(
    label: str,
    discount_percent: Any,
    uptake_percent: Any,
    new_dpo: Any,
    footprint: TradeFootprint,
    process: ProcessCostProfile,
    accounting: AccountingProfile,
) -> ScenarioResult:
    """Evaluate one payment-timing scenario.

    The discount is floored at 0 but deliberately left uncapped; uptake is
    clamped to [0, 100] % and falls back to 100 % when unparsable.
    """
    discount_pct = non_negative(discount_percent)
    uptake_pct = percent(uptake_percent, fallback=100.0)
    dpo_new = non_negative(new_dpo)

    discount_benefit = footprint.total_shipment_value_usd * (discount_pct / 100.0) * (uptake_pct / 100.0)

    proc = compute_process_savings(footprint, process)
    cash_conv = compute_cash_conversion(footprint, accounting, dpo_new)

    # Discount captured, less the cost (or plus the benefit) of the CCC shift
    net_financing_benefit = discount_benefit - cash_conv.funding_impact
    total_annual_benefit = proc.total_process_savings + net_financing_benefit

    net_profit_before = compute_financials(accounting).net_profit
    net_profit_after = net_profit_before + total_annual_benefit

    workings = ScenarioWorkings(
        label=label,
        inputs=ScenarioInputs(
            total_shipment_value_usd=footprint.total_shipment_value_usd,
            discount_percent=discount_pct,
            uptake_percent=uptake_pct,
            funding_rate_percent=accounting.funding_rate_percent,
            current_payment_terms_days=footprint.current_payment_terms_days,
            new_dpo=dpo_new,
        ),
        process=proc,
        discount_benefit=discount_benefit,
        cash_conversion=cash_conv,
        net_financing_benefit=net_financing_benefit,
        total_annual_benefit=total_annual_benefit,
        net_profit_before=net_profit_before,
        net_profit_after=net_profit_after,
    )

    return ScenarioResult(
        label=label,
        discount_benefit=discount_benefit,
        funding_impact=cash_conv.funding_impact,
        net_financing_benefit=net_financing_benefit,
        process_savings=proc.total_process_savings,
        total_annual_benefit=total_annual_benefit,
        net_profit_before=net_profit_before,
        net_profit_after=net_profit_after,
        workings=workings,
    )


def compute_all_results(state: CalculatorState | Mapping[str, Any] | None) -> CalculatorResults:
    """Run both payment scenarios and bundle them with the baseline P&L.

    ``state`` may be a ``CalculatorState`` or raw UI state
    (``{"panel1": ..., "panel2": ..., "panel3": ...}``); anything missing
    or malformed degrades to fallbacks rather than raising.
    """
    if not isinstance(state, CalculatorState):
        state = CalculatorState.model_validate(state if state is not None else {})

    fp = state.footprint
    pr = state.process
    acc = state.accounting

    at_shipment = compute_scenario(
        AT_SHIPMENT_LABEL,
        fp.discount_at_shipment_percent,
        fp.uptake_at_shipment_percent,
        0.0,
        fp, pr, acc,
    )
    after_delivery = compute_scenario(
        AFTER_DELIVERY_LABEL,
        fp.discount_after_delivery_percent,
        fp.uptake_after_delivery_percent,
        fp.after_delivery_dpo,
        fp, pr, acc,
    )

    return CalculatorResults(
        accounting=compute_financials(acc),
        at_shipment=at_shipment,
        after_delivery=after_delivery,
        meta=ResultsMeta(transit_and_clearance_days=fp.transit_and_clearance_days),
    )
