"""Cash conversion model — payment timing → CCC change → funding impact.

    CCC                    = DIO + DSO − DPO
    ΔCCC                   = CCC_new − CCC_current
    ΔNWC                   ≈ (trade COGS / 365) × ΔCCC
    cash released          = −ΔNWC
    funding impact         = −cash released × funding rate

Paying *earlier* than today's terms lowers DPO, lengthens the cycle and
costs money to fund (funding impact > 0).  Paying *later* shortens it and
frees capital (funding impact < 0).
"""

from __future__ import annotations

from typing import Any

from trade_benefits.config.accounting import AccountingProfile
from trade_benefits.config.footprint import TradeFootprint
from trade_benefits.config.normalize import clamp, non_negative
from trade_benefits.models.results import CashConversionResult

DAYS_PER_YEAR = 365


def compute_cash_conversion(
    footprint: TradeFootprint,
    accounting: AccountingProfile,
    new_dpo: Any,
) -> CashConversionResult:
    """Model the working-capital effect of moving DPO to ``new_dpo``.

    Parameters
    ----------
    footprint : TradeFootprint
        Supplies current payment terms (today's DPO) and the lane's
        share of cost of sale.
    accounting : AccountingProfile
        Supplies DSO, DIO, annual cost of sale and the funding rate.
    new_dpo : Any
        Scenario DPO in days.  Normalised like any form field (floored at 0).
    """
    dso = accounting.days_sales_outstanding
    dio = accounting.days_inventory_outstanding
    current_dpo = footprint.current_payment_terms_days
    dpo_new = non_negative(new_dpo)

    ccc_current = dio + dso - current_dpo
    ccc_new = dio + dso - dpo_new
    delta_ccc = ccc_new - ccc_current

    share = clamp(footprint.trade_cogs_share_percent, 0.0, 100.0) / 100.0
    annual_cogs = accounting.cost_of_sale
    trade_cogs = annual_cogs * share

    working_capital_change = (trade_cogs / DAYS_PER_YEAR) * delta_ccc
    cash_released = -working_capital_change

    rate = max(0.0, accounting.funding_rate_percent) / 100.0
    # Cash required (cash_released < 0) is a cost, so the sign flips back.
    funding_impact = -cash_released * rate

    return CashConversionResult(
        dso=dso,
        dio=dio,
        current_dpo=current_dpo,
        new_dpo=dpo_new,
        ccc_current=ccc_current,
        ccc_new=ccc_new,
        delta_ccc=delta_ccc,
        annual_cogs=annual_cogs,
        trade_cogs=trade_cogs,
        trade_cogs_share_percent=share * 100.0,
        working_capital_change=working_capital_change,
        cash_released=cash_released,
        funding_impact=funding_impact,
    )
