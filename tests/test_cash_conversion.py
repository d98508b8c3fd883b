"""Tests for engine/cash_conversion.py — sign conventions and hand-calculated values."""

from __future__ import annotations

import pytest

from trade_benefits.config import AccountingProfile, TradeFootprint
from trade_benefits.engine.cash_conversion import DAYS_PER_YEAR, compute_cash_conversion


def test_pay_at_shipment_canonical(footprint: TradeFootprint, accounting: AccountingProfile):
    cc = compute_cash_conversion(footprint, accounting, new_dpo=0)
    # DIO = DSO = 0, DPO 60 → 0
    assert cc.ccc_current == -60
    assert cc.ccc_new == 0
    assert cc.delta_ccc == 60
    assert cc.trade_cogs == pytest.approx(70_000_000)
    # 70M / 365 × 60
    assert cc.working_capital_change == pytest.approx(11_506_849.32, abs=0.01)
    assert cc.cash_released == pytest.approx(-11_506_849.32, abs=0.01)
    # × 8%
    assert cc.funding_impact == pytest.approx(920_547.95, abs=0.01)


def test_pay_after_delivery_canonical(footprint: TradeFootprint, accounting: AccountingProfile):
    cc = compute_cash_conversion(footprint, accounting, new_dpo=30)
    # DPO 60 → 30: cycle lengthens by 30 days
    assert cc.delta_ccc == 30
    expected_wc = 70_000_000 / 365 * 30
    assert cc.working_capital_change == pytest.approx(expected_wc)
    assert cc.funding_impact == pytest.approx(expected_wc * 0.08)


def test_paying_later_is_a_benefit(footprint: TradeFootprint, accounting: AccountingProfile):
    cc = compute_cash_conversion(footprint, accounting, new_dpo=90)
    assert cc.delta_ccc == -30
    assert cc.working_capital_change < 0
    assert cc.cash_released > 0
    assert cc.funding_impact < 0


def test_same_dpo_is_neutral(footprint: TradeFootprint, accounting: AccountingProfile):
    cc = compute_cash_conversion(footprint, accounting, new_dpo=60)
    assert cc.delta_ccc == 0
    assert cc.working_capital_change == 0
    assert cc.funding_impact == 0


@pytest.mark.parametrize("new_dpo", [0, 15, 59.5])
def test_sign_law_earlier_payment(footprint: TradeFootprint, accounting: AccountingProfile, new_dpo):
    cc = compute_cash_conversion(footprint, accounting, new_dpo)
    assert cc.delta_ccc > 0
    assert cc.funding_impact >= 0


@pytest.mark.parametrize("new_dpo", [60.5, 75, 365])
def test_sign_law_later_payment(footprint: TradeFootprint, accounting: AccountingProfile, new_dpo):
    cc = compute_cash_conversion(footprint, accounting, new_dpo)
    assert cc.delta_ccc < 0
    assert cc.funding_impact <= 0


def test_dso_dio_cancel_out_of_delta(footprint: TradeFootprint, accounting: AccountingProfile):
    acc = accounting.model_copy(update={"days_sales_outstanding": 45.0, "days_inventory_outstanding": 30.0})
    cc = compute_cash_conversion(footprint, acc, new_dpo=0)
    assert cc.ccc_current == 45 + 30 - 60
    assert cc.ccc_new == 45 + 30
    assert cc.delta_ccc == 60


def test_cogs_share_scales_trade_cogs(footprint: TradeFootprint, accounting: AccountingProfile):
    fp = footprint.model_copy(update={"trade_cogs_share_percent": 25.0})
    cc = compute_cash_conversion(fp, accounting, new_dpo=0)
    assert cc.trade_cogs == pytest.approx(17_500_000)
    assert cc.trade_cogs_share_percent == pytest.approx(25.0)
    assert cc.working_capital_change == pytest.approx(17_500_000 / DAYS_PER_YEAR * 60)


def test_zero_funding_rate_means_no_impact(footprint: TradeFootprint, accounting: AccountingProfile):
    acc = accounting.model_copy(update={"funding_rate_percent": 0.0})
    cc = compute_cash_conversion(footprint, acc, new_dpo=0)
    assert cc.working_capital_change > 0
    assert cc.funding_impact == 0


def test_new_dpo_normalised(footprint: TradeFootprint, accounting: AccountingProfile):
    assert compute_cash_conversion(footprint, accounting, new_dpo=-10).new_dpo == 0
    assert compute_cash_conversion(footprint, accounting, new_dpo="1,000").new_dpo == 1_000
    assert compute_cash_conversion(footprint, accounting, new_dpo="soon").new_dpo == 0


def test_funding_impact_equals_wc_change_times_rate(footprint: TradeFootprint, accounting: AccountingProfile):
    for dpo in (0, 20, 60, 100):
        cc = compute_cash_conversion(footprint, accounting, dpo)
        assert cc.funding_impact == pytest.approx(cc.working_capital_change * 0.08)
