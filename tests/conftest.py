"""Shared test fixtures — the calculator's canonical default configuration."""

from __future__ import annotations

import pytest

from trade_benefits.config import (
    AccountingProfile,
    CalculatorState,
    ProcessCostProfile,
    TradeFootprint,
)


@pytest.fixture
def footprint() -> TradeFootprint:
    return TradeFootprint(
        destination_country_iso="GB",
        selected_source_country_isos=["CN", "VN"],
        shipments_per_year=1_000,
        total_shipment_value_usd=5_000_000,
        transit_and_clearance_days=20,
        current_payment_terms_days=60,
        trade_cogs_share_percent=100,
        discount_at_shipment_percent=1.5,
        uptake_at_shipment_percent=60,
        discount_after_delivery_percent=0.75,
        uptake_after_delivery_percent=60,
        payment_days_after_delivery=10,
    )


@pytest.fixture
def process() -> ProcessCostProfile:
    return ProcessCostProfile(
        cost_per_person=80_000,
        headcount_logistics_compliance=4,
        headcount_accounts_payable=2,
        customs_and_compliance_cost_per_shipment=25,
        ancillary_cost_per_shipment=10,
        efficiency_percent=40,
    )


@pytest.fixture
def accounting() -> AccountingProfile:
    return AccountingProfile(
        revenue=100_000_000,
        cost_of_sale=70_000_000,
        operational_costs=25_000_000,
        days_sales_outstanding=0,
        days_inventory_outstanding=0,
        funding_rate_percent=8,
    )


@pytest.fixture
def state(
    footprint: TradeFootprint,
    process: ProcessCostProfile,
    accounting: AccountingProfile,
) -> CalculatorState:
    return CalculatorState(footprint=footprint, process=process, accounting=accounting)


@pytest.fixture
def raw_ui_state() -> dict:
    """The same inputs as the UI persists them: panel keys, camelCase, text numbers."""
    return {
        "panel1": {
            "destinationCountryIso": "GB",
            "selectedSourceCountryIsos": ["CN", "VN"],
            "shipmentsPerYear": "1,000",
            "totalShipmentValueUSD": "5,000,000",
            "transitAndClearanceDays": 20,
            "currentPaymentTermsDays": "60",
            "tradeCOGSSharePercent": 100,
            "discountAtShipmentPercent": "1.5",
            "uptakeAtShipmentPercent": 60,
            "discountAfterDeliveryPercent": 0.75,
            "uptakeAfterDeliveryPercent": "60",
            "paymentDaysAfterDelivery": 10,
        },
        "panel2": {
            "costPerPerson": "80,000",
            "headcountLogisticsCompliance": 4,
            "headcountAccountsPayable": 2,
            "customsAndComplianceCostPerShipment": 25,
            "ancillaryCostPerShipment": 10,
            "efficiencyPercent": 40,
        },
        "panel3": {
            "revenue": "100,000,000",
            "costOfSale": "70,000,000",
            "operationalCosts": 25_000_000,
            "daysSalesOutstanding": "",
            "daysInventoryOutstanding": None,
            "fundingRatePercent": "8",
        },
    }
