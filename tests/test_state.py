"""Tests for config/state.py — bundling, panel keys, defaults, merging."""

from __future__ import annotations

from trade_benefits.config import CalculatorState, build_state, default_state


class TestCalculatorState:

    def test_panel_keys_accepted(self):
        s = CalculatorState.model_validate({
            "panel1": {"shipmentsPerYear": 10},
            "panel2": {"efficiencyPercent": 30},
            "panel3": {"revenue": "1,000"},
        })
        assert s.footprint.shipments_per_year == 10
        assert s.process.efficiency_percent == 30
        assert s.accounting.revenue == 1_000

    def test_named_keys_accepted(self):
        s = CalculatorState.model_validate({"footprint": {"shipments_per_year": 7}})
        assert s.footprint.shipments_per_year == 7
        assert s.process.efficiency_percent == 0

    def test_missing_records_fall_back(self):
        s = CalculatorState()
        assert s.footprint.trade_cogs_share_percent == 100
        assert s.accounting.revenue == 0

    def test_non_mapping_input(self):
        assert CalculatorState.model_validate("garbage") == CalculatorState()
        assert CalculatorState.model_validate({"panel3": 42}) == CalculatorState()


class TestDefaults:

    def test_canonical_values(self):
        s = default_state()
        assert s.footprint.shipments_per_year == 1_000
        assert s.footprint.total_shipment_value_usd == 5_000_000
        assert s.footprint.transit_and_clearance_days == 20
        assert s.footprint.current_payment_terms_days == 60
        assert s.footprint.after_delivery_dpo == 30
        assert s.process.cost_per_person == 80_000
        assert s.process.efficiency_percent == 40
        assert s.accounting.revenue == 100_000_000
        assert s.accounting.funding_rate_percent == 8

    def test_fresh_copy_each_call(self):
        a = default_state()
        a.accounting.revenue = 1.0
        assert default_state().accounting.revenue == 100_000_000


class TestBuildState:

    def test_empty_overrides_give_defaults(self):
        assert build_state({}) == default_state()
        assert build_state(None) == default_state()

    def test_camel_case_override_under_panel_key(self):
        s = build_state({"panel2": {"efficiencyPercent": "55"}})
        assert s.process.efficiency_percent == 55
        # Everything else stays at defaults
        assert s.process.cost_per_person == 80_000
        assert s.footprint.shipments_per_year == 1_000

    def test_snake_case_override_under_record_name(self):
        s = build_state({"accounting": {"funding_rate_percent": 12}})
        assert s.accounting.funding_rate_percent == 12
        assert s.accounting.cost_of_sale == 70_000_000

    def test_explicit_aliases_resolve(self):
        s = build_state({"footprint": {"totalShipmentValueUSD": 1, "tradeCOGSSharePercent": 50}})
        assert s.footprint.total_shipment_value_usd == 1
        assert s.footprint.trade_cogs_share_percent == 50

    def test_legacy_customs_name_resolves(self):
        s = build_state({"panel2": {"customsComplianceCostPerShipment": 99}})
        assert s.process.customs_and_compliance_cost_per_shipment == 99

    def test_unknown_keys_ignored(self):
        s = build_state({"panel9": {"x": 1}, "panel1": {"notAField": 3}, "activePanel": 2})
        assert s == default_state()

    def test_garbage_override_degrades(self):
        s = build_state({"panel3": {"revenue": "lots"}})
        assert s.accounting.revenue == 0
