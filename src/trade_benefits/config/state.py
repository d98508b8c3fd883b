"""Calculator state — bundles the three input records.

The UI persists its state as ``{"panel1": ..., "panel2": ..., "panel3": ...}``;
``CalculatorState`` accepts that shape as well as the named one
(``footprint`` / ``process`` / ``accounting``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from trade_benefits.config.accounting import AccountingProfile
from trade_benefits.config.footprint import TradeFootprint
from trade_benefits.config.process import ProcessCostProfile

PANEL_KEYS: dict[str, str] = {
    "panel1": "footprint",
    "panel2": "process",
    "panel3": "accounting",
}


class CalculatorState(BaseModel):
    """Complete input snapshot for one calculation."""

    model_config = ConfigDict(populate_by_name=True)

    footprint: TradeFootprint = Field(
        default_factory=TradeFootprint,
        validation_alias=AliasChoices("footprint", "panel1"),
    )
    process: ProcessCostProfile = Field(
        default_factory=ProcessCostProfile,
        validation_alias=AliasChoices("process", "panel2"),
    )
    accounting: AccountingProfile = Field(
        default_factory=AccountingProfile,
        validation_alias=AliasChoices("accounting", "panel3"),
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_unusable_records(cls, data: Any) -> Any:
        # A missing or malformed record becomes an all-fallback record.
        if isinstance(data, BaseModel):
            return data
        if not isinstance(data, Mapping):
            return {}
        return {
            key: value
            for key, value in data.items()
            if isinstance(value, (Mapping, BaseModel))
        }


# ═══════════════════════════════════════════════════════════════════════════
# Canonical defaults
# ═══════════════════════════════════════════════════════════════════════════

def default_state() -> CalculatorState:
    """The calculator's starting configuration (what a fresh UI shows)."""
    return CalculatorState(
        footprint=TradeFootprint(
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
        ),
        process=ProcessCostProfile(
            cost_per_person=80_000,
            headcount_logistics_compliance=4,
            headcount_accounts_payable=2,
            customs_and_compliance_cost_per_shipment=25,
            ancillary_cost_per_shipment=10,
            efficiency_percent=40,
        ),
        accounting=AccountingProfile(
            revenue=100_000_000,
            cost_of_sale=70_000_000,
            operational_costs=25_000_000,
            days_sales_outstanding=0,
            days_inventory_outstanding=0,
            funding_rate_percent=8,
        ),
    )


def _field_name(model_cls: type[BaseModel], key: str) -> str | None:
    """Resolve a snake_case name, camelCase alias or legacy alias to a field name."""
    for name, info in model_cls.model_fields.items():
        if key == name or key == info.alias:
            return name
        if isinstance(info.validation_alias, AliasChoices) and key in info.validation_alias.choices:
            return name
    return None


def build_state(overrides: Mapping[str, Any] | None = None) -> CalculatorState:
    """Merge a partial payload onto :func:`default_state`.

    ``overrides`` may use panel keys or record names at the top level and
    either naming style inside each record.  Unknown keys are ignored.
    """
    merged = default_state().model_dump()
    for key, record in (overrides or {}).items():
        section = PANEL_KEYS.get(key, key)
        if section not in merged or not isinstance(record, Mapping):
            continue
        model_cls = CalculatorState.model_fields[section].annotation
        for field_key, value in record.items():
            name = _field_name(model_cls, field_key)
            if name is not None:
                merged[section][name] = value
    return CalculatorState.model_validate(merged)
