"""Trade footprint — the trade lane under evaluation (panel 1)."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from trade_benefits.config.normalize import NonNegative, PercentDefaultFull


def _as_code(raw: Any) -> str:
    return "" if raw is None else str(raw)


def _as_codes(raw: Any) -> list[str]:
    if not isinstance(raw, (list, tuple, set)):
        return []
    return [str(c) for c in raw if c is not None]


CountryCode = Annotated[str, BeforeValidator(_as_code)]
CountryCodes = Annotated[list[str], BeforeValidator(_as_codes)]


class TradeFootprint(BaseModel):
    """Volumes, timings and payment options for one trade lane.

    Country codes are carried through untouched; the engine never
    interprets them.  Discount percentages are floored at 0 but *not*
    capped at 100, unlike every other percentage on this record.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, validate_assignment=True,
    )

    # --- Lane ---
    destination_country_iso: CountryCode = Field(default="", description="Importing country (opaque code)")
    selected_source_country_isos: CountryCodes = Field(
        default_factory=list, description="Origin countries (opaque codes)",
    )

    # --- Volumes & timings ---
    shipments_per_year: NonNegative = Field(default=0.0, description="Shipments per year on this lane")
    total_shipment_value_usd: NonNegative = Field(
        default=0.0, alias="totalShipmentValueUSD",
        description="Annual value of goods shipped (USD)",
    )
    transit_and_clearance_days: NonNegative = Field(
        default=0.0, description="Days from shipment to customs-cleared delivery",
    )
    current_payment_terms_days: NonNegative = Field(
        default=0.0, description="Payment terms today = current days payable outstanding",
    )
    trade_cogs_share_percent: PercentDefaultFull = Field(
        default=100.0, alias="tradeCOGSSharePercent",
        description="Share of company cost of sale attributable to this lane (0–100)",
    )

    # --- Option (a): payment at shipment ---
    discount_at_shipment_percent: NonNegative = Field(
        default=0.0, description="Supplier discount for paying at shipment (%, ≥0, uncapped)",
    )
    uptake_at_shipment_percent: PercentDefaultFull = Field(
        default=100.0, description="Share of trade value on which the at-shipment discount is realised (0–100)",
    )

    # --- Option (b): payment after delivery ---
    discount_after_delivery_percent: NonNegative = Field(
        default=0.0, description="Supplier discount for paying shortly after delivery (%, ≥0, uncapped)",
    )
    uptake_after_delivery_percent: PercentDefaultFull = Field(
        default=100.0, description="Share of trade value on which the after-delivery discount is realised (0–100)",
    )
    payment_days_after_delivery: NonNegative = Field(
        default=0.0, description="Days after delivery at which payment is made",
    )

    @property
    def after_delivery_dpo(self) -> float:
        """Days payable outstanding when paying after delivery."""
        return self.transit_and_clearance_days + self.payment_days_after_delivery
