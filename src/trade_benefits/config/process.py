"""Process costs & efficiency (panel 2)."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from trade_benefits.config.normalize import NonNegative, Percent


class ProcessCostProfile(BaseModel):
    """Baseline cost of the manual trade-document workflow."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, validate_assignment=True,
    )

    cost_per_person: NonNegative = Field(default=0.0, description="Annual fully-loaded cost per FTE")
    headcount_logistics_compliance: NonNegative = Field(
        default=0.0, description="FTEs in logistics & trade compliance",
    )
    headcount_accounts_payable: NonNegative = Field(default=0.0, description="FTEs in accounts payable")
    # Older saved states spell this field without "And"; accept both.
    customs_and_compliance_cost_per_shipment: NonNegative = Field(
        default=0.0,
        alias="customsAndComplianceCostPerShipment",
        validation_alias=AliasChoices(
            "customsAndComplianceCostPerShipment",
            "customs_and_compliance_cost_per_shipment",
            "customsComplianceCostPerShipment",
        ),
        description="Customs brokerage & compliance cost per shipment",
    )
    ancillary_cost_per_shipment: NonNegative = Field(
        default=0.0, description="Courier, document handling and other per-shipment cost",
    )
    efficiency_percent: Percent = Field(
        default=0.0, description="Expected cost reduction from digitalisation (0–100)",
    )
