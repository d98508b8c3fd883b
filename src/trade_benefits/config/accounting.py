"""Accounting & funding (panel 3)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from trade_benefits.config.normalize import NonNegative


class AccountingProfile(BaseModel):
    """Company-level P&L figures and working-capital days."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, validate_assignment=True,
    )

    revenue: NonNegative = Field(default=0.0, description="Annual revenue")
    cost_of_sale: NonNegative = Field(default=0.0, description="Annual cost of sale (COGS)")
    operational_costs: NonNegative = Field(default=0.0, description="Annual operating expenses")
    days_sales_outstanding: NonNegative = Field(default=0.0, description="DSO (days)")
    days_inventory_outstanding: NonNegative = Field(default=0.0, description="DIO (days)")
    funding_rate_percent: NonNegative = Field(
        default=0.0, description="Annual cost of capital applied to working-capital changes (%)",
    )
