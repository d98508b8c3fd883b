"""Process savings — headcount and per-shipment cost baselines × efficiency.

Two independent streams, summed:
  people        = cost_per_person × (logistics/compliance HC + AP HC) × eff
  per-shipment  = (customs + ancillary per shipment) × shipments × eff
"""

from __future__ import annotations

from trade_benefits.config.footprint import TradeFootprint
from trade_benefits.config.normalize import clamp
from trade_benefits.config.process import ProcessCostProfile
from trade_benefits.models.results import ProcessSavings


def compute_process_savings(
    footprint: TradeFootprint,
    process: ProcessCostProfile,
) -> ProcessSavings:
    """Compute annual process-cost savings.

    All inputs are floored at 0 and efficiency is clamped to [0, 100] %,
    so every output is ≥ 0.  Zero shipments or zero headcount zeroes only
    its own stream.
    """
    eff = clamp(process.efficiency_percent, 0.0, 100.0) / 100.0

    # ── People cost ────────────────────────────────────────────────────
    headcount = process.headcount_logistics_compliance + process.headcount_accounts_payable
    people_cost_baseline = process.cost_per_person * headcount
    people_savings = people_cost_baseline * eff

    # ── Per-shipment cost ──────────────────────────────────────────────
    cost_per_shipment = (
        process.customs_and_compliance_cost_per_shipment + process.ancillary_cost_per_shipment
    )
    per_shipment_baseline = cost_per_shipment * footprint.shipments_per_year
    per_shipment_savings = per_shipment_baseline * eff

    return ProcessSavings(
        efficiency=eff,
        people_cost_baseline=people_cost_baseline,
        people_savings=people_savings,
        per_shipment_baseline=per_shipment_baseline,
        per_shipment_savings=per_shipment_savings,
        total_process_savings=people_savings + per_shipment_savings,
    )
