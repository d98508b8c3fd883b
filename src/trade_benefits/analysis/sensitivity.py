"""Sensitivity / tornado analysis on total annual benefit.

Vary one input at a time, measure the change in one scenario's total annual
benefit, and sort by swing width.

Default sweep set:
  - process.efficiency_percent ± 25%
  - accounting.funding_rate_percent ± 25%
  - footprint.uptake_at_shipment_percent ± 20%
  - footprint.current_payment_terms_days ± 20%
  - footprint.total_shipment_value_usd ± 15%
  - accounting.cost_of_sale ± 10%
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from trade_benefits.config.state import CalculatorState
from trade_benefits.engine.scenario import compute_all_results

ScenarioKey = Literal["at_shipment", "after_delivery"]
SECTIONS = ("footprint", "process", "accounting")


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Dot-path into CalculatorState (e.g. 'process.efficiency_percent')."""

    base_value: float
    low_value: float
    high_value: float

    benefit_at_low: float
    """Total annual benefit when param = low_value."""

    benefit_at_high: float
    """Total annual benefit when param = high_value."""

    delta_benefit: float
    """abs(benefit_at_high − benefit_at_low) — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    scenario: ScenarioKey
    base_benefit: float
    bars: list[TornadoBar] = field(default_factory=list)
    """Sorted by delta_benefit (descending)."""


@dataclass
class ParameterSweep:
    """Total annual benefit across a grid of values for one input."""

    param_path: str
    scenario: ScenarioKey
    values: list[float] = field(default_factory=list)
    benefits: list[float] = field(default_factory=list)


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Process efficiency", "process.efficiency_percent", -0.25, 0.25),
    ("Funding rate", "accounting.funding_rate_percent", -0.25, 0.25),
    ("Uptake at shipment", "footprint.uptake_at_shipment_percent", -0.20, 0.20),
    ("Current payment terms", "footprint.current_payment_terms_days", -0.20, 0.20),
    ("Annual shipment value", "footprint.total_shipment_value_usd", -0.15, 0.15),
    ("Cost of sale", "accounting.cost_of_sale", -0.10, 0.10),
]


def _split_path(path: str) -> tuple[str, str]:
    """Validate a 'section.field' path naming a numeric input."""
    section, _, name = path.partition(".")
    if section not in SECTIONS:
        raise ValueError(f"Unknown input section in path {path!r}; expected one of {SECTIONS}")
    model_cls = CalculatorState.model_fields[section].annotation
    info = model_cls.model_fields.get(name)
    if info is None or info.annotation is not float:
        raise ValueError(f"{path!r} does not name a numeric input field")
    return section, name


def _get_value(state: CalculatorState, path: str) -> float:
    section, name = _split_path(path)
    return float(getattr(getattr(state, section), name))


def _with_value(state: CalculatorState, path: str, value: float) -> CalculatorState:
    """Copy of ``state`` with one field replaced (re-normalised)."""
    section, name = _split_path(path)
    record = getattr(state, section)
    updated = type(record).model_validate({**record.model_dump(), name: value})
    return state.model_copy(update={section: updated})


def _benefit(state: CalculatorState, scenario: ScenarioKey) -> float:
    results = compute_all_results(state)
    return getattr(results, scenario).total_annual_benefit


def run_sensitivity(
    state: CalculatorState,
    sweeps: list[tuple[str, str, float, float]] | None = None,
    scenario: ScenarioKey = "at_shipment",
) -> SensitivityResult:
    """Run one-at-a-time sensitivity analysis.

    Parameters
    ----------
    state : CalculatorState
        Base inputs.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.
    scenario : "at_shipment" | "after_delivery"
        Which scenario's total annual benefit to measure.

    Raises
    ------
    ValueError
        If a sweep path does not name a numeric input field.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_benefit = _benefit(state, scenario)
    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        base_val = _get_value(state, path)
        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        benefit_low = _benefit(_with_value(state, path, low_val), scenario)
        benefit_high = _benefit(_with_value(state, path, high_val), scenario)

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            benefit_at_low=round(benefit_low, 2),
            benefit_at_high=round(benefit_high, 2),
            delta_benefit=round(abs(benefit_high - benefit_low), 2),
        ))

    # Largest swing first
    bars.sort(key=lambda b: b.delta_benefit, reverse=True)

    return SensitivityResult(scenario=scenario, base_benefit=round(base_benefit, 2), bars=bars)


def sweep_parameter(
    state: CalculatorState,
    path: str,
    values: list[float] | np.ndarray | None = None,
    scenario: ScenarioKey = "at_shipment",
) -> ParameterSweep:
    """Evaluate total annual benefit across a grid of values for one input.

    Default grid: 0–100 in steps of 10 for ``*_percent`` fields, otherwise
    11 points from 0 to twice the base value.
    """
    _, name = _split_path(path)
    if values is None:
        if name.endswith("_percent"):
            values = np.linspace(0.0, 100.0, 11)
        else:
            values = np.linspace(0.0, 2.0 * _get_value(state, path), 11)

    grid = [float(v) for v in np.asarray(values, dtype=float)]
    benefits = [_benefit(_with_value(state, path, v), scenario) for v in grid]

    return ParameterSweep(param_path=path, scenario=scenario, values=grid, benefits=benefits)
