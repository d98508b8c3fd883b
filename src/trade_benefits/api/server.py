"""FastAPI server — HTTP access to the trade digitalisation benefits engine.

Run with:
    uvicorn trade_benefits.api.server:app --reload --port 8000

Or:
    python -m trade_benefits.api.server

Endpoints:
    GET  /health                 — liveness probe
    GET  /                       — name, version, pointers
    GET  /schema                 — JSON Schema for CalculatorState
    GET  /state/defaults         — canonical default inputs (camelCase)
    POST /calculate              — both scenarios + comparison + narrative
    POST /calculate/sensitivity  — parameter sweep → tornado data
    POST /calculate/narrative    — plain-English interpretation only
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from trade_benefits.analysis.comparison import compare_scenarios
from trade_benefits.analysis.sensitivity import run_sensitivity
from trade_benefits.api.narrative import generate_narrative
from trade_benefits.config.normalize import parse_number
from trade_benefits.config.state import CalculatorState, build_state, default_state
from trade_benefits.engine.scenario import compute_all_results

logger = logging.getLogger(__name__)

API_NAME = "Trade Digitalisation Benefits API"
API_VERSION = "1.0"


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title=API_NAME,
    version=API_VERSION,
    description=(
        "Quantifies annual savings from digitalising a trade payment workflow: "
        "process-efficiency gains plus the discount and working-capital effect "
        "of paying at shipment or after delivery."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class CalculateRequest(BaseModel):
    """Request body for /calculate. All fields optional — defaults used for missing."""
    state: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full calculator state, merged onto the defaults. "
                    "Top-level keys: footprint/process/accounting or panel1/panel2/panel3. "
                    "Example: {'process': {'efficiencyPercent': 50}}",
    )


class SensitivityRequest(BaseModel):
    """Request body for /calculate/sensitivity."""
    state: dict[str, Any] = Field(default_factory=dict)
    scenario: Literal["at_shipment", "after_delivery"] = "at_shipment"
    sweep_params: list[dict[str, Any]] | None = Field(
        default=None,
        description="Optional override of sweep parameters. "
                    "Format: [{'name': 'Efficiency', 'path': 'process.efficiency_percent', "
                    "'low_pct': -0.25, 'high_pct': 0.25}]",
    )


class CalculateResponse(BaseModel):
    """Response from /calculate."""
    results: dict[str, Any]
    comparison: dict[str, Any]
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointers."""
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "start_here": "GET /state/defaults, then POST /calculate",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """JSON Schema for CalculatorState — all inputs with types and defaults."""
    return CalculatorState.model_json_schema()


@app.get("/state/defaults")
def get_defaults():
    """Canonical default inputs, camelCase as the UI stores them."""
    return default_state().model_dump(by_alias=True)


@app.post("/calculate", response_model=CalculateResponse)
def calculate(req: CalculateRequest):
    """Run both payment scenarios.

    Send a partial state (only the fields you want to change).
    Missing fields use defaults; unparsable numbers fall back rather than erroring.

    Example minimal request:
    ```json
    {"state": {"panel3": {"fundingRatePercent": "6.5"}}}
    ```
    """
    state = build_state(req.state)
    results = compute_all_results(state)
    comparison = compare_scenarios(results)
    logger.info(
        "Calculated scenarios: best=%s spread=%.2f",
        comparison.best_label, comparison.benefit_spread,
    )
    return CalculateResponse(
        results=results.model_dump(),
        comparison=comparison.model_dump(),
        narrative=generate_narrative(results),
    )


@app.post("/calculate/sensitivity")
def calculate_sensitivity(req: SensitivityRequest):
    """Run one-at-a-time parameter sweeps and rank inputs by benefit impact."""
    state = build_state(req.state)

    sweep_config = None
    if req.sweep_params:
        try:
            sweep_config = [
                (
                    sp.get("name", sp["path"]),
                    sp["path"],
                    parse_number(sp.get("low_pct"), fallback=-0.15),
                    parse_number(sp.get("high_pct"), fallback=0.15),
                )
                for sp in req.sweep_params
            ]
        except KeyError as exc:
            raise HTTPException(status_code=400, detail=f"Sweep parameter missing {exc}") from exc

    try:
        result = run_sensitivity(state, sweep_config, scenario=req.scenario)
    except ValueError as exc:
        logger.warning("Rejected sensitivity request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return {
        "scenario": result.scenario,
        "base_benefit": result.base_benefit,
        "tornado_bars": [
            {
                "param_name": bar.param_name,
                "param_path": bar.param_path,
                "base_value": bar.base_value,
                "low_value": bar.low_value,
                "high_value": bar.high_value,
                "benefit_at_low": bar.benefit_at_low,
                "benefit_at_high": bar.benefit_at_high,
                "delta_benefit": bar.delta_benefit,
            }
            for bar in result.bars
        ],
    }


@app.post("/calculate/narrative")
def calculate_narrative(req: CalculateRequest):
    """Same as /calculate but returns the narrative and headline metrics only."""
    state = build_state(req.state)
    results = compute_all_results(state)
    comparison = compare_scenarios(results)
    return {
        "narrative": generate_narrative(results),
        "headline_metrics": {
            "net_profit_before": round(results.accounting.net_profit, 2),
            "best_scenario": comparison.best_label,
            "at_shipment_total_benefit": round(results.at_shipment.total_annual_benefit, 2),
            "after_delivery_total_benefit": round(results.after_delivery.total_annual_benefit, 2),
        },
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "trade_benefits.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
