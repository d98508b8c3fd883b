"""Result models — calculator output contracts."""

from trade_benefits.models.results import (
    CalculatorResults,
    CashConversionResult,
    FinancialSummary,
    ProcessSavings,
    RankedScenario,
    ResultsMeta,
    ScenarioComparison,
    ScenarioInputs,
    ScenarioResult,
    ScenarioWorkings,
)

__all__ = [
    "CalculatorResults",
    "CashConversionResult",
    "FinancialSummary",
    "ProcessSavings",
    "RankedScenario",
    "ResultsMeta",
    "ScenarioComparison",
    "ScenarioInputs",
    "ScenarioResult",
    "ScenarioWorkings",
]
