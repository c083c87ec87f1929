"""Domain services for cabinet cost calculation."""

from .areas import MaterialAreaAggregator
from .diagnostics import DiagnosticLog
from .engine import CostEngine
from .formula import FormulaError, evaluate, evaluate_formula, parse_formula, resolve
from .hardware import HardwareResolver, HardwareResult
from .labor import LaborEstimator
from .material_cost import MaterialCostCalculator
from .rollup import rollup
from .variables import LABOR_LINE_VARIABLES, RESERVED_VARIABLES, build_variables

__all__ = [
    "CostEngine",
    "DiagnosticLog",
    "FormulaError",
    "HardwareResolver",
    "HardwareResult",
    "LaborEstimator",
    "MaterialAreaAggregator",
    "MaterialCostCalculator",
    "LABOR_LINE_VARIABLES",
    "RESERVED_VARIABLES",
    "build_variables",
    "evaluate",
    "evaluate_formula",
    "parse_formula",
    "resolve",
    "rollup",
]
