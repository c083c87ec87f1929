"""Infrastructure layer: output formatting."""

from cabinet_costing.infrastructure.formatters import (
    CostReportFormatter,
    DiagnosticsFormatter,
    JsonExporter,
)

__all__ = ["CostReportFormatter", "DiagnosticsFormatter", "JsonExporter"]
