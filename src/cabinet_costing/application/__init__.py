"""Application layer: request loading and use cases."""

from cabinet_costing.application.commands import CalculateCostCommand

__all__ = ["CalculateCostCommand"]
