"""Contracts between the costing engine and its data sources."""

from cabinet_costing.contracts.protocols import (
    MaterialCatalogProtocol,
    ProductPriceLookupProtocol,
)

__all__ = ["MaterialCatalogProtocol", "ProductPriceLookupProtocol"]
