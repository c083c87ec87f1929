"""Lookup protocols for data the engine consumes already resolved.

The engine never performs I/O. Callers fetch materials and product prices
up front and hand them over as objects satisfying these protocols; a plain
``dict`` keyed by id does.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinet_costing.domain.value_objects import Material, ProductPrice


@runtime_checkable
class MaterialCatalogProtocol(Protocol):
    """Protocol for material catalog lookup.

    Absence of a material is a legitimate "no material configured" state.

    Example:
        ```python
        catalog = {"mat-1": Material(id="mat-1", cost_per_unit=25.0)}
        catalog.get("mat-1")
        ```
    """

    def get(self, material_id: str) -> "Material | None":
        """Return the material with this id, or None."""
        ...


@runtime_checkable
class ProductPriceLookupProtocol(Protocol):
    """Protocol for hardware product price lookup."""

    def get(self, product_id: str) -> "ProductPrice | None":
        """Return name and unit price of a product, or None."""
        ...
