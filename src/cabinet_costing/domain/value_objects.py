"""Value objects for the cabinet costing domain."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .entities import LaborConfig


class CostingInputError(ValueError):
    """Raised when engine input cannot produce a meaningful breakdown.

    This is the one error class that crosses the engine boundary. Formula
    failures and missing catalog entries are absorbed instead.

    Attributes:
        field: Name of the offending input field, when known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class MaterialRole(str, Enum):
    """Material buckets that areas are accumulated into.

    Attributes:
        BODY: Carcass material (sides, top, bottom, back, vertical dividers).
        DOOR: Front material (doors, drawer fronts).
        SHELF: Interior shelf material (shelves, horizontal dividers).
    """

    BODY = "body"
    DOOR = "door"
    SHELF = "shelf"

    @classmethod
    def from_value(cls, value: str | None) -> "MaterialRole":
        """Resolve a role, treating anything unrecognized as body material."""
        try:
            return cls(value)
        except ValueError:
            return cls.BODY


class FrontType(str, Enum):
    """Front types counted into ``door_count`` and ``drawer_count``.

    Other strings (flaps, sliding doors) are accepted and priced but never
    counted.
    """

    HINGED_DOOR = "hinged_door"
    DRAWER_FRONT = "drawer_front"


class CompartmentItemType(str, Enum):
    """Interior items that can be placed in a compartment."""

    SHELF = "shelf"
    HORIZONTAL_DIVIDER = "horizontal_divider"
    VERTICAL_DIVIDER = "vertical_divider"


class LaborUnit(str, Enum):
    """Unit of a formula-based labor line.

    Attributes:
        MINUTES: The line yields minutes, priced at the hourly rate.
        EUROS: The line yields a direct cost added to labor cost.
    """

    MINUTES = "minutes"
    EUROS = "euros"


@dataclass(frozen=True)
class Material:
    """Catalog record for a sheet material priced per square meter."""

    id: str
    cost_per_unit: float
    name: str = ""
    category: str = ""
    waste_factor: float | None = None


@dataclass(frozen=True)
class ProductPrice:
    """Resolved price of a hardware product."""

    name: str
    unit_price: float


@dataclass(frozen=True)
class Diagnostic:
    """A fail-soft event recorded while computing a breakdown.

    Attributes:
        location: Where in the model the event happened,
            e.g. ``panels[2](Side).length``.
        reason: Human-readable reason the value fell back.
    """

    location: str
    reason: str

    def __str__(self) -> str:
        return f"{self.location}: {self.reason}"


@dataclass(frozen=True)
class MaterialAreas:
    """Accumulated area per material role, in square meters."""

    body: float = 0.0
    door: float = 0.0
    shelf: float = 0.0

    @property
    def total(self) -> float:
        return self.body + self.door + self.shelf

    def get(self, role: MaterialRole) -> float:
        return getattr(self, role.value)

    def rounded(self) -> dict[str, float]:
        """Areas rounded to 3 decimals, including the total."""
        return {
            "body": round(self.body, 3),
            "door": round(self.door, 3),
            "shelf": round(self.shelf, 3),
            "total": round(self.total, 3),
        }


@dataclass(frozen=True)
class PartArea:
    """A single area contribution found while walking the model."""

    name: str
    role: MaterialRole
    length: float
    width: float
    quantity: int
    area: float


@dataclass(frozen=True)
class HardwareLine:
    """One priced hardware line in the breakdown."""

    name: str
    quantity: int
    unit_price: float
    total_price: float


@dataclass(frozen=True)
class LaborEstimate:
    """Labor time and cost for one cabinet."""

    minutes: float
    cost: float


@dataclass(frozen=True)
class EngineSettings:
    """Constants the engine uses, injectable per computation.

    Attributes:
        default_waste_factor: Multiplier applied to raw area when the material
            does not carry its own waste factor.
        honor_material_waste_factor: Use ``Material.waste_factor`` when set.
        edge_banding_meters_per_m2: Linear meters of banding per m² of panel.
        edge_banding_cost_per_meter: Price of one linear meter of banding.
        default_thickness: Thickness in mm used when a role has no override.
        overhead_percentage: Overhead applied on top of the subtotal.
        default_labor: Labor configuration for models that carry none.
    """

    default_waste_factor: float = 1.10
    honor_material_waste_factor: bool = True
    edge_banding_meters_per_m2: float = 4.0
    edge_banding_cost_per_meter: float = 2.0
    default_thickness: float = 18.0
    overhead_percentage: float = 15.0
    default_labor: "LaborConfig | None" = None

    def labor_fallback(self) -> "LaborConfig":
        """Return the configured default labor, or the built-in one."""
        if self.default_labor is not None:
            return self.default_labor
        from .entities import LaborConfig

        return LaborConfig(
            hourly_rate=45.0,
            base_minutes=30.0,
            per_panel_minutes=5.0,
            per_front_minutes=15.0,
            per_compartment_item_minutes=10.0,
        )


@dataclass(frozen=True)
class CostBreakdown:
    """Full cost breakdown for one configured cabinet.

    Currency figures are rounded to 2 decimals and areas to 3 decimals.
    Margin and tax are reserved and always zero.
    """

    materials_cost: float
    hardware_cost: float
    labor_minutes: float
    labor_cost: float
    subtotal: float
    overhead_cost: float
    overhead_percentage: float
    total_cost: float
    material_areas: dict[str, float]
    hardware_items: tuple[HardwareLine, ...] = ()
    parts: tuple[PartArea, ...] = ()
    margin_amount: float = 0.0
    margin_percentage: float = 0.0
    tax_amount: float = 0.0
    tax_percentage: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-compatible primitives."""
        data = asdict(self)
        data["hardware_items"] = [asdict(item) for item in self.hardware_items]
        data["parts"] = [
            {**asdict(part), "role": part.role.value} for part in self.parts
        ]
        return data


@dataclass(frozen=True)
class CostResult:
    """A breakdown together with the diagnostics gathered while computing it."""

    breakdown: CostBreakdown
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)
