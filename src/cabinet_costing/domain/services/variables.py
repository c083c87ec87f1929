"""Variable table construction for formula evaluation."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, Mapping

from ..value_objects import CostingInputError, EngineSettings, FrontType
from .formula import VARIABLE_NAME

if TYPE_CHECKING:
    from ..entities import CabinetConfiguration, CabinetFront

__all__ = [
    "LABOR_LINE_VARIABLES",
    "RESERVED_VARIABLES",
    "build_variables",
    "require_dimensions",
]

RESERVED_VARIABLES: frozenset[str] = frozenset(
    {
        "width",
        "height",
        "depth",
        "body_thickness",
        "door_thickness",
        "shelf_thickness",
        "door_count",
        "drawer_count",
    }
)

# Names added on top of the base table when labor lines are evaluated
LABOR_LINE_VARIABLES: frozenset[str] = frozenset(
    {
        "panels",
        "total_panels",
        "interior_panels",
        "fronts",
        "compartment_items",
        "hardware_count",
        "body",
        "door",
        "shelf",
        "body_area",
        "door_area",
        "shelf_area",
        "total_area",
        "front_area",
        "volume",
        "total_edges",
    }
)


def require_dimensions(config: CabinetConfiguration) -> tuple[float, float, float]:
    """Return (width, height, depth), rejecting missing or non-numeric values.

    Raises:
        CostingInputError: If any base dimension is absent, not a number,
            not finite or negative.
    """
    dimensions: list[float] = []
    for name in ("width", "height", "depth"):
        value = getattr(config, name, None)
        if value is None:
            raise CostingInputError(f"Configuration is missing '{name}'", field=name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise CostingInputError(
                f"Configuration '{name}' must be a number, got {value!r}", field=name
            )
        if not _is_finite(value) or value < 0:
            raise CostingInputError(
                f"Configuration '{name}' must be a finite non-negative number, got {value!r}",
                field=name,
            )
        dimensions.append(value)
    return dimensions[0], dimensions[1], dimensions[2]


def _count_visible(fronts: Iterable[CabinetFront], front_type: FrontType) -> int:
    return sum(1 for f in fronts if f.visible and f.front_type == front_type.value)


def _check_extra(extra: Mapping[str, float]) -> None:
    invalid = sorted(repr(name) for name in extra if not _is_identifier(name))
    if invalid:
        raise CostingInputError(
            f"Extra variable names must be identifiers: {', '.join(invalid)}",
            field="extra",
        )

    collisions = sorted((RESERVED_VARIABLES | LABOR_LINE_VARIABLES).intersection(extra))
    if collisions:
        raise CostingInputError(
            f"Extra variables shadow built-in names: {', '.join(collisions)}",
            field="extra",
        )

    for name, value in extra.items():
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or not _is_finite(value)
        ):
            raise CostingInputError(
                f"Extra variable '{name}' must be a finite number, got {value!r}",
                field="extra",
            )


def _is_identifier(name: object) -> bool:
    return isinstance(name, str) and VARIABLE_NAME.fullmatch(name) is not None


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def build_variables(
    config: CabinetConfiguration,
    fronts: Iterable[CabinetFront],
    extra: Mapping[str, float] | None = None,
    settings: EngineSettings | None = None,
) -> dict[str, float]:
    """Build the variable table formulas are evaluated against.

    Args:
        config: Concrete cabinet configuration.
        fronts: Model fronts, used for ``door_count`` and ``drawer_count``.
        extra: Caller-derived variables. Names must be identifiers that do
            not shadow the built-in or labor-line vocabulary, values finite
            numbers.
        settings: Engine settings supplying the default thickness.

    Returns:
        Mapping of variable name to value.

    Raises:
        CostingInputError: If dimensions are invalid or ``extra`` holds a
            bad name, a reserved name or a non-finite value.
    """
    settings = settings or EngineSettings()
    width, height, depth = require_dimensions(config)
    fronts = list(fronts)
    materials = config.material_config

    variables: dict[str, float] = {
        "width": width,
        "height": height,
        "depth": depth,
        # Zero thickness is treated like an absent override
        "body_thickness": materials.body_thickness or settings.default_thickness,
        "door_thickness": materials.door_thickness or settings.default_thickness,
        "shelf_thickness": materials.shelf_thickness or settings.default_thickness,
        "door_count": _count_visible(fronts, FrontType.HINGED_DOOR),
        "drawer_count": _count_visible(fronts, FrontType.DRAWER_FRONT),
    }

    if extra:
        _check_extra(extra)
        variables.update(extra)

    return variables
