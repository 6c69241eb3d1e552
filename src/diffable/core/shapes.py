from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from diffable.core.result import DiffableResult


class ValueShape(str, Enum):
    """How a field is compared. Chosen per field by the comparable type, never inferred."""

    SCALAR = "scalar"
    OPTIONAL = "optional"
    DIFFABLE = "diffable"
    SEQUENCE = "sequence"
    DIFFABLE_SEQUENCE = "diffable_sequence"
    DIFFABLE_MAPPING = "diffable_mapping"
    EQUATABLE_MAPPING = "equatable_mapping"

    @classmethod
    def parse(cls, raw: Any) -> ValueShape:
        if isinstance(raw, ValueShape):
            return raw
        name = str(raw).strip().lower().replace("-", "_")
        try:
            return cls(name)
        except ValueError:
            allowed = "|".join(shape.value for shape in cls)
            raise ValueError(f"shape must be one of {allowed}; got: {raw}") from None


_STRATEGIES: dict[ValueShape, Callable[[DiffableResult, Any, Any], DiffableResult]] = {
    ValueShape.SCALAR: DiffableResult.track_difference,
    ValueShape.OPTIONAL: DiffableResult.track_optional,
    ValueShape.DIFFABLE: DiffableResult.track_diffable,
    ValueShape.SEQUENCE: DiffableResult.track_sequence,
    ValueShape.DIFFABLE_SEQUENCE: DiffableResult.track_diffable_sequence,
    ValueShape.DIFFABLE_MAPPING: DiffableResult.track_diffable_mapping,
    ValueShape.EQUATABLE_MAPPING: DiffableResult.track_equatable_mapping,
}


def track(result: DiffableResult, shape: ValueShape, actual: Any, expected: Any) -> DiffableResult:
    strategy = _STRATEGIES.get(shape)
    if strategy is None:
        raise ValueError(f"Unsupported value shape: {shape!r}")
    return strategy(result, actual, expected)


__all__ = ["ValueShape", "track"]
