from __future__ import annotations

from typing import Any, ClassVar

from diffable.core.result import DiffableResult
from diffable.core.shapes import ValueShape, track


class DiffableModel:
    """Base for comparable types that declare their fields and shapes.

    Subclasses set ``diff_fields``; declarations from base classes are
    inherited and compared first. ``diff_against`` reports one labelled
    sub-report per diverging field, e.g. ``name <expected: a, received: b>``.

    Comparing against a value of a different concrete type yields a single
    ``Incorrect type`` entry and no field comparison.

    Equality is structural: two instances of the same type are equal exactly
    when ``diff_against`` finds nothing, so models held in scalar, optional,
    sequence or equatable-mapping fields compare by content.
    """

    diff_fields: ClassVar[dict[str, ValueShape]] = {}

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.diff_against(other).is_empty

    def __repr__(self) -> str:
        values = ", ".join(
            f"{name}={getattr(self, name, None)!r}" for name in self.declared_diff_fields()
        )
        return f"{type(self).__name__}({values})"

    @classmethod
    def declared_diff_fields(cls) -> dict[str, ValueShape]:
        fields: dict[str, ValueShape] = {}
        for klass in reversed(cls.__mro__):
            fields.update(vars(klass).get("diff_fields", {}))
        return fields

    def diff_against(self, other: Any) -> DiffableResult:
        results = DiffableResult()
        if type(other) is not type(self):
            results.append(
                f"Incorrect type <expected: {type(self).__name__}, received: {type(other).__name__}>"
            )
            return results

        for name, shape in self.declared_diff_fields().items():
            field_result = DiffableResult(identifier=name)
            track(field_result, shape, getattr(self, name), getattr(other, name))
            results.append_report(field_result)
        return results


__all__ = ["DiffableModel"]
