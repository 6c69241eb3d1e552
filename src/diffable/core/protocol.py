from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from diffable.core.result import DiffableResult


@runtime_checkable
class Diffable(Protocol):
    # Implementations compare themselves against a value of unknown type and
    # must leave both operands untouched.
    def diff_against(self, other: Any) -> DiffableResult:
        ...


def is_diffable(value: Any) -> bool:
    return isinstance(value, Diffable)


__all__ = ["Diffable", "is_diffable"]
