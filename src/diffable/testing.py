"""Assertion helpers for test suites comparing model instances."""
from __future__ import annotations

from typing import Any

from diffable.core.result import DiffableResult
from diffable.core.shapes import ValueShape, track


def assert_no_divergence(
    actual: Any,
    expected: Any,
    *,
    shape: ValueShape = ValueShape.DIFFABLE,
    identifier: str | None = None,
) -> None:
    result = track(DiffableResult(identifier=identifier), shape, actual, expected)
    if not result.is_empty:
        raise AssertionError(f"Values diverged:\n{result.render()}")


__all__ = ["assert_no_divergence"]
