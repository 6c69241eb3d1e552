from __future__ import annotations

import importlib
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from diffable.config import CheckConfig, CheckSpec
from diffable.constants import EXIT_DIVERGENCE, EXIT_INTERNAL_ERROR, EXIT_SUCCESS
from diffable.core.errors import (
    ERROR_CODE_REFERENCE_FAILED,
    ERROR_CODE_REFERENCE_UNRESOLVED,
    ERROR_CODE_SHAPE_MISMATCH,
    DiffableError,
)
from diffable.core.result import DiffableResult
from diffable.core.shapes import track


class UnresolvedReferenceError(LookupError):
    pass


@dataclass(slots=True)
class CheckOutcome:
    name: str
    result: DiffableResult = field(default_factory=DiffableResult)
    error: DiffableError | None = None

    @property
    def diverged(self) -> bool:
        return self.error is None and not self.result.is_empty

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "diverged": self.diverged,
            "report": self.result.render(),
            "results": self.result.to_dict()["results"],
        }
        if self.error is not None:
            payload["error"] = self.error.to_dict()
        return payload


@dataclass(slots=True)
class RunSummary:
    outcomes: list[CheckOutcome] = field(default_factory=list)

    @property
    def diverged(self) -> list[CheckOutcome]:
        return [outcome for outcome in self.outcomes if outcome.diverged]

    @property
    def errored(self) -> list[CheckOutcome]:
        return [outcome for outcome in self.outcomes if outcome.error is not None]

    @property
    def exit_code(self) -> int:
        if self.errored:
            return EXIT_INTERNAL_ERROR
        if self.diverged:
            return EXIT_DIVERGENCE
        return EXIT_SUCCESS

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": {
                "checks": len(self.outcomes),
                "diverged": len(self.diverged),
                "errored": len(self.errored),
            },
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
        }


def _import_target(reference: str, root: Path) -> Any:
    module_name, _, attr_path = reference.partition(":")
    root_entry = str(root)
    added = root_entry not in sys.path
    if added:
        sys.path.insert(0, root_entry)
    try:
        target: Any = importlib.import_module(module_name)
    finally:
        if added:
            sys.path.remove(root_entry)
    for part in attr_path.split("."):
        target = getattr(target, part)
    return target


def resolve_reference(reference: str, root: Path) -> Any:
    """Import ``module:attr`` (dotted attributes allowed); callables are invoked without arguments."""
    try:
        target = _import_target(reference, root)
    except (ImportError, AttributeError) as exc:
        raise UnresolvedReferenceError(f"Cannot resolve {reference}: {exc}") from exc
    if callable(target):
        return target()
    return target


def _resolve_side(spec: CheckSpec, side: str, root: Path) -> tuple[Any, DiffableError | None]:
    reference = spec.actual if side == "actual" else spec.expected
    try:
        return resolve_reference(reference, root), None
    except UnresolvedReferenceError as exc:
        code = ERROR_CODE_REFERENCE_UNRESOLVED
        message = str(exc)
    except Exception as exc:
        code = ERROR_CODE_REFERENCE_FAILED
        message = f"{reference} raised {type(exc).__name__}: {exc}"
    return None, DiffableError(
        code=code,
        message=message,
        check=spec.name,
        details={"side": side, "reference": reference},
    )


def run_check(spec: CheckSpec, root: Path) -> CheckOutcome:
    actual, error = _resolve_side(spec, "actual", root)
    if error is not None:
        return CheckOutcome(name=spec.name, error=error)
    expected, error = _resolve_side(spec, "expected", root)
    if error is not None:
        return CheckOutcome(name=spec.name, error=error)

    result = DiffableResult(identifier=spec.identifier)
    try:
        track(result, spec.shape, actual, expected)
    except (TypeError, AttributeError, KeyError, IndexError) as exc:
        # The configured shape does not fit the resolved values.
        return CheckOutcome(
            name=spec.name,
            error=DiffableError(
                code=ERROR_CODE_SHAPE_MISMATCH,
                message=(
                    f"shape {spec.shape.value} does not fit "
                    f"{type(actual).__name__} vs {type(expected).__name__}: {exc}"
                ),
                check=spec.name,
                details={"shape": spec.shape.value},
            ),
        )
    return CheckOutcome(name=spec.name, result=result)


def run_checks(config: CheckConfig) -> RunSummary:
    root = config.resolved_root()
    return RunSummary(outcomes=[run_check(spec, root) for spec in config.checks])


__all__ = [
    "CheckOutcome",
    "RunSummary",
    "UnresolvedReferenceError",
    "resolve_reference",
    "run_check",
    "run_checks",
]
