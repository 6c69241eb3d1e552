from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from diffable.core.protocol import Diffable


def _mismatch(actual: Any, expected: Any) -> str:
    # Labels are swapped relative to the argument names; existing report
    # consumers match on this exact text.
    return f"<expected: {actual}, received: {expected}>"


class DiffableResult:
    """Accumulates divergence lines for one comparison scope.

    Every ``track_*`` method mutates the report in place and returns it, so
    generated comparison code can chain one call per field.
    """

    __slots__ = ("_results", "identifier")

    def __init__(self, results: Iterable[str] | None = None, identifier: str | None = None) -> None:
        self._results: list[str] = list(results or [])
        self.identifier = identifier

    @property
    def results(self) -> tuple[str, ...]:
        return tuple(self._results)

    @property
    def is_empty(self) -> bool:
        return not self._results

    def append(self, element: str) -> None:
        self._results.append(element)

    def append_report(self, contents: DiffableResult) -> None:
        """Fold a nested report in as a single entry; empty reports are dropped."""
        if not contents.is_empty:
            self._results.append(contents.render())

    def render(self) -> str:
        if not self._results:
            return ""
        prefix = f"{self.identifier} " if self.identifier is not None else ""
        return prefix + "\n".join(self._results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "results": list(self._results),
        }

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"DiffableResult(results={self._results!r}, identifier={self.identifier!r})"

    def __len__(self) -> int:
        return len(self._results)

    def __bool__(self) -> bool:
        return bool(self._results)

    # Scalars

    def track_difference(self, actual: Any, expected: Any) -> DiffableResult:
        if actual != expected:
            self.append_report(DiffableResult([_mismatch(actual, expected)]))
        return self

    def track_optional(self, actual: Any | None, expected: Any | None) -> DiffableResult:
        return self.track_difference(actual, expected)

    # Comparable values

    def track_diffable(self, actual: Diffable, expected: Any) -> DiffableResult:
        self.append_report(actual.diff_against(expected))
        return self

    # Sequences

    def track_sequence(self, actual: Sequence[Any], expected: Sequence[Any]) -> DiffableResult:
        """Mismatch lines show the two diverging elements, not the whole sequences."""
        diff_result = DiffableResult()
        if len(actual) != len(expected):
            diff_result.append(f"Different count {len(actual)} vs {len(expected)}")
        else:
            for idx, item in enumerate(actual):
                if item != expected[idx]:
                    diff_result.append(f"idx {idx}: {_mismatch(item, expected[idx])}")
        self.append_report(diff_result)
        return self

    def track_diffable_sequence(
        self,
        actual: Sequence[Diffable],
        expected: Sequence[Any],
    ) -> DiffableResult:
        diff_result = DiffableResult()
        if len(actual) != len(expected):
            diff_result.append(f"Different count {len(actual)} vs {len(expected)}")
        else:
            for idx, item in enumerate(actual):
                diff = DiffableResult().track_diffable(item, expected[idx])
                if not diff.is_empty:
                    diff_result.append(f"idx {idx}: {diff}")
        self.append_report(diff_result)
        return self

    # Mappings

    def _track_count(self, actual: Mapping[Any, Any], expected: Mapping[Any, Any]) -> DiffableResult:
        # Only called when sizes differ: the count line goes straight to this
        # report, missing keys travel through a scoped sub-report.
        self.append(f"Different count {len(actual)} vs {len(expected)}")
        if len(expected) > len(actual):
            missing_keys = [str(key) for key in expected if key not in actual]
            self.append_report(DiffableResult([f"Missing keys: {', '.join(missing_keys)}"]))
        return self

    def track_diffable_mapping(
        self,
        actual: Mapping[Any, Diffable],
        expected: Mapping[Any, Any],
    ) -> DiffableResult:
        if len(actual) != len(expected):
            return self._track_count(actual, expected)

        diff_result = DiffableResult()
        for key, actual_element in actual.items():
            if key not in expected:
                diff_result.append(f'Missing key "{key}"')
                continue
            diff = DiffableResult().track_diffable(actual_element, expected[key])
            if not diff.is_empty:
                diff_result.append(f'key "{key}": {diff}')
        self.append_report(diff_result)
        return self

    def track_equatable_mapping(
        self,
        actual: Mapping[Any, Any],
        expected: Mapping[Any, Any],
    ) -> DiffableResult:
        """Like :meth:`track_diffable_mapping` for values offering only ``==``/identity.

        Mismatch lines show the two values under the key, not the whole mappings.
        """
        if len(actual) != len(expected):
            return self._track_count(actual, expected)

        diff_result = DiffableResult()
        for key, actual_element in actual.items():
            if key not in expected:
                diff_result.append(f'Missing key "{key}"')
                continue
            expected_element = expected[key]
            if actual_element is not expected_element and actual_element != expected_element:
                diff_result.append(f'key "{key}": {_mismatch(actual_element, expected_element)}')
        self.append_report(diff_result)
        return self


__all__ = ["DiffableResult"]
