from __future__ import annotations

import copy
from typing import Any

from diffable.core.result import DiffableResult


class _Tag:
    def __init__(self, name: str) -> None:
        self.name = name

    def diff_against(self, other: Any) -> DiffableResult:
        results = DiffableResult()
        results.append_report(DiffableResult(identifier="name").track_difference(self.name, other.name))
        return results


class _AlwaysEqual:
    def __eq__(self, other: object) -> bool:
        return True


def test_empty_report_renders_empty_string_even_with_identifier() -> None:
    assert DiffableResult().render() == ""
    assert DiffableResult(identifier="Foo").render() == ""
    assert DiffableResult(identifier="Foo").is_empty


def test_render_prefixes_identifier_and_joins_entries() -> None:
    single = DiffableResult(["<expected: 1, received: 2>"], identifier="Foo")
    assert single.render() == "Foo <expected: 1, received: 2>"

    multi = DiffableResult(["first", "second"], identifier="Foo")
    assert multi.render() == "Foo first\nsecond"
    assert str(multi) == multi.render()

    unlabelled = DiffableResult(["first", "second"])
    assert unlabelled.render() == "first\nsecond"


def test_render_is_a_pure_read() -> None:
    result = DiffableResult(["a", "b"], identifier="Foo")
    first = result.render()
    second = result.render()
    assert first == second
    assert result.results == ("a", "b")


def test_append_report_skips_empty_reports() -> None:
    parent = DiffableResult()
    parent.append_report(DiffableResult(identifier="name"))
    assert parent.is_empty
    assert parent.render() == ""

    parent.append("existing")
    parent.append_report(DiffableResult())
    assert parent.results == ("existing",)


def test_append_report_folds_rendered_text_as_single_entry() -> None:
    nested = DiffableResult(["one", "two"], identifier="field")
    parent = DiffableResult()
    parent.append_report(nested)
    assert parent.results == ("field one\ntwo",)


def test_len_bool_and_to_dict_follow_entries() -> None:
    result = DiffableResult(identifier="Foo")
    assert len(result) == 0
    assert not result
    result.append("x")
    assert len(result) == 1
    assert result
    assert result.to_dict() == {"identifier": "Foo", "results": ["x"]}


def test_track_difference_reports_both_values() -> None:
    result = DiffableResult().track_difference(1, 2)
    assert result.results == ("<expected: 1, received: 2>",)


def test_track_methods_return_same_instance_for_chaining() -> None:
    result = DiffableResult()
    chained = result.track_difference(1, 1).track_optional(None, None).track_sequence([1], [1])
    assert chained is result
    assert result.is_empty


def test_track_optional_handles_missing_values() -> None:
    result = DiffableResult().track_optional(None, 3)
    assert result.results == ("<expected: None, received: 3>",)


def test_track_sequence_count_mismatch_skips_elements() -> None:
    result = DiffableResult().track_sequence([1, 2, 3], [9, 9, 9, 9, 9])
    assert result.results == ("Different count 3 vs 5",)


def test_track_sequence_reports_only_diverging_index() -> None:
    result = DiffableResult().track_sequence([1, 2, 3], [1, 9, 3])
    assert result.results == ("idx 1: <expected: 2, received: 9>",)


def test_track_sequence_checks_every_index() -> None:
    result = DiffableResult().track_sequence([1, 2, 3], [0, 2, 4])
    assert result.results == (
        "idx 0: <expected: 1, received: 0>\nidx 2: <expected: 3, received: 4>",
    )


def test_track_diffable_folds_comparable_report() -> None:
    result = DiffableResult().track_diffable(_Tag("a"), _Tag("b"))
    assert result.results == ("name <expected: a, received: b>",)


def test_track_diffable_sequence_tags_index() -> None:
    result = DiffableResult().track_diffable_sequence(
        [_Tag("a"), _Tag("b"), _Tag("c")],
        [_Tag("a"), _Tag("x"), _Tag("c")],
    )
    assert result.results == ("idx 1: name <expected: b, received: x>",)


def test_track_diffable_sequence_count_mismatch() -> None:
    result = DiffableResult().track_diffable_sequence([_Tag("a")], [])
    assert result.results == ("Different count 1 vs 0",)


def test_mapping_missing_keys_short_circuits_per_key_comparison() -> None:
    actual = {"a": _Tag("x")}
    expected = {"a": _Tag("changed"), "b": _Tag("y"), "c": _Tag("z")}
    result = DiffableResult().track_diffable_mapping(actual, expected)
    assert result.results == ("Different count 1 vs 3", "Missing keys: b, c")


def test_equatable_mapping_missing_keys() -> None:
    result = DiffableResult().track_equatable_mapping({"a": 1}, {"a": 1, "b": 2})
    assert result.results == ("Different count 1 vs 2", "Missing keys: b")


def test_mapping_with_extra_actual_keys_reports_count_only() -> None:
    result = DiffableResult().track_equatable_mapping({"a": 1, "b": 2}, {"a": 1})
    assert result.results == ("Different count 2 vs 1",)


def test_mapping_same_size_different_keys_reports_missing_key() -> None:
    result = DiffableResult().track_equatable_mapping({"a": 1}, {"b": 1})
    assert result.results == ('Missing key "a"',)


def test_diffable_mapping_same_size_different_keys_reports_missing_key() -> None:
    result = DiffableResult().track_diffable_mapping(
        {"a": _Tag("x"), "b": _Tag("y")},
        {"a": _Tag("x"), "c": _Tag("y")},
    )
    assert result.results == ('Missing key "b"',)


def test_equatable_mapping_value_mismatch() -> None:
    result = DiffableResult().track_equatable_mapping({"a": 1}, {"a": 2})
    assert result.results == ('key "a": <expected: 1, received: 2>',)


def test_equatable_mapping_uses_identity_or_equality() -> None:
    shared = object()
    assert DiffableResult().track_equatable_mapping({"k": shared}, {"k": shared}).is_empty
    assert DiffableResult().track_equatable_mapping({"k": _AlwaysEqual()}, {"k": _AlwaysEqual()}).is_empty

    result = DiffableResult().track_equatable_mapping({"k": object()}, {"k": object()})
    assert len(result) == 1
    assert result.results[0].startswith('key "k": <expected: <object object at')


def test_diffable_mapping_value_mismatch_is_tagged_by_key() -> None:
    result = DiffableResult().track_diffable_mapping({"a": _Tag("x")}, {"a": _Tag("y")})
    assert result.results == ('key "a": name <expected: x, received: y>',)


def test_comparing_value_against_itself_is_empty_for_every_strategy() -> None:
    tag = _Tag("a")
    assert DiffableResult().track_difference("x", "x").is_empty
    assert DiffableResult().track_optional(None, None).is_empty
    assert DiffableResult().track_diffable(tag, tag).is_empty
    assert DiffableResult().track_sequence([1, 2], [1, 2]).is_empty
    assert DiffableResult().track_diffable_sequence([tag], [tag]).is_empty
    assert DiffableResult().track_diffable_mapping({"a": tag}, {"a": tag}).is_empty
    assert DiffableResult().track_equatable_mapping({"a": 1}, {"a": 1}).is_empty


def test_comparison_does_not_mutate_operands() -> None:
    actual = {"a": [1, 2], "b": [3]}
    expected = {"a": [1, 5], "c": [3]}
    actual_before = copy.deepcopy(actual)
    expected_before = copy.deepcopy(expected)

    DiffableResult().track_equatable_mapping(actual, expected)

    assert actual == actual_before
    assert expected == expected_before
