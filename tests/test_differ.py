from collections import OrderedDict
from datetime import datetime, timezone
from decimal import Decimal

import numpy as np
import pytest

from helperkit.copier import deep_object_copy
from helperkit.differ import Difference, find_difference
from helperkit.exceptions import InvalidArgumentError


def test_identical_mappings_have_no_difference():
    state = {"a": 1, "b": {"c": [1, 2, {"d": None}]}, "at": datetime(2022, 1, 1)}
    assert find_difference(state, state) is None
    assert find_difference(state, deep_object_copy(state)) is None


def test_additions_in_current_are_ignored():
    assert find_difference({"a": 1}, {"a": 1, "b": 2}) is None


def test_first_field_in_prev_order_wins():
    assert find_difference({"a": 1, "b": 2}, {"a": 9, "b": 9}) == Difference("a", 9)
    prev = OrderedDict([("b", 2), ("a", 1)])
    assert find_difference(prev, {"a": 9, "b": 9}) == Difference("b", 9)


def test_nested_difference_is_wrapped():
    result = find_difference({"x": {"y": 1}}, {"x": {"y": 2}})
    assert result == Difference("x", Difference("y", 2))
    assert result.to_dict() == {"field": "x", "value": {"field": "y", "value": 2}}


def test_deep_nesting_wraps_at_every_level():
    result = find_difference({"a": {"b": {"c": 1}}}, {"a": {"b": {"c": 2}}})
    assert result.to_dict() == {
        "field": "a",
        "value": {"field": "b", "value": {"field": "c", "value": 2}},
    }


def test_array_difference_reports_whole_current_array():
    current = {"arr": [1, 9, 3]}
    result = find_difference({"arr": [1, 2, 3]}, current)
    assert result == Difference("arr", [1, 9, 3])
    assert result.value is current["arr"]


def test_array_elements_compare_structurally():
    prev = {"arr": [{"a": 1, "b": 2}]}
    assert find_difference(prev, {"arr": [{"b": 2, "a": 1}]}) is None
    assert find_difference(prev, {"arr": [{"a": 1, "b": 3}]}) == Difference("arr", [{"a": 1, "b": 3}])


def test_shorter_current_array_is_a_difference():
    assert find_difference({"arr": [1, 2]}, {"arr": [1]}) == Difference("arr", [1])
    assert find_difference({"arr": [None]}, {"arr": []}) == Difference("arr", [])


def test_longer_current_array_is_not_a_difference():
    assert find_difference({"arr": [1, 2]}, {"arr": [1, 2, 3]}) is None


def test_datetimes_compare_by_serialised_value():
    utc = datetime(2022, 1, 1, 12, 0, tzinfo=timezone.utc)
    naive = datetime(2022, 1, 1, 12, 0)
    assert find_difference({"at": utc}, {"at": naive}) is None

    later = datetime(2022, 1, 2, 12, 0, tzinfo=timezone.utc)
    assert find_difference({"at": utc}, {"at": later}) == Difference("at", later)


def test_datetime_against_string_is_a_difference():
    prev = {"at": datetime(2022, 1, 1)}
    assert find_difference(prev, {"at": "2022-01-01"}) == Difference("at", "2022-01-01")


def test_missing_key_reports_none():
    assert find_difference({"a": 1}, {}) == Difference("a", None)
    assert find_difference({"a": None}, {}) == Difference("a", None)


def test_strict_equality_distinguishes_types():
    assert find_difference({"a": 1}, {"a": "1"}) == Difference("a", "1")
    assert find_difference({"a": 1}, {"a": True}) == Difference("a", True)
    assert find_difference({"a": 1}, {"a": 1.0}) is None


def test_container_replaced_by_primitive():
    assert find_difference({"a": {"b": 1}}, {"a": 5}) == Difference("a", 5)
    assert find_difference({"a": 5}, {"a": [5]}) == Difference("a", [5])


def test_mapping_replaced_by_list_recurses_with_absent_keys():
    assert find_difference({"a": {"b": 1}}, {"a": [1]}) == Difference("a", Difference("b", None))


@pytest.mark.parametrize("prev, current", [([1], {"a": 1}), ({"a": 1}, "a"), (None, {})])
def test_non_mapping_arguments_are_rejected(prev, current):
    with pytest.raises(InvalidArgumentError):
        find_difference(prev, current)


@pytest.mark.parametrize(
    "prev, current",
    [
        ({"a": [1]}, {"a": [1.0]}),
        ({"a": [1]}, {"a": [Decimal("1")]}),
        ({"a": [2.0]}, {"a": [np.int64(2)]}),
        ({"a": [{"n": 1}]}, {"a": [{"n": 1.0}]}),
        ({"a": {"b": [Decimal("3.00")]}}, {"a": {"b": [3]}}),
    ],
)
def test_integral_numbers_are_equal_inside_sequences(prev, current):
    assert find_difference(prev, current) is None


def test_fractional_and_boolean_elements_still_differ():
    assert find_difference({"a": [1]}, {"a": [1.5]}) == Difference("a", [1.5])
    assert find_difference({"a": [1]}, {"a": [True]}) == Difference("a", [True])
    assert find_difference({"a": [Decimal("0.5")]}, {"a": [0.5]}) is None


@pytest.mark.parametrize(
    "prev_item, current_item",
    [(b"abc", "abc"), ({1, 2}, "{1, 2}"), (datetime(2022, 1, 1), "2022-01-01T00:00:00.000Z")],
)
def test_tagged_values_never_equal_plain_strings(prev_item, current_item):
    assert find_difference({"a": [prev_item]}, {"a": [current_item]}) == Difference("a", [current_item])


def test_mixed_key_order_is_ignored_inside_sequences():
    prev = {"a": [{1: "x", "b": "y"}]}
    assert find_difference(prev, {"a": [{"b": "y", 1: "x"}]}) is None
    assert find_difference(prev, {"a": [{"1": "x", "b": "y"}]}) == Difference("a", [{"1": "x", "b": "y"}])


def test_array_against_scalar_is_a_difference():
    assert find_difference({"a": np.array([5])}, {"a": 5}) == Difference("a", 5)
    assert find_difference({"a": 5}, {"a": np.array([5])}).field == "a"
