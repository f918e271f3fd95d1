"""
Tests for the cost classifier and the search functions.
"""

import math

import pytest

from palindromic_fuel.palindrome import is_palindrome, is_string_palindrome
from palindromic_fuel.search import (
    Result,
    ResultKind,
    batch,
    classify_volume,
    format_major_units,
    forward_search,
    is_effectively_whole,
    near_target_cost,
    nearest_to_target,
    round_half_away,
)


@pytest.mark.parametrize("pence, expected", [
    (0, "0.00"),
    (1, "0.01"),
    (10, "0.10"),
    (100, "1.00"),
    (101, "1.01"),
    (12345, "123.45"),
    (3223, "32.23"),
])
def test_format_major_units(pence, expected):
    assert format_major_units(pence) == expected


@pytest.mark.parametrize("value, epsilon, expected", [
    (5.0, 0.01, True),
    (5.001, 0.01, True),
    (5.02, 0.01, False),
    (-3.001, 0.01, True),
    (3.14, 0.01, False),
    (5.1, 0.2, True),
    (0.0, 0.01, True),
])
def test_is_effectively_whole(value, epsilon, expected):
    assert is_effectively_whole(value, epsilon) == expected


def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.5) == 1
    assert round_half_away(1.49) == 1
    assert round_half_away(3222.5) == 3223


def test_classify_volume():
    """Whole, palindromic-decimal and discarded volumes."""
    assert classify_volume(3223 / 128.9, "32.23") == Result(25.0, "32.23", False, ResultKind.WHOLE)
    assert classify_volume(121.004, "50.05") == Result(121.0, "50.05", True, ResultKind.WHOLE)
    assert classify_volume(5005 / 128.9, "50.05") == Result(
        38.83, "50.05", True, ResultKind.PALINDROMIC_DECIMAL)
    assert classify_volume(4554 / 128.9, "45.54") is None


def test_forward_search_standard_price():
    results = forward_search(128.9, 100)
    assert results == [
        Result(25.0, "32.23", False, ResultKind.WHOLE),
        Result(38.83, "50.05", True, ResultKind.PALINDROMIC_DECIMAL),
        Result(42.24, "54.45", True, ResultKind.PALINDROMIC_DECIMAL),
        Result(50.0, "64.46", False, ResultKind.WHOLE),
    ]


@pytest.mark.parametrize("price, max_volume, expected_count", [
    (128.9, 100, 4),
    (0, 10, 0),  # degenerate price
    (1000, 1, 0),  # no results in range
    (0.5, 10, 0),  # results would be under one litre
    (128.9, 1, 0),
    (500.0, 5, 2),
    (0.01, 10000, 0),
    (200.0, 10, 1),
    (1000.0, 50, 18),
    (131.0, 50, 2),
    (135.7, 50, 6),
])
def test_forward_search_counts(price, max_volume, expected_count):
    assert len(forward_search(price, max_volume)) == expected_count


@pytest.mark.parametrize("price", [0, -128.9, math.inf, math.nan])
def test_forward_search_degenerate_price(price):
    assert forward_search(price, 100) == []
    assert near_target_cost(price, 32.23, 100) == []
    assert nearest_to_target(price, 25, 10) is None


def test_forward_search_bounds_and_invariants():
    """Every result respects the volume window and both palindrome filters."""
    for price, max_volume in ((100, 100), (128.9, 1000), (1000.0, 50), (135.7, 50)):
        for result in forward_search(price, max_volume):
            assert 1 <= result.volume <= max_volume
            assert is_string_palindrome(result.cost_major_units)
            assert is_palindrome(round_half_away(float(result.cost_major_units) * 100))
            if result.kind == ResultKind.PALINDROMIC_DECIMAL:
                assert result.volume_is_palindromic
                assert is_string_palindrome(f"{result.volume:.2f}")
            else:
                assert result.volume == int(result.volume)
                assert result.volume_is_palindromic == is_palindrome(int(result.volume))


def test_forward_search_is_idempotent():
    assert forward_search(128.9, 1000) == forward_search(128.9, 1000)


def test_forward_search_epsilon():
    """A tighter tolerance drops volumes that were only nearly whole."""
    results = forward_search(128.9, 100, epsilon=0.001)
    assert [r.cost_major_units for r in results] == ["50.05", "54.45"]


def test_forward_search_repeated_whole_volume():
    """Two costs may round to the same whole volume."""
    results = forward_search(1000.0, 3)
    assert [(r.volume, r.cost_major_units) for r in results] == [
        (1.0, "10.01"),
        (2.0, "19.91"),
        (2.0, "20.02"),
        (3.0, "29.92"),
    ]


@pytest.mark.parametrize("target, radius, expected_volume", [
    (25.0, 10, 25.0),
    (30.0, 10, 25.0),
    (40.0, 5, 38.83),
    (48.0, 10, 50.0),
])
def test_nearest_to_target(target, radius, expected_volume):
    result = nearest_to_target(128.9, target, radius)
    assert result is not None
    assert result.volume == expected_volume


def test_nearest_to_target_no_match():
    assert nearest_to_target(128.9, 1000.0, 5) is None
    assert nearest_to_target(128.9, 70.0, 5) is None


def test_nearest_to_target_truncates_fractional_bounds():
    """Window bounds are whole volumes: 37.9 ± 1 searches 36 to 38."""
    assert nearest_to_target(128.9, 37.9, 1) is None
    assert nearest_to_target(128.9, 38.5, 1) == Result(
        38.83, "50.05", True, ResultKind.PALINDROMIC_DECIMAL)


def test_nearest_to_target_first_minimum_wins():
    result = nearest_to_target(1000.0, 2.0, 1)
    assert result == Result(2.0, "19.91", True, ResultKind.WHOLE)


@pytest.mark.parametrize("target, radius, expected_costs", [
    (32.23, 100, ["32.23"]),
    (50.05, 100, ["50.05"]),
    (1000.00, 10, []),
    (50.00, 500, ["50.05", "54.45"]),
])
def test_near_target_cost(target, radius, expected_costs):
    results = near_target_cost(128.9, target, radius)
    assert [r.cost_major_units for r in results] == expected_costs


def test_near_target_cost_single_match():
    assert near_target_cost(128.9, 32.23, 100) == [Result(25.0, "32.23", False, ResultKind.WHOLE)]


def test_near_target_cost_has_no_volume_ceiling():
    """Volumes far above any forward-search bound are still reported."""
    results = near_target_cost(1.0, 20.00, 1000)
    assert len(results) == 20
    assert results[0] == Result(1001.0, "10.01", True, ResultKind.WHOLE)
    assert results[-1].volume == 2992.0


def test_near_target_cost_window_clamped():
    """A radius larger than the target clamps the window at one minor unit."""
    assert near_target_cost(128.9, 0.5, 100) == []


def test_batch():
    results = batch([128.9, 135.7], 50)
    assert len(results) == 2
    assert results[128.9] == forward_search(128.9, 50)
    assert results[135.7] == forward_search(135.7, 50)
    assert all(results[price] for price in (128.9, 135.7))


def test_batch_edge_cases():
    assert batch([], 100) == {}
    assert len(batch([128.9], 100)) == 1
    # repeated prices collapse to one entry
    assert list(batch([128.9, 128.9], 100)) == [128.9]
