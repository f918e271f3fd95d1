"""
Searches for volumes whose cost is a palindrome in both minor and major units.

Costs are counted in minor currency units (pence) and prices are given in
minor units per unit volume. Only costs whose minor-unit numeral and whose
two-decimal major-unit string are both palindromic are reported.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional

from .palindrome import collect_in_range, is_palindrome, is_string_palindrome

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 0.01


class ResultKind(str, Enum):
    WHOLE = "whole"
    PALINDROMIC_DECIMAL = "palindromic_decimal"


@dataclass(frozen=True)
class Result:
    """A volume whose cost reads the same forwards and backwards."""

    volume: float
    cost_major_units: str
    volume_is_palindromic: bool
    kind: ResultKind


def round_half_away(x: float) -> int:
    """Rounds to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def format_major_units(cost_minor_units: int) -> str:
    return f"{cost_minor_units / 100:.2f}"


def is_effectively_whole(value: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    return abs(value - round_half_away(value)) < epsilon


def classify_volume(volume: float, cost_major_units: str,
                    epsilon: float = DEFAULT_EPSILON) -> Optional[Result]:
    """
    Classifies the volume bought for a palindromic cost.
    A volume within epsilon of a whole number is always reported, flagged as
    palindromic when the whole number is. Any other volume is rounded to two
    decimals and reported only if that rendering is itself a palindrome.
    """
    if is_effectively_whole(volume, epsilon):
        whole = round_half_away(volume)
        return Result(
            volume=float(whole),
            cost_major_units=cost_major_units,
            volume_is_palindromic=is_palindrome(whole),
            kind=ResultKind.WHOLE,
        )

    rounded = round_half_away(volume * 100) / 100
    if is_string_palindrome(f"{rounded:.2f}"):
        return Result(
            volume=rounded,
            cost_major_units=cost_major_units,
            volume_is_palindromic=True,
            kind=ResultKind.PALINDROMIC_DECIMAL,
        )
    return None


def _valid_price(price: float) -> bool:
    return math.isfinite(price) and price > 0


def _scan(costs: Iterable[int], price: float, max_volume: Optional[float],
          epsilon: float) -> Iterator[Result]:
    """
    Yields a Result for each candidate cost that survives the filters.
    Costs must ascend: volume grows with cost, so the scan ends at the first
    volume above max_volume. Volumes below one unit are skipped.
    """
    reciprocal = 1.0 / price

    for cost in costs:
        major = format_major_units(cost)
        if not is_string_palindrome(major):
            continue

        volume = cost * reciprocal
        if max_volume is not None and volume > max_volume:
            break
        if volume < 1.0:
            continue

        result = classify_volume(volume, major, epsilon)
        if result is not None:
            yield result


def forward_search(price: float, max_volume: float,
                   epsilon: float = DEFAULT_EPSILON) -> List[Result]:
    """
    Finds every palindromic cost for volumes between 1 and max_volume.
    The minor-unit window runs from the cost of a single unit,
    floor(price), to ceil(max_volume * price).
    """
    if not _valid_price(price):
        return []

    lo = math.floor(price)
    hi = math.ceil(max_volume * price)
    results = list(_scan(collect_in_range(lo, hi), price, max_volume, epsilon))
    logger.debug("Forward search price=%s max_volume=%s window=[%d, %d]: %d results",
                 price, max_volume, lo, hi, len(results))
    return results


def nearest_to_target(price: float, target_volume: float, radius: float,
                      epsilon: float = DEFAULT_EPSILON) -> Optional[Result]:
    """
    Finds the result whose volume is closest to target_volume, looking no
    further than radius either side. Ties go to the smaller cost.
    Both bounds are truncated to whole volumes, so a fractional target
    narrows the window. Returns None if nothing lies within it.
    """
    min_volume = int(max(1.0, target_volume - radius))
    max_volume = int(target_volume + radius)
    candidates = [
        result
        for result in forward_search(price, max_volume, epsilon)
        if result.volume >= min_volume
    ]
    return min(candidates, key=lambda r: abs(r.volume - target_volume), default=None)


def near_target_cost(price: float, target_major_units: float, radius_minor_units: int,
                     epsilon: float = DEFAULT_EPSILON) -> List[Result]:
    """
    Finds palindromic costs within radius_minor_units of a target cost given
    in major units. Any volume of at least one unit qualifies.
    """
    if not _valid_price(price):
        return []

    target = round_half_away(target_major_units * 100)
    lo = max(1, target - radius_minor_units)
    hi = target + radius_minor_units
    results = list(_scan(collect_in_range(lo, hi), price, None, epsilon))
    logger.debug("Target cost search price=%s window=[%d, %d]: %d results",
                 price, lo, hi, len(results))
    return results


def batch(prices: Iterable[float], max_volume: float,
          epsilon: float = DEFAULT_EPSILON) -> Dict[float, List[Result]]:
    """
    Runs forward_search for each price. Results are keyed by price, so a
    repeated price keeps a single entry.
    """
    return {price: forward_search(price, max_volume, epsilon) for price in prices}
