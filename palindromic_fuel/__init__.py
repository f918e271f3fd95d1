"""Find fuel costs that read the same forwards and backwards."""

from .palindrome import (
    collect_in_range,
    digit_count,
    generate_for_length,
    is_palindrome,
    is_string_palindrome,
    iter_length,
)
from .search import (
    DEFAULT_EPSILON,
    Result,
    ResultKind,
    batch,
    forward_search,
    near_target_cost,
    nearest_to_target,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_EPSILON",
    "Result",
    "ResultKind",
    "batch",
    "collect_in_range",
    "digit_count",
    "forward_search",
    "generate_for_length",
    "is_palindrome",
    "is_string_palindrome",
    "iter_length",
    "near_target_cost",
    "nearest_to_target",
]
