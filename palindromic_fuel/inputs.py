"""
Parsing of raw user input (CLI arguments, query strings, form fields) into
validated search parameters. The search core assumes its inputs went
through here first.
"""

import math
from typing import List

from .exceptions import InputError


def parse_price(text: str) -> float:
    try:
        price = float(text.strip())
    except (AttributeError, ValueError):
        raise InputError("Invalid price parameter") from None
    if not math.isfinite(price):
        raise InputError("Invalid price parameter")
    return price


def parse_max_volume(text: str) -> int:
    try:
        return int(text.strip())
    except (AttributeError, ValueError):
        raise InputError("Invalid max parameter") from None


def parse_price_list(text: str) -> List[float]:
    """
    Parses a comma-separated list of prices such as "128.9, 135.7,142.3".
    """
    prices = []
    for item in text.split(","):
        try:
            prices.append(parse_price(item))
        except InputError:
            raise InputError(f"Error parsing price '{item.strip()}'") from None
    return prices


def check_search_bounds(price: float, max_volume: float, volume_limit: int,
                        cost_limit: int) -> None:
    """
    Rejects searches above volume_limit, or whose candidate window
    ceil(price * max_volume) runs past cost_limit minor units. Both caps
    apply to remote callers.
    """
    if max_volume > volume_limit:
        raise InputError(f"Maximum volume must not exceed {volume_limit}")
    if math.isfinite(price) and price > 0 and math.ceil(price * max_volume) > cost_limit:
        raise InputError(f"Maximum cost must not exceed {cost_limit} minor units")
