"""Console rendering of search results."""

from typing import Sequence

from rich.console import Console

from .search import Result, ResultKind


def format_volume(volume: float) -> str:
    """Whole volumes print without decimals, anything else with two."""
    if volume == int(volume):
        return f"{volume:.0f}"
    return f"{volume:.2f}"


def describe_volume(result: Result, volume_unit: str = "litres") -> str:
    if not result.volume_is_palindromic:
        return f"(whole number {volume_unit})"
    if result.kind == ResultKind.PALINDROMIC_DECIMAL:
        return f"(palindromic decimal {volume_unit})"
    return f"(palindromic whole {volume_unit})"


def format_result(result: Result, currency_symbol: str = "£",
                  volume_unit: str = "litres") -> str:
    """e.g. "25 litres = £32.23 (whole number litres)"."""
    return (
        f"{format_volume(result.volume)} {volume_unit} = "
        f"{currency_symbol}{result.cost_major_units} "
        f"{describe_volume(result, volume_unit)}"
    )


def print_result(console: Console, result: Result, currency_symbol: str = "£",
                 volume_unit: str = "litres") -> None:
    console.print(format_result(result, currency_symbol, volume_unit),
                  markup=False, highlight=False)


def print_results(console: Console, results: Sequence[Result], price: float,
                  limit: int = 50, currency_symbol: str = "£",
                  volume_unit: str = "litres") -> None:
    """
    Prints a header for the price followed by at most `limit` results and a
    count of the ones left out.
    """
    console.print(f"\n[bold]Price: {price:.1f} per unit[/bold]")
    console.print(f"Found {len(results)} palindromic costs:\n", highlight=False)

    for result in results[:limit]:
        print_result(console, result, currency_symbol, volume_unit)

    if len(results) > limit:
        console.print(f"\n... and {len(results) - limit} more results", highlight=False)
