"""CSV export of search results."""

import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, TextIO, Tuple, Union

from .exceptions import ExportError
from .report import format_volume
from .search import Result

logger = logging.getLogger(__name__)

HEADER = [
    "Price per Unit (minor units)",
    "Volume",
    "Cost (major units)",
    "Volume is Palindrome",
    "Type",
]


def result_row(result: Result, price: float) -> List[str]:
    return [
        f"{price:.1f}",
        format_volume(result.volume),
        result.cost_major_units,
        "Yes" if result.volume_is_palindromic else "No",
        result.kind.value,
    ]


def write_rows(stream: TextIO, groups: Iterable[Tuple[float, Sequence[Result]]]) -> int:
    """
    Writes the header and one row per result, groups in the order given.
    Returns the number of result rows written.
    """
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(HEADER)

    count = 0
    for price, results in groups:
        for result in results:
            writer.writerow(result_row(result, price))
            count += 1
    return count


def _export(path: Union[str, Path], groups: Iterable[Tuple[float, Sequence[Result]]]) -> int:
    try:
        with open(path, "w", newline="", encoding="utf-8") as stream:
            count = write_rows(stream, groups)
    except OSError as e:
        raise ExportError(f"failed to write CSV file {path}: {e}") from e

    logger.info("Exported %d rows to %s", count, path)
    return count


def export_csv(path: Union[str, Path], results: Sequence[Result], price: float) -> int:
    """Exports the results of a single forward search."""
    return _export(path, [(price, results)])


def export_batch_csv(path: Union[str, Path], batch_results: Dict[float, List[Result]],
                     prices: Sequence[float]) -> int:
    """
    Exports batch results in the order of `prices`, which may repeat a price
    present only once in batch_results.
    """
    return _export(path, [(price, batch_results.get(price, [])) for price in prices])
