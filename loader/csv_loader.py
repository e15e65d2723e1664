"""CSV bulk loader.

Reads a bid export with pandas and appends one ``Bid`` per row, in file
order, to a ``LinkedList``. File and format problems are caught here and
turned into a ``LoadResult`` with an error message; bids appended before a
failure stay in the list.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

import pandas as pd

from bids.bid import Bid
from bids.linked_list import LinkedList
from common.config_loader import DEFAULT_COLUMNS
from loader.amount import str_to_double

logger = logging.getLogger(__name__)


class BidLoadError(Exception):
    """Raised when a bid file cannot be read or has the wrong shape."""


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one bulk load."""

    path: str
    loaded: int
    skipped: int
    elapsed: float  # seconds
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_rows(path: str, columns: Dict[str, int] = DEFAULT_COLUMNS) -> tuple[pd.DataFrame, List[List[str]]]:
    """Read ``path`` into a string-typed frame.

    Returns the frame and the list of malformed lines that were skipped
    (lines with more fields than the header). Bytes that are not valid
    UTF-8 are replaced rather than failing the whole file.
    """
    if min(columns.values()) < 0:
        raise BidLoadError(f"Column positions must be non-negative: {columns}")

    bad_lines: List[List[str]] = []

    def _skip(line: List[str]) -> None:
        bad_lines.append(line)
        return None

    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            encoding_errors="replace",
            engine="python",
            on_bad_lines=_skip,
        )
    except FileNotFoundError as e:
        raise BidLoadError(f"File not found: {path}") from e
    except pd.errors.EmptyDataError as e:
        raise BidLoadError(f"File is empty: {path}") from e
    except (pd.errors.ParserError, OSError) as e:
        raise BidLoadError(f"Could not parse {path}: {e}") from e

    needed = max(columns.values()) + 1
    if df.shape[1] < needed:
        raise BidLoadError(f"{path} has {df.shape[1]} columns, expected at least {needed}")

    return df.fillna(""), bad_lines


def iter_bids(df: pd.DataFrame, columns: Dict[str, int] = DEFAULT_COLUMNS, strip_char: str = "$") -> Iterator[Bid]:
    """Yield one ``Bid`` per frame row, in row order."""
    for row in df.itertuples(index=False, name=None):
        yield Bid(
            bid_id=row[columns["bid_id"]],
            title=row[columns["title"]],
            fund=row[columns["fund"]],
            amount=str_to_double(row[columns["amount"]], strip_char),
        )


def load_bids(
    path: str,
    bids: LinkedList,
    columns: Dict[str, int] = DEFAULT_COLUMNS,
    strip_char: str = "$",
) -> LoadResult:
    """Append every bid in ``path`` to ``bids``; never raises for bad input."""
    logger.info("Loading CSV file %s", path)
    start = time.perf_counter()
    loaded = 0
    skipped = 0
    error: Optional[str] = None

    try:
        df, bad_lines = read_rows(path, columns)
        skipped = len(bad_lines)
        if skipped:
            logger.warning("Skipped %d malformed row(s) in %s", skipped, path)
        for bid in iter_bids(df, columns, strip_char):
            bids.append(bid)
            loaded += 1
    except BidLoadError as e:
        error = str(e)
        logger.error("Error loading CSV '%s': %s", path, e)

    elapsed = time.perf_counter() - start
    logger.info("Loaded %d bid(s) from %s in %.4f s", loaded, path, elapsed)
    return LoadResult(path=path, loaded=loaded, skipped=skipped, elapsed=elapsed, error=error)
