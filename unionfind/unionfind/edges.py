from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from . import config
from .errors import EdgeListError
from .utils import to_element

Edge = Tuple[int, int]


def _is_missing(x) -> bool:
    if x is None or x is pd.NA or x is pd.NaT:
        return True
    return isinstance(x, (float, np.floating)) and np.isnan(x)


def _endpoint(x, row: int) -> int:
    if _is_missing(x):
        raise EdgeListError("Edge has a missing endpoint", row=row)
    return to_element(x, allow_integral_float=True)


def _frame_pairs(frame: pd.DataFrame, source: str, target: str) -> Iterator[Edge]:
    missing = [c for c in (source, target) if c not in frame.columns]
    if missing:
        raise EdgeListError(
            f"Edge table lacks column(s) {missing}; has {list(frame.columns)}"
        )
    labels = list(frame.columns)
    ambiguous = [c for c in {source, target} if labels.count(c) > 1]
    if ambiguous:
        raise EdgeListError(f"Edge table has duplicate column(s) {sorted(map(str, ambiguous))}")
    cols = frame[[source, target]].itertuples(index=False, name=None)
    for i, (a, b) in enumerate(cols):
        yield _endpoint(a, i), _endpoint(b, i)


def _array_pairs(arr: np.ndarray) -> Iterator[Edge]:
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise EdgeListError(f"Edge array must have shape (n, 2), got {arr.shape}")
    for i, (a, b) in enumerate(arr):
        yield _endpoint(a, i), _endpoint(b, i)


def _iterable_pairs(edges: Iterable) -> Iterator[Edge]:
    try:
        it = iter(edges)
    except TypeError as e:
        raise EdgeListError(
            f"Edges must be iterable, got {type(edges).__name__}", cause=e
        )
    for i, item in enumerate(it):
        try:
            a, b = item
        except (TypeError, ValueError) as e:
            raise EdgeListError(f"Edge is not a pair: {item!r}", row=i, cause=e)
        yield _endpoint(a, i), _endpoint(b, i)


def iter_pairs(
    edges,
    source: Optional[str] = None,
    target: Optional[str] = None,
) -> Iterator[Edge]:
    """Yield ``(p, q)`` element pairs from an edge table.

    Args:
        edges: A DataFrame, an ``(n, 2)`` ndarray or an iterable of pairs.
        source: DataFrame column of the first endpoint. Defaults to the
            configured ``EDGES.source``.
        target: DataFrame column of the second endpoint. Defaults to the
            configured ``EDGES.target``.

    Yields:
        tuple[int, int]: Normalised endpoints, in table order.

    Raises:
        EdgeListError: The table is malformed. Raised lazily, when the
            offending row is reached.
        ElementError: An endpoint is not an integer identifier.
    """
    if isinstance(edges, pd.DataFrame):
        return _frame_pairs(
            edges,
            source if source is not None else config.edge_source,
            target if target is not None else config.edge_target,
        )
    if isinstance(edges, np.ndarray):
        return _array_pairs(edges)
    return _iterable_pairs(edges)
