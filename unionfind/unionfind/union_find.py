from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .edges import iter_pairs
from .utils import to_element

logger = logging.getLogger(__name__)


class UnionFind:
    """Disjoint-set forest over integer elements.

    Uses path compression in ``find`` and union by rank in ``join``, which
    keeps every operation amortized near O(1).

    Elements are implicit: any integer is a valid element and an element that
    was never joined is the root of its own singleton group. Nothing is
    recorded for such elements.

    Not thread safe. ``find`` and ``connected`` mutate the forest through
    path compression, so an instance shared between threads needs an
    external lock around every call.
    """

    def __init__(self):
        """Create an empty structure.

        Holds two mappings:
        - parent: element -> parent element; no entry means the element is a root
        - rank: root -> upper bound on its tree height; no entry means 0
        """
        self._parent: Dict[int, int] = {}
        self._rank: Dict[int, int] = {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(parents={len(self._parent)}, "
            f"ranks={len(self._rank)})"
        )

    @property
    def parent(self) -> Mapping[int, int]:
        """Read-only view of the parent pointers."""
        return MappingProxyType(self._parent)

    @property
    def rank(self) -> Mapping[int, int]:
        """Read-only view of the recorded ranks."""
        return MappingProxyType(self._rank)

    def rank_of(self, p: int) -> int:
        return self._rank.get(to_element(p), 0)

    def find(self, p: int) -> int:
        """Return the root of the group containing ``p``.

        Every element on the path from ``p`` to the root is re-pointed
        directly at the root.

        Args:
            p: Element identifier, seen before or not.

        Returns:
            int: The group representative.
        """
        p = to_element(p)
        parent = self._parent

        root = p
        while root in parent:
            root = parent[root]

        # root is only known after the first walk
        while p != root:
            nxt = parent[p]
            parent[p] = root
            p = nxt

        return root

    def join(self, p: int, q: int) -> None:
        """Merge the groups containing ``p`` and ``q``.

        Args:
            p: First element.
            q: Second element.

        Notes:
            The root of lower rank goes under the root of higher rank. On a
            tie ``q``'s root goes under ``p``'s root, whose rank grows by one.
        """
        p, q = to_element(p), to_element(q)
        self._link(self.find(p), self.find(q))

    def connected(self, p: int, q: int) -> bool:
        """Return True if ``p`` and ``q`` are in the same group."""
        p, q = to_element(p), to_element(q)
        return self.find(p) == self.find(q)

    def join_all(
        self,
        edges,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> int:
        """Join every pair of an edge table.

        Args:
            edges: A DataFrame, an ``(n, 2)`` ndarray or an iterable of pairs.
            source: DataFrame column of the first endpoint.
            target: DataFrame column of the second endpoint.

        Returns:
            int: Number of joins that merged two distinct groups.

        Notes:
            Pairs before a malformed row stay joined when an error is raised.
        """
        seen = merged = 0
        for p, q in iter_pairs(edges, source=source, target=target):
            seen += 1
            if self._link(self.find(p), self.find(q)):
                merged += 1
        logger.debug("join_all: %d pairs, %d merges", seen, merged)
        return merged

    def _link(self, pr: int, qr: int) -> bool:
        if pr == qr:
            return False

        rank_p = self._rank.get(pr, 0)
        rank_q = self._rank.get(qr, 0)
        if rank_p < rank_q:
            self._parent[pr] = qr
            logger.debug("join: %d -> %d (rank %d)", pr, qr, rank_q)
        elif rank_p > rank_q:
            self._parent[qr] = pr
            logger.debug("join: %d -> %d (rank %d)", qr, pr, rank_p)
        else:
            self._parent[qr] = pr
            self._rank[pr] = rank_p + 1
            logger.debug("join: %d -> %d (rank %d)", qr, pr, rank_p + 1)
        return True
