"""Concentric line comparator with unknown-last and unknown-first variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from concentric.extractor import extract_key
from concentric.order import PriorityIndex

__all__ = ["ConcentricComparator", "UnknownPlacement"]


class UnknownPlacement(Enum):
    """Where lines whose property is not in the priority list end up."""

    LAST = "last"
    FIRST = "first"


@dataclass(frozen=True)
class ConcentricComparator:
    """Total ordering over declaration lines.

    Known properties sort by rank.  Unknown properties sort among themselves
    by raw key in code-point order, and as a group go after (``LAST``) or
    before (``FIRST``) the known ones.  Lines with equal keys, or keys of equal
    rank, compare as 0 so a stable sort keeps their input order.
    """

    index: PriorityIndex
    placement: UnknownPlacement = UnknownPlacement.LAST
    strict: bool = False

    def sort_key(self, line: str) -> tuple[int, int, str]:
        key = extract_key(line, strict=self.strict)
        rank = self.index.rank_of(key)
        unknown_group = 1 if self.placement is UnknownPlacement.LAST else 0
        if rank is None:
            return (unknown_group, 0, key)
        return (1 - unknown_group, rank, "")

    def compare(self, a: str, b: str) -> int:
        """Return a negative number, zero or a positive number as *a* sorts
        before, equal to or after *b*."""
        ka = self.sort_key(a)
        kb = self.sort_key(b)
        return (ka > kb) - (ka < kb)

    def __call__(self, a: str, b: str) -> int:
        return self.compare(a, b)
