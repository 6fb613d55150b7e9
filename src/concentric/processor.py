"""Line block processing: blank filtering, sorting and duplicate collapsing."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Callable

from concentric.comparator import ConcentricComparator, UnknownPlacement
from concentric.config import SortConfig

__all__ = [
    "ProcessOptions",
    "process",
    "remove_blanks",
    "remove_duplicates",
    "sort_lines",
]

logger = logging.getLogger(__name__)

LineComparator = Callable[[str, str], int]


@dataclass(frozen=True)
class ProcessOptions:
    comparator: ConcentricComparator
    filter_blank: bool = False
    dedup: bool = False


def remove_blanks(lines: Iterable[str]) -> list[str]:
    """Return *lines* without the ones that are empty or whitespace only."""
    return [line for line in lines if line.strip()]


def remove_duplicates(
    lines: Iterable[str], comparator: LineComparator | None = None
) -> list[str]:
    """Collapse runs of adjacent equal lines down to their first line.

    Equality is ``comparator(prev, line) == 0`` when a comparator is given,
    plain string equality otherwise.  Only adjacent lines are compared, so
    call this on sorted input to collapse every duplicate.
    """
    kept: list[str] = []
    for line in lines:
        if kept:
            prev = kept[-1]
            same = comparator(prev, line) == 0 if comparator else prev == line
            if same:
                continue
        kept.append(line)
    return kept


def process(lines: Sequence[str], options: ProcessOptions) -> list[str]:
    """Filter, stable-sort and optionally dedup a block of lines.

    Returns a new list; *lines* is not modified.  A
    :class:`~concentric.errors.MalformedLineError` from a strict comparator
    propagates and no partial result is produced.
    """
    result = list(lines)
    if options.filter_blank:
        result = remove_blanks(result)

    result = sorted(result, key=options.comparator.sort_key)

    if options.dedup:
        before = len(result)
        result = remove_duplicates(result, options.comparator)
        logger.debug("Dedup removed %d line(s)", before - len(result))

    logger.debug(
        "Processed %d line(s) into %d (placement=%s)",
        len(lines),
        len(result),
        options.comparator.placement.value,
    )
    return result


def sort_lines(
    lines: Sequence[str],
    config: SortConfig | None = None,
    placement: UnknownPlacement = UnknownPlacement.LAST,
    dedup: bool = False,
    strict: bool = False,
) -> list[str]:
    """Sort *lines* concentrically using the priority list from *config*."""
    config = config or SortConfig()
    comparator = ConcentricComparator(
        index=config.priority_index(), placement=placement, strict=strict
    )
    options = ProcessOptions(
        comparator=comparator,
        filter_blank=config.filter_blank_lines,
        dedup=dedup,
    )
    return process(lines, options)
