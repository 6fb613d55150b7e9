"""Applying a concentric sort to a selected range of a document."""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from concentric.comparator import UnknownPlacement
from concentric.config import SortConfig
from concentric.errors import NoMultiLineSelectionError, SelectionError
from concentric.processor import sort_lines

__all__ = [
    "LineSelection",
    "join_lines",
    "sort_document_text",
    "sort_selection",
    "split_lines",
]

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class LineSelection:
    """An inclusive, zero-based range of whole lines.

    The bounds are normalized so that ``start_line <= end_line`` regardless of
    which way the selection was made.
    """

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if self.start_line < 0 or self.end_line < 0:
            raise SelectionError(
                f"Line numbers must be non-negative: {self.start_line}..{self.end_line}"
            )
        if self.start_line > self.end_line:
            start, end = self.end_line, self.start_line
            object.__setattr__(self, "start_line", start)
            object.__setattr__(self, "end_line", end)

    @property
    def is_single_line(self) -> bool:
        return self.start_line == self.end_line

    def __len__(self) -> int:
        return self.end_line - self.start_line + 1


def split_lines(text: str) -> tuple[list[str], str, bool]:
    """Split *text* into lines.

    Any of ``"\\r\\n"``, ``"\\r"`` and ``"\\n"`` ends a line.  Returns
    ``(lines, newline, trailing)`` where *newline* is the separator used most
    often (the first one seen on a tie, ``"\\n"`` when there is none) and
    *trailing* tells whether the text ended with a line break.
    """
    separators = _NEWLINE_RE.findall(text)
    newline = Counter(separators).most_common(1)[0][0] if separators else "\n"
    if not text:
        return [], newline, False
    lines = _NEWLINE_RE.split(text)
    trailing = bool(separators) and text.endswith(separators[-1])
    if trailing:
        lines.pop()
    return lines, newline, trailing


def join_lines(lines: Sequence[str], newline: str = "\n", trailing: bool = False) -> str:
    text = newline.join(lines)
    if trailing and lines:
        text += newline
    return text


def sort_selection(
    lines: Sequence[str],
    selection: LineSelection,
    config: SortConfig | None = None,
    placement: UnknownPlacement = UnknownPlacement.LAST,
    dedup: bool = False,
    strict: bool = False,
) -> list[str]:
    """Return a copy of *lines* with the selected range sorted.

    The selected span is replaced as one block; lines outside it are
    untouched.  Raises :class:`NoMultiLineSelectionError` for a single-line
    selection and :class:`SelectionError` if the selection runs past the end
    of the document.
    """
    if selection.is_single_line:
        raise NoMultiLineSelectionError(
            f"Selection covers only line {selection.start_line}"
        )
    if selection.end_line >= len(lines):
        raise SelectionError(
            f"Selection ends at line {selection.end_line} but the document "
            f"has {len(lines)} line(s)"
        )

    start, end = selection.start_line, selection.end_line + 1
    block = sort_lines(
        lines[start:end], config, placement=placement, dedup=dedup, strict=strict
    )
    logger.debug("Sorted lines %d..%d", selection.start_line, selection.end_line)
    return [*lines[:start], *block, *lines[end:]]


def sort_document_text(
    text: str,
    selection: LineSelection | None = None,
    config: SortConfig | None = None,
    placement: UnknownPlacement = UnknownPlacement.LAST,
    dedup: bool = False,
    strict: bool = False,
) -> str:
    """Sort the selected lines of *text* (all of it by default).

    Line endings and a trailing newline are preserved.  A single-line
    selection leaves the text unchanged.
    """
    lines, newline, trailing = split_lines(text)
    if selection is None:
        selection = LineSelection(0, max(len(lines) - 1, 0))

    try:
        new_lines = sort_selection(
            lines, selection, config, placement=placement, dedup=dedup, strict=strict
        )
    except NoMultiLineSelectionError:
        logger.debug("Single-line selection, nothing to sort")
        return text
    return join_lines(new_lines, newline, trailing)
