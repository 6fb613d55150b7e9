"""Concentric: sort CSS declaration lines in concentric order."""
from __future__ import annotations

__version__ = "0.1.0"

from concentric.comparator import ConcentricComparator, UnknownPlacement
from concentric.config import SortConfig, config_from_mapping, load_config
from concentric.errors import (
    ConcentricError,
    ConfigError,
    MalformedLineError,
    NoMultiLineSelectionError,
    SelectionError,
)
from concentric.extractor import extract_key
from concentric.order import DEFAULT_ORDER, PriorityIndex
from concentric.processor import (
    ProcessOptions,
    process,
    remove_blanks,
    remove_duplicates,
    sort_lines,
)
from concentric.selection import (
    LineSelection,
    join_lines,
    sort_document_text,
    sort_selection,
    split_lines,
)

__all__ = [
    "__version__",
    "ConcentricComparator",
    "ConcentricError",
    "ConfigError",
    "DEFAULT_ORDER",
    "LineSelection",
    "MalformedLineError",
    "NoMultiLineSelectionError",
    "PriorityIndex",
    "ProcessOptions",
    "SelectionError",
    "SortConfig",
    "UnknownPlacement",
    "config_from_mapping",
    "extract_key",
    "join_lines",
    "load_config",
    "process",
    "remove_blanks",
    "remove_duplicates",
    "sort_document_text",
    "sort_lines",
    "sort_selection",
    "split_lines",
]
