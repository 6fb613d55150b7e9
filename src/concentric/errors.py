"""Error types raised while sorting declaration blocks."""

from __future__ import annotations


class ConcentricError(Exception):
    """Base class for all concentric sorting errors."""


class MalformedLineError(ConcentricError):
    """Raised in strict mode when a line has no ``:`` separator."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"No ':' separator in line: {line!r}")


class NoMultiLineSelectionError(ConcentricError):
    """Raised when a sort targets a single line. Callers treat it as a no-op."""


class SelectionError(ConcentricError):
    """Raised when a selection does not fit inside the document."""


class ConfigError(ConcentricError):
    """Raised when a settings file cannot be read or decoded."""
