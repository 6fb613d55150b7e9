"""Property-name extraction from a single declaration line."""

from __future__ import annotations

import re

from concentric.errors import MalformedLineError

__all__ = ["extract_key"]

# Everything up to, but not including, the first colon.
_KEY_RE = re.compile(r"^(?P<key>[^:]*):")


def extract_key(line: str, strict: bool = False) -> str:
    """Return the property name of *line*: the text before the first ``:``.

    The result is stripped of surrounding whitespace.  A line without a
    separator has no property name; by default the whole stripped line is
    used as the key so such lines still sort deterministically.  With
    ``strict=True`` a :class:`MalformedLineError` is raised instead.
    """
    match = _KEY_RE.match(line)
    if match is None:
        if strict:
            raise MalformedLineError(line)
        return line.strip()
    return match.group("key").strip()
