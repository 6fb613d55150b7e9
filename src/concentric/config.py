"""Sort configuration: blank-line filtering and the custom priority list."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from concentric.errors import ConfigError
from concentric.order import PriorityIndex

__all__ = ["SECTION", "SortConfig", "config_from_mapping", "load_config"]

logger = logging.getLogger(__name__)

SECTION = "sortConcentrically"


@dataclass(frozen=True)
class SortConfig:
    filter_blank_lines: bool = False
    custom_order: tuple[str, ...] | None = None  # replaces the default table, even when empty

    def priority_index(self) -> PriorityIndex:
        if self.custom_order is not None:
            return PriorityIndex(self.custom_order)
        return PriorityIndex.default()


def _section_value(data: dict[str, Any], name: str) -> Any:
    """Look *name* up as a flat ``section.name`` key or inside a nested section."""
    flat_key = f"{SECTION}.{name}"
    if flat_key in data:
        return data[flat_key]
    section = data.get(SECTION)
    if isinstance(section, dict):
        return section.get(name)
    return None


def _coerce_custom_order(raw: Any) -> tuple[str, ...] | None:
    if raw is None:
        return None
    if not isinstance(raw, list) or not all(isinstance(n, str) for n in raw):
        logger.warning(
            "Ignoring %s.customOrder: expected a list of strings, got %r",
            SECTION,
            raw,
        )
        return None
    return tuple(raw)


def _coerce_filter_blank(raw: Any) -> bool:
    if raw is None:
        return False
    if not isinstance(raw, bool):
        logger.warning(
            "Ignoring %s.filterBlankLines: expected a boolean, got %r",
            SECTION,
            raw,
        )
        return False
    return raw


def config_from_mapping(data: dict[str, Any]) -> SortConfig:
    """Build a SortConfig from decoded settings.

    Invalid values never raise: they are logged and replaced by defaults.
    """
    if not isinstance(data, dict):
        logger.warning("Ignoring settings: expected an object, got %r", type(data).__name__)
        return SortConfig()
    return SortConfig(
        filter_blank_lines=_coerce_filter_blank(_section_value(data, "filterBlankLines")),
        custom_order=_coerce_custom_order(_section_value(data, "customOrder")),
    )


def load_config(path: str | Path | None = None) -> SortConfig:
    """Load a SortConfig from a JSON settings file.

    Accepts VS Code style flat keys (``"sortConcentrically.customOrder"``) or
    a nested ``{"sortConcentrically": {...}}`` object.  With no path the
    defaults are returned.  Raises :class:`ConfigError` if the file cannot be
    read or is not valid JSON.
    """
    if path is None:
        return SortConfig()

    settings_path = Path(path)
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file {settings_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {settings_path}: {exc}") from exc

    config = config_from_mapping(data)
    logger.debug(
        "Loaded %s: filter_blank_lines=%s custom_order=%s",
        settings_path,
        config.filter_blank_lines,
        "yes" if config.custom_order else "no",
    )
    return config
