"""YAML/dict config loader for censoring.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    censoring:
      enabled: true
      filters:                   # enabled in this order
        - phone_number
        - email_address
        - words
      words:
        - internet
      replacement: "***"
      highlight_color: "#F2B8B8"
      max_length: 100000
      custom_filters:
        ticket: "TICKET-[0-9]+"   # single pattern
        swears:                  # pattern list, one pass each
          - "darn"
          - "heck"

Custom filters are case-insensitive and enabled as soon as they're added.
"""

from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Any

from .censor import Censoring, CensorConfig
from .errors import InvalidArgument
from .types import Detector, PatternList, SinglePattern

logger = logging.getLogger(__name__)


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    # Support nested under "censoring" key or flat
    if "censoring" in data:
        data = data["censoring"] or {}

    return {
        "enabled": data.get("enabled", True),
        "filters": _as_list(data, "filters"),
        "words": _as_list(data, "words"),
        "replacement": data.get("replacement", "***"),
        "highlight_color": str(data.get("highlight_color", "F2B8B8")),
        "max_length": data.get("max_length"),
        "custom_filters": dict(data.get("custom_filters") or {}),
    }


def _as_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key) or []
    # A bare string would otherwise be split into characters
    if not isinstance(value, (list, tuple)):
        raise InvalidArgument(
            f"Invalid {key} type in config: {type(value).__name__}. Expected a list."
        )
    return list(value)


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(path) as f:
        return load_config(yaml.safe_load(f) or {})


def create_censor(config: dict[str, Any]) -> Censoring:
    """Create a fully configured Censoring instance from a config dict."""
    cfg = load_config(config)

    censor = Censoring(CensorConfig(
        replacement=cfg["replacement"],
        highlight_color=cfg["highlight_color"],
        max_length=cfg["max_length"],
    ))

    for name, source in cfg["custom_filters"].items():
        censor.add_filter(name, _build_detector(name, source))

    censor.add_filter_words(cfg["words"])

    if not cfg["enabled"]:
        # Pass-through: everything registered, nothing applied
        for name in censor.enabled_filters:
            censor.disable_filter(name)
        logger.debug("Censoring disabled by config")
        return censor

    censor.enable_filters(cfg["filters"])
    return censor


def _build_detector(name: str, source: str | list[str]) -> Detector:
    if isinstance(source, str):
        return Detector(SinglePattern(_compile(name, source)), enabled=True)
    if isinstance(source, list):
        return Detector(PatternList([_compile(name, s) for s in source]), enabled=True)
    raise InvalidArgument(
        f"Invalid pattern for custom filter {name!r}: {type(source).__name__}. "
        "Expected str or list of str."
    )


def _compile(name: str, source: str) -> re.Pattern[str]:
    if not isinstance(source, str):
        raise InvalidArgument(
            f"Invalid pattern for custom filter {name!r}: {type(source).__name__}. Expected str."
        )
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as exc:
        raise InvalidArgument(f"Invalid regex for custom filter {name!r}: {exc}") from exc
