"""Word-pattern compiler — turns a banned word into a disguise-tolerant regex.

Two disguises are handled:

  - leetspeak substitution:   internet  →  1nt3rn3t
  - separator insertion:      internet  →  i.n.t.e.r.n.e.t

At most one non-alphanumeric character is tolerated between two letters,
and a letter itself can never be skipped.
"""

from __future__ import annotations
import logging
import re
from types import MappingProxyType
from typing import Mapping

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

# Lowercase letter → characters commonly used in its place
LEET_MAP: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "o": ("0",),
    "g": ("9",),
    "b": ("8", "6"),
    "t": ("7",),
    "s": ("5",),
    "a": ("4",),
    "e": ("3",),
    "z": ("2",),
    "i": ("1",),
    "l": ("1",),
})

# Optional single separator between two letters
_NOISE = "[^a-z0-9]?"


def compile_word(
    word: str,
    leet_map: Mapping[str, tuple[str, ...]] = LEET_MAP,
) -> re.Pattern[str]:
    """Compile ``word`` into a case-insensitive, disguise-tolerant pattern."""
    if not isinstance(word, str):
        raise InvalidArgument(
            f"Invalid word type supplied: {type(word).__name__}. Expected str."
        )
    if not word:
        raise InvalidArgument("Cannot filter an empty word.")

    lowered = word.lower()
    parts: list[str] = []
    last = len(lowered) - 1
    for i, char in enumerate(lowered):
        noise = _NOISE if i < last else ""
        substitutes = leet_map.get(char)
        if not substitutes:
            parts.append(re.escape(char) + noise)
            continue
        alternatives = "|".join(re.escape(c) for c in (char, *substitutes))
        parts.append(f"(?:(?:{alternatives}){noise})")

    source = "".join(parts)
    logger.debug("Compiled filter word of length %d into %r", len(word), source)
    return re.compile(source, re.IGNORECASE)
