"""Core types."""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True, slots=True)
class SinglePattern:
    """One regex, applied as a single substitution pass."""
    pattern: re.Pattern[str]
    count: int = 0         # max replacements per pass, 0 = every match


@dataclass(slots=True)
class PatternList:
    """Ordered regexes, one substitution pass each."""
    patterns: list[re.Pattern[str]] = field(default_factory=list)


Matcher = SinglePattern | PatternList


@dataclass(slots=True)
class Detector:
    """A named (by its registry key) unit of matching logic."""
    matcher: Matcher
    enabled: bool = False


@dataclass(frozen=True, slots=True)
class LiteralReplacement:
    value: str


@dataclass(frozen=True, slots=True)
class ComputedReplacement:
    fn: Callable[[str], str]


ReplacementPolicy = LiteralReplacement | ComputedReplacement


@dataclass(frozen=True, slots=True)
class FilterMatch:
    """A single substring hit by a detector during a scan."""
    filter_name: str       # e.g. "phone_number", "words"
    text: str


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Result of scanning a string."""
    text: str = ""                               # filtered or highlighted text
    has_matches: bool = False                    # text differs from the input
    matches: tuple[FilterMatch, ...] = ()        # in application order
