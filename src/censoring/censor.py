"""Censoring — the main API.  Enabled detectors run in registry order.

Usage:
    from censoring import Censoring

    scan = Censoring()
    scan.enable_filters(["phone_number", "email_address", "words"])
    scan.add_filter_word("internet")

    scan.prepare("The 1nt3r.n.e.t, call me on 555-123456")
    scan.test()       # True
    scan.replace()    # "The ***, call me on ***"
    scan.matches()    # ["555-123456", "1nt3r.n.e.t"]

Each detector sees the output of the previous one, so a later detector
can miss text an earlier one already replaced.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, Mapping, Sequence

from .errors import InvalidArgument, InvalidPatternType, UnknownFilter
from .patterns import default_filters
from .types import (
    ComputedReplacement,
    Detector,
    FilterMatch,
    LiteralReplacement,
    PatternList,
    ReplacementPolicy,
    ScanResult,
    SinglePattern,
)
from .words import LEET_MAP, compile_word

logger = logging.getLogger(__name__)

_HIGHLIGHT_FMT = '<span style="background: #{color};">{text}</span>'
_HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}")


@dataclass
class CensorConfig:
    """Initial settings for a Censoring instance."""
    replacement: str | Callable[[str], str] = "***"
    highlight_color: str = "F2B8B8"
    leet_map: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: LEET_MAP)
    # Refuse to scan longer inputs (None = no limit)
    max_length: int | None = None


class Censoring:
    """Configurable text censor.

    Holds a registry of named detectors, a replacement policy and a
    highlight color, plus the result of the last ``prepare()`` call.
    Instances share no state; one instance is not meant to be used from
    several threads at once.
    """

    def __init__(self, config: CensorConfig | None = None) -> None:
        self.config = config or CensorConfig()
        self.filters: dict[str, Detector] = default_filters()
        self._replacement: ReplacementPolicy = LiteralReplacement("***")
        self._highlight_color = "F2B8B8"
        self._current = ScanResult()

        self.set_replacement_string(self.config.replacement)
        self.set_highlight_color(self.config.highlight_color)

        limit = self.config.max_length
        if limit is not None and (
            isinstance(limit, bool) or not isinstance(limit, int) or limit < 0
        ):
            raise InvalidArgument(
                f"Invalid max_length supplied: {limit!r}. Expected a non-negative int or None."
            )

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def set_highlight_color(self, color: str) -> None:
        """Set the highlight background as hex, with or without a leading #."""
        if not isinstance(color, str):
            raise InvalidArgument(
                f"Invalid highlight color type supplied: {type(color).__name__}. Expected str."
            )
        color = color.removeprefix("#")
        if not _HEX_COLOR.fullmatch(color):
            raise InvalidArgument(f"Invalid highlight color supplied: {color!r}")
        self._highlight_color = color

    def get_highlight_color(self) -> str:
        return self._highlight_color

    def set_replacement_string(self, value: str | Callable[[str], str]) -> Censoring:
        """Replace matches with a fixed string, or with ``value(match)``."""
        if isinstance(value, str):
            self._replacement = LiteralReplacement(value)
        elif callable(value):
            self._replacement = ComputedReplacement(value)
        else:
            raise InvalidArgument(
                f"Invalid replacement type supplied: {type(value).__name__}. "
                "Expected str or callable."
            )
        return self

    def get_replacement_string(self) -> str | Callable[[str], str]:
        if isinstance(self._replacement, ComputedReplacement):
            return self._replacement.fn
        return self._replacement.value

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def add_filter(self, name: str, detector: Detector) -> None:
        """Register (or overwrite) a detector under ``name``."""
        self.filters[name] = detector
        logger.debug("Registered filter %r", name)

    def enable_filter(self, name: str) -> Censoring:
        self._get_filter(name).enabled = True
        logger.debug("Enabled filter %r", name)
        return self

    def enable_filters(self, names: Sequence[str]) -> Censoring:
        """Enable several filters in order.  No rollback if one is unknown."""
        for name in _as_sequence(names, "filters"):
            self.enable_filter(name)
        return self

    def disable_filter(self, name: str) -> Censoring:
        self._get_filter(name).enabled = False
        logger.debug("Disabled filter %r", name)
        return self

    def disable_filters(self, names: Sequence[str]) -> Censoring:
        for name in _as_sequence(names, "filters"):
            self.disable_filter(name)
        return self

    @property
    def enabled_filters(self) -> list[str]:
        return [name for name, detector in self.filters.items() if detector.enabled]

    def add_filter_word(self, word: str) -> Censoring:
        """Add a word to the ``words`` detector, disguises included."""
        pattern = compile_word(word, self.config.leet_map)
        matcher = self._get_filter("words").matcher
        if not isinstance(matcher, PatternList):
            raise InvalidPatternType("The 'words' filter must hold a PatternList.")
        matcher.patterns.append(pattern)
        return self

    def add_filter_words(self, words: Sequence[str]) -> Censoring:
        for word in _as_sequence(words, "words"):
            self.add_filter_word(word)
        return self

    def _get_filter(self, name: str) -> Detector:
        try:
            return self.filters[name]
        except KeyError:
            raise UnknownFilter(name) from None

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def prepare(self, text: str, highlight: bool = False) -> Censoring:
        """Scan ``text`` and cache the result for test() / replace()."""
        self._current = self.scan(text, highlight)
        logger.debug(
            "Prepared %d chars: %d match(es), changed=%s",
            len(text), len(self._current.matches), self._current.has_matches,
        )
        return self

    def test(self) -> bool:
        """Did the last prepared text change?"""
        return self._current.has_matches

    def replace(self) -> str:
        """The last prepared text, filtered or highlighted."""
        return self._current.text

    def matches(self) -> list[str]:
        """Substrings hit during the last prepare(), in application order."""
        return [m.text for m in self._current.matches]

    @property
    def result(self) -> ScanResult:
        return self._current

    def filter_string(self, text: str, highlight: bool = False) -> str:
        """Run every enabled detector over ``text``.  Doesn't touch the cache."""
        return self.scan(text, highlight).text

    def scan(self, text: str, highlight: bool = False) -> ScanResult:
        """Like filter_string(), but returns the full ScanResult."""
        if not isinstance(text, str):
            raise InvalidArgument(
                f"Invalid text type supplied: {type(text).__name__}. Expected str."
            )
        limit = self.config.max_length
        if limit is not None and len(text) > limit:
            raise InvalidArgument(f"Text of {len(text)} chars exceeds max_length={limit}.")

        found: list[FilterMatch] = []
        result = text
        for name, detector in self.filters.items():
            if not detector.enabled:
                continue
            repl = self._replacer(name, highlight, found)
            for pattern, count in _passes(name, detector):
                result = pattern.sub(repl, result, count=count)

        return ScanResult(text=result, has_matches=result != text, matches=tuple(found))

    def _replacer(
        self,
        name: str,
        highlight: bool,
        found: list[FilterMatch],
    ) -> Callable[[re.Match[str]], str]:
        policy = self._replacement
        color = self._highlight_color

        def replace(m: re.Match[str]) -> str:
            matched = m.group()
            found.append(FilterMatch(filter_name=name, text=matched))
            if highlight:
                return _HIGHLIGHT_FMT.format(color=color, text=matched)
            if isinstance(policy, ComputedReplacement):
                return policy.fn(matched)
            return policy.value

        return replace


def _passes(name: str, detector: Detector) -> Iterator[tuple[re.Pattern[str], int]]:
    """Yield (pattern, count) for each substitution pass of a detector."""
    matcher = detector.matcher
    if isinstance(matcher, SinglePattern):
        patterns = [(matcher.pattern, matcher.count)]
    elif isinstance(matcher, PatternList):
        patterns = [(p, 0) for p in matcher.patterns]
    else:
        raise InvalidPatternType(
            f"Filter {name!r} has an invalid matcher: {type(matcher).__name__}. "
            "Expected SinglePattern or PatternList."
        )

    for pattern, count in patterns:
        if not isinstance(pattern, re.Pattern):
            raise InvalidPatternType(
                f"Filter {name!r} holds a {type(pattern).__name__}. Expected a compiled regex."
            )
        yield pattern, count


def _as_sequence(value: object, what: str) -> Sequence:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise InvalidArgument(
            f"Invalid {what} type supplied: {type(value).__name__}. Expected a list."
        )
    return value
