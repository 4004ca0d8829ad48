"""censoring — filter phone numbers, emails, URLs and disguised words out of text."""

from .censor import Censoring, CensorConfig
from .config import create_censor, load_config, load_from_yaml
from .errors import CensoringError, InvalidArgument, InvalidPatternType, UnknownFilter
from .patterns import default_filters
from .types import (
    ComputedReplacement, Detector, FilterMatch, LiteralReplacement,
    PatternList, ScanResult, SinglePattern,
)
from .words import LEET_MAP, compile_word

__all__ = [
    "Censoring", "CensorConfig",
    "create_censor", "load_config", "load_from_yaml",
    "CensoringError", "InvalidArgument", "InvalidPatternType", "UnknownFilter",
    "default_filters",
    "Detector", "SinglePattern", "PatternList",
    "LiteralReplacement", "ComputedReplacement",
    "FilterMatch", "ScanResult",
    "LEET_MAP", "compile_word",
]
__version__ = "0.1.0"
