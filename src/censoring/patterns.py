"""Built-in detectors.

Cheap, deterministic regexes for the structured stuff: long numbers,
phone numbers, email addresses and URLs (including the usual
``[at]`` / ``(dot)`` obfuscations).  Banned words live in the ``words``
detector and are compiled on demand, see ``words.py``.
"""

from __future__ import annotations
import re
from .types import Detector, PatternList, SinglePattern

# re.ASCII throughout: \d and \w cover ASCII digits and word chars only

# Long runs of digits (account numbers, IDs, ...)
LONG_NUMBER = re.compile(r"\d{8,}", re.ASCII)

# Phone — optional sign, digits with spaces/hyphens or a (group), then 8+ more
PHONE_NUMBER = re.compile(
    r"([+-]?\d+[\d\s-]+|\(\d+\))[-\d.\s]{8,}",
    re.IGNORECASE | re.ASCII,
)

# Dot variants people use to dodge naive email/url checks
_DOT = r"(?:\.|\[dot\]|\(dot\)|\(punt\)|\[punt\])"

EMAIL_ADDRESS = re.compile(
    r"[\w.%+-]+(?:@|\[at\]|\(at\))[\w.-]+" + _DOT + r"[a-zA-Z]{2,4}",
    re.IGNORECASE | re.ASCII,
)

# URL — scheme optional, stops before whitespace or anything outside [\w/-]
URL = re.compile(
    r"(?:https?:/{1,2})?(?:[-\w]\.?){2,}" + _DOT
    + r"(?:[a-zA-Z]{2}\.[a-zA-Z]{2,3}|[a-zA-Z]{2,4}).*?(?=$|[^\w/-])",
    re.IGNORECASE | re.ASCII,
)


def default_filters() -> dict[str, Detector]:
    """Return a fresh registry of the built-in detectors, all disabled.

    Insertion order is the order detectors are applied in.
    """
    return {
        # Only the first run per pass is replaced
        "long_number": Detector(SinglePattern(LONG_NUMBER, count=1)),
        "phone_number": Detector(SinglePattern(PHONE_NUMBER)),
        "email_address": Detector(SinglePattern(EMAIL_ADDRESS)),
        "url": Detector(SinglePattern(URL)),
        "words": Detector(PatternList()),
    }
