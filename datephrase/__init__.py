"""Recognize date phrases in free text and normalize them into datetimes.

Core philosophy: only strings that already look like one of a fixed set of
date layouts are handed to the parser; everything else is "not a date".
"""

from .types import DatePhrase, NormalizePolicy
from .patterns import date_regex
from .normalize import normalize_date_string, parse_date_string
from .extract import find_date_phrases, first_date, normalize_whitespace

__version__ = "0.1.0"
