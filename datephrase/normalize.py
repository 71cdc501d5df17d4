"""Rewrite a date phrase into a shape dateutil parses reliably, then parse it.

Only strings the pattern catalog accepts are handled, even if the parser might
otherwise understand them.
"""

from __future__ import annotations

import logging
import re
import warnings
from datetime import datetime

from dateutil import parser
from dateutil.parser import UnknownTimezoneWarning

from .patterns import (
    DATE_DELIM,
    DATE_NUMBER,
    FULL_MONTH,
    FULL_MONTH_TO_SHORT,
    NUMBER_SUFFIXES,
    SHORT_MONTH,
    SHORT_MONTH_FIX,
    TZ_SUFFIXES,
    date_regex,
)
from .types import DEFAULT_POLICY, NormalizePolicy

logger = logging.getLogger(__name__)

AMBIGUOUS_DATE_RE = re.compile(rf"^({DATE_NUMBER}){DATE_DELIM}({DATE_NUMBER}){DATE_DELIM}([0-9]{{4}})$")
ORDINAL_RE = re.compile(rf"(\d+)\s?{NUMBER_SUFFIXES}\b", re.IGNORECASE)
FULL_MONTH_RE = re.compile(FULL_MONTH, re.IGNORECASE)
MONTH_FIRST_RE = re.compile(rf"^({SHORT_MONTH}){DATE_DELIM}(\d{{1,2}})", re.IGNORECASE)
# ISO or RFC850 date followed directly by a zone: the parser only reads a zone after a time
DATE_ZONE_RE = re.compile(
    rf"^([0-9]{{4}}-?[0-1]?[0-9]-?{DATE_NUMBER}|[0-9]{{2}}-{SHORT_MONTH}-(?:[0-9]{{2}}|[0-9]{{4}})) ?({TZ_SUFFIXES})$",
    re.IGNORECASE,
)


def _resolve_ambiguous(first: int, second: int, *, month_first: bool) -> tuple[int, int] | None:
    """Return (month, day) for a bare numeric date, or None if neither order works."""

    month, day = (first, second) if month_first else (second, first)
    if month > 12:
        # what we took as day can't be the month either
        if day > 12:
            return None
        month, day = day, month
    return month, day


def normalize_date_string(candidate: str, policy: NormalizePolicy | None = None) -> str | None:
    """Return the rewritten candidate, or None if it isn't a recognizable date.

    Rewrites, in order:
    - ambiguous 27/11/2014 and 11/27/2014 to ISO 2014-11-27
    - 21st -> 21
    - November -> Nov
    - Jun-01-2012 -> 01-Jun-2012
    - 08-Feb-94 GMT -> 08-Feb-94 00:00:00 GMT
    """

    policy = policy or DEFAULT_POLICY
    if not date_regex().search(candidate):
        return None

    d = candidate
    m = AMBIGUOUS_DATE_RE.match(d)
    if m:
        resolved = _resolve_ambiguous(int(m.group(1)), int(m.group(2)), month_first=policy.month_first)
        if resolved is None:
            logger.debug("normalize_date_string: unresolvable ambiguous date %r", candidate)
            return None
        month, day = resolved
        d = f"{int(m.group(3)):04d}-{month:02d}-{day:02d}"

    d = ORDINAL_RE.sub(r"\1", d)
    d = FULL_MONTH_RE.sub(lambda mm: FULL_MONTH_TO_SHORT[mm.group(0).lower()], d)
    d = MONTH_FIRST_RE.sub(lambda mm: f"{mm.group(2)}-{SHORT_MONTH_FIX[mm.group(1).lower()]}", d)
    d = DATE_ZONE_RE.sub(lambda mm: f"{mm.group(1)} 00:00:00 {mm.group(2).upper()}", d)
    return d


def parse_date_string(candidate: str, policy: NormalizePolicy | None = None) -> datetime | None:
    """Parse a date phrase into a datetime, or None. Never raises for str input."""

    policy = policy or DEFAULT_POLICY
    d = normalize_date_string(candidate, policy)
    if d is None:
        return None

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UnknownTimezoneWarning)
            return parser.parse(d, tzinfos=policy.tzinfos)
    except (ValueError, OverflowError, TypeError) as e:
        logger.debug("parse_date_string: delegate rejected %r (from %r): %s", d, candidate, e)
        return None
