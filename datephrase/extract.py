from __future__ import annotations

import re
from datetime import datetime
from functools import lru_cache

from .normalize import parse_date_string
from .patterns import date_regex
from .types import DatePhrase, NormalizePolicy

_WS_RE = re.compile(r"\s+")


@lru_cache(maxsize=None)
def phrase_regex() -> re.Pattern[str]:
    """The date alternation, bounded so it can't start or end inside a longer token.

    A match may still end on whitespace (an HTTP date with the time left out).
    """
    return re.compile(rf"(?<!\w)(?:{date_regex().pattern})(?:(?<=\s)|(?!\w))", re.IGNORECASE)


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace (including newlines) to single spaces."""
    return _WS_RE.sub(" ", text).strip()


def find_date_phrases(text: str, policy: NormalizePolicy | None = None) -> list[DatePhrase]:
    """Find every date phrase in text, left to right.

    Offsets refer to the whitespace-normalized text. Phrases that look like dates
    but don't parse are still returned, with value=None.
    """

    norm = normalize_whitespace(text or "")
    if not norm:
        return []

    out: list[DatePhrase] = []
    for m in phrase_regex().finditer(norm):
        # the HTTP layout can end on the space before an omitted time
        src = m.group(0).rstrip()
        start = m.start()
        out.append(
            DatePhrase(
                source=src,
                start=start,
                end=start + len(src),
                value=parse_date_string(src, policy),
            )
        )
    return out


def first_date(text: str, policy: NormalizePolicy | None = None) -> datetime | None:
    """Return the first phrase in text that parses, or None."""
    for phrase in find_date_phrases(text, policy):
        if phrase.value is not None:
            return phrase.value
    return None
