from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Mapping, Union

TzInfos = Mapping[str, Union[int, tzinfo]]


@dataclass(frozen=True)
class NormalizePolicy:
    """Controls the two places where normalization has to guess.

    - month_first: how a bare numeric date (11/12/2014) is read before the
      out-of-range check swaps the fields. True keeps the US-style default.
    - tzinfos: zone abbreviation -> UTC offset (seconds) or tzinfo, handed to the
      delegate parser. Abbreviations without an entry are recognized but dropped.
    """

    month_first: bool = True
    tzinfos: TzInfos | None = None


DEFAULT_POLICY = NormalizePolicy()


@dataclass(frozen=True)
class DatePhrase:
    """A date phrase found in a larger text."""

    source: str  # the matched substring
    start: int
    end: int
    value: datetime | None
