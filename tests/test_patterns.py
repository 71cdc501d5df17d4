from __future__ import annotations

import re
import threading

import pytest

from datephrase import patterns
from datephrase.patterns import (
    AMBIGUOUS_DATES,
    FULL_MONTH_TO_SHORT,
    SHORT_MONTH_FIX,
    TIME_12H,
    TIME_24H,
    TZ_ABBREVIATIONS,
    TZ_SUFFIXES,
    date_regex,
)


@pytest.mark.parametrize(
    "text",
    [
        "2014-11-27",
        "20141127",
        "2014-1-7",
        "2014-11-27T18:20:00",
        "2014-11-27 18:20:00 +0100",
        "2014-11-27T182000Z",
        "Sat, 09 Aug 2014 18:20:00",
        "08-Feb-94 14:15:29 GMT",
        "08-Feb-1994 14:15:29 -0500",
        "27-Nov-2014",
        "27.November.2014",
        "Jun 1st 2012",
        "June 1 2012",
        "Jun 1 st 2012",
        "Jun-01-2012",
        "June/1/2012",
        "1st Jun 2012",
        "21 december 2012",
        "27/11/2014",
        "11/27/2014",
        "1.2.2014",
        "1_2_2014",
        "1\\2\\2014",
    ],
)
def test_gate_accepts_known_layouts(text: str) -> None:
    assert date_regex().search(text)


@pytest.mark.parametrize(
    "text",
    ["", "hello world", "next Tuesday", "Jun 2012", "12345", "2014/11/27", "three days ago"],
)
def test_gate_rejects_non_dates(text: str) -> None:
    assert date_regex().search(text) is None


def test_gate_is_case_insensitive() -> None:
    assert date_regex().search("SAT, 09 AUG 2014 18:20:00")
    assert date_regex().search("1st jUnE 2012")


def test_gate_matches_inside_longer_text() -> None:
    m = date_regex().search("the party was on 1st Jun 2012, remember?")
    assert m
    assert m.group(0) == "1st Jun 2012"


def test_date_regex_is_memoized() -> None:
    assert date_regex() is date_regex()


def test_date_regex_first_build_is_shared_across_threads(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(patterns, "_DATE_RE", None)

    seen: list[re.Pattern[str]] = []
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        seen.append(date_regex())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 8
    assert all(p is seen[0] for p in seen)


def test_full_month_to_short() -> None:
    assert FULL_MONTH_TO_SHORT == {
        "january": "Jan",
        "february": "Feb",
        "march": "Mar",
        "april": "Apr",
        "may": "May",
        "june": "Jun",
        "july": "Jul",
        "august": "Aug",
        "september": "Sep",
        "october": "Oct",
        "november": "Nov",
        "december": "Dec",
    }
    assert SHORT_MONTH_FIX["sep"] == "Sep"
    assert len(SHORT_MONTH_FIX) == 12


def test_time_patterns() -> None:
    t24 = re.compile(rf"^{TIME_24H}$")
    assert t24.match("23:59:59")
    assert t24.match("235959")
    assert t24.match("00:0000")
    assert not t24.match("24:00:00")
    assert not t24.match("12:60:00")

    t12 = re.compile(rf"^{TIME_12H}$", re.IGNORECASE)
    assert t12.match("09:05:00 pm")
    assert t12.match("12:00:00AM")
    assert not t12.match("00:05:00 am")
    assert not t12.match("0905 pm")


def test_timezone_tokens() -> None:
    tz = re.compile(rf"^{TZ_SUFFIXES}$", re.IGNORECASE)
    for token in ("UTC", "GMT", "EST", "PST", "ChST", "Z", "+0530", "-0800", "nzdt"):
        assert tz.match(token), token
    for token in ("XYZ", "+53", "0800", "UTCX"):
        assert not tz.match(token), token


def test_timezone_abbreviations_keep_duplicates() -> None:
    assert TZ_ABBREVIATIONS.count("CST") == 5
    assert TZ_ABBREVIATIONS.count("IST") == 3
    assert len(TZ_ABBREVIATIONS) > 180
    assert len(set(TZ_ABBREVIATIONS)) < len(TZ_ABBREVIATIONS)


def test_ambiguous_dates_pattern_allows_day_up_to_39() -> None:
    amb = re.compile(rf"^{AMBIGUOUS_DATES}$")
    assert amb.match("39/39/2014")
    assert not amb.match("40/01/2014")
    assert not amb.match("1/2/14")
    assert not amb.match("1 / 2 / 2014")
