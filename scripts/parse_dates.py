#!/usr/bin/env python3
"""Try the date-phrase normalizer from a shell.

Usage:
  python3 scripts/parse_dates.py --text "27/11/2014" --text "Jun 1st 2012"
  echo "Sat, 09 Aug 2014 18:20:00" | python3 scripts/parse_dates.py
  python3 scripts/parse_dates.py --scan --text "moved from 1st June 2012 to 2014-11-27"
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime

from datephrase import NormalizePolicy, find_date_phrases, normalize_whitespace, parse_date_string


def _fmt(value: datetime | None) -> str:
    return value.isoformat() if value is not None else "-"


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--text", action="append", default=[], help="candidate (repeatable); default: stdin lines")
    ap.add_argument("--day-first", action="store_true", help="read 01/02/2014 as 1 February")
    ap.add_argument("--scan", action="store_true", help="find date phrases inside each input instead")
    args = ap.parse_args()

    inputs = list(args.text)
    if not inputs and not sys.stdin.isatty():
        inputs = [ln for ln in sys.stdin.read().splitlines() if ln.strip()]
    if not inputs:
        raise SystemExit("No input (use --text or pipe lines on stdin)")

    policy = NormalizePolicy(month_first=not args.day_first)

    for raw in inputs:
        text = normalize_whitespace(raw)
        if not args.scan:
            print(f"{text} -> {_fmt(parse_date_string(text, policy))}")
            continue
        phrases = find_date_phrases(text, policy)
        if not phrases:
            print(f"{text} -> -")
        for ph in phrases:
            print(f"{ph.source} [{ph.start}:{ph.end}] -> {_fmt(ph.value)}")


if __name__ == "__main__":
    main()
