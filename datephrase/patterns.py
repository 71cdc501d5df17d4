"""Pattern catalog for date phrases.

These patterns answer "is this in the right format / does it look about right",
not "is this a valid date". They expect normalised whitespace.
"""

from __future__ import annotations

import re
import threading

# Reused components for the layouts below
SHORT_DAY_OF_WEEK = r"(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)"

FULL_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
FULL_MONTH_TO_SHORT = {name.lower(): name[:3] for name in FULL_MONTH_NAMES}
SHORT_MONTH_FIX = {short.lower(): short for short in FULL_MONTH_TO_SHORT.values()}

SHORT_MONTH = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
FULL_MONTH = r"(?:" + "|".join(FULL_MONTH_NAMES) + r")"
TIME_24H = r"(?:(?:[0-1][0-9]|2[0-3]):?[0-5][0-9]:?[0-5][0-9])"
TIME_12H = r"(?:(?:0[1-9]|1[012]):[0-5][0-9]:[0-5][0-9]\s?(?:am|pm))"
DATE_NUMBER = r"[0-3]?[0-9]"

# Ambiguous numeric formats with a variety of delimiters:
#   DMY: 27/11/2014
#   MDY: 11/27/2014
DATE_DELIM = r"[.\\/,_-]"
AMBIGUOUS_DATES = rf"(?:{DATE_NUMBER}){DATE_DELIM}(?:{DATE_NUMBER}){DATE_DELIM}(?:[0-9]{{4}})"

# 1st 2nd 3rd 4th ... 21st 22nd 23rd 31st
NUMBER_SUFFIXES = r"(?:st|nd|rd|th)"

# https://en.wikipedia.org/wiki/List_of_time_zone_abbreviations
# Some abbreviations name more than one zone; they are only recognized here, never resolved.
TZ_ABBREVIATIONS = (
    "ACDT ACST ACT ADT AEDT AEST AFT AKDT AKST AMST AMST AMT AMT ART AST AST AWDT AWST "
    "AZOST AZT BDT BIOT BIT BOT BRT BST BST BTT CAT CCT CDT CDT CEDT CEST CET CHADT CHAST "
    "CHOT CHUT CIST CIT CKT CLST CLT COST COT CST CST CST CST CST CT CVT CWST CXT ChST DAVT "
    "DDUT DFT EASST EAST EAT ECT ECT EDT EEDT EEST EET EGST EGT EIT EST EST FET FJT FKST "
    "FKST FKT FNT GALT GAMT GET GFT GILT GIT GMT GST GST GYT HADT HAEC HAST HKT HMT HOVT "
    "HST ICT IDT IOT IRDT IRKT IRST IST IST IST JST KGT KOST KRAT KST LHST LHST LINT MAGT "
    "MART MAWT MDT MEST MET MHT MIST MIT MMT MSK MST MST MST MUT MVT MYT NCT NDT NFT NPT "
    "NST NT NUT NZDT NZST OMST ORAT PDT PET PETT PGT PHOT PHT PKT PMDT PMST PONT PST PYST "
    "PYT RET ROTT SAKT SAMT SAST SBT SCT SGT SLST SRT SST SST SYOT TAHT TFT THA TJT TKT TLT "
    "TMT TOT TVT UCT ULAT UTC UYST UYT UZT VET VLAT VOLT VOST VUT WAKT WAST WAT WEDT WEST "
    "WET WIT WST YAKT YEKT Z"
).split()
TZ_SUFFIXES = r"(?:[+-][0-9]{4}|" + "|".join(TZ_ABBREVIATIONS) + r")"

DATE_LAYOUTS = (
    # ISO8601: 2014-11-27 (single-digit month and day numbers allowed)
    rf"[0-9]{{4}}-?[0-1]?[0-9]-?{DATE_NUMBER}(?:[ T]{TIME_24H})?(?: ?{TZ_SUFFIXES})?",
    # HTTP: Sat, 09 Aug 2014 18:20:00
    rf"{SHORT_DAY_OF_WEEK}, [0-9]{{2}} {SHORT_MONTH} [0-9]{{4}} {TIME_24H}?",
    # RFC850: 08-Feb-94 14:15:29 GMT
    rf"[0-9]{{2}}-{SHORT_MONTH}-(?:[0-9]{{2}}|[0-9]{{4}}) {TIME_24H}?(?: ?{TZ_SUFFIXES})",
    # 27-Nov-2014, 27.November.2014
    rf"{DATE_NUMBER}{DATE_DELIM}{SHORT_MONTH}{DATE_DELIM}[0-9]{{4}}",
    rf"{DATE_NUMBER}{DATE_DELIM}{FULL_MONTH}{DATE_DELIM}[0-9]{{4}}",
    # Jun 1st 2012, June 1 2012
    rf"(?:{SHORT_MONTH}|{FULL_MONTH}) {DATE_NUMBER}(?: ?{NUMBER_SUFFIXES})? [0-9]{{4}}",
    # Jun-01-2012, June/1/2012
    rf"{SHORT_MONTH}{DATE_DELIM}{DATE_NUMBER}{DATE_DELIM}[0-9]{{4}}",
    rf"{FULL_MONTH}{DATE_DELIM}{DATE_NUMBER}{DATE_DELIM}[0-9]{{4}}",
    # 1st June 2012
    rf"{DATE_NUMBER}(?: ?{NUMBER_SUFFIXES})? (?:{SHORT_MONTH}|{FULL_MONTH}) [0-9]{{4}}",
    # Ambiguous, but potentially valid
    AMBIGUOUS_DATES,
)

_DATE_RE: re.Pattern[str] | None = None
_DATE_RE_LOCK = threading.Lock()


def date_regex() -> re.Pattern[str]:
    """Return the compiled alternation of every known date layout.

    Built on first use and shared afterwards; repeated calls return the same object.
    """
    global _DATE_RE
    if _DATE_RE is None:
        with _DATE_RE_LOCK:
            if _DATE_RE is None:
                _DATE_RE = re.compile("|".join(f"(?:{p})" for p in DATE_LAYOUTS), re.IGNORECASE)
    return _DATE_RE
