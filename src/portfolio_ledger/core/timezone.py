"""Date helpers anchored to US/Eastern market time."""

from datetime import date, datetime
from typing import Union

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def today_eastern() -> date:
    """Return today's calendar date in US/Eastern timezone."""
    return now_eastern().date()


def parse_date(value: Union[str, date, datetime]) -> date:
    """
    Coerce a date-like value to a calendar date.

    Strings are parsed with dateutil, so both "2024-01-15" and
    "2024-01-15T10:30:00" are accepted; any time part is dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(value).date()
