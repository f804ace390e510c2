from __future__ import annotations

from datetime import datetime


# Fixed English month names; strftime("%B") follows the process locale.
_MONTHS = (
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


def format_date(iso_date: str, locale: str = "en-US") -> str:
    """Format an ISO 8601 date for display.

    English locales get the long form ("January 5, 2024"); every other
    locale gets the ISO calendar date. Values that do not parse are
    returned as given.
    """
    moment = parse_timestamp(iso_date)
    if moment is None:
        return iso_date
    parsed = moment.date()
    if _is_english(locale):
        return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"
    return parsed.isoformat()


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO 8601 date or datetime; a trailing "Z" means UTC.

    The result keeps the offset written in the value; date-only and naive
    values carry no tzinfo.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _is_english(locale: str) -> bool:
    lowered = locale.lower()
    return lowered == "en" or lowered.startswith(("en-", "en_"))
