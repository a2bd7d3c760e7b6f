"""The ``Date`` header."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from .headers import Header, HeaderName, HeaderValue

_HEADER_NAME = "Date"
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_LONG_DAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_DAY_RE = "|".join(_DAYS)
_LONG_DAY_RE = "|".join(_LONG_DAYS)
_MONTH_RE = "|".join(_MONTHS)
_TIME_RE = r"(\d{2}):(\d{2}):(\d{2})"

_IMF = re.compile(rf"({_DAY_RE}), (\d{{2}}) ({_MONTH_RE}) (\d{{4}}) {_TIME_RE} GMT")
_RFC850 = re.compile(
    rf"({_LONG_DAY_RE}), (\d{{2}})-({_MONTH_RE})-(\d{{2}}) {_TIME_RE} GMT"
)
_ASCTIME = re.compile(rf"({_DAY_RE}) ({_MONTH_RE}) ([ \d]\d) {_TIME_RE} (\d{{4}})")


def _normalize(moment: datetime | int | float) -> datetime:
    if isinstance(moment, datetime):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        moment = moment.astimezone(timezone.utc)
    elif isinstance(moment, (int, float)) and not isinstance(moment, bool):
        moment = datetime.fromtimestamp(int(moment // 1), timezone.utc)
    else:
        raise TypeError("expected a datetime or a Unix timestamp")
    if moment.year < 1970:
        raise ValueError("dates before 1970 are not supported")
    return moment.replace(microsecond=0)


def _build(weekday: int, year: int, month: str, day: int, h: str, m: str, s: str) -> datetime:
    moment = datetime(
        year, _MONTHS.index(month) + 1, day, int(h), int(m), int(s), tzinfo=timezone.utc
    )
    if moment.weekday() != weekday or moment.year < 1970:
        raise ValueError("invalid date")
    return moment


def _parse_http_date(text: str) -> datetime:
    if match := _IMF.fullmatch(text):
        wday, day, month, year, h, m, s = match.groups()
        return _build(_DAYS.index(wday), int(year), month, int(day), h, m, s)
    if match := _RFC850.fullmatch(text):
        wday, day, month, year, h, m, s = match.groups()
        short_year = int(year)
        full_year = 2000 + short_year if short_year < 70 else 1900 + short_year
        return _build(_LONG_DAYS.index(wday), full_year, month, int(day), h, m, s)
    if match := _ASCTIME.fullmatch(text):
        wday, month, day, h, m, s, year = match.groups()
        return _build(_DAYS.index(wday), int(year), month, int(day.strip()), h, m, s)
    raise ValueError(f"invalid date: {text!r}")


class Date(Header):
    """The message ``Date`` header (RFC 2822), with one-second precision."""

    NAME = _HEADER_NAME

    __slots__ = ("_moment",)

    def __init__(self, moment: datetime | int | float) -> None:
        self._moment = _normalize(moment)

    @classmethod
    def now(cls) -> Date:
        """The current date."""
        return cls(datetime.now(timezone.utc))

    def to_datetime(self) -> datetime:
        """The moment as an aware UTC datetime."""
        return self._moment

    @classmethod
    def header_name(cls) -> HeaderName:
        return HeaderName(_HEADER_NAME)

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse an HTTP-style date; a ``+0000`` suffix stands for GMT."""
        if text.endswith("+0000"):
            text = text[: -len("+0000")] + "GMT"
        return cls(_parse_http_date(text))

    def display(self) -> HeaderValue:
        moment = self._moment
        value = (
            f"{_DAYS[moment.weekday()]}, {moment.day:02d} {_MONTHS[moment.month - 1]} "
            f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
            " +0000"
        )
        return HeaderValue.pre_encoded(_HEADER_NAME, value, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Date):
            return self._moment == other._moment
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._moment)

    def __repr__(self) -> str:
        return f"Date({self._moment.isoformat()!r})"