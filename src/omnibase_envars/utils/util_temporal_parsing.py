# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Temporal grammar for durations, timestamps, dates and times of day.

ISO-8601 is always tried first, so canonical values parse identically under
every culture. When a value is not ISO-8601, the culture's locale decides the
order of the numeric date fields (``15.06.2023`` under ``de_DE``,
``6/15/2023`` under ``en_US``) via Babel's pattern-driven parsers.

Durations use the constant format ``[-][d.]hh:mm[:ss[.fffffff]]``, where the
fractional separator may also be the culture's decimal symbol. A bare
integer is a number of days. ISO-8601 durations (``P1DT2H30M``) are accepted
through pydantic.

All functions raise ``ValueError`` (or ``OverflowError`` for out-of-range
duration components); the type converter maps those to its own errors.
"""

from __future__ import annotations

import functools
import re
from datetime import date, datetime, time, timedelta

from babel import dates as babel_dates
from pydantic import TypeAdapter

from omnibase_envars.models.model_culture import ModelCulture

_DAYS_ONLY = re.compile(r"(?P<sign>-)?(?P<days>[0-9]+)")
_TICKS_PER_MICROSECOND = 10


@functools.lru_cache(maxsize=16)
def _duration_pattern(decimal_symbol: str) -> re.Pattern[str]:
    separators = "|".join(re.escape(symbol) for symbol in {".", decimal_symbol})
    return re.compile(
        r"(?P<sign>-)?"
        r"(?:(?P<days>[0-9]+)\.)?"
        r"(?P<hours>[0-9]{1,2}):(?P<minutes>[0-9]{1,2})"
        rf"(?::(?P<seconds>[0-9]{{1,2}})(?:(?:{separators})(?P<fraction>[0-9]{{1,7}}))?)?"
    )


@functools.lru_cache(maxsize=1)
def _iso_duration_adapter() -> TypeAdapter[timedelta]:
    return TypeAdapter(timedelta)


def parse_duration(value: str, culture: ModelCulture) -> timedelta:
    """Parse a duration string.

    Raises:
        ValueError: If ``value`` matches none of the duration grammars.
        OverflowError: If hours exceed 23 or minutes/seconds exceed 59.
    """
    text = value.strip()

    days_only = _DAYS_ONLY.fullmatch(text)
    if days_only is not None:
        result = timedelta(days=int(days_only.group("days")))
        return -result if days_only.group("sign") else result

    if text.lstrip("+-").upper().startswith("P"):
        return _iso_duration_adapter().validate_python(text)

    match = _duration_pattern(culture.decimal_symbol).fullmatch(text)
    if match is None:
        raise ValueError(f"'{value}' is not a valid duration")

    hours = int(match.group("hours"))
    minutes = int(match.group("minutes"))
    seconds = int(match.group("seconds") or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise OverflowError(f"'{value}' has a component outside its range")

    fraction = match.group("fraction") or ""
    ticks = int(fraction.ljust(7, "0")) if fraction else 0
    result = timedelta(
        days=int(match.group("days") or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=ticks // _TICKS_PER_MICROSECOND,
    )
    return -result if match.group("sign") else result


def parse_date(value: str, culture: ModelCulture) -> date:
    """Parse a calendar date: ISO-8601 first, then the culture's date pattern."""
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    return _parse_localized_date(text, culture)


def parse_time(value: str, culture: ModelCulture) -> time:
    """Parse a time of day: ISO-8601 first, then the culture's time pattern."""
    text = value.strip()
    try:
        return time.fromisoformat(text)
    except ValueError:
        pass
    return _parse_localized_time(text, culture)


def parse_datetime(value: str, culture: ModelCulture) -> datetime:
    """Parse a timestamp.

    ISO-8601 input with an offset (or ``Z``) yields an aware datetime. The
    localized form is ``<date> [<time>]`` and yields a naive datetime.
    """
    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    date_part, _, time_part = text.partition(" ")
    day = _parse_localized_date(date_part, culture)
    time_part = time_part.strip()
    clock = parse_time(time_part, culture) if time_part else time()
    return datetime.combine(day, clock)


def _parse_localized_date(text: str, culture: ModelCulture) -> date:
    try:
        return babel_dates.parse_date(text, locale=culture.locale_id)
    except IndexError as e:
        raise ValueError(f"'{text}' is not a valid date") from e


def _parse_localized_time(text: str, culture: ModelCulture) -> time:
    try:
        return babel_dates.parse_time(text, locale=culture.locale_id)
    except IndexError as e:
        raise ValueError(f"'{text}' is not a valid time") from e


__all__ = [
    "parse_date",
    "parse_datetime",
    "parse_duration",
    "parse_time",
]
