"""NMEA field parsing and formatting utilities.

This module converts between the textual encodings NMEA uses inside a field
and Python values. The functions raise ``ValueError`` on malformed input;
sentence-level code turns that into ``ParseError`` for the caller.

Encodings handled here:
    DDMM.MMMM     latitude, 2 degree digits followed by decimal minutes
    DDDMM.MMMM    longitude, 3 degree digits followed by decimal minutes
    HHMMSS[.sss]  UTC time of day
    DDMMYY        UTC date, two-digit year meaning 2000-2099

Numbers are parsed strictly: Python's ``int()`` and ``float()`` accept
whitespace, underscores, exponents, "nan" and "inf", none of which are valid
NMEA.
"""

import math
import re
from datetime import date, time

# Century applied to the two-digit year of a DDMMYY field.
# Dates before 2000 cannot be represented.
CENTURY = 2000

LATITUDE_DEGREE_DIGITS = 2
LONGITUDE_DEGREE_DIGITS = 3

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)")
_DIGITS_PATTERN = re.compile(r"[0-9]+")
_TIME_PATTERN = re.compile(r"[0-9]{6}(\.[0-9]*)?")
_DATE_PATTERN = re.compile(r"[0-9]{6}")


def parse_int(value: str) -> int:
    """Parse a signed decimal integer.

    Example:
        >>> parse_int("08")
        8
        >>> parse_int(" 8")
        Traceback (most recent call last):
        ...
        ValueError: Not an integer: ' 8'
    """
    if _INT_PATTERN.fullmatch(value) is None:
        raise ValueError(f"Not an integer: {value!r}")
    return int(value)


def parse_float(value: str) -> float:
    """Parse a finite decimal number such as "006.1", "-3" or ".5"."""
    if _FLOAT_PATTERN.fullmatch(value) is None:
        raise ValueError(f"Not a number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Number out of range: {value!r}")
    return number


def _parse_coordinate_parts(value: str, degree_digits: int) -> tuple[int, float]:
    """Split an NMEA coordinate into whole degrees and decimal minutes.

    The degree part has a fixed width: 2 digits for latitude and 3 digits
    for longitude. Everything after it is minutes.

    Example:
        >>> _parse_coordinate_parts("6011.552", 2)  # 60° 11.552'
        (60, 11.552)
        >>> _parse_coordinate_parts("02501.941", 3)  # 25° 01.941'
        (25, 1.941)
    """
    degree_text = value[:degree_digits]
    minute_text = value[degree_digits:]
    if len(degree_text) != degree_digits or _DIGITS_PATTERN.fullmatch(degree_text) is None:
        raise ValueError(f"Malformed coordinate degrees: {value!r}")
    if not minute_text or minute_text[0] in "+-":
        raise ValueError(f"Malformed coordinate minutes: {value!r}")

    minutes = parse_float(minute_text)
    if minutes >= 60.0:
        raise ValueError(f"Coordinate minutes out of range: {value!r}")
    return int(degree_text), minutes


def _convert_to_decimal_degrees(value: str, degree_digits: int, limit: float) -> float:
    degrees, minutes = _parse_coordinate_parts(value, degree_digits)
    decimal_degrees = degrees + minutes / 60.0
    if decimal_degrees > limit:
        raise ValueError(f"Coordinate out of range: {value!r}")
    return decimal_degrees


def parse_latitude(value: str) -> float:
    """Convert a DDMM.MMMM latitude to non-negative decimal degrees.

    The hemisphere lives in a separate field, so the result is always a
    magnitude in the range 0-90.

    Example:
        >>> parse_latitude("6011.552")
        60.19253333333333
    """
    return _convert_to_decimal_degrees(value, LATITUDE_DEGREE_DIGITS, 90.0)


def parse_longitude(value: str) -> float:
    """Convert a DDDMM.MMMM longitude to non-negative decimal degrees (0-180)."""
    return _convert_to_decimal_degrees(value, LONGITUDE_DEGREE_DIGITS, 180.0)


def _format_coordinate(decimal_degrees: float, degree_digits: int, decimals: int) -> str:
    if not math.isfinite(decimal_degrees) or decimal_degrees < 0:
        raise ValueError(f"Coordinate must be a non-negative magnitude: {decimal_degrees}")
    degrees = int(decimal_degrees)
    minutes = round((decimal_degrees - degrees) * 60.0, decimals)
    # Rounding may carry a full minute, e.g. 59.99996' -> 60.000'
    if minutes >= 60.0:
        degrees += 1
        minutes = 0.0
    width = 3 + decimals if decimals else 2
    return f"{degrees:0{degree_digits}d}{minutes:0{width}.{decimals}f}"


def format_latitude(decimal_degrees: float, decimals: int = 3) -> str:
    """Format a latitude magnitude as DDMM.mmm.

    Example:
        >>> format_latitude(60.192533)
        '6011.552'
    """
    return _format_coordinate(decimal_degrees, LATITUDE_DEGREE_DIGITS, decimals)


def format_longitude(decimal_degrees: float, decimals: int = 3) -> str:
    """Format a longitude magnitude as DDDMM.mmm."""
    return _format_coordinate(decimal_degrees, LONGITUDE_DEGREE_DIGITS, decimals)


def parse_utc_time(value: str) -> tuple[int, int, float]:
    """Split an HHMMSS[.sss] field into hours, minutes and seconds.

    Fractional seconds are kept in the returned seconds value.

    Example:
        >>> parse_utc_time("235959.50")
        (23, 59, 59.5)
    """
    if _TIME_PATTERN.fullmatch(value) is None:
        raise ValueError(f"Malformed UTC time: {value!r}")

    hours = int(value[0:2])
    minutes = int(value[2:4])
    seconds = float(value[4:])
    if hours > 23 or minutes > 59 or seconds >= 60.0:
        raise ValueError(f"UTC time out of range: {value!r}")
    return hours, minutes, seconds


def format_utc_time(value: time) -> str:
    """Format a time of day as HHMMSS, adding hundredths when present.

    Example:
        >>> format_utc_time(time(12, 0, 44))
        '120044'
        >>> format_utc_time(time(23, 59, 59, 500000))
        '235959.50'
    """
    text = f"{value.hour:02d}{value.minute:02d}{value.second:02d}"
    if value.microsecond:
        text += f".{value.microsecond // 10000:02d}"
    return text


def parse_utc_date(value: str) -> tuple[int, int, int]:
    """Split a DDMMYY field into day, month and four-digit year.

    The two-digit year always maps to 2000 + YY.

    Example:
        >>> parse_utc_date("160705")
        (16, 7, 2005)
    """
    if _DATE_PATTERN.fullmatch(value) is None:
        raise ValueError(f"Malformed UTC date: {value!r}")

    day = int(value[0:2])
    month = int(value[2:4])
    year = CENTURY + int(value[4:6])
    if not 1 <= day <= 31 or not 1 <= month <= 12:
        raise ValueError(f"UTC date out of range: {value!r}")
    return day, month, year


def format_utc_date(value: date) -> str:
    """Format a date as DDMMYY.

    Raises:
        ValueError: If the year is outside 2000-2099.
    """
    if not CENTURY <= value.year < CENTURY + 100:
        raise ValueError(f"Year {value.year} cannot be encoded as DDMMYY")
    return f"{value.day:02d}{value.month:02d}{value.year - CENTURY:02d}"
