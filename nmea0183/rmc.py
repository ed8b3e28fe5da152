"""RMC sentence decoding and encoding.

RMC (Recommended Minimum Specific GNSS Data) is the basic fix report of a
GNSS receiver: time, date, position, speed and course over ground, plus the
local magnetic variation.

RMC Sentence Format:
    $GPRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E,A*11
           |      | |        | |         | |     |     |      |     | |
           |      | |        | |         | |     |     |      |     | +-- 11 Mode indicator (NMEA 2.3+)
           |      | |        | |         | |     |     |      +-----+-- 9/10 Magnetic variation + E/W
           |      | |        | |         | |     |     +-- 8 UTC date (DDMMYY)
           |      | |        | |         | |     +-- 7 Course over ground (degrees true)
           |      | |        | |         | +-- 6 Speed over ground (knots)
           |      | |        | +---------+-- 4/5 Longitude (DDDMM.MMMM) + E/W
           |      | +--------+-- 2/3 Latitude (DDMM.MMMM) + N/S
           |      +-- 1 Status (A = valid, V = invalid)
           +-- 0 UTC time (HHMMSS[.sss])

Receivers older than NMEA 2.3 send 11 fields without the mode indicator;
both layouts are accepted. Any other field count is rejected when a value is
read, not at parse time.

Every accessor is a plain function over a ``Sentence``. Values are computed
from the field strings on each call and never cached::

    sentence = parse_rmc(line)
    position(sentence).signed_latitude
    timestamp(sentence)

Accessors raise ``DataNotAvailableError`` for empty fields and
``ParseError`` for malformed ones. ``to_rmc_data`` collects every value into
an ``RMCData`` record, with None for empty fields.
"""

from collections.abc import Callable
from datetime import date, datetime, time, timezone
from typing import TypeVar

from nmea0183.errors import DataNotAvailableError, InvalidSentenceError, ParseError
from nmea0183.fields import (
    format_latitude,
    format_longitude,
    format_utc_date,
    format_utc_time,
    parse_latitude,
    parse_longitude,
    parse_utc_date,
    parse_utc_time,
)
from nmea0183.ids import SentenceId, TalkerId
from nmea0183.sentence import Sentence, SentenceBuilder, parse_sentence
from nmea0183.types import DataStatus, Direction, GpsMode, Position, RMCData

# --- field layout -------------------------------------------------------------

UTC_TIME = 0
DATA_STATUS = 1
LATITUDE = 2
LATITUDE_HEMISPHERE = 3
LONGITUDE = 4
LONGITUDE_HEMISPHERE = 5
SPEED = 6
COURSE = 7
UTC_DATE = 8
VARIATION = 9
VARIATION_HEMISPHERE = 10
MODE = 11

RMC_FIELD_COUNT = 12
RMC_LEGACY_FIELD_COUNT = 11  # before NMEA 2.3, no mode indicator

_T = TypeVar("_T")


# --- helpers ------------------------------------------------------------------


def _check_layout(sentence: Sentence) -> None:
    if sentence.sentence_id != SentenceId.RMC:
        raise InvalidSentenceError(
            f"Sentence type mismatch, expected RMC [{sentence.sentence_id.value}]"
        )
    if sentence.field_count not in (RMC_LEGACY_FIELD_COUNT, RMC_FIELD_COUNT):
        raise InvalidSentenceError(
            f"RMC requires {RMC_LEGACY_FIELD_COUNT} or {RMC_FIELD_COUNT} fields, "
            f"found {sentence.field_count}"
        )


def _check_builder(builder: SentenceBuilder) -> None:
    if builder.sentence_id != SentenceId.RMC:
        raise ValueError(f"Builder is for {builder.sentence_id.value}, not RMC")


def _direction(sentence: Sentence, index: int, allowed: tuple[Direction, ...]) -> Direction:
    value = sentence.char_value(index)
    try:
        direction = Direction(value)
    except ValueError as exc:
        raise ParseError(f"Invalid direction in field {index} [{value}]") from exc
    if direction not in allowed:
        raise ParseError(f"Unexpected direction in field {index} [{value}]")
    return direction


def _time_parts(sentence: Sentence) -> tuple[int, int, float]:
    value = utc_time(sentence)
    try:
        return parse_utc_time(value)
    except ValueError as exc:
        raise ParseError(f"Invalid UTC time [{value}]") from exc


def _date_parts(sentence: Sentence) -> tuple[int, int, int]:
    _check_layout(sentence)
    value = sentence.string_value(UTC_DATE)
    try:
        return parse_utc_date(value)
    except ValueError as exc:
        raise ParseError(f"Invalid UTC date [{value}]") from exc


# --- decoding -----------------------------------------------------------------


def parse_rmc(line: str) -> Sentence:
    """Parse a raw line and check that it is an RMC sentence.

    Raises:
        InvalidSentenceError: If the line is malformed or not RMC.
        UnsupportedIdError: If the talker id is unknown.
    """
    sentence = parse_sentence(line)
    if sentence.sentence_id != SentenceId.RMC:
        raise InvalidSentenceError(f"Sentence type mismatch, expected RMC [{line}]")
    return sentence


def utc_time(sentence: Sentence) -> str:
    """Return the raw UTC time field, e.g. "120044" or "235959.50"."""
    _check_layout(sentence)
    return sentence.string_value(UTC_TIME)


def utc_hours(sentence: Sentence) -> int:
    """Return the UTC hour, 0-23.

    Raises:
        ParseError: If the time field is not HHMMSS[.sss].
    """
    return _time_parts(sentence)[0]


def utc_minutes(sentence: Sentence) -> int:
    """Return the UTC minute, 0-59."""
    return _time_parts(sentence)[1]


def utc_seconds(sentence: Sentence) -> float:
    """Return UTC seconds including any fractional part."""
    return _time_parts(sentence)[2]


def utc_day(sentence: Sentence) -> int:
    """Return the day of month from the DDMMYY date field.

    Raises:
        ParseError: If the date field is not a valid DDMMYY date.
    """
    return _date_parts(sentence)[0]


def utc_month(sentence: Sentence) -> int:
    """Return the month, 1-12."""
    return _date_parts(sentence)[1]


def utc_year(sentence: Sentence) -> int:
    """Return the four-digit year; the two-digit field always maps to 20YY."""
    return _date_parts(sentence)[2]


def timestamp(sentence: Sentence) -> datetime:
    """Combine the date and time fields into a timezone-aware UTC datetime.

    Fractional seconds are dropped; read them from ``utc_seconds``.

    Raises:
        ParseError: If the fields do not form a real calendar date and time
            (e.g. 31 February).
    """
    day, month, year = _date_parts(sentence)
    hours, minutes, seconds = _time_parts(sentence)
    try:
        return datetime(year, month, day, hours, minutes, int(seconds), tzinfo=timezone.utc)
    except ValueError as exc:
        raise ParseError(f"Invalid UTC date [{sentence.fields[UTC_DATE]}]") from exc


def data_status(sentence: Sentence) -> DataStatus:
    """Return the fix validity flag.

    Raises:
        ParseError: If the field is neither 'A' nor 'V'.
    """
    _check_layout(sentence)
    value = sentence.char_value(DATA_STATUS)
    try:
        return DataStatus(value)
    except ValueError as exc:
        raise ParseError(f"Invalid data status [{value}]") from exc


def position(sentence: Sentence) -> Position:
    """Decode latitude and longitude with their hemispheres.

    Magnitudes are non-negative decimal degrees (degrees + minutes / 60);
    the hemisphere fields are returned alongside, not folded into the sign.
    """
    _check_layout(sentence)
    latitude_text = sentence.string_value(LATITUDE)
    longitude_text = sentence.string_value(LONGITUDE)
    try:
        latitude = parse_latitude(latitude_text)
    except ValueError as exc:
        raise ParseError(f"Invalid latitude [{latitude_text}]") from exc
    try:
        longitude = parse_longitude(longitude_text)
    except ValueError as exc:
        raise ParseError(f"Invalid longitude [{longitude_text}]") from exc

    return Position(
        latitude,
        _direction(sentence, LATITUDE_HEMISPHERE, (Direction.NORTH, Direction.SOUTH)),
        longitude,
        _direction(sentence, LONGITUDE_HEMISPHERE, (Direction.EAST, Direction.WEST)),
    )


def speed(sentence: Sentence) -> float:
    """Return speed over ground in knots."""
    _check_layout(sentence)
    return sentence.float_value(SPEED)


def course(sentence: Sentence) -> float:
    """Return course over ground in degrees relative to true north."""
    _check_layout(sentence)
    return sentence.float_value(COURSE)


def variation_magnitude(sentence: Sentence) -> float:
    """Return the unsigned magnetic variation in degrees."""
    _check_layout(sentence)
    value = sentence.float_value(VARIATION)
    if value < 0:
        raise ParseError(f"Negative variation magnitude [{sentence.fields[VARIATION]}]")
    return value


def variation_direction(sentence: Sentence) -> Direction:
    """Return the variation hemisphere, ``Direction.EAST`` or ``Direction.WEST``."""
    _check_layout(sentence)
    return _direction(sentence, VARIATION_HEMISPHERE, (Direction.EAST, Direction.WEST))


def variation(sentence: Sentence) -> float:
    """Return the signed magnetic variation in degrees.

    Easterly variation is subtracted from true heading to get magnetic
    heading, so it is negative here; westerly variation is positive.

    Example:
        "006.1,E" -> -6.1
        "006.1,W" -> 6.1
    """
    magnitude = variation_magnitude(sentence)
    if variation_direction(sentence) is Direction.EAST:
        return -magnitude
    return magnitude


def gps_mode(sentence: Sentence) -> GpsMode | None:
    """Return the FAA mode indicator.

    Three outcomes are possible:
        * the decoded ``GpsMode`` when the field has a value
        * None when the sentence has no mode field at all (pre-NMEA 2.3)
        * ``DataNotAvailableError`` when the field exists but is empty

    Raises:
        ParseError: If the field holds an unknown mode character.
    """
    _check_layout(sentence)
    if sentence.field_count <= MODE:
        return None
    value = sentence.char_value(MODE)
    try:
        return GpsMode(value)
    except ValueError as exc:
        raise ParseError(f"Invalid mode indicator [{value}]") from exc


def _optional(accessor: Callable[[Sentence], _T], sentence: Sentence) -> _T | None:
    try:
        return accessor(sentence)
    except DataNotAvailableError:
        return None


def to_rmc_data(sentence: Sentence) -> RMCData:
    """Decode every RMC value into an ``RMCData`` record.

    Empty fields become None. Malformed fields still raise.

    Raises:
        InvalidSentenceError: If the sentence is not a well-formed RMC layout.
        ParseError: If a non-empty field cannot be decoded.
    """
    _check_layout(sentence)
    status = _optional(data_status, sentence)
    mode = _optional(gps_mode, sentence)

    return RMCData(
        utc_time=_optional(utc_time, sentence),
        timestamp=_optional(timestamp, sentence),
        data_status=status,
        position=_optional(position, sentence),
        speed_knots=_optional(speed, sentence),
        course_degrees=_optional(course, sentence),
        variation_degrees=_optional(variation, sentence),
        gps_mode=mode,
        valid=status is DataStatus.VALID and mode is not GpsMode.NOT_VALID,
    )


# --- encoding -----------------------------------------------------------------


def new_rmc(talker_id: TalkerId = TalkerId.GP) -> SentenceBuilder:
    """Return a builder for an RMC sentence with all 12 fields empty."""
    return SentenceBuilder(talker_id, SentenceId.RMC, RMC_FIELD_COUNT)


def set_utc_time(builder: SentenceBuilder, value: time) -> None:
    """Write the time of day as HHMMSS, with hundredths if non-zero."""
    _check_builder(builder)
    builder.set_string_value(UTC_TIME, format_utc_time(value))


def set_utc_date(builder: SentenceBuilder, value: date) -> None:
    """Write the date as DDMMYY.

    Raises:
        ValueError: If the year is outside 2000-2099.
    """
    _check_builder(builder)
    builder.set_string_value(UTC_DATE, format_utc_date(value))


def set_timestamp(builder: SentenceBuilder, value: datetime) -> None:
    """Write both date and time fields. Naive datetimes are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    set_utc_date(builder, value.date())
    set_utc_time(builder, value.time())


def set_data_status(builder: SentenceBuilder, status: DataStatus) -> None:
    """Write the status flag, 'A' for a valid fix and 'V' otherwise."""
    _check_builder(builder)
    builder.set_char_value(DATA_STATUS, status.value)


def set_position(builder: SentenceBuilder, value: Position) -> None:
    """Write latitude (DDMM.mmm) and longitude (DDDMM.mmm) with hemispheres."""
    _check_builder(builder)
    builder.set_string_value(LATITUDE, format_latitude(value.latitude))
    builder.set_char_value(LATITUDE_HEMISPHERE, value.latitude_hemisphere.value)
    builder.set_string_value(LONGITUDE, format_longitude(value.longitude))
    builder.set_char_value(LONGITUDE_HEMISPHERE, value.longitude_hemisphere.value)


def set_speed(builder: SentenceBuilder, knots: float) -> None:
    """Write speed over ground in knots with one decimal, e.g. "012.3".

    Raises:
        ValueError: If *knots* is NaN or infinite.
    """
    _check_builder(builder)
    builder.set_float_value(SPEED, knots, decimals=1, width=5)


def set_course(builder: SentenceBuilder, degrees: float) -> None:
    """Write course over ground in degrees true with one decimal."""
    _check_builder(builder)
    builder.set_float_value(COURSE, degrees, decimals=1, width=5)


def set_variation(builder: SentenceBuilder, degrees: float) -> None:
    """Write a signed variation as magnitude plus hemisphere (East negative)."""
    _check_builder(builder)
    direction = Direction.EAST if degrees < 0 else Direction.WEST
    builder.set_float_value(VARIATION, abs(degrees), decimals=1, width=5)
    builder.set_char_value(VARIATION_HEMISPHERE, direction.value)


def set_gps_mode(builder: SentenceBuilder, mode: GpsMode | None) -> None:
    """Write the mode indicator; None leaves the field empty.

    Raises:
        ValueError: If the builder holds the 11-field legacy layout, which
            has no mode field.
    """
    _check_builder(builder)
    if len(builder.fields) <= MODE:
        raise ValueError(
            f"Legacy RMC layout with {len(builder.fields)} fields has no mode indicator"
        )
    builder.set_char_value(MODE, None if mode is None else mode.value)
