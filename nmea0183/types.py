"""Domain types decoded from NMEA sentence fields.

Design Decisions:
    1. Magnitudes and hemispheres are kept apart: ``Position`` stores
       non-negative decimal degrees together with the ``Direction`` read from
       the hemisphere field. ``signed_latitude``/``signed_longitude`` combine
       them for callers that want the usual +N/+E convention.

    2. Single-character flags are enums whose values are the wire characters,
       so ``DataStatus("A")`` decodes and ``DataStatus.VALID.value`` encodes.

    3. Optional values in ``RMCData`` (float | None): NMEA fields may be
       empty, indicated by consecutive commas. Using None distinguishes
       "no data received" from "measured zero".
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Direction(Enum):
    """Compass point of a hemisphere or variation field."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


class DataStatus(Enum):
    """Validity flag of a fix ('A' = valid, 'V' = invalid/void)."""

    VALID = "A"
    INVALID = "V"


class GpsMode(Enum):
    """FAA mode indicator (NMEA 2.3+).

    Older receivers omit the field entirely; see ``rmc.gps_mode``.
    """

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"  # dead reckoning
    FLOAT_RTK = "F"
    MANUAL = "M"
    NOT_VALID = "N"
    PRECISE = "P"
    RTK = "R"
    SIMULATED = "S"


@dataclass(frozen=True)
class Position:
    """Geographic position decoded from latitude/longitude field pairs.

    Attributes:
        latitude: Latitude magnitude in decimal degrees, 0.0 to 90.0.
        latitude_hemisphere: ``Direction.NORTH`` or ``Direction.SOUTH``.
        longitude: Longitude magnitude in decimal degrees, 0.0 to 180.0.
        longitude_hemisphere: ``Direction.EAST`` or ``Direction.WEST``.

    Example:
        >>> p = Position(60.1925, Direction.NORTH, 25.0324, Direction.WEST)
        >>> p.signed_longitude
        -25.0324
    """

    latitude: float
    latitude_hemisphere: Direction
    longitude: float
    longitude_hemisphere: Direction

    def __post_init__(self) -> None:
        if not 0.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not 0.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")
        if self.latitude_hemisphere not in (Direction.NORTH, Direction.SOUTH):
            raise ValueError(f"Invalid latitude hemisphere: {self.latitude_hemisphere}")
        if self.longitude_hemisphere not in (Direction.EAST, Direction.WEST):
            raise ValueError(f"Invalid longitude hemisphere: {self.longitude_hemisphere}")

    @classmethod
    def from_signed(cls, latitude: float, longitude: float) -> "Position":
        """Build a position from signed degrees (positive = North/East)."""
        return cls(
            abs(latitude),
            Direction.SOUTH if latitude < 0 else Direction.NORTH,
            abs(longitude),
            Direction.WEST if longitude < 0 else Direction.EAST,
        )

    @property
    def signed_latitude(self) -> float:
        """Latitude in decimal degrees, negative in the southern hemisphere."""
        if self.latitude_hemisphere is Direction.SOUTH:
            return -self.latitude
        return self.latitude

    @property
    def signed_longitude(self) -> float:
        """Longitude in decimal degrees, negative in the western hemisphere."""
        if self.longitude_hemisphere is Direction.WEST:
            return -self.longitude
        return self.longitude


@dataclass
class RMCData:
    """Snapshot of an RMC (Recommended Minimum Specific GNSS Data) sentence.

    RMC is the minimum fix record every GNSS receiver emits: time, date,
    position, speed and course, plus the magnetic variation.

    Attributes:
        utc_time: Raw UTC time in HHMMSS[.sss] format (e.g. "120044").
            None if the field was empty.

        timestamp: Timezone-aware UTC datetime combining the date and time
            fields, fractional seconds dropped. None if either field was
            empty.

        data_status: ``DataStatus.VALID`` when the receiver reports a usable
            fix. None if the field was empty.

        position: Decoded ``Position``, or None if any of the four
            latitude/longitude fields was empty.

        speed_knots: Speed over ground in knots. None if empty.

        course_degrees: Course over ground, degrees true (0.0 to 360.0).
            Typically None when stationary.

        variation_degrees: Signed magnetic variation; East is negative,
            West is positive. None if either variation field was empty.

        gps_mode: FAA mode indicator, or None if the field was empty or the
            sentence predates NMEA 2.3 and has no mode field at all.

        valid: True only if data_status is VALID and the mode (when
            present) is not ``GpsMode.NOT_VALID``.

    Example:
        >>> rmc = to_rmc_data(parse_rmc(
        ...     "$GPRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E,A*11"))
        >>> rmc.variation_degrees
        -6.1
        >>> rmc.valid
        True
    """

    utc_time: str | None
    timestamp: datetime | None
    data_status: DataStatus | None
    position: Position | None
    speed_knots: float | None
    course_degrees: float | None
    variation_degrees: float | None
    gps_mode: GpsMode | None
    valid: bool
