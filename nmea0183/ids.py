"""Talker and sentence identifiers.

The address field of every sentence is five characters: a two-character
talker id naming the device class that sent it, followed by a
three-character sentence id naming the message layout.

    $GPRMC,...
     ^^^^^
     | +-- sentence id "RMC" (Recommended Minimum Specific GNSS Data)
     +-- talker id "GP" (GPS receiver)

Both vocabularies are closed: parsing a code that is not listed here fails
with ``UnsupportedIdError``. Receivers that emit vendor or newer codes can be
supported by registering the code once at startup::

    register_talker_id("QZ")
    register_sentence_id("PVT")

Registered codes behave like the built-in members: ``TalkerId("QZ")``
returns the same object on every call and compares equal to ``"QZ"``.
"""

import logging
from enum import Enum

from nmea0183.errors import UnsupportedIdError

__all__ = [
    "SentenceId",
    "TalkerId",
    "parse_sentence_id",
    "parse_talker_id",
    "register_sentence_id",
    "register_talker_id",
]

logger = logging.getLogger(__name__)

_CODE_CHARACTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")

# Codes added through register_talker_id() / register_sentence_id(),
# keyed by enum class and then by code.
_registered: dict[type, dict[str, "_Identifier"]] = {}


class _Identifier(str, Enum):
    """Base for identifier enums that accept registered extension codes."""

    @classmethod
    def _missing_(cls, value: object) -> "_Identifier | None":
        if isinstance(value, str):
            return _registered.get(cls, {}).get(value)
        return None

    def __str__(self) -> str:
        return self.value


class TalkerId(_Identifier):
    """Originating device class of a sentence."""

    AG = "AG"  # Autopilot, general
    AP = "AP"  # Autopilot, magnetic
    BD = "BD"  # BeiDou (legacy)
    CD = "CD"  # Digital selective calling
    CR = "CR"  # Data receiver
    CS = "CS"  # Satellite communications
    CT = "CT"  # Radio-telephone (MF/HF)
    CV = "CV"  # Radio-telephone (VHF)
    CX = "CX"  # Scanning receiver
    DE = "DE"  # DECCA navigator
    DF = "DF"  # Direction finder
    EC = "EC"  # Electronic chart system
    EI = "EI"  # Electronic chart display and information system
    EP = "EP"  # Emergency position indicating beacon
    ER = "ER"  # Engine room monitoring
    GA = "GA"  # Galileo
    GB = "GB"  # BeiDou
    GI = "GI"  # NavIC (IRNSS)
    GL = "GL"  # GLONASS
    GN = "GN"  # Combined GNSS solution
    GP = "GP"  # GPS
    GQ = "GQ"  # QZSS
    HC = "HC"  # Heading, magnetic compass
    HE = "HE"  # Heading, north seeking gyro
    HN = "HN"  # Heading, non-north seeking gyro
    II = "II"  # Integrated instrumentation
    IN = "IN"  # Integrated navigation
    LC = "LC"  # Loran-C
    RA = "RA"  # Radar and/or ARPA
    SD = "SD"  # Depth sounder
    SN = "SN"  # Electronic positioning system
    SS = "SS"  # Scanning sounder
    TI = "TI"  # Turn rate indicator
    VD = "VD"  # Velocity sensor, doppler
    VM = "VM"  # Velocity sensor, speed log, magnetic
    VW = "VW"  # Velocity sensor, speed log, water, mechanical
    WI = "WI"  # Weather instruments
    YX = "YX"  # Transducer
    ZA = "ZA"  # Atomic clock
    ZC = "ZC"  # Chronometer
    ZQ = "ZQ"  # Quartz clock
    ZV = "ZV"  # Radio update clock


class SentenceId(_Identifier):
    """Sentence type; each id implies a fixed field layout."""

    APB = "APB"  # Autopilot sentence "B"
    BOD = "BOD"  # Bearing, origin to destination
    DBT = "DBT"  # Depth below transducer
    DPT = "DPT"  # Depth of water
    GBS = "GBS"  # GNSS satellite fault detection
    GGA = "GGA"  # Global positioning system fix data
    GLL = "GLL"  # Geographic position, latitude/longitude
    GNS = "GNS"  # GNSS fix data
    GSA = "GSA"  # GNSS DOP and active satellites
    GST = "GST"  # GNSS pseudorange error statistics
    GSV = "GSV"  # GNSS satellites in view
    HDG = "HDG"  # Heading, deviation and variation
    HDM = "HDM"  # Heading, magnetic
    HDT = "HDT"  # Heading, true
    MTW = "MTW"  # Water temperature
    MWD = "MWD"  # Wind direction and speed
    MWV = "MWV"  # Wind speed and angle
    RMB = "RMB"  # Recommended minimum navigation information
    RMC = "RMC"  # Recommended minimum specific GNSS data
    ROT = "ROT"  # Rate of turn
    RPM = "RPM"  # Revolutions
    RSA = "RSA"  # Rudder sensor angle
    RTE = "RTE"  # Routes
    TXT = "TXT"  # Text transmission
    VBW = "VBW"  # Dual ground/water speed
    VHW = "VHW"  # Water speed and heading
    VLW = "VLW"  # Distance travelled through water
    VTG = "VTG"  # Course over ground and ground speed
    VWR = "VWR"  # Relative wind speed and angle
    WPL = "WPL"  # Waypoint location
    XTE = "XTE"  # Cross-track error, measured
    ZDA = "ZDA"  # Time and date


def _register(cls: type[_Identifier], code: str, length: int) -> _Identifier:
    if len(code) != length or not _CODE_CHARACTERS.issuperset(code):
        raise ValueError(
            f"{cls.__name__} code must be {length} characters A-Z/0-9, got {code!r}"
        )
    try:
        return cls(code)
    except ValueError:
        pass

    member = str.__new__(cls, code)
    member._name_ = code
    member._value_ = code
    _registered.setdefault(cls, {})[code] = member
    logger.debug("Registered %s %s", cls.__name__, code)
    return member


def register_talker_id(code: str) -> TalkerId:
    """Add *code* to the talker id vocabulary and return its member.

    Registering a code that is already known returns the existing member.
    Registered members resolve by value (``TalkerId("XX")``) and compare
    equal to their code, but they are not listed by iteration over
    ``TalkerId`` or in ``TalkerId.__members__``, which hold only the
    built-in vocabulary.

    Raises:
        ValueError: If *code* is not two characters from A-Z/0-9.
    """
    return _register(TalkerId, code, 2)


def register_sentence_id(code: str) -> SentenceId:
    """Add *code* to the sentence id vocabulary and return its member.

    As with ``register_talker_id``, registered members resolve by value but
    are not listed by iteration over ``SentenceId``.

    Raises:
        ValueError: If *code* is not three characters from A-Z/0-9.
    """
    return _register(SentenceId, code, 3)


def _resolve(cls: type[_Identifier], code: str, kind: str) -> _Identifier:
    try:
        return cls(code)
    except ValueError as exc:
        logger.debug("Unsupported %s id %r", kind, code)
        raise UnsupportedIdError(f"Unsupported {kind} id [{code}]", code) from exc


def parse_talker_id(line: str) -> TalkerId:
    """Resolve the talker id from characters 1-2 of a raw sentence.

    Raises:
        UnsupportedIdError: If the code is not in the vocabulary.
    """
    return _resolve(TalkerId, line[1:3], "talker")


def parse_sentence_id(line: str) -> SentenceId:
    """Resolve the sentence id from characters 3-5 of a raw sentence.

    Raises:
        UnsupportedIdError: If the code is not in the vocabulary.
    """
    return _resolve(SentenceId, line[3:6], "sentence")
