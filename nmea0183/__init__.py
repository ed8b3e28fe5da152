"""NMEA 0183 sentence parsing, validation and RMC decoding."""

from nmea0183 import rmc
from nmea0183.checksum import append_checksum, calculate_checksum, validate_checksum
from nmea0183.errors import (
    DataNotAvailableError,
    InvalidSentenceError,
    NMEAError,
    ParseError,
    UnsupportedIdError,
)
from nmea0183.ids import (
    SentenceId,
    TalkerId,
    parse_sentence_id,
    parse_talker_id,
    register_sentence_id,
    register_talker_id,
)
from nmea0183.rmc import new_rmc, parse_rmc, to_rmc_data
from nmea0183.sentence import Sentence, SentenceBuilder, parse_sentence, split_fields
from nmea0183.types import DataStatus, Direction, GpsMode, Position, RMCData
from nmea0183.validator import is_valid_sentence, validate_sentence

__all__ = [
    "DataNotAvailableError",
    "DataStatus",
    "Direction",
    "GpsMode",
    "InvalidSentenceError",
    "NMEAError",
    "ParseError",
    "Position",
    "RMCData",
    "Sentence",
    "SentenceBuilder",
    "SentenceId",
    "TalkerId",
    "UnsupportedIdError",
    "append_checksum",
    "calculate_checksum",
    "is_valid_sentence",
    "new_rmc",
    "parse_rmc",
    "parse_sentence",
    "parse_sentence_id",
    "parse_talker_id",
    "register_sentence_id",
    "register_talker_id",
    "rmc",
    "split_fields",
    "to_rmc_data",
    "validate_checksum",
    "validate_sentence",
]
