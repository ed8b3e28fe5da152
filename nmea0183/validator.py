"""Structural validation of raw NMEA 0183 sentences.

A valid sentence looks like:

    $GPRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E,A*11
    |^^^^^|                                                            ^^^
    | |   +-- first field delimiter                     optional checksum
    | +-- address field: 2-char talker id + 3-char sentence id
    +-- start marker

Rules enforced here:
    * the line starts with '$'
    * at most 82 characters, not counting the CR/LF terminator
    * exactly 5 address characters (A-Z, 0-9) followed by ','
    * data characters are printable ASCII and never '$' or '*'
    * when '*' is present it is followed by exactly two hex digits, which
      must match the XOR checksum of the text between '$' and '*'
"""

import logging

from nmea0183.checksum import (
    CHECKSUM_DELIMITER,
    FIELD_DELIMITER,
    SENTENCE_START,
    calculate_checksum,
    extract_checksum_parts,
    validate_checksum,
)
from nmea0183.errors import InvalidSentenceError

__all__ = [
    "ADDRESS_LENGTH",
    "MAX_LENGTH",
    "is_valid_sentence",
    "strip_terminator",
    "validate_sentence",
]

logger = logging.getLogger(__name__)

# Maximum sentence length, excluding <CR><LF>
MAX_LENGTH = 82

ADDRESS_LENGTH = 5

_ADDRESS_CHARACTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
_RESERVED_CHARACTERS = frozenset(SENTENCE_START + CHECKSUM_DELIMITER)


def strip_terminator(line: str) -> str:
    """Remove a trailing <CR><LF> (or a lone CR or LF) from *line*."""
    return line.rstrip("\r\n")


def _is_data_character(character: str) -> bool:
    return " " <= character <= "~" and character not in _RESERVED_CHARACTERS


def _fail(reason: str, line: str) -> InvalidSentenceError:
    logger.debug("Rejected sentence (%s): %r", reason, line)
    return InvalidSentenceError(f"{reason} [{line}]")


def _validate_address(line: str) -> None:
    address = line[1 : 1 + ADDRESS_LENGTH]
    if len(address) != ADDRESS_LENGTH or not _ADDRESS_CHARACTERS.issuperset(address):
        raise _fail("Malformed address field", line)
    if line[1 + ADDRESS_LENGTH : 2 + ADDRESS_LENGTH] != FIELD_DELIMITER:
        raise _fail("Address field must be followed by a field delimiter", line)


def _validate_checksum_section(line: str) -> None:
    parts = extract_checksum_parts(line)
    if parts is None:
        raise _fail("Malformed checksum", line)
    if not validate_checksum(line):
        raise _fail(f"Checksum mismatch, expected {calculate_checksum(parts[0])}", line)


def validate_sentence(line: str) -> None:
    """Check that *line* is a structurally valid NMEA 0183 sentence.

    A trailing line terminator is ignored. The checksum is optional; when
    present it must be correct.

    Raises:
        InvalidSentenceError: On any violation, with the offending text
            included in the message.
    """
    line = strip_terminator(line)

    if not line.startswith(SENTENCE_START):
        raise _fail("Missing start marker", line)
    if len(line) > MAX_LENGTH:
        raise _fail(f"Sentence exceeds {MAX_LENGTH} characters", line)

    _validate_address(line)

    content, delimiter, _ = line[1:].partition(CHECKSUM_DELIMITER)
    if not all(_is_data_character(c) for c in content):
        raise _fail("Illegal character in sentence", line)
    if delimiter:
        _validate_checksum_section(line)


def is_valid_sentence(line: str) -> bool:
    """Return True if *line* passes ``validate_sentence``."""
    try:
        validate_sentence(line)
    except InvalidSentenceError:
        return False
    return True
