"""NMEA checksum calculation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'. Receivers
may send the hex digits in either case; this module always writes uppercase.

Example sentence structure:
    $GPRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E,A*11
    ^                         checksum content                          ^^
    start                                                  checksum (0x11 = 17)
"""

# --- protocol delimiters ------------------------------------------------------

SENTENCE_START = "$"
CHECKSUM_DELIMITER = "*"
FIELD_DELIMITER = ","

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and provided checksum from an NMEA sentence.

    NMEA sentences follow the format: $<content>*<checksum>
    This function separates these components for validation.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPRMC,...*11")

    Returns:
        A tuple of (content, checksum_hex) if the sentence has valid structure,
        or None if:
        - Missing '$' start delimiter
        - Missing '*' checksum delimiter
        - Checksum is not exactly 2 characters (truncated or padded sentence)
        - Checksum contains a non-hexadecimal character

    Example:
        >>> extract_checksum_parts("$GPRMC,120044*64")
        ('GPRMC,120044', '64')
    """
    if not sentence.startswith(SENTENCE_START) or CHECKSUM_DELIMITER not in sentence:
        return None

    end = sentence.index(CHECKSUM_DELIMITER)
    content = sentence[1:end]
    provided = sentence[end + 1 :]

    if len(provided) != 2 or not _HEX_DIGITS.issuperset(provided):
        return None

    return content, provided


def _calculate_xor_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def calculate_checksum(content: str) -> str:
    """Return the checksum of *content* as a two-digit uppercase hex string.

    A leading '$' and anything from '*' onwards are ignored, so both a bare
    body and a complete sentence may be passed.

    Example:
        >>> calculate_checksum("GPRMC,,V,,,,,,,,,,N")
        '53'
    """
    if content.startswith(SENTENCE_START):
        content = content[1:]
    content = content.split(CHECKSUM_DELIMITER, 1)[0]
    return f"{_calculate_xor_checksum(content):02X}"


def append_checksum(sentence: str) -> str:
    """Append '*' and the checksum to a sentence.

    An existing checksum section is replaced, so the result always carries
    a freshly computed value.

    Example:
        >>> append_checksum("$GPRMC,,V,,,,,,,,,,N")
        '$GPRMC,,V,,,,,,,,,,N*53'
    """
    body = sentence.split(CHECKSUM_DELIMITER, 1)[0]
    return f"{body}{CHECKSUM_DELIMITER}{calculate_checksum(body)}"


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Extracting the content between '$' and '*'
    2. Computing the XOR of all content bytes
    3. Comparing against the provided 2-digit hex checksum (either case)

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include a trailing CR/LF terminator.

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum
    """
    sentence = sentence.rstrip("\r\n")

    parts = extract_checksum_parts(sentence)
    if parts is None:
        return False

    content, provided = parts
    return _calculate_xor_checksum(content) == int(provided, 16)
