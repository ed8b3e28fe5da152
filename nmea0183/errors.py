"""Exception types raised while parsing and decoding NMEA sentences.

Every error derives from ``NMEAError`` so that stream consumers can skip a
bad line with a single ``except`` clause, while the subclasses let callers
tell structural problems apart from missing or malformed field data:

    InvalidSentenceError   - the line itself is malformed (parse time)
    UnsupportedIdError     - talker or sentence code is not recognised
    DataNotAvailableError  - the requested field is empty
    ParseError             - the field has content of the wrong shape
"""


class NMEAError(Exception):
    """Base class for all NMEA parsing errors."""


class InvalidSentenceError(NMEAError, ValueError):
    """Raised when a line violates the NMEA 0183 sentence structure."""


class UnsupportedIdError(NMEAError, ValueError):
    """Raised when a talker or sentence code is outside the known vocabulary.

    Attributes:
        code: The offending two- or three-letter code.
    """

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class DataNotAvailableError(NMEAError, LookupError):
    """Raised when an empty field is read."""


class ParseError(NMEAError, ValueError):
    """Raised when field content cannot be converted to the requested type."""
