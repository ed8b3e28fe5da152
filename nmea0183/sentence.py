"""Sentence values, tokenization and typed field access.

A parsed sentence keeps its data fields as plain strings. Field index 0 is
the first field after the address; the address and checksum are not fields.

    $GPRMC,120044,A,6011.552,N,...,E,A*11
           |      | |
           |      | +-- index 2
           |      +-- index 1
           +-- index 0

An empty field (two consecutive commas) means "no data". It still occupies
its slot, so the field count of a sentence is fixed by its layout. Reading an
empty field raises ``DataNotAvailableError``; ``has_value`` probes without
raising.

``Sentence`` is immutable. New sentences are assembled with a
``SentenceBuilder``, which validates the result once in ``build()``::

    builder = SentenceBuilder(TalkerId.GP, SentenceId.RMC, 12)
    builder.set_string_value(1, "A")
    sentence = builder.build()
"""

import logging
import math
from dataclasses import dataclass, replace

from nmea0183.checksum import (
    CHECKSUM_DELIMITER,
    FIELD_DELIMITER,
    SENTENCE_START,
    append_checksum,
)
from nmea0183.errors import (
    DataNotAvailableError,
    InvalidSentenceError,
    NMEAError,
    ParseError,
)
from nmea0183.fields import parse_float, parse_int
from nmea0183.ids import SentenceId, TalkerId, parse_sentence_id, parse_talker_id
from nmea0183.validator import (
    ADDRESS_LENGTH,
    strip_terminator,
    validate_sentence,
)

__all__ = ["Sentence", "SentenceBuilder", "parse_sentence", "split_fields"]

logger = logging.getLogger(__name__)

# '$' + address + first ','
_FIELDS_OFFSET = ADDRESS_LENGTH + 2


def split_fields(line: str) -> tuple[str, ...]:
    """Split the data fields out of a sentence whose address has been checked.

    The address field and any checksum suffix are dropped. Empty fields are
    preserved, so a body with k commas yields k + 1 fields.

    Example:
        >>> split_fields("$GPRMC,120044,A,,N*47")
        ('120044', 'A', '', 'N')
    """
    body = strip_terminator(line)[_FIELDS_OFFSET:]
    body = body.split(CHECKSUM_DELIMITER, 1)[0]
    return tuple(body.split(FIELD_DELIMITER))


@dataclass(frozen=True)
class Sentence:
    """An NMEA 0183 sentence: talker id, sentence id and ordered data fields.

    Attributes:
        talker_id: Originating device class.
        sentence_id: Sentence type, which fixes the field layout.
        fields: Data field strings; empty string means "no data".
    """

    talker_id: TalkerId
    sentence_id: SentenceId
    fields: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_count(self) -> int:
        """Number of data fields, excluding address and checksum."""
        return len(self.fields)

    def string_value(self, index: int) -> str:
        """Return the raw text of a field.

        Raises:
            DataNotAvailableError: If the field is empty.
            IndexError: If *index* is outside the field sequence.
        """
        if index < 0:
            raise IndexError(f"Field index must be non-negative, got {index}")
        value = self.fields[index]
        if not value:
            raise DataNotAvailableError(f"Field {index} is empty")
        return value

    def char_value(self, index: int) -> str:
        """Return a single-character field.

        Raises:
            ParseError: If the field holds more than one character.
        """
        value = self.string_value(index)
        if len(value) != 1:
            raise ParseError(f"Expected a single character in field {index}, found [{value}]")
        return value

    def int_value(self, index: int) -> int:
        """Return a field parsed as an integer.

        Raises:
            ParseError: If the field is not a decimal integer.
        """
        value = self.string_value(index)
        try:
            return parse_int(value)
        except ValueError as exc:
            raise ParseError(f"Field {index} does not contain an integer [{value}]") from exc

    def float_value(self, index: int) -> float:
        """Return a field parsed as a finite decimal number.

        Raises:
            ParseError: If the field is not a number.
        """
        value = self.string_value(index)
        try:
            return parse_float(value)
        except ValueError as exc:
            raise ParseError(f"Field {index} does not contain a number [{value}]") from exc

    def has_value(self, index: int) -> bool:
        """Return True if the field exists and is not empty. Never raises."""
        try:
            self.string_value(index)
        except (NMEAError, IndexError):
            return False
        return True

    def with_value(self, index: int, value: str | None) -> "Sentence":
        """Return a copy of this sentence with one field replaced."""
        builder = SentenceBuilder.from_sentence(self)
        builder.set_string_value(index, value)
        return builder.build()

    def with_talker_id(self, talker_id: TalkerId) -> "Sentence":
        """Return a copy of this sentence sent by another talker."""
        return replace(self, talker_id=talker_id)

    def to_sentence(self) -> str:
        """Serialize to wire format with a freshly computed checksum.

        The result never includes the line terminator. A checksum is always
        written, so a parsed line of 80 to 82 characters that arrived without
        one cannot be serialized again: the added "*HH" takes it past the
        82-character limit.

        Raises:
            InvalidSentenceError: If the fields do not form a valid sentence,
                e.g. a field contains a delimiter or the result is too long.
        """
        address = f"{SENTENCE_START}{self.talker_id.value}{self.sentence_id.value}"
        line = append_checksum(FIELD_DELIMITER.join((address, *self.fields)))
        validate_sentence(line)
        if split_fields(line) != self.fields:
            raise InvalidSentenceError(f"Field contains a delimiter [{line}]")
        return line

    def __str__(self) -> str:
        return self.to_sentence()


class SentenceBuilder:
    """Mutable field buffer that produces validated ``Sentence`` values.

    The field count is fixed at construction. Setters accept ``None`` to
    clear a field, which later reads as "no data".

    Args:
        talker_id: Talker id of the sentence to build.
        sentence_id: Sentence id of the sentence to build.
        field_count: Number of data fields, all initially empty.
    """

    def __init__(self, talker_id: TalkerId, sentence_id: SentenceId, field_count: int) -> None:
        if field_count < 1:
            raise ValueError(f"A sentence needs at least one field, got {field_count}")
        self.talker_id = talker_id
        self.sentence_id = sentence_id
        self._fields = [""] * field_count

    @classmethod
    def from_sentence(cls, sentence: Sentence) -> "SentenceBuilder":
        """Start a builder holding a copy of *sentence*'s ids and fields."""
        builder = cls(sentence.talker_id, sentence.sentence_id, sentence.field_count)
        builder._fields = list(sentence.fields)
        return builder

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._fields)

    def set_string_value(self, index: int, value: str | None) -> None:
        """Write raw text into a field; ``None`` clears it.

        Raises:
            IndexError: If *index* is negative or beyond the field count.
        """
        if not 0 <= index < len(self._fields):
            raise IndexError(
                f"Field index {index} outside 0..{len(self._fields) - 1}"
            )
        self._fields[index] = "" if value is None else value

    def set_char_value(self, index: int, value: str | None) -> None:
        """Write a single character into a field.

        Raises:
            ValueError: If *value* is not exactly one character.
        """
        if value is not None and len(value) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        self.set_string_value(index, value)

    def set_int_value(self, index: int, value: int | None, width: int = 0) -> None:
        """Write an integer, zero-padded to *width* digits."""
        self.set_string_value(index, None if value is None else str(value).zfill(width))

    def set_float_value(
        self,
        index: int,
        value: float | None,
        decimals: int | None = None,
        width: int = 0,
    ) -> None:
        """Write a number into a field.

        Without *decimals* the shortest round-tripping form is written
        ("6.1"); with *decimals* the value is rounded and zero-padded to
        *width* characters, e.g. ``decimals=1, width=5`` gives "006.1".

        Raises:
            ValueError: If *value* is NaN or infinite.
        """
        if value is None:
            self.set_string_value(index, None)
            return
        if not math.isfinite(value):
            raise ValueError(f"Cannot encode non-finite number {value}")
        if decimals is None:
            text = repr(float(value))
        else:
            text = f"{value:.{decimals}f}".zfill(width)
        self.set_string_value(index, text)

    def build(self) -> Sentence:
        """Validate the buffered fields and return an immutable ``Sentence``.

        Raises:
            InvalidSentenceError: If the fields do not serialize to a valid
                sentence.
        """
        sentence = Sentence(self.talker_id, self.sentence_id, tuple(self._fields))
        sentence.to_sentence()
        return sentence


def parse_sentence(line: str) -> Sentence:
    """Parse a raw line into a ``Sentence``.

    The line is validated, then the talker and sentence ids are resolved
    from the address field, then the body is tokenized. Field counts are
    not checked here; sentence-specific decoders check them on access.

    Raises:
        InvalidSentenceError: If the line is structurally invalid.
        UnsupportedIdError: If the talker or sentence id is unknown.
    """
    line = strip_terminator(line)
    validate_sentence(line)
    talker_id = parse_talker_id(line)
    sentence_id = parse_sentence_id(line)
    sentence = Sentence(talker_id, sentence_id, split_fields(line))
    logger.debug("Parsed %s%s with %d fields", talker_id.value, sentence_id.value, sentence.field_count)
    return sentence
