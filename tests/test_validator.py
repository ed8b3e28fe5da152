"""Tests for structural sentence validation."""

import warnings
from pathlib import Path

import pytest

from nmea0183 import InvalidSentenceError, is_valid_sentence, validate_sentence
from nmea0183 import validator
from nmea0183.validator import MAX_LENGTH

RMC_VALID = "$GPRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E,A*11"
RMC_NO_CHECKSUM = "$GPRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E,A"


class TestValidateSentence:
    """Tests for validate_sentence function."""

    def test_valid_sentence(self):
        validate_sentence(RMC_VALID)

    def test_checksum_is_optional(self):
        validate_sentence(RMC_NO_CHECKSUM)

    def test_terminator_is_ignored(self):
        validate_sentence(RMC_VALID + "\r\n")

    def test_lowercase_checksum(self):
        validate_sentence("$GPRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E*7c")

    def test_missing_start_marker(self):
        with pytest.raises(InvalidSentenceError, match="start marker"):
            validate_sentence(RMC_VALID[1:])

    def test_error_cites_offending_text(self):
        with pytest.raises(InvalidSentenceError) as exc_info:
            validate_sentence(RMC_VALID[:-2] + "00")
        assert RMC_VALID[:-2] + "00" in str(exc_info.value)

    def test_checksum_mismatch(self):
        with pytest.raises(InvalidSentenceError, match="Checksum mismatch"):
            validate_sentence(RMC_VALID[:-2] + "12")

    @pytest.mark.parametrize("checksum", ["1", "111", "ZZ", ""])
    def test_malformed_checksum(self, checksum):
        with pytest.raises(InvalidSentenceError, match="Malformed checksum"):
            validate_sentence(RMC_NO_CHECKSUM + "*" + checksum)

    def test_maximum_length_accepted(self):
        line = "$GPTXT," + "A" * (MAX_LENGTH - 7)
        assert len(line) == MAX_LENGTH
        validate_sentence(line)

    def test_too_long(self):
        line = "$GPTXT," + "A" * (MAX_LENGTH - 6)
        with pytest.raises(InvalidSentenceError, match="exceeds"):
            validate_sentence(line)

    @pytest.mark.parametrize(
        "line",
        ["$GPRM,1,2", "$GPRMCX,1,2", "$gprmc,1,2", "$GP-MC,1,2", "$GPRMC"],
    )
    def test_malformed_address(self, line):
        with pytest.raises(InvalidSentenceError):
            validate_sentence(line)

    def test_reserved_character_in_data(self):
        with pytest.raises(InvalidSentenceError, match="Illegal character"):
            validate_sentence("$GPRMC,12$044,A")

    def test_control_character_in_data(self):
        with pytest.raises(InvalidSentenceError, match="Illegal character"):
            validate_sentence("$GPRMC,120044\t,A")

    def test_empty_string(self):
        with pytest.raises(InvalidSentenceError):
            validate_sentence("")


class TestIsValidSentence:
    """Tests for is_valid_sentence function."""

    def test_valid(self):
        assert is_valid_sentence(RMC_VALID) is True

    def test_invalid(self):
        assert is_valid_sentence("GPRMC,120044") is False

    def test_unknown_ids_are_structurally_valid(self):
        assert is_valid_sentence("$ZZXYZ,1,2*58") is True


class TestModuleSource:
    """The validator source must compile cleanly under warnings-as-errors."""

    def test_compiles_without_warnings(self):
        path = Path(validator.__file__)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            compile(path.read_text(encoding="utf-8"), str(path), "exec")
