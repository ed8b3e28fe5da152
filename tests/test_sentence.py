"""Tests for sentence parsing, tokenization and field access."""

import pytest

from nmea0183 import (
    DataNotAvailableError,
    InvalidSentenceError,
    ParseError,
    Sentence,
    SentenceBuilder,
    SentenceId,
    TalkerId,
    parse_sentence,
    split_fields,
)

RMC_VALID = "$GPRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E,A*11"
RMC_EMPTY = "$GPRMC,,V,,,,,,,,,,N*53"
GGA_VALID = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
MALFORMED = "$GPRMC,120044,AV,6011.552,N,02501.941,E,abc,360.0,160705,006.1,E,AD*4D"


class TestSplitFields:
    """Tests for split_fields function."""

    def test_strips_address_and_checksum(self):
        assert split_fields("$GPRMC,120044,A,,N*47") == ("120044", "A", "", "N")

    def test_without_checksum(self):
        assert split_fields("$GPRMC,120044,A") == ("120044", "A")

    def test_strips_terminator(self):
        assert split_fields("$GPRMC,120044,A*09\r\n") == ("120044", "A")

    def test_k_delimiters_give_k_plus_one_fields(self):
        assert split_fields("$GPRMC,,V,,,,,,,,,,N*53") == ("", "V") + ("",) * 9 + ("N",)
        assert len(split_fields("$GPRMC,,,*")) == 3

    def test_trailing_empty_field_is_kept(self):
        fields = split_fields(GGA_VALID)
        assert len(fields) == 14
        assert fields[-2:] == ("", "")


class TestParseSentence:
    """Tests for parse_sentence function."""

    def test_ids_and_fields(self):
        sentence = parse_sentence(RMC_VALID)
        assert sentence.talker_id is TalkerId.GP
        assert sentence.sentence_id is SentenceId.RMC
        assert sentence.field_count == 12
        assert sentence.fields[0] == "120044"
        assert sentence.fields[11] == "A"

    def test_field_count_not_checked_at_parse_time(self):
        sentence = parse_sentence("$GPRMC,120044,A,6011.552,N,02501.941,E*3C")
        assert sentence.field_count == 6

    def test_with_crlf(self):
        assert parse_sentence(RMC_VALID + "\r\n") == parse_sentence(RMC_VALID)

    def test_invalid_checksum(self):
        with pytest.raises(InvalidSentenceError):
            parse_sentence(RMC_VALID[:-2] + "FF")

    def test_sentence_without_checksum(self):
        sentence = parse_sentence(RMC_VALID[:-3])
        assert sentence == parse_sentence(RMC_VALID)


class TestFieldAccess:
    """Tests for the typed Sentence accessors."""

    @pytest.fixture
    def gga(self):
        return parse_sentence(GGA_VALID)

    def test_string_value(self, gga):
        assert gga.string_value(1) == "4807.038"

    def test_char_value(self, gga):
        assert gga.char_value(2) == "N"

    def test_int_value(self, gga):
        assert gga.int_value(6) == 8

    def test_float_value(self, gga):
        assert gga.float_value(8) == pytest.approx(545.4)

    def test_empty_field_is_not_available(self, gga):
        with pytest.raises(DataNotAvailableError):
            gga.string_value(12)

    def test_empty_field_typed_accessors(self, gga):
        for accessor in (gga.char_value, gga.int_value, gga.float_value):
            with pytest.raises(DataNotAvailableError):
                accessor(13)

    def test_has_value(self, gga):
        assert gga.has_value(0) is True
        assert gga.has_value(12) is False

    def test_has_value_out_of_range(self, gga):
        assert gga.has_value(99) is False
        assert gga.has_value(-1) is False

    def test_char_value_rejects_long_text(self, gga):
        with pytest.raises(ParseError):
            gga.char_value(1)

    def test_int_value_rejects_decimal(self, gga):
        with pytest.raises(ParseError) as exc_info:
            gga.int_value(7)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_float_value_rejects_text(self):
        sentence = parse_sentence(MALFORMED)
        with pytest.raises(ParseError):
            sentence.float_value(6)

    def test_out_of_range_index(self, gga):
        with pytest.raises(IndexError):
            gga.string_value(14)

    def test_negative_index(self, gga):
        with pytest.raises(IndexError):
            gga.string_value(-1)

    def test_failed_access_leaves_sentence_usable(self):
        sentence = parse_sentence(MALFORMED)
        with pytest.raises(ParseError):
            sentence.char_value(1)
        assert sentence.string_value(0) == "120044"


class TestSerialization:
    """Tests for Sentence.to_sentence and derived copies."""

    @pytest.mark.parametrize("line", [RMC_VALID, RMC_EMPTY, GGA_VALID])
    def test_round_trip(self, line):
        sentence = parse_sentence(line)
        assert str(sentence) == line
        assert parse_sentence(str(sentence)).fields == sentence.fields

    def test_checksum_is_uppercase(self):
        line = "$GPRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E*7c"
        assert str(parse_sentence(line)).endswith("*7C")

    def test_adds_missing_checksum(self):
        assert str(parse_sentence(RMC_VALID[:-3])) == RMC_VALID

    def test_with_value(self):
        sentence = parse_sentence(RMC_VALID)
        changed = sentence.with_value(1, "V")
        assert changed.fields[1] == "V"
        assert sentence.fields[1] == "A"
        assert parse_sentence(str(changed)) == changed

    def test_with_value_none_clears_field(self):
        changed = parse_sentence(RMC_VALID).with_value(11, None)
        assert changed.has_value(11) is False

    def test_with_value_rejects_delimiter(self):
        with pytest.raises(InvalidSentenceError):
            parse_sentence(RMC_VALID).with_value(0, "12,00")

    def test_with_value_rejects_reserved_character(self):
        with pytest.raises(InvalidSentenceError):
            parse_sentence(RMC_VALID).with_value(0, "12*00")

    def test_with_talker_id(self):
        changed = parse_sentence(RMC_VALID).with_talker_id(TalkerId.GN)
        assert str(changed) == (
            "$GNRMC,120044,A,6011.552,N,02501.941,E,000.0,360.0,160705,006.1,E,A*0F"
        )

    def test_sentence_is_immutable(self):
        sentence = parse_sentence(RMC_VALID)
        with pytest.raises(AttributeError):
            sentence.fields = ()

    def test_direct_construction_is_validated_on_serialization(self):
        sentence = Sentence(TalkerId.GP, SentenceId.TXT, ("x" * 80,))
        with pytest.raises(InvalidSentenceError):
            sentence.to_sentence()

    def test_full_length_line_without_checksum_cannot_be_reserialized(self):
        line = "$GPTXT," + "A" * 75
        assert len(line) == 82
        sentence = parse_sentence(line)
        assert sentence.fields == ("A" * 75,)
        with pytest.raises(InvalidSentenceError, match="exceeds"):
            str(sentence)


class TestSentenceBuilder:
    """Tests for SentenceBuilder."""

    def test_new_builder_has_blank_fields(self):
        builder = SentenceBuilder(TalkerId.GP, SentenceId.RMC, 12)
        assert builder.fields == ("",) * 12
        assert str(builder.build()) == "$GPRMC,,,,,,,,,,,,*4B"

    def test_minimum_one_field(self):
        with pytest.raises(ValueError):
            SentenceBuilder(TalkerId.GP, SentenceId.RMC, 0)

    def test_setters(self):
        builder = SentenceBuilder(TalkerId.GP, SentenceId.GGA, 4)
        builder.set_string_value(0, "123519")
        builder.set_char_value(1, "N")
        builder.set_int_value(2, 8, width=2)
        builder.set_float_value(3, 545.4)
        sentence = builder.build()
        assert sentence.fields == ("123519", "N", "08", "545.4")
        assert sentence.int_value(2) == 8
        assert sentence.float_value(3) == pytest.approx(545.4)

    def test_set_float_value_with_decimals(self):
        builder = SentenceBuilder(TalkerId.GP, SentenceId.RMC, 2)
        builder.set_float_value(0, 6.1, decimals=1, width=5)
        builder.set_float_value(1, 0, decimals=1, width=5)
        assert builder.fields == ("006.1", "000.0")

    def test_set_float_value_rejects_nan(self):
        builder = SentenceBuilder(TalkerId.GP, SentenceId.RMC, 1)
        with pytest.raises(ValueError):
            builder.set_float_value(0, float("nan"))

    def test_set_char_value_rejects_string(self):
        builder = SentenceBuilder(TalkerId.GP, SentenceId.RMC, 1)
        with pytest.raises(ValueError):
            builder.set_char_value(0, "AB")

    def test_none_normalizes_to_empty(self):
        builder = SentenceBuilder(TalkerId.GP, SentenceId.RMC, 3)
        builder.set_string_value(0, "x")
        builder.set_string_value(0, None)
        builder.set_int_value(1, None)
        builder.set_float_value(2, None)
        assert builder.fields == ("", "", "")

    @pytest.mark.parametrize("index", [-1, 3])
    def test_index_out_of_range(self, index):
        builder = SentenceBuilder(TalkerId.GP, SentenceId.RMC, 3)
        with pytest.raises(IndexError):
            builder.set_string_value(index, "x")

    def test_build_rejects_malformed_result(self):
        builder = SentenceBuilder(TalkerId.GP, SentenceId.TXT, 1)
        builder.set_string_value(0, "x" * 80)
        with pytest.raises(InvalidSentenceError):
            builder.build()

    def test_from_sentence_copies(self):
        sentence = parse_sentence(RMC_VALID)
        builder = SentenceBuilder.from_sentence(sentence)
        builder.set_char_value(1, "V")
        assert sentence.fields[1] == "A"
        assert builder.build().fields[1] == "V"
