"""
Tests for GS1-128 element string assembly.

Tests cover:
- Separator placement after variable-length AIs
- No trailing separator
- Named field keys and their formatting
- Numeric pass-through and unknown key warnings
"""

import logging
from datetime import date

import pytest
from gs1_label import (
    assemble,
    compose_element_string,
    format_application_string,
    is_variable_length_ai,
    to_human_readable,
    AIElement,
    ComposeOptions,
    ErrorCode,
    InvalidInputError,
    UnknownIdentifierWarning,
    GS,
    GS_TEXT,
)


class TestSeparators:
    """Tests for separator placement."""

    def test_end_to_end_scenario(self):
        result = assemble([
            {"ai": "01", "value": "00012345678905"},
            {"ai": "10", "value": "LOT42"},
            {"ai": "11", "value": "240305"},
        ])
        assert result == "(01)00012345678905<GS>(10)LOT42<GS>(11)240305"

    def test_pairs_and_elements(self):
        expected = "(01)00012345678905<GS>(10)LOT42<GS>(11)240305"
        assert assemble([("01", "00012345678905"), ("10", "LOT42"), ("11", "240305")]) == expected
        assert assemble([
            AIElement("01", "00012345678905"),
            AIElement("10", "LOT42"),
            AIElement("11", "240305"),
        ]) == expected

    def test_mapping_keeps_insertion_order(self):
        assert assemble({"10": "LOT42", "01": "00012345678905"}) == "(10)LOT42<GS>(01)00012345678905"

    def test_no_separator_after_fixed_length_ai(self):
        assert assemble([("3103", "001234"), ("10", "LOT42")]) == "(3103)001234(10)LOT42"

    def test_last_variable_length_element_has_no_separator(self):
        text = assemble([("3103", "001234"), ("21", "SERIAL1")])
        assert text == "(3103)001234(21)SERIAL1"
        assert not text.endswith(GS_TEXT)

    def test_single_element(self):
        assert assemble([("00", "106141411234567897")]) == "(00)106141411234567897"

    def test_none_values_skipped(self):
        text = assemble([("01", "00012345678905"), ("10", "LOT42"), ("21", None)])
        assert text == "(01)00012345678905<GS>(10)LOT42"

    def test_trailing_none_does_not_leave_separator(self):
        assert assemble({"10": "LOT42", "17": None}) == "(10)LOT42"

    def test_empty_input(self):
        assert assemble([]) == ""
        assert assemble({"10": None}) == ""

    def test_raw_separator_option(self):
        text = assemble([("10", "LOT42"), ("21", "S1")], ComposeOptions(separator=GS))
        assert text == "(10)LOT42\x1d(21)S1"

    def test_custom_variable_length_set(self):
        opts = ComposeOptions(variable_length_ais=frozenset({"21"}))
        assert assemble([("01", "00012345678905"), ("21", "S1"), ("10", "L")], opts) == \
            "(01)00012345678905(21)S1<GS>(10)L"

    def test_list_pairs_accepted(self):
        assert assemble([["10", "LOT42"], ["21", "S1"]]) == "(10)LOT42<GS>(21)S1"

    @pytest.mark.parametrize("item", ["10LOT42", ("10", "LOT42", "extra"), ("10",), 42])
    def test_malformed_item_rejected(self, item):
        with pytest.raises(InvalidInputError, match="Expected an \\(ai, value\\) pair"):
            assemble([("01", "00012345678905"), item])

    def test_never_ends_with_separator(self):
        ais = ["00", "01", "10", "21", "37", "3103", "90", "99"]
        for ai in ais:
            for other in ais:
                text = assemble([(other, "1"), (ai, "2")])
                assert not text.endswith(GS_TEXT)


class TestVariableLengthSet:
    """Tests for is_variable_length_ai()."""

    @pytest.mark.parametrize("ai", ["00", "01", "02", "10", "11", "12", "13", "15", "17", "20",
                                    "21", "22", "30", "37", "90", "95", "99"])
    def test_members(self, ai):
        assert is_variable_length_ai(ai)

    @pytest.mark.parametrize("ai", ["16", "3103", "3201", "400", "8", ""])
    def test_non_members(self, ai):
        assert not is_variable_length_ai(ai)


class TestNamedFields:
    """Tests for named field keys."""

    def test_label_field_keys(self):
        text = assemble({
            "GTIN": "00012345678905",
            "BATCH_LOT": "LOT42",
            "PROD_DATE": "2024-03-05",
        })
        assert text == "(01)00012345678905<GS>(10)LOT42<GS>(11)240305"

    def test_keys_are_case_insensitive(self):
        assert assemble({"exp_date": date(2025, 12, 31)}) == "(17)251231"

    def test_quantity_and_weights(self):
        text = assemble({"QTY": 24, "WEIGHT_LB": "12.5", "WEIGHT_KG": 5.67})
        assert text == "(37)000024<GS>(3201)000125(3103)005670"

    def test_sscc_and_content_gtin(self):
        text = assemble({"SSCC": "106141411234567897", "CONTENT_GTIN": "00012345678905"})
        assert text == "(00)106141411234567897<GS>(02)00012345678905"

    def test_weight_overflow_propagates(self):
        with pytest.raises(InvalidInputError):
            assemble({"WEIGHT_KG": 5000})

    @pytest.mark.parametrize("count", ["abc", 2.5])
    def test_quantity_must_be_whole_number(self, count):
        with pytest.raises(InvalidInputError, match="whole number"):
            assemble({"QTY": count})

    def test_resolved_elements_reported(self):
        result = compose_element_string({"BATCH_LOT": "L1", "WEIGHT_LB": 1})
        assert result.elements == [AIElement("10", "L1"), AIElement("3201", "000010")]


class TestUnknownKeys:
    """Tests for numeric pass-through and unknown keys."""

    def test_numeric_key_passes_through(self):
        assert assemble({"8008": "240305101010", "10": "L1"}) == "(8008)240305101010(10)L1"

    def test_numeric_value_converted(self):
        assert assemble([("30", 12)]) == "(30)12"

    def test_unknown_key_warns_and_is_skipped(self):
        with pytest.warns(UnknownIdentifierWarning, match="Unknown GS1 AI: COLOUR"):
            text = assemble({"10": "LOT42", "COLOUR": "red", "21": "S1"})
        assert text == "(10)LOT42<GS>(21)S1"

    def test_compose_collects_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gs1_label"):
            result = compose_element_string({"COLOUR": "red", "10": "L1"})
        assert result.text == "(10)L1"
        assert len(result.warnings) == 1
        assert result.warnings[0].code == ErrorCode.UNKNOWN_AI
        assert result.warnings[0].key == "COLOUR"
        assert "Unknown GS1 AI: COLOUR" in caplog.text

    def test_logging_can_be_disabled(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gs1_label"):
            result = compose_element_string({"COLOUR": "red"}, ComposeOptions(log_unknown_keys=False))
        assert result.warnings
        assert caplog.text == ""

    def test_unknown_key_with_none_value_ignored(self):
        result = compose_element_string({"COLOUR": None})
        assert result.warnings == []


class TestHelpers:
    """Tests for formatting helpers."""

    def test_format_application_string(self):
        assert format_application_string("10", "LOT42") == "(10)LOT42"

    def test_human_readable(self):
        text = "(01)00012345678905<GS>(10)LOT42<GS>(11)240305"
        assert to_human_readable(text) == "(01)00012345678905 (10)LOT42 (11)240305"

    def test_human_readable_raw_separator(self):
        assert to_human_readable("(10)L\x1d(21)S", GS) == "(10)L (21)S"
