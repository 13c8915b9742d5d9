"""
Tests for check digit computation and identifier validation.

Check digit vectors are taken from the GS1 General Specifications and
the GS1 check digit calculator.
"""

import pytest
from gs1_label import (
    compute_check_digit,
    calculate_check_digit_mod10,
    validate_check_digit,
    validate_gtin,
    validate_sscc,
    validate_lot_number,
    check_gtin,
    check_lot_number,
    InvalidInputError,
    ErrorCode,
)


class TestCheckDigit:
    """Tests for Mod10 check digit calculation."""

    def test_gs1_published_vectors(self):
        """GS1 reference examples for each identifier length."""
        assert compute_check_digit("400638133393") == 1        # GTIN-13 4006381333931
        assert compute_check_digit("123456789012") == 8        # EAN-13 1234567890128
        assert compute_check_digit("9638507") == 4             # GTIN-8 96385074
        assert compute_check_digit("03600029145") == 2         # UPC-A 036000291452
        assert compute_check_digit("10614141123456789") == 7   # SSCC 106141411234567897

    def test_gtin14_body(self):
        assert compute_check_digit("0628509600084") == 2
        assert compute_check_digit("0061180000221") == 9
        assert compute_check_digit("0001234567890") == 5

    def test_sscc_body(self):
        assert compute_check_digit("00183456000000001") == 2

    def test_odd_length_matches_even_index_weighting(self):
        """For odd-length bodies, weight 3 falls on even indexes from the left."""
        for body in ("1234567890123", "98765432109876543", "5"):
            expected_sum = sum(
                int(d) * (3 if i % 2 == 0 else 1) for i, d in enumerate(body)
            )
            assert compute_check_digit(body) == (10 - expected_sum % 10) % 10

    def test_all_zeros(self):
        assert compute_check_digit("0000000000000") == 0

    def test_alias(self):
        assert calculate_check_digit_mod10 is compute_check_digit

    @pytest.mark.parametrize("bad", ["", "12a4", "12 34", "１２３", "²", None, 1234])
    def test_rejects_non_digits(self, bad):
        with pytest.raises(InvalidInputError):
            compute_check_digit(bad)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            compute_check_digit("abc")

    def test_validate_check_digit_meta(self):
        result = validate_check_digit("06285096000842")
        assert result.valid
        assert result.meta['check_digit_valid']
        assert result.meta['calculated_check_digit'] == 2

    def test_validate_check_digit_mismatch(self):
        result = validate_check_digit("06285096000841")
        assert not result.valid
        assert 'check digit mismatch' in result.errors[0].lower()
        assert result.meta['code'] == ErrorCode.INVALID_CHECK_DIGIT


class TestGTIN:
    """Tests for GTIN-14 validation."""

    def test_valid(self):
        assert validate_gtin("00012345678905")
        assert validate_gtin("06285096000842")

    def test_all_zero_gtin_is_valid(self):
        assert validate_gtin("00000000000000")

    def test_wrong_check_digit(self):
        assert not validate_gtin("00012345678906")

    def test_thirteen_digits_rejected(self):
        assert not validate_gtin("1234567890123")

    def test_fifteen_digits_rejected(self):
        assert not validate_gtin("000123456789050")

    @pytest.mark.parametrize("bad", [None, 12345678901231, "0001234567890A", "", " 0012345678905"])
    def test_never_raises(self, bad):
        assert validate_gtin(bad) is False

    def test_every_body_completes_to_valid_gtin(self):
        for body in ("0000000000000", "1234567890123", "9999999999999", "0614141999996"[:13]):
            assert validate_gtin(body + str(compute_check_digit(body)))

    def test_check_gtin_reports_length(self):
        result = check_gtin("1234567890123")
        assert not result.valid
        assert "exactly 14" in result.errors[0]
        assert result.meta['code'] == ErrorCode.INVALID_LENGTH

    def test_check_gtin_reports_characters(self):
        result = check_gtin("0001234567890X")
        assert result.meta['code'] == ErrorCode.INVALID_CHARACTERS


class TestSSCC:
    """Tests for SSCC-18 validation."""

    def test_valid(self):
        assert validate_sscc("106141411234567897")
        assert validate_sscc("001834560000000012")

    def test_wrong_check_digit(self):
        assert not validate_sscc("106141411234567898")

    def test_wrong_length(self):
        assert not validate_sscc("10614141123456789")
        assert not validate_sscc("1061414112345678970")

    def test_non_string(self):
        assert not validate_sscc(106141411234567897)


class TestLotNumber:
    """Tests for batch/lot number validation."""

    @pytest.mark.parametrize("lot", ["A", "LOT42", "GB2C", "a1B2c3", "X" * 20])
    def test_valid(self, lot):
        assert validate_lot_number(lot)

    @pytest.mark.parametrize("lot", ["", "X" * 21, "LOT-42", "LOT 42", "LOT_42", "LÖT", None, 42])
    def test_invalid(self, lot):
        assert not validate_lot_number(lot)

    def test_check_lot_number_errors(self):
        result = check_lot_number("LOT-42")
        assert not result.valid
        assert "Invalid characters" in result.errors[0]
