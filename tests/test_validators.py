import pytest

from ocrscanner.postprocessor import (
    Modulus10Validator,
    compute_check_digit,
    is_valid_modulus10,
    strip_separators,
)


class TestComputeCheckDigit:
    """Check digit computation"""

    def test_alternating_weights(self):
        # 6*2=12->3, 5, 4*2=8, 3, 2*2=4, 1 -> 24
        assert compute_check_digit("123456") == 6

    def test_total_multiple_of_ten_yields_ten(self):
        # 3*2 + 2 + 1*2 = 10
        assert compute_check_digit("123") == 10

    def test_single_payload_digit(self):
        assert compute_check_digit("5") == 9  # 5*2=10->1


class TestModulus10:
    """Modulus-10 checksum validation"""

    def test_valid_reference(self):
        assert is_valid_modulus10("1234566") is True

    def test_wrong_check_digit(self):
        assert is_valid_modulus10("1234567") is False

    def test_separators_are_stripped(self):
        assert is_valid_modulus10("1234566 #") is True
        assert is_valid_modulus10("12 345 66#") is True
        assert is_valid_modulus10("100 00 8") is True

    @pytest.mark.parametrize("digits", ["", " ", "#", " # "])
    def test_empty_after_stripping(self, digits):
        assert is_valid_modulus10(digits) is False

    @pytest.mark.parametrize("digits", [str(d) for d in range(10)])
    def test_single_digit_always_fails(self, digits):
        assert is_valid_modulus10(digits) is False
        assert is_valid_modulus10(digits, True) is False

    @pytest.mark.parametrize("digits", ["12a4", "1234-566", "１２３", "12.5"])
    def test_non_digits_fail(self, digits):
        assert is_valid_modulus10(digits) is False

    def test_computed_ten_never_matches(self):
        for declared in range(10):
            assert is_valid_modulus10(f"123{declared}") is False

    def test_single_digit_substitution_detected(self):
        """Every single-digit change of a valid short string is caught."""
        checked = 0
        for value in range(1000):
            payload = f"{value:03d}"
            check = compute_check_digit(payload)
            if check == 10:
                continue

            assert is_valid_modulus10(payload + str(check))
            checked += 1

            for position in range(len(payload)):
                for digit in "0123456789":
                    if digit == payload[position]:
                        continue
                    mutated = payload[:position] + digit + payload[position + 1:]
                    assert not is_valid_modulus10(mutated + str(check)), mutated

        assert checked > 0


class TestLengthControl:
    """Length-control digit"""

    def test_length_and_checksum_match(self):
        # n=4, second-to-last digit 3 == (4 - 1) % 10
        assert is_valid_modulus10("2139", True) is True

    def test_length_mismatch(self):
        assert is_valid_modulus10("100008", False) is True
        assert is_valid_modulus10("100008", True) is False

    def test_length_ok_checksum_wrong(self):
        assert is_valid_modulus10("2138", True) is False

    def test_length_counts_stripped_digits(self):
        assert is_valid_modulus10("21 39 #", True) is True


class TestModulus10Validator:
    """Validator feedback messages"""

    def setup_method(self):
        self.validator = Modulus10Validator()

    def test_validate_valid(self):
        assert self.validator.validate("1234566") == (True, "Valid checksum")

    def test_validate_empty(self):
        assert self.validator.validate(None) == (False, "Digit string is empty")

    def test_validate_malformed(self):
        assert self.validator.validate("12a4") == (False, "Malformed digit string")

    def test_validate_too_short(self):
        assert self.validator.validate("7 #") == (False, "Digit string too short")

    def test_validate_checksum_message(self):
        valid, message = self.validator.validate("1234567")
        assert not valid
        assert "computed 6" in message

    def test_validate_length_message(self):
        valid, message = Modulus10Validator(True).validate("100008")
        assert not valid
        assert "Length control" in message

    def test_strip_separators(self):
        assert strip_separators(" 12\t34 #\n") == "1234"
