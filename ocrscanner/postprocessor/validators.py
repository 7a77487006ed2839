"""
Checksum Validators Module.

This module provides the modulus-10 check used on Swedish payment slips
for both the reference ("OCR") number and the amount field:

    - Right-to-left alternating weights 2, 1, 2, 1, ...
    - Weighted products of 10 or more are reduced by 9
    - The rightmost digit is the declared check digit
    - Optionally, the second-to-last digit is a length-control digit

Validation never raises; malformed input simply fails.
"""

import re
from typing import Tuple

from ocrscanner.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)

# Characters removed before checksumming ("#" and any whitespace)
SEPARATOR_PATTERN = re.compile(r'[#\s]')
DIGITS_PATTERN = re.compile(r'[0-9]+')


def strip_separators(digits: str) -> str:
    """Remove "#" and whitespace from a digit string."""
    return SEPARATOR_PATTERN.sub('', digits or '')


def compute_check_digit(payload: str) -> int:
    """
    Compute the modulus-10 check digit for a payload.

    The payload is the digit string without its check digit. The
    result is ``10 - total % 10``, which is 10 (never a declared digit)
    when the weighted total is a multiple of ten.

    Args:
        payload: ASCII digits, rightmost digit weighted by 2.

    Returns:
        Computed check digit, in the range 1 to 10.

    Example:
        >>> compute_check_digit("123456")
        6
    """
    total = 0
    multiply_by_one = False

    for char in reversed(payload):
        product = int(char) * (1 if multiply_by_one else 2)
        if product >= 10:
            product -= 9
        total += product
        multiply_by_one = not multiply_by_one

    return 10 - total % 10


class Modulus10Validator:
    """
    Validates digit strings against the modulus-10 checksum.

    Checks for:
        - Only digits once "#" and whitespace are removed
        - At least a payload digit and a check digit
        - Matching check digit
        - Matching length-control digit (when enforced)

    Example:
        >>> validator = Modulus10Validator()
        >>> validator.is_valid("1234566")
        True
        >>> validator.validate("12a4")
        (False, "Malformed digit string")
    """

    def __init__(self, enforce_length_control: bool = False) -> None:
        """
        Initialize the validator.

        Args:
            enforce_length_control: Also require the second-to-last digit
                to equal (length - 1) mod 10.
        """
        self.enforce_length_control = enforce_length_control

    def is_valid(self, digits: str) -> bool:
        """
        Check if a digit string passes the checksum.

        Args:
            digits: Digit string, may contain "#" and whitespace.

        Returns:
            True if valid, False otherwise.
        """
        valid, _ = self.validate(digits)
        return valid

    def validate(self, digits: str) -> Tuple[bool, str]:
        """
        Validate a digit string with detailed feedback.

        Args:
            digits: Digit string, may contain "#" and whitespace.

        Returns:
            Tuple of (is_valid, message).
        """
        stripped = strip_separators(digits)

        if not stripped:
            return False, "Digit string is empty"

        if not DIGITS_PATTERN.fullmatch(stripped):
            return False, "Malformed digit string"

        if len(stripped) < 2:
            return False, "Digit string too short"

        declared = int(stripped[-1])
        computed = compute_check_digit(stripped[:-1])

        if self.enforce_length_control:
            length_nr = (len(stripped) - 1) % 10
            control = int(stripped[-2])
            if length_nr != control:
                return False, (
                    f"Length control digit {control} does not match "
                    f"expected {length_nr}"
                )

        if declared != computed:
            return False, (
                f"Check digit {declared} does not match computed {computed}"
            )

        return True, "Valid checksum"


def is_valid_modulus10(digits: str, enforce_length_control: bool = False) -> bool:
    """
    Check a digit string against the modulus-10 checksum.

    Args:
        digits: Digit string, may contain "#" and whitespace.
        enforce_length_control: Also check the length-control digit.

    Returns:
        True if the string is valid.

    Example:
        >>> is_valid_modulus10("1234566")
        True
        >>> is_valid_modulus10("1234567")
        False
    """
    valid, message = Modulus10Validator(enforce_length_control).validate(digits)
    if not valid:
        logger.debug(f"Checksum failed for '{digits}': {message}")
    return valid
