"""
Data Normalizers Module.

This module turns matched slip text into formatted values:
    - Reference and giro numbers (text before the first "#")
    - Amounts written as "<kronor> <ören> <check digit>"
"""

from decimal import Decimal, InvalidOperation
from typing import List

from ocrscanner.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


class NumberNormalizer:
    """
    Normalizes "#"-delimited reference and giro numbers.

    Example:
        >>> normalizer = NumberNormalizer()
        >>> normalizer.normalize("1234567 #")
        "1234567"
        >>> normalizer.normalize("1234#56#")
        "1234"
    """

    DELIMITER = '#'

    def normalize(self, text: str) -> str:
        """
        Keep the part before the first delimiter, trimmed.

        Args:
            text: Matched reference or giro text.

        Returns:
            Number without delimiter suffix or surrounding whitespace.
        """
        if not text:
            return ''
        return text.split(self.DELIMITER, 1)[0].strip()


class AmountNormalizer:
    """
    Normalizes amount fields printed on payment slips.

    The slip prints kronor, ören and a check digit as three whitespace
    separated groups. Kronor and ören are joined with a decimal comma.

    Example:
        >>> normalizer = AmountNormalizer()
        >>> normalizer.normalize("12345 12 3")
        "12345,12"
        >>> normalizer.to_float("12345 12 3")
        12345.12
    """

    DECIMAL_SEPARATOR = ','

    def split_groups(self, text: str) -> List[str]:
        """Split amount text into its whitespace separated digit groups."""
        return (text or '').split()

    def normalize(self, text: str) -> str:
        """
        Join the first two digit groups with a decimal comma.

        Args:
            text: Matched amount text.

        Returns:
            Human-readable amount (e.g. "12345,12"), or an empty string
            when fewer than two groups are present.
        """
        groups = self.split_groups(text)
        if len(groups) < 2:
            return ''
        return f"{groups[0]}{self.DECIMAL_SEPARATOR}{groups[1]}"

    def parse(self, amount_str: str) -> float:
        """
        Parse a decimal-comma amount string.

        Args:
            amount_str: Amount such as "12345,12".

        Returns:
            Amount rounded to two decimals, or 0.0 if it cannot be parsed.
        """
        try:
            value = Decimal(amount_str.replace(self.DECIMAL_SEPARATOR, '.'))
        except (InvalidOperation, AttributeError):
            logger.debug(f"Could not parse amount: '{amount_str}'")
            return 0.0

        if not value.is_finite() or value < 0:
            logger.debug(f"Rejected amount: '{amount_str}'")
            return 0.0

        return float(round(value, 2))

    def to_float(self, text: str) -> float:
        """
        Convert matched amount text to a float.

        Args:
            text: Matched amount text.

        Returns:
            Amount value, 0.0 on parse failure.
        """
        return self.parse(self.normalize(text))
