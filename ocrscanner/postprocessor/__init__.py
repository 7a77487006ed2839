"""
Post-Processing Module for the payment-slip scanner.

This module provides functionality for:
    - Modulus-10 checksum validation
    - Reference/giro number normalization
    - Amount normalization (decimal comma)
"""

from .validators import (
    Modulus10Validator,
    compute_check_digit,
    is_valid_modulus10,
    strip_separators,
)
from .normalizers import NumberNormalizer, AmountNormalizer

__all__ = [
    'Modulus10Validator',
    'compute_check_digit',
    'is_valid_modulus10',
    'strip_separators',
    'NumberNormalizer',
    'AmountNormalizer'
]
