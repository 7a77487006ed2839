"""
Extraction Module for the payment-slip scanner.

This module classifies recognized text into reference numbers, amounts
and giro account numbers.
"""

from .extraction_result import ExtractionKind, ExtractionResult
from .classifier import (
    Classifier,
    best_match,
    classify,
    get_classifier,
    reset_classifier,
)

__all__ = [
    'ExtractionKind',
    'ExtractionResult',
    'Classifier',
    'classify',
    'best_match',
    'get_classifier',
    'reset_classifier'
]
