"""
Payment-Slip Scanner - Source Package.

This package extracts and validates payment-slip fields from recognized
text: reference ("OCR") numbers, amounts and giro account numbers.

Modules:
    - extraction: Pattern classification of recognized text
    - postprocessor: Modulus-10 validation and value normalization
    - scanner: Throttled recognize-classify-dispatch session
    - config: YAML configuration
    - utils: Logging, exceptions and helpers

Architecture:
    Recognizer → Classifier → Validator → Delegate / CLI
"""

__version__ = "1.0.0"

from .extraction import ExtractionKind, ExtractionResult, best_match, classify
from .postprocessor import is_valid_modulus10

__all__ = [
    'ExtractionKind',
    'ExtractionResult',
    'classify',
    'best_match',
    'is_valid_modulus10'
]
