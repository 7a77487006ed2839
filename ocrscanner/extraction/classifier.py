"""
Recognized-Text Classifier Module.

This module finds payment-slip fields in free-form recognized text.
Three fixed lexical shapes are searched independently, so one fragment
can yield several results:

    Reference:     "1234566 #"      3-25 digits, whitespace, "#"
    Amount:        "12345 13 8"     kronor, ören, check digit
    Giro account:  "1234#56#"       2-8 digits "#" 2 digits "#"

References and amounts are checked with the modulus-10 validator;
giro account numbers follow a fixed register format and are always
reported as valid.

Usage:
    from ocrscanner.extraction import classify

    for result in classify("Att betala 100 00 8  1234566 #"):
        print(result.kind, result.formatted_value, result.is_valid)
"""

import re
from typing import Iterator, List, Optional

from ocrscanner.config import get_config
from ocrscanner.postprocessor.normalizers import AmountNormalizer, NumberNormalizer
from ocrscanner.postprocessor.validators import Modulus10Validator
from ocrscanner.utils.logger import get_logger
from .extraction_result import ExtractionKind, ExtractionResult

# Initialize module logger
logger = get_logger(__name__)


class Classifier:
    """
    Classifies recognized-text fragments into payment-slip fields.

    The classifier holds no per-call state; one instance can be shared
    between threads.

    Attributes:
        reference_validator: Checksum validator for reference numbers
        amount_validator: Checksum validator for amounts

    Example:
        >>> classifier = Classifier()
        >>> classifier.classify("1234#56#")
        [ExtractionResult(giro_account='1234', amount=0.0, valid=True)]
        >>> classifier.classify("hello world")
        []
    """

    REFERENCE_PATTERN = re.compile(r'[0-9]{3,25}\s#(?=\s|$)')
    AMOUNT_PATTERN = re.compile(r'(?:^|(?<=\s))[0-9]{0,7}\s[0-9]{1,2}\s[0-9](?=\s|$)')
    GIRO_PATTERN = re.compile(r'[0-9]{2,8}#[0-9]{2}#')

    def __init__(
        self,
        reference_length_control: Optional[bool] = None,
        amount_length_control: Optional[bool] = None
    ) -> None:
        """
        Initialize the classifier.

        Args:
            reference_length_control: Require a length-control digit in
                reference numbers. Defaults to configuration.
            amount_length_control: Require a length-control digit in
                amounts. Defaults to configuration.
        """
        if reference_length_control is None:
            reference_length_control = get_config(
                "validation.reference.length_control", False
            )
        if amount_length_control is None:
            amount_length_control = get_config(
                "validation.amount.length_control", False
            )

        self.reference_validator = Modulus10Validator(bool(reference_length_control))
        self.amount_validator = Modulus10Validator(bool(amount_length_control))
        self.number_normalizer = NumberNormalizer()
        self.amount_normalizer = AmountNormalizer()

        logger.debug(
            f"Classifier initialized (length control: "
            f"reference={self.reference_validator.enforce_length_control}, "
            f"amount={self.amount_validator.enforce_length_control})"
        )

    def classify(self, fragment: str) -> List[ExtractionResult]:
        """
        Find every reference, amount and giro account in a fragment.

        Results are ordered by kind (references, amounts, giro accounts)
        and by position within each kind.

        Args:
            fragment: Recognized text, one block or several joined.

        Returns:
            List of results, empty when nothing matches.
        """
        if not fragment:
            return []

        results: List[ExtractionResult] = []
        results.extend(self._extract_references(fragment))
        results.extend(self._extract_amounts(fragment))
        results.extend(self._extract_giro_accounts(fragment))

        if results:
            logger.debug(f"Classified {len(results)} match(es) in '{fragment}'")
        return results

    def best_match(self, fragment: str) -> ExtractionResult:
        """
        Return the single best match of a fragment.

        Ties between kinds are broken by pattern order: reference, then
        amount, then giro account.

        Args:
            fragment: Recognized text.

        Returns:
            First result in pattern order, or an UNDEFINED result.
        """
        results = self.classify(fragment)
        if results:
            return results[0]
        return ExtractionResult.undefined(fragment or '')

    def _extract_references(self, fragment: str) -> Iterator[ExtractionResult]:
        """Yield a result for each reference number in the fragment."""
        for match in self.REFERENCE_PATTERN.finditer(fragment):
            raw = match.group(0)
            yield ExtractionResult(
                kind=ExtractionKind.REFERENCE,
                raw_value=raw,
                formatted_value=self.number_normalizer.normalize(raw),
                is_valid=self.reference_validator.is_valid(raw)
            )

    def _extract_amounts(self, fragment: str) -> Iterator[ExtractionResult]:
        """Yield a result for each amount field in the fragment."""
        for match in self.AMOUNT_PATTERN.finditer(fragment):
            raw = match.group(0)
            # Amount validity and parse success are independent
            yield ExtractionResult(
                kind=ExtractionKind.AMOUNT,
                raw_value=raw,
                formatted_value=self.amount_normalizer.normalize(raw),
                amount=self.amount_normalizer.to_float(raw),
                is_valid=self.amount_validator.is_valid(raw)
            )

    def _extract_giro_accounts(self, fragment: str) -> Iterator[ExtractionResult]:
        """Yield a result for each giro account number in the fragment."""
        for match in self.GIRO_PATTERN.finditer(fragment):
            raw = match.group(0)
            yield ExtractionResult(
                kind=ExtractionKind.GIRO_ACCOUNT,
                raw_value=raw,
                formatted_value=self.number_normalizer.normalize(raw),
                is_valid=True
            )


_default_classifier: Optional[Classifier] = None


def get_classifier() -> Classifier:
    """Return the shared classifier built from the current configuration."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = Classifier()
    return _default_classifier


def reset_classifier() -> None:
    """Drop the shared classifier so the next call re-reads configuration."""
    global _default_classifier
    _default_classifier = None


def classify(fragment: str) -> List[ExtractionResult]:
    """
    Classify a recognized-text fragment with the shared classifier.

    Args:
        fragment: Recognized text.

    Returns:
        List of results, possibly empty.
    """
    return get_classifier().classify(fragment)


def best_match(fragment: str) -> ExtractionResult:
    """
    Return the single best match of a fragment with the shared classifier.

    Args:
        fragment: Recognized text.

    Returns:
        First result in pattern order, or an UNDEFINED result.
    """
    return get_classifier().best_match(fragment)
