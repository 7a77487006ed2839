"""
Extraction Result Data Class.

This module defines the data structure returned by the classifier for
each pattern occurrence found in a recognized-text fragment.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ExtractionKind(Enum):
    """Kind of payment-slip field a match represents."""

    REFERENCE = "reference"
    AMOUNT = "amount"
    GIRO_ACCOUNT = "giro_account"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Represents one classified match in a recognized-text fragment.

    Attributes:
        kind: Which field the match looks like
        raw_value: Matched substring before formatting
        formatted_value: Reference/giro digits before the first "#",
            or "<kronor>,<ören>" for amounts
        amount: Parsed amount, only meaningful for AMOUNT
        is_valid: Checksum result (always True for giro accounts)

    Example:
        >>> result = ExtractionResult(
        ...     kind=ExtractionKind.REFERENCE,
        ...     raw_value="1234566 #",
        ...     formatted_value="1234566",
        ...     is_valid=True
        ... )
        >>> print(result.to_json())
    """
    kind: ExtractionKind
    raw_value: str
    formatted_value: str = ""
    amount: float = 0.0
    is_valid: bool = False

    @classmethod
    def undefined(cls, fragment: str) -> 'ExtractionResult':
        """Result for a fragment that matched nothing of interest."""
        return cls(kind=ExtractionKind.UNDEFINED, raw_value=fragment)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format.

        Returns:
            Dictionary representation of the result.
        """
        return {
            'kind': self.kind.value,
            'raw_value': self.raw_value,
            'formatted_value': self.formatted_value,
            'amount': self.amount,
            'is_valid': self.is_valid
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"ExtractionResult("
            f"{self.kind.value}={self.formatted_value!r}, "
            f"amount={self.amount}, "
            f"valid={self.is_valid})"
        )
