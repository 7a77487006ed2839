"""
Scanner Module for the payment-slip scanner.

This module provides the frame-level loop around the classifier:
    - Text recognizer interface
    - Throttled scanner session
    - Delegate notified of recognized values
"""

from .recognizer import TextRecognizer, StaticTextRecognizer
from .session import ScannerSession, ScannerDelegate, SessionState

__all__ = [
    'TextRecognizer',
    'StaticTextRecognizer',
    'ScannerSession',
    'ScannerDelegate',
    'SessionState'
]
