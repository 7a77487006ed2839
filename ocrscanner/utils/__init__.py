"""
Utility Module for the payment-slip scanner.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Custom exceptions
    - File and dictionary helpers
"""

from .logger import setup_logger, get_logger
from .helpers import ensure_directory, validate_file_exists, merge_dicts

__all__ = [
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'validate_file_exists',
    'merge_dicts'
]
