"""
Utility Module for Invoice Harvest.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Exceptions
    - File and path helpers
"""

from .logger import setup_logger, get_logger
from .helpers import ensure_directory, format_sequence_path, read_source_list

__all__ = [
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'format_sequence_path',
    'read_source_list'
]
