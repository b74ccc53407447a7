"""
Invoice Harvest - Source Package.

This package downloads invoice PDFs, extracts a fixed set of labeled
fields from their text and writes one CSV row per document.

Modules:
    - input_handler: Document download and PDF text extraction
    - field_extraction: Label-based field extraction
    - output_handler: CSV and Excel output
    - pipeline: Sequential driver and run results
    - utils: Logging, exceptions and helpers

Architecture:
    Download → Text Extraction → Field Extraction → CSV Output
                                                       ↓
                                                 Run Summary
"""

__version__ = "1.0.0"
__author__ = "ML Engineering Team"

__all__ = [
    'input_handler',
    'field_extraction',
    'output_handler',
    'pipeline',
    'utils'
]
