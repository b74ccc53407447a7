"""
Input Handler Module for Invoice Harvest.

This module provides functionality for:
    - Downloading remote invoice documents to local files
    - Extracting plain text from downloaded PDFs

Author: ML Engineering Team
"""

from .fetcher import Fetcher
from .pdf_processor import PDFProcessor

__all__ = ['Fetcher', 'PDFProcessor']
