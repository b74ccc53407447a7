"""
Output Handler Module for Invoice Harvest.

This module provides functionality for:
    - Per-document CSV output (header row plus one data row)
    - Consolidated Excel workbook for a whole run

Author: ML Engineering Team
"""

from .csv_writer import CSVWriter
from .excel_exporter import ExcelExporter

__all__ = ['CSVWriter', 'ExcelExporter']
