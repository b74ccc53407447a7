"""
Field Extraction Module for Invoice Harvest.

This module extracts the labeled invoice fields (order number, invoice
number, buyer details, dates, product, HSN code, amounts and tax
category) from document text using one pattern rule per field.

Author: ML Engineering Team
"""

from .extractor import FieldExtractor, FieldRule, FIELD_RULES
from .field_record import FieldRecord, FIELD_SCHEMA, FIELD_NAMES, FIELD_TITLES

__all__ = [
    'FieldExtractor',
    'FieldRule',
    'FIELD_RULES',
    'FieldRecord',
    'FIELD_SCHEMA',
    'FIELD_NAMES',
    'FIELD_TITLES',
]
