"""
Field Extractor Module.

This module provides the FieldExtractor class that pulls the labeled
invoice fields out of the plain text of a document.

Approach:
    Each field has one rule: a literal label followed by a colon, then
    either the next whitespace-delimited token (which may be on the
    following line) or the rest of the label's line. Rules are applied
    independently and the first occurrence of a label in the text wins.

Author: ML Engineering Team
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Pattern

from invoice_harvest.utils.logger import get_logger
from .field_record import FieldRecord, FIELD_NAMES

# Initialize module logger
logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldRule:
    """
    Pattern rule for one invoice field.

    Attributes:
        field_name: FieldRecord attribute the value is stored in.
        label: Literal label text as printed on the invoice.
        free_text: Capture the rest of the line instead of one token.
    """
    field_name: str
    label: str
    free_text: bool = False

    @property
    def pattern(self) -> Pattern:
        # Token values may sit on the line after the label. Free text stays
        # on the label's own line.
        if self.free_text:
            value = r':[ \t]*(.+)'
        else:
            value = r':\s*(\S+)'
        return re.compile(re.escape(self.label) + value)


FIELD_RULES: List[FieldRule] = [
    FieldRule('order_number', 'Order Number'),
    FieldRule('invoice_number', 'Invoice Number'),
    FieldRule('buyer_name', 'Buyer Name', free_text=True),
    FieldRule('buyer_address', 'Buyer Address', free_text=True),
    FieldRule('invoice_date', 'Invoice Date'),
    FieldRule('order_date', 'Order Date'),
    FieldRule('product_title', 'Product Title', free_text=True),
    FieldRule('hsn', 'HSN'),
    FieldRule('taxable_value', 'Taxable Value'),
    FieldRule('discount', 'Discount'),
    FieldRule('tax_rate_category', 'Tax Rate and Category', free_text=True),
]


class FieldExtractor:
    """
    Regex-based invoice field extractor.

    Extraction never fails: a document with none of the labels yields a
    FieldRecord with every field set to None.

    Attributes:
        rules: Field rules applied to the text.

    Example:
        >>> extractor = FieldExtractor()
        >>> record = extractor.extract("Order Number: OD12345\\nHSN: 6109")
        >>> record.order_number
        'OD12345'
    """

    def __init__(self, rules: Optional[List[FieldRule]] = None) -> None:
        self.rules = rules if rules is not None else FIELD_RULES
        self._patterns: Dict[str, Pattern] = {
            rule.field_name: rule.pattern for rule in self.rules
        }

    def extract(self, text: str) -> FieldRecord:
        """
        Extract all invoice fields from document text.

        Args:
            text: Full plain text of the document.

        Returns:
            FieldRecord with a value or None for every field.
        """
        values = {
            field_name: self.extract_field(field_name, text)
            for field_name in self._patterns
        }
        record = FieldRecord(**values)

        logger.info(
            f"Extraction complete: {len(record.extracted_fields)}/{len(FIELD_NAMES)} fields"
        )
        if record.missing_fields:
            logger.debug(f"Missing fields: {', '.join(record.missing_fields)}")

        return record

    def extract_field(self, field_name: str, text: str) -> Optional[str]:
        """
        Apply a single field rule to the text.

        Args:
            field_name: FieldRecord attribute name.
            text: Document text to search.

        Returns:
            Trimmed captured value, or None if the label is missing or
            the captured value is blank.
        """
        match = self._patterns[field_name].search(text or '')
        if not match:
            return None

        value = match.group(1).strip()
        return value or None
