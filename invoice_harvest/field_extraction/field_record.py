"""
Field Record Data Class.

This module defines the data structure for the fields extracted from a
single invoice, in the fixed column order used by every output.

Author: ML Engineering Team
"""

from dataclasses import dataclass, fields as dataclass_fields
from typing import Dict, Any, Optional, List
import json


# (attribute name, output id, column title), in output column order
FIELD_SCHEMA = [
    ('order_number', 'orderNumber', 'Order Number'),
    ('invoice_number', 'invoiceNumber', 'Invoice Number'),
    ('buyer_name', 'buyerName', 'Buyer Name'),
    ('buyer_address', 'buyerAddress', 'Buyer Address'),
    ('invoice_date', 'invoiceDate', 'Invoice Date'),
    ('order_date', 'orderDate', 'Order Date'),
    ('product_title', 'productTitle', 'Product Title'),
    ('hsn', 'hsn', 'HSN'),
    ('taxable_value', 'taxableValue', 'Taxable Value'),
    ('discount', 'discount', 'Discount'),
    ('tax_rate_category', 'taxRateCategory', 'Tax Rate and Category'),
]

FIELD_NAMES = [name for name, _, _ in FIELD_SCHEMA]
FIELD_TITLES = [title for _, _, title in FIELD_SCHEMA]


@dataclass
class FieldRecord:
    """
    The eleven invoice fields extracted from one document.

    Every attribute is either the extracted string or None when the
    field was not found.

    Example:
        >>> record = FieldRecord(order_number="OD12345", buyer_name="Jane Doe")
        >>> record.to_row()["buyer_address"]
        ''
    """
    order_number: Optional[str] = None
    invoice_number: Optional[str] = None
    buyer_name: Optional[str] = None
    buyer_address: Optional[str] = None
    invoice_date: Optional[str] = None
    order_date: Optional[str] = None
    product_title: Optional[str] = None
    hsn: Optional[str] = None
    taxable_value: Optional[str] = None
    discount: Optional[str] = None
    tax_rate_category: Optional[str] = None

    @property
    def fields(self) -> Dict[str, Optional[str]]:
        """
        Get all eleven fields as an ordered dictionary.

        Returns:
            Dictionary of field names to values (None when absent).
        """
        return {f.name: getattr(self, f.name) for f in dataclass_fields(self)}

    @property
    def missing_fields(self) -> List[str]:
        """Names of fields that were not extracted."""
        return [k for k, v in self.fields.items() if v is None]

    @property
    def extracted_fields(self) -> Dict[str, str]:
        """Only the fields that have values."""
        return {k: v for k, v in self.fields.items() if v is not None}

    @property
    def extraction_rate(self) -> float:
        """
        Calculate the percentage of fields successfully extracted.

        Returns:
            Extraction rate as a percentage (0-100).
        """
        total = len(FIELD_NAMES)
        return (len(self.extracted_fields) / total) * 100

    def to_row(self) -> Dict[str, str]:
        """
        Convert to a row mapping with absent fields replaced by "".

        Returns:
            Ordered dictionary holding all eleven field names.
        """
        return {k: (v if v is not None else '') for k, v in self.fields.items()}

    def to_dict(self) -> Dict[str, Optional[str]]:
        """
        Convert to a dictionary keyed by the output field ids
        (orderNumber, invoiceNumber, ...).
        """
        return {
            field_id: getattr(self, name)
            for name, field_id, _ in FIELD_SCHEMA
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FieldRecord':
        """
        Create a FieldRecord from a dictionary.

        Accepts either attribute names or output field ids as keys.
        Unknown keys are ignored.
        """
        values = {}
        for name, field_id, _ in FIELD_SCHEMA:
            if field_id in data:
                values[name] = data[field_id]
            elif name in data:
                values[name] = data[name]
        return cls(**values)

    def __repr__(self) -> str:
        return (
            f"FieldRecord("
            f"order={self.order_number}, "
            f"invoice={self.invoice_number}, "
            f"rate={self.extraction_rate:.0f}%)"
        )
