"""
Pipeline Result Data Classes.

Value objects passed between the driver and its callers: the source
items of a run, the outcome of each item, and the run summary that
collects them.

Author: ML Engineering Team
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Dict, Any

from invoice_harvest.field_extraction.field_record import FieldRecord


@dataclass(frozen=True)
class SourceItem:
    """
    One remote document to process.

    Attributes:
        location: Remote URL of the document.
        sequence_id: 1-based position in the source list.
    """
    location: str
    sequence_id: int


@dataclass
class ItemOutcome:
    """
    Result of processing a single source item.

    Attributes:
        item: The source item.
        success: Whether every stage completed.
        document_path: Where the downloaded document was written.
        csv_path: Where the output row was written.
        record: Extracted fields (set once extraction ran).
        text: Extracted document text.
        error: Error message if processing failed.
        error_type: Exception class name if processing failed.
    """
    item: SourceItem
    success: bool = True
    document_path: Optional[Path] = None
    csv_path: Optional[Path] = None
    record: Optional[FieldRecord] = None
    text: Optional[str] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def location(self) -> str:
        return self.item.location

    @property
    def sequence_id(self) -> int:
        return self.item.sequence_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sequence_id': self.sequence_id,
            'location': self.location,
            'success': self.success,
            'document_path': str(self.document_path) if self.document_path else None,
            'csv_path': str(self.csv_path) if self.csv_path else None,
            'fields': self.record.to_dict() if self.record else None,
            'error': self.error,
            'error_type': self.error_type,
        }

    def __repr__(self) -> str:
        status = "ok" if self.success else f"failed: {self.error_type}"
        return f"ItemOutcome(#{self.sequence_id}, {status})"


@dataclass
class RunSummary:
    """
    Outcomes of a pipeline run, in source order.

    Example:
        >>> summary = driver.run()
        >>> print(f"{summary.succeeded}/{summary.total} documents written")
        >>> for outcome in summary.failures:
        ...     print(outcome.location, outcome.error)
    """
    outcomes: List[ItemOutcome] = field(default_factory=list)
    excel_path: Optional[Path] = None

    def add(self, outcome: ItemOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def successes(self) -> List[ItemOutcome]:
        return [o for o in self.outcomes if o.success]

    @property
    def failures(self) -> List[ItemOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def succeeded(self) -> int:
        return len(self.successes)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total': self.total,
            'succeeded': self.succeeded,
            'failed': self.failed,
            'excel_path': str(self.excel_path) if self.excel_path else None,
            'outcomes': [o.to_dict() for o in self.outcomes],
        }
