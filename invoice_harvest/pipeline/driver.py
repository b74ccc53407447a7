"""
Pipeline Driver Module.

This module provides the PipelineDriver class that runs every source
document through the pipeline, one after the other:

    download → text extraction → field extraction → CSV output

A failure in any stage is recorded in the item's outcome and the driver
moves on to the next item. The run itself never aborts.

Usage:
    from invoice_harvest.pipeline import PipelineDriver

    driver = PipelineDriver()
    summary = driver.run()
    print(f"{summary.succeeded} succeeded, {summary.failed} failed")

Author: ML Engineering Team
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from config import get_config
from invoice_harvest.utils.logger import get_logger
from invoice_harvest.utils.helpers import format_sequence_path
from invoice_harvest.utils.exceptions import InvoiceHarvestError
from invoice_harvest.input_handler.fetcher import Fetcher
from invoice_harvest.input_handler.pdf_processor import PDFProcessor
from invoice_harvest.field_extraction.extractor import FieldExtractor
from invoice_harvest.output_handler.csv_writer import CSVWriter
from .results import SourceItem, ItemOutcome, RunSummary

# Initialize module logger
logger = get_logger(__name__)


class PipelineDriver:
    """
    Sequential driver for the invoice harvest pipeline.

    All collaborators can be injected; anything not given is built from
    configuration.

    Attributes:
        sources: Default list of source locations.
        download_dir: Directory downloaded documents are written to.
        output_dir: Directory CSV files are written to.
        download_pattern: Filename pattern for downloaded documents.
        output_pattern: Filename pattern for CSV files.
        show_text: Log extracted text at INFO (DEBUG when False).

    Example:
        >>> driver = PipelineDriver(sources=["https://example.com/a.pdf"])
        >>> summary = driver.run()
        >>> summary.outcomes[0].csv_path
        PosixPath('.../outputs/output_file_1.csv')
    """

    def __init__(
        self,
        sources: Optional[List[str]] = None,
        fetcher: Optional[Fetcher] = None,
        text_extractor: Optional[PDFProcessor] = None,
        field_extractor: Optional[FieldExtractor] = None,
        writer: Optional[CSVWriter] = None,
        download_dir: Optional[Union[str, Path]] = None,
        output_dir: Optional[Union[str, Path]] = None,
        download_pattern: Optional[str] = None,
        output_pattern: Optional[str] = None,
        show_text: Optional[bool] = None
    ) -> None:
        self.sources = list(sources) if sources is not None else list(get_config("sources", []))

        self.fetcher = fetcher or Fetcher()
        self.text_extractor = text_extractor or PDFProcessor()
        self.field_extractor = field_extractor or FieldExtractor()
        self.writer = writer or CSVWriter()

        self.download_dir = Path(download_dir or get_config("paths.download_dir", "downloads"))
        self.output_dir = Path(output_dir or get_config("paths.output_dir", "outputs"))
        self.download_pattern = download_pattern or get_config(
            "paths.download_pattern", "file_{sequence_id}.pdf"
        )
        self.output_pattern = output_pattern or get_config(
            "paths.output_pattern", "output_file_{sequence_id}.csv"
        )
        self.show_text = show_text if show_text is not None else \
            get_config("logging.show_text", True)

        logger.debug(
            f"PipelineDriver initialized "
            f"(sources={len(self.sources)}, output_dir={self.output_dir})"
        )

    @staticmethod
    def build_items(locations: Iterable[str]) -> List[SourceItem]:
        """
        Assign 1-based sequence ids to source locations, keeping order.

        Args:
            locations: Remote document URLs.

        Returns:
            List of SourceItem objects.
        """
        return [
            SourceItem(location=location, sequence_id=index)
            for index, location in enumerate(locations, 1)
        ]

    def document_path(self, item: SourceItem) -> Path:
        return format_sequence_path(self.download_dir, self.download_pattern, item.sequence_id)

    def output_path(self, item: SourceItem) -> Path:
        return format_sequence_path(self.output_dir, self.output_pattern, item.sequence_id)

    def run(self, locations: Optional[Iterable[str]] = None) -> RunSummary:
        """
        Process every source location in order.

        Args:
            locations: Source URLs. Defaults to the configured sources.

        Returns:
            RunSummary with one outcome per location.
        """
        items = self.build_items(self.sources if locations is None else locations)
        summary = RunSummary()

        logger.info(f"Processing {len(items)} source document(s)...")

        for item in items:
            logger.info(f"Processing document {item.sequence_id}/{len(items)}")
            summary.add(self.process_item(item))

        logger.info(
            f"Run complete: {summary.succeeded} succeeded, {summary.failed} failed"
        )
        return summary

    def process_item(self, item: SourceItem) -> ItemOutcome:
        """
        Run one source item through every pipeline stage.

        Errors from any stage are caught here and recorded on the
        returned outcome.

        Args:
            item: Source item to process.

        Returns:
            ItemOutcome describing success or failure.
        """
        outcome = ItemOutcome(item=item)

        try:
            outcome.document_path = self.fetcher.fetch(item.location, self.document_path(item))

            outcome.text = self.text_extractor.extract_text(outcome.document_path)
            text_level = logging.INFO if self.show_text else logging.DEBUG
            logger.log(text_level, f"PDF Content:\n{outcome.text}")

            outcome.record = self.field_extractor.extract(outcome.text)

            outcome.csv_path = self.writer.write(
                self.output_path(item),
                outcome.record.to_row()
            )
            logger.info(f"Data from {item.location} written to {outcome.csv_path}")

        except InvoiceHarvestError as e:
            self._mark_failed(outcome, e)
            logger.error(f"Error processing {item.location}: {e}")

        except Exception as e:
            self._mark_failed(outcome, e)
            logger.exception(f"Unexpected error processing {item.location}: {e}")

        return outcome

    @staticmethod
    def _mark_failed(outcome: ItemOutcome, error: Exception) -> None:
        outcome.success = False
        outcome.error = str(error)
        outcome.error_type = type(error).__name__
