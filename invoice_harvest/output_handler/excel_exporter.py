"""
Excel Exporter Module.

This module writes a consolidated Excel workbook for a pipeline run,
next to the per-document CSV files. Uses openpyxl.

Features:
    - Formatted headers
    - Auto-column width
    - One data row per successfully processed document
    - Run summary sheet with status and error of every document

Author: ML Engineering Team
"""

from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from config import get_config
from invoice_harvest.utils.logger import get_logger
from invoice_harvest.utils.helpers import ensure_directory
from invoice_harvest.utils.exceptions import ExcelExportError
from invoice_harvest.field_extraction.field_record import FIELD_SCHEMA
from invoice_harvest.pipeline.results import RunSummary

# Initialize module logger
logger = get_logger(__name__)


class ExcelExporter:
    """
    Exports the outcomes of a run to a single Excel workbook.

    Attributes:
        output_dir: Directory for the workbook.
        filename: Workbook filename.
        sheet_name: Title of the data sheet.

    Example:
        >>> exporter = ExcelExporter()
        >>> path = exporter.export(summary)
        >>> print(f"Saved to: {path}")
    """

    COLUMNS = [('Source', 'location')] + [(title, name) for name, _, title in FIELD_SCHEMA]

    SUMMARY_COLUMNS = [
        ('#', 'sequence_id'),
        ('Source', 'location'),
        ('Status', 'success'),
        ('CSV File', 'csv_path'),
        ('Error Type', 'error_type'),
        ('Error', 'error'),
    ]

    def __init__(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        filename: Optional[str] = None
    ) -> None:
        self.output_dir = Path(output_dir or get_config("paths.output_dir", "outputs"))
        self.filename = filename or get_config("output.excel.filename", "invoice_summary.xlsx")
        self.sheet_name = "Extracted Data"

        logger.debug(f"ExcelExporter initialized (output_dir: {self.output_dir})")

    def export(self, summary: RunSummary, filename: Optional[str] = None) -> Path:
        """
        Export a run summary to an Excel file.

        Args:
            summary: Outcomes of a pipeline run.
            filename: Output filename. If None, uses the configured name.

        Returns:
            Path to the created Excel file.

        Raises:
            ExcelExportError: If the workbook cannot be written.
        """
        filepath = self.output_dir / (filename or self.filename)

        try:
            ensure_directory(self.output_dir)

            workbook = Workbook()
            self._create_data_sheet(workbook, summary)
            self._create_summary_sheet(workbook, summary)
            workbook.save(filepath)

        except Exception as e:
            logger.error(f"Excel export failed: {e}")
            raise ExcelExportError(str(filepath), str(e)) from e

        logger.info(f"Excel file saved: {filepath} ({summary.succeeded} records)")
        return filepath

    def _create_data_sheet(self, workbook: Workbook, summary: RunSummary) -> None:
        """
        Create the main data sheet, one row per successful document.

        Args:
            workbook: openpyxl Workbook instance.
            summary: Run summary.
        """
        sheet = workbook.active
        sheet.title = self.sheet_name

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
        header_alignment = Alignment(horizontal="center", vertical="center")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        for col, (header_name, _) in enumerate(self.COLUMNS, 1):
            cell = sheet.cell(row=1, column=col, value=header_name)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = header_alignment
            cell.border = thin_border

        for row_num, outcome in enumerate(summary.successes, 2):
            row = outcome.record.to_row()
            row['location'] = outcome.location
            for col, (_, key) in enumerate(self.COLUMNS, 1):
                cell = sheet.cell(row=row_num, column=col, value=row.get(key, ''))
                cell.border = thin_border

        self._fit_columns(sheet, len(self.COLUMNS))
        sheet.freeze_panes = 'A2'

    def _create_summary_sheet(self, workbook: Workbook, summary: RunSummary) -> None:
        """
        Create a sheet listing every document with its status.

        Args:
            workbook: openpyxl Workbook instance.
            summary: Run summary.
        """
        sheet = workbook.create_sheet(title="Run Summary")

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="548235", end_color="548235", fill_type="solid")

        for col, (header_name, _) in enumerate(self.SUMMARY_COLUMNS, 1):
            cell = sheet.cell(row=1, column=col, value=header_name)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")

        for row_num, outcome in enumerate(summary.outcomes, 2):
            data = outcome.to_dict()
            for col, (_, key) in enumerate(self.SUMMARY_COLUMNS, 1):
                if key == 'success':
                    value = "OK" if outcome.success else "FAILED"
                else:
                    value = data.get(key)
                    value = '' if value is None else value
                sheet.cell(row=row_num, column=col, value=value)

        self._fit_columns(sheet, len(self.SUMMARY_COLUMNS))

    @staticmethod
    def _fit_columns(sheet, column_count: int) -> None:
        """Set each column width from its longest value, capped at 50."""
        for col in range(1, column_count + 1):
            max_length = 0
            for row in range(1, sheet.max_row + 1):
                cell_value = sheet.cell(row=row, column=col).value
                if cell_value is not None:
                    max_length = max(max_length, len(str(cell_value)))
            sheet.column_dimensions[get_column_letter(col)].width = min(max_length + 2, 50)
