"""
CSV Writer Module.

Writes the fields extracted from one invoice to a CSV file holding a
fixed header row and exactly one data row.

Author: ML Engineering Team
"""

import csv
from pathlib import Path
from typing import Mapping, Optional, Union

from config import get_config
from invoice_harvest.utils.logger import get_logger
from invoice_harvest.utils.helpers import ensure_directory
from invoice_harvest.utils.exceptions import StorageError
from invoice_harvest.field_extraction.field_record import FIELD_SCHEMA

# Initialize module logger
logger = get_logger(__name__)


class CSVWriter:
    """
    Writes one invoice row per CSV file.

    Values containing the delimiter, a line break or the quote character
    are quoted, with embedded quotes doubled.

    Attributes:
        delimiter: Field delimiter character.

    Example:
        >>> writer = CSVWriter()
        >>> writer.write("outputs/output_file_1.csv", record.to_row())
    """

    # (attribute name, column title), in output column order
    COLUMNS = [(name, title) for name, _, title in FIELD_SCHEMA]

    def __init__(self, delimiter: Optional[str] = None) -> None:
        self.delimiter = delimiter or get_config("output.csv.delimiter", ",")

    @property
    def header(self):
        return [title for _, title in self.COLUMNS]

    def write(self, filepath: Union[str, Path], row: Mapping[str, str]) -> Path:
        """
        Write the header and a single data row, replacing any existing file.

        Args:
            filepath: Output CSV path.
            row: Mapping of field names to values. Missing keys and None
                 values are written as empty strings.

        Returns:
            Path of the written file.

        Raises:
            StorageError: If the file cannot be created or written.
        """
        filepath = Path(filepath)
        values = [
            row.get(name) if row.get(name) is not None else ''
            for name, _ in self.COLUMNS
        ]

        try:
            ensure_directory(filepath.parent)
            with open(filepath, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(
                    f,
                    delimiter=self.delimiter,
                    quoting=csv.QUOTE_MINIMAL,
                    lineterminator='\n'
                )
                writer.writerow(self.header)
                writer.writerow(values)
        except OSError as e:
            raise StorageError(str(filepath), str(e)) from e

        logger.debug(f"CSV written: {filepath}")
        return filepath
