import csv
from pathlib import Path

import pytest

from invoice_harvest.field_extraction.field_record import FieldRecord, FIELD_TITLES
from invoice_harvest.output_handler.csv_writer import CSVWriter
from invoice_harvest.utils.exceptions import StorageError


def _read_rows(path: Path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


class TestWrite:
    def test_writes_header_and_one_row(self, tmp_path: Path) -> None:
        path = tmp_path / "output_file_1.csv"
        record = FieldRecord(
            order_number="OD12345",
            invoice_number="INV987",
            buyer_name="Jane Doe",
            taxable_value="500.00",
        )

        CSVWriter(delimiter=",").write(path, record.to_row())

        rows = _read_rows(path)
        assert rows == [
            FIELD_TITLES,
            ["OD12345", "INV987", "Jane Doe", "", "", "", "", "", "500.00", "", ""],
        ]

    def test_header_line_text(self, tmp_path: Path) -> None:
        path = CSVWriter(delimiter=",").write(tmp_path / "out.csv", FieldRecord().to_row())
        first_line = path.read_text(encoding="utf-8").splitlines()[0]
        assert first_line == (
            "Order Number,Invoice Number,Buyer Name,Buyer Address,Invoice Date,"
            "Order Date,Product Title,HSN,Taxable Value,Discount,Tax Rate and Category"
        )

    def test_all_empty_row(self, tmp_path: Path) -> None:
        path = CSVWriter(delimiter=",").write(tmp_path / "out.csv", FieldRecord().to_row())
        assert _read_rows(path)[1] == [""] * 11

    def test_missing_and_none_values_written_empty(self, tmp_path: Path) -> None:
        path = CSVWriter(delimiter=",").write(
            tmp_path / "out.csv", {"order_number": "OD1", "hsn": None}
        )
        assert _read_rows(path)[1] == ["OD1"] + [""] * 10

    def test_header_order_independent_of_absent_fields(self, tmp_path: Path) -> None:
        writer = CSVWriter(delimiter=",")
        a = writer.write(tmp_path / "a.csv", FieldRecord(hsn="1").to_row())
        b = writer.write(tmp_path / "b.csv", FieldRecord(discount="2").to_row())
        assert _read_rows(a)[0] == _read_rows(b)[0] == FIELD_TITLES

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.csv"
        writer = CSVWriter(delimiter=",")
        writer.write(path, FieldRecord(order_number="OLD").to_row())
        writer.write(path, FieldRecord(order_number="NEW").to_row())

        rows = _read_rows(path)
        assert len(rows) == 2
        assert rows[1][0] == "NEW"

    def test_creates_missing_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "out.csv"
        CSVWriter(delimiter=",").write(path, FieldRecord().to_row())
        assert path.exists()


class TestEscaping:
    def test_value_with_comma_is_quoted(self, tmp_path: Path) -> None:
        record = FieldRecord(buyer_address="12 Main St, Springfield")
        path = CSVWriter(delimiter=",").write(tmp_path / "out.csv", record.to_row())

        assert '"12 Main St, Springfield"' in path.read_text(encoding="utf-8")
        row = _read_rows(path)[1]
        assert len(row) == 11
        assert row[3] == "12 Main St, Springfield"

    def test_value_with_quote_and_newline(self, tmp_path: Path) -> None:
        record = FieldRecord(product_title='Shirt "XL"\nBlue')
        path = CSVWriter(delimiter=",").write(tmp_path / "out.csv", record.to_row())

        assert '"Shirt ""XL""\nBlue"' in path.read_text(encoding="utf-8")
        assert _read_rows(path)[1][6] == 'Shirt "XL"\nBlue'


class TestErrors:
    def test_unwritable_path_raises_storage_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(StorageError):
            CSVWriter(delimiter=",").write(blocker / "out.csv", FieldRecord().to_row())
