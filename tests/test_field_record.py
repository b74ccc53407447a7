from invoice_harvest.field_extraction.field_record import (
    FieldRecord,
    FIELD_NAMES,
    FIELD_TITLES,
)


class TestDefaults:
    def test_all_absent_row_is_eleven_empty_strings(self) -> None:
        row = FieldRecord().to_row()
        assert list(row.keys()) == FIELD_NAMES
        assert list(row.values()) == [""] * 11

    def test_to_row_keeps_values(self) -> None:
        row = FieldRecord(order_number="OD1", hsn="6109").to_row()
        assert row["order_number"] == "OD1"
        assert row["hsn"] == "6109"
        assert row["discount"] == ""


class TestFieldsHelpers:
    def test_titles_match_output_header(self) -> None:
        assert FIELD_TITLES == [
            "Order Number",
            "Invoice Number",
            "Buyer Name",
            "Buyer Address",
            "Invoice Date",
            "Order Date",
            "Product Title",
            "HSN",
            "Taxable Value",
            "Discount",
            "Tax Rate and Category",
        ]

    def test_extraction_rate(self) -> None:
        record = FieldRecord(order_number="OD1")
        assert round(record.extraction_rate, 2) == round(100 / 11, 2)
        assert FieldRecord().extraction_rate == 0

    def test_missing_fields(self) -> None:
        record = FieldRecord(**{name: "x" for name in FIELD_NAMES if name != "hsn"})
        assert record.missing_fields == ["hsn"]


class TestFromDict:
    def test_accepts_output_ids(self) -> None:
        record = FieldRecord.from_dict({"orderNumber": "OD1", "taxRateCategory": "5%"})
        assert record.order_number == "OD1"
        assert record.tax_rate_category == "5%"

    def test_accepts_attribute_names_and_ignores_unknown(self) -> None:
        record = FieldRecord.from_dict({"buyer_name": "Jane", "unknown": 1})
        assert record.buyer_name == "Jane"

    def test_to_json_contains_output_ids(self) -> None:
        assert '"invoiceNumber": "INV1"' in FieldRecord(invoice_number="INV1").to_json()
