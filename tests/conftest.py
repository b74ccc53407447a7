import io
from pathlib import Path
from typing import Callable, Dict, List

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from config import ConfigurationManager
from invoice_harvest.utils.exceptions import NetworkError


def make_pdf(pages: List[List[str]]) -> bytes:
    """Render a PDF with one text line per entry, one list per page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


INVOICE_LINES = [
    "Tax Invoice",
    "Order Number: OD12345",
    "Invoice Number: INV987",
    "Buyer Name: Jane Doe",
    "Buyer Address: 12 Main St, Springfield",
    "Invoice Date: 05.01.2024",
    "Order Date: 03.01.2024",
    "Product Title: Cotton Kurti Blue",
    "HSN: 6109",
    "Taxable Value: 500.00",
    "Discount: 0.00",
    "Tax Rate and Category: 5.0% IGST",
]


@pytest.fixture(autouse=True)
def reset_config():
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture()
def invoice_pdf_bytes() -> bytes:
    return make_pdf([INVOICE_LINES])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return make_pdf([["Order Number: OD1"], ["Invoice Number: INV2"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    return make_pdf([[]])


class FakeFetcher:
    """Writes canned bytes per location instead of downloading."""

    def __init__(self, payloads: Dict[str, bytes]) -> None:
        self.payloads = payloads
        self.calls: List[str] = []

    def fetch(self, location: str, destination) -> Path:
        self.calls.append(location)
        if location not in self.payloads:
            raise NetworkError(location, "404 Client Error: Not Found", 404)
        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(self.payloads[location])
        return destination


@pytest.fixture()
def fake_fetcher_factory() -> Callable[[Dict[str, bytes]], FakeFetcher]:
    return FakeFetcher
