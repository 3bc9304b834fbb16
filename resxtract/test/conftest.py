"""
Pytest Configuration and Fixtures

Builds real PDF, DOCX and PNG documents in memory and replaces the Tesseract
binary with an in-process fake so no OCR installation is needed.
"""

import io
from typing import Callable, Dict, List, Optional

import fitz  # PyMuPDF
import pytest
import pytesseract
from docx import Document
from PIL import Image

from resxtract.config import load_config

# Page widths in points; rendered at 2x the images are 600, 800, 1000... px wide
PAGE_WIDTHS = [300, 400, 500, 600, 700]


def page_for_image(image: Image.Image) -> int:
    """Map a rendered page image back to its 1-based page number."""
    return round(image.width / 200) - 2


def make_pdf(pages: List[str]) -> bytes:
    """One page per entry; an empty string makes a page without a text layer."""
    doc = fitz.open()
    for i, text in enumerate(pages):
        page = doc.new_page(width=PAGE_WIDTHS[i], height=400)
        if text:
            page.insert_text((20, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


def make_docx(paragraphs: List[str], table: Optional[List[List[str]]] = None) -> bytes:
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    if table:
        docx_table = document.add_table(rows=len(table), cols=len(table[0]))
        for row, values in zip(docx_table.rows, table):
            for cell, value in zip(row.cells, values):
                cell.text = value
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def make_png(width: int = 200, height: int = 100, mode: str = "RGB") -> bytes:
    image = Image.new(mode, (width, height), "white")
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


class FakeTesseract:
    """Stands in for the tesseract binary behind pytesseract."""

    def __init__(self):
        self.languages = ["eng", "osd"]
        self.calls: List[Dict] = []
        self.recognizer: Callable[[Image.Image], str] = lambda image: "recognized text"
        self.available = True

    def get_tesseract_version(self):
        if not self.available:
            raise pytesseract.TesseractNotFoundError()
        return "5.3.0"

    def get_languages(self, config=''):
        return list(self.languages)

    def image_to_string(self, image, lang=None, config='', timeout=0, **kwargs):
        self.calls.append({"image_size": image.size, "mode": image.mode, "lang": lang, "config": config})
        return self.recognizer(image)


@pytest.fixture
def fake_tesseract(monkeypatch) -> FakeTesseract:
    fake = FakeTesseract()
    monkeypatch.setattr(pytesseract, "get_tesseract_version", fake.get_tesseract_version)
    monkeypatch.setattr(pytesseract, "get_languages", fake.get_languages)
    monkeypatch.setattr(pytesseract, "image_to_string", fake.image_to_string)
    return fake


@pytest.fixture
def config():
    return load_config(use_env=False)


@pytest.fixture
def scanned_pdf() -> bytes:
    """Two pages, no text layer."""
    return make_pdf(["", ""])


@pytest.fixture
def text_pdf() -> bytes:
    return make_pdf(["Jane Doe - Senior Software Engineer", "Experience: ten years of Python"])
