"""
ResXtract OCR Package

Tesseract engine lifecycle, single-image recognition and the concurrent
page OCR processor for image-only PDFs.
"""

from .tesseract import TesseractEngine, OCRPageRecognizer
from .pdf_ocr_processor import PdfOcrProcessor

__all__ = ['TesseractEngine', 'OCRPageRecognizer', 'PdfOcrProcessor']
