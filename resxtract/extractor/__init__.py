"""
ResXtract Extractor Package

PDF text extraction with OCR fallback, and the Tesseract page recognizer.
"""

from .extraction_routing import PdfExtractionStrategy
from .ocr.tesseract import OCRPageRecognizer, TesseractEngine
from .ocr.pdf_ocr_processor import PdfOcrProcessor
from .scanned.scan import ScannedTextExtractor

__all__ = [
    'PdfExtractionStrategy',
    'OCRPageRecognizer',
    'TesseractEngine',
    'PdfOcrProcessor',
    'ScannedTextExtractor'
]
