"""
ResXtract Package

Document text extraction for resume uploads: PDF, DOCX, plain text, HTML and
raster images, with Tesseract OCR fallback for scanned PDFs.
"""

from .errors import ExtractionError, UnsupportedFileTypeError, OCRError
from .manager.manager import TextExtractor
from .models import SourceBlob, ExtractedSegment, MediaType

__version__ = "1.0.0"
__all__ = [
    'TextExtractor',
    'SourceBlob',
    'ExtractedSegment',
    'MediaType',
    'ExtractionError',
    'UnsupportedFileTypeError',
    'OCRError'
]
