"""ResXtract utilities."""

from .pdf_converter import PDFToImageConverter

__all__ = ['PDFToImageConverter']
