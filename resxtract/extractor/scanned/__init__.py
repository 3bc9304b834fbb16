"""
ResXtract Scanned Text Package

Handles extraction of text from PDF documents that already contain selectable text.
"""

from .scan import ScannedTextExtractor

__all__ = ['ScannedTextExtractor']
