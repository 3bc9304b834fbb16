"""
ResXtract Loaders Package

Format loaders that turn a SourceBlob into text segments.
"""

from .base import BaseLoader
from .docx import DocxLoader
from .html import HTMLLoader
from .text import TextLoader

__all__ = ['BaseLoader', 'DocxLoader', 'HTMLLoader', 'TextLoader']
