"""
ResXtract Manager Package

Format dispatcher for uploaded documents.
"""

from .manager import TextExtractor

__all__ = ['TextExtractor']
