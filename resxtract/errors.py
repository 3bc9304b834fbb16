"""
ResXtract Errors

Caller-facing failures raised by the extraction pipeline. Library-specific
exceptions are chained as ``__cause__`` and never raised directly.
"""

from typing import Optional


class ExtractionError(Exception):
    """Base class for every failure surfaced by ResXtract."""


class UnsupportedFileTypeError(ExtractionError):
    """Declared media type is outside the supported set."""

    def __init__(self, media_type: Optional[str] = None):
        super().__init__("Unsupported file type")
        self.media_type = media_type


class LoaderImportError(ExtractionError):
    """A parser library required for a format could not be imported."""

    def __init__(self, package: str):
        super().__init__(
            f"Failed to load {package}. Please install it with eg. `pip install {package}`."
        )
        self.package = package


class OCRError(ExtractionError):
    """OCR engine could not be initialized or recognition failed."""


class ConfigError(ExtractionError):
    """Configuration file could not be parsed."""
