"""
ResXtract Text Extractor

Public entry point of the extraction pipeline. Routes an uploaded file to the
loader or strategy for its declared media type and returns one trimmed
string. Lower-level failures are logged and re-raised as a stable,
format-scoped ExtractionError.
"""

import logging
import time
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from ..config import load_config
from ..errors import ExtractionError, UnsupportedFileTypeError
from ..extractor.extraction_routing import PdfExtractionStrategy
from ..extractor.ocr.pdf_ocr_processor import PdfOcrProcessor
from ..extractor.ocr.tesseract import OCRPageRecognizer
from ..loaders import BaseLoader, DocxLoader, HTMLLoader, TextLoader
from ..models import MediaType, SourceBlob

logger = logging.getLogger(__name__)

FAILURE_MESSAGES = {
    MediaType.PDF: "Unable to extract text from PDF",
    MediaType.DOCX: "Unable to extract text from DOCX file",
    MediaType.PNG: "Unable to extract text from image",
    MediaType.JPEG: "Unable to extract text from image",
    MediaType.JPG: "Unable to extract text from image",
    MediaType.TEXT: "Unable to read text file",
    MediaType.HTML: "Unable to extract text from HTML file",
}


class TextExtractor:
    """
    Format dispatcher for uploaded documents.

    Supported types: PDF (text layer with OCR fallback), DOCX, PNG/JPEG
    images (OCR), plain text and HTML.
    """

    def __init__(self, config_path: Optional[Path] = None,
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize the text extractor.

        Args:
            config_path: Optional JSON configuration file
            config: Ready configuration dict; takes precedence over ``config_path``
        """
        self.config = config if config is not None else load_config(config_path)

        self.recognizer = OCRPageRecognizer(self.config.get('ocr', {}))
        self.pdf_strategy = PdfExtractionStrategy(
            self.config,
            ocr_processor=PdfOcrProcessor(self.recognizer, self.config)
        )
        self.text_loader = TextLoader()
        self.html_loader = HTMLLoader()
        self.docx_loader = DocxLoader()

        logger.info("Text Extractor initialized")

    @staticmethod
    def supported_media_types() -> List[str]:
        return [media_type.value for media_type in MediaType]

    def extract_text(self, blob: SourceBlob) -> str:
        """
        Extract plain text from an uploaded file.

        Args:
            blob: File bytes with their declared media type

        Returns:
            Extracted text, trimmed (possibly empty)

        Raises:
            UnsupportedFileTypeError: If the declared type is not supported
            ExtractionError: If extraction fails, with a format-scoped message
        """
        try:
            media_type = MediaType.from_mime(blob.media_type)
        except UnsupportedFileTypeError:
            logger.error(f"Unsupported file type for {blob.origin}: {blob.media_type!r}")
            raise

        start_time = time.time()
        logger.info(f"Extracting text from {blob.origin} ({media_type.value}, {len(blob)} bytes)")

        try:
            text = self._dispatch(media_type, blob)
        except UnsupportedFileTypeError:
            raise
        except Exception as e:
            logger.error(f"Error extracting {media_type.name} text from {blob.origin}: {e}")
            raise ExtractionError(FAILURE_MESSAGES[media_type]) from e

        logger.info(f"Extracted {len(text)} chars from {blob.origin} in {time.time() - start_time:.2f}s")
        return text

    def extract_file(self, path: Union[str, Path], media_type: Optional[str] = None) -> str:
        """Read a local file and extract its text; the type is guessed from the name if omitted."""
        return self.extract_text(SourceBlob.from_path(path, media_type))

    def _dispatch(self, media_type: MediaType, blob: SourceBlob) -> str:
        if media_type is MediaType.PDF:
            return self.pdf_strategy.extract_text(blob.data)
        elif media_type is MediaType.DOCX:
            return self._load_text(self.docx_loader, blob)
        elif media_type.is_image:
            return self.recognizer.recognize(blob.data)
        elif media_type is MediaType.TEXT:
            return self._load_text(self.text_loader, blob)
        elif media_type is MediaType.HTML:
            return self._load_text(self.html_loader, blob)
        else:
            raise UnsupportedFileTypeError(blob.media_type)

    def _load_text(self, loader: BaseLoader, blob: SourceBlob) -> str:
        segments = loader.load(blob)
        logger.debug(f"{loader!r} produced {len(segments)} segment(s)")
        return "\n".join(segment.content for segment in segments).strip()
