"""
ResXtract PDF Extraction Routing

Decides between the embedded text layer and OCR for a PDF. The text layer
is tried first; when it yields too little text the document is treated as
a scan and every page goes through OCR.
"""

import logging
from typing import Dict, Any, Optional

from .ocr.pdf_ocr_processor import PdfOcrProcessor
from .scanned.scan import ScannedTextExtractor

logger = logging.getLogger(__name__)


class PdfExtractionStrategy:
    """
    Two-tier PDF text extraction.

    1. Read the selectable text layer of all pages.
    2. If the trimmed result is longer than ``pdf.min_text_length``
       characters, return it. Otherwise fall back to page-by-page OCR.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 scanned_extractor: Optional[ScannedTextExtractor] = None,
                 ocr_processor: Optional[PdfOcrProcessor] = None):
        """
        Initialize the strategy.

        Args:
            config: Full configuration with ``pdf`` and ``ocr`` sections
            scanned_extractor: Text layer extractor
            ocr_processor: OCR fallback processor
        """
        self.config = config or {}
        self.min_text_length = self.config.get('pdf', {}).get('min_text_length', 10)

        self.scanned_extractor = scanned_extractor or ScannedTextExtractor()
        self.ocr_processor = ocr_processor or PdfOcrProcessor(config=self.config)

        logger.info(f"PDF extraction strategy initialized (min_text_length={self.min_text_length})")

    def passes_quality_gate(self, text: str) -> bool:
        """True when the text layer carries enough characters to skip OCR."""
        return len(text.strip()) > self.min_text_length

    def extract_text(self, pdf_data: bytes) -> str:
        """
        Extract text from a PDF.

        Args:
            pdf_data: PDF file bytes

        Returns:
            Trimmed document text from the text layer or from OCR
        """
        text = self.scanned_extractor.extract_text_layer(pdf_data)

        if self.passes_quality_gate(text):
            logger.info(f"Using selectable text layer ({len(text)} chars)")
            return text

        logger.warning(f"PDF text extraction yielded minimal results ({len(text)} chars), "
                       f"falling back to OCR...")
        return self.ocr_processor.extract_text_from_pdf(pdf_data)
