"""
ResXtract Scanned Text Extractor

Reads the embedded text layer of a PDF. No OCR is involved, so this is fast
and exact for digitally produced documents and empty for image-only scans.
"""

import logging
import time
from typing import List

import fitz  # PyMuPDF

logger = logging.getLogger(__name__)


class ScannedTextExtractor:
    """Extracts selectable text from PDF documents held in memory."""

    def extract_pages(self, pdf_data: bytes) -> List[str]:
        """
        Extract the raw text of every page.

        Args:
            pdf_data: PDF file bytes

        Returns:
            One string per page, in page order (empty for pages without text)
        """
        pages = []

        with fitz.open(stream=pdf_data, filetype="pdf") as doc:
            for page_num, page in enumerate(doc, start=1):
                text = page.get_text()
                pages.append(text)
                logger.debug(f"Page {page_num}: Extracted {len(text)} characters of raw text")

        return pages

    def extract_text_layer(self, pdf_data: bytes) -> str:
        """Concatenate all page texts with newline separators, trimmed."""
        start_time = time.time()
        pages = self.extract_pages(pdf_data)
        text = "\n".join(pages).strip()

        logger.info(f"Extracted {len(text)} characters of selectable text from {len(pages)} pages "
                    f"in {time.time() - start_time:.2f}s")
        return text
