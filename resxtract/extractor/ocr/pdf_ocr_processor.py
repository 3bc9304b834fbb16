"""
PDF OCR Processor

Handles OCR extraction from image-only PDFs: every page is rendered to an
image and recognized on its own worker thread, then the page texts are
joined back together in page order.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Any, Optional

from PIL import Image

from .tesseract import OCRPageRecognizer, TesseractEngine
from ...errors import OCRError
from ...utils.pdf_converter import PDFToImageConverter

logger = logging.getLogger(__name__)

MAX_DEFAULT_WORKERS = 32


class PdfOcrProcessor:
    """
    OCR processor that handles PDF files by converting them to images first.

    A page that fails to render or recognize contributes an empty string;
    the rest of the document is still returned.
    """

    def __init__(self, recognizer: Optional[OCRPageRecognizer] = None,
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize PDF OCR processor.

        Args:
            recognizer: Page recognizer (one is built from ``config['ocr']`` if omitted)
            config: Full configuration with ``pdf`` and ``ocr`` sections
        """
        config = config or {}
        pdf_config = config.get('pdf', {})
        ocr_config = config.get('ocr', {})

        self.recognizer = recognizer or OCRPageRecognizer(ocr_config)
        self.max_pages = pdf_config.get('max_pages', 1000)
        self.max_workers = ocr_config.get('max_workers')
        self.share_engine = ocr_config.get('share_engine', True)

        self.pdf_converter = PDFToImageConverter(scale=pdf_config.get('render_scale', 2.0))

        logger.info(f"PDF OCR processor initialized with {self.pdf_converter.scale}x rendering, "
                    f"share_engine={self.share_engine}")

    def extract_text_from_pdf(self, pdf_data: bytes) -> str:
        """
        Extract text from every page of a PDF using OCR.

        Args:
            pdf_data: PDF file bytes

        Returns:
            Page texts joined with newlines in page order, trimmed

        Raises:
            Exception: If the document cannot be opened at all
        """
        start_time = time.time()

        total_pages = self.pdf_converter.get_page_count(pdf_data)
        pages_to_process = min(total_pages, self.max_pages)
        if pages_to_process < total_pages:
            logger.warning(f"PDF has {total_pages} pages, OCR limited to the first {self.max_pages}")

        if pages_to_process == 0:
            logger.warning("PDF contains no pages")
            return ""

        # Shared engine must exist before any page is rendered
        engine = None
        if self.share_engine:
            try:
                engine = self.recognizer.create_engine()
            except OCRError as e:
                logger.error(f"Failed to create shared OCR engine, no page can be recognized: {e}")
                return ""

        try:
            logger.info(f"Starting OCR processing of {pages_to_process} pages...")
            page_images = self.pdf_converter.convert_pdf_to_images(pdf_data, (1, pages_to_process))

            workers = self.max_workers or min(MAX_DEFAULT_WORKERS, len(page_images))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="resxtract-ocr") as executor:
                futures = [
                    executor.submit(self._recognize_page, page_num, image, engine)
                    for page_num, image in page_images
                ]
                page_texts = [future.result() for future in futures]
        finally:
            if engine is not None:
                engine.terminate()

        text = "\n".join(page_texts).strip()
        successful_pages = sum(1 for page_text in page_texts if page_text)

        logger.info(f"PDF OCR extraction completed: {successful_pages}/{len(page_texts)} pages with text, "
                    f"{len(text)} chars, {time.time() - start_time:.2f}s")
        return text

    def _recognize_page(self, page_num: int, image: Optional[Image.Image],
                        engine: Optional[TesseractEngine]) -> str:
        """Recognize one page; failures resolve to an empty string."""
        if image is None:
            logger.warning(f"Page {page_num}: no rendered image, contributing empty text")
            return ""

        try:
            text = self.recognizer.recognize(image, engine)
            logger.debug(f"Page {page_num}: {len(text)} chars recognized")
            return text
        except Exception as e:
            logger.warning(f"Page {page_num}: OCR failed, contributing empty text: {e}")
            return ""
        finally:
            image.close()
