"""
PDF to Image Conversion Utility

Renders PDF pages to raster images for OCR processing.
"""

import io
import logging
import time
from typing import List, Tuple, Optional

import fitz  # PyMuPDF
from PIL import Image

logger = logging.getLogger(__name__)


class PDFToImageConverter:
    """Render PDF pages held in memory to PIL images."""

    def __init__(self, scale: float = 2.0, image_format: str = 'PNG'):
        """
        Initialize the PDF converter.

        Args:
            scale: Upscale factor over the page's nominal 72 DPI size
                   (higher = better OCR accuracy, more memory)
            image_format: Intermediate encoding for rendered pages
        """
        self.scale = scale
        self.image_format = image_format
        logger.debug(f"PDF to Image converter initialized: {scale}x scale, {image_format} format")

    def get_page_count(self, pdf_data: bytes) -> int:
        with fitz.open(stream=pdf_data, filetype="pdf") as doc:
            return len(doc)

    def convert_pdf_to_images(self, pdf_data: bytes,
                              page_range: Optional[Tuple[int, int]] = None
                              ) -> List[Tuple[int, Optional[Image.Image]]]:
        """
        Render PDF pages to images.

        Args:
            pdf_data: PDF file bytes
            page_range: Optional (start_page, end_page), 1-based and inclusive

        Returns:
            List of (page_number, image) in page order. Pages that fail to
            render are kept with ``None`` so callers can preserve numbering.

        Raises:
            Exception: If the document itself cannot be opened
        """
        start_time = time.time()

        with fitz.open(stream=pdf_data, filetype="pdf") as doc:
            total_pages = len(doc)

            if page_range:
                start_page, end_page = page_range
                start_page = max(1, start_page)
                end_page = min(total_pages, end_page)
            else:
                start_page, end_page = 1, total_pages

            matrix = fitz.Matrix(self.scale, self.scale)
            page_images = []

            for page_num in range(start_page, end_page + 1):
                try:
                    pix = doc[page_num - 1].get_pixmap(matrix=matrix)

                    img_data = pix.tobytes(self.image_format.lower())
                    img = Image.open(io.BytesIO(img_data))
                    img.load()

                    page_images.append((page_num, img))
                    logger.debug(f"Page {page_num} rendered at {img.width}x{img.height}")

                except Exception as e:
                    logger.error(f"Failed to render page {page_num}: {e}")
                    page_images.append((page_num, None))

        logger.info(f"Rendered {len(page_images)} pages to images in {time.time() - start_time:.2f}s")
        return page_images
