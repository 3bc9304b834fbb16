"""
Tesseract OCR Engine

Wraps pytesseract in an explicit engine instance with a create/terminate
lifecycle, and provides the page recognizer used for standalone images and
rasterized PDF pages.
"""

import io
import time
import logging
from typing import Dict, Any, Optional, Union

import pytesseract
from PIL import Image

from ...config import OCR_LANGUAGE
from ...errors import OCRError

logger = logging.getLogger(__name__)

ImageInput = Union[Image.Image, bytes]


class TesseractEngine:
    """
    Recognition context bound to the English language pack.

    Creating an instance verifies that the Tesseract binary and the ``eng``
    traineddata are available. Instances can be shared between threads;
    ``terminate`` releases the instance and further recognition fails.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the engine.

        Args:
            config: OCR configuration section (``psm``, ``timeout``)

        Raises:
            OCRError: If Tesseract or its English language data is unavailable
        """
        self.config = dict(config or {})
        self.config.setdefault('psm', '--psm 6')
        self.config.setdefault('timeout', 0)
        self.lang = OCR_LANGUAGE
        self._terminated = False

        try:
            self.version = pytesseract.get_tesseract_version()
            languages = pytesseract.get_languages(config='')
        except pytesseract.TesseractNotFoundError as e:
            raise OCRError("Tesseract is not installed or it's not in your PATH") from e
        except Exception as e:
            raise OCRError(f"Failed to initialize Tesseract: {e}") from e

        if self.lang not in languages:
            raise OCRError(f"Tesseract language data '{self.lang}' is not installed")

        logger.debug(f"Tesseract engine created (version {self.version}, lang={self.lang})")

    @property
    def terminated(self) -> bool:
        return self._terminated

    def recognize(self, image: ImageInput) -> str:
        """
        Run OCR on a single raster image.

        Args:
            image: PIL Image or encoded image bytes (PNG, JPEG)

        Returns:
            Raw recognized text (untrimmed)
        """
        if self._terminated:
            raise OCRError("OCR engine has been terminated")

        start_time = time.time()
        image = _prepare_image(image)

        text = pytesseract.image_to_string(
            image,
            lang=self.lang,
            config=self.config['psm'],
            timeout=self.config['timeout']
        )

        logger.debug(f"Tesseract recognized {len(text)} chars in {time.time() - start_time:.2f}s")
        return text

    def terminate(self):
        """Release the engine. Safe to call more than once."""
        if not self._terminated:
            self._terminated = True
            logger.debug("Tesseract engine terminated")

    def __enter__(self) -> "TesseractEngine":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.terminate()

    def __repr__(self) -> str:
        return f"TesseractEngine(lang={self.lang!r}, config={self.config}, terminated={self._terminated})"


def _prepare_image(image: ImageInput) -> Image.Image:
    """Decode bytes if needed and convert to a mode Tesseract accepts."""
    if isinstance(image, (bytes, bytearray)):
        image = Image.open(io.BytesIO(image))

    # Palette, CMYK and alpha images go through RGB
    if image.mode not in ('RGB', 'L'):
        image = image.convert('RGB')

    return image


class OCRPageRecognizer:
    """
    Recognizes text on one page image.

    When no engine is supplied, a fresh one is created for the call and
    terminated before returning, whatever the outcome. A supplied engine
    belongs to the caller and is left running.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    def create_engine(self) -> TesseractEngine:
        return TesseractEngine(self.config)

    def recognize(self, image: ImageInput, engine: Optional[TesseractEngine] = None) -> str:
        """
        Extract trimmed text from an image.

        Args:
            image: PIL Image or encoded image bytes
            engine: Optional caller-owned engine instance

        Returns:
            Recognized text with surrounding whitespace removed

        Raises:
            OCRError: If the engine cannot be created or recognition fails
        """
        owns_engine = engine is None

        try:
            if owns_engine:
                engine = self.create_engine()
            return engine.recognize(image).strip()

        except OCRError as e:
            logger.error(f"Tesseract OCR failed: {e}")
            raise
        except Exception as e:
            logger.error(f"Tesseract recognition failed: {e}")
            raise OCRError(f"OCR recognition failed: {e}") from e

        finally:
            if owns_engine and engine is not None:
                engine.terminate()
