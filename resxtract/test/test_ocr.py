"""
Tesseract engine lifecycle and page recognizer tests.
"""

import pytest
import pytesseract
from PIL import Image

from resxtract.errors import OCRError
from resxtract.extractor.ocr.tesseract import OCRPageRecognizer, TesseractEngine

from conftest import make_png


class TrackingRecognizer(OCRPageRecognizer):
    """Records every engine it creates."""

    def __init__(self, config=None):
        super().__init__(config)
        self.created = []

    def create_engine(self):
        engine = super().create_engine()
        self.created.append(engine)
        return engine


class TestTesseractEngine:

    def test_uses_english_and_configured_psm(self, fake_tesseract):
        engine = TesseractEngine({"psm": "--psm 4"})

        engine.recognize(Image.new("RGB", (50, 20), "white"))

        assert fake_tesseract.calls[0]["lang"] == "eng"
        assert fake_tesseract.calls[0]["config"] == "--psm 4"

    def test_missing_binary_raises_ocr_error(self, fake_tesseract):
        fake_tesseract.available = False

        with pytest.raises(OCRError, match="not installed"):
            TesseractEngine()

    def test_missing_language_data_raises_ocr_error(self, fake_tesseract):
        fake_tesseract.languages = ["deu"]

        with pytest.raises(OCRError, match="'eng'"):
            TesseractEngine()

    def test_recognize_after_terminate_fails(self, fake_tesseract):
        engine = TesseractEngine()
        engine.terminate()
        engine.terminate()

        assert engine.terminated
        with pytest.raises(OCRError, match="terminated"):
            engine.recognize(Image.new("RGB", (10, 10)))

    def test_context_manager_terminates(self, fake_tesseract):
        with TesseractEngine() as engine:
            assert not engine.terminated
        assert engine.terminated

    def test_accepts_encoded_bytes_and_converts_mode(self, fake_tesseract):
        engine = TesseractEngine()

        engine.recognize(make_png(mode="RGBA"))
        engine.recognize(make_png(mode="L"))

        assert [call["mode"] for call in fake_tesseract.calls] == ["RGB", "L"]


class TestOCRPageRecognizer:

    def test_returns_trimmed_text(self, fake_tesseract):
        fake_tesseract.recognizer = lambda image: "\n  Jane Doe\nEngineer \n\f"

        text = OCRPageRecognizer().recognize(make_png())

        assert text == "Jane Doe\nEngineer"

    def test_creates_and_terminates_own_engine(self, fake_tesseract):
        recognizer = TrackingRecognizer()

        recognizer.recognize(make_png())

        assert len(recognizer.created) == 1
        assert recognizer.created[0].terminated

    def test_terminates_own_engine_when_recognition_fails(self, fake_tesseract):
        def explode(image):
            raise pytesseract.TesseractError(1, "bad image")

        fake_tesseract.recognizer = explode
        recognizer = TrackingRecognizer()

        with pytest.raises(OCRError) as exc_info:
            recognizer.recognize(make_png())

        assert isinstance(exc_info.value.__cause__, pytesseract.TesseractError)
        assert recognizer.created[0].terminated

    def test_leaves_supplied_engine_running(self, fake_tesseract):
        recognizer = TrackingRecognizer()
        engine = TesseractEngine()

        recognizer.recognize(make_png(), engine)
        recognizer.recognize(make_png(), engine)

        assert recognizer.created == []
        assert not engine.terminated

    def test_leaves_supplied_engine_running_on_failure(self, fake_tesseract):
        fake_tesseract.recognizer = lambda image: 1 / 0
        engine = TesseractEngine()

        with pytest.raises(OCRError):
            OCRPageRecognizer().recognize(make_png(), engine)

        assert not engine.terminated

    def test_engine_initialization_failure_is_an_ocr_error(self, fake_tesseract):
        fake_tesseract.available = False

        with pytest.raises(OCRError):
            OCRPageRecognizer().recognize(make_png())

    def test_undecodable_image_is_an_ocr_error(self, fake_tesseract):
        with pytest.raises(OCRError):
            OCRPageRecognizer().recognize(b"definitely not an image")
