"""
Configuration loading tests.
"""

import json
import os

import pytest

from resxtract.config import DEFAULT_CONFIG, OCR_LANGUAGE, load_config
from resxtract.errors import ConfigError


def test_defaults():
    config = load_config(use_env=False)

    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG
    assert config["pdf"]["min_text_length"] == 10
    assert config["pdf"]["render_scale"] == 2.0
    assert OCR_LANGUAGE == "eng"


def test_json_file_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"pdf": {"max_pages": 5}, "ocr": {"share_engine": False}}))

    config = load_config(path, use_env=False)

    assert config["pdf"]["max_pages"] == 5
    assert config["pdf"]["min_text_length"] == 10
    assert config["ocr"]["share_engine"] is False


def test_missing_file_uses_defaults(tmp_path):
    assert load_config(tmp_path / "absent.json", use_env=False) == DEFAULT_CONFIG


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError):
        load_config(path, use_env=False)


@pytest.mark.parametrize("content", ["[]", "[1, 2]", "\"pdf\"", "null"])
def test_non_object_file_raises(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)

    with pytest.raises(ConfigError, match="expected a JSON object"):
        load_config(path, use_env=False)


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RESXTRACT_PDF_MIN_TEXT_LENGTH", "25")
    monkeypatch.setenv("RESXTRACT_OCR_MAX_WORKERS", "4")
    monkeypatch.setenv("RESXTRACT_OCR_SHARE_ENGINE", "no")
    monkeypatch.setenv("RESXTRACT_OCR_PSM", "--psm 3")

    config = load_config(env_file=str(tmp_path / "missing.env"))

    assert config["pdf"]["min_text_length"] == 25
    assert config["ocr"]["max_workers"] == 4
    assert config["ocr"]["share_engine"] is False
    assert config["ocr"]["psm"] == "--psm 3"


def test_invalid_environment_values_are_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("RESXTRACT_PDF_RENDER_SCALE", "huge")
    monkeypatch.setenv("RESXTRACT_OCR_SHARE_ENGINE", "maybe")

    config = load_config(env_file=str(tmp_path / "missing.env"))

    assert config["pdf"]["render_scale"] == 2.0
    assert config["ocr"]["share_engine"] is True


def test_dotenv_file_is_loaded(monkeypatch, tmp_path):
    monkeypatch.setattr(os, "environ", os.environ.copy())
    os.environ.pop("RESXTRACT_PDF_MAX_PAGES", None)
    env_file = tmp_path / ".env"
    env_file.write_text("RESXTRACT_PDF_MAX_PAGES=12\n")

    config = load_config(env_file=str(env_file))

    assert config["pdf"]["max_pages"] == 12
