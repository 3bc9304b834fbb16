"""
HTML Loader

Linearizes markup into readable plain text: tags are stripped, block-level
elements start new lines and runs of inline whitespace collapse to one space.
"""

import logging
import re
from typing import List

from .base import BaseLoader
from ..errors import LoaderImportError
from ..models import SourceBlob

logger = logging.getLogger(__name__)

BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3",
    "h4", "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p", "pre",
    "section", "table", "tr", "ul",
]

# Elements whose content is never readable text
SKIPPED_TAGS = ["script", "style", "noscript", "template", "head"]

_INLINE_WHITESPACE = re.compile(r"[ \t\f\v\r\u00a0]+")


def _bs4_imports():
    try:
        from bs4 import BeautifulSoup
    except ImportError as e:
        logger.error(f"beautifulsoup4 import failed: {e}")
        raise LoaderImportError("beautifulsoup4") from e
    return BeautifulSoup


class HTMLLoader(BaseLoader):
    """Loads an HTML document as a single linearized text unit."""

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def parse(self, blob: SourceBlob) -> List[str]:
        return [self.html_to_text(blob.text())]

    def html_to_text(self, html: str) -> str:
        """Convert markup to plain text with one line per block element."""
        BeautifulSoup = _bs4_imports()
        soup = BeautifulSoup(html, self.parser)

        for tag in soup.find_all(SKIPPED_TAGS):
            tag.extract()

        for br in soup.find_all("br"):
            br.replace_with("\n")

        for tag in soup.find_all(BLOCK_TAGS):
            tag.insert_before("\n")
            tag.insert_after("\n")

        for cell in soup.find_all(["td", "th"]):
            cell.insert_after(" ")

        lines = []
        for line in soup.get_text().split("\n"):
            line = _INLINE_WHITESPACE.sub(" ", line).strip()
            if line:
                lines.append(line)

        return "\n".join(lines)
