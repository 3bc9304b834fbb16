"""
DOCX Loader

Extracts raw text from a Word document package with python-docx. Body
paragraphs and table rows are read in document order; no layout is kept.
"""

import io
import logging
from typing import List

from .base import BaseLoader
from ..errors import LoaderImportError
from ..models import SourceBlob

logger = logging.getLogger(__name__)


def _docx_imports():
    try:
        import docx
        from docx.table import Table
    except ImportError as e:
        logger.error(f"python-docx import failed: {e}")
        raise LoaderImportError("python-docx") from e
    return docx, Table


class DocxLoader(BaseLoader):
    """
    Loads a .docx package as a single text unit.

    A document without any text produces no segments rather than an empty one.
    """

    def parse(self, blob: SourceBlob) -> List[str]:
        docx, Table = _docx_imports()
        document = docx.Document(io.BytesIO(blob.data))

        lines = []
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                lines.extend(self._table_rows(block))
            else:
                lines.append(block.text)

        text = "\n".join(lines)
        if not text.strip():
            logger.debug(f"DOCX {blob.origin} contains no text")
            return []

        return [text]

    def _table_rows(self, table) -> List[str]:
        """One tab-separated line per table row; merged cells appear once."""
        rows = []
        for row in table.rows:
            cells = []
            seen = set()
            for cell in row.cells:
                if id(cell._tc) in seen:
                    continue
                seen.add(id(cell._tc))
                cells.append(cell.text)
            rows.append("\t".join(cells))
        return rows
