"""Plain text loader."""

from typing import List

from .base import BaseLoader
from ..models import SourceBlob


class TextLoader(BaseLoader):
    """Treats the whole blob as a single UTF-8 text unit, untrimmed."""

    def parse(self, blob: SourceBlob) -> List[str]:
        return [blob.text()]
