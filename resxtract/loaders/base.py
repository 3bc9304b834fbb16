"""
Base interface for format loaders.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import SourceBlob, ExtractedSegment


class BaseLoader(ABC):
    """
    Converts a SourceBlob into text segments.

    Subclasses implement ``parse`` and return the text units in document
    order; ``load`` validates them and attaches metadata. Loaders hold no
    state between calls.
    """

    @abstractmethod
    def parse(self, blob: SourceBlob) -> List[str]:
        """Split the blob into text units, in document order."""
        ...

    def load(self, blob: SourceBlob) -> List[ExtractedSegment]:
        """
        Parse the blob and wrap each non-empty unit in an ExtractedSegment.

        Metadata always carries ``source`` and ``media_type``; ``page_index``
        (1-based) is added only when more than one segment is produced.

        Raises:
            TypeError: If ``parse`` yields a unit that is not a string
        """
        parsed = self.parse(blob)

        for i, unit in enumerate(parsed):
            if not isinstance(unit, str):
                raise TypeError(f"Expected string, at position {i} got {type(unit).__name__}")

        units = [unit for unit in parsed if unit != ""]
        metadata = {"source": blob.origin, "media_type": blob.media_type}

        if len(units) == 1:
            return [ExtractedSegment(content=units[0], metadata=dict(metadata))]

        return [
            ExtractedSegment(content=unit, metadata={**metadata, "page_index": i})
            for i, unit in enumerate(units, start=1)
        ]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
