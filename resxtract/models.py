"""
ResXtract Data Model

Immutable upload blobs, loader segments and the set of supported media types.
"""

import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional, Union

from .errors import UnsupportedFileTypeError


DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class MediaType(Enum):
    """Supported declared media types, one member per accepted MIME string."""

    PDF = "application/pdf"
    DOCX = DOCX_MIME
    PNG = "image/png"
    JPEG = "image/jpeg"
    JPG = "image/jpg"
    TEXT = "text/plain"
    HTML = "text/html"

    @classmethod
    def from_mime(cls, mime: Optional[str]) -> "MediaType":
        """
        Resolve a declared MIME string to a supported media type.

        Parameters such as ``; charset=utf-8`` are ignored and matching is
        case-insensitive.

        Raises:
            UnsupportedFileTypeError: If the type is not in the supported set
        """
        normalized = normalize_mime(mime)
        for member in cls:
            if member.value == normalized:
                return member
        raise UnsupportedFileTypeError(mime)

    @property
    def is_image(self) -> bool:
        return self in (MediaType.PNG, MediaType.JPEG, MediaType.JPG)


def normalize_mime(mime: Optional[str]) -> str:
    """Strip parameters and whitespace from a MIME string and lowercase it."""
    if not mime:
        return ""
    return mime.split(";", 1)[0].strip().lower()


@dataclass(frozen=True)
class SourceBlob:
    """
    Raw bytes of one uploaded file plus its declared media type.

    Attributes:
        data: File content
        media_type: Declared MIME string, as supplied by the uploader
        origin: Opaque tag copied into segment metadata as ``source``
    """

    data: bytes
    media_type: str
    origin: str = "blob"

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str, origin: str = "blob") -> "SourceBlob":
        return cls(data=bytes(data), media_type=media_type, origin=origin)

    @classmethod
    def from_path(cls, path: Union[str, Path], media_type: Optional[str] = None) -> "SourceBlob":
        """
        Read a local file into a blob.

        Args:
            path: File to read
            media_type: Declared type; guessed from the file name when omitted

        Returns:
            SourceBlob tagged with the file name as origin
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        if media_type is None:
            media_type, _ = mimetypes.guess_type(path.name)

        return cls(data=path.read_bytes(), media_type=media_type or "", origin=path.name)

    def text(self) -> str:
        """Decode as UTF-8, dropping a BOM and replacing invalid sequences."""
        return self.data.decode("utf-8-sig", errors="replace")

    def __len__(self) -> int:
        return len(self.data)


@dataclass
class ExtractedSegment:
    """One unit of loader output: text content plus positional metadata."""

    content: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def page_index(self) -> Optional[int]:
        return self.metadata.get("page_index")
