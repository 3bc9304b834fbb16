"""
ResXtract command line.

Usage:
    python -m resxtract resume.pdf
    python -m resxtract upload.bin --type application/pdf --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import ExtractionError
from .manager.manager import TextExtractor


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="resxtract", description="Extract plain text from a document.")
    parser.add_argument("file", type=Path, help="Document to extract (PDF, DOCX, PNG, JPEG, TXT, HTML)")
    parser.add_argument("--type", dest="media_type", help="Declared MIME type (guessed from the file name if omitted)")
    parser.add_argument("--config", type=Path, help="JSON configuration file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if not args.file.exists():
        print(f"File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        extractor = TextExtractor(config_path=args.config)
        text = extractor.extract_file(args.file, args.media_type)
    except ExtractionError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
