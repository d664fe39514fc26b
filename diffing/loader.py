"""
Loading of mapping documents from disk.

Documents are JSON files whose top level is an object. Key order in the
file is preserved, since it decides the order of the reported differences.
"""

import json
from pathlib import Path
import structlog

logger = structlog.get_logger()


class DocumentError(ValueError):
    """Raised when a document cannot be read as a mapping."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def load_document(path: Path, encoding: str = "utf-8") -> dict:
    """
    Load a JSON object from a file.

    Args:
        path: Path to the JSON document
        encoding: Text encoding of the file

    Returns:
        The decoded object as a dict

    Raises:
        DocumentError: If the file is missing, is not valid JSON, or its
            top level is not an object
    """
    path = Path(path)

    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise DocumentError(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(path, f"cannot read file ({e})") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentError(path, f"invalid JSON at line {e.lineno} column {e.colno}") from e

    if not isinstance(document, dict):
        raise DocumentError(path, f"expected a JSON object, got {type(document).__name__}")

    logger.debug("Document loaded", path=str(path), keys=len(document))

    return document
