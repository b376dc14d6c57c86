from pathlib import Path

import structlog
from pydantic import ValidationError

from pkgident.models.record import RawRecord

logger = structlog.get_logger('storage')


class InputFileError(ValueError):
    """A records file that cannot be used as input."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


def check_input_file(filepath: str | Path) -> Path:
    """
    Make sure a records file exists and is a regular file.

    Raises:
        InputFileError if it is missing or not a file
    """
    path = Path(filepath)
    if not path.exists():
        raise InputFileError(path, 'File does not exist')
    if not path.is_file():
        raise InputFileError(path, 'Not a file')
    return path


def load_records(filepath: str | Path) -> list[RawRecord]:
    """Loads extractor records from a JSONL file, skipping lines that don't validate."""
    path = Path(filepath)
    if not path.exists():
        return []

    records = []
    with path.open(encoding='utf-8') as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                records.append(RawRecord.model_validate_json(line))
            except ValidationError as e:
                logger.warning(
                    'Skipping invalid record',
                    path=str(path), line=lineno, errors=e.error_count(),
                )
    return records
