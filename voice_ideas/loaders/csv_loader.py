"""
CSV loader for voice entries.

Reads exported diary entries into VoiceEntry models. Row-level problems
degrade to field defaults; only file-level problems raise.
"""

import csv
import io
from pathlib import Path
from typing import Optional, Union

from voice_ideas.models.entry import VoiceEntry
from voice_ideas.utils.config import get_settings
from voice_ideas.utils.exceptions import ConfigurationError, IngestionError
from voice_ideas.utils.logger import get_contextual_logger, get_logger

logger = get_logger(__name__)


def _clean_cell(value: Optional[str]) -> Optional[str]:
    """Strip a cell, mapping empty cells to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _resolve_limit(limit: Optional[int]) -> int:
    if limit is None:
        return get_settings().ingestion.max_entries
    if limit < 1:
        raise ConfigurationError(
            "Entry limit must be at least 1",
            invalid_keys={"limit": str(limit)},
        )
    return limit


def _is_blank(row: list[str]) -> bool:
    return not any(cell.strip() for cell in row)


def parse_voice_entries(
    csv_text: str,
    limit: Optional[int] = None,
) -> list[VoiceEntry]:
    """
    Parse CSV text into voice entries.

    The first non-blank row is the header. Rows whose cells are all blank
    are skipped. Quoted cells keep their embedded line breaks as written.

    Args:
        csv_text: Raw CSV content
        limit: Maximum number of data rows to read. Defaults to config.

    Returns:
        List of VoiceEntry objects in file order

    Raises:
        IngestionError: If the text has no header row
        ConfigurationError: If limit is smaller than 1
    """
    max_rows = _resolve_limit(limit)

    reader = csv.reader(io.StringIO(csv_text, newline=""))
    rows = (row for row in reader if not _is_blank(row))
    header_row = next(rows, None)
    if header_row is None:
        raise IngestionError("CSV content has no header row")
    headers = [h.lstrip("\ufeff").strip() for h in header_row]

    entries: list[VoiceEntry] = []
    for row in rows:
        if len(entries) >= max_rows:
            break
        cleaned = {
            header: _clean_cell(row[index] if index < len(row) else None)
            for index, header in enumerate(headers)
            if header
        }
        entries.append(VoiceEntry.model_validate(cleaned))

    logger.debug("Parsed %d entries (limit %d)", len(entries), max_rows)
    return entries


def load_voice_entries(
    path: Optional[Union[str, Path]] = None,
    limit: Optional[int] = None,
) -> list[VoiceEntry]:
    """
    Load voice entries from a CSV file.

    Args:
        path: CSV file to read. Defaults to the configured entries path.
        limit: Maximum number of data rows to read. Defaults to config.

    Returns:
        List of VoiceEntry objects in file order

    Raises:
        IngestionError: If the file cannot be read or has no header row
    """
    csv_path = Path(path) if path is not None else get_settings().ingestion.csv_path
    log = get_contextual_logger("loader", path=str(csv_path))

    try:
        with csv_path.open(encoding="utf-8-sig", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        log.error("Failed to read entries file: %s", e)
        raise IngestionError(
            "Failed to read voice entries file",
            path=csv_path,
            cause=e,
        ) from e

    try:
        entries = parse_voice_entries(content, limit=limit)
    except IngestionError as e:
        raise IngestionError(e.message, path=csv_path, cause=e.cause) from e

    log.info("Loaded %d voice entries", len(entries))
    return entries
