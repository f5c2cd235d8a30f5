"""
File Operations for Cleaner Service

This module handles all file interactions for the cleaner:
- Reading raw job postings from an ``Uncleaned_DS_jobs`` CSV export
- Writing cleaned records to a CSV file in output column order

The cleaning logic itself never touches files; these helpers are the loader
and writer the service runner plugs around it.
"""

import csv
import logging
import re
from collections.abc import Iterable, Sequence
from typing import Any, Optional

logger = logging.getLogger(__name__)


class FileOperationError(Exception):
    """Raised when reading or writing a CSV file fails."""
    pass


def to_column_name(header: str) -> str:
    """
    Map a CSV header to the snake_case column name used by the cleaner.

    Examples:
        >>> to_column_name("Job Title")
        'job_title'
        >>> to_column_name("Type of ownership")
        'type_of_ownership'
    """
    return re.sub(r'[^0-9a-z]+', '_', header.strip().lower()).strip('_')


def read_raw_jobs(path: str, limit: Optional[int] = None) -> list[dict[str, Any]]:
    """
    Read raw job postings from a CSV file.

    Args:
        path: Path to the raw CSV export
        limit: Maximum number of rows to read. If None, read all.

    Returns:
        List of dictionaries keyed by snake_case column name

    Raises:
        FileOperationError: If the file cannot be read or has no header
    """
    try:
        with open(path, newline='', encoding='utf-8') as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if not header:
                raise FileOperationError(f"CSV file has no header row: {path}")

            columns = [to_column_name(name) for name in header]
            rows = []
            for values in reader:
                if limit is not None and len(rows) >= limit:
                    break
                if not any(values):
                    continue
                rows.append(dict(zip(columns, values)))

    except OSError as e:
        logger.error(
            "Failed to read raw jobs",
            extra={'path': path, 'error': str(e)}
        )
        raise FileOperationError(f"Failed to read raw jobs: {e}") from e
    except csv.Error as e:
        logger.error(
            "Malformed CSV file",
            extra={'path': path, 'error': str(e)}
        )
        raise FileOperationError(f"Malformed CSV file {path}: {e}") from e

    logger.info(
        "Read raw job postings",
        extra={'count': len(rows), 'path': path, 'limit': limit}
    )
    return rows


def write_cleaned_jobs(
    path: str,
    records: Iterable[dict[str, Any]],
    columns: Sequence[str],
) -> int:
    """
    Write cleaned records to a CSV file, overwriting it if it exists.

    Skill flags are written as 1/0 and unknown values as empty cells.

    Args:
        path: Destination path
        records: Cleaned records
        columns: Column order of the output file

    Returns:
        Number of rows written

    Raises:
        FileOperationError: If the file cannot be written
    """
    written = 0
    try:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=list(columns), extrasaction='ignore')
            writer.writeheader()
            for record in records:
                writer.writerow({key: _to_cell(value) for key, value in record.items()})
                written += 1

    except OSError as e:
        logger.error(
            "Failed to write cleaned jobs",
            extra={'path': path, 'error': str(e)}
        )
        raise FileOperationError(f"Failed to write cleaned jobs: {e}") from e

    logger.info("Wrote cleaned job postings", extra={'count': written, 'path': path})
    return written


def _to_cell(value: Any) -> Any:
    if value is None:
        return ''
    if isinstance(value, bool):
        return int(value)
    return value
