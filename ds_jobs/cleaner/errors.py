"""
Record-level errors raised while cleaning a job posting.

These errors never escape a batch: the record transformer catches them per
record and reports them as field errors so the caller can skip, log, or
null-fill the affected record.
"""

from typing import Any


class CleaningError(Exception):
    """Raised when a single field of a job posting cannot be cleaned."""

    def __init__(self, field: str, raw_value: Any, message: str):
        super().__init__(f"{field}: {message} (raw value: {raw_value!r})")
        self.field = field
        self.raw_value = raw_value
        self.message = message


class MalformedSalaryError(CleaningError):
    """Raised when a salary estimate is missing its expected $/K delimiters."""

    def __init__(self, raw_value: Any, message: str):
        super().__init__('salary_estimate', raw_value, message)


class UnparseableYearError(CleaningError):
    """Raised when a founded value is neither the sentinel nor a valid year."""

    def __init__(self, raw_value: Any, message: str):
        super().__init__('founded', raw_value, message)
