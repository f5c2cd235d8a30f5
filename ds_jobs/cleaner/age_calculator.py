"""
Company Founding Year and Age

Founding years use -1 as an "unknown" sentinel. Unknown years are modeled as
None so no arithmetic is ever done on the sentinel. The reference year is
passed in by the caller rather than read from the clock here.
"""

import math
from typing import Any, Optional

from .errors import UnparseableYearError

UNKNOWN_YEAR_SENTINEL = -1


def parse_founded(value: Any, current_year: int) -> Optional[int]:
    """
    Parse a raw founded value into a year.

    Examples:
        >>> parse_founded(1999, 2024)
        1999
        >>> parse_founded("-1", 2024) is None
        True

    Args:
        value: Raw founded value (int, float or numeric string)
        current_year: Latest acceptable year

    Returns:
        Founding year, or None when the value is the sentinel or missing

    Raises:
        UnparseableYearError: If the value is neither the sentinel nor a year
            between 1 and current_year
    """
    if value is None or isinstance(value, bool):
        return None

    year: Any = value
    if isinstance(year, str):
        if not year.strip():
            return None
        try:
            year = float(year.strip())
        except ValueError as e:
            raise UnparseableYearError(value, "founded is not a number") from e

    if isinstance(year, float):
        if math.isnan(year):
            return None
        if not year.is_integer():
            raise UnparseableYearError(value, "founded is not a whole year")
        year = int(year)

    if not isinstance(year, int):
        raise UnparseableYearError(value, f"unsupported type {type(value).__name__}")

    if year == UNKNOWN_YEAR_SENTINEL:
        return None

    if not 1 <= year <= current_year:
        raise UnparseableYearError(value, f"year outside 1..{current_year}")

    return year


def compute_company_age(founded: Optional[int], current_year: int) -> Optional[int]:
    """
    Compute company age in years.

    Examples:
        >>> compute_company_age(1999, 2024)
        25
        >>> compute_company_age(None, 2024) is None
        True
    """
    if founded is None:
        return None
    return current_year - founded
