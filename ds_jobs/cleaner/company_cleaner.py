"""
Company Rating and Name Cleanup

Glassdoor exports use -1 as an "unknown" rating, and when a rating is present
they append it to the company name (e.g. "Acme Corp\n3.9"). This module
normalizes the rating and removes that suffix.
"""

import logging
import math
from typing import Any, Optional

logger = logging.getLogger(__name__)


def parse_rating(value: Any) -> Optional[float]:
    """
    Parse a raw rating, returning None when it is unknown.

    Negative values (the -1 sentinel), missing values and values that are not
    numbers are all treated as unknown.

    Args:
        value: Raw rating (number or numeric string)

    Returns:
        Non-negative rating or None
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            value = float(value)
        except ValueError:
            logger.warning("Failed to parse rating as number", extra={'value': value})
            return None

    if not isinstance(value, (int, float)) or math.isnan(value):
        return None

    return float(value) if value >= 0 else None


def clean_rating(value: Any) -> float:
    """
    Clean a raw rating so it is always non-negative.

    Examples:
        >>> clean_rating(3.9)
        3.9
        >>> clean_rating(-1)
        0.0
    """
    rating = parse_rating(value)
    return rating if rating is not None else 0.0


def strip_rating_suffix(company_name: Optional[str], rating: Any) -> Optional[str]:
    """
    Remove the rating Glassdoor appends to company names.

    The suffix is only present when the posting had a rating, so stripping
    is only attempted when the original rating is valid (non-negative). The
    name is split on its last whitespace run and the leading part is kept.
    Names without whitespace, and names of unrated companies, are returned
    unchanged.

    Examples:
        >>> strip_rating_suffix("Acme Corp\\n3.9", 3.9)
        'Acme Corp'
        >>> strip_rating_suffix("Acme Corp", -1)
        'Acme Corp'

    Args:
        company_name: Raw company name
        rating: Original (uncleaned) rating

    Returns:
        Company name without its rating suffix
    """
    if company_name is None or parse_rating(rating) is None:
        return company_name

    parts = str(company_name).rstrip().rsplit(None, 1)
    if len(parts) < 2:
        return company_name

    return parts[0].rstrip()
