"""
Seniority Flag Extraction

Flags a job posting as senior when its title carries a seniority token.

The check runs against the normalized title (see ``title_normalizer``), the
same string the rest of the cleaner sees. Because normalization already maps
"senior" to "sr", a "senior" title is always caught through its "sr" token.
"""

from collections.abc import Sequence

SENIOR = 'senior'
NOT_APPLICABLE = 'n/a'

# Valid seniority values (closed set, n/a is the fallback)
VALID_SENIORITY_LEVELS = {SENIOR, NOT_APPLICABLE}

DEFAULT_SENIORITY_KEYWORDS: tuple[str, ...] = ('sr', 'senior')


def extract_seniority(
    normalized_title: str,
    keywords: Sequence[str] = DEFAULT_SENIORITY_KEYWORDS,
) -> str:
    """
    Extract the seniority flag from a normalized job title.

    Examples:
        >>> extract_seniority("sr data engineer")
        'senior'
        >>> extract_seniority("data analyst")
        'n/a'

    Args:
        normalized_title: Title produced by ``normalize_title``
        keywords: Substrings that mark a senior position

    Returns:
        'senior' or 'n/a'
    """
    if not normalized_title:
        return NOT_APPLICABLE

    title_lower = normalized_title.lower()
    if any(keyword.lower() in title_lower for keyword in keywords):
        return SENIOR

    return NOT_APPLICABLE
