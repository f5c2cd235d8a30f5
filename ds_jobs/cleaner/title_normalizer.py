"""
Job Title Normalization

This module collapses the many ways Glassdoor postings spell seniority into a
single short token so titles can be grouped and classified reliably.

Key Concepts:
- Case folding: "Senior Data Scientist" → "sr data scientist"
- Ordered substitutions: "(sr.)" and "sr." are reduced before plain
  "senior" so periods are never processed twice
- Fixed point: substitutions repeat until the title stops changing, so
  normalizing an already-normalized title changes nothing
"""

from typing import Optional

# Applied in order; later rules see the output of earlier ones.
TITLE_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ('(sr.)', 'sr'),
    ('sr.', 'sr'),
    ('jr.', 'jr'),
    ('senior', 'sr'),
    ('junior', 'jr'),
)


def normalize_title(job_title: Optional[str]) -> str:
    """
    Normalize a raw job title.

    The title is lowercased and trimmed, then every occurrence of each
    seniority variant is replaced with its short form.

    Examples:
        >>> normalize_title("  Senior Data Scientist ")
        'sr data scientist'
        >>> normalize_title("Data Engineer (Sr.)")
        'data engineer sr'
        >>> normalize_title("Jr. Analyst")
        'jr analyst'

    Args:
        job_title: Raw job title, possibly mixed case and padded

    Returns:
        Normalized title, or empty string if input is None
    """
    if not job_title:
        return ""

    normalized = str(job_title).strip().lower()

    # Repeat until stable: "senior." becomes "sr." on the first pass.
    # Every substitution shortens the title, so this terminates.
    previous = None
    while normalized != previous:
        previous = normalized
        for variant, replacement in TITLE_SUBSTITUTIONS:
            normalized = normalized.replace(variant, replacement)

    return normalized
