"""
Keyword Classifiers for Job Postings

This module assigns each job posting to one label of a closed set using
ordered keyword rules. Rules are evaluated first-match-wins and every
classifier falls back to a default label, so classification never fails.

Keyword syntax mirrors the SQL ``LIKE`` patterns the rules were first written
as: ``_`` matches exactly one arbitrary character (``full_time`` matches
"full-time", "full time" and "full_time"), every other character is literal.

Classifiers:
- Location type: remote → hybrid → onsite → other
- Employment type: fulltime → parttime → contract → internship → freelance
  → temporary → consultant → other
- Job category: ordered-token rules on the normalized title
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

OTHER = 'other'

VALID_LOCATION_TYPES = {'remote', 'hybrid', 'onsite', OTHER}
VALID_EMPLOYMENT_TYPES = {
    'fulltime', 'parttime', 'contract', 'internship',
    'freelance', 'temporary', 'consultant', OTHER,
}
VALID_JOB_CATEGORIES = {
    'data scientist', 'data engineer', 'machine learning engineer',
    'machine learning scientist', 'BI analyst', 'data analyst',
    'data modeler', 'software engineer', 'director',
    'data science manager', 'manager', OTHER,
}


@lru_cache(maxsize=None)
def _compile(keywords: tuple[str, ...], case_sensitive: bool) -> re.Pattern:
    # Tokens must appear in order; anything may sit between them.
    pattern = '.*'.join(
        ''.join('.' if ch == '_' else re.escape(ch) for ch in keyword)
        for keyword in keywords
    )
    flags = re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE
    return re.compile(pattern, flags)


def contains_keyword(text: Optional[str], keyword: str, case_sensitive: bool = True) -> bool:
    """
    Check whether a keyword pattern occurs anywhere in text.

    Examples:
        >>> contains_keyword("full-time role", "full_time")
        True
        >>> contains_keyword("Power BI dashboards", "PowerBI")
        False
    """
    if not text or not keyword:
        return False
    return _compile((keyword,), case_sensitive).search(text) is not None


def contains_in_order(text: Optional[str], tokens: Sequence[str], case_sensitive: bool = True) -> bool:
    """
    Check whether all tokens occur in text, in order and without overlapping.

    Examples:
        >>> contains_in_order("sr data scientist", ("data", "scientist"))
        True
        >>> contains_in_order("scientist, data", ("data", "scientist"))
        False
    """
    if not text or not tokens:
        return False
    return _compile(tuple(tokens), case_sensitive).search(text) is not None


@dataclass(frozen=True)
class ClassificationRule:
    """
    One row of an ordered rule table.

    Args:
        label: Category assigned when the rule matches
        keywords: Keyword patterns checked against the text
        ordered: When False the rule matches if any keyword occurs; when True
            all keywords must occur in the given order

    Keywords match regardless of case.
    """

    label: str
    keywords: tuple[str, ...]
    ordered: bool = False

    def matches(self, text: Optional[str]) -> bool:
        if self.ordered:
            return contains_in_order(text, self.keywords, case_sensitive=False)
        return any(
            contains_keyword(text, keyword, case_sensitive=False)
            for keyword in self.keywords
        )


LOCATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule('remote', ('remote',)),
    ClassificationRule('hybrid', ('hybrid',)),
    ClassificationRule('onsite', ('on_site', 'onsite')),
)

EMPLOYMENT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule('fulltime', ('fulltime', 'full_time')),
    ClassificationRule('parttime', ('parttime', 'part_time')),
    ClassificationRule('contract', ('contract',)),
    ClassificationRule('internship', ('intern',)),
    ClassificationRule('freelance', ('freelancer', 'freelance')),
    ClassificationRule('temporary', ('temp',)),
    ClassificationRule('consultant', ('consultant', 'consulting')),
)

# Order matters: "data scientist" is checked before "data science manager"
# and "director" before the generic "manager".
JOB_CATEGORY_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule('data scientist', ('data', 'scientist'), ordered=True),
    ClassificationRule('data engineer', ('data', 'engineer'), ordered=True),
    ClassificationRule('machine learning engineer', ('machine', 'learning', 'engineer'), ordered=True),
    ClassificationRule('machine learning scientist', ('machine', 'learning', 'scientist'), ordered=True),
    ClassificationRule('BI analyst', ('business', 'intelligence', 'analyst'), ordered=True),
    ClassificationRule('data analyst', ('data', 'analyst'), ordered=True),
    ClassificationRule('data modeler', ('data', 'modeler'), ordered=True),
    ClassificationRule('software engineer', ('software', 'engineer'), ordered=True),
    ClassificationRule('director', ('director',), ordered=True),
    ClassificationRule('data science manager', ('data', 'science', 'manager'), ordered=True),
    ClassificationRule('manager', ('manager',), ordered=True),
)


def classify(
    texts: Iterable[Optional[str]],
    rules: Sequence[ClassificationRule],
    default: str = OTHER,
) -> str:
    """
    Return the label of the first rule matching any of the texts.

    Each text is checked independently; a rule matches when it matches at
    least one of them. Missing texts are ignored.

    Args:
        texts: Candidate texts (e.g. job title and job description)
        rules: Ordered rule table, evaluated first-match-wins
        default: Label returned when no rule matches

    Returns:
        Matching rule label or the default
    """
    candidates = [text for text in texts if text]
    for rule in rules:
        if any(rule.matches(text) for text in candidates):
            return rule.label
    return default


def classify_location(
    job_title: Optional[str],
    job_description: Optional[str],
    rules: Sequence[ClassificationRule] = LOCATION_RULES,
) -> str:
    """Classify a posting as remote, hybrid, onsite or other."""
    return classify(_lowered(job_title, job_description), rules)


def classify_employment_type(
    job_title: Optional[str],
    job_description: Optional[str],
    rules: Sequence[ClassificationRule] = EMPLOYMENT_RULES,
) -> str:
    """Classify the employment type of a posting, falling back to 'other'."""
    return classify(_lowered(job_title, job_description), rules)


def classify_job_category(
    normalized_title: Optional[str],
    rules: Sequence[ClassificationRule] = JOB_CATEGORY_RULES,
) -> str:
    """
    Classify a normalized title into a job category.

    Examples:
        >>> classify_job_category("sr data scientist")
        'data scientist'
        >>> classify_job_category("vp of data science")
        'other'
    """
    return classify(_lowered(normalized_title), rules)


def _lowered(*texts: Optional[str]) -> list[str]:
    return [str(text).lower() for text in texts if text]
