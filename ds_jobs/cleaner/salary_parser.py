"""
Salary Estimate Parsing

Glassdoor salary estimates look like ``"$75K-$120K (Glassdoor est.)"``. The
trailing annotation varies in length, so figures are located by searching for
their ``$`` and ``K`` delimiters rather than by fixed offsets.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .errors import MalformedSalaryError

logger = logging.getLogger(__name__)

THOUSANDS = 1000


@dataclass(frozen=True)
class SalaryRange:
    """Parsed salary estimate, in dollars."""

    min_salary: int
    max_salary: int

    @property
    def salary_range(self) -> str:
        """Readable range in thousands, e.g. '75-120'."""
        return f"{self.min_salary // THOUSANDS}-{self.max_salary // THOUSANDS}"


def parse_salary_estimate(salary_estimate: Any) -> SalaryRange:
    """
    Parse a Glassdoor salary estimate into a numeric range.

    The minimum is read between the first '$' and the first 'K' after it; the
    maximum between the next '$' and the next 'K' after that.

    Examples:
        >>> parse_salary_estimate("$75K-$120K (Glassdoor est.)")
        SalaryRange(min_salary=75000, max_salary=120000)
        >>> parse_salary_estimate("$75K-$120K (Glassdoor est.)").salary_range
        '75-120'

    Args:
        salary_estimate: Raw salary estimate string

    Returns:
        SalaryRange with min/max in dollars

    Raises:
        MalformedSalaryError: If delimiters are missing or out of order, or a
            figure is not an integer
    """
    if not isinstance(salary_estimate, str) or not salary_estimate.strip():
        raise MalformedSalaryError(salary_estimate, "salary estimate must be a non-empty string")

    min_start = salary_estimate.find('$')
    min_end = salary_estimate.find('K', min_start + 1) if min_start != -1 else -1
    max_start = salary_estimate.find('$', min_end + 1) if min_end != -1 else -1
    max_end = salary_estimate.find('K', max_start + 1) if max_start != -1 else -1

    if -1 in (min_start, min_end, max_start, max_end):
        raise MalformedSalaryError(
            salary_estimate, "expected '$<min>K-$<max>K' delimiters"
        )

    min_thousands = _parse_thousands(salary_estimate, salary_estimate[min_start + 1:min_end])
    max_thousands = _parse_thousands(salary_estimate, salary_estimate[max_start + 1:max_end])

    if min_thousands > max_thousands:
        logger.warning(
            "Salary minimum above maximum, swapping values",
            extra={
                'salary_estimate': salary_estimate,
                'min_thousands': min_thousands,
                'max_thousands': max_thousands,
            }
        )
        min_thousands, max_thousands = max_thousands, min_thousands

    return SalaryRange(
        min_salary=min_thousands * THOUSANDS,
        max_salary=max_thousands * THOUSANDS,
    )


def _parse_thousands(salary_estimate: str, figure: str) -> int:
    cleaned = figure.strip()
    if not (cleaned.isascii() and cleaned.isdigit()):
        raise MalformedSalaryError(
            salary_estimate, f"salary figure {figure!r} is not an integer"
        )
    return int(cleaned)
