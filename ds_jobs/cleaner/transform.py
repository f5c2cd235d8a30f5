"""
Job Posting Cleaning Logic

This module transforms one raw row of the ``Uncleaned_DS_jobs`` table into a
cleaned, feature-enriched record. Records are independent: no state is shared
between them and the input row is never modified, so batches can be split
and processed in any order.

Key Responsibilities:
- Normalize the job title and derive seniority and job category from it
- Classify location type and employment type from title and description
- Parse the salary estimate into a range and numeric bounds
- Clean rating and company name, derive founded year and company age
- Flag tracked technologies mentioned in the description

Field failures (malformed salary, unparseable founded year) are reported on
the record's result instead of being raised, so one bad row never stops a
batch. The caller decides whether to skip, null-fill or abort.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from .age_calculator import compute_company_age, parse_founded
from .classifiers import classify_employment_type, classify_job_category, classify_location
from .company_cleaner import clean_rating, strip_rating_suffix
from .config_loader import CleanerConfig
from .errors import CleaningError
from .salary_parser import parse_salary_estimate
from .seniority_extractor import extract_seniority
from .skills_detector import SkillsDetector
from .title_normalizer import normalize_title

logger = logging.getLogger(__name__)


PASSTHROUGH_FIELDS = (
    'location',
    'headquarters',
    'size',
    'type_of_ownership',
    'industry',
    'sector',
    'revenue',
    'competitors',
)

# Fields left empty when the salary estimate cannot be parsed
SALARY_FIELDS = ('salary_range', 'min_salary', 'max_salary')
# Fields left empty when the founded year cannot be parsed
FOUNDED_FIELDS = ('founded', 'company_age')


@dataclass(frozen=True)
class FieldError:
    """Context needed to diagnose one failed field of one record."""

    record_id: Any
    field: str
    raw_value: Any
    message: str


@dataclass
class TransformResult:
    """Outcome of cleaning a single record."""

    record_id: Any
    record: dict[str, Any]
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def output_columns(config: Optional[CleanerConfig] = None) -> list[str]:
    """
    Column order of cleaned records.

    Args:
        config: Cleaner configuration (defines the skill columns)

    Returns:
        List of output column names
    """
    config = config or CleanerConfig()
    return [
        'job_title',
        'location_type',
        'employment_type',
        *SALARY_FIELDS,
        'job_description',
        'rating',
        'company_name',
        'location',
        'headquarters',
        'size',
        *FOUNDED_FIELDS,
        'type_of_ownership',
        'industry',
        'sector',
        'revenue',
        'competitors',
        *config.skills.names,
        'seniority',
        'job_category',
    ]


def transform_record(
    raw_data: Mapping[str, Any],
    config: Optional[CleanerConfig] = None,
    record_id: Any = None,
    current_year: Optional[int] = None,
) -> TransformResult:
    """
    Clean a single raw job posting.

    Args:
        raw_data: One row of the raw table (snake_case column names)
        config: Cleaner configuration; defaults are used when omitted
        record_id: Identifier reported with field errors. Defaults to the
            row's ``index`` column when present.
        current_year: Reference year for company_age. Defaults to the
            configured year, or the current year.

    Returns:
        TransformResult holding the cleaned record and any field errors.
        Fields that could not be derived are None.

    Examples:
        >>> result = transform_record({
        ...     'job_title': 'Senior Data Scientist',
        ...     'salary_estimate': '$75K-$120K (Glassdoor est.)',
        ...     'rating': 3.9,
        ...     'company_name': 'Acme Corp\\n3.9',
        ...     'founded': 1999,
        ... }, current_year=2024)
        >>> result.record['job_category'], result.record['company_age']
        ('data scientist', 25)
    """
    config = config or CleanerConfig()
    if current_year is None:
        current_year = config.resolve_current_year()
    if record_id is None:
        record_id = raw_data.get('index')

    errors: list[FieldError] = []

    raw_title = raw_data.get('job_title')
    description = raw_data.get('job_description')
    job_title = normalize_title(raw_title)

    # Salary
    salary_values: dict[str, Any] = dict.fromkeys(SALARY_FIELDS)
    try:
        salary = parse_salary_estimate(raw_data.get('salary_estimate'))
        salary_values = {
            'salary_range': salary.salary_range,
            'min_salary': salary.min_salary,
            'max_salary': salary.max_salary,
        }
    except CleaningError as e:
        errors.append(_field_error(record_id, e))

    # Founded year and company age
    founded_values: dict[str, Any] = dict.fromkeys(FOUNDED_FIELDS)
    try:
        founded = parse_founded(raw_data.get('founded'), current_year)
        founded_values = {
            'founded': founded,
            'company_age': compute_company_age(founded, current_year),
        }
    except CleaningError as e:
        errors.append(_field_error(record_id, e))

    raw_rating = raw_data.get('rating')
    detector = SkillsDetector(config.skills, case_sensitive=config.case_sensitive_skills)

    record: dict[str, Any] = {
        'job_title': job_title,
        'location_type': classify_location(raw_title, description, config.location_rules),
        'employment_type': classify_employment_type(raw_title, description, config.employment_rules),
        **salary_values,
        'job_description': description,
        'rating': clean_rating(raw_rating),
        'company_name': strip_rating_suffix(raw_data.get('company_name'), raw_rating),
        'location': raw_data.get('location'),
        'headquarters': raw_data.get('headquarters'),
        'size': raw_data.get('size'),
        **founded_values,
        'type_of_ownership': raw_data.get('type_of_ownership'),
        'industry': raw_data.get('industry'),
        'sector': raw_data.get('sector'),
        'revenue': raw_data.get('revenue'),
        'competitors': raw_data.get('competitors'),
        **detector.detect(description),
        'seniority': extract_seniority(job_title, config.seniority_keywords),
        'job_category': classify_job_category(job_title, config.job_category_rules),
    }

    if errors:
        logger.debug(
            "Cleaned job posting with field errors",
            extra={
                'record_id': record_id,
                'fields': [error.field for error in errors],
            }
        )

    return TransformResult(record_id=record_id, record=record, errors=errors)


def transform_records(
    records: Iterable[Mapping[str, Any]],
    config: Optional[CleanerConfig] = None,
) -> Iterator[TransformResult]:
    """
    Clean a batch of raw job postings, one result per input record.

    The reference year is resolved once for the whole batch. Any unexpected
    error while cleaning a record is reported on that record's result and
    processing continues with the next one.

    Args:
        records: Iterable of raw rows
        config: Cleaner configuration

    Yields:
        TransformResult for each input record, in input order
    """
    config = config or CleanerConfig()
    current_year = config.resolve_current_year()

    for position, raw_data in enumerate(records):
        record_id = raw_data.get('index') if isinstance(raw_data, Mapping) else None
        if record_id is None:
            record_id = position

        try:
            yield transform_record(raw_data, config, record_id=record_id, current_year=current_year)
        except Exception as e:
            logger.error(
                "Unexpected error cleaning job posting",
                extra={
                    'record_id': record_id,
                    'error': str(e),
                    'error_type': type(e).__name__,
                }
            )
            yield TransformResult(
                record_id=record_id,
                record={},
                errors=[FieldError(record_id, 'record', None, f"Unexpected cleaning error: {e}")],
            )


def _field_error(record_id: Any, error: CleaningError) -> FieldError:
    logger.warning(
        "Failed to clean field",
        extra={
            'record_id': record_id,
            'field': error.field,
            'raw_value': error.raw_value,
            'error': error.message,
        }
    )
    return FieldError(
        record_id=record_id,
        field=error.field,
        raw_value=error.raw_value,
        message=error.message,
    )
