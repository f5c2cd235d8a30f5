"""
Pytest configuration and shared fixtures

This file contains test fixtures that can be used across all tests.
Fixtures are reusable components that set up test preconditions.

Learn more: https://docs.pytest.org/en/stable/fixture.html
"""

import pytest

from ds_jobs.cleaner.config_loader import CleanerConfig


@pytest.fixture(scope="function")
def sample_raw_job() -> dict:
    """
    Provide a sample raw job posting for testing.

    This fixture mirrors one row of the Glassdoor ``Uncleaned_DS_jobs``
    export, with the rating appended to the company name.

    Scope: function (created fresh for each test)

    Returns:
        dict: Sample raw job posting
    """
    return {
        "index": 0,
        "job_title": "  Senior Data Scientist ",
        "salary_estimate": "$137K-$171K (Glassdoor est.)",
        "job_description": (
            "Full-time remote role. You will build models in Python and "
            "TensorFlow, query data with SQL and ship dashboards in Power BI."
        ),
        "rating": 3.1,
        "company_name": "Healthfirst\n3.1",
        "location": "New York, NY",
        "headquarters": "New York, NY",
        "size": "1001 to 5000 employees",
        "founded": 1993,
        "type_of_ownership": "Nonprofit Organization",
        "industry": "Insurance Carriers",
        "sector": "Insurance",
        "revenue": "Unknown / Non-Applicable",
        "competitors": "EmblemHealth, UnitedHealth Group, Aetna",
    }


@pytest.fixture(scope="function")
def sample_raw_batch(sample_raw_job) -> list[dict]:
    """
    Provide a batch of raw job postings for testing.

    The second posting has an unknown rating and founding year; the third
    has a salary estimate the parser cannot read.

    Scope: function (created fresh for each test)

    Returns:
        list[dict]: List of raw job postings
    """
    return [
        sample_raw_job,
        {
            "index": 1,
            "job_title": "Data Analyst",
            "salary_estimate": "$75K-$131K (Glassdoor est.)",
            "job_description": "Hybrid schedule. Excel and Tableau reporting.",
            "rating": -1,
            "company_name": "Initech",
            "location": "Austin, TX",
            "headquarters": "-1",
            "size": "Unknown",
            "founded": -1,
            "type_of_ownership": "Unknown",
            "industry": "-1",
            "sector": "-1",
            "revenue": "Unknown / Non-Applicable",
            "competitors": "-1",
        },
        {
            "index": 2,
            "job_title": "Machine Learning Engineer",
            "salary_estimate": "Unknown",
            "job_description": "Contract position working with Spark and Kafka on AWS.",
            "rating": 4.2,
            "company_name": "Globex Inc\n4.2",
            "location": "Remote",
            "headquarters": "Boston, MA",
            "size": "51 to 200 employees",
            "founded": 2012,
            "type_of_ownership": "Company - Private",
            "industry": "Computer Hardware & Software",
            "sector": "Information Technology",
            "revenue": "$10 to $25 million (USD)",
            "competitors": "-1",
        },
    ]


@pytest.fixture(scope="function")
def cleaner_config() -> CleanerConfig:
    """
    Provide a cleaner configuration with a fixed reference year.

    Returns:
        CleanerConfig: Built-in rules with current_year pinned to 2024
    """
    return CleanerConfig(current_year=2024)


# Mark tests based on their type for selective running
def pytest_configure(config):
    """
    Register custom pytest markers.

    This allows us to run specific test categories:
    - pytest -m unit        (run only unit tests)
    - pytest -m integration (run only integration tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (touches the filesystem)"
    )
