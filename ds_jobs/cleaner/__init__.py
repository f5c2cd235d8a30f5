"""
Cleaner Service

This service transforms raw job postings from the ``Uncleaned_DS_jobs`` table
into cleaned, feature-enriched records that can be used for analytics and
simple machine-learning pipelines.

Key responsibilities:
- Normalize job titles and classify location, employment type, category
  and seniority from keywords
- Parse Glassdoor salary estimates into numeric ranges
- Clean company ratings and names, derive company age
- Flag the technologies mentioned in each job description
"""

__version__ = "0.1.0"
