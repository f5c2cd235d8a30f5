"""DS Jobs Cleaning Package.

This package contains the cleaning stage of the DS Jobs pipeline:
- cleaner: Turns raw Glassdoor data-science job postings into a cleaned,
  feature-enriched table (normalized titles, keyword classifications,
  parsed salaries, company features and skill flags)
"""

__version__ = "0.1.0"
