"""DS Jobs Cleaner Test Suite.

This package contains unit and integration tests for the DS Jobs cleaner.

Test Structure:
- unit/: Unit tests for individual functions and classes
- integration/: End-to-end tests running the service on CSV files
"""

__version__ = "0.1.0"
