"""
Unit Tests for Title Normalization and Seniority Extraction

Test Organization:
- TestNormalizeTitle: substitutions, trimming and case folding
- TestNormalizeTitleFixedPoint: re-normalizing never changes a title
- TestExtractSeniority: senior / n/a flag on normalized titles
"""

import pytest

from ds_jobs.cleaner.seniority_extractor import VALID_SENIORITY_LEVELS, extract_seniority
from ds_jobs.cleaner.title_normalizer import normalize_title

RAW_TITLES = [
    "Senior Data Scientist",
    "  Data Engineer (Sr.)  ",
    "Sr. Data Analyst",
    "Jr. Business Intelligence Analyst",
    "Junior Data Analyst",
    "SENIOR MACHINE LEARNING ENGINEER",
    "Senior. Data Modeler",
    "Data Scientist",
]


class TestNormalizeTitle:
    """Tests for normalize_title"""

    @pytest.mark.parametrize("raw,expected", [
        ("  Senior Data Scientist ", "sr data scientist"),
        ("Data Engineer (Sr.)", "data engineer sr"),
        ("Sr. Data Analyst", "sr data analyst"),
        ("Jr. Analyst", "jr analyst"),
        ("Junior Data Analyst", "jr data analyst"),
        ("Senior Sr. Engineer", "sr sr engineer"),
        ("Data Scientist", "data scientist"),
    ])
    def test_normalize_title(self, raw, expected):
        """Test seniority variants collapse to sr/jr"""
        assert normalize_title(raw) == expected

    def test_normalize_title_replaces_all_occurrences(self):
        """Test every occurrence is replaced, not only the first"""
        assert normalize_title("Senior Senior Junior Junior") == "sr sr jr jr"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_normalize_title_empty(self, raw):
        """Test missing titles become the empty string"""
        assert normalize_title(raw) == ""

    @pytest.mark.parametrize("raw", RAW_TITLES)
    def test_normalized_title_has_no_raw_variants(self, raw):
        """Test no raw seniority variant survives normalization"""
        normalized = normalize_title(raw)

        assert normalized == normalized.lower()
        for variant in ("senior", "junior", "sr.", "(sr.)", "jr."):
            assert variant not in normalized

    def test_trailing_period_after_senior(self):
        """Test "senior." does not leave "sr." behind"""
        assert normalize_title("Senior. Data Modeler") == "sr data modeler"


class TestNormalizeTitleFixedPoint:
    """Tests that normalization is idempotent"""

    def test_short_tokens_are_fixed_point(self):
        """Test normalizing "sr jr" again yields "sr jr" """
        assert normalize_title("sr jr") == "sr jr"

    @pytest.mark.parametrize("raw", RAW_TITLES)
    def test_normalize_twice(self, raw):
        """Test re-normalizing an already-normalized title is a no-op"""
        once = normalize_title(raw)
        assert normalize_title(once) == once


class TestExtractSeniority:
    """Tests for extract_seniority"""

    @pytest.mark.parametrize("title,expected", [
        ("sr data scientist", "senior"),
        ("data engineer sr", "senior"),
        ("senior data analyst", "senior"),
        ("data analyst", "n/a"),
        ("jr data analyst", "n/a"),
        ("", "n/a"),
    ])
    def test_extract_seniority(self, title, expected):
        """Test seniority flag on normalized titles"""
        assert extract_seniority(title) == expected

    def test_senior_title_caught_after_normalization(self):
        """Test "Senior" titles are flagged through their sr token"""
        assert extract_seniority(normalize_title("Senior Data Scientist")) == "senior"

    def test_custom_keywords(self):
        """Test seniority keywords can be overridden"""
        assert extract_seniority("lead data engineer", keywords=("lead",)) == "senior"
        assert extract_seniority("sr data engineer", keywords=("lead",)) == "n/a"

    @pytest.mark.parametrize("raw", RAW_TITLES)
    def test_seniority_is_closed_set(self, raw):
        """Test result is always a valid seniority level"""
        assert extract_seniority(normalize_title(raw)) in VALID_SENIORITY_LEVELS


pytestmark = pytest.mark.unit
