"""
Tests for the SkillsDetector helper.

Most tests use the built-in dictionary of 18 technologies; the loader tests
use small hand-written mappings to stay independent of the bundled cleaner.yml.
"""
from __future__ import annotations

import pytest

from ds_jobs.cleaner.skills_detector import (
    SkillEntry,
    SkillsDetector,
    SkillsDictionary,
    default_skill_entries,
    load_skills_dictionary,
)

TRACKED_SKILLS = [
    "Python", "Java", "Scala", "SQL", "Tableau", "PowerBI", "Excel", "AWS",
    "Azure", "Databricks", "Hadoop", "Spark", "Kafka", "BigData", "MongoDB",
    "NoSQL", "BigQuery", "TensorFlow",
]


def test_default_dictionary_tracks_eighteen_skills() -> None:
    assert [entry.name for entry in default_skill_entries()] == TRACKED_SKILLS


def test_detect_emits_one_flag_per_skill() -> None:
    flags = SkillsDetector().detect("Python and SQL")

    assert list(flags) == TRACKED_SKILLS
    assert all(isinstance(flag, bool) for flag in flags.values())
    assert flags["Python"] is True
    assert flags["SQL"] is True
    assert flags["Scala"] is False


@pytest.mark.parametrize("description,expected", [
    ("Dashboards in Power BI.", True),
    ("Dashboards in PowerBI.", True),
    ("Dashboards in Power_BI.", True),
    ("Dashboards in Tableau.", False),
])
def test_power_bi_spellings(description: str, expected: bool) -> None:
    assert SkillsDetector().detect(description)["PowerBI"] is expected


@pytest.mark.parametrize("skill,description", [
    ("Databricks", "Experience with Data Bricks notebooks"),
    ("BigData", "Big Data platforms"),
    ("MongoDB", "Mongo DB collections"),
    ("NoSQL", "No SQL stores"),
    ("BigQuery", "Big Query warehouse"),
    ("TensorFlow", "Tensor Flow models"),
])
def test_two_word_spellings(skill: str, description: str) -> None:
    assert SkillsDetector().detect(description)[skill] is True


def test_flags_are_independent() -> None:
    flags = SkillsDetector().detect("We use NoSQL databases")

    # "NoSQL" also contains "SQL"; each flag is checked on its own.
    assert flags["NoSQL"] is True
    assert flags["SQL"] is True
    assert flags["MongoDB"] is False


def test_detect_is_case_sensitive_by_default() -> None:
    assert SkillsDetector().detect("python and aws")["Python"] is False


def test_detect_case_insensitive_option() -> None:
    flags = SkillsDetector(case_sensitive=False).detect("python and aws")

    assert flags["Python"] is True
    assert flags["AWS"] is True


def test_detect_handles_missing_description() -> None:
    flags = SkillsDetector().detect(None)

    assert list(flags) == TRACKED_SKILLS
    assert not any(flags.values())


def test_custom_dictionary() -> None:
    dictionary = SkillsDictionary([SkillEntry(name="dbt", keywords=("dbt", "data_build_tool"))])

    assert SkillsDetector(dictionary).detect("data build tool models") == {"dbt": True}


def test_load_skills_dictionary_from_lists_and_mappings() -> None:
    dictionary = load_skills_dictionary({
        "dbt": ["data_build_tool"],
        "Airflow": {"keywords": ["Apache Airflow"]},
        "Docker": None,
    })

    assert dictionary.names == ["dbt", "Airflow", "Docker"]
    assert dictionary.entries[0].keywords == ("data_build_tool",)
    assert dictionary.entries[1].keywords == ("Apache Airflow",)
    assert dictionary.entries[2].keywords == ("Docker",)


def test_load_skills_dictionary_defaults() -> None:
    assert load_skills_dictionary(None).names == TRACKED_SKILLS
    assert load_skills_dictionary({}).names == TRACKED_SKILLS


def test_load_skills_dictionary_rejects_non_mapping() -> None:
    with pytest.raises(ValueError):
        load_skills_dictionary(["Python"])


def test_configured_keywords_replace_skill_name() -> None:
    detector = SkillsDetector(load_skills_dictionary({"R": ["R programming"]}))

    assert detector.detect("Report Requirements in Excel") == {"R": False}
    assert detector.detect("Statistics with R programming") == {"R": True}
