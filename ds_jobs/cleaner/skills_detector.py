"""
Skill flag detection driven by keyword dictionaries.

The cleaner uses this module to emit one boolean flag per tracked technology
from the free-text job description. Each flag is independent: a skill is
flagged when any of its accepted spellings occurs in the description.

Spellings follow the classifier keyword syntax (``_`` matches any single
character), so ``Power_BI`` accepts "Power BI", "Power-BI" and "Power_BI".
Matching is case-sensitive by default; case-insensitive matching can be
enabled through configuration.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from .classifiers import contains_keyword

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillEntry:
    """Tracked skill with the spellings accepted for it."""

    name: str
    keywords: tuple[str, ...]


class SkillsDictionary:
    """Ordered collection of tracked skills."""

    def __init__(self, entries: Sequence[SkillEntry]):
        self._entries = tuple(entries)

    @property
    def entries(self) -> Sequence[SkillEntry]:
        """Expose defined entries (useful for debugging and tests)."""
        return self._entries

    @property
    def names(self) -> list[str]:
        """Skill names in output order."""
        return [entry.name for entry in self._entries]


def default_skill_entries() -> list[SkillEntry]:
    """
    Built-in dictionary of the 18 technologies tracked for DS postings.

    Used whenever configuration does not override the skills section.
    """
    defaults = {
        "Python": ["Python"],
        "Java": ["Java"],
        "Scala": ["Scala"],
        "SQL": ["SQL"],
        "Tableau": ["Tableau"],
        "PowerBI": ["PowerBI", "Power_BI"],
        "Excel": ["Excel"],
        "AWS": ["AWS"],
        "Azure": ["Azure"],
        "Databricks": ["Databricks", "Data_bricks", "Data_Bricks"],
        "Hadoop": ["Hadoop"],
        "Spark": ["Spark"],
        "Kafka": ["Kafka"],
        "BigData": ["BigData", "Big_Data"],
        "MongoDB": ["MongoDB", "Mongo_DB"],
        "NoSQL": ["NoSQL", "No_SQL"],
        "BigQuery": ["BigQuery", "Big_Query"],
        "TensorFlow": ["TensorFlow", "Tensor_Flow"],
    }
    return [
        SkillEntry(name=name, keywords=tuple(keywords))
        for name, keywords in defaults.items()
    ]


def load_skills_dictionary(skills_section: Optional[Mapping[str, Any]] = None) -> SkillsDictionary:
    """
    Build a skills dictionary from configuration data.

    Each key is a skill name (used as the output column). The value is either
    a list of keywords or a mapping with a ``keywords`` list. Only the listed
    keywords are matched; the skill name is used as its own keyword only when
    no keywords are given.

    Args:
        skills_section: Mapping loaded from YAML. When omitted or empty the
            built-in defaults are used.

    Returns:
        SkillsDictionary with one entry per configured skill
    """
    if not skills_section:
        return SkillsDictionary(default_skill_entries())

    if not isinstance(skills_section, Mapping):
        raise ValueError(
            f"skills section must be a mapping, got {type(skills_section).__name__}"
        )

    entries: list[SkillEntry] = []
    for name, config in skills_section.items():
        if not isinstance(name, str) or not name.strip():
            logger.warning("Ignoring skill with invalid name", extra={'skill': name})
            continue

        keywords: Iterable[Any]
        if isinstance(config, Mapping):
            keywords = config.get("keywords", []) or []
        elif isinstance(config, Sequence) and not isinstance(config, str):
            keywords = config
        elif isinstance(config, str):
            keywords = [config]
        else:
            keywords = []

        cleaned: list[str] = []
        for keyword in keywords:
            if isinstance(keyword, str) and keyword.strip() and keyword.strip() not in cleaned:
                cleaned.append(keyword.strip())
        if not cleaned:
            cleaned.append(name.strip())

        entries.append(SkillEntry(name=name.strip(), keywords=tuple(cleaned)))

    if not entries:
        logger.warning("Skills configuration contained no valid entries; using defaults")
        return SkillsDictionary(default_skill_entries())

    return SkillsDictionary(entries)


class SkillsDetector:
    """
    Flags the tracked skills mentioned in a job description.
    """

    def __init__(
        self,
        dictionary: Optional[SkillsDictionary] = None,
        case_sensitive: bool = True,
    ) -> None:
        """
        Initialise detector with a skills dictionary.

        Args:
            dictionary: Optional pre-built dictionary. If omitted, the
                built-in defaults are used.
            case_sensitive: Match spellings exactly as written (source
                behavior). Set to False to ignore case.
        """
        self.dictionary = dictionary or SkillsDictionary(default_skill_entries())
        self.case_sensitive = case_sensitive

    def detect(self, description: Optional[str]) -> dict[str, bool]:
        """
        Derive skill flags for a single job description.

        Args:
            description: Job description free text.

        Returns:
            Mapping of skill name to flag, in dictionary order.
        """
        text = description if isinstance(description, str) else None
        return {
            entry.name: any(
                contains_keyword(text, keyword, self.case_sensitive)
                for keyword in entry.keywords
            )
            for entry in self.dictionary.entries
        }
