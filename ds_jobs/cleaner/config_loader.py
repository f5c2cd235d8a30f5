"""
Configuration Loader for Cleaner Service

This module loads and validates the cleaner configuration from cleaner.yml.
Every section is optional: anything left out falls back to the built-in rule
tables and skill dictionary.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from .classifiers import (
    EMPLOYMENT_RULES,
    JOB_CATEGORY_RULES,
    LOCATION_RULES,
    ClassificationRule,
)
from .seniority_extractor import DEFAULT_SENIORITY_KEYWORDS
from .skills_detector import SkillsDictionary, default_skill_entries, load_skills_dictionary

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "cleaner.yml"


@dataclass
class CleanerConfig:
    """Complete cleaner configuration."""

    current_year: Optional[int] = None
    case_sensitive_skills: bool = True
    skills: SkillsDictionary = field(
        default_factory=lambda: SkillsDictionary(default_skill_entries())
    )
    location_rules: tuple[ClassificationRule, ...] = LOCATION_RULES
    employment_rules: tuple[ClassificationRule, ...] = EMPLOYMENT_RULES
    job_category_rules: tuple[ClassificationRule, ...] = JOB_CATEGORY_RULES
    seniority_keywords: tuple[str, ...] = DEFAULT_SENIORITY_KEYWORDS

    def resolve_current_year(self) -> int:
        """Return the configured reference year, or the current calendar year."""
        if self.current_year is not None:
            return self.current_year
        return datetime.now().year

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "CleanerConfig":
        """Create CleanerConfig from dictionary."""
        current_year = config_dict.get("current_year")
        if current_year is not None:
            if isinstance(current_year, bool) or not isinstance(current_year, int):
                raise ValueError(f"current_year must be an integer, got {current_year!r}")

        case_sensitive = config_dict.get("case_sensitive_skills", True)
        if not isinstance(case_sensitive, bool):
            raise ValueError(
                f"case_sensitive_skills must be a boolean, got {case_sensitive!r}"
            )

        rules_dict = config_dict.get("rules") or {}
        if not isinstance(rules_dict, Mapping):
            raise ValueError("rules section must be a mapping")

        seniority_keywords = config_dict.get("seniority_keywords")
        if seniority_keywords is None:
            seniority_keywords = DEFAULT_SENIORITY_KEYWORDS
        elif not _is_string_list(seniority_keywords):
            raise ValueError("seniority_keywords must be a list of strings")

        return cls(
            current_year=current_year,
            case_sensitive_skills=case_sensitive,
            skills=load_skills_dictionary(config_dict.get("skills")),
            location_rules=_parse_rules(rules_dict.get("location"), LOCATION_RULES, "location"),
            employment_rules=_parse_rules(
                rules_dict.get("employment_type"), EMPLOYMENT_RULES, "employment_type"
            ),
            job_category_rules=_parse_rules(
                rules_dict.get("job_category"), JOB_CATEGORY_RULES, "job_category", ordered=True
            ),
            seniority_keywords=tuple(seniority_keywords),
        )


def _is_string_list(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, str)
        and all(isinstance(item, str) and item for item in value)
    )


def _parse_rules(
    section: Any,
    default: tuple[ClassificationRule, ...],
    name: str,
    ordered: bool = False,
) -> tuple[ClassificationRule, ...]:
    """
    Parse an ordered rule list.

    Each item is a mapping with a ``label`` and a list of ``keywords``. For
    job categories the keywords are tokens that must appear in order.
    """
    if section is None:
        return default

    if not isinstance(section, Sequence) or isinstance(section, str):
        raise ValueError(f"rules.{name} must be a list")

    rules = []
    for position, item in enumerate(section):
        if not isinstance(item, Mapping):
            raise ValueError(f"rules.{name}[{position}] must be a mapping")
        label = item.get("label")
        keywords = item.get("keywords")
        if not isinstance(label, str) or not label:
            raise ValueError(f"rules.{name}[{position}] needs a non-empty label")
        if not _is_string_list(keywords) or not keywords:
            raise ValueError(f"rules.{name}[{position}] needs a list of keywords")
        rules.append(
            ClassificationRule(
                label=label,
                keywords=tuple(keyword.lower() for keyword in keywords),
                ordered=ordered,
            )
        )

    return tuple(rules)


def load_cleaner_config(config_path: Optional[str] = None) -> CleanerConfig:
    """
    Load cleaner configuration from YAML file.

    Args:
        config_path: Path to cleaner.yml file. If None, uses default location
            and falls back to built-in defaults when that file is missing.

    Returns:
        CleanerConfig with rule tables and skill dictionary

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If config is invalid

    Example:
        >>> config = load_cleaner_config()
        >>> config.location_rules[0].label
        'remote'
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.warning(
                "Cleaner configuration not found at %s; using built-in defaults",
                DEFAULT_CONFIG_PATH,
            )
            return CleanerConfig()
        config_path = str(DEFAULT_CONFIG_PATH)

    logger.info("Loading cleaner configuration", extra={'config_path': config_path})

    try:
        with open(config_path, encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)

        if not config_dict:
            logger.warning("Empty configuration file, using defaults")
            config_dict = {}

        if not isinstance(config_dict, Mapping):
            raise ValueError("configuration root must be a mapping")

        config = CleanerConfig.from_dict(dict(config_dict))

        logger.info(
            "Cleaner configuration loaded successfully",
            extra={
                'current_year': config.current_year,
                'skills': len(config.skills.entries),
                'location_rules': len(config.location_rules),
                'employment_rules': len(config.employment_rules),
                'job_category_rules': len(config.job_category_rules),
            }
        )

        return config

    except FileNotFoundError:
        logger.error(f"Configuration file not found: {config_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML: {e}")
        raise ValueError(f"Invalid YAML in config file: {e}") from e
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        raise
