# ABOUTME: Loads YAML configuration for the gap analyzer and story recommender.
# ABOUTME: Maps config sections into frozen dataclasses and validates thresholds and tiers.

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

import yaml

DEFAULT_RECOMMENDATION_TEMPLATE = "Prioritize scaffolded practice for {subject} with short retrieval quizzes."


@dataclass(frozen=True)
class GapConfig:
    """Thresholds deciding which subject summaries count as knowledge gaps."""

    min_attempts: int = 3
    mastery_threshold: float = 0.7
    recommendation_template: str = DEFAULT_RECOMMENDATION_TEMPLATE


@dataclass(frozen=True)
class StoryConfig:
    """
    Length tiers for story recommendations.

    ``length_tiers`` holds (max_session_minutes, base_length_seconds) pairs in
    ascending order; the first tier whose bound is >= the session length wins,
    otherwise ``fallback_length`` applies.
    """

    default_theme: str = "friendship"
    length_tiers: Tuple[Tuple[int, int], ...] = ((5, 300), (10, 600), (20, 900))
    fallback_length: int = 1200
    seconds_per_level: int = 25


@dataclass(frozen=True)
class InsightsConfig:
    knowledge_gaps: GapConfig = field(default_factory=GapConfig)
    story: StoryConfig = field(default_factory=StoryConfig)


def load_config(config_path: Optional[Path] = None) -> InsightsConfig:
    """Read a YAML config; a missing path yields the built-in defaults."""

    if config_path is None:
        return InsightsConfig()

    with open(config_path) as f:
        cfg = yaml.safe_load(f) or {}

    if not isinstance(cfg, Mapping):
        raise ValueError(f"Config at {config_path} must be a mapping, got {type(cfg).__name__}.")
    unknown = set(cfg) - {"knowledge_gaps", "story"}
    if unknown:
        raise ValueError(f"Unknown config sections: {sorted(unknown)}")

    return InsightsConfig(
        knowledge_gaps=build_gap_config(cfg.get("knowledge_gaps") or {}),
        story=build_story_config(cfg.get("story") or {}),
    )


def build_gap_config(section: Mapping[str, Any]) -> GapConfig:
    _check_keys("knowledge_gaps", section, GapConfig)
    defaults = GapConfig()

    min_attempts = _int_value("min_attempts", section.get("min_attempts", defaults.min_attempts))
    if min_attempts < 0:
        raise ValueError(f"min_attempts must be non-negative, got {min_attempts}.")

    mastery_threshold = _float_value("mastery_threshold", section.get("mastery_threshold", defaults.mastery_threshold))
    if not 0.0 <= mastery_threshold <= 1.0:
        raise ValueError(f"mastery_threshold must lie in [0, 1], got {mastery_threshold}.")

    template = _str_value(
        "recommendation_template", section.get("recommendation_template", defaults.recommendation_template)
    )
    if "{subject}" not in template:
        raise ValueError("recommendation_template must contain a '{subject}' placeholder.")
    try:
        template.format(subject="subject")
    except (AttributeError, IndexError, KeyError, ValueError) as exc:
        raise ValueError(f"recommendation_template may only use the '{{subject}}' placeholder: {exc!r}") from exc

    return GapConfig(
        min_attempts=min_attempts,
        mastery_threshold=mastery_threshold,
        recommendation_template=template,
    )


def build_story_config(section: Mapping[str, Any]) -> StoryConfig:
    _check_keys("story", section, StoryConfig)
    defaults = StoryConfig()

    default_theme = _str_value("default_theme", section.get("default_theme", defaults.default_theme))
    if not default_theme:
        raise ValueError("default_theme must be a non-empty string.")

    return StoryConfig(
        default_theme=default_theme,
        length_tiers=_length_tiers(section.get("length_tiers", defaults.length_tiers)),
        fallback_length=_int_value("fallback_length", section.get("fallback_length", defaults.fallback_length)),
        seconds_per_level=_int_value("seconds_per_level", section.get("seconds_per_level", defaults.seconds_per_level)),
    )


def _length_tiers(value: Any) -> Tuple[Tuple[int, int], ...]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"length_tiers must be a list of [minutes, seconds] pairs, got {value!r}.")

    tiers = []
    for entry in value:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"length_tiers entries must be [minutes, seconds] pairs, got {entry!r}.")
        bound, length = entry
        tiers.append((_int_value("length_tiers minutes", bound), _int_value("length_tiers seconds", length)))

    bounds = [bound for bound, _ in tiers]
    if any(later <= earlier for earlier, later in zip(bounds, bounds[1:])):
        raise ValueError(f"length_tiers must be strictly ascending by minutes, got {bounds}.")
    return tuple(tiers)


def _int_value(name: str, value: Any) -> int:
    # bool is an int subclass; YAML `yes`/`true` should not pass as a number.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}.")
    return value


def _float_value(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}.")
    return float(value)


def _str_value(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}.")
    return value


def _check_keys(section_name: str, section: Mapping[str, Any], config_cls) -> None:
    if not isinstance(section, Mapping):
        raise ValueError(f"Config section '{section_name}' must be a mapping.")
    allowed = {f.name for f in fields(config_cls)}
    unknown = set(section) - allowed
    if unknown:
        raise ValueError(f"Unknown keys in '{section_name}': {sorted(unknown)}")
