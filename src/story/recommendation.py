# ABOUTME: Picks a story theme and target length from a reader's preferences.
# ABOUTME: Buckets session minutes into length tiers and adds time per reading level.

from __future__ import annotations

from typing import Optional

from src.common.config import StoryConfig
from src.common.schemas import StoryPreferences, StoryRecommendation


class StoryRecommendationService:
    def __init__(self, config: Optional[StoryConfig] = None) -> None:
        self.config = config or StoryConfig()

    def recommend(self, preferences: StoryPreferences) -> StoryRecommendation:
        """
        Theme is the first preferred topic (or the default theme); length is the
        session tier's base length plus ``seconds_per_level`` per reading level.

        Reading level and session minutes are not range-checked, so a negative
        reading level shortens the story below its tier.
        """

        theme = preferences.topics[0] if preferences.topics else self.config.default_theme
        base_length = self.base_length(preferences.session_minutes)
        return StoryRecommendation(
            theme=theme,
            suggested_length=base_length + preferences.reading_level * self.config.seconds_per_level,
        )

    def base_length(self, session_minutes: int) -> int:
        for max_minutes, length in self.config.length_tiers:
            if session_minutes <= max_minutes:
                return length
        return self.config.fallback_length


def recommend_story(preferences: StoryPreferences, config: Optional[StoryConfig] = None) -> StoryRecommendation:
    return StoryRecommendationService(config).recommend(preferences)
