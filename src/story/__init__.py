# ABOUTME: Exposes the story recommender driven by reading preferences.
# ABOUTME: Re-exports the service class and its functional shortcut.

from .recommendation import StoryRecommendationService, recommend_story

__all__ = [
    "StoryRecommendationService",
    "recommend_story",
]
