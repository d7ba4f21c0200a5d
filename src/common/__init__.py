# ABOUTME: Makes the shared common package importable across both services.
# ABOUTME: Re-exports schema types, config loading, and quiz-history features for convenience.

from .config import GapConfig, InsightsConfig, StoryConfig, load_config
from .features import build_subject_performance, subject_performance_from_frame
from .schemas import (
    KnowledgeGap,
    QuizRecord,
    StoryPreferences,
    StoryRecommendation,
    SubjectPerformance,
)

__all__ = [
    "GapConfig",
    "InsightsConfig",
    "KnowledgeGap",
    "QuizRecord",
    "StoryConfig",
    "StoryPreferences",
    "StoryRecommendation",
    "SubjectPerformance",
    "build_subject_performance",
    "load_config",
    "subject_performance_from_frame",
]
