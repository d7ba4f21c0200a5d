# ABOUTME: Defines canonical value objects shared by the gap analyzer and story recommender.
# ABOUTME: Centralizes quiz history, subject performance, gap, and story record definitions.

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class QuizRecord:
    """One graded quiz attempt as stored by the learning-analytics history."""

    subject: str
    accuracy: float
    timestamp: datetime


@dataclass(frozen=True)
class SubjectPerformance:
    """Per-subject quiz summary consumed by the knowledge-gap analyzer."""

    subject: str
    accuracy: float
    total_attempts: int


@dataclass(frozen=True)
class KnowledgeGap:
    subject: str
    severity: float
    recommendation: str


@dataclass(frozen=True)
class StoryPreferences:
    """Reading preferences; topics are kept in caller order as a tuple."""

    topics: Tuple[str, ...] = field(default_factory=tuple)
    reading_level: int = 0
    session_minutes: int = 0

    def __post_init__(self) -> None:
        # Frozen dataclass, so bypass __setattr__ to normalize lists into tuples.
        object.__setattr__(self, "topics", tuple(self.topics))


@dataclass(frozen=True)
class StoryRecommendation:
    theme: str
    suggested_length: int  # seconds

