# ABOUTME: Flags subjects whose quiz accuracy falls below mastery after enough attempts.
# ABOUTME: Scores gap severity, attaches a practice recommendation, and ranks the most urgent first.

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from src.common.config import GapConfig
from src.common.schemas import KnowledgeGap, SubjectPerformance

REPORT_COLUMNS = ["subject", "severity", "priority", "recommendation"]


class GapPriorityThresholds:
    # Severity cutoffs; a band applies only strictly above its cutoff.
    CRITICAL = 0.7
    HIGH = 0.5
    MEDIUM = 0.3


class KnowledgeGapAnalyzer:
    """Turns per-subject quiz summaries into severity-ranked knowledge gaps."""

    def __init__(self, config: Optional[GapConfig] = None) -> None:
        self.config = config or GapConfig()

    def analyze(self, performance: Iterable[SubjectPerformance]) -> List[KnowledgeGap]:
        """
        Keep subjects with at least ``min_attempts`` attempts and accuracy below
        ``mastery_threshold``, then sort by severity, highest first.

        The sort is stable, so subjects with equal severity stay in input order.
        """

        gaps = [
            KnowledgeGap(
                subject=entry.subject,
                severity=_severity(entry.accuracy),
                recommendation=self._recommendation_for(entry.subject),
            )
            for entry in performance
            if self._is_gap(entry)
        ]
        gaps.sort(key=lambda gap: gap.severity, reverse=True)
        return gaps

    def _is_gap(self, entry: SubjectPerformance) -> bool:
        return entry.total_attempts >= self.config.min_attempts and entry.accuracy < self.config.mastery_threshold

    def _recommendation_for(self, subject: str) -> str:
        return self.config.recommendation_template.format(subject=subject)


def analyze_knowledge_gaps(
    performance: Iterable[SubjectPerformance],
    config: Optional[GapConfig] = None,
) -> List[KnowledgeGap]:
    return KnowledgeGapAnalyzer(config).analyze(performance)


def gap_priority(severity: float) -> str:
    # 1 - accuracy leaves float noise (1 - 0.7 > 0.3), so compare on a rounded value.
    severity = round(severity, 9)
    if severity > GapPriorityThresholds.CRITICAL:
        return "critical"
    if severity > GapPriorityThresholds.HIGH:
        return "high"
    if severity > GapPriorityThresholds.MEDIUM:
        return "medium"
    return "low"


def gaps_to_frame(gaps: Iterable[KnowledgeGap]) -> pd.DataFrame:
    rows = [
        {
            "subject": gap.subject,
            "severity": gap.severity,
            "priority": gap_priority(gap.severity),
            "recommendation": gap.recommendation,
        }
        for gap in gaps
    ]
    if not rows:
        return pd.DataFrame(columns=REPORT_COLUMNS)
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def _severity(accuracy: float) -> float:
    # Accuracy should already sit in [0, 1]; clip anyway so severity never leaves it.
    return float(np.clip(1.0 - accuracy, 0.0, 1.0))
