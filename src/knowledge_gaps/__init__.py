# ABOUTME: Exposes the knowledge-gap analyzer over per-subject quiz performance.
# ABOUTME: Groups the analyzer class, priority banding, and report-frame helpers.

from .analyzer import KnowledgeGapAnalyzer, analyze_knowledge_gaps, gap_priority, gaps_to_frame

__all__ = [
    "KnowledgeGapAnalyzer",
    "analyze_knowledge_gaps",
    "gap_priority",
    "gaps_to_frame",
]
