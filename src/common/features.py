# ABOUTME: Builds per-subject performance summaries from graded quiz history.
# ABOUTME: Feeds the knowledge-gap analyzer from record lists or history dataframes.

from typing import Iterable, List

import pandas as pd

from .schemas import QuizRecord, SubjectPerformance

REQUIRED_HISTORY_COLUMNS = ("subject", "accuracy")


def build_subject_performance(records: Iterable[QuizRecord]) -> List[SubjectPerformance]:
    """
    Collapse quiz records into one SubjectPerformance per subject.

    Subjects are ordered by their earliest attempt; accuracy is the mean over
    the subject's attempts and total_attempts is the number of records.
    """

    rows = [
        {"subject": record.subject, "accuracy": record.accuracy, "timestamp": record.timestamp}
        for record in records
    ]
    if not rows:
        return []
    return subject_performance_from_frame(pd.DataFrame(rows))


def subject_performance_from_frame(history: pd.DataFrame) -> List[SubjectPerformance]:
    missing = [col for col in REQUIRED_HISTORY_COLUMNS if col not in history.columns]
    if missing:
        raise ValueError(f"Quiz history is missing required columns: {missing}")
    if history.empty:
        return []

    df = history.copy()
    if "timestamp" in df.columns:
        if not pd.api.types.is_datetime64_any_dtype(df["timestamp"]):
            df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True, errors="coerce")
        # Stable sort so attempts sharing a timestamp keep their row order.
        df = df.sort_values("timestamp", kind="mergesort")

    df = df[list(REQUIRED_HISTORY_COLUMNS)].copy()
    df["accuracy"] = pd.to_numeric(df["accuracy"], errors="coerce")
    df = df.dropna(subset=["subject", "accuracy"])

    summaries: List[SubjectPerformance] = []
    for subject, subject_df in df.groupby("subject", sort=False):
        summaries.append(
            SubjectPerformance(
                subject=str(subject),
                accuracy=float(subject_df["accuracy"].mean()),
                total_attempts=int(len(subject_df)),
            )
        )
    return summaries
