"""
Statistics math (pure)
"""
from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from exampass.domain.exams.entities import QuestionAnswerStats
from exampass.domain.shared.rounding import average

HARDEST_SLICE = 10
EASIEST_SLICE = 5

# (label, lowest percentage in band), highest band first
SCORE_BANDS: tuple[tuple[str, int], ...] = (
    ("90-100%", 90),
    ("80-89%", 80),
    ("70-79%", 70),
    ("60-69%", 60),
    ("50-59%", 50),
    ("0-49%", 0),
)

TREND_IMPROVING = "improving"
TREND_DECLINING = "declining"
TREND_STABLE = "stable"


def band_for(percentage: int) -> str:
    for label, minimum in SCORE_BANDS:
        if percentage >= minimum:
            return label
    return SCORE_BANDS[-1][0]


def score_distribution(percentages: Iterable[int]) -> dict[str, int]:
    """Every completed result lands in exactly one band."""
    bands: dict[str, int] = OrderedDict((label, 0) for label, _ in SCORE_BANDS)
    for pct in percentages:
        bands[band_for(int(pct))] += 1
    return dict(bands)


def trend(latest: Optional[int], previous: Optional[int]) -> str:
    """Compares the two most recent percentages only."""
    if latest is None or previous is None:
        return TREND_STABLE
    if latest > previous:
        return TREND_IMPROVING
    if latest < previous:
        return TREND_DECLINING
    return TREND_STABLE


def trend_of(percentages_newest_first: Sequence[int]) -> str:
    if len(percentages_newest_first) < 2:
        return TREND_STABLE
    return trend(percentages_newest_first[0], percentages_newest_first[1])


def rank_by_difficulty(stats: Iterable[QuestionAnswerStats]) -> list[QuestionAnswerStats]:
    """Hardest (lowest correct rate) first; ties by question id."""
    return sorted(stats, key=lambda s: (s.correct_rate, s.question_id))


def hardest_and_easiest(
    ranked: Sequence[QuestionAnswerStats],
    hardest: int = HARDEST_SLICE,
    easiest: int = EASIEST_SLICE,
) -> tuple[list[QuestionAnswerStats], list[QuestionAnswerStats]]:
    """Plain slices of the ranking; with fewer than hardest+easiest questions they overlap."""
    return list(ranked[:hardest]), list(ranked[-easiest:]) if easiest else []


@dataclass(frozen=True)
class SubjectAverage:
    subject: str
    average_percentage: int
    total_evaluations: int


def subject_averages(breakdowns: Iterable[Mapping[str, int]]) -> list[SubjectAverage]:
    """Flattens per-report subject breakdowns; best subject first, ties by name."""
    collected: dict[str, list[int]] = OrderedDict()
    for subjects in breakdowns:
        for subject, pct in (subjects or {}).items():
            collected.setdefault(subject, []).append(int(pct))
    rows = [
        SubjectAverage(subject=s, average_percentage=average(v), total_evaluations=len(v))
        for s, v in collected.items()
    ]
    rows.sort(key=lambda r: (-r.average_percentage, r.subject))
    return rows
