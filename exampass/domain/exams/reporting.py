"""
Report analytics (pure)

- breakdown: % correct per educational indicator and per professor subject
- classification: strength >= 80, weakness < 60, 60-79 unclassified
- recommendations: tier picked by the overall result percentage
- weakest subject: lowest %, ties broken by subject name ascending
"""
from __future__ import annotations

from collections import OrderedDict
from typing import Iterable, Optional, Sequence

from exampass.domain.exams.entities import GradedAnswer, ReportDraft
from exampass.domain.shared.rounding import percent

STRENGTH_THRESHOLD = 80
WEAKNESS_THRESHOLD = 60

UNTAGGED_INDICATOR = "Untagged"
UNKNOWN_SUBJECT = "No subject"

# (minimum overall percentage, guidance), checked top-down
RECOMMENDATION_TIERS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (90, (
        "Excellent performance! Keep up your current study routine.",
        "Consider helping other students as a tutor.",
    )),
    (70, (
        "Good overall performance. Focus on the areas identified as weak.",
        "Practice additional exercises on the lowest-scoring topics.",
    )),
    (50, (
        "You need to reinforce several fundamental concepts.",
        "Consider looking for additional help or tutoring.",
    )),
    (0, (
        "Reviewing the basic concepts from the beginning is recommended.",
        "Look for help from a tutor or a specialised professor.",
    )),
)


def _breakdown(pairs: Iterable[tuple[str, bool]]) -> dict[str, int]:
    counts: "OrderedDict[str, list[int]]" = OrderedDict()
    for key, is_correct in pairs:
        bucket = counts.setdefault(key, [0, 0])
        bucket[1] += 1
        if is_correct:
            bucket[0] += 1
    return {key: percent(correct, total) for key, (correct, total) in counts.items()}


def indicator_breakdown(answers: Sequence[GradedAnswer]) -> dict[str, int]:
    return _breakdown(
        ((a.educational_indicator or "").strip() or UNTAGGED_INDICATOR, a.is_correct)
        for a in answers
    )


def subject_breakdown(answers: Sequence[GradedAnswer]) -> dict[str, int]:
    return _breakdown(
        ((a.subject or "").strip() or UNKNOWN_SUBJECT, a.is_correct)
        for a in answers
    )


def classify(
    breakdown: dict[str, int],
    strength_threshold: int = STRENGTH_THRESHOLD,
    weakness_threshold: int = WEAKNESS_THRESHOLD,
) -> tuple[list[str], list[str]]:
    """(strengths, weaknesses), each in breakdown order."""
    strengths: list[str] = []
    weaknesses: list[str] = []
    for key, pct in breakdown.items():
        if pct >= strength_threshold:
            strengths.append(key)
        elif pct < weakness_threshold:
            weaknesses.append(key)
    return strengths, weaknesses


def tier_recommendations(overall_percentage: int) -> list[str]:
    for minimum, lines in RECOMMENDATION_TIERS:
        if overall_percentage >= minimum:
            return list(lines)
    return list(RECOMMENDATION_TIERS[-1][1])


def recommendations_for(overall_percentage: int, weaknesses: Sequence[str]) -> list[str]:
    lines = tier_recommendations(overall_percentage)
    if weaknesses:
        lines.append(f"Areas requiring special attention: {', '.join(weaknesses)}.")
    return lines


def referral_line(professor_name: str, professor_subject: str) -> str:
    return (
        f"We recommend reaching out to professor {professor_name} "
        f"({professor_subject}) to strengthen your weakest subject."
    )


def weakest_subject(subjects: dict[str, int]) -> Optional[str]:
    if not subjects:
        return None
    return min(subjects.items(), key=lambda kv: (kv[1], kv[0]))[0]


def draft_report(
    answers: Sequence[GradedAnswer],
    overall_percentage: int,
    strength_threshold: int = STRENGTH_THRESHOLD,
    weakness_threshold: int = WEAKNESS_THRESHOLD,
) -> ReportDraft:
    """Everything except the professor referral, which needs a store lookup."""
    indicators = indicator_breakdown(answers)
    subjects = subject_breakdown(answers)
    strengths, weaknesses = classify(indicators, strength_threshold, weakness_threshold)
    return ReportDraft(
        indicators=indicators,
        subjects=subjects,
        strengths=strengths,
        weaknesses=weaknesses,
        recommendations=recommendations_for(overall_percentage, weaknesses),
    )
