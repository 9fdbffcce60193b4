"""
Scoring (pure)

percentage = round_half_up(100 * correct / total_questions), where
total_questions is the count captured on the result at start.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from exampass.domain.exams.entities import ExamAnswer
from exampass.domain.shared.rounding import percent


@dataclass(frozen=True)
class Score:
    correct: int
    total_questions: int
    percentage: int


def score_answers(answers: Iterable[ExamAnswer], total_questions: int) -> Score:
    correct = sum(1 for a in answers if a.is_correct)
    return Score(
        correct=correct,
        total_questions=int(total_questions),
        percentage=percent(correct, total_questions),
    )
