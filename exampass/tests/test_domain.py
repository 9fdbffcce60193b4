from datetime import datetime, timedelta, timezone
from unittest import TestCase

from exampass.domain.exams.entities import (
    ExamAnswer,
    ExamResult,
    GradedAnswer,
    QuestionAnswerStats,
    ResultStatus,
)
from exampass.domain.exams.reporting import (
    RECOMMENDATION_TIERS,
    UNTAGGED_INDICATOR,
    classify,
    draft_report,
    indicator_breakdown,
    recommendations_for,
    subject_breakdown,
    tier_recommendations,
    weakest_subject,
)
from exampass.domain.exams.scoring import score_answers
from exampass.domain.exams.statistics import (
    SCORE_BANDS,
    hardest_and_easiest,
    rank_by_difficulty,
    score_distribution,
    subject_averages,
    trend_of,
)
from exampass.domain.shared.identity import Caller, Role
from exampass.domain.shared.rounding import average, percent, round_half_up


def _answers(correct: int, total: int) -> list[ExamAnswer]:
    return [
        ExamAnswer(id=i, exam_result_id=1, question_id=i, selected_answer=0, is_correct=i < correct)
        for i in range(total)
    ]


def _graded(indicator: str, subject: str, correct: int, total: int) -> list[GradedAnswer]:
    return [
        GradedAnswer(question_id=i, is_correct=i < correct, educational_indicator=indicator, subject=subject)
        for i in range(total)
    ]


class RoundingTests(TestCase):
    def test_half_up(self):
        self.assertEqual(round_half_up(12.5), 13)
        self.assertEqual(round_half_up(66.666), 67)
        self.assertEqual(round_half_up(0.49), 0)

    def test_percent_zero_whole(self):
        self.assertEqual(percent(3, 0), 0)

    def test_average_empty(self):
        self.assertEqual(average([]), 0)
        self.assertEqual(average([50, 75]), 63)


class ScoringTests(TestCase):
    def test_three_of_five(self):
        score = score_answers(_answers(3, 5), total_questions=5)
        self.assertEqual(score.correct, 3)
        self.assertEqual(score.percentage, 60)

    def test_two_of_three_rounds_up(self):
        self.assertEqual(score_answers(_answers(2, 3), total_questions=3).percentage, 67)

    def test_unanswered_questions_count_against(self):
        # 2 answered (both correct) out of 4 captured questions
        score = score_answers(_answers(2, 2), total_questions=4)
        self.assertEqual(score.percentage, 50)

    def test_no_answers(self):
        self.assertEqual(score_answers([], total_questions=5).percentage, 0)


class ReportingTests(TestCase):
    def test_breakdown_and_classification(self):
        answers = _graded("A", "Math", 4, 5) + _graded("B", "Physics", 1, 5)
        breakdown = indicator_breakdown(answers)
        self.assertEqual(breakdown, {"A": 80, "B": 20})

        strengths, weaknesses = classify(breakdown)
        self.assertEqual(strengths, ["A"])
        self.assertEqual(weaknesses, ["B"])

    def test_middle_band_is_unclassified(self):
        strengths, weaknesses = classify({"C": 60, "D": 79})
        self.assertEqual(strengths, [])
        self.assertEqual(weaknesses, [])

    def test_subject_breakdown(self):
        answers = _graded("A", "Math", 1, 2) + _graded("B", "Physics", 2, 2)
        self.assertEqual(subject_breakdown(answers), {"Math": 50, "Physics": 100})

    def test_blank_indicator_grouped_as_untagged(self):
        answers = _graded("  ", "Math", 1, 1)
        self.assertEqual(indicator_breakdown(answers), {UNTAGGED_INDICATOR: 100})

    def test_tier_selection(self):
        expected = {95: 0, 90: 0, 89: 1, 70: 1, 69: 2, 50: 2, 49: 3, 0: 3}
        for pct, tier in expected.items():
            with self.subTest(pct=pct):
                lines = tier_recommendations(pct)
                self.assertEqual(lines, list(RECOMMENDATION_TIERS[tier][1]))
                self.assertEqual(len(lines), 2)

    def test_weakness_line_appended(self):
        lines = recommendations_for(40, ["B", "C"])
        self.assertEqual(len(lines), 3)
        self.assertIn("B, C", lines[-1])

    def test_weakest_subject_tie_broken_by_name(self):
        self.assertEqual(weakest_subject({"Physics": 20, "Chemistry": 20, "Math": 90}), "Chemistry")
        self.assertIsNone(weakest_subject({}))

    def test_draft_report(self):
        answers = _graded("A", "Math", 4, 5) + _graded("B", "Physics", 1, 5)
        draft = draft_report(answers, overall_percentage=50)
        self.assertEqual(draft.indicators, {"A": 80, "B": 20})
        self.assertEqual(draft.subjects, {"Math": 80, "Physics": 20})
        self.assertEqual(draft.weaknesses, ["B"])
        self.assertEqual(len(draft.recommendations), 3)
        self.assertIsNone(draft.assigned_professor)

        referred = draft.with_referral("Ada", "Physics", "see Ada")
        self.assertEqual(referred.assigned_professor, "Ada")
        self.assertEqual(referred.recommendations[-1], "see Ada")
        self.assertEqual(len(draft.recommendations), 3)


class StatisticsTests(TestCase):
    def test_distribution_counts_every_result(self):
        pcts = [100, 90, 89, 75, 60, 59, 10, 0, 67]
        dist = score_distribution(pcts)
        self.assertEqual(list(dist), [label for label, _ in SCORE_BANDS])
        self.assertEqual(sum(dist.values()), len(pcts))
        self.assertEqual(dist["90-100%"], 2)
        self.assertEqual(dist["0-49%"], 2)

    def test_trend_uses_two_most_recent(self):
        self.assertEqual(trend_of([80, 60, 100]), "improving")
        self.assertEqual(trend_of([50, 60]), "declining")
        self.assertEqual(trend_of([60, 60]), "stable")
        self.assertEqual(trend_of([70]), "stable")

    def test_difficulty_ranking(self):
        easy = QuestionAnswerStats(1, "easy", "A", "Math", total_answers=10, correct_answers=8)
        hard = QuestionAnswerStats(2, "hard", "B", "Math", total_answers=10, correct_answers=2)
        ranked = rank_by_difficulty([easy, hard])
        self.assertEqual([s.question_id for s in ranked], [2, 1])
        self.assertEqual(hard.correct_rate, 20)

    def test_slices_overlap_with_few_questions(self):
        stats = [
            QuestionAnswerStats(i, f"q{i}", "A", "Math", total_answers=10, correct_answers=i)
            for i in range(1, 4)
        ]
        hardest, easiest = hardest_and_easiest(rank_by_difficulty(stats), 10, 5)
        self.assertEqual(len(hardest), 3)
        self.assertEqual(len(easiest), 3)

    def test_subject_averages_descending(self):
        rows = subject_averages([{"Math": 80, "Physics": 40}, {"Math": 60}])
        self.assertEqual([r.subject for r in rows], ["Math", "Physics"])
        self.assertEqual(rows[0].average_percentage, 70)
        self.assertEqual(rows[0].total_evaluations, 2)


class EntityTests(TestCase):
    def test_remaining_time(self):
        start = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
        result = ExamResult(
            id=1, user_id=1, exam_id=1, status=ResultStatus.IN_PROGRESS,
            started_at=start, total_questions=5,
        )
        now = start + timedelta(seconds=90)
        self.assertEqual(result.elapsed_seconds(now), 90)
        self.assertEqual(result.remaining_seconds(600, now), 510)
        self.assertEqual(result.remaining_seconds(60, now), 0)
        self.assertIsNone(result.remaining_seconds(None, now))

    def test_caller_access(self):
        admin = Caller(user_id=1, role=Role.ADMIN)
        student = Caller(user_id=2, role=Role.STUDENT)
        self.assertTrue(admin.can_access(99))
        self.assertTrue(student.can_access(2))
        self.assertFalse(student.can_access(3))
