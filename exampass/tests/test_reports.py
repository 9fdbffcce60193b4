from datetime import datetime, timedelta, timezone
from unittest import TestCase

from exampass.application.use_cases.exams import (
    admin_statistics,
    check_report,
    generate_report,
    get_report,
    my_report_stats,
    record_answer,
    start_session,
    student_report,
    submit_session,
)
from exampass.domain.exams.errors import (
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
)
from exampass.domain.shared.identity import Caller, Role

from .fakes import InMemoryUnitOfWork

T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
ADMIN = Caller(user_id=10_000, role=Role.ADMIN)


class ReportUseCaseTests(TestCase):
    def setUp(self):
        self.uow = InMemoryUnitOfWork()
        store = self.uow.store
        self.math = store.add_professor("Ada", "Mathematics")
        self.physics = store.add_professor("Niels", "Physics")
        # A: 5 math questions, B: 5 physics questions, correct answer is always 0
        self.a_questions = [store.add_question(self.math, indicator="A") for _ in range(5)]
        self.b_questions = [store.add_question(self.physics, indicator="B") for _ in range(5)]
        self.exam = store.add_exam(self.a_questions + self.b_questions)
        self.student = store.add_student("Sam")
        self.caller = Caller(user_id=self.student.id, role=Role.STUDENT)

    def _complete(self, a_correct=4, b_correct=1, student=None, exam=None, now=T0):
        student = student or self.student
        exam = exam or self.exam
        result_id = start_session(self.uow, exam.id, student.id, now=now).result.id
        for i, q in enumerate(self.a_questions):
            record_answer(self.uow, result_id, student.id, q.id, 0 if i < a_correct else 1)
        for i, q in enumerate(self.b_questions):
            record_answer(self.uow, result_id, student.id, q.id, 0 if i < b_correct else 1)
        return submit_session(self.uow, result_id, student.id, now=now)

    def test_generate_report(self):
        result = self._complete()
        generated = generate_report(self.uow, result.id, self.caller)
        report = generated.report

        self.assertEqual(report.indicators, {"A": 80, "B": 20})
        self.assertEqual(report.subjects, {"Mathematics": 80, "Physics": 20})
        self.assertEqual(report.content_breakdown["subjects"], {"Mathematics": 80, "Physics": 20})
        self.assertEqual(report.strengths, ["A"])
        self.assertEqual(report.weaknesses, ["B"])
        # 50% overall -> third tier (2 lines), weakness line, referral line
        self.assertEqual(len(report.recommendations), 4)
        self.assertEqual(report.assigned_professor, "Niels")
        self.assertEqual(report.professor_subject, "Physics")
        self.assertIn("Niels", report.recommendations[-1])

    def test_no_referral_without_weaknesses(self):
        result = self._complete(a_correct=5, b_correct=4)
        report = generate_report(self.uow, result.id, self.caller).report
        self.assertEqual(report.weaknesses, [])
        self.assertIsNone(report.assigned_professor)
        self.assertEqual(len(report.recommendations), 2)

    def test_no_referral_for_questions_without_subject(self):
        store = self.uow.store
        unnamed = store.add_professor("Ghost", "")
        store.add_professor("Nora", "No subject areas")
        loose = [store.add_question(unnamed, indicator="C") for _ in range(2)]
        exam = store.add_exam(self.a_questions[:2] + loose)

        result_id = start_session(self.uow, exam.id, self.student.id, now=T0).result.id
        for q in self.a_questions[:2]:
            record_answer(self.uow, result_id, self.student.id, q.id, 0)
        for q in loose:
            record_answer(self.uow, result_id, self.student.id, q.id, 1)
        submit_session(self.uow, result_id, self.student.id, now=T0)

        report = generate_report(self.uow, result_id, self.caller).report
        self.assertEqual(report.subjects, {"Mathematics": 100, "No subject": 0})
        self.assertEqual(report.weaknesses, ["C"])
        self.assertIsNone(report.assigned_professor)
        self.assertIsNone(report.professor_subject)
        self.assertNotIn("Nora", " ".join(report.recommendations))

    def test_generate_is_exactly_once(self):
        result = self._complete()
        generate_report(self.uow, result.id, self.caller)
        with self.assertRaises(ConflictError):
            generate_report(self.uow, result.id, ADMIN)
        self.assertEqual(len(self.uow.store.reports), 1)

    def test_generate_requires_completed(self):
        result_id = start_session(self.uow, self.exam.id, self.student.id).result.id
        with self.assertRaises(InvalidStateError):
            generate_report(self.uow, result_id, self.caller)

    def test_generate_unknown_result(self):
        with self.assertRaises(NotFoundError):
            generate_report(self.uow, 9999, ADMIN)

    def test_generate_for_someone_else(self):
        result = self._complete()
        eve = Caller(user_id=self.uow.store.add_student("Eve").id, role=Role.STUDENT)
        with self.assertRaises(ForbiddenError):
            generate_report(self.uow, result.id, eve)

    def test_admin_may_generate(self):
        result = self._complete()
        self.assertEqual(generate_report(self.uow, result.id, ADMIN).result.id, result.id)

    def test_check_report(self):
        result = self._complete()
        self.assertFalse(check_report(self.uow, result.id, self.caller).exists)
        report = generate_report(self.uow, result.id, self.caller).report
        checked = check_report(self.uow, result.id, self.caller)
        self.assertTrue(checked.exists)
        self.assertEqual(checked.report_id, report.id)

    def test_get_report_access(self):
        result = self._complete()
        generate_report(self.uow, result.id, self.caller)

        detail = get_report(self.uow, result.id, self.caller)
        self.assertEqual(detail.result.id, result.id)
        self.assertEqual(len(detail.review), 10)
        self.assertEqual(get_report(self.uow, result.id, ADMIN).report.id, detail.report.id)

        eve = Caller(user_id=self.uow.store.add_student("Eve").id, role=Role.STUDENT)
        with self.assertRaises(ForbiddenError):
            get_report(self.uow, result.id, eve)

    def test_get_missing_report(self):
        result = self._complete()
        with self.assertRaises(NotFoundError):
            get_report(self.uow, result.id, self.caller)


class StatisticsUseCaseTests(TestCase):
    def setUp(self):
        self.uow = InMemoryUnitOfWork()
        store = self.uow.store
        self.math = store.add_professor("Ada", "Mathematics")
        self.questions = [store.add_question(self.math, indicator="A") for _ in range(5)]
        self.exam_1 = store.add_exam(self.questions)
        self.exam_2 = store.add_exam(self.questions)
        self.student = store.add_student("Sam")

    def _complete(self, exam, correct, student=None, now=T0):
        student = student or self.student
        result_id = start_session(self.uow, exam.id, student.id, now=now).result.id
        for i, q in enumerate(self.questions):
            record_answer(self.uow, result_id, student.id, q.id, 0 if i < correct else 1)
        result = submit_session(self.uow, result_id, student.id, now=now)
        generate_report(self.uow, result_id, Caller(user_id=student.id, role=Role.STUDENT))
        return result

    def test_my_report_stats(self):
        self._complete(self.exam_1, correct=2, now=T0)
        latest = self._complete(self.exam_2, correct=4, now=T0 + timedelta(days=1))

        stats = my_report_stats(self.uow, self.student.id)
        self.assertEqual(stats.total_exams, 2)
        self.assertEqual(stats.total_reports, 2)
        self.assertEqual(stats.average_score, 60)
        self.assertEqual(stats.best_score, 80)
        self.assertEqual(stats.improvement_trend, "improving")
        self.assertEqual(stats.last_exam.result_id, latest.id)
        self.assertEqual(stats.last_exam.score, 80)
        self.assertEqual(stats.subject_performance[0].subject, "Mathematics")
        self.assertEqual(stats.subject_performance[0].average_percentage, 60)

    def test_my_report_stats_empty(self):
        stats = my_report_stats(self.uow, self.student.id)
        self.assertEqual(stats.total_exams, 0)
        self.assertEqual(stats.average_score, 0)
        self.assertEqual(stats.improvement_trend, "stable")
        self.assertIsNone(stats.last_exam)

    def test_admin_statistics(self):
        other = self.uow.store.add_student("Eve")
        self._complete(self.exam_1, correct=5)
        self._complete(self.exam_1, correct=1, student=other)

        stats = admin_statistics(self.uow, ADMIN)
        self.assertEqual(stats.overview.total_results, 2)
        self.assertEqual(stats.overview.total_students, 2)
        self.assertEqual(stats.overview.total_exams, 2)
        self.assertEqual(stats.overview.average_percentage, 60)
        self.assertEqual(sum(stats.score_distribution.values()), 2)
        self.assertEqual(stats.score_distribution["90-100%"], 1)
        self.assertEqual(stats.score_distribution["0-49%"], 1)
        # question 1 answered right by both, the rest by one of two
        self.assertEqual(stats.easiest_questions[-1].correct_rate, 100)
        self.assertEqual(stats.difficult_questions[0].correct_rate, 50)

    def test_admin_statistics_requires_admin(self):
        with self.assertRaises(ForbiddenError):
            admin_statistics(self.uow, Caller(user_id=self.student.id, role=Role.STUDENT))

    def test_student_report(self):
        self._complete(self.exam_1, correct=4, now=T0)
        self._complete(self.exam_2, correct=4, now=T0 + timedelta(days=1))

        report = student_report(self.uow, self.student.id, ADMIN)
        self.assertEqual(report.student.id, self.student.id)
        self.assertEqual(report.total_exams, 2)
        self.assertEqual(report.average_score, 80)
        self.assertEqual(report.trend, "stable")
        self.assertTrue(all(entry.report is not None for entry in report.results))

    def test_student_report_errors(self):
        with self.assertRaises(ForbiddenError):
            student_report(self.uow, self.student.id, Caller(user_id=self.student.id, role=Role.STUDENT))
        with self.assertRaises(NotFoundError):
            student_report(self.uow, 9999, ADMIN)
