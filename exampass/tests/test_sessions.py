from datetime import datetime, timedelta, timezone
from unittest import TestCase

from exampass.application.use_cases.exams import (
    available_exam,
    get_session,
    latest_completed_result,
    most_recent_result,
    record_answer,
    start_session,
    submit_session,
)
from exampass.domain.exams.errors import (
    ConflictError,
    DomainValidationError,
    InvalidStateError,
    NotFoundError,
)

from .fakes import InMemoryUnitOfWork

T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


class SessionUseCaseTests(TestCase):
    def setUp(self):
        self.uow = InMemoryUnitOfWork()
        store = self.uow.store
        prof = store.add_professor("Ada", "Mathematics")
        self.q1 = store.add_question(prof, correct_answer=1)
        self.q2 = store.add_question(prof, correct_answer=2)
        self.q3 = store.add_question(prof, correct_answer=3)
        self.exam = store.add_exam([self.q1, self.q2, self.q3], time_limit=10)
        self.student = store.add_student("Sam")

    def _start(self, now=T0):
        return start_session(self.uow, self.exam.id, self.student.id, now=now)

    # start ---------------------------------------------------------------

    def test_start_creates_in_progress_result(self):
        started = self._start()
        self.assertFalse(started.resumed)
        self.assertTrue(started.result.is_in_progress)
        self.assertEqual(started.result.total_questions, 3)
        self.assertEqual(started.result.total_score, 0)
        self.assertEqual([q.order for q in started.questions], [1, 2, 3])

    def test_start_twice_resumes_same_result(self):
        first = self._start()
        second = self._start(now=T0 + timedelta(minutes=1))
        self.assertTrue(second.resumed)
        self.assertEqual(first.result.id, second.result.id)
        self.assertEqual(len(self.uow.store.results), 1)

    def test_start_unknown_exam(self):
        with self.assertRaises(NotFoundError):
            start_session(self.uow, 9999, self.student.id)

    def test_start_inactive_exam(self):
        draft = self.uow.store.add_exam([self.q1], status="DRAFT")
        with self.assertRaises(InvalidStateError):
            start_session(self.uow, draft.id, self.student.id)

    def test_start_after_completion_conflicts(self):
        started = self._start()
        submit_session(self.uow, started.result.id, self.student.id, now=T0)
        with self.assertRaises(ConflictError):
            self._start()

    # session -------------------------------------------------------------

    def test_get_session_reports_answers_and_timer(self):
        started = self._start()
        record_answer(self.uow, started.result.id, self.student.id, self.q2.id, 0)

        snap = get_session(self.uow, self.exam.id, self.student.id, now=T0 + timedelta(seconds=120))
        self.assertEqual(snap.result.id, started.result.id)
        self.assertEqual(snap.answers, {self.q2.id: 0})
        self.assertEqual(snap.elapsed_seconds, 120)
        self.assertEqual(snap.remaining_seconds, 480)

    def test_get_session_without_limit(self):
        exam = self.uow.store.add_exam([self.q1], time_limit=0)
        start_session(self.uow, exam.id, self.student.id, now=T0)
        snap = get_session(self.uow, exam.id, self.student.id, now=T0 + timedelta(hours=5))
        self.assertIsNone(snap.remaining_seconds)

    def test_get_session_requires_in_progress(self):
        with self.assertRaises(NotFoundError):
            get_session(self.uow, self.exam.id, self.student.id)

    # answer --------------------------------------------------------------

    def test_answer_correctness(self):
        result_id = self._start().result.id
        right = record_answer(self.uow, result_id, self.student.id, self.q1.id, 1, time_spent=12)
        wrong = record_answer(self.uow, result_id, self.student.id, self.q2.id, 0)
        self.assertTrue(right.is_correct)
        self.assertEqual(right.time_spent, 12)
        self.assertFalse(wrong.is_correct)
        # score is only computed on submit
        self.assertEqual(self.uow.store.results[result_id].total_score, 0)

    def test_answer_twice_conflicts(self):
        result_id = self._start().result.id
        record_answer(self.uow, result_id, self.student.id, self.q1.id, 1)
        with self.assertRaises(ConflictError):
            record_answer(self.uow, result_id, self.student.id, self.q1.id, 2)
        self.assertEqual(len(self.uow.store.answers), 1)

    def test_answer_other_users_result(self):
        result_id = self._start().result.id
        other = self.uow.store.add_student("Eve")
        with self.assertRaises(NotFoundError):
            record_answer(self.uow, result_id, other.id, self.q1.id, 1)

    def test_answer_unknown_question(self):
        result_id = self._start().result.id
        with self.assertRaises(NotFoundError):
            record_answer(self.uow, result_id, self.student.id, 9999, 1)

    def test_answer_question_outside_exam(self):
        prof = self.uow.store.add_professor("Bob", "Physics")
        stray = self.uow.store.add_question(prof)
        result_id = self._start().result.id
        with self.assertRaises(NotFoundError):
            record_answer(self.uow, result_id, self.student.id, stray.id, 0)

    def test_answer_out_of_range(self):
        result_id = self._start().result.id
        with self.assertRaises(DomainValidationError):
            record_answer(self.uow, result_id, self.student.id, self.q1.id, 4)
        with self.assertRaises(DomainValidationError):
            record_answer(self.uow, result_id, self.student.id, self.q1.id, 1, time_spent=-1)

    def test_answer_out_of_range_on_unavailable_result(self):
        result_id = self._start().result.id
        eve = self.uow.store.add_student("Eve")
        with self.assertRaises(NotFoundError):
            record_answer(self.uow, result_id, eve.id, self.q1.id, 9)
        submit_session(self.uow, result_id, self.student.id)
        with self.assertRaises(NotFoundError):
            record_answer(self.uow, result_id, self.student.id, self.q1.id, -1, time_spent=-5)

    def test_answer_after_submit(self):
        result_id = self._start().result.id
        submit_session(self.uow, result_id, self.student.id)
        with self.assertRaises(NotFoundError):
            record_answer(self.uow, result_id, self.student.id, self.q1.id, 1)

    # submit --------------------------------------------------------------

    def test_submit_scores_against_captured_total(self):
        result_id = self._start().result.id
        record_answer(self.uow, result_id, self.student.id, self.q1.id, 1)
        record_answer(self.uow, result_id, self.student.id, self.q2.id, 2)
        record_answer(self.uow, result_id, self.student.id, self.q3.id, 0)

        done = submit_session(self.uow, result_id, self.student.id, now=T0 + timedelta(minutes=5))
        self.assertTrue(done.is_completed)
        self.assertEqual(done.total_score, 2)
        self.assertEqual(done.percentage, 67)
        self.assertEqual(done.completed_at, T0 + timedelta(minutes=5))

    def test_submit_twice_fails_without_rescoring(self):
        result_id = self._start().result.id
        record_answer(self.uow, result_id, self.student.id, self.q1.id, 1)
        first = submit_session(self.uow, result_id, self.student.id)
        with self.assertRaises(NotFoundError):
            submit_session(self.uow, result_id, self.student.id)
        self.assertEqual(self.uow.store.results[result_id].percentage, first.percentage)

    # queries -------------------------------------------------------------

    def test_available_exam_skips_completed(self):
        later = self.uow.store.add_exam([self.q1])
        exam, questions = available_exam(self.uow, self.student.id)
        self.assertEqual(exam.id, self.exam.id)
        self.assertEqual(len(questions), 3)

        result_id = self._start().result.id
        submit_session(self.uow, result_id, self.student.id)
        exam, _ = available_exam(self.uow, self.student.id)
        self.assertEqual(exam.id, later.id)

    def test_recent_and_latest_completed_are_distinct(self):
        result_id = self._start().result.id
        with self.assertRaises(NotFoundError):
            latest_completed_result(self.uow, self.exam.id, self.student.id)

        recent = most_recent_result(self.uow, self.student.id)
        self.assertEqual(recent.result.id, result_id)
        self.assertIsNone(recent.report)

        submit_session(self.uow, result_id, self.student.id)
        self.assertEqual(latest_completed_result(self.uow, self.exam.id, self.student.id).id, result_id)

    def test_most_recent_result_none(self):
        self.assertIsNone(most_recent_result(self.uow, self.student.id))
