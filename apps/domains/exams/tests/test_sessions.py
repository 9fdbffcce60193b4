from rest_framework import status
from rest_framework.test import APITestCase

from apps.core.tests.fixtures import authenticate, make_admin, make_exam, make_professor, make_question, make_user
from apps.domains.results.models import ExamAnswer, ExamResult


class ExamSessionFlowTest(APITestCase):
    def setUp(self):
        professor = make_professor()
        self.q1 = make_question(professor, correct_answer=0)
        self.q2 = make_question(professor, correct_answer=1)
        self.q3 = make_question(professor, correct_answer=2)
        self.exam = make_exam([self.q1, self.q2, self.q3], time_limit=20)
        self.student = make_user("sam@example.com", name="Sam")
        authenticate(self.client, self.student)

    def _start(self):
        return self.client.post(f"/api/v1/exams/{self.exam.id}/start/")

    def _answer(self, result_id, question, selected, **extra):
        data = {"questionId": question.id, "selectedAnswer": selected, **extra}
        return self.client.post(f"/api/v1/exams/results/{result_id}/answer/", data, format="json")

    def _finish(self, result_id):
        return self.client.post(f"/api/v1/exams/results/{result_id}/finish/")

    def test_full_attempt(self):
        response = self._start()
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertFalse(response.data["resumed"])
        self.assertEqual(response.data["examResult"]["status"], "IN_PROGRESS")
        self.assertEqual(len(response.data["questions"]), 3)
        self.assertNotIn("correctAnswer", response.data["questions"][0])
        result_id = response.data["examResult"]["id"]

        response = self._answer(result_id, self.q1, 0, timeSpent=30)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data["answer"]["isCorrect"])
        self.assertEqual(self._answer(result_id, self.q2, 1).status_code, status.HTTP_201_CREATED)
        self.assertEqual(self._answer(result_id, self.q3, 3).status_code, status.HTTP_201_CREATED)

        response = self.client.get(f"/api/v1/exams/{self.exam.id}/session/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["answers"][str(self.q3.id)], 3)
        self.assertLessEqual(response.data["remainingSeconds"], 20 * 60)

        response = self._finish(result_id)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["result"]["status"], "COMPLETED")
        self.assertEqual(response.data["result"]["totalScore"], 2)
        self.assertEqual(response.data["result"]["percentage"], 67)

        response = self.client.get(f"/api/v1/exams/{self.exam.id}/latest-result/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["result"]["id"], result_id)

    def test_start_resumes(self):
        first = self._start()
        second = self._start()
        self.assertEqual(second.status_code, status.HTTP_200_OK)
        self.assertTrue(second.data["resumed"])
        self.assertEqual(first.data["examResult"]["id"], second.data["examResult"]["id"])
        self.assertEqual(ExamResult.objects.filter(user=self.student).count(), 1)

    def test_start_after_completion(self):
        result_id = self._start().data["examResult"]["id"]
        self._finish(result_id)
        response = self._start()
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "CONFLICT")

    def test_start_inactive_and_missing_exam(self):
        draft = make_exam([self.q1], status="DRAFT")
        response = self.client.post(f"/api/v1/exams/{draft.id}/start/")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_STATE")
        self.assertEqual(self.client.post("/api/v1/exams/999/start/").status_code, status.HTTP_404_NOT_FOUND)

    def test_second_answer_conflicts(self):
        result_id = self._start().data["examResult"]["id"]
        self._answer(result_id, self.q1, 0)
        response = self._answer(result_id, self.q1, 1)
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(ExamAnswer.objects.filter(exam_result_id=result_id).count(), 1)

    def test_answer_validation(self):
        result_id = self._start().data["examResult"]["id"]
        self.assertEqual(self._answer(result_id, self.q1, 7).status_code, status.HTTP_400_BAD_REQUEST)
        stray = make_question(make_professor("Niels Bohr", "Physics"))
        self.assertEqual(self._answer(result_id, stray, 0).status_code, status.HTTP_404_NOT_FOUND)

    def test_other_student_cannot_answer(self):
        result_id = self._start().data["examResult"]["id"]
        authenticate(self.client, make_user("eve@example.com"))
        self.assertEqual(self._answer(result_id, self.q1, 0).status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self._answer(result_id, self.q1, 7).status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self._finish(result_id).status_code, status.HTTP_404_NOT_FOUND)

    def test_finish_twice(self):
        result_id = self._start().data["examResult"]["id"]
        self._answer(result_id, self.q1, 0)
        self.assertEqual(self._finish(result_id).status_code, status.HTTP_200_OK)
        response = self._finish(result_id)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(ExamResult.objects.get(pk=result_id).percentage, 33)

    def test_session_without_attempt(self):
        response = self.client.get(f"/api/v1/exams/{self.exam.id}/session/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_my_results(self):
        response = self.client.get("/api/v1/exams/my-results/")
        self.assertEqual(response.data["results"], [])
        self.assertIsNone(response.data["lastResult"])

        result_id = self._start().data["examResult"]["id"]
        response = self.client.get("/api/v1/exams/my-results/")
        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["lastResult"]["id"], result_id)
        self.assertIsNone(response.data["lastResult"]["report"])

    def test_latest_result_needs_completion(self):
        self._start()
        response = self.client.get(f"/api/v1/exams/{self.exam.id}/latest-result/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_admin_cannot_take_exams(self):
        authenticate(self.client, make_admin())
        self.assertEqual(self._start().status_code, status.HTTP_403_FORBIDDEN)
