from rest_framework import status
from rest_framework.test import APITestCase

from apps.core.tests.fixtures import (
    authenticate,
    make_admin,
    make_exam,
    make_professor,
    make_question,
    make_user,
)
from apps.domains.exams.models import Question

URL = "/api/v1/questions/"


class QuestionViewSetTest(APITestCase):
    def setUp(self):
        self.admin = make_admin()
        self.professor = make_professor()
        authenticate(self.client, self.admin)

    def _payload(self, **overrides):
        data = {
            "header": "2 + 2 = ?",
            "alternatives": ["3", "4", "5", "22"],
            "correctAnswer": 1,
            "educationalIndicator": "Arithmetic",
            "professorId": self.professor.id,
        }
        data.update(overrides)
        return data

    # create ---------------------------------------------------------------

    def test_create_question(self):
        response = self.client.post(URL, self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["correctAnswer"], 1)
        self.assertEqual(response.data["professor"]["id"], self.professor.id)
        self.assertTrue(response.data["isActive"])

    def test_requires_four_alternatives(self):
        response = self.client.post(URL, self._payload(alternatives=["a", "b", "c"]), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("alternatives", response.data["fields"])

    def test_rejects_blank_alternative(self):
        response = self.client.post(URL, self._payload(alternatives=["a", " ", "c", "d"]), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_correct_answer_range(self):
        response = self.client.post(URL, self._payload(correctAnswer=4), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("correctAnswer", response.data["fields"])

    def test_unknown_professor(self):
        response = self.client.post(URL, self._payload(professorId=999), format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "NOT_FOUND")

    def test_student_cannot_create(self):
        authenticate(self.client, make_user("sam@example.com"))
        response = self.client.post(URL, self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    # read -----------------------------------------------------------------

    def test_correct_answer_hidden_from_students(self):
        question = make_question(self.professor, correct_answer=2)
        authenticate(self.client, make_user("sam@example.com"))
        response = self.client.get(f"{URL}{question.id}/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertNotIn("correctAnswer", response.data)

    def test_paginated_list(self):
        for i in range(3):
            make_question(self.professor, indicator=f"Topic {i}")
        response = self.client.get(URL, {"limit": 2, "page": 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total"], 3)
        self.assertEqual(response.data["pages"], 2)
        self.assertEqual(response.data["currentPage"], 2)
        self.assertEqual(len(response.data["results"]), 1)

    def test_filters_combine(self):
        other = make_professor("Niels Bohr", "Physics")
        make_question(self.professor, indicator="Geometry")
        make_question(other, indicator="Geometry of orbits")
        make_question(self.professor, indicator="Algebra", is_active=False)

        response = self.client.get(URL, {"search": "geometry", "professor": self.professor.id})
        self.assertEqual(response.data["total"], 1)

        response = self.client.get(URL, {"isActive": "false"})
        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["results"][0]["educationalIndicator"], "Algebra")

    def test_indicators(self):
        make_question(self.professor, indicator="Geometry")
        make_question(self.professor, indicator="Algebra")
        make_question(self.professor, indicator="Algebra")
        response = self.client.get(f"{URL}indicators/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["indicators"], ["Algebra", "Geometry"])

    # write ----------------------------------------------------------------

    def test_toggle(self):
        question = make_question(self.professor)
        response = self.client.patch(f"{URL}{question.id}/toggle/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data["question"]["isActive"])
        question.refresh_from_db()
        self.assertFalse(question.is_active)

    def test_delete_unused_question(self):
        question = make_question(self.professor)
        response = self.client.delete(f"{URL}{question.id}/")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Question.objects.filter(id=question.id).exists())

    def test_delete_refused_when_in_exam(self):
        question = make_question(self.professor)
        make_exam([question])
        response = self.client.delete(f"{URL}{question.id}/")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_STATE")
        self.assertTrue(Question.objects.filter(id=question.id).exists())
