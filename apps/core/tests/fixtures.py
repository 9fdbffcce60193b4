# Shared builders for API tests.
from django.contrib.auth import get_user_model

from apps.api.common.auth_jwt import tokens_for_user
from apps.domains.exams.models import Question
from apps.domains.exams.services import ExamFactory
from apps.domains.professors.models import Professor

User = get_user_model()

PASSWORD = "s3cret-pass"


def make_user(email, role="STUDENT", name="Test User"):
    return User.objects.create_user(email=email, password=PASSWORD, name=name, role=role)


def make_admin(email="admin@example.com"):
    return make_user(email, role="ADMIN", name="Admin")


def authenticate(client, user):
    client.credentials(HTTP_AUTHORIZATION="Bearer " + tokens_for_user(user)["access"])


def make_professor(name="Ada Lovelace", subject="Mathematics"):
    return Professor.objects.create(name=name, subject=subject)


def make_question(professor, correct_answer=0, indicator="Algebra", header=None, is_active=True):
    return Question.objects.create(
        header=header or f"What is {indicator}?",
        alternatives=["a", "b", "c", "d"],
        correct_answer=correct_answer,
        educational_indicator=indicator,
        professor=professor,
        is_active=is_active,
    )


def make_exam(questions, status="ACTIVE", time_limit=None, title="Diagnostic"):
    return ExamFactory.generate(
        title=title,
        question_ids=[q.pk for q in questions],
        status=status,
        time_limit=time_limit,
    )
