"""
Django Unit of Work: transaction.atomic wrapper (lazy imports)
"""
from __future__ import annotations


class DjangoUnitOfWork:
    """One transaction.atomic block per `with`. Repositories are built on first use."""

    def __init__(self) -> None:
        self._atomic = None
        self._exams = None
        self._questions = None
        self._professors = None
        self._results = None
        self._answers = None
        self._reports = None
        self._users = None

    @property
    def exams(self):
        from exampass.adapters.db.django.repositories_exams import DjangoExamRepository
        if self._exams is None:
            self._exams = DjangoExamRepository()
        return self._exams

    @property
    def questions(self):
        from exampass.adapters.db.django.repositories_exams import DjangoQuestionRepository
        if self._questions is None:
            self._questions = DjangoQuestionRepository()
        return self._questions

    @property
    def professors(self):
        from exampass.adapters.db.django.repositories_professors import DjangoProfessorRepository
        if self._professors is None:
            self._professors = DjangoProfessorRepository()
        return self._professors

    @property
    def results(self):
        from exampass.adapters.db.django.repositories_results import DjangoExamResultRepository
        if self._results is None:
            self._results = DjangoExamResultRepository()
        return self._results

    @property
    def answers(self):
        from exampass.adapters.db.django.repositories_results import DjangoExamAnswerRepository
        if self._answers is None:
            self._answers = DjangoExamAnswerRepository()
        return self._answers

    @property
    def reports(self):
        from exampass.adapters.db.django.repositories_results import DjangoExamReportRepository
        if self._reports is None:
            self._reports = DjangoExamReportRepository()
        return self._reports

    @property
    def users(self):
        from exampass.adapters.db.django.repositories_core import DjangoUserRepository
        if self._users is None:
            self._users = DjangoUserRepository()
        return self._users

    def __enter__(self) -> "DjangoUnitOfWork":
        from django.db import transaction
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._atomic is not None:
            atomic, self._atomic = self._atomic, None
            atomic.__exit__(exc_type, exc_val, exc_tb)
