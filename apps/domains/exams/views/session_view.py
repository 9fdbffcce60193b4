# PATH: apps/domains/exams/views/session_view.py
"""
Exam sessions (STUDENT)

  POST /exams/<exam_id>/start/              start or resume
  GET  /exams/<exam_id>/session/            questions + recorded answers + timer
  POST /exams/results/<result_id>/answer/   one answer per question
  POST /exams/results/<result_id>/finish/   score and close
  GET  /exams/my-results/                   most recent attempt, any status
  GET  /exams/<exam_id>/latest-result/      latest COMPLETED attempt at this exam

All session state is read from the database on every request.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from apps.core.permissions import IsStudentRole
from apps.domains.exams.serializers import StudentExamSerializer, StudentQuestionSerializer
from apps.domains.results.serializers import (
    AnswerInputSerializer,
    ExamAnswerSerializer,
    ExamResultSerializer,
    ReportSerializer,
)
from exampass.adapters.db.django.uow import DjangoUnitOfWork
from exampass.application.use_cases.exams import (
    get_session,
    latest_completed_result,
    most_recent_result,
    record_answer,
    start_session,
    submit_session,
)


class _StudentSessionView(APIView):
    permission_classes = [IsStudentRole]


class ExamStartView(_StudentSessionView):
    def post(self, request, exam_id: int):
        started = start_session(DjangoUnitOfWork(), exam_id=int(exam_id), user_id=request.user.pk)
        return Response(
            {
                "message": "Exam resumed" if started.resumed else "Exam started successfully",
                "resumed": started.resumed,
                "examResult": ExamResultSerializer(started.result).data,
                "exam": StudentExamSerializer(started.exam).data,
                "questions": StudentQuestionSerializer(started.questions, many=True).data,
            },
            status=status.HTTP_200_OK if started.resumed else status.HTTP_201_CREATED,
        )


class ExamSessionView(_StudentSessionView):
    def get(self, request, exam_id: int):
        snap = get_session(DjangoUnitOfWork(), exam_id=int(exam_id), user_id=request.user.pk)
        return Response({
            "examResult": ExamResultSerializer(snap.result).data,
            "exam": StudentExamSerializer(snap.exam).data,
            "questions": StudentQuestionSerializer(snap.questions, many=True).data,
            # JSON object keys are strings
            "answers": {str(qid): sel for qid, sel in snap.answers.items()},
            "elapsedSeconds": snap.elapsed_seconds,
            "remainingSeconds": snap.remaining_seconds,
        })


class ExamAnswerView(_StudentSessionView):
    @swagger_auto_schema(request_body=AnswerInputSerializer, responses={201: ExamAnswerSerializer})
    def post(self, request, result_id: int):
        serializer = AnswerInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        answer = record_answer(
            DjangoUnitOfWork(),
            result_id=int(result_id),
            user_id=request.user.pk,
            question_id=data["questionId"],
            selected_answer=data["selectedAnswer"],
            time_spent=data.get("timeSpent"),
        )
        return Response(
            {"message": "Answer saved", "answer": ExamAnswerSerializer(answer).data},
            status=status.HTTP_201_CREATED,
        )


class ExamFinishView(_StudentSessionView):
    def post(self, request, result_id: int):
        result = submit_session(DjangoUnitOfWork(), result_id=int(result_id), user_id=request.user.pk)
        return Response({
            "message": "Exam finished",
            "result": ExamResultSerializer(result).data,
        })


class MyResultsView(_StudentSessionView):
    def get(self, request):
        recent = most_recent_result(DjangoUnitOfWork(), request.user.pk)
        results = []
        if recent is not None:
            row = ExamResultSerializer(recent.result).data
            row["report"] = ReportSerializer(recent.report).data if recent.report else None
            results.append(row)
        return Response({
            "results": results,
            "total": len(results),
            "lastResult": results[0] if results else None,
        })


class LatestResultView(_StudentSessionView):
    def get(self, request, exam_id: int):
        result = latest_completed_result(DjangoUnitOfWork(), exam_id=int(exam_id), user_id=request.user.pk)
        return Response({"result": ExamResultSerializer(result).data})
