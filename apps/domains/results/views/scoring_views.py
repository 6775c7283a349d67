# PATH: apps/domains/results/views/scoring_views.py
from __future__ import annotations

import logging

from django.db import transaction
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import TenantResolvedAndStaff
from apps.domains.assignments.exceptions import AssignmentNotFound
from apps.domains.assignments.models import ExamAssignment
from apps.domains.results.serializers.scoring import (
    AssignmentResultSerializer,
    WritingGradeSerializer,
)
from apps.domains.results.services.scoring_service import ScoringService

logger = logging.getLogger(__name__)


class GradingView(APIView):
    """
    Staff grading endpoints keyed by candidate code, scoped to request.tenant.
    Scoring does not look at status: re-grading overwrites.
    """
    permission_classes = [IsAuthenticated, TenantResolvedAndStaff]

    def get_assignment(self, request, candidate_code: str) -> ExamAssignment:
        assignment = (
            ExamAssignment.objects
            .select_related("exam")
            .filter(
                candidate_code=str(candidate_code).strip(),
                tenant=request.tenant,
                is_active=True,
            )
            .first()
        )
        if assignment is None:
            raise AssignmentNotFound()
        return assignment


class AssignmentResultView(GradingView):
    def get(self, request, candidate_code: str):
        assignment = self.get_assignment(request, candidate_code)
        return Response(AssignmentResultSerializer(assignment).data)


class ListeningScoreView(GradingView):
    def post(self, request, candidate_code: str):
        assignment = self.get_assignment(request, candidate_code)
        result = ScoringService.score_listening(assignment)
        return Response(result.to_dict())


class ReadingScoreView(GradingView):
    def post(self, request, candidate_code: str):
        assignment = self.get_assignment(request, candidate_code)
        result = ScoringService.score_reading(assignment)
        return Response(result.to_dict())


class WritingScoreView(GradingView):
    """
    body: {"task1_score", "task2_score", "feedback"} (scores 0-9, optional)

    400 no_answers_submitted when the candidate saved no writing, or saved
    only blank task texts.
    """

    def post(self, request, candidate_code: str):
        serializer = WritingGradeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        assignment = self.get_assignment(request, candidate_code)
        result = ScoringService.score_writing(assignment, **serializer.validated_data)
        return Response(result.to_dict())


class AutoGradeView(GradingView):
    """listening + reading in one transaction; a missing section stores nothing."""

    def post(self, request, candidate_code: str):
        assignment = self.get_assignment(request, candidate_code)
        scores = ScoringService.score_all(assignment)
        return Response({section: score.to_dict() for section, score in scores.items()})


class SendResultsView(GradingView):
    def post(self, request, candidate_code: str):
        from apps.support.messaging.tasks import notify_results_ready

        assignment = self.get_assignment(request, candidate_code)
        assignment_id = int(assignment.id)

        transaction.on_commit(lambda: notify_results_ready.delay(assignment_id), robust=True)
        logger.info("results notice scheduled code=%s", assignment.masked_code)
        return Response({"detail": "Results notification scheduled"}, status=status.HTTP_202_ACCEPTED)
