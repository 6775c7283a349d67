# PATH: apps/domains/assignments/views/candidate_views.py
"""
Candidate-facing endpoints.

Auth: X-Candidate-Code header only (no JWT, no tenant header).
request.auth carries the validated candidate code.
"""
from __future__ import annotations

from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.assignments.authentication import CandidateCodeAuthentication
from apps.domains.assignments.permissions import IsCandidate
from apps.domains.assignments.serializers.candidate import (
    CandidateAssignmentSerializer,
    SectionProgressSerializer,
    SubmitAnswersSerializer,
)
from apps.domains.assignments.services.session_service import ExamSessionService
from apps.domains.exams.serializers.exam_content import ExamContentSerializer


class CandidateView(APIView):
    authentication_classes = [CandidateCodeAuthentication]
    permission_classes = [IsCandidate]


class CandidateAssignmentView(CandidateView):
    def get(self, request):
        assignment = ExamSessionService.fetch(request.auth)
        return Response(CandidateAssignmentSerializer(assignment).data)


class CandidateStartView(CandidateView):
    def post(self, request):
        assignment = ExamSessionService.start(request.auth)
        return Response(CandidateAssignmentSerializer(assignment).data)


class CandidateContentView(CandidateView):
    def get(self, request):
        assignment = ExamSessionService.content(request.auth)
        return Response({
            "assignment": CandidateAssignmentSerializer(assignment).data,
            "exam": ExamContentSerializer(assignment.exam).data,
        })


class CandidateProgressView(CandidateView):
    def put(self, request):
        serializer = SectionProgressSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        section = serializer.validated_data["section"]

        ExamSessionService.save_section_progress(
            request.auth,
            section,
            serializer.validated_data["payload"],
        )
        return Response({"detail": f"{section} progress saved", "section": section})


class CandidateSubmitView(CandidateView):
    def post(self, request):
        serializer = SubmitAnswersSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        assignment = ExamSessionService.submit(
            request.auth,
            serializer.validated_data["final_answers"],
        )
        return Response(CandidateAssignmentSerializer(assignment).data)
