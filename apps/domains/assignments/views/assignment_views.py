# PATH: apps/domains/assignments/views/assignment_views.py
from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from apps.core.permissions import TenantResolvedAndStaff
from apps.domains.assignments.filters import ExamAssignmentFilter
from apps.domains.assignments.models import ExamAssignment
from apps.domains.assignments.serializers.exam_assignment import (
    ExamAssignmentCreateSerializer,
    ExamAssignmentSerializer,
    ExamAssignmentUpdateSerializer,
)
from apps.domains.assignments.services.session_service import ExamSessionService


class ExamAssignmentViewSet(ModelViewSet):
    """
    Staff management of exam assignments (tenant scoped).

    - POST   : issue a candidate code
    - PATCH  : window / notes only
    - DELETE : soft delete (is_active=False)
    """

    serializer_class = ExamAssignmentSerializer
    permission_classes = [IsAuthenticated, TenantResolvedAndStaff]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_class = ExamAssignmentFilter
    search_fields = ["candidate_code", "student__username", "exam__title"]
    ordering_fields = ["created_at", "window_end", "status"]

    def get_queryset(self):
        return (
            ExamAssignment.objects
            .filter(tenant=self.request.tenant, is_active=True)
            .select_related("exam", "student", "issued_by")
        )

    def create(self, request, *args, **kwargs):
        serializer = ExamAssignmentCreateSerializer(
            data=request.data,
            context={"request": request, "tenant": request.tenant},
        )
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        assignment = ExamSessionService.create(
            student=data["student"],
            exam=data["exam"],
            tenant=request.tenant,
            issued_by=request.user,
            window_start=data.get("window_start"),
            window_end=data.get("window_end"),
            notes=data.get("notes") or "",
        )
        return Response(
            ExamAssignmentSerializer(assignment).data,
            status=status.HTTP_201_CREATED,
        )

    def partial_update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = ExamAssignmentUpdateSerializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        assignment = ExamSessionService.update(
            instance.id,
            tenant=request.tenant,
            **serializer.validated_data,
        )
        return Response(ExamAssignmentSerializer(assignment).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        ExamSessionService.deactivate(instance.id, tenant=request.tenant)
        return Response(status=status.HTTP_204_NO_CONTENT)
