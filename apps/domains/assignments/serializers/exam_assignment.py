# PATH: apps/domains/assignments/serializers/exam_assignment.py
from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from apps.domains.assignments.models import ExamAssignment
from apps.domains.exams.models import Exam


class ExamAssignmentSerializer(serializers.ModelSerializer):
    exam_title = serializers.CharField(source="exam.title", read_only=True)
    student_username = serializers.CharField(source="student.get_username", read_only=True)

    class Meta:
        model = ExamAssignment
        fields = [
            "id",
            "candidate_code",
            "student",
            "student_username",
            "exam",
            "exam_title",
            "issued_by",
            "window_start",
            "window_end",
            "status",
            "answers",
            "final_scores",
            "completed_at",
            "notes",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


def _check_window(attrs, instance=None):
    start = attrs.get("window_start", getattr(instance, "window_start", None))
    end = attrs.get("window_end", getattr(instance, "window_end", None))
    if start and end and end <= start:
        raise serializers.ValidationError({"window_end": "window_end must be after window_start"})
    return attrs


class ExamAssignmentCreateSerializer(serializers.Serializer):
    """
    Input only. Tenant comes from the request, the exam must belong to it
    (checked again by the service).
    """
    student = serializers.PrimaryKeyRelatedField(queryset=get_user_model().objects.all())
    exam = serializers.PrimaryKeyRelatedField(queryset=Exam.objects.all())
    window_start = serializers.DateTimeField(required=False, allow_null=True)
    window_end = serializers.DateTimeField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_exam(self, exam):
        tenant = self.context.get("tenant")
        if tenant is not None and exam.tenant_id != tenant.id:
            raise serializers.ValidationError("Test not found in this center")
        if not exam.is_active:
            raise serializers.ValidationError("Test is inactive")
        return exam

    def validate(self, attrs):
        return _check_window(attrs)


class ExamAssignmentUpdateSerializer(serializers.Serializer):
    """PATCH body. Status is not editable here."""
    window_start = serializers.DateTimeField(required=False, allow_null=True)
    window_end = serializers.DateTimeField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if "status" in self.initial_data:
            raise serializers.ValidationError({"status": "status cannot be changed directly"})
        return _check_window(attrs, self.instance)
