# PATH: apps/domains/results/serializers/scoring.py
from __future__ import annotations

from rest_framework import serializers

from apps.domains.assignments.models import ExamAssignment


class WritingGradeSerializer(serializers.Serializer):
    """
    Human writing grade. Either score may be left out; the aggregate is
    only computed once both are present.
    """
    task1_score = serializers.FloatField(required=False, allow_null=True, min_value=0, max_value=9)
    task2_score = serializers.FloatField(required=False, allow_null=True, min_value=0, max_value=9)
    feedback = serializers.CharField(required=False, allow_blank=True, default="")


class AssignmentResultSerializer(serializers.ModelSerializer):
    exam_title = serializers.CharField(source="exam.title", read_only=True)

    class Meta:
        model = ExamAssignment
        fields = [
            "id",
            "candidate_code",
            "student",
            "exam",
            "exam_title",
            "status",
            "completed_at",
            "final_scores",
        ]
        read_only_fields = fields
