# PATH: apps/domains/assignments/serializers/candidate.py
from __future__ import annotations

from rest_framework import serializers

from apps.domains.assignments.dto.answer_payload import (
    SECTION_NAMES,
    parse_answer_sheet,
    parse_section_answers,
)
from apps.domains.assignments.models import ExamAssignment


class CandidateAssignmentSerializer(serializers.ModelSerializer):
    """What a candidate may see about their own session (no scores)."""
    exam_title = serializers.CharField(source="exam.title", read_only=True)

    class Meta:
        model = ExamAssignment
        fields = [
            "candidate_code",
            "exam",
            "exam_title",
            "window_start",
            "window_end",
            "status",
            "answers",
            "completed_at",
        ]
        read_only_fields = fields


class SectionProgressSerializer(serializers.Serializer):
    """
    {"section": "listening", "answers": {"parts": {...}, "time_spent": 120}}

    validated_data["payload"] is the typed section payload.
    """
    section = serializers.ChoiceField(choices=SECTION_NAMES)
    answers = serializers.DictField()

    def validate(self, attrs):
        try:
            attrs["payload"] = parse_section_answers(attrs["section"], attrs["answers"])
        except ValueError as e:
            raise serializers.ValidationError({"answers": str(e)})
        return attrs


class SubmitAnswersSerializer(serializers.Serializer):
    """
    {"answers": {"listening": {...}, "reading": {...}, "writing": {...}}}

    answers omitted -> the saved progress is submitted as-is.
    """
    answers = serializers.DictField(required=False, allow_null=True)

    def validate(self, attrs):
        raw = attrs.get("answers")
        if raw is None:
            attrs["final_answers"] = None
            return attrs
        try:
            attrs["final_answers"] = parse_answer_sheet(raw)
        except ValueError as e:
            raise serializers.ValidationError({"answers": str(e)})
        return attrs
