# apps/domains/exams/serializers/exam_content.py
from rest_framework import serializers

from apps.domains.exams.models import Exam, ExamPart, Section, WritingTask


class ExamPartContentSerializer(serializers.ModelSerializer):
    """Candidate view of a part. The answer key is never serialized."""

    class Meta:
        model = ExamPart
        fields = [
            "id",
            "section",
            "label",
            "order",
            "content",
            "number_of_questions",
            "passage",
            "audio_url",
        ]
        read_only_fields = fields


class WritingTaskContentSerializer(serializers.ModelSerializer):
    class Meta:
        model = WritingTask
        fields = [
            "id",
            "task",
            "prompt",
            "visual_url",
            "min_words",
            "time_minutes",
        ]
        read_only_fields = fields


class ExamContentSerializer(serializers.ModelSerializer):
    listening = serializers.SerializerMethodField()
    reading = serializers.SerializerMethodField()
    writing = WritingTaskContentSerializer(source="writing_tasks", many=True, read_only=True)

    class Meta:
        model = Exam
        fields = [
            "id",
            "title",
            "description",
            "listening",
            "reading",
            "writing",
        ]

    def _parts(self, obj, section):
        qs = obj.parts.filter(section=section).order_by("order", "id")
        return ExamPartContentSerializer(qs, many=True).data

    def get_listening(self, obj):
        return self._parts(obj, Section.LISTENING)

    def get_reading(self, obj):
        return self._parts(obj, Section.READING)
