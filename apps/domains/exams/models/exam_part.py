# apps/domains/exams/models/exam_part.py
from django.db import models

from apps.core.models.base import BaseModel


class Section(models.TextChoices):
    LISTENING = "listening", "Listening"
    READING = "reading", "Reading"
    WRITING = "writing", "Writing"


class ExamPart(BaseModel):
    """
    One listening recording / one reading passage.

    content:
      ordered list of question containers, e.g.
      [
        {"id": "c1", "type": "completion", "content": "Name: @@ ... Age: @@"},
        {"id": "c2", "type": "multiple-choice", "questions": [{...}, {...}]},
      ]

    answers (answer key, never shown to candidates):
      {"1": "A", "2": ["colour", "color"], ...}
    """

    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="parts",
    )

    section = models.CharField(
        max_length=20,
        choices=[
            (Section.LISTENING.value, Section.LISTENING.label),
            (Section.READING.value, Section.READING.label),
        ],
    )

    # PART_1, PART_2 ...
    label = models.CharField(max_length=20)
    order = models.PositiveIntegerField(default=1)

    content = models.JSONField(default=list, blank=True)
    number_of_questions = models.PositiveIntegerField(default=10)
    answers = models.JSONField(default=dict, blank=True)

    passage = models.TextField(blank=True)
    audio_url = models.URLField(max_length=512, blank=True)

    class Meta:
        db_table = "exams_exam_part"
        unique_together = ("exam", "section", "order")
        ordering = ["section", "order", "id"]

    def __str__(self):
        return f"{self.exam_id}:{self.section}:{self.label}"
