from django.db import models

from apps.core.models.base import BaseModel


class WritingTask(BaseModel):
    """Writing prompt (task1 / task2). Graded by a human, never auto-scored."""

    class Task(models.TextChoices):
        TASK1 = "task1", "Task 1"
        TASK2 = "task2", "Task 2"

    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="writing_tasks",
    )

    task = models.CharField(max_length=10, choices=Task.choices)
    prompt = models.TextField()
    visual_url = models.URLField(max_length=512, blank=True)

    min_words = models.PositiveIntegerField(default=150)
    time_minutes = models.PositiveIntegerField(default=20)

    class Meta:
        db_table = "exams_writing_task"
        unique_together = ("exam", "task")
        ordering = ["task"]

    def __str__(self):
        return f"{self.exam_id}:{self.task}"
