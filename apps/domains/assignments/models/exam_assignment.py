# apps/domains/assignments/models/exam_assignment.py
from __future__ import annotations

from typing import Optional

from django.conf import settings
from django.db import models
from django.db.models import Q

from apps.core.models.base import BaseModel
from apps.domains.assignments.dto.answer_payload import (
    SectionAnswers,
    parse_section_answers,
)
from apps.domains.assignments.exceptions import InvalidStatusTransition


class ExamAssignment(BaseModel):
    """
    One candidate's attempt at one exam (aggregate root).

    Rules
    --------------------------------------------------
    1) candidate_code: 10 digits, unique, issued once, never changed.
       It is the only credential of the exam session.

    2) status only moves forward:
         pending -> in_progress -> completed
         pending | in_progress -> expired
       use transition_to(); never assign status directly.

    3) completed_at is set iff status == completed (DB check constraint).

    4) answers is writable only while pending / in_progress.
       final_scores is written by the scoring engine only.
    """

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        IN_PROGRESS = "in_progress", "In progress"
        COMPLETED = "completed", "Completed"
        EXPIRED = "expired", "Expired"

    TERMINAL_STATUSES = (Status.COMPLETED, Status.EXPIRED)

    ALLOWED_TRANSITIONS = {
        Status.PENDING: (Status.IN_PROGRESS, Status.COMPLETED, Status.EXPIRED),
        Status.IN_PROGRESS: (Status.COMPLETED, Status.EXPIRED),
        Status.COMPLETED: (),
        Status.EXPIRED: (),
    }

    candidate_code = models.CharField(max_length=10, unique=True, editable=False)

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="exam_assignments",
    )
    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="assignments",
    )
    tenant = models.ForeignKey(
        "core.Tenant",
        on_delete=models.CASCADE,
        related_name="exam_assignments",
    )
    issued_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="issued_exam_assignments",
    )

    # window (either bound may be open)
    window_start = models.DateTimeField(null=True, blank=True)
    window_end = models.DateTimeField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )

    # {"listening": {...}, "reading": {...}, "writing": {...}}
    answers = models.JSONField(default=dict, blank=True)

    # {"listening": {"correct_count": ..., "band_score": ...}, ...}
    final_scores = models.JSONField(default=dict, blank=True)

    completed_at = models.DateTimeField(null=True, blank=True)

    notes = models.TextField(blank=True, default="")
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "assignments_exam_assignment"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["tenant", "status"], name="assignment_tenant_status_idx"),
            models.Index(fields=["exam", "student"], name="assignment_exam_student_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(status="completed", completed_at__isnull=False)
                    | (~Q(status="completed") & Q(completed_at__isnull=True))
                ),
                name="assignment_completed_at_iff_completed",
            ),
        ]

    def __str__(self):
        return f"ExamAssignment {self.masked_code} exam={self.exam_id} status={self.status}"

    # ------------------------------------------------------------------
    # state helpers
    # ------------------------------------------------------------------
    @property
    def masked_code(self) -> str:
        code = str(self.candidate_code or "")
        if len(code) < 4:
            return "*" * len(code)
        return f"{code[:2]}{'*' * (len(code) - 4)}{code[-2:]}"

    @property
    def is_terminal(self) -> bool:
        return self.status in self.TERMINAL_STATUSES

    def is_overdue(self, now) -> bool:
        return bool(self.window_end and now > self.window_end)

    def transition_to(self, new_status: str, *, now=None) -> bool:
        """
        Apply a status move in memory. Returns False for a no-op
        (already in new_status). Caller saves.
        """
        current = self.Status(self.status)
        target = self.Status(new_status)
        if current == target:
            return False
        if target not in self.ALLOWED_TRANSITIONS[current]:
            raise InvalidStatusTransition(f"{current} -> {target}")

        self.status = target
        if target == self.Status.COMPLETED:
            if now is None:
                raise InvalidStatusTransition("completed requires a timestamp")
            self.completed_at = now
        return True

    # ------------------------------------------------------------------
    # answers
    # ------------------------------------------------------------------
    def section_answers(self, section: str) -> Optional[SectionAnswers]:
        raw = (self.answers or {}).get(str(section))
        if raw is None:
            return None
        return parse_section_answers(section, raw)
