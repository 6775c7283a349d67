# apps/domains/assignments/services/session_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from apps.domains.assignments.dto.answer_payload import (
    SectionAnswers,
    parse_answer_sheet,
    parse_section_answers,
)
from apps.domains.assignments.exceptions import (
    AlreadyCompleted,
    AssignmentNotFound,
    ExamExpired,
    ExamSessionError,
    ExamUnavailable,
    SessionClosed,
)
from apps.domains.assignments.models import ExamAssignment
from apps.domains.assignments.services.candidate_code import allocate_assignment

logger = logging.getLogger(__name__)

Status = ExamAssignment.Status

_UNSET: Any = object()


# ============================================================
# transitions
# ============================================================

def expire_if_overdue(assignment: ExamAssignment, *, now) -> bool:
    """
    Lazy expiry: window end passed and not terminal -> expired.

    Runs on every read path that shows status to a candidate.
    In-memory only; returns True when the status changed so the caller
    can persist it.
    """
    if assignment.is_terminal or not assignment.is_overdue(now):
        return False
    return assignment.transition_to(Status.EXPIRED)


def _persist_expiry(assignment: ExamAssignment, now) -> None:
    if expire_if_overdue(assignment, now=now):
        assignment.save(update_fields=["status", "updated_at"])
        logger.info(
            "assignment expired code=%s window_end=%s",
            assignment.masked_code,
            assignment.window_end,
        )


def _closed_error(assignment: ExamAssignment) -> Optional[ExamSessionError]:
    if assignment.status == Status.COMPLETED:
        return AlreadyCompleted()
    if assignment.status == Status.EXPIRED:
        return ExamExpired()
    return None


def _locked(candidate_code: str) -> ExamAssignment:
    """Row-locked active assignment. Must run inside transaction.atomic()."""
    assignment = (
        ExamAssignment.objects
        .select_for_update()
        .filter(candidate_code=str(candidate_code or "").strip(), is_active=True)
        .first()
    )
    if assignment is None:
        raise AssignmentNotFound()
    return assignment


def _locked_for_tenant(assignment_id: int, tenant) -> ExamAssignment:
    assignment = (
        ExamAssignment.objects
        .select_for_update()
        .filter(id=assignment_id, tenant=tenant, is_active=True)
        .first()
    )
    if assignment is None:
        raise AssignmentNotFound("Assignment not found")
    return assignment


def _validate_window(window_start, window_end) -> None:
    if window_start and window_end and window_end <= window_start:
        raise ValidationError({"window_end": "window_end must be after window_start"})


def _schedule_assigned_notice(assignment: ExamAssignment) -> None:
    if not getattr(settings, "EXAM_NOTIFICATIONS_ENABLED", True):
        return

    from apps.support.messaging.tasks import notify_exam_assigned

    assignment_id = int(assignment.id)
    # robust: broker trouble must never undo the assignment
    transaction.on_commit(
        lambda: notify_exam_assigned.delay(assignment_id),
        robust=True,
    )


class ExamSessionService:
    """
    Candidate exam session state machine.

    - every mutation: transaction.atomic + select_for_update (per-row serialization)
    - lazy expiry is persisted inside the atomic block; the resulting
      error is raised only after the block commits
    """

    # --------------------------------------------------------
    # issuance
    # --------------------------------------------------------
    @staticmethod
    @transaction.atomic
    def create(
        *,
        student,
        exam,
        tenant,
        issued_by=None,
        window_start=None,
        window_end=None,
        notes: str = "",
    ) -> ExamAssignment:
        if exam is None or exam.tenant_id != tenant.id or not exam.is_active:
            raise ExamUnavailable()

        _validate_window(window_start, window_end)

        assignment = allocate_assignment(
            student=student,
            exam=exam,
            tenant=tenant,
            issued_by=issued_by,
            window_start=window_start,
            window_end=window_end,
            notes=notes or "",
            status=Status.PENDING,
            answers={},
        )

        logger.info(
            "assignment issued code=%s exam=%s tenant=%s",
            assignment.masked_code,
            assignment.exam_id,
            assignment.tenant_id,
        )

        _schedule_assigned_notice(assignment)
        return assignment

    # --------------------------------------------------------
    # candidate reads
    # --------------------------------------------------------
    @staticmethod
    def fetch(candidate_code: str, *, now=None) -> ExamAssignment:
        now = now or timezone.now()
        with transaction.atomic():
            assignment = _locked(candidate_code)
            _persist_expiry(assignment, now)
        return assignment

    @staticmethod
    def content(candidate_code: str, *, now=None) -> ExamAssignment:
        """Assignment whose exam content may be shown (open sessions only)."""
        now = now or timezone.now()
        with transaction.atomic():
            assignment = _locked(candidate_code)
            _persist_expiry(assignment, now)
            error = _closed_error(assignment)

        if error is not None:
            raise error
        return assignment

    # --------------------------------------------------------
    # candidate mutations
    # --------------------------------------------------------
    @staticmethod
    def start(candidate_code: str, *, now=None) -> ExamAssignment:
        now = now or timezone.now()
        with transaction.atomic():
            assignment = _locked(candidate_code)
            _persist_expiry(assignment, now)
            error = _closed_error(assignment)

            if error is None and assignment.transition_to(Status.IN_PROGRESS):
                assignment.save(update_fields=["status", "updated_at"])
                logger.info("assignment started code=%s", assignment.masked_code)

        if error is not None:
            raise error
        return assignment

    @staticmethod
    def save_section_progress(
        candidate_code: str,
        section: str,
        payload: Union[SectionAnswers, Mapping[str, Any]],
        *,
        now=None,
    ) -> ExamAssignment:
        """Replace answers[section] whole. Other sections are untouched."""
        if not hasattr(payload, "to_storage"):
            payload = parse_section_answers(section, payload)
        if payload.section != section:
            raise ValueError(f"payload is for {payload.section}, not {section}")

        now = now or timezone.now()
        with transaction.atomic():
            assignment = _locked(candidate_code)
            _persist_expiry(assignment, now)

            if assignment.is_terminal:
                error: Optional[ExamSessionError] = SessionClosed()
            else:
                error = None
                answers = dict(assignment.answers or {})
                answers[section] = payload.to_storage()
                assignment.answers = answers
                assignment.save(update_fields=["answers", "updated_at"])

        if error is not None:
            raise error

        logger.debug("progress saved code=%s section=%s", assignment.masked_code, section)
        return assignment

    @staticmethod
    def submit(
        candidate_code: str,
        final_answers: Optional[Union[Dict[str, SectionAnswers], Mapping[str, Any]]] = None,
        *,
        now=None,
    ) -> ExamAssignment:
        """
        Final submission. final_answers (if given) replaces the whole answers
        mapping; status/completed_at/answers go out in a single UPDATE.
        """
        typed: Optional[Dict[str, SectionAnswers]] = None
        if final_answers is not None:
            if all(hasattr(v, "to_storage") for v in final_answers.values()):
                typed = dict(final_answers)
            else:
                typed = parse_answer_sheet(dict(final_answers))

        now = now or timezone.now()
        with transaction.atomic():
            assignment = _locked(candidate_code)
            _persist_expiry(assignment, now)
            error = _closed_error(assignment)

            if error is None:
                update_fields = ["status", "completed_at", "updated_at"]
                if typed is not None:
                    assignment.answers = {s: p.to_storage() for s, p in typed.items()}
                    update_fields.append("answers")

                assignment.transition_to(Status.COMPLETED, now=now)
                assignment.save(update_fields=update_fields)
                logger.info("assignment completed code=%s", assignment.masked_code)

        if error is not None:
            raise error
        return assignment

    # --------------------------------------------------------
    # staff administration
    # --------------------------------------------------------
    @staticmethod
    @transaction.atomic
    def update(
        assignment_id: int,
        *,
        tenant,
        window_start=_UNSET,
        window_end=_UNSET,
        notes=_UNSET,
    ) -> ExamAssignment:
        """Window / notes only. Status is owned by the state machine."""
        assignment = _locked_for_tenant(assignment_id, tenant)

        update_fields = ["updated_at"]
        if window_start is not _UNSET:
            assignment.window_start = window_start
            update_fields.append("window_start")
        if window_end is not _UNSET:
            assignment.window_end = window_end
            update_fields.append("window_end")
        if notes is not _UNSET:
            assignment.notes = notes or ""
            update_fields.append("notes")

        _validate_window(assignment.window_start, assignment.window_end)
        assignment.save(update_fields=update_fields)
        return assignment

    @staticmethod
    @transaction.atomic
    def deactivate(assignment_id: int, *, tenant) -> None:
        assignment = _locked_for_tenant(assignment_id, tenant)
        assignment.is_active = False
        assignment.save(update_fields=["is_active", "updated_at"])
        logger.info("assignment deactivated code=%s", assignment.masked_code)
