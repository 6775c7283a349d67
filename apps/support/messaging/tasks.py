# apps/support/messaging/tasks.py
import logging

from celery import shared_task

from apps.domains.assignments.models import ExamAssignment
from apps.support.messaging.services import (
    send_exam_assigned_notice,
    send_results_notice,
)

logger = logging.getLogger(__name__)


def _load(assignment_id: int):
    return (
        ExamAssignment.objects
        .select_related("student", "exam", "tenant")
        .filter(id=assignment_id)
        .first()
    )


@shared_task(ignore_result=True)
def notify_exam_assigned(assignment_id: int) -> dict:
    """Best-effort: a failed notice never affects the assignment."""
    assignment = _load(assignment_id)
    if assignment is None:
        logger.warning("notify_exam_assigned: assignment %s not found", assignment_id)
        return {"status": "skipped", "reason": "not_found"}
    try:
        return send_exam_assigned_notice(assignment)
    except Exception:
        logger.exception("notify_exam_assigned failed assignment=%s", assignment_id)
        return {"status": "error"}


@shared_task(ignore_result=True)
def notify_results_ready(assignment_id: int) -> dict:
    assignment = _load(assignment_id)
    if assignment is None:
        logger.warning("notify_results_ready: assignment %s not found", assignment_id)
        return {"status": "skipped", "reason": "not_found"}
    try:
        return send_results_notice(assignment)
    except Exception:
        logger.exception("notify_results_ready failed assignment=%s", assignment_id)
        return {"status": "error"}
