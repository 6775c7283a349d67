# apps/support/messaging/services.py
"""
Candidate notifications (e-mail)

- exam assigned : candidate code + window
- results ready : stored final scores

Returns {"status": "ok"|"skipped"|"error", "reason"?}; never raises for
delivery problems so callers can treat notices as best-effort.
"""

import logging
from typing import Optional

from django.conf import settings
from django.core.mail import send_mail

from apps.domains.assignments.models import ExamAssignment

logger = logging.getLogger(__name__)

SECTION_ORDER = ("listening", "reading", "writing")


def _recipient(assignment: ExamAssignment) -> Optional[str]:
    email = (getattr(assignment.student, "email", "") or "").strip()
    return email or None


def _fmt_dt(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


def _deliver(assignment: ExamAssignment, subject: str, body: str, *, kind: str) -> dict:
    to = _recipient(assignment)
    if not to:
        logger.info("%s notice skipped code=%s: no recipient email", kind, assignment.masked_code)
        return {"status": "skipped", "reason": "no_recipient"}

    try:
        send_mail(
            subject,
            body,
            getattr(settings, "DEFAULT_FROM_EMAIL", None),
            [to],
            fail_silently=False,
        )
    except Exception as e:
        logger.warning("%s notice failed code=%s: %s", kind, assignment.masked_code, e)
        return {"status": "error", "reason": str(e)}

    logger.info("%s notice sent code=%s", kind, assignment.masked_code)
    return {"status": "ok"}


def send_exam_assigned_notice(assignment: ExamAssignment) -> dict:
    body = "\n".join([
        f"You have been assigned the test \"{assignment.exam.title}\".",
        "",
        f"Candidate code: {assignment.candidate_code}",
        f"Opens : {_fmt_dt(assignment.window_start)}",
        f"Closes: {_fmt_dt(assignment.window_end)}",
        "",
        "Keep this code private. It is the only key to your test session.",
    ])
    return _deliver(assignment, f"[{assignment.tenant.name}] Test assigned", body, kind="assigned")


def render_scores(final_scores: dict) -> str:
    lines = []
    for section in SECTION_ORDER:
        score = (final_scores or {}).get(section)
        if not score:
            continue
        if section == "writing":
            lines.append(
                f"Writing  : task1={score.get('task1_score')} task2={score.get('task2_score')} "
                f"band={score.get('aggregate_score')}"
            )
        else:
            lines.append(
                f"{section.capitalize():<9}: {score.get('correct_count')}/{score.get('total_questions')} "
                f"band={score.get('band_score')}"
            )
    return "\n".join(lines)


def send_results_notice(assignment: ExamAssignment) -> dict:
    scores = render_scores(assignment.final_scores)
    if not scores:
        logger.info("results notice skipped code=%s: nothing graded", assignment.masked_code)
        return {"status": "skipped", "reason": "not_graded"}

    body = "\n".join([
        f"Your results for \"{assignment.exam.title}\":",
        "",
        scores,
    ])
    return _deliver(assignment, f"[{assignment.tenant.name}] Test results", body, kind="results")
