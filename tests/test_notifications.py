import pytest

from apps.support.messaging import services
from apps.support.messaging.services import render_scores
from apps.support.messaging.tasks import notify_exam_assigned, notify_results_ready

pytestmark = pytest.mark.django_db


def test_assigned_notice_carries_code(assignment, mailoutbox):
    out = notify_exam_assigned(assignment.id)
    assert out == {"status": "ok"}
    assert mailoutbox[0].to == ["student@example.com"]
    assert assignment.candidate_code in mailoutbox[0].body


def test_notice_without_email_is_skipped(assignment, student, mailoutbox):
    student.email = ""
    student.save()
    assert notify_exam_assigned(assignment.id)["status"] == "skipped"
    assert mailoutbox == []


def test_unknown_assignment_is_skipped(db):
    assert notify_results_ready(987654)["reason"] == "not_found"


def test_delivery_failure_is_swallowed(assignment, monkeypatch):
    def boom(*args, **kwargs):
        raise ConnectionRefusedError("smtp down")

    monkeypatch.setattr(services, "send_mail", boom)
    assert notify_exam_assigned(assignment.id) == {"status": "error", "reason": "smtp down"}


def test_results_notice_needs_scores(assignment, mailoutbox):
    assert notify_results_ready(assignment.id)["reason"] == "not_graded"
    assert mailoutbox == []


def test_render_scores_orders_sections():
    text = render_scores({
        "writing": {"task1_score": 6.0, "task2_score": 7.0, "aggregate_score": 6.5},
        "listening": {"correct_count": 30, "total_questions": 40, "band_score": 7.0},
    })
    lines = text.splitlines()
    assert lines[0].startswith("Listening")
    assert "band=6.5" in lines[1]
