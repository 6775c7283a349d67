from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.domains.assignments.models import ExamAssignment
from apps.domains.assignments.services.session_service import ExamSessionService
from apps.domains.exams.models import Exam, ExamPart

pytestmark = pytest.mark.django_db


# ------------------------------------------------------------------
# assignments
# ------------------------------------------------------------------
def test_create_assignment(staff_client, exam, student, staff_user):
    res = staff_client.post(
        "/api/v1/assignments/",
        {"student": student.id, "exam": exam.id, "notes": "room 2"},
        format="json",
    )
    assert res.status_code == 201, res.content
    body = res.json()
    assert len(body["candidate_code"]) == 10
    assert body["status"] == "pending"
    assert body["issued_by"] == staff_user.id


def test_create_rejects_exam_of_other_tenant(staff_client, other_tenant, student):
    foreign = Exam.objects.create(tenant=other_tenant, title="Elsewhere")
    res = staff_client.post(
        "/api/v1/assignments/",
        {"student": student.id, "exam": foreign.id},
        format="json",
    )
    assert res.status_code == 400
    assert "exam" in res.json()


def test_create_rejects_inverted_window(staff_client, exam, student):
    now = timezone.now()
    res = staff_client.post(
        "/api/v1/assignments/",
        {
            "student": student.id,
            "exam": exam.id,
            "window_start": now.isoformat(),
            "window_end": (now - timedelta(hours=1)).isoformat(),
        },
        format="json",
    )
    assert res.status_code == 400


def test_list_is_tenant_scoped_and_filterable(staff_client, assignment, other_tenant, student):
    foreign_exam = Exam.objects.create(tenant=other_tenant, title="Elsewhere")
    ExamSessionService.create(student=student, exam=foreign_exam, tenant=other_tenant)
    ExamSessionService.submit(assignment.candidate_code)

    res = staff_client.get("/api/v1/assignments/")
    assert res.status_code == 200
    assert [row["id"] for row in res.json()["results"]] == [assignment.id]

    res = staff_client.get("/api/v1/assignments/", {"status": "pending"})
    assert res.json()["count"] == 0
    res = staff_client.get("/api/v1/assignments/", {"status": "completed"})
    assert res.json()["count"] == 1


def test_patch_updates_window_but_not_status(staff_client, assignment):
    end = timezone.now() + timedelta(days=2)
    res = staff_client.patch(
        f"/api/v1/assignments/{assignment.id}/",
        {"window_end": end.isoformat(), "notes": "moved"},
        format="json",
    )
    assert res.status_code == 200, res.content
    assert res.json()["notes"] == "moved"

    res = staff_client.patch(
        f"/api/v1/assignments/{assignment.id}/",
        {"status": "completed"},
        format="json",
    )
    assert res.status_code == 400
    assert ExamAssignment.objects.get(id=assignment.id).status == "pending"


def test_delete_is_soft(staff_client, assignment):
    res = staff_client.delete(f"/api/v1/assignments/{assignment.id}/")
    assert res.status_code == 204
    assert ExamAssignment.objects.get(id=assignment.id).is_active is False
    assert staff_client.get(f"/api/v1/assignments/{assignment.id}/").status_code == 404


def test_staff_endpoints_require_membership(api_client, tenant, assignment):
    outsider = get_user_model().objects.create_user(username="outsider", password="pw-123456")
    api_client.force_authenticate(user=outsider)
    api_client.credentials(HTTP_X_TENANT_CODE=tenant.code)

    assert api_client.get("/api/v1/assignments/").status_code == 403


def test_staff_endpoints_require_tenant_header(api_client, staff_user):
    api_client.force_authenticate(user=staff_user)
    res = api_client.get("/api/v1/assignments/")
    assert res.status_code == 400
    assert res.json()["code"] == "tenant_missing"


# ------------------------------------------------------------------
# grading
# ------------------------------------------------------------------
def _submit_all(assignment, exam):
    listening_part = str(ExamPart.objects.get(exam=exam, section="listening").id)
    ExamSessionService.submit(
        assignment.candidate_code,
        {
            "listening": {"parts": {listening_part: {"l1": {"1": "Smith", "2": "color"}, "l2": {"3": "B", "4": "C"}}}},
            "reading": {"parts": {}},
            "writing": {"task1_answer": "chart", "task2_answer": "essay"},
        },
    )


def test_grade_listening(staff_client, assignment, exam):
    _submit_all(assignment, exam)
    res = staff_client.post(f"/api/v1/results/{assignment.candidate_code}/listening/")
    assert res.status_code == 200
    assert res.json() == {
        "correct_count": 4,
        "incorrect_count": 0,
        "total_questions": 4,
        "band_score": 2.5,
    }


def test_auto_grade(staff_client, assignment, exam):
    _submit_all(assignment, exam)
    res = staff_client.post(f"/api/v1/results/{assignment.candidate_code}/auto-grade/")
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"listening", "reading"}
    assert body["reading"]["correct_count"] == 0
    assert body["reading"]["total_questions"] == 9


def test_grade_writing(staff_client, assignment, exam):
    _submit_all(assignment, exam)
    res = staff_client.post(
        f"/api/v1/results/{assignment.candidate_code}/writing/",
        {"task1_score": 6, "task2_score": 7, "feedback": "ok"},
        format="json",
    )
    assert res.status_code == 200
    assert res.json()["aggregate_score"] == 6.5

    res = staff_client.get(f"/api/v1/results/{assignment.candidate_code}/")
    assert res.json()["final_scores"]["writing"]["aggregate_score"] == 6.5


def test_grade_writing_rejects_out_of_range(staff_client, assignment, exam):
    _submit_all(assignment, exam)
    res = staff_client.post(
        f"/api/v1/results/{assignment.candidate_code}/writing/",
        {"task1_score": 10, "task2_score": 7},
        format="json",
    )
    assert res.status_code == 400


def test_grade_without_answers(staff_client, assignment):
    res = staff_client.post(f"/api/v1/results/{assignment.candidate_code}/listening/")
    assert res.status_code == 400
    assert res.json()["code"] == "no_answers_submitted"


def test_grading_other_tenant_code_is_not_found(staff_client, other_tenant, student):
    foreign_exam = Exam.objects.create(tenant=other_tenant, title="Elsewhere")
    foreign = ExamSessionService.create(student=student, exam=foreign_exam, tenant=other_tenant)

    res = staff_client.post(f"/api/v1/results/{foreign.candidate_code}/listening/")
    assert res.status_code == 404


def test_send_results(staff_client, assignment, exam, django_capture_on_commit_callbacks, mailoutbox):
    _submit_all(assignment, exam)
    staff_client.post(f"/api/v1/results/{assignment.candidate_code}/listening/")

    with django_capture_on_commit_callbacks(execute=True):
        res = staff_client.post(f"/api/v1/results/{assignment.candidate_code}/send/")

    assert res.status_code == 202
    assert len(mailoutbox) == 1
    assert "Listening" in mailoutbox[0].body
