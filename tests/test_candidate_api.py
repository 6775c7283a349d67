from datetime import timedelta

import pytest
from django.utils import timezone

from apps.domains.assignments.models import ExamAssignment

pytestmark = pytest.mark.django_db

BASE = "/api/v1/candidate"


def test_missing_code_is_unauthenticated(api_client, assignment):
    res = api_client.get(f"{BASE}/assignment/")
    assert res.status_code == 401


def test_malformed_code_is_rejected(api_client):
    api_client.credentials(HTTP_X_CANDIDATE_CODE="0123")
    res = api_client.get(f"{BASE}/assignment/")
    assert res.status_code == 401


def test_unknown_code_is_not_found(api_client, assignment):
    unknown = "1000000000" if assignment.candidate_code != "1000000000" else "1000000001"
    api_client.credentials(HTTP_X_CANDIDATE_CODE=unknown)
    res = api_client.get(f"{BASE}/assignment/")
    assert res.status_code == 404
    assert res.json()["code"] == "not_found"


def test_fetch_assignment(candidate_client, assignment):
    res = candidate_client.get(f"{BASE}/assignment/")
    assert res.status_code == 200
    body = res.json()
    assert body["candidate_code"] == assignment.candidate_code
    assert body["status"] == "pending"
    assert body["exam_title"] == "Mock Test 1"
    assert "final_scores" not in body


def test_content_never_exposes_answer_keys(candidate_client):
    res = candidate_client.get(f"{BASE}/content/")
    assert res.status_code == 200
    exam = res.json()["exam"]
    assert len(exam["listening"]) == 1
    assert len(exam["reading"]) == 2
    assert [t["task"] for t in exam["writing"]] == ["task1", "task2"]
    for part in exam["listening"] + exam["reading"]:
        assert "answers" not in part


def test_full_session_flow(candidate_client, assignment):
    res = candidate_client.post(f"{BASE}/start/")
    assert res.status_code == 200
    assert res.json()["status"] == "in_progress"

    res = candidate_client.put(
        f"{BASE}/progress/",
        {"section": "writing", "answers": {"task1_answer": "draft", "word_count": 1}},
        format="json",
    )
    assert res.status_code == 200
    assert res.json()["section"] == "writing"

    res = candidate_client.post(f"{BASE}/submit/", {}, format="json")
    assert res.status_code == 200
    assert res.json()["status"] == "completed"

    a = ExamAssignment.objects.get(id=assignment.id)
    assert a.answers["writing"]["task1_answer"] == "draft"
    assert a.completed_at is not None

    res = candidate_client.post(f"{BASE}/start/")
    assert res.status_code == 409
    assert res.json()["code"] == "already_completed"

    res = candidate_client.put(
        f"{BASE}/progress/",
        {"section": "writing", "answers": {"task1_answer": "late"}},
        format="json",
    )
    assert res.status_code == 409
    assert res.json()["code"] == "session_closed"


def test_progress_validation_errors(candidate_client):
    res = candidate_client.put(
        f"{BASE}/progress/",
        {"section": "speaking", "answers": {}},
        format="json",
    )
    assert res.status_code == 400

    res = candidate_client.put(
        f"{BASE}/progress/",
        {"section": "reading", "answers": {"parts": {"1": {"c1": "A"}}}},
        format="json",
    )
    assert res.status_code == 400
    assert "answers" in res.json()


def test_expired_window(candidate_client, assignment):
    past = timezone.now() - timedelta(hours=1)
    ExamAssignment.objects.filter(id=assignment.id).update(
        window_start=past - timedelta(hours=3),
        window_end=past,
    )

    res = candidate_client.post(f"{BASE}/start/")
    assert res.status_code == 410
    assert res.json()["code"] == "expired"

    res = candidate_client.get(f"{BASE}/assignment/")
    assert res.status_code == 200
    assert res.json()["status"] == "expired"


def test_candidate_endpoints_need_no_tenant_header(candidate_client):
    # tenant middleware lets /api/v1/candidate/ through without X-Tenant-Code
    assert candidate_client.get(f"{BASE}/assignment/").status_code == 200
