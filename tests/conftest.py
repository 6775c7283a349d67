from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.core.models import Tenant, TenantMembership
from apps.domains.assignments.services.session_service import ExamSessionService
from apps.domains.exams.models import Exam, ExamPart, WritingTask

T0 = datetime(2026, 3, 2, 9, 0, tzinfo=dt_timezone.utc)


@pytest.fixture(autouse=True)
def _no_notifications(settings):
    settings.EXAM_NOTIFICATIONS_ENABLED = False


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def tenant(db):
    return Tenant.objects.create(name="Seoul Center", code="seoul")


@pytest.fixture
def other_tenant(db):
    return Tenant.objects.create(name="Busan Center", code="busan")


@pytest.fixture
def staff_user(db, tenant):
    user = get_user_model().objects.create_user(username="teacher", password="pw-123456")
    TenantMembership.objects.create(user=user, tenant=tenant, role=TenantMembership.Role.TEACHER)
    return user


@pytest.fixture
def student(db):
    return get_user_model().objects.create_user(
        username="student",
        password="pw-123456",
        email="student@example.com",
    )


@pytest.fixture
def exam(db, tenant):
    """
    listening: 1 part, 4 questions (completion x2, multiple-choice x2)
    reading  : 2 parts
        part 1 -> c1 (4 questions, #1-4), c2 (3 questions, #5-7)
        part 2 -> c3 (2 questions, #8-9)
    writing  : task1 / task2
    """
    exam = Exam.objects.create(tenant=tenant, title="Mock Test 1")

    ExamPart.objects.create(
        exam=exam,
        section="listening",
        label="PART_1",
        order=1,
        content=[
            {"id": "l1", "type": "completion", "content": "Name: @@  Town: @@"},
            {"id": "l2", "type": "multiple-choice", "questions": [{"q": "a"}, {"q": "b"}]},
        ],
        number_of_questions=4,
        answers={"1": "Smith", "2": ["colour", "color"], "3": "B", "4": "C"},
    )

    ExamPart.objects.create(
        exam=exam,
        section="reading",
        label="PART_1",
        order=1,
        content=[
            {"id": "c1", "type": "selection", "questions": [{}, {}, {}, {}]},
            {"id": "c2", "type": "matching", "question_count": 3},
        ],
        number_of_questions=7,
        answers={
            "1": "TRUE", "2": "FALSE", "3": "NOT GIVEN", "4": "TRUE",
            "5": "A", "6": "B", "7": "C",
        },
    )
    ExamPart.objects.create(
        exam=exam,
        section="reading",
        label="PART_2",
        order=2,
        content=[
            {"id": "c3", "type": "completion", "content": "@@ and @@"},
        ],
        number_of_questions=2,
        answers={"8": "river", "9": "bridge"},
    )

    WritingTask.objects.create(exam=exam, task="task1", prompt="Describe the chart.")
    WritingTask.objects.create(exam=exam, task="task2", prompt="Discuss both views.", min_words=250, time_minutes=40)
    return exam


@pytest.fixture
def assignment(db, exam, student, staff_user, tenant):
    return ExamSessionService.create(
        student=student,
        exam=exam,
        tenant=tenant,
        issued_by=staff_user,
    )


@pytest.fixture
def windowed_assignment(db, exam, student, staff_user, tenant):
    return ExamSessionService.create(
        student=student,
        exam=exam,
        tenant=tenant,
        issued_by=staff_user,
        window_start=T0,
        window_end=T0 + timedelta(hours=3),
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def staff_client(api_client, staff_user, tenant):
    api_client.force_authenticate(user=staff_user)
    api_client.credentials(HTTP_X_TENANT_CODE=tenant.code)
    return api_client


@pytest.fixture
def candidate_client(assignment):
    client = APIClient()
    client.credentials(HTTP_X_CANDIDATE_CODE=assignment.candidate_code)
    return client
