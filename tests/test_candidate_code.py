import pytest
from django.db.models import QuerySet

from apps.domains.assignments.exceptions import CodeSpaceExhausted
from apps.domains.assignments.models import ExamAssignment
from apps.domains.assignments.services import candidate_code
from apps.domains.assignments.services.candidate_code import (
    allocate_assignment,
    is_well_formed_code,
    issue_candidate_code,
)


def test_issued_codes_are_ten_digits_without_leading_zero():
    for _ in range(500):
        code = issue_candidate_code()
        assert len(code) == 10
        assert code.isdigit()
        assert code[0] != "0"
        assert is_well_formed_code(code)


@pytest.mark.parametrize("value", ["0123456789", "123456789", "12345678901", "12345abcde", "", None, 1234567890])
def test_malformed_codes_are_rejected(value):
    assert not is_well_formed_code(value)


@pytest.mark.django_db
def test_collision_triggers_redraw(monkeypatch, exam, student, tenant, assignment):
    taken = assignment.candidate_code
    draws = iter([taken, taken, "5555555555"])
    monkeypatch.setattr(candidate_code, "issue_candidate_code", lambda: next(draws))

    created = allocate_assignment(student=student, exam=exam, tenant=tenant)

    assert created.candidate_code == "5555555555"
    assert ExamAssignment.objects.filter(candidate_code=taken).count() == 1


@pytest.mark.django_db
def test_code_space_exhausted_after_max_attempts(monkeypatch, settings, exam, student, tenant, assignment):
    settings.CANDIDATE_CODE_MAX_ATTEMPTS = 3
    calls = []

    def always_taken():
        calls.append(1)
        return assignment.candidate_code

    monkeypatch.setattr(candidate_code, "issue_candidate_code", always_taken)

    with pytest.raises(CodeSpaceExhausted):
        allocate_assignment(student=student, exam=exam, tenant=tenant)
    assert len(calls) == 3


@pytest.mark.django_db
def test_created_assignments_have_distinct_codes(exam, student, tenant):
    codes = {
        allocate_assignment(student=student, exam=exam, tenant=tenant).candidate_code
        for _ in range(20)
    }
    assert len(codes) == 20


@pytest.mark.django_db
def test_insert_race_triggers_redraw(monkeypatch, caplog, exam, student, tenant, assignment):
    # another writer takes the code between the pre-check and the INSERT
    taken = assignment.candidate_code
    draws = iter([taken, "5555555555"])
    monkeypatch.setattr(candidate_code, "issue_candidate_code", lambda: next(draws))

    real_exists = QuerySet.exists
    calls = []

    def exists(qs):
        calls.append(1)
        if len(calls) == 1:
            return False
        return real_exists(qs)

    monkeypatch.setattr(QuerySet, "exists", exists)

    with caplog.at_level("WARNING"):
        created = allocate_assignment(student=student, exam=exam, tenant=tenant)

    assert created.candidate_code == "5555555555"
    assert "insert race" in caplog.text
    assert ExamAssignment.objects.filter(candidate_code=taken).count() == 1
