# apps/domains/assignments/authentication.py
from __future__ import annotations

from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from apps.domains.assignments.exceptions import AssignmentNotFound
from apps.domains.assignments.models import ExamAssignment
from apps.domains.assignments.services.candidate_code import is_well_formed_code


def candidate_header_name() -> str:
    return str(getattr(settings, "CANDIDATE_CODE_HEADER", "X-Candidate-Code") or "X-Candidate-Code")


class CandidatePrincipal:
    """
    request.user on candidate endpoints.
    Not a Django user: the candidate code is the whole identity.
    """

    is_authenticated = True
    is_anonymous = False
    is_staff = False
    is_superuser = False

    def __init__(self, assignment: ExamAssignment):
        self.assignment = assignment
        self.candidate_code = assignment.candidate_code
        self.tenant_id = assignment.tenant_id

    def __str__(self):
        return f"candidate {self.assignment.masked_code}"


class CandidateCodeAuthentication(BaseAuthentication):
    """
    Header: X-Candidate-Code: 1234567890

    - no header      -> not authenticated (401 via authenticate_header)
    - malformed code -> AuthenticationFailed
    - unknown code   -> AssignmentNotFound (404)

    Status is deliberately not checked here; the session service decides
    what a completed / expired candidate may still see.
    """

    def authenticate(self, request):
        raw = request.headers.get(candidate_header_name())
        if raw is None:
            return None

        code = str(raw).strip()
        if not is_well_formed_code(code):
            raise AuthenticationFailed("Candidate code must be 10 digits")

        assignment = (
            ExamAssignment.objects
            .filter(candidate_code=code, is_active=True)
            .only("id", "candidate_code", "tenant")
            .first()
        )
        if assignment is None:
            raise AssignmentNotFound()

        return CandidatePrincipal(assignment), code

    def authenticate_header(self, request):
        return candidate_header_name()
