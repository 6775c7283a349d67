# apps/domains/assignments/permissions.py
from rest_framework.permissions import BasePermission

from apps.domains.assignments.authentication import CandidatePrincipal


class IsCandidate(BasePermission):
    message = "Candidate code required."

    def has_permission(self, request, view):
        return isinstance(getattr(request, "user", None), CandidatePrincipal)
