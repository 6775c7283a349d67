# PATH: apps/domains/assignments/candidate_urls.py
from django.urls import path

from apps.domains.assignments.views import (
    CandidateAssignmentView,
    CandidateContentView,
    CandidateProgressView,
    CandidateStartView,
    CandidateSubmitView,
)

urlpatterns = [
    path("assignment/", CandidateAssignmentView.as_view(), name="candidate-assignment"),
    path("start/", CandidateStartView.as_view(), name="candidate-start"),
    path("content/", CandidateContentView.as_view(), name="candidate-content"),
    path("progress/", CandidateProgressView.as_view(), name="candidate-progress"),
    path("submit/", CandidateSubmitView.as_view(), name="candidate-submit"),
]
