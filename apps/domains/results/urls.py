# PATH: apps/domains/results/urls.py
from django.urls import path

from apps.domains.results.views import (
    AssignmentResultView,
    AutoGradeView,
    ListeningScoreView,
    ReadingScoreView,
    SendResultsView,
    WritingScoreView,
)

urlpatterns = [
    path("<str:candidate_code>/", AssignmentResultView.as_view(), name="result-detail"),
    path("<str:candidate_code>/listening/", ListeningScoreView.as_view(), name="result-listening"),
    path("<str:candidate_code>/reading/", ReadingScoreView.as_view(), name="result-reading"),
    path("<str:candidate_code>/writing/", WritingScoreView.as_view(), name="result-writing"),
    path("<str:candidate_code>/auto-grade/", AutoGradeView.as_view(), name="result-auto-grade"),
    path("<str:candidate_code>/send/", SendResultsView.as_view(), name="result-send"),
]
