# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Candidate (X-Candidate-Code, no tenant header)
    # =========================
    path("candidate/", include("apps.domains.assignments.candidate_urls")),

    # =========================
    # Staff
    # =========================
    path("", include("apps.domains.assignments.urls")),
    path("results/", include("apps.domains.results.urls")),
]
