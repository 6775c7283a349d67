# PATH: apps/domains/assignments/urls.py
from rest_framework.routers import DefaultRouter

from apps.domains.assignments.views import ExamAssignmentViewSet

router = DefaultRouter()
router.register(r"assignments", ExamAssignmentViewSet, basename="exam-assignment")

urlpatterns = router.urls
