from .assignment_views import ExamAssignmentViewSet
from .candidate_views import (
    CandidateAssignmentView,
    CandidateContentView,
    CandidateProgressView,
    CandidateStartView,
    CandidateSubmitView,
)
