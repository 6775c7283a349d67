from .scoring_views import (
    AssignmentResultView,
    AutoGradeView,
    ListeningScoreView,
    ReadingScoreView,
    SendResultsView,
    WritingScoreView,
)
