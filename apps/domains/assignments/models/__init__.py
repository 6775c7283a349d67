# apps/domains/assignments/models/__init__.py
from .exam_assignment import ExamAssignment

__all__ = [
    "ExamAssignment",
]
