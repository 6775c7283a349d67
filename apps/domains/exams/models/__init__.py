# apps/domains/exams/models/__init__.py
from .exam import Exam
from .exam_part import ExamPart, Section
from .writing_task import WritingTask

__all__ = [
    "Exam",
    "ExamPart",
    "Section",
    "WritingTask",
]
