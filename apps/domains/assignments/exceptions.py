# ======================================================================
# PATH: apps/domains/assignments/exceptions.py
# ======================================================================
from __future__ import annotations


class ExamSessionError(Exception):
    """
    Client-visible session / grading failures.

    They describe legitimate state (never transient infrastructure
    trouble) and are surfaced as-is; callers must not retry them.
    """

    code = "exam_session_error"
    http_status = 400
    default_message = "Exam session error"

    def __init__(self, message: str | None = None):
        self.message = str(message or self.default_message)
        super().__init__(self.message)

    def as_dict(self) -> dict:
        return {"code": self.code, "detail": self.message}


class AssignmentNotFound(ExamSessionError):
    code = "not_found"
    http_status = 404
    default_message = "No active assignment for this candidate code"


class AlreadyCompleted(ExamSessionError):
    code = "already_completed"
    http_status = 409
    default_message = "Test already completed"


class ExamExpired(ExamSessionError):
    code = "expired"
    http_status = 410
    default_message = "Test has expired"


class SessionClosed(ExamSessionError):
    code = "session_closed"
    http_status = 409
    default_message = "Test is no longer active"


class NoAnswersSubmitted(ExamSessionError):
    code = "no_answers_submitted"
    http_status = 400
    default_message = "No answers submitted for this section"


class CodeSpaceExhausted(ExamSessionError):
    code = "code_space_exhausted"
    http_status = 503
    default_message = "Could not allocate a unique candidate code"


class InconsistentAnswerKey(ExamSessionError):
    code = "inconsistent_answer_key"
    http_status = 422
    default_message = "Answer key numbering is inconsistent"


class InvalidStatusTransition(Exception):
    """Programming error: a status move outside the allowed graph."""


class ExamUnavailable(ExamSessionError):
    code = "exam_not_found"
    http_status = 404
    default_message = "Test not found or does not belong to this center"
