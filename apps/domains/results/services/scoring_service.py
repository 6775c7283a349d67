# PATH: apps/domains/results/services/scoring_service.py
from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional

from django.db import transaction
from django.utils import timezone

from apps.domains.assignments.dto.answer_payload import (
    AnswerValue,
    ListeningAnswers,
    ReadingAnswers,
    WritingAnswers,
)
from apps.domains.assignments.exceptions import AssignmentNotFound, NoAnswersSubmitted
from apps.domains.assignments.models import ExamAssignment
from apps.domains.exams.models import Section
from apps.domains.exams.services.content_layout import load_section_layout
from apps.domains.results.dto.answer_key import AnswerKey
from apps.domains.results.dto.scoring_result import SectionScore, WritingScore
from apps.domains.results.services.answer_key_resolver import (
    flatten_reading_answers,
    resolve_listening_key,
    resolve_reading_key,
)
from apps.domains.results.services.band_scale import band_for_correct_count
from apps.domains.results.services.grading_policy import is_match

logger = logging.getLogger(__name__)


# ============================================================
# pure computations
# ============================================================

def _section_score(total: int, correct: int) -> SectionScore:
    return SectionScore(
        correct_count=correct,
        incorrect_count=total - correct,
        total_questions=total,
        band_score=band_for_correct_count(correct),
    )


def compute_listening_score(key: AnswerKey, answers: ListeningAnswers) -> SectionScore:
    # every keyed slot counts, answered or not
    correct = sum(
        1
        for entry in key
        if is_match(answers.answer_for(entry.part_id, entry.number), entry.accepted)
    )
    return _section_score(len(key), correct)


def compute_reading_score(key: AnswerKey, flat_answers: List[Optional[AnswerValue]]) -> SectionScore:
    correct = 0
    for entry in key:
        idx = entry.number - 1
        submitted = flat_answers[idx] if idx < len(flat_answers) else None
        if is_match(submitted, entry.accepted):
            correct += 1
    return _section_score(len(key), correct)


def round_to_half_band(value: float) -> float:
    """
    fraction < 0.25        -> down to the integer
    0.25 <= fraction < 0.75 -> .5
    fraction >= 0.75       -> up to the next integer
    """
    whole = math.floor(value)
    fraction = value - whole
    if fraction < 0.25:
        return float(whole)
    if fraction < 0.75:
        return whole + 0.5
    return float(whole + 1)


def aggregate_writing(task1_score: Optional[float], task2_score: Optional[float]) -> Optional[float]:
    """Task 2 counts double. None unless both scores are present."""
    if task1_score is None or task2_score is None:
        return None
    weighted = (float(task1_score) + 2 * float(task2_score)) / 3
    return round_to_half_band(weighted)


# ============================================================
# persistence
# ============================================================

def _lock(assignment: ExamAssignment) -> ExamAssignment:
    """Fresh row under select_for_update. Must run inside transaction.atomic()."""
    locked = (
        ExamAssignment.objects
        .select_for_update()
        .select_related("exam")
        .filter(id=assignment.id)
        .first()
    )
    if locked is None:
        raise AssignmentNotFound()
    return locked


def _store(locked: ExamAssignment, assignment: ExamAssignment, section: str, result) -> None:
    """Overwrite final_scores[section] in one UPDATE."""
    section = str(section)
    scores = dict(locked.final_scores or {})
    scores[section] = {**result.to_dict(), "graded_at": timezone.now().isoformat()}
    locked.final_scores = scores
    locked.save(update_fields=["final_scores", "updated_at"])

    assignment.final_scores = scores
    logger.info(
        "section scored code=%s section=%s result=%s",
        locked.masked_code,
        section,
        result.to_dict(),
    )


def _require(assignment: ExamAssignment, section: str):
    payload = assignment.section_answers(str(section))
    if payload is None:
        raise NoAnswersSubmitted(f"No {section} answers submitted")
    return payload


class ScoringService:
    """
    Automated scoring (listening / reading) + writing aggregate.

    Stateless apart from the final_scores write; re-grading overwrites.
    The answer key is read-only content owned by the exams domain.
    """

    @staticmethod
    @transaction.atomic
    def score_listening(assignment: ExamAssignment) -> SectionScore:
        locked = _lock(assignment)
        answers: ListeningAnswers = _require(locked, Section.LISTENING)
        layout = load_section_layout(locked.exam, Section.LISTENING)
        key = resolve_listening_key(layout)

        result = compute_listening_score(key, answers)
        _store(locked, assignment, Section.LISTENING, result)
        return result

    @staticmethod
    @transaction.atomic
    def score_reading(assignment: ExamAssignment) -> SectionScore:
        locked = _lock(assignment)
        answers: ReadingAnswers = _require(locked, Section.READING)
        layout = load_section_layout(locked.exam, Section.READING)
        key = resolve_reading_key(layout)

        result = compute_reading_score(key, flatten_reading_answers(layout, answers))
        _store(locked, assignment, Section.READING, result)
        return result

    @staticmethod
    @transaction.atomic
    def score_writing(
        assignment: ExamAssignment,
        task1_score: Optional[float] = None,
        task2_score: Optional[float] = None,
        feedback: str = "",
    ) -> WritingScore:
        """
        Store the grader's task scores; aggregate only when both are given.

        NoAnswersSubmitted when the writing payload is absent, and also
        when it exists but both task texts are blank (nothing to grade).
        """
        locked = _lock(assignment)
        answers: WritingAnswers = _require(locked, Section.WRITING)
        if answers.is_blank:
            raise NoAnswersSubmitted("No writing answers submitted")

        result = WritingScore(
            task1_score=None if task1_score is None else float(task1_score),
            task2_score=None if task2_score is None else float(task2_score),
            aggregate_score=aggregate_writing(task1_score, task2_score),
            feedback=feedback or "",
        )
        _store(locked, assignment, Section.WRITING, result)
        return result

    @staticmethod
    @transaction.atomic
    def score_all(assignment: ExamAssignment) -> Dict[str, SectionScore]:
        """
        listening + reading. Writing needs a human score and is never auto-graded.

        All or nothing: if either section fails (e.g. reading never saved)
        no score is written.
        """
        return {
            Section.LISTENING.value: ScoringService.score_listening(assignment),
            Section.READING.value: ScoringService.score_reading(assignment),
        }
