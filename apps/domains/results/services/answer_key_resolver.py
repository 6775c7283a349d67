# PATH: apps/domains/results/services/answer_key_resolver.py
"""
Answer key resolution (content layout + per-part keys -> AnswerKey)

listening:
  key is partitioned by part -> entries keep their part_id,
  lookup is key[part_id][number].

reading:
  keys of all parts are merged into one number -> accepted table.
  candidate answers carry no numbers (container -> [answers]), so
  positions are rebuilt from declared part order + declared container
  order; flattened index + 1 == question number.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from apps.domains.assignments.dto.answer_payload import AnswerValue, ReadingAnswers
from apps.domains.assignments.exceptions import InconsistentAnswerKey
from apps.domains.exams.dto.section_layout import SectionLayout
from apps.domains.results.dto.answer_key import AnswerKey, KeyEntry
from apps.domains.results.services.grading_policy import accepted_alternatives

logger = logging.getLogger(__name__)


def _question_number(raw_key: Any) -> Optional[int]:
    s = str(raw_key).strip()
    if not s.isdigit():
        return None
    n = int(s)
    return n if n > 0 else None


def _part_entries(part_id: str, answers: Dict[str, Any]) -> List[KeyEntry]:
    entries: List[KeyEntry] = []
    for raw_key, raw_accepted in (answers or {}).items():
        number = _question_number(raw_key)
        if number is None:
            logger.warning("non-numeric answer key entry skipped part=%s key=%r", part_id, raw_key)
            continue
        entries.append(
            KeyEntry(
                number=number,
                part_id=str(part_id),
                accepted=accepted_alternatives(raw_accepted),
            )
        )
    entries.sort(key=lambda e: e.number)
    return entries


def resolve_listening_key(layout: SectionLayout) -> AnswerKey:
    entries: List[KeyEntry] = []
    for part in layout.parts:
        entries.extend(_part_entries(part.part_id, part.answers))
    return AnswerKey(section=layout.section, entries=tuple(entries))


def resolve_reading_key(layout: SectionLayout) -> AnswerKey:
    """
    Merged key. Numbering must be unique across parts: a number declared
    by two parts fails fast. Gaps are tolerated (logged).
    """
    merged: Dict[int, KeyEntry] = {}
    for part in layout.parts:
        for entry in _part_entries(part.part_id, part.answers):
            existing = merged.get(entry.number)
            if existing is not None:
                raise InconsistentAnswerKey(
                    f"question {entry.number} is keyed by parts "
                    f"{existing.part_id} and {entry.part_id}"
                )
            merged[entry.number] = entry

    numbers = sorted(merged)
    if numbers:
        missing = sorted(set(range(1, numbers[-1] + 1)) - set(numbers))
        if missing:
            logger.warning("reading answer key has gaps: %s", missing)

    return AnswerKey(section=layout.section, entries=tuple(merged[n] for n in numbers))


def flatten_reading_answers(
    layout: SectionLayout,
    answers: ReadingAnswers,
) -> List[Optional[AnswerValue]]:
    """
    Candidate arrays in declared order. Each container contributes exactly
    `slots` positions (short arrays are padded with None, long ones cut).
    """
    flat: List[Optional[AnswerValue]] = []

    for part in layout.parts:
        submitted = answers.parts.get(part.part_id) or {}
        declared = set(part.container_ids())
        for cid in submitted:
            if cid not in declared:
                logger.debug("undeclared container ignored part=%s container=%s", part.part_id, cid)

        for container in part.containers:
            values = answers.container_answers(part.part_id, container.container_id)
            values = values[: container.slots]
            values.extend([None] * (container.slots - len(values)))
            flat.extend(values)

    return flat
