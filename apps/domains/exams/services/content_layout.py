# PATH: apps/domains/exams/services/content_layout.py
"""
Exam content -> positional layout

The answer store is an unordered map (part -> container -> answers), so
question numbering has to be rebuilt from the declared order of parts
and of the containers inside each part's content JSON.

Slot count per container:
  1) explicit "question_count"
  2) completion: number of "@@" placeholders in "content"
  3) multi-select: "limit"
  4) len("questions")
  5) 1
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from apps.domains.exams.dto.section_layout import (
    ContainerLayout,
    PartLayout,
    SectionLayout,
)
from apps.domains.exams.models import Exam, ExamPart, Section

logger = logging.getLogger(__name__)

BLANK_PLACEHOLDER = "@@"


def _positive_int(v: Any) -> int:
    try:
        n = int(v)
    except (TypeError, ValueError):
        return 0
    return n if n > 0 else 0


def container_slots(container: Dict[str, Any]) -> int:
    explicit = _positive_int(container.get("question_count"))
    if explicit:
        return explicit

    ctype = str(container.get("type") or "").lower()

    if ctype == "completion":
        blanks = str(container.get("content") or "").count(BLANK_PLACEHOLDER)
        if blanks:
            return blanks

    if ctype == "multi-select":
        limit = _positive_int(container.get("limit"))
        if limit:
            return limit

    questions = container.get("questions")
    if isinstance(questions, list) and questions:
        return len(questions)

    return 1


def parse_containers(content: Any, *, part_id: str = "") -> tuple[ContainerLayout, ...]:
    if not isinstance(content, list):
        return ()

    out: List[ContainerLayout] = []
    seen = set()
    for raw in content:
        if not isinstance(raw, dict):
            continue
        cid = str(raw.get("id") or "").strip()
        if not cid:
            logger.warning("container without id skipped (part=%s)", part_id)
            continue
        if cid in seen:
            logger.warning("duplicate container id=%s skipped (part=%s)", cid, part_id)
            continue
        seen.add(cid)
        out.append(
            ContainerLayout(
                container_id=cid,
                container_type=str(raw.get("type") or ""),
                slots=container_slots(raw),
            )
        )
    return tuple(out)


def build_section_layout(section: str, parts: Iterable[ExamPart]) -> SectionLayout:
    ordered = sorted(parts, key=lambda p: (int(p.order or 0), int(p.id or 0)))
    return SectionLayout(
        section=str(section),
        parts=tuple(
            PartLayout(
                part_id=str(p.id),
                label=str(p.label or ""),
                containers=parse_containers(p.content, part_id=str(p.id)),
                answers=dict(p.answers or {}) if isinstance(p.answers, dict) else {},
            )
            for p in ordered
        ),
    )


def load_section_layout(exam: Exam, section: str) -> SectionLayout:
    if section not in (Section.LISTENING, Section.READING):
        raise ValueError(f"section has no question layout: {section}")
    parts = ExamPart.objects.filter(exam=exam, section=section).order_by("order", "id")
    return build_section_layout(section, parts)
