# apps/domains/exams/dto/section_layout.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ContainerLayout:
    container_id: str
    container_type: str
    # number of numbered questions this container occupies
    slots: int


@dataclass(frozen=True)
class PartLayout:
    part_id: str
    label: str
    containers: Tuple[ContainerLayout, ...]
    # raw answer key of the part: {"1": "A", "2": ["x", "y"]}
    answers: Dict[str, Any]

    def container_ids(self) -> Tuple[str, ...]:
        return tuple(c.container_id for c in self.containers)


@dataclass(frozen=True)
class SectionLayout:
    section: str
    parts: Tuple[PartLayout, ...]
