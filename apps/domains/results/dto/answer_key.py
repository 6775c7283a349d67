# apps/domains/results/dto/answer_key.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple


@dataclass(frozen=True)
class KeyEntry:
    number: int
    part_id: str
    # raw alternatives; compared through grading_policy.is_match
    accepted: Tuple[Any, ...]


@dataclass(frozen=True)
class AnswerKey:
    """
    Resolved, ordered answer key of one section.
    Built once per scoring call, never mutated.
    """

    section: str
    entries: Tuple[KeyEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[KeyEntry]:
        return iter(self.entries)
