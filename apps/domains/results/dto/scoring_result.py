# apps/domains/results/dto/scoring_result.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SectionScore:
    """listening / reading"""

    correct_count: int
    incorrect_count: int
    total_questions: int
    band_score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WritingScore:
    task1_score: Optional[float]
    task2_score: Optional[float]
    aggregate_score: Optional[float]
    feedback: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
