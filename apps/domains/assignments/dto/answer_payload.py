# apps/domains/assignments/dto/answer_payload.py
"""
Section answer payloads (tagged union)

stored shape (ExamAssignment.answers[section]):

  listening:
    {"parts": {part_id: {container_id: {"1": "A", "2": "london"}}},
     "time_spent": 12, "current_question": "7"}

  reading:
    {"parts": {part_id: {container_id: ["TRUE", "FALSE", "B"]}}, ...}

  writing:
    {"task1_answer": "...", "task2_answer": "...", "word_count": 412, ...}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

AnswerValue = Union[str, int, float, List[Union[str, int, float]]]

SECTION_NAMES = ("listening", "reading", "writing")


def _check_value(v: Any, *, where: str) -> AnswerValue:
    if v is None or isinstance(v, (str, int, float)) and not isinstance(v, bool):
        return v
    if isinstance(v, list) and all(
        isinstance(x, (str, int, float)) and not isinstance(x, bool) for x in v
    ):
        return list(v)
    raise ValueError(f"{where}: answer must be a string, a number or a list of those")


def _optional_int(v: Any, *, name: str) -> Optional[int]:
    if v is None:
        return None
    if isinstance(v, bool):
        raise ValueError(f"{name} must be an integer")
    try:
        n = int(v)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer")
    if n < 0:
        raise ValueError(f"{name} must be >= 0")
    return n


def _optional_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    return str(v)


def _parts_mapping(raw: Any, *, section: str) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{section}.parts must be an object keyed by part id")
    return raw


def _numeric_key(k: str) -> tuple:
    s = str(k).strip()
    return (0, int(s), s) if s.isdigit() else (1, 0, s)


@dataclass(frozen=True)
class ListeningAnswers:
    section: Literal["listening"] = field(default="listening", init=False)
    # part_id -> container_id -> question_number -> value
    parts: Dict[str, Dict[str, Dict[str, AnswerValue]]] = field(default_factory=dict)
    time_spent: Optional[int] = None
    current_question: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ListeningAnswers":
        parts: Dict[str, Dict[str, Dict[str, AnswerValue]]] = {}
        for part_id, containers in _parts_mapping(raw.get("parts"), section="listening").items():
            if not isinstance(containers, dict):
                raise ValueError(f"listening part {part_id}: containers must be an object")
            part: Dict[str, Dict[str, AnswerValue]] = {}
            for container_id, questions in containers.items():
                if not isinstance(questions, dict):
                    raise ValueError(
                        f"listening {part_id}/{container_id}: expected question_number -> answer"
                    )
                part[str(container_id)] = {
                    str(num).strip(): _check_value(v, where=f"listening {part_id}/{container_id}/{num}")
                    for num, v in questions.items()
                }
            parts[str(part_id)] = part
        return cls(
            parts=parts,
            time_spent=_optional_int(raw.get("time_spent"), name="time_spent"),
            current_question=_optional_str(raw.get("current_question")),
        )

    def answer_for(self, part_id: str, question_number: int) -> Optional[AnswerValue]:
        key = str(question_number)
        for questions in (self.parts.get(str(part_id)) or {}).values():
            if key in questions:
                return questions[key]
        return None

    def to_storage(self) -> Dict[str, Any]:
        return {
            "parts": self.parts,
            "time_spent": self.time_spent,
            "current_question": self.current_question,
        }


@dataclass(frozen=True)
class ReadingAnswers:
    section: Literal["reading"] = field(default="reading", init=False)
    # part_id -> container_id -> [value, ...] (positional, no numbers)
    parts: Dict[str, Dict[str, List[Optional[AnswerValue]]]] = field(default_factory=dict)
    time_spent: Optional[int] = None
    current_question: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ReadingAnswers":
        parts: Dict[str, Dict[str, List[Optional[AnswerValue]]]] = {}
        for part_id, containers in _parts_mapping(raw.get("parts"), section="reading").items():
            if not isinstance(containers, dict):
                raise ValueError(f"reading part {part_id}: containers must be an object")
            part: Dict[str, List[Optional[AnswerValue]]] = {}
            for container_id, values in containers.items():
                where = f"reading {part_id}/{container_id}"
                if isinstance(values, dict):
                    # {"5": "A", "6": "B"} -> ordered by question number
                    values = [values[k] for k in sorted(values, key=_numeric_key)]
                if not isinstance(values, list):
                    raise ValueError(f"{where}: expected a list of answers")
                part[str(container_id)] = [_check_value(v, where=where) for v in values]
            parts[str(part_id)] = part
        return cls(
            parts=parts,
            time_spent=_optional_int(raw.get("time_spent"), name="time_spent"),
            current_question=_optional_str(raw.get("current_question")),
        )

    def container_answers(self, part_id: str, container_id: str) -> List[Optional[AnswerValue]]:
        return list((self.parts.get(str(part_id)) or {}).get(str(container_id)) or [])

    def to_storage(self) -> Dict[str, Any]:
        return {
            "parts": self.parts,
            "time_spent": self.time_spent,
            "current_question": self.current_question,
        }


@dataclass(frozen=True)
class WritingAnswers:
    section: Literal["writing"] = field(default="writing", init=False)
    task1_answer: Optional[str] = None
    task2_answer: Optional[str] = None
    word_count: int = 0
    time_spent: Optional[int] = None
    current_question: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "WritingAnswers":
        return cls(
            task1_answer=_optional_str(raw.get("task1_answer")),
            task2_answer=_optional_str(raw.get("task2_answer")),
            word_count=_optional_int(raw.get("word_count"), name="word_count") or 0,
            time_spent=_optional_int(raw.get("time_spent"), name="time_spent"),
            current_question=_optional_str(raw.get("current_question")),
        )

    @property
    def is_blank(self) -> bool:
        return not (self.task1_answer or "").strip() and not (self.task2_answer or "").strip()

    def to_storage(self) -> Dict[str, Any]:
        return {
            "task1_answer": self.task1_answer,
            "task2_answer": self.task2_answer,
            "word_count": self.word_count,
            "time_spent": self.time_spent,
            "current_question": self.current_question,
        }


SectionAnswers = Union[ListeningAnswers, ReadingAnswers, WritingAnswers]

_PAYLOAD_TYPES = {
    "listening": ListeningAnswers,
    "reading": ReadingAnswers,
    "writing": WritingAnswers,
}


def parse_section_answers(section: str, raw: Any) -> SectionAnswers:
    """raw JSON -> typed payload. Raises ValueError on malformed input."""
    payload_type = _PAYLOAD_TYPES.get(str(section))
    if payload_type is None:
        raise ValueError(f"unknown section: {section}")
    if not isinstance(raw, dict):
        raise ValueError(f"{section} payload must be an object")
    return payload_type.from_dict(raw)


def parse_answer_sheet(raw: Any) -> Dict[str, SectionAnswers]:
    """{"listening": {...}, "reading": {...}, "writing": {...}} -> typed."""
    if not isinstance(raw, dict):
        raise ValueError("answers must be an object keyed by section")
    unknown = [k for k in raw if k not in SECTION_NAMES]
    if unknown:
        raise ValueError(f"unknown sections: {', '.join(sorted(map(str, unknown)))}")
    return {
        section: parse_section_answers(section, payload)
        for section, payload in raw.items()
        if payload is not None
    }
