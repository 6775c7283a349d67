# PATH: apps/domains/results/services/grading_policy.py
"""
Answer comparison policy (exact match after normalization).

- normalize: str -> strip -> lower (integral floats as ints)
- alternatives: accepted answer may list several acceptable values
- multi-select: submitted list must have the same length as the accepted
  list and every element must match some accepted value
"""
from __future__ import annotations

from typing import Any, Sequence


def normalize_answer(value: Any) -> str:
    if value is None:
        return ""
    # JSON numbers: 5.0 and 5 are the same answer
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip().lower()


def accepted_alternatives(raw: Any) -> tuple:
    """Answer-key value -> tuple of raw alternatives."""
    if raw is None:
        return ()
    if isinstance(raw, (list, tuple)):
        return tuple(x for x in raw if x is not None)
    return (raw,)


def is_match(submitted: Any, accepted: Sequence[Any]) -> bool:
    normalized = {normalize_answer(a) for a in accepted}
    normalized.discard("")
    if not normalized:
        return False

    if isinstance(submitted, (list, tuple)):
        if not submitted or len(submitted) != len(accepted):
            return False
        return all(normalize_answer(s) in normalized for s in submitted)

    ans = normalize_answer(submitted)
    return ans != "" and ans in normalized
