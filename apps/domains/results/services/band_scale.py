# PATH: apps/domains/results/services/band_scale.py
"""
Raw correct count -> band score (40-question scale).

Fixed conversion table. Between thresholds the lower band applies.
"""
from __future__ import annotations

# (minimum correct answers, band)
BAND_TABLE = (
    (39, 9.0),
    (37, 8.5),
    (35, 8.0),
    (33, 7.5),
    (30, 7.0),
    (27, 6.5),
    (23, 6.0),
    (19, 5.5),
    (15, 5.0),
    (13, 4.5),
    (10, 4.0),
    (8, 3.5),
    (6, 3.0),
    (4, 2.5),
)

FLOOR_BAND = 2.0


def band_for_correct_count(correct_count: int) -> float:
    n = int(correct_count)
    for threshold, band in BAND_TABLE:
        if n >= threshold:
            return band
    return FLOOR_BAND
