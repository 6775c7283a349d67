# apps/domains/assignments/services/candidate_code.py
from __future__ import annotations

import logging
import re
import secrets

from django.conf import settings
from django.db import IntegrityError, transaction

from apps.domains.assignments.exceptions import CodeSpaceExhausted
from apps.domains.assignments.models import ExamAssignment

logger = logging.getLogger(__name__)

CODE_LENGTH = 10
CODE_MIN = 10 ** (CODE_LENGTH - 1)
CODE_MAX = 10 ** CODE_LENGTH  # exclusive

_CODE_RE = re.compile(r"^[1-9][0-9]{9}$")

DEFAULT_MAX_ATTEMPTS = 50


def issue_candidate_code() -> str:
    """Uniform draw over [10^9, 10^10): always 10 digits, never a leading zero."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN))


def is_well_formed_code(value: object) -> bool:
    return isinstance(value, str) and bool(_CODE_RE.match(value))


def _max_attempts() -> int:
    return int(getattr(settings, "CANDIDATE_CODE_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS) or DEFAULT_MAX_ATTEMPTS)


def allocate_assignment(**fields) -> ExamAssignment:
    """
    Insert an ExamAssignment under a freshly drawn candidate code.

    Draw + insert is one unit per try: the unique constraint on
    candidate_code decides races, the savepoint lets us re-draw after a
    lost one. The exists() pre-check only avoids a wasted INSERT.
    """
    attempts = _max_attempts()

    for attempt in range(1, attempts + 1):
        code = issue_candidate_code()

        if ExamAssignment.objects.filter(candidate_code=code).exists():
            logger.warning("candidate code collision (pre-check) attempt=%s", attempt)
            continue

        try:
            with transaction.atomic():
                return ExamAssignment.objects.create(candidate_code=code, **fields)
        except IntegrityError:
            if not ExamAssignment.objects.filter(candidate_code=code).exists():
                raise
            logger.warning("candidate code collision (insert race) attempt=%s", attempt)

    raise CodeSpaceExhausted(f"no free candidate code after {attempts} attempts")
