from __future__ import annotations

import logging

from ..models.change import ChangeRecord
from ..models.timetable import Schedule

logger = logging.getLogger(__name__)


def relocate(
    schedule: Schedule,
    teacher: str,
    from_key: str,
    to_key: str,
    kind: str,
    reason: str,
) -> ChangeRecord | None:
    """Move one lesson and describe it, or return ``None`` if it cannot move.

    A missing source is an inconsistency in the snapshot; the move is
    skipped and the caller carries on with the next lesson.
    """
    if schedule.occupied(to_key):
        logger.warning("Skipping %s -> %s: target already holds a lesson", from_key, to_key)
        return None
    a = schedule.move(from_key, to_key)
    if a is None:
        logger.warning("Skipping %s -> %s: no lesson at source", from_key, to_key)
        return None
    logger.debug("Moved %s -> %s (%s)", from_key, to_key, reason)
    return ChangeRecord(
        type=kind,
        teacher_id=teacher,
        lesson_id=a.lesson_id,
        from_key=from_key,
        to_key=to_key,
        reason=reason,
    )
