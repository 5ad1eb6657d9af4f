from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterator, List, Tuple

from ..models.slot_key import parse_key
from ..models.timetable import Schedule

logger = logging.getLogger(__name__)

# teacher id -> day index -> ascending, duplicate-free periods
TeacherDayIndex = Dict[str, Dict[int, List[int]]]


def build_teacher_day_index(schedule: Schedule) -> TeacherDayIndex:
    grouped: Dict[str, Dict[int, List[int]]] = defaultdict(dict)
    for key, a in schedule.items():
        slot = parse_key(key)
        if slot is None:
            logger.debug("Skipping unparseable slot key %r", key)
            continue
        teacher = a.primary_teacher
        if teacher is None:
            logger.debug("Skipping %s: lesson %s has no teacher", key, a.lesson_id)
            continue
        periods = grouped[teacher].setdefault(slot.day, [])
        if slot.period not in periods:
            periods.append(slot.period)
    for days in grouped.values():
        for periods in days.values():
            periods.sort()
    return dict(grouped)


def iter_teacher_days(index: TeacherDayIndex) -> Iterator[Tuple[str, int, List[int]]]:
    """Yield (teacher, day, periods) by teacher id, then day index.

    The yielded lists are the index's own lists, so a pass may update them
    in place while it walks.
    """
    for teacher in sorted(index):
        days = index[teacher]
        for day in sorted(days):
            yield teacher, day, days[day]


def unusable_entries(schedule: Schedule) -> List[str]:
    """Keys the passes will never touch: unparseable, or without a teacher."""
    out: List[str] = []
    for key, a in schedule.items():
        if parse_key(key) is None or a.primary_teacher is None:
            out.append(key)
    return out
