from __future__ import annotations

from collections import Counter
from typing import Dict, List

from ..config import OptimizerSettings
from ..models.slot_key import parse_key
from ..models.timetable import Schedule
from ..scheduler.gaps import gaps_by_teacher


def validate_schedule(
    before: Schedule,
    after: Schedule,
    settings: OptimizerSettings | None = None,
) -> Dict[str, object]:
    settings = settings or OptimizerSettings()
    report: Dict[str, object] = {}

    # Collisions: one teacher booked twice in the same day/period
    teacher_slots: Counter = Counter()
    for key, a in after.items():
        slot = parse_key(key)
        if slot is None or a.primary_teacher is None:
            continue
        teacher_slots[(a.primary_teacher, slot.day, slot.period)] += 1
    report["clash_count"] = sum(1 for _, c in teacher_slots.items() if c > 1)

    malformed = [k for k in after if parse_key(k) is None]
    report["malformed_keys"] = malformed

    out_of_range: List[str] = []
    for key in after:
        slot = parse_key(key)
        if slot is None:
            continue
        if not settings.calendar.valid_index(slot.day) or not (
            1 <= slot.period <= settings.max_periods
        ):
            out_of_range.append(key)
    report["out_of_range_keys"] = out_of_range

    # Conservation: same lessons, same count, unparseable entries untouched
    lessons_before = Counter(a.lesson_id for a in before.all())
    lessons_after = Counter(a.lesson_id for a in after.all())
    lost = lessons_before - lessons_after
    added = lessons_after - lessons_before
    untouched = all(
        k in after and after.get(k) == before.get(k) for k in before if parse_key(k) is None
    )
    report["conservation"] = {
        "count_before": len(before),
        "count_after": len(after),
        "lost_lessons": dict(sorted(lost.items())),
        "added_lessons": dict(sorted(added.items())),
        "malformed_preserved": untouched,
        "ok": len(before) == len(after) and not lost and not added and untouched,
    }

    gaps_before = gaps_by_teacher(before)
    gaps_after = gaps_by_teacher(after)
    report["total_gaps_before"] = sum(gaps_before.values())
    report["total_gaps_after"] = sum(gaps_after.values())
    report["gaps_by_teacher"] = {
        t: {"before": gaps_before.get(t, 0), "after": gaps_after.get(t, 0)}
        for t in sorted(set(gaps_before) | set(gaps_after))
    }
    report["days_by_teacher"] = _days_in_use(before, after)
    return report


def _days_in_use(before: Schedule, after: Schedule) -> Dict[str, Dict[str, int]]:
    def count(s: Schedule) -> Dict[str, int]:
        seen: Dict[str, set] = {}
        for key, a in s.items():
            slot = parse_key(key)
            if slot is None or a.primary_teacher is None:
                continue
            seen.setdefault(a.primary_teacher, set()).add(slot.day)
        return {t: len(d) for t, d in seen.items()}

    b, a = count(before), count(after)
    return {
        t: {"before": b.get(t, 0), "after": a.get(t, 0)} for t in sorted(set(b) | set(a))
    }
