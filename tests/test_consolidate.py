from __future__ import annotations

from schedopt.config import OptimizerSettings
from schedopt.models.timetable import Schedule
from schedopt.scheduler.consolidate import consolidate_days


def lesson(lesson_id: str, teacher: str = "T1") -> dict:
    return {"lessonId": lesson_id, "teacherIds": [teacher], "classId": "12A"}


def week(teacher: str, days: dict) -> list:
    return [
        [f"{teacher}-{d}-{p}", lesson(f"{teacher}-L{d}{p}", teacher)]
        for d, periods in days.items()
        for p in periods
    ]


def test_sparse_day_moves_to_first_free_period() -> None:
    s = Schedule.from_pairs(week("T1", {0: [1, 2, 3, 4, 5], 2: [1]}))
    out, changes = consolidate_days(s, [])
    assert "T1-2-1" not in out
    assert out.get("T1-0-6").lesson_id == "T1-L21"
    assert [c.to_dict() for c in changes] == [
        {
            "type": "consolidation",
            "teacherId": "T1",
            "lessonId": "T1-L21",
            "fromKey": "T1-2-1",
            "toKey": "T1-0-6",
            "reason": "day consolidation",
        }
    ]


def test_sparse_day_is_emptied_from_the_last_period() -> None:
    s = Schedule.from_pairs(week("T1", {0: [1, 2, 3], 3: [1, 2]}))
    out, changes = consolidate_days(s, [])
    assert [(c.from_key, c.to_key) for c in changes] == [
        ("T1-3-2", "T1-0-4"),
        ("T1-3-1", "T1-0-5"),
    ]
    assert len(out) == 5


def test_partial_consolidation_when_target_days_fill_up() -> None:
    s = Schedule.from_pairs(week("T1", {0: [1, 2, 3], 1: [1, 2]}))
    out, changes = consolidate_days(s, [], OptimizerSettings(max_periods=4))
    assert [(c.from_key, c.to_key) for c in changes] == [("T1-1-2", "T1-0-4")]
    assert out.get("T1-1-1").lesson_id == "T1-L11"
    assert len(out) == 5


def test_target_days_are_tried_in_day_order() -> None:
    s = Schedule.from_pairs(week("T1", {0: [5], 1: list(range(1, 9)), 3: [1, 2, 3]}))
    out, changes = consolidate_days(s, [])
    assert [(c.from_key, c.to_key) for c in changes] == [("T1-0-5", "T1-3-4")]


def test_teacher_without_full_days_is_skipped() -> None:
    s = Schedule.from_pairs(week("T1", {0: [1, 2], 1: [1]}))
    out, changes = consolidate_days(s, [])
    assert changes == []
    assert sorted(out) == sorted(s)


def test_threshold_is_configurable() -> None:
    s = Schedule.from_pairs(week("T1", {0: [1], 1: [1, 2]}))
    _, none = consolidate_days(s, [], OptimizerSettings(lesson_threshold=3))
    _, some = consolidate_days(s, [], OptimizerSettings(lesson_threshold=2))
    assert none == []
    assert [(c.from_key, c.to_key) for c in some] == [("T1-0-1", "T1-1-3")]


def test_teachers_are_consolidated_independently() -> None:
    pairs = week("T1", {0: [1, 2, 3], 4: [1]}) + week("T2", {0: [1, 2, 3], 4: [2]})
    out, changes = consolidate_days(Schedule.from_pairs(pairs), [])
    assert [(c.teacher_id, c.to_key) for c in changes] == [("T1", "T1-0-4"), ("T2", "T2-0-4")]
    assert len(out) == 8
