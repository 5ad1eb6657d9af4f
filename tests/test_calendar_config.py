from __future__ import annotations

from pathlib import Path

import pytest

from schedopt.config import OptimizerSettings, load_settings, settings_from_mapping
from schedopt.data.calendar import DayCalendar


def test_default_week_is_monday_to_friday() -> None:
    cal = DayCalendar()
    assert len(cal) == 5
    assert cal.index_of("Monday") == 0
    assert cal.index_of("Friday") == 4
    assert cal.index_of("Saturday") is None
    assert cal.name_of(2) == "Wednesday"


def test_calendar_rejects_duplicates_and_empty_weeks() -> None:
    with pytest.raises(ValueError):
        DayCalendar(("Mon", "Mon"))
    with pytest.raises(ValueError):
        DayCalendar(())


def test_rekey_uses_first_teacher_and_time_slot() -> None:
    cal = DayCalendar.from_names(["Pazartesi", "Salı", "Çarşamba", "Perşembe", "Cuma"])
    pairs = [
        ["Salı-3", {"lessonId": "a", "teacherIds": ["T1", "T2"], "timeSlot": {"day": "Salı", "hour": 3}}],
        ["Cuma-1", {"lessonId": "b", "teacherIds": ["T2"], "timeSlot": {"day": "Cuma", "hour": "1"}}],
        ["Pazar-1", {"lessonId": "c", "teacherIds": ["T3"], "timeSlot": {"day": "Pazar", "hour": 1}}],
        ["x", {"lessonId": "d", "teacherIds": [], "timeSlot": {"day": "Salı", "hour": 2}}],
    ]
    out = cal.rekey(pairs)
    assert [k for k, _ in out] == ["T1-1-3", "T2-4-1", "Pazar-1", "x"]
    assert out[0][1] is pairs[0][1]


def test_rekey_never_merges_two_lessons() -> None:
    slot = {"day": "Monday", "hour": 2}
    pairs = [
        ["Monday-2", {"lessonId": "a", "teacherIds": ["T1"], "timeSlot": slot}],
        ["Monday-2-b", {"lessonId": "b", "teacherIds": ["T1"], "timeSlot": slot}],
    ]
    assert [k for k, _ in DayCalendar().rekey(pairs)] == ["T1-0-2", "Monday-2-b"]


def test_settings_defaults_without_config(tmp_path: Path) -> None:
    assert load_settings(tmp_path) == OptimizerSettings()


def test_settings_from_toml(tmp_path: Path) -> None:
    cfg = tmp_path / "configs"
    cfg.mkdir()
    (cfg / "optimizer.toml").write_text(
        '[optimizer]\nmax_periods = 10\nlesson_threshold = 2\n\n'
        '[calendar]\ndays = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]\n',
        encoding="utf-8",
    )
    s = load_settings(tmp_path)
    assert s.max_periods == 10
    assert s.lesson_threshold == 2
    assert s.earliest_period == 1
    assert s.calendar.index_of("Sat") == 5


def test_settings_validation() -> None:
    with pytest.raises(ValueError):
        settings_from_mapping({"max_periods": "eight"})
    with pytest.raises(ValueError):
        OptimizerSettings(max_periods=0)
    with pytest.raises(ValueError):
        OptimizerSettings(lesson_threshold=0)
    s = OptimizerSettings().with_overrides(max_periods=None, lesson_threshold=4)
    assert (s.max_periods, s.lesson_threshold) == (8, 4)
