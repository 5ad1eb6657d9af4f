from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Dict, Iterable, List

from ..config import OptimizerSettings
from ..models.change import ChangeRecord
from ..models.slot_key import parse_key
from ..models.timetable import Schedule


def change_log_csv(changes: Iterable[ChangeRecord]) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(["Step", "Type", "Teacher", "Lesson", "From", "To", "Reason"])
    for i, c in enumerate(changes, start=1):
        w.writerow([i, c.type, c.teacher_id, c.lesson_id, c.from_key, c.to_key, c.reason])
    return buf.getvalue()


def teacher_grid_csv(schedule: Schedule, settings: OptimizerSettings | None = None) -> str:
    # One block per teacher: Period rows, one column per calendar day
    settings = settings or OptimizerSettings()
    cal = settings.calendar
    grid: Dict[str, Dict[tuple, List[str]]] = {}
    for key, a in schedule.items():
        slot = parse_key(key)
        if slot is None or a.primary_teacher is None:
            continue
        cell = grid.setdefault(a.primary_teacher, {}).setdefault((slot.day, slot.period), [])
        cell.append(a.lesson_id)

    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    for teacher in sorted(grid):
        cells = grid[teacher]
        w.writerow(["Teacher", "Period"] + list(cal.days))
        last = max([settings.max_periods] + [p for (_, p) in cells])
        for period in range(1, last + 1):
            row = [teacher, period]
            for day in range(len(cal)):
                row.append("/".join(cells.get((day, period), [])))
            w.writerow(row)
        w.writerow([])
    return buf.getvalue()


def write_csv(text: str, outputs_dir: Path, name: str) -> None:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    with (outputs_dir / name).open("w", encoding="utf-8", newline="") as f:
        f.write(text)
