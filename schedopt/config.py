from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict

from .data.calendar import DayCalendar

EARLIEST_PERIOD = 1
MAX_PERIODS = 8
LESSON_THRESHOLD = 3


@dataclass(frozen=True)
class OptimizerSettings:
    max_periods: int = MAX_PERIODS
    lesson_threshold: int = LESSON_THRESHOLD
    earliest_period: int = EARLIEST_PERIOD
    calendar: DayCalendar = field(default_factory=DayCalendar)

    def __post_init__(self) -> None:
        if self.earliest_period < 1:
            raise ValueError(f"earliest_period must be >= 1, got {self.earliest_period}")
        if self.max_periods < self.earliest_period:
            raise ValueError(
                f"max_periods ({self.max_periods}) is below earliest_period ({self.earliest_period})"
            )
        if self.lesson_threshold < 1:
            raise ValueError(f"lesson_threshold must be >= 1, got {self.lesson_threshold}")

    def with_overrides(self, **overrides: Any) -> "OptimizerSettings":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _project_root() -> Path:
    # schedopt/config.py -> project root is parents[1]
    return Path(__file__).resolve().parents[1]


def load_settings(project_root: Path | str | None = None) -> OptimizerSettings:
    """Load settings from configs/optimizer.toml if present, else defaults.

    Keys may sit at top level or under [optimizer]:
      - max_periods, lesson_threshold, earliest_period
    An optional [calendar] table with ``days = [...]`` replaces the
    Monday..Friday week.
    """
    base = OptimizerSettings()
    root: Path = _project_root() if project_root is None else Path(project_root)
    cfg = root / "configs" / "optimizer.toml"
    if not cfg.exists():
        return base
    data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    return settings_from_mapping(data, base)


def settings_from_mapping(
    data: Dict[str, Any], base: OptimizerSettings | None = None
) -> OptimizerSettings:
    base = base or OptimizerSettings()
    section = data.get("optimizer") if isinstance(data.get("optimizer"), dict) else data

    def get_int(name: str, default: int) -> int:
        v = section.get(name, default)
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"config value {name} must be an integer, got {v!r}")
        return v

    calendar = base.calendar
    cal = data.get("calendar")
    if isinstance(cal, dict) and cal.get("days"):
        calendar = DayCalendar.from_names(cal["days"])
    return OptimizerSettings(
        max_periods=get_int("max_periods", base.max_periods),
        lesson_threshold=get_int("lesson_threshold", base.lesson_threshold),
        earliest_period=get_int("earliest_period", base.earliest_period),
        calendar=calendar,
    )
