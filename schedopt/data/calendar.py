from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from ..models.slot_key import format_key

logger = logging.getLogger(__name__)

DEFAULT_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


@dataclass(frozen=True)
class DayCalendar:
    """Ordered day names; a day's position in the week is its index."""

    days: Tuple[str, ...] = DEFAULT_DAYS

    def __post_init__(self) -> None:
        if not self.days:
            raise ValueError("calendar needs at least one day")
        if len(set(self.days)) != len(self.days):
            raise ValueError(f"duplicate day names in calendar: {list(self.days)}")

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "DayCalendar":
        return cls(tuple(str(n) for n in names))

    def __len__(self) -> int:
        return len(self.days)

    def index_of(self, name: str) -> int | None:
        try:
            return self.days.index(name)
        except ValueError:
            return None

    def name_of(self, index: int) -> str:
        return self.days[index]

    def valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.days)

    def rekey(self, pairs: Sequence[Sequence[Any]]) -> List[Tuple[Any, Any]]:
        """Rewrite generator keys (e.g. ``"Monday-3"``) to teacher-day-period keys.

        The new key is built from the entry's first teacher, its
        ``timeSlot.day`` looked up in this calendar and ``timeSlot.hour``.
        Entries lacking any of those keep their original key.
        """
        out: List[Tuple[Any, Any]] = []
        seen: Dict[str, Any] = {}
        for key, value in pairs:
            new_key = self._key_from_value(value)
            if new_key is None:
                logger.warning("Cannot rekey %s from its time slot; keeping original key", key)
                new_key = key
            elif new_key in seen:
                logger.warning(
                    "Rekeying %s gives %s which is already taken; keeping original key",
                    key,
                    new_key,
                )
                new_key = key
            seen[new_key] = value
            out.append((new_key, value))
        return out

    def _key_from_value(self, value: Any) -> str | None:
        if not isinstance(value, dict):
            return None
        teachers = value.get("teacherIds") or []
        slot = value.get("timeSlot") or {}
        if not teachers or not isinstance(slot, dict):
            return None
        day = self.index_of(slot.get("day"))
        hour = slot.get("hour")
        if day is None or isinstance(hour, bool):
            return None
        try:
            period = int(hour)
        except (TypeError, ValueError):
            return None
        return format_key(str(teachers[0]), day, period)
