from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class SlotKey:
    teacher_id: str
    day: int
    period: int

    def __str__(self) -> str:
        return format_key(self.teacher_id, self.day, self.period)

    def moved(self, day: int, period: int) -> "SlotKey":
        return SlotKey(self.teacher_id, day, period)


def format_key(teacher_id: str, day: int, period: int) -> str:
    return f"{teacher_id}-{day}-{period}"


def parse_key(key: object) -> SlotKey | None:
    """Split ``"{teacher}-{day}-{period}"`` into its parts.

    The teacher id may itself contain dashes (UUIDs), so only the last two
    tokens are read as day and period. Returns ``None`` for anything that
    does not fit instead of raising.
    """
    if not isinstance(key, str):
        return None
    parts = key.split("-")
    if len(parts) < 3:
        return None
    day_s, period_s = parts[-2], parts[-1]
    if not (_is_int(day_s) and _is_int(period_s)):
        return None
    teacher_id = "-".join(parts[:-2])
    if not teacher_id:
        return None
    return SlotKey(teacher_id, int(day_s), int(period_s))


def _is_int(token: str) -> bool:
    # "-" is the separator, so a valid token never carries a sign
    return token.isascii() and token.isdigit()
