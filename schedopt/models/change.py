from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

SHIFT = "shift"
CONSOLIDATION = "consolidation"

REASON_DAY_START = "day start alignment"
REASON_GAP = "gap reduction"
REASON_CONSOLIDATION = "day consolidation"


@dataclass(frozen=True)
class ChangeRecord:
    type: str
    teacher_id: str
    lesson_id: str
    from_key: str
    to_key: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "type": self.type,
            "teacherId": self.teacher_id,
            "lessonId": self.lesson_id,
            "fromKey": self.from_key,
            "toKey": self.to_key,
            "reason": self.reason,
        }
