from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class LessonAssignment:
    lesson_id: str
    teacher_ids: List[str]
    class_id: str | None = None
    time_slot: Dict[str, Any] | None = None
    # Untouched copy of the incoming value; written back as-is
    raw: Any = field(default_factory=dict, compare=False, repr=False)

    @property
    def primary_teacher(self) -> str | None:
        # Co-teachers beyond the first are not grouped or repositioned
        if not self.teacher_ids:
            return None
        return self.teacher_ids[0] or None

    @classmethod
    def from_dict(cls, value: Dict[str, Any]) -> "LessonAssignment":
        teacher_ids = value.get("teacherIds") or []
        if not isinstance(teacher_ids, list):
            teacher_ids = []
        lesson_id = value.get("lessonId")
        time_slot = value.get("timeSlot")
        return cls(
            lesson_id="" if lesson_id is None else str(lesson_id),
            teacher_ids=[str(t) for t in teacher_ids if t is not None],
            class_id=value.get("classId") or value.get("dalId"),
            time_slot=dict(time_slot) if isinstance(time_slot, dict) else None,
            raw=dict(value),
        )

    @classmethod
    def opaque(cls, value: Any) -> "LessonAssignment":
        """Hold a value that is not a lesson object so it can be written back unchanged."""
        return cls(lesson_id="", teacher_ids=[], raw=value)

    def to_dict(self) -> Any:
        if isinstance(self.raw, dict):
            return dict(self.raw)
        return self.raw
