# Re-export common types
from .assignment import LessonAssignment
from .change import ChangeRecord
from .slot_key import SlotKey, format_key, parse_key
from .timetable import Schedule

__all__ = [
    "SlotKey",
    "format_key",
    "parse_key",
    "LessonAssignment",
    "ChangeRecord",
    "Schedule",
]
