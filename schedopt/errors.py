from __future__ import annotations


class ScheduleError(ValueError):
    """Base class for optimizer failures."""


class InvalidScheduleFormat(ScheduleError):
    """The snapshot is not a sequence of (key, assignment) pairs."""


class SlotCollision(ScheduleError):
    """A move targeted a key that already holds a lesson."""


class SnapshotLoadError(ScheduleError):
    """A snapshot or record file could not be read."""
