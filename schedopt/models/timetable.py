from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from ..errors import InvalidScheduleFormat, SlotCollision
from .assignment import LessonAssignment

logger = logging.getLogger(__name__)

Pair = Tuple[str, Dict[str, Any]]


@dataclass
class Schedule:
    """Sparse map of slot key string -> lesson.

    Keys are kept verbatim, including ones that do not parse, so that a
    snapshot with corrupt entries survives a run unchanged.
    """

    cells: Dict[str, LessonAssignment] = field(default_factory=dict)

    def place(self, key: str, a: LessonAssignment) -> None:
        if key in self.cells:
            raise SlotCollision(f"slot {key} is already occupied")
        self.cells[key] = a

    def get(self, key: str) -> LessonAssignment | None:
        return self.cells.get(key)

    def occupied(self, key: str) -> bool:
        return key in self.cells

    def remove(self, key: str) -> LessonAssignment | None:
        return self.cells.pop(key, None)

    def move(self, from_key: str, to_key: str) -> LessonAssignment | None:
        """Relocate one lesson; ``None`` when there is nothing at ``from_key``."""
        a = self.cells.get(from_key)
        if a is None:
            return None
        if to_key in self.cells:
            raise SlotCollision(f"cannot move {from_key} -> {to_key}: target occupied")
        del self.cells[from_key]
        self.cells[to_key] = a
        return a

    def items(self) -> Iterable[Tuple[str, LessonAssignment]]:
        return self.cells.items()

    def all(self) -> Iterable[LessonAssignment]:
        return self.cells.values()

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[str]:
        return iter(self.cells)

    def __contains__(self, key: object) -> bool:
        return key in self.cells

    def copy(self) -> "Schedule":
        return Schedule(dict(self.cells))

    @classmethod
    def from_pairs(cls, pairs: object) -> "Schedule":
        if isinstance(pairs, (str, bytes, Mapping)) or not isinstance(pairs, Sequence):
            raise InvalidScheduleFormat(
                f"expected a list of [key, assignment] pairs, got {type(pairs).__name__}"
            )
        cells: Dict[str, LessonAssignment] = {}
        for i, item in enumerate(pairs):
            if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or len(item) != 2:
                raise InvalidScheduleFormat(f"entry {i} is not a [key, assignment] pair")
            key, value = item
            if not isinstance(key, str):
                raise InvalidScheduleFormat(f"entry {i} has a non-string key: {key!r}")
            if key in cells:
                logger.warning("Duplicate slot key %s in snapshot; keeping the later entry", key)
            if not isinstance(value, Mapping):
                logger.warning("Entry %s holds no lesson object; it will be kept untouched", key)
                cells[key] = LessonAssignment.opaque(value)
                continue
            cells[key] = LessonAssignment.from_dict(dict(value))
        return cls(cells)

    def to_pairs(self) -> List[Pair]:
        return [(k, a.to_dict()) for k, a in self.cells.items()]
