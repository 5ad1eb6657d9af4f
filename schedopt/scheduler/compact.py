from __future__ import annotations

import logging
from typing import Callable, List, Protocol, Sequence, Tuple

from ..models.change import REASON_GAP, SHIFT, ChangeRecord
from ..models.slot_key import format_key
from ..models.timetable import Schedule
from .grouping import build_teacher_day_index, iter_teacher_days
from .moves import relocate

logger = logging.getLogger(__name__)

# (from_period, to_period) -> whether the lesson actually moved
Mover = Callable[[int, int], bool]


class GapReductionStrategy(Protocol):
    name: str

    def compact(self, periods: List[int], move: Mover) -> None:
        """Pull lessons down into gaps, updating ``periods`` for every move made."""


class SingleSweep:
    """One left-to-right pass; each lesson drops to just after its predecessor.

    Not maximal: a lesson that cannot move leaves the gap after it open even
    if a later sweep could close it.
    """

    name = "single"

    def compact(self, periods: List[int], move: Mover) -> None:
        for i in range(1, len(periods)):
            if periods[i] - periods[i - 1] - 1 <= 0:
                continue
            target = periods[i - 1] + 1
            if move(periods[i], target):
                # target lies strictly between the neighbours, order holds
                periods[i] = target


class FixpointSweep:
    """Repeat single sweeps until one of them moves nothing."""

    name = "fixpoint"

    def __init__(self) -> None:
        self._sweep = SingleSweep()

    def compact(self, periods: List[int], move: Mover) -> None:
        while True:
            moved = False

            def tracked(src: int, dst: int) -> bool:
                nonlocal moved
                ok = move(src, dst)
                moved = moved or ok
                return ok

            self._sweep.compact(periods, tracked)
            if not moved:
                return


STRATEGIES = {s.name: s for s in (SingleSweep, FixpointSweep)}


def reduce_gaps(
    schedule: Schedule,
    changes: Sequence[ChangeRecord],
    strategy: GapReductionStrategy | None = None,
) -> Tuple[Schedule, List[ChangeRecord]]:
    strategy = strategy or SingleSweep()
    out = schedule.copy()
    log = list(changes)
    start = len(log)
    index = build_teacher_day_index(out)
    for teacher, day, periods in iter_teacher_days(index):
        if len(periods) < 2:
            continue

        def move(src: int, dst: int, teacher: str = teacher, day: int = day) -> bool:
            rec = relocate(
                out,
                teacher,
                format_key(teacher, day, src),
                format_key(teacher, day, dst),
                SHIFT,
                REASON_GAP,
            )
            if rec is None:
                return False
            log.append(rec)
            return True

        strategy.compact(periods, move)
    logger.info("Gap reduction (%s): %d lesson(s) moved", strategy.name, len(log) - start)
    return out, log
