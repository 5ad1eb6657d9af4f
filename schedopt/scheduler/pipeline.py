from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..config import OptimizerSettings
from ..models.change import ChangeRecord
from ..models.timetable import Pair, Schedule
from .compact import GapReductionStrategy, reduce_gaps
from .consolidate import consolidate_days
from .gaps import total_gaps
from .grouping import unusable_entries
from .shift import shift_days_up

logger = logging.getLogger(__name__)


@dataclass
class OptimizationResult:
    schedule: Schedule
    total_gaps_before: int
    total_gaps_after: int
    changes: List[ChangeRecord] = field(default_factory=list)

    def pairs(self) -> List[Pair]:
        return self.schedule.to_pairs()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schedule": [[k, v] for k, v in self.pairs()],
            "totalGapsBefore": self.total_gaps_before,
            "totalGapsAfter": self.total_gaps_after,
            "changeLog": [c.to_dict() for c in self.changes],
        }


def optimize_schedule(
    pairs: object,
    settings: OptimizerSettings | None = None,
    strategy: GapReductionStrategy | None = None,
) -> OptimizationResult:
    """Run day start alignment, gap reduction and day consolidation once each.

    Raises InvalidScheduleFormat when ``pairs`` is not a list of
    [key, assignment] pairs. Anything else wrong with individual entries is
    logged and left alone.
    """
    settings = settings or OptimizerSettings()
    schedule = Schedule.from_pairs(pairs)
    skipped = unusable_entries(schedule)
    if skipped:
        logger.warning(
            "%d entries will not be optimized (bad key or no teacher): %s",
            len(skipped),
            ", ".join(skipped[:10]),
        )
    before = total_gaps(schedule)
    logger.info("Optimizing %d lessons; gaps before: %d", len(schedule), before)

    changes: List[ChangeRecord] = []
    schedule, changes = shift_days_up(schedule, changes, settings)
    schedule, changes = reduce_gaps(schedule, changes, strategy)
    schedule, changes = consolidate_days(schedule, changes, settings)

    after = total_gaps(schedule)
    logger.info("Optimization finished; gaps after: %d, changes: %d", after, len(changes))
    return OptimizationResult(
        schedule=schedule,
        total_gaps_before=before,
        total_gaps_after=after,
        changes=changes,
    )
