from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from ..errors import SnapshotLoadError


@dataclass
class LoadedSnapshot:
    pairs: List[Any]
    # Saved-record fields around ``schedule_data``; empty for a bare pair list
    record: Dict[str, Any] = field(default_factory=dict)


def load_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise SnapshotLoadError(f"cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(f"{path} is not valid JSON: {e}") from e


def load_snapshot(path: Path) -> LoadedSnapshot:
    data = load_json(path)
    if isinstance(data, dict):
        if "schedule_data" not in data:
            raise SnapshotLoadError(f"{path}: record has no schedule_data")
        record = {k: v for k, v in data.items() if k != "schedule_data"}
        return LoadedSnapshot(pairs=data["schedule_data"], record=record)
    return LoadedSnapshot(pairs=data)


def write_json(data: Any, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def new_version_record(
    record: Dict[str, Any],
    schedule_data: List[Any],
    total_gaps: int,
    change_count: int,
    stamp: str,
) -> Dict[str, Any]:
    """Build the saved record for an optimized copy; ``record`` is left as is."""
    out = {k: v for k, v in record.items() if k not in {"id", "created_at", "updated_at"}}
    out["name"] = f"{record.get('name') or 'Untitled schedule'} (Optimized {stamp})"
    out["schedule_data"] = schedule_data
    out["total_gaps"] = total_gaps
    source = record.get("id")
    note = f"Optimized from original {source}." if source else "Optimized."
    out["logs"] = list(record.get("logs") or []) + [f"{note} {change_count} changes made."]
    return out
