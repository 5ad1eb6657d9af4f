from __future__ import annotations

import json
from pathlib import Path
from typing import Dict


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> None:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    with (outputs_dir / "validation.json").open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)


def format_validation_report(report: Dict[str, object]) -> str:
    lines: list[str] = []
    lines.append(f"clash_count: {report.get('clash_count')}")
    lines.append(
        f"total_gaps: {report.get('total_gaps_before')} -> {report.get('total_gaps_after')}"
    )
    cons = report.get("conservation", {})
    if isinstance(cons, dict):
        lines.append(
            f"conservation: {'ok' if cons.get('ok') else 'FAILED'} "
            f"({cons.get('count_before')} -> {cons.get('count_after')} entries)"
        )
    malformed = report.get("malformed_keys", [])
    lines.append(f"malformed_keys: {len(malformed)} entries")
    out_of_range = report.get("out_of_range_keys", [])
    lines.append(f"out_of_range_keys: {len(out_of_range)} entries")
    lines.append("gaps_by_teacher:")
    gaps = report.get("gaps_by_teacher", {})
    if isinstance(gaps, dict):
        for t, v in gaps.items():
            lines.append(f"  - {t}: {v['before']} -> {v['after']}")
    return "\n".join(lines)
