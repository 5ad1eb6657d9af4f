from __future__ import annotations

from pathlib import Path


def count_loc(path: Path) -> int:
    text = path.read_text(encoding="utf-8")
    return sum(1 for _ in text.splitlines())


def test_modules_stay_small() -> None:
    pkg = Path(__file__).resolve().parents[1] / "schedopt"
    budget = 300
    offenders: list[tuple[str, int]] = []
    for p in pkg.rglob("*.py"):
        loc = count_loc(p)
        if loc > budget:
            offenders.append((str(p.relative_to(pkg)), loc))
    assert not offenders, f"Modules exceeding {budget} lines: {offenders}"
