from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

import typer

from ..config import OptimizerSettings, load_settings
from ..data.loader import load_snapshot, new_version_record, write_json
from ..errors import ScheduleError
from ..models.timetable import Schedule
from ..render.csv_out import change_log_csv, teacher_grid_csv, write_csv
from ..scheduler import STRATEGIES, gaps_by_teacher, optimize_schedule
from ..validate.checks import validate_schedule
from ..validate.report import format_validation_report, write_validation_report


def _setup_logging(project_root: Path) -> None:
    logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "optimizer.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def _settings(
    project_root: Path, max_periods: int | None, lesson_threshold: int | None
) -> OptimizerSettings:
    return load_settings(project_root).with_overrides(
        max_periods=max_periods, lesson_threshold=lesson_threshold
    )


def run_pipeline(
    project_root: Path,
    input_path: Path,
    *,
    output_path: Path | None = None,
    log_level: int | None = None,
    max_periods: int | None = None,
    lesson_threshold: int | None = None,
    rekey: bool = False,
    strategy: str = "single",
    stamp: str | None = None,
) -> tuple[str, str, str]:
    _setup_logging(project_root)
    if log_level is not None:
        logging.getLogger().setLevel(log_level)
    settings = _settings(project_root, max_periods, lesson_threshold)
    if strategy not in STRATEGIES:
        raise ScheduleError(f"unknown gap strategy {strategy!r}; choose from {sorted(STRATEGIES)}")

    outputs_dir = project_root / "outputs"
    output_path = output_path or outputs_dir / "optimized_schedule.json"
    if output_path.resolve() == input_path.resolve():
        raise ScheduleError("refusing to overwrite the input schedule; pick another output path")

    loaded = load_snapshot(input_path)
    pairs = loaded.pairs
    if rekey:
        pairs = settings.calendar.rekey(pairs)
    result = optimize_schedule(pairs, settings, STRATEGIES[strategy]())

    stamp = stamp or datetime.now().strftime("%H:%M:%S")
    schedule_data = [[k, v] for k, v in result.pairs()]
    if loaded.record:
        payload = new_version_record(
            loaded.record,
            schedule_data,
            result.total_gaps_after,
            len(result.changes),
            stamp,
        )
    else:
        payload = result.to_dict()
    write_json(payload, output_path)

    report = validate_schedule(Schedule.from_pairs(pairs), result.schedule, settings)
    write_validation_report(report, outputs_dir)
    write_csv(change_log_csv(result.changes), outputs_dir, "changes.csv")
    write_csv(teacher_grid_csv(result.schedule, settings), outputs_dir, "teacher_grid.csv")

    audit_text = "\n".join(
        [
            f"Gaps: {result.total_gaps_before} -> {result.total_gaps_after}",
            f"Changes ({len(result.changes)}):",
        ]
        + [
            f"{c.type}: {c.teacher_id} {c.lesson_id} {c.from_key} -> {c.to_key} ({c.reason})"
            for c in result.changes
        ]
    )
    with (outputs_dir / "audit.txt").open("w", encoding="utf-8") as f:
        f.write(audit_text)

    schedule_json = json.dumps(payload, indent=2, ensure_ascii=False)
    return schedule_json, format_validation_report(report), audit_text


app = typer.Typer(add_completion=False, help="Weekly timetable gap optimizer")


def _root() -> Path:
    return Path.cwd()


@app.command("optimize")
def cli_optimize(
    input_path: Path = typer.Argument(..., help="Schedule snapshot or saved record (JSON)"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Where to write the new version"),
    max_periods: int | None = typer.Option(None, help="Periods per day (default 8)"),
    lesson_threshold: int | None = typer.Option(
        None, help="Days with fewer lessons are emptied onto fuller days (default 3)"
    ),
    rekey: bool = typer.Option(False, help="Rebuild keys from each lesson's time slot first"),
    strategy: str = typer.Option("single", help="Gap reduction strategy: single or fixpoint"),
    log_level: str = typer.Option("INFO", help="Log level"),
) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    try:
        _, validation, audit = run_pipeline(
            _root(),
            input_path,
            output_path=output,
            log_level=level,
            max_periods=max_periods,
            lesson_threshold=lesson_threshold,
            rekey=rekey,
            strategy=strategy,
        )
    except ValueError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    print(validation)
    print(audit)


@app.command("gaps")
def cli_gaps(
    input_path: Path = typer.Argument(..., help="Schedule snapshot or saved record (JSON)"),
    rekey: bool = typer.Option(False, help="Rebuild keys from each lesson's time slot first"),
) -> None:
    try:
        settings = load_settings(_root())
        pairs = load_snapshot(input_path).pairs
        if rekey:
            pairs = settings.calendar.rekey(pairs)
        by_teacher = gaps_by_teacher(Schedule.from_pairs(pairs))
    except ValueError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    print(f"total_gaps: {sum(by_teacher.values())}")
    for teacher, n in by_teacher.items():
        print(f"  - {teacher}: {n}")


@app.command("validate")
def cli_validate(
    input_path: Path = typer.Argument(..., help="Schedule snapshot or saved record (JSON)"),
    rekey: bool = typer.Option(False, help="Rebuild keys from each lesson's time slot first"),
) -> None:
    """Optimize in memory and print the validation report; writes nothing to outputs/."""
    try:
        settings = load_settings(_root())
        pairs = load_snapshot(input_path).pairs
        if rekey:
            pairs = settings.calendar.rekey(pairs)
        result = optimize_schedule(pairs, settings)
        report = validate_schedule(Schedule.from_pairs(pairs), result.schedule, settings)
    except ValueError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    print(format_validation_report(report))


if __name__ == "__main__":  # pragma: no cover
    app()
