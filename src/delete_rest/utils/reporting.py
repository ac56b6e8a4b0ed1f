"""報告輸出工具。"""

from __future__ import annotations

import csv
import os
from pathlib import Path

from ..models import FileOutcome, Label, RunReport
from . import path_utils
from .errors import OutputFileError

REPORT_FIELDNAMES = [
    "path",
    "relative_path",
    "label",
    "identifier",
    "operation",
    "destination",
    "status",
    "dry_run",
    "error_message",
]


def format_outcome_line(outcome: FileOutcome) -> str:
    return f"{outcome.label.value:<4} {outcome.relative_path}: {outcome.describe_action()}"


def build_summary_text(report: RunReport) -> str:
    plan = report.plan
    label_counts = report.label_counts()
    status_counts = report.status_counts()
    total = len(report.outcomes)
    matching = label_counts[Label.KEEP] + label_counts[Label.ACT]

    destination = f" -> {plan.destination}" if plan.destination is not None else ""
    mode = "Dry-run" if report.dry_run else "Execute"
    lines = [
        f"Mode: {mode}",
        f"Operation: {plan.operation.value}{destination}",
        f"Matching files: {matching}/{total}",
        f"Keeping files: {label_counts[Label.KEEP]}/{matching}",
        f"Labels: KEEP={label_counts[Label.KEEP]} ACT={label_counts[Label.ACT]} SKIP={label_counts[Label.SKIP]}",
        "Actions: " + format_status_counts(status_counts),
    ]
    if report.dry_run:
        lines.append("Dry-run: no files were changed.")
    if report.has_failures:
        lines.append(f"{len(report.failures)} errors occurred")
        for outcome in report.failures:
            lines.append(f"  {outcome.relative_path}: {outcome.error_message}")
    return "\n".join(lines)


def format_status_counts(counts: dict[str, int]) -> str:
    if not counts:
        return "none"
    return ", ".join(f"{status}={count}" for status, count in sorted(counts.items()))


def check_report_path(report_path: Path) -> None:
    """在動到任何檔案前確認報告檔寫得進去，否則拋出 OutputFileError。"""
    if report_path.is_dir():
        raise OutputFileError(f"Report path is a directory: {report_path}")
    if report_path.exists():
        if not os.access(report_path, os.W_OK):
            raise OutputFileError(f"Report file is not writable: {report_path}")
        return
    ancestor = path_utils.nearest_existing_ancestor(report_path.parent)
    if ancestor is None or not path_utils.is_writable_dir(ancestor):
        raise OutputFileError(f"Cannot create report file: {report_path}")


def write_report_csv(report_path: Path, report: RunReport) -> Path:
    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with report_path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=REPORT_FIELDNAMES)
            writer.writeheader()
            for outcome in report.outcomes:
                payload = outcome.to_dict()
                writer.writerow({field: payload.get(field) for field in REPORT_FIELDNAMES})
    except OSError as exc:
        raise OutputFileError(f"Cannot write report: {exc}") from exc
    return report_path
