"""執行結果報告模型。"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .action_plan import ActionPlan, Operation
from .classification import Label

STATUS_UNTOUCHED = "UNTOUCHED"
STATUS_SIMULATED = "SIMULATED"
STATUS_FAILED = "FAILED"
DONE_STATUSES = {
    Operation.COPY: "COPIED",
    Operation.MOVE: "MOVED",
    Operation.DELETE: "DELETED",
}


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    relative_path: Path
    label: Label
    identifier: Optional[str]
    status: str
    operation: Optional[Operation] = None
    destination: Optional[Path] = None
    dry_run: bool = False
    error_message: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status == STATUS_FAILED

    def describe_action(self) -> str:
        if self.operation is None:
            return "untouched"
        if self.failed:
            text = f"would fail to {self.operation.verb}" if self.dry_run else f"failed to {self.operation.verb}"
        elif self.dry_run:
            text = f"would {self.operation.verb}"
        else:
            text = self.operation.past_tense
        if self.destination is not None:
            text = f"{text} -> {self.destination}"
        if self.error_message:
            text = f"{text} ({self.error_message})"
        return text

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "relative_path": str(self.relative_path),
            "label": self.label.value,
            "identifier": self.identifier,
            "operation": self.operation.value if self.operation else None,
            "destination": str(self.destination) if self.destination else None,
            "status": self.status,
            "dry_run": self.dry_run,
            "error_message": self.error_message,
        }


@dataclass(frozen=True)
class RunReport:
    plan: ActionPlan
    outcomes: tuple[FileOutcome, ...]
    dry_run: bool = False

    @property
    def failures(self) -> list[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.failed]

    @property
    def has_failures(self) -> bool:
        return any(outcome.failed for outcome in self.outcomes)

    @property
    def exit_code(self) -> int:
        return 1 if self.has_failures else 0

    def label_counts(self) -> dict[Label, int]:
        counts = Counter(outcome.label for outcome in self.outcomes)
        return {label: counts.get(label, 0) for label in Label}

    def status_counts(self) -> dict[str, int]:
        return dict(Counter(outcome.status for outcome in self.outcomes))

    def by_label(self, label: Label) -> list[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.label == label]
