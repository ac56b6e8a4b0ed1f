"""Execute the resolved action on ACT files."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

from ..config import ConfigManager
from ..models import ActionPlan, ClassificationResult, FileOutcome, Label, Operation, ProcessError, RunReport
from ..models.run_report import STATUS_FAILED, STATUS_SIMULATED, STATUS_UNTOUCHED
from ..utils import file_ops, reporting
from ..utils.error_handler import ErrorHandler
from ..utils.logger import get_logger

_ERROR_CODES = {
    Operation.COPY: "W-COPY",
    Operation.MOVE: "W-MOVE",
    Operation.DELETE: "W-DELETE",
}


class PlanExecutor:
    def __init__(
        self,
        logger=None,
        config: ConfigManager | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        self.logger = logger or get_logger(self.__class__.__name__)
        self.config = config or ConfigManager()
        self.error_handler = error_handler or ErrorHandler()

    def execute(
        self,
        plan: ActionPlan,
        classified: Iterable[ClassificationResult],
        *,
        dry_run: bool = False,
        verbose: bool = False,
        log_callback: Optional[Callable[[str], None]] = None,
    ) -> RunReport:
        """只對 ACT 檔案執行操作；單一檔案失敗只記錄在報告中，繼續處理下一個。"""
        outcomes: list[FileOutcome] = []
        for item in classified:
            if item.label is Label.ACT:
                outcome = self._execute_item(plan, item, dry_run=dry_run)
            else:
                outcome = FileOutcome(
                    path=item.path,
                    relative_path=item.relative_path,
                    label=item.label,
                    identifier=item.identifier,
                    status=STATUS_UNTOUCHED,
                    dry_run=dry_run,
                )
            if verbose:
                (log_callback or self.logger.info)(reporting.format_outcome_line(outcome))
            outcomes.append(outcome)

        report = RunReport(plan=plan, outcomes=tuple(outcomes), dry_run=dry_run)
        if report.has_failures:
            self.logger.warning(f"{len(report.failures)} errors occurred")
        return report

    def _execute_item(self, plan: ActionPlan, item: ClassificationResult, *, dry_run: bool) -> FileOutcome:
        destination = self._destination_for(plan, item)
        if dry_run:
            # 只做唯讀檢查，預先回報實際執行時會發生的目的地衝突
            if destination is not None:
                try:
                    file_ops.ensure_destination_free(destination)
                except OSError as exc:
                    return self._failed(plan, item, destination, exc, dry_run=True)
            return self._outcome(plan, item, destination, STATUS_SIMULATED, dry_run=True)

        try:
            status = self._apply(plan.operation, item.path, destination)
        except OSError as exc:
            return self._failed(plan, item, destination, exc, dry_run=False)
        return self._outcome(plan, item, destination, status)

    def _failed(
        self,
        plan: ActionPlan,
        item: ClassificationResult,
        destination: Path | None,
        exc: OSError,
        *,
        dry_run: bool,
    ) -> FileOutcome:
        error = ProcessError.from_exception(_ERROR_CODES[plan.operation], exc, item.path)
        self.error_handler.add(error)
        self.logger.warning(f"Error: {error}")
        return self._outcome(plan, item, destination, STATUS_FAILED, dry_run=dry_run, error_message=error.message)

    def _apply(self, operation: Operation, src_path: Path, destination: Path | None) -> str:
        if operation is Operation.DELETE:
            return file_ops.delete_file(src_path, config=self.config, logger=self.logger)
        if destination is None:
            raise ValueError(f"{operation.value} requires a destination")
        if operation is Operation.COPY:
            return file_ops.copy_file(src_path, destination, config=self.config, logger=self.logger)
        return file_ops.move_file(src_path, destination, config=self.config, logger=self.logger)

    def _destination_for(self, plan: ActionPlan, item: ClassificationResult) -> Path | None:
        if plan.destination is None:
            return None
        return plan.destination / item.relative_path

    def _outcome(
        self,
        plan: ActionPlan,
        item: ClassificationResult,
        destination: Path | None,
        status: str,
        *,
        dry_run: bool = False,
        error_message: str | None = None,
    ) -> FileOutcome:
        return FileOutcome(
            path=item.path,
            relative_path=item.relative_path,
            label=item.label,
            identifier=item.identifier,
            status=status,
            operation=plan.operation,
            destination=destination,
            dry_run=dry_run,
            error_message=error_message,
        )
