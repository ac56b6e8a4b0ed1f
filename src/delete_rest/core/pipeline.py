"""Pipeline coordinator: scan, classify, execute."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..config import ConfigManager
from ..models import ActionPlan, ClassificationResult, RunReport
from ..utils import path_utils
from ..utils.error_handler import ErrorHandler
from ..utils.logger import get_logger
from .classifier import Classifier
from .executor import PlanExecutor
from .keepfile import KeepSet
from .scanner import FileScanner


@dataclass
class PipelineResult:
    classified: List[ClassificationResult]
    report: RunReport
    errors: ErrorHandler


class Pipeline:
    def __init__(self, config: ConfigManager, logger=None, error_handler: Optional[ErrorHandler] = None) -> None:
        self.config = config
        self.logger = logger or get_logger(self.__class__.__name__)
        self.error_handler = error_handler or ErrorHandler()
        self.scanner = FileScanner(self.logger)

    def classify(
        self,
        source_root: Path,
        keep_set: KeepSet,
        plan: ActionPlan,
        exclude_files: Iterable[Path] = (),
    ) -> List[ClassificationResult]:
        exclude: list[Path] = []
        if plan.destination is not None and path_utils.is_within(plan.destination, source_root):
            exclude.append(plan.destination)

        paths = self.scanner.scan_directory(source_root, exclude=exclude, exclude_files=exclude_files)
        classifier = Classifier(self.config.filter_config(), keep_set, self.logger)
        return classifier.classify_all(paths, source_root)

    def run(
        self,
        source_root: Path,
        keep_set: KeepSet,
        plan: ActionPlan,
        *,
        dry_run: bool = False,
        verbose: bool = False,
        log_callback: Optional[Callable[[str], None]] = None,
        exclude_files: Iterable[Path] = (),
    ) -> PipelineResult:
        """plan 必須已經過 ActionPlanner.prepare 驗證。

        exclude_files 是本次執行自己讀寫的檔案，不會被分類或處理。
        """
        classified = self.classify(source_root, keep_set, plan, exclude_files)
        matching = sum(1 for item in classified if item.identifier is not None)
        self.logger.debug(f"Matching files: {matching}/{len(classified)}")

        executor = PlanExecutor(self.logger, self.config, self.error_handler)
        report = executor.execute(
            plan,
            classified,
            dry_run=dry_run,
            verbose=verbose,
            log_callback=log_callback,
        )
        return PipelineResult(classified=classified, report=report, errors=self.error_handler)
