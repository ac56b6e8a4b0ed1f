"""檔案分類：KEEP / ACT / SKIP。"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..models import ClassificationResult, FilterConfig, Label
from ..utils import path_utils
from ..utils.logger import get_logger
from .identifier import IdentifierExtractor
from .keepfile import KeepSet


class Classifier:
    """依檔名格式與 keepfile 分類檔案。

    只有通過副檔名與格式檢查的檔案才可能是 KEEP 或 ACT，其餘一律 SKIP，
    任何操作模式都不會碰到 SKIP 檔案。每個檔案獨立分類，只共用唯讀的設定與 KeepSet。
    """

    def __init__(self, config: FilterConfig, keep_set: KeepSet, logger=None) -> None:
        self.extractor = IdentifierExtractor(config)
        self.keep_set = keep_set
        self.logger = logger or get_logger(self.__class__.__name__)

    def label_for(self, filename: str | Path) -> tuple[str | None, Label]:
        identifier = self.extractor.extract(filename)
        if identifier is None:
            return None, Label.SKIP
        if self.keep_set.contains(identifier):
            return identifier, Label.KEEP
        return identifier, Label.ACT

    def classify(self, path: Path, source_root: Path) -> ClassificationResult:
        identifier, label = self.label_for(path.name)
        return ClassificationResult(
            path=path,
            relative_path=path_utils.relative_to_root(path, source_root),
            identifier=identifier,
            label=label,
        )

    def classify_all(self, paths: Iterable[Path], source_root: Path) -> list[ClassificationResult]:
        results = [self.classify(path, source_root) for path in paths]
        counts = partition(results)
        self.logger.debug(
            "分類完成: KEEP=%s ACT=%s SKIP=%s",
            len(counts[Label.KEEP]),
            len(counts[Label.ACT]),
            len(counts[Label.SKIP]),
        )
        return results


def partition(results: Iterable[ClassificationResult]) -> dict[Label, list[ClassificationResult]]:
    groups: dict[Label, list[ClassificationResult]] = {label: [] for label in Label}
    for result in results:
        groups[result.label].append(result)
    return groups
