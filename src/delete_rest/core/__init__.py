"""核心流程模組。"""

from .action_planner import ActionPlanner, OperationFlags
from .classifier import Classifier, partition
from .executor import PlanExecutor
from .identifier import IdentifierExtractor, normalize_identifier
from .keepfile import KeepSet
from .pipeline import Pipeline, PipelineResult
from .scanner import FileScanner

__all__ = [
    "ActionPlanner",
    "OperationFlags",
    "Classifier",
    "partition",
    "PlanExecutor",
    "IdentifierExtractor",
    "normalize_identifier",
    "KeepSet",
    "Pipeline",
    "PipelineResult",
    "FileScanner",
]
