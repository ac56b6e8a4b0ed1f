"""資料模型模組。"""

from .action_plan import ActionPlan, Operation
from .classification import ClassificationResult, Label
from .error_record import ProcessError
from .filter_config import FilterConfig
from .run_report import FileOutcome, RunReport

__all__ = [
    "ActionPlan",
    "Operation",
    "ClassificationResult",
    "Label",
    "ProcessError",
    "FilterConfig",
    "FileOutcome",
    "RunReport",
]
