"""操作決策：由旗標決定本次唯一的檔案操作。"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from ..config import ConfigManager
from ..models import ActionPlan, Operation
from ..utils import path_utils
from ..utils.errors import PlanSetupError
from ..utils.logger import get_logger


@dataclass(frozen=True)
class OperationFlags:
    copy_to: Optional[str] = None
    move_to: Optional[str] = None
    delete: bool = False
    other_flags: bool = False


class ActionPlanner:
    def __init__(self, config: ConfigManager, logger=None) -> None:
        self.config = config
        self.logger = logger or get_logger(self.__class__.__name__)

    def resolve(self, flags: OperationFlags, source_root: Path) -> Optional[ActionPlan]:
        """固定優先順序 copy > move > delete，衝突的旗標不會被拒絕。

        三者皆未指定但有其他旗標時，預設複製到 default_destination（相對於來源資料夾）。
        完全沒有旗標時回傳 None，由呼叫端顯示說明。
        """
        if flags.copy_to is not None:
            return ActionPlan(Operation.COPY, Path(flags.copy_to))
        if flags.move_to is not None:
            return ActionPlan(Operation.MOVE, Path(flags.move_to))
        if flags.delete:
            return ActionPlan(Operation.DELETE)
        if flags.other_flags:
            default_destination = str(self.config.get("default_destination", "selected"))
            return ActionPlan(Operation.COPY, source_root / default_destination, is_default=True)
        return None

    def prepare(self, plan: ActionPlan, source_root: Path, *, dry_run: bool) -> ActionPlan:
        """在動到任何檔案前檢查目的地，失敗時拋出 PlanSetupError。"""
        if plan.operation is Operation.DELETE or plan.destination is None:
            return plan

        destination = plan.destination.expanduser().resolve()
        if destination == source_root.resolve():
            raise PlanSetupError(f"Destination must differ from the source directory: {destination}")

        if destination.exists():
            if not destination.is_dir():
                raise PlanSetupError(f"Destination is not a directory: {destination}")
            if not path_utils.is_writable_dir(destination):
                raise PlanSetupError(f"Destination is not writable: {destination}")
            return replace(plan, destination=destination)

        ancestor = path_utils.nearest_existing_ancestor(destination)
        if ancestor is None or not path_utils.is_writable_dir(ancestor):
            raise PlanSetupError(f"Cannot create destination directory: {destination}")

        if dry_run:
            self.logger.debug(f"Dry-run: 不建立目的地資料夾 {destination}")
        else:
            try:
                destination.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise PlanSetupError(f"Cannot create destination directory: {destination} ({exc})") from exc
            self.logger.debug(f"建立目的地資料夾: {destination}")
        return replace(plan, destination=destination)
