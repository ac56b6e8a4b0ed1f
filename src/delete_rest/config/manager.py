"""設定管理器。"""

from __future__ import annotations

import copy
from pathlib import Path
import sys
from typing import Any, Optional

import yaml

from ..models import FilterConfig
from ..utils.error_handler import ErrorHandler
from ..utils.errors import ConfigError
from ..utils.logger import get_logger
from . import defaults
from .schema import validate_config

FILTER_KEYS = ("name", "extensions", "formats")


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _get_nested(config: dict[str, Any], key: str, default: Any = None) -> Any:
    current: Any = config
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def _set_nested(config: dict[str, Any], key: str, value: Any) -> None:
    current = config
    parts = key.split(".")
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigError(f"無法讀取設定檔: {exc}", path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"設定檔格式錯誤: {exc}", path=path) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("設定檔最上層必須是物件", path=path)
    if "formats" not in data:
        raise ConfigError("設定檔缺少 formats", path=path)
    return data


def executable_dir() -> Optional[Path]:
    if not sys.argv or not sys.argv[0]:
        return None
    candidate = Path(sys.argv[0]).resolve().parent
    return candidate if candidate.is_dir() else None


class ConfigManager:
    """三層設定管理：預設、使用者設定檔、執行期。

    使用者設定檔若提供，其 name/extensions/formats 會整組取代預設的篩選條件，
    其他鍵（retry 等）則與預設值深度合併。
    """

    def __init__(self, user_config_path: Optional[Path] = None) -> None:
        self._defaults = copy.deepcopy(defaults.DEFAULT_CONFIG)
        self._user = _load_yaml(user_config_path) if user_config_path else {}
        self._runtime: dict[str, Any] = {}
        self.source: Optional[Path] = user_config_path
        self._config = self._merge()
        errors = self.validate_config()
        if errors:
            raise ConfigError("設定檔內容不合法", path=user_config_path, errors=errors)

    @classmethod
    def discover(
        cls,
        source_root: Path,
        explicit: Optional[Path] = None,
        *,
        logger=None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> "ConfigManager":
        """依序尋找設定檔：明確指定、來源資料夾、執行檔旁、執行檔上層、內建預設。

        自動找到但無法使用的設定檔會被略過，並以 W-CONFIG 記錄在 error_handler。
        """
        logger = logger or get_logger("config")
        if explicit is not None:
            return cls(explicit)

        config_name = str(defaults.DEFAULT_CONFIG["config_name"])
        for candidate in cls.candidate_paths(source_root, config_name):
            if not candidate.is_file():
                continue
            try:
                manager = cls(candidate)
            except ConfigError as exc:
                logger.warning("略過無法使用的設定檔: %s", exc)
                if error_handler is not None:
                    error_handler.add_warning("W-CONFIG", str(exc), file_path=str(candidate))
                continue
            logger.debug("使用設定檔: %s", candidate)
            return manager

        logger.debug("使用內建預設設定")
        return cls()

    @staticmethod
    def candidate_paths(source_root: Path, config_name: str) -> list[Path]:
        candidates = [source_root / config_name]
        install_dir = executable_dir()
        if install_dir is not None:
            candidates.append(install_dir / config_name)
            candidates.append(install_dir.parent / config_name)
        unique: list[Path] = []
        for candidate in candidates:
            if candidate not in unique:
                unique.append(candidate)
        return unique

    def _merge(self) -> dict[str, Any]:
        base = self._defaults
        if self._user:
            base = {key: value for key, value in base.items() if key not in FILTER_KEYS}
        return _deep_merge(_deep_merge(base, self._user), self._runtime)

    def get(self, key: str, default: Any = None) -> Any:
        return _get_nested(self._config, key, default)

    def set(self, key: str, value: Any) -> None:
        _set_nested(self._runtime, key, value)
        self._config = self._merge()

    def validate_config(self) -> list[str]:
        return validate_config(self._config)

    def filter_config(self) -> FilterConfig:
        errors = self.validate_config()
        if errors:
            raise ConfigError("設定檔內容不合法", path=self.source, errors=errors)
        return FilterConfig.from_dict(self._config)
