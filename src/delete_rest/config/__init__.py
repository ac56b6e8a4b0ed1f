"""設定模組。"""

from .manager import ConfigManager
from .schema import validate_config

__all__ = ["ConfigManager", "validate_config"]
