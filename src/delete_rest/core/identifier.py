"""從檔名擷取識別碼。"""

from __future__ import annotations

from pathlib import PurePath
import re
from typing import Optional

from ..models import FilterConfig

_DECIMAL = re.compile(r"[0-9]+")


def normalize_identifier(text: str) -> str:
    """將識別碼正規化為不含前導零的十進位字串。

    keepfile 與檔名擷取都必須經過這個函式，"0017"、"017"、"17" 視為同一個識別碼。
    非十進位數字會拋出 ValueError。
    """
    value = text.strip()
    if not _DECIMAL.fullmatch(value):
        raise ValueError(f"not a decimal identifier: {text!r}")
    return value.lstrip("0") or "0"


class IdentifierExtractor:
    def __init__(self, config: FilterConfig) -> None:
        self.config = config

    def extract(self, filename: str | PurePath) -> Optional[str]:
        name = PurePath(filename).name
        if not name:
            return None

        if not self.config.accepts_extension(_extension_of(name)):
            return None

        for pattern in self.config.formats:
            match = pattern.fullmatch(name)
            if match is None:
                continue
            captured = match.group(1)
            if not captured:
                continue
            try:
                return normalize_identifier(captured)
            except ValueError:
                continue
        return None


def _extension_of(name: str) -> str:
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return ""
    return extension
