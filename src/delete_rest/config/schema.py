"""設定檔驗證邏輯。"""

from __future__ import annotations

import re
from typing import Any


def validate_config(config: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    def add_error(path: str, message: str) -> None:
        errors.append(f"{path}: {message}")

    name = config.get("name")
    if name is not None and not isinstance(name, str):
        add_error("name", "必須是字串")

    formats = config.get("formats", [])
    if not isinstance(formats, list):
        add_error("formats", "必須是字串清單")
    else:
        for index, pattern in enumerate(formats):
            path = f"formats[{index}]"
            if not isinstance(pattern, str):
                add_error(path, "必須是字串")
                continue
            try:
                compiled = re.compile(pattern)
            except re.error as exc:
                add_error(path, f"不是有效的正規表示式 ({exc})")
                continue
            if compiled.groups != 1:
                add_error(path, f"必須恰好有一個擷取群組，目前為 {compiled.groups} 個")

    extensions = config.get("extensions", [])
    if not isinstance(extensions, list) or any(not isinstance(item, str) for item in extensions):
        add_error("extensions", "必須是字串清單")

    default_destination = config.get("default_destination", "selected")
    if not isinstance(default_destination, str) or not default_destination.strip():
        add_error("default_destination", "必須是非空字串")

    retry = config.get("retry", {})
    if not isinstance(retry, dict):
        add_error("retry", "必須是物件")
        return errors
    max_retries = retry.get("max_retries", 0)
    backoff_base_sec = retry.get("backoff_base_sec", 0.5)
    backoff_cap_sec = retry.get("backoff_cap_sec", 5.0)
    if isinstance(max_retries, bool) or not isinstance(max_retries, int) or max_retries < 0:
        add_error("retry.max_retries", "必須是大於等於 0 的整數")
    if not isinstance(backoff_base_sec, (int, float)) or backoff_base_sec <= 0:
        add_error("retry.backoff_base_sec", "必須是大於 0 的數值")
    if not isinstance(backoff_cap_sec, (int, float)) or backoff_cap_sec <= 0:
        add_error("retry.backoff_cap_sec", "必須是大於 0 的數值")
    if (
        isinstance(backoff_base_sec, (int, float))
        and isinstance(backoff_cap_sec, (int, float))
        and backoff_base_sec > backoff_cap_sec
    ):
        add_error("retry", "backoff_base_sec 不可大於 backoff_cap_sec")

    return errors
