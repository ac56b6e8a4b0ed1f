"""檔名篩選設定模型。"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any, Iterable, Optional, Pattern


def normalize_extension(value: str) -> str:
    return value.strip().lstrip(".").lower()


@dataclass(frozen=True)
class FilterConfig:
    name: Optional[str]
    formats: tuple[Pattern[str], ...]
    extensions: frozenset[str]

    @classmethod
    def build(
        cls,
        name: Optional[str],
        formats: Iterable[str],
        extensions: Iterable[str] = (),
    ) -> "FilterConfig":
        return cls(
            name=name,
            formats=tuple(re.compile(pattern) for pattern in formats),
            extensions=frozenset(normalize_extension(item) for item in extensions if item.strip()),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FilterConfig":
        return cls.build(
            data.get("name"),
            data.get("formats") or [],
            data.get("extensions") or [],
        )

    def accepts_extension(self, extension: str) -> bool:
        if not self.extensions:
            return True
        return normalize_extension(extension) in self.extensions

    def describe(self) -> str:
        lines = ["Filter {"]
        if self.name is not None:
            lines.append(f"    Name: {self.name!r},")
        extensions = ", ".join(repr(item) for item in sorted(self.extensions)) or "(all)"
        lines.append(f"    Extensions: [{extensions}],")
        patterns = ", ".join(f'"{pattern.pattern}"' for pattern in self.formats)
        lines.append(f"    Formats: [{patterns}],")
        lines.append("}")
        return "\n".join(lines)
