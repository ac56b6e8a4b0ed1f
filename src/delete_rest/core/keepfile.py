"""keepfile 解析：要保留的識別碼集合。"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..utils.errors import KeepFileError
from .identifier import normalize_identifier


class KeepSet:
    """不可變的識別碼集合，由 keepfile 每個非空白行建立。"""

    __slots__ = ("_identifiers",)

    def __init__(self, identifiers: Iterable[str] = ()) -> None:
        self._identifiers = frozenset(normalize_identifier(item) for item in identifiers)

    @classmethod
    def parse(cls, contents: str, *, source: Optional[Path] = None) -> "KeepSet":
        identifiers: list[str] = []
        bad_lines: list[tuple[int, str]] = []
        for number, line in enumerate(contents.splitlines(), start=1):
            text = line.strip()
            if not text:
                continue
            try:
                identifiers.append(normalize_identifier(text))
            except ValueError:
                bad_lines.append((number, line))

        if bad_lines:
            raise KeepFileError(
                "One or more lines in the keepfile are invalid:",
                path=source,
                bad_lines=bad_lines,
            )
        return cls(identifiers)

    @classmethod
    def load(cls, path: Path) -> "KeepSet":
        try:
            contents = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise KeepFileError(f"Keepfile I/O error: {exc}", path=path) from exc
        return cls.parse(contents, source=path)

    def contains(self, identifier: str) -> bool:
        return identifier in self._identifiers

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._identifiers

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._identifiers, key=int))

    def __len__(self) -> int:
        return len(self._identifiers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeepSet):
            return NotImplemented
        return self._identifiers == other._identifiers

    def __hash__(self) -> int:
        return hash(self._identifiers)

    def __repr__(self) -> str:
        return f"KeepSet({list(self)!r})"
