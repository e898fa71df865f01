from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Tuple, Union

from pydantic import ValidationError

from .config import get_settings

PathItem = Union[str, int]


@dataclass(frozen=True)
class ValidationIssue:
    path: Tuple[PathItem, ...]
    message: str
    kind: str
    received: Any

    @property
    def location(self) -> str:
        """把欄位路徑轉成 `data.character_book.entries[0].keys` 的形式。"""
        parts: List[str] = []
        for item in self.path:
            if isinstance(item, int):
                parts.append(f"[{item}]")
            elif parts:
                parts.append(f".{item}")
            else:
                parts.append(item)
        return "".join(parts) or "<root>"

    def describe(self) -> str:
        return f"{self.location}: {self.message} (收到 {type(self.received).__name__})"


class CardValidationError(ValueError):
    """角色卡驗證失敗，列出每一個欄位層級的問題。"""

    def __init__(self, issues: Iterable[ValidationIssue], schema: str = "card"):
        self.issues: List[ValidationIssue] = list(issues)
        self.schema = schema
        super().__init__(self._format())

    @classmethod
    def from_pydantic(cls, exc: ValidationError, schema: str = "card") -> "CardValidationError":
        issues = [
            ValidationIssue(
                path=tuple(error["loc"]),
                message=error["msg"],
                kind=error["type"],
                received=error.get("input"),
            )
            for error in exc.errors()
        ]
        error = cls(issues, schema=schema)
        error.__cause__ = exc
        return error

    def __iter__(self) -> Iterator[ValidationIssue]:
        return iter(self.issues)

    def __len__(self) -> int:
        return len(self.issues)

    def _format(self) -> str:
        limit = max(get_settings().max_reported_issues, 0)
        lines = [f"{self.schema} 格式不正確，共 {len(self.issues)} 個問題"]
        lines.extend(f"  - {issue.describe()}" for issue in self.issues[:limit])
        hidden = len(self.issues) - limit
        if hidden > 0:
            lines.append(f"  ... 另有 {hidden} 個問題未列出")
        return "\n".join(lines)
