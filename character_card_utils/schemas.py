from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .config import get_settings
from .errors import CardValidationError
from .models import BackfilledV2Card, CharacterBook, CharacterBookEntry, V1Card, V2Card

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[CardValidationError] = None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


class Schema(Generic[M]):
    """
    包住單一角色卡模型的驗證器。

    `safe_parse` 永遠不丟例外，回傳 ParseResult；`parse` 只是把結果拆開，
    失敗時丟出 CardValidationError。
    """

    def __init__(self, model: Type[M], label: str):
        self.model = model
        self.label = label

    def __repr__(self) -> str:
        return f"Schema({self.label})"

    def safe_parse(self, data: Any) -> ParseResult[M]:
        try:
            value = self.model.model_validate(data)
        except ValidationError as exc:
            error = CardValidationError.from_pydantic(exc, schema=self.label)
            if get_settings().log_failures:
                logger.debug(
                    "%s 驗證失敗：%d 個問題，第一個是 %s",
                    self.label,
                    len(error),
                    error.issues[0].describe() if error.issues else "-",
                )
            return ParseResult(ok=False, error=error)
        # pydantic 只重建外層容器，extensions 與未知欄位的巢狀值仍指向輸入
        return ParseResult(ok=True, value=value.model_copy(deep=True))

    def parse(self, data: Any) -> M:
        return self.safe_parse(data).unwrap()

    def is_valid(self, data: Any) -> bool:
        return self.safe_parse(data).ok


v1: Schema[V1Card] = Schema(V1Card, "v1")
entry: Schema[CharacterBookEntry] = Schema(CharacterBookEntry, "entry")
book: Schema[CharacterBook] = Schema(CharacterBook, "book")
v2: Schema[V2Card] = Schema(V2Card, "v2")
backfilled_v2: Schema[BackfilledV2Card] = Schema(BackfilledV2Card, "backfilled_v2")
