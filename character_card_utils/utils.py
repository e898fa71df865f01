import copy
import logging
from typing import Any, Dict

from pydantic import BaseModel

from .models import (
    DEFAULT_SPEC_VERSION,
    OBSOLESCENCE_NOTICE,
    SPEC_NAME,
    V1_FIELD_NAMES,
    BackfilledV2Card,
    V1Card,
    V2Card,
    V2CardData,
)
from .schemas import ParseResult, v1, v2

logger = logging.getLogger(__name__)


def parse_to_v2(data: Any) -> V2Card:
    """
    把任意資料解析成 V2 角色卡，V1 卡會自動升級。

    兩種格式都不符合時丟出 CardValidationError，內容是 V2 的驗證結果。
    """
    return safe_parse_to_v2(data).unwrap()


def safe_parse_to_v2(data: Any) -> ParseResult[V2Card]:
    v2_attempt = v2.safe_parse(data)
    if v2_attempt.ok:
        return v2_attempt
    v1_attempt = v1.safe_parse(data)
    if v1_attempt.ok:
        logger.debug("輸入不是 V2 角色卡，改以 V1 解析並升級")
        return ParseResult(ok=True, value=v1_to_v2(v1_attempt.value))
    # V2 是主要格式，兩者都失敗時只回報 V2 的錯誤
    return v2_attempt


def v1_to_v2(card: V1Card) -> V2Card:
    """V1 欄位原封不動放進 data，其餘 V2 欄位填入預設值，character_book 保持未設定。"""
    data = V2CardData.model_construct(
        **{name: getattr(card, name) for name in V1_FIELD_NAMES},
        creator_notes="",
        system_prompt="",
        post_history_instructions="",
        alternate_greetings=[],
        tags=[],
        creator="",
        character_version="",
        extensions={},
    )
    return V2Card.model_construct(spec=SPEC_NAME, spec_version=DEFAULT_SPEC_VERSION, data=data)


def _backfill(card: V2Card, top_level: Dict[str, Any]) -> BackfilledV2Card:
    values: Dict[str, Any] = copy.deepcopy(card.model_extra or {})
    values.update(
        spec=card.spec,
        spec_version=card.spec_version,
        data=card.data.model_copy(deep=True),
    )
    values.update(top_level)
    return BackfilledV2Card.model_construct(**values)


def backfill_v2(card: V2Card) -> BackfilledV2Card:
    """匯出前把 data 裡的 V1 欄位複製到最外層，讓只看得懂 V1 的前端也能讀。"""
    return _backfill(card, {name: getattr(card.data, name) for name in V1_FIELD_NAMES})


def backfill_v2_with_obsolescence_notice(card: V2Card) -> BackfilledV2Card:
    return _backfill(card, {name: OBSOLESCENCE_NOTICE for name in V1_FIELD_NAMES})


def _clean_dict(payload: dict) -> dict:
    return {k: v for k, v in payload.items() if v is not None}


def _dump_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return dump_card(value)
    if isinstance(value, list):
        return [_dump_value(item) for item in value]
    return copy.deepcopy(value)


def dump_card(card: BaseModel) -> dict:
    """輸出成可直接 json.dumps 的 dict：未設定的選填欄位省略，未知欄位原樣保留。"""
    payload = _clean_dict(
        {name: _dump_value(getattr(card, name)) for name in type(card).model_fields}
    )
    payload.update(copy.deepcopy(card.model_extra or {}))
    return payload
