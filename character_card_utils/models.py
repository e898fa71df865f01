import math
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, create_model

SPEC_NAME = "chara_card_v2"
DEFAULT_SPEC_VERSION = "2.0"
OBSOLESCENCE_NOTICE = "This is a V2 Character Card. Please update your frontend."


def _present(value: Any) -> Any:
    # 選填欄位可以整個省略，但出現時不能是 null
    if value is None:
        raise ValueError("選填欄位可以省略，但不能設為 null")
    return value


def _not_nan(value: Any) -> Any:
    # NaN 不是合法數字；正負無限大仍可通過
    if isinstance(value, float) and math.isnan(value):
        raise ValueError("數字不能是 NaN")
    return value


Omittable = AfterValidator(_present)

# strict 模式下 int 不會被轉成 float，bool 也不算數字
Number = Annotated[Union[int, float], AfterValidator(_not_nan)]
OptionalStr = Annotated[Optional[str], Omittable]
OptionalBool = Annotated[Optional[bool], Omittable]
OptionalNumber = Annotated[Optional[Number], Omittable]
OptionalStrList = Annotated[Optional[List[str]], Omittable]
Position = Literal["before_char", "after_char"]


class CardModel(BaseModel):
    """所有角色卡模型的共同設定：不做型別轉換、保留未知欄位、建立後不可變。"""

    model_config = ConfigDict(strict=True, extra="allow", frozen=True)


class CharacterBookEntry(CardModel):
    keys: List[str]
    content: str
    extensions: Dict[str, Any]
    enabled: bool
    insertion_order: Number
    case_sensitive: OptionalBool = None
    name: OptionalStr = None
    priority: OptionalNumber = None
    id: OptionalNumber = None
    comment: OptionalStr = None
    selective: OptionalBool = None
    secondary_keys: OptionalStrList = None
    constant: OptionalBool = None
    position: Annotated[Optional[Position], Omittable] = None


class CharacterBook(CardModel):
    name: OptionalStr = None
    description: OptionalStr = None
    scan_depth: OptionalNumber = None
    token_budget: OptionalNumber = None
    recursive_scanning: OptionalBool = None
    extensions: Dict[str, Any]
    entries: List[CharacterBookEntry]


# 角色卡以欄位集合組合而成，V2 與 BackfilledV2 不繼承 V1 模型
V1_FIELDS: Dict[str, Any] = {
    "name": (str, ...),
    "description": (str, ...),
    "personality": (str, ...),
    "scenario": (str, ...),
    "first_mes": (str, ...),
    "mes_example": (str, ...),
}
V1_FIELD_NAMES = tuple(V1_FIELDS)

V2_DATA_FIELDS: Dict[str, Any] = {
    "creator_notes": (str, ...),
    "system_prompt": (str, ...),
    "post_history_instructions": (str, ...),
    "alternate_greetings": (List[str], ...),
    "character_book": (Annotated[Optional[CharacterBook], Omittable], None),
    "tags": (List[str], ...),
    "creator": (str, ...),
    "character_version": (str, ...),
    "extensions": (Dict[str, Any], ...),
}

V1Card = create_model("V1Card", __base__=CardModel, __module__=__name__, **V1_FIELDS)

V2CardData = create_model(
    "V2CardData",
    __base__=CardModel,
    __module__=__name__,
    **V1_FIELDS,
    **V2_DATA_FIELDS,
)

V2_ENVELOPE_FIELDS: Dict[str, Any] = {
    "spec": (Literal[SPEC_NAME], ...),
    "spec_version": (str, ...),
    "data": (V2CardData, ...),
}

V2Card = create_model("V2Card", __base__=CardModel, __module__=__name__, **V2_ENVELOPE_FIELDS)

BackfilledV2Card = create_model(
    "BackfilledV2Card",
    __base__=CardModel,
    __module__=__name__,
    **V1_FIELDS,
    **V2_ENVELOPE_FIELDS,
)
