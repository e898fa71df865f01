"""
Parsers, validators and converters for chatbot character cards (V1 and V2).

    import character_card_utils as cards

    cards.parse_to_v2(raw)        # V2 卡原樣回傳，V1 卡自動升級
    cards.v2.safe_parse(raw)      # 不丟例外，回傳 ParseResult
    cards.backfill_v2(v2_card)    # 匯出前補上 V1 欄位
"""

from .errors import CardValidationError, ValidationIssue
from .models import (
    DEFAULT_SPEC_VERSION,
    OBSOLESCENCE_NOTICE,
    SPEC_NAME,
    BackfilledV2Card,
    CharacterBook,
    CharacterBookEntry,
    V1Card,
    V2Card,
    V2CardData,
)
from .schemas import ParseResult, Schema, backfilled_v2, book, entry, v1, v2
from .utils import (
    backfill_v2,
    backfill_v2_with_obsolescence_notice,
    dump_card,
    parse_to_v2,
    safe_parse_to_v2,
    v1_to_v2,
)

__all__ = [
    "BackfilledV2Card",
    "CardValidationError",
    "CharacterBook",
    "CharacterBookEntry",
    "DEFAULT_SPEC_VERSION",
    "OBSOLESCENCE_NOTICE",
    "ParseResult",
    "SPEC_NAME",
    "Schema",
    "V1Card",
    "V2Card",
    "V2CardData",
    "ValidationIssue",
    "backfill_v2",
    "backfill_v2_with_obsolescence_notice",
    "backfilled_v2",
    "book",
    "dump_card",
    "entry",
    "parse_to_v2",
    "safe_parse_to_v2",
    "v1",
    "v1_to_v2",
    "v2",
]
