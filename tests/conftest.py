"""Shared character card fixtures."""

import copy

import pytest

from character_card_utils.config import get_settings

NOTICE = "This is a V2 Character Card. Please update your frontend."

V1_CARD = {
    "name": "John",
    "description": "{{char}} is a man.",
    "personality": "cruel",
    "scenario": "{{char}} hates {{user}}",
    "first_mes": "Hi!",
    "mes_example": "",
}

V2_FROM_V1 = {
    "spec": "chara_card_v2",
    "spec_version": "2.0",
    "data": {
        **V1_CARD,
        "creator_notes": "",
        "system_prompt": "",
        "post_history_instructions": "",
        "alternate_greetings": [],
        "tags": [],
        "creator": "",
        "character_version": "",
        "extensions": {},
    },
}

V2_CARD = {
    "spec": "chara_card_v2",
    "spec_version": "2.0",
    "data": {
        "name": "Mary",
        "description": "{{char}} is a woman.",
        "personality": "generous",
        "scenario": "{{char}} loves {{user}}",
        "first_mes": "Hello!",
        "mes_example": "",
        "creator_notes": "My first card.",
        "system_prompt": "",
        "post_history_instructions": 'Your message must start with the word "Sweetie".',
        "alternate_greetings": ["Heeeey!"],
        "tags": ["female", "oc"],
        "creator": "darkpriest",
        "character_version": "",
        "extensions": {},
    },
}

BOOK_ENTRY = {
    "keys": ["king"],
    "content": "king=old",
    "extensions": {},
    "enabled": True,
    "insertion_order": 1,
}

FULL_BOOK_ENTRY = {
    **BOOK_ENTRY,
    "case_sensitive": False,
    "name": "The King",
    "priority": 10,
    "id": 3,
    "comment": "ruler of the realm",
    "selective": True,
    "secondary_keys": ["crown", "throne"],
    "constant": False,
    "position": "after_char",
}

BOOK = {
    "entries": [BOOK_ENTRY],
    "extensions": {},
}


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def v1_card() -> dict:
    return copy.deepcopy(V1_CARD)


@pytest.fixture
def v2_from_v1() -> dict:
    return copy.deepcopy(V2_FROM_V1)


@pytest.fixture
def v2_card() -> dict:
    return copy.deepcopy(V2_CARD)


@pytest.fixture
def v2_card_with_book() -> dict:
    card = copy.deepcopy(V2_CARD)
    card["data"]["character_book"] = {
        "name": "Kingdom",
        "scan_depth": 4,
        "token_budget": 512.5,
        "recursive_scanning": False,
        "extensions": {"vendor": {"weights": [1, 2, 3]}},
        "entries": [copy.deepcopy(BOOK_ENTRY), copy.deepcopy(FULL_BOOK_ENTRY)],
    }
    return card


@pytest.fixture
def backfilled_card() -> dict:
    card = copy.deepcopy(V2_CARD)
    card.update({name: card["data"][name] for name in V1_CARD})
    return card


@pytest.fixture
def notice_card() -> dict:
    card = copy.deepcopy(V2_CARD)
    card.update({name: NOTICE for name in V1_CARD})
    return card


@pytest.fixture
def book_entry() -> dict:
    return copy.deepcopy(BOOK_ENTRY)


@pytest.fixture
def full_book_entry() -> dict:
    return copy.deepcopy(FULL_BOOK_ENTRY)


@pytest.fixture
def character_book() -> dict:
    return copy.deepcopy(BOOK)
