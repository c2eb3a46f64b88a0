import pytest
from sqlmodel import Session

from taskdeck.core.exceptions import NotFoundError
from taskdeck.models import CardCategory, CardDifficulty
from taskdeck.services.catalog_service import (
    CatalogCard,
    CatalogIndex,
    list_cards,
    load_catalog,
    parse_category,
    seed_default_cards,
)


def make_card(card_id: int, category: CardCategory) -> CatalogCard:
    return CatalogCard(card_id, f"Card {card_id}", "", category, CardDifficulty.EASY)


def test_index_groups_cards_by_category_in_catalog_order() -> None:
    catalog = CatalogIndex([
        make_card(3, CardCategory.TEXT),
        make_card(1, CardCategory.CODING),
        make_card(2, CardCategory.TEXT),
    ])

    assert [card.id for card in catalog.cards_in_category(CardCategory.TEXT)] == [3, 2]
    assert catalog.ids_in_category(CardCategory.CODING) == [1]
    assert catalog.cards_in_category(CardCategory.VIDEO) == []
    assert len(catalog) == 3


def test_index_accepts_category_values_and_rejects_unknown() -> None:
    catalog = CatalogIndex([make_card(1, CardCategory.MUSIC)])

    assert catalog.ids_in_category("music") == [1]
    with pytest.raises(ValueError):
        catalog.cards_in_category("poetry")


def test_index_counts_cover_every_category() -> None:
    catalog = CatalogIndex([make_card(1, CardCategory.IMAGE), make_card(2, CardCategory.IMAGE)])

    counts = catalog.counts()
    assert set(counts) == set(CardCategory)
    assert counts[CardCategory.IMAGE] == 2
    assert counts[CardCategory.TEXT] == 0


def test_returned_lists_do_not_alias_the_index() -> None:
    catalog = CatalogIndex([make_card(1, CardCategory.TEXT)])

    catalog.cards_in_category(CardCategory.TEXT).clear()
    assert catalog.ids_in_category(CardCategory.TEXT) == [1]


def test_parse_category_is_case_insensitive() -> None:
    assert parse_category(" Coding ") is CardCategory.CODING


def test_parse_category_unknown_is_not_found() -> None:
    with pytest.raises(NotFoundError, match="Unknown category"):
        parse_category("poetry")


def test_seed_default_cards_only_runs_on_empty_catalog(db_session: Session) -> None:
    assert seed_default_cards(db_session) == 30
    assert seed_default_cards(db_session) == 0
    assert len(list_cards(db_session)) == 30


def test_load_catalog_has_six_cards_per_category(db_session: Session, seeded: int) -> None:
    catalog = load_catalog(db_session)

    assert all(count == 6 for count in catalog.counts().values())
    text_cards = catalog.cards_in_category(CardCategory.TEXT)
    assert text_cards[0].title == "Create a Haiku"
    assert all(card.category is CardCategory.TEXT for card in text_cards)
