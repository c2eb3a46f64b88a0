from fastapi.testclient import TestClient


def test_root_and_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "running"


def test_get_all_cards(client: TestClient, seeded: int) -> None:
    response = client.get("/api/cards")

    assert response.status_code == 200
    cards = response.json()
    assert len(cards) == 30
    assert set(cards[0]) == {"id", "title", "description", "category", "difficulty"}
    assert {card["category"] for card in cards} == {"text", "coding", "image", "music", "video"}


def test_get_cards_by_category(client: TestClient, seeded: int) -> None:
    response = client.get("/api/cards/music")

    assert response.status_code == 200
    cards = response.json()
    assert len(cards) == 6
    assert all(card["category"] == "music" for card in cards)
    assert client.get("/api/cards/MUSIC").json() == cards


def test_unknown_category_is_not_found(client: TestClient, seeded: int) -> None:
    response = client.get("/api/cards/poetry")

    assert response.status_code == 404
    body = response.json()
    assert "Unknown category" in body["message"]
    assert body["type"] == "NotFoundError"


def test_empty_catalog_lists_nothing(client: TestClient) -> None:
    assert client.get("/api/cards").json() == []
    assert client.get("/api/cards/text").json() == []


def test_decks_report_card_counts(client: TestClient, seeded: int) -> None:
    decks = client.get("/api/decks").json()["decks"]

    assert [deck["category"] for deck in decks] == ["text", "coding", "image", "music", "video"]
    assert all(deck["cardCount"] == 6 for deck in decks)
