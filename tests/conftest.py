from __future__ import annotations

import os
from collections.abc import Callable, Iterator

# Settings are read at import time, so the test database must be configured first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEFAULT_CARDS"] = "false"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from taskdeck.core.database import engine
from taskdeck.main import app
from taskdeck.models import Card, CardCategory, CardDifficulty
from taskdeck.services.catalog_service import seed_default_cards
from taskdeck.services.session_service import session_registry


@pytest.fixture(autouse=True)
def _fresh_database() -> Iterator[None]:
    """Every test starts from empty tables and no open draw sessions."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    session_registry.clear()
    yield
    session_registry.clear()


@pytest.fixture
def db_session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded(db_session: Session) -> int:
    return seed_default_cards(db_session)


@pytest.fixture
def add_cards(db_session: Session) -> Callable[..., list[int]]:
    """Insert `count` cards into one category and return their ids."""

    def _add(category: CardCategory, count: int) -> list[int]:
        cards = [
            Card(
                title=f"{category.value} task {i}",
                description=f"Do {category.value} thing {i}",
                category=category.value,
                difficulty=CardDifficulty.EASY.value,
            )
            for i in range(count)
        ]
        for card in cards:
            db_session.add(card)
        db_session.commit()
        return [card.id for card in cards]

    return _add
