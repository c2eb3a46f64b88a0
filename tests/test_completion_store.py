from collections.abc import Callable
from threading import Event, Thread

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from taskdeck.core.exceptions import TransientStoreError
from taskdeck.models import CardCategory, Completion
from taskdeck.services.completion_service import (
    CompletionStore,
    DatabaseCompletionStore,
    InMemoryCompletionStore,
)
from taskdeck.services.profile_service import get_or_create_profile


def _check_involution(store: CompletionStore, profile_id: int, card_id: int) -> None:
    before = store.is_completed(profile_id, card_id)

    first = store.toggle(profile_id, card_id)
    assert first is (not before)
    assert store.is_completed(profile_id, card_id) is first

    second = store.toggle(profile_id, card_id)
    assert second is before
    assert store.is_completed(profile_id, card_id) is before


def test_memory_toggle_is_an_involution() -> None:
    store = InMemoryCompletionStore()
    _check_involution(store, 1, 5)

    store.toggle(1, 5)
    _check_involution(store, 1, 5)


def test_memory_list_and_reset_are_scoped_per_profile() -> None:
    store = InMemoryCompletionStore()
    store.toggle(1, 5)
    store.toggle(1, 6)
    store.toggle(2, 5)

    assert store.list_completed(1) == {5, 6}
    assert store.reset_all(1) == 2
    assert store.list_completed(1) == set()
    assert store.list_completed(2) == {5}
    assert store.reset_all(99) == 0


def test_memory_concurrent_toggles_on_one_pair_stay_consistent() -> None:
    store = InMemoryCompletionStore()
    results: list[bool] = []

    def worker() -> None:
        for _ in range(200):
            results.append(store.toggle(7, 3))

    threads = [Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    # 800 toggles: every insert is matched by a removal
    assert results.count(True) == results.count(False) == 400
    assert store.is_completed(7, 3) is False


@pytest.fixture
def profile_and_cards(db_session: Session, add_cards: Callable[..., list[int]]) -> tuple[int, list[int]]:
    card_ids = add_cards(CardCategory.TEXT, 3)
    profile = get_or_create_profile(db_session, "Bob")
    return profile.id, card_ids


def test_database_toggle_is_an_involution(db_session: Session, profile_and_cards: tuple[int, list[int]]) -> None:
    profile_id, card_ids = profile_and_cards
    store = DatabaseCompletionStore(db_session)

    _check_involution(store, profile_id, card_ids[0])


def test_database_toggle_never_duplicates_a_pair(db_session: Session, profile_and_cards: tuple[int, list[int]]) -> None:
    profile_id, card_ids = profile_and_cards
    store = DatabaseCompletionStore(db_session)

    for _ in range(5):
        store.toggle(profile_id, card_ids[1])

    rows = db_session.exec(select(Completion).where(Completion.profile_id == profile_id)).all()
    assert [row.card_id for row in rows] == [card_ids[1]]


def test_database_toggle_after_lost_insert_race_removes_pair(
    db_session: Session, profile_and_cards: tuple[int, list[int]]
) -> None:
    profile_id, card_ids = profile_and_cards
    store = DatabaseCompletionStore(db_session)

    # Another writer inserted the pair between our delete and insert
    original_exec = db_session.exec
    raced = {"done": False}

    def exec_with_race(statement, *args, **kwargs):
        result = original_exec(statement, *args, **kwargs)
        if not raced["done"] and statement.is_delete:
            raced["done"] = True
            with Session(db_session.get_bind()) as other:
                other.add(Completion(profile_id=profile_id, card_id=card_ids[2]))
                other.commit()
        return result

    db_session.exec = exec_with_race  # type: ignore[method-assign]
    try:
        assert store.toggle(profile_id, card_ids[2]) is False
    finally:
        db_session.exec = original_exec  # type: ignore[method-assign]

    assert store.is_completed(profile_id, card_ids[2]) is False


def test_database_reset_leaves_other_profiles(db_session: Session, profile_and_cards: tuple[int, list[int]]) -> None:
    profile_id, card_ids = profile_and_cards
    other_id = get_or_create_profile(db_session, "Ann").id
    store = DatabaseCompletionStore(db_session)

    store.toggle(profile_id, card_ids[0])
    store.toggle(profile_id, card_ids[1])
    store.toggle(other_id, card_ids[0])

    assert store.reset_all(profile_id) == 2
    assert store.list_completed(profile_id) == set()
    assert store.list_completed(other_id) == {card_ids[0]}


def _unavailable(*args, **kwargs) -> None:
    raise OperationalError("COMMIT", {}, Exception("database is locked"))


def test_database_toggle_failure_is_transient_and_rolled_back(
    db_session: Session, profile_and_cards: tuple[int, list[int]], monkeypatch: pytest.MonkeyPatch
) -> None:
    profile_id, card_ids = profile_and_cards
    store = DatabaseCompletionStore(db_session)
    store.toggle(profile_id, card_ids[0])

    monkeypatch.setattr(db_session, "commit", _unavailable)
    with pytest.raises(TransientStoreError, match="database is locked"):
        store.toggle(profile_id, card_ids[0])
    with pytest.raises(TransientStoreError):
        store.toggle(profile_id, card_ids[1])
    monkeypatch.undo()

    assert store.list_completed(profile_id) == {card_ids[0]}


def test_database_reset_failure_is_transient_and_rolled_back(
    db_session: Session, profile_and_cards: tuple[int, list[int]], monkeypatch: pytest.MonkeyPatch
) -> None:
    profile_id, card_ids = profile_and_cards
    store = DatabaseCompletionStore(db_session)
    store.toggle(profile_id, card_ids[0])
    store.toggle(profile_id, card_ids[1])

    monkeypatch.setattr(db_session, "commit", _unavailable)
    with pytest.raises(TransientStoreError):
        store.reset_all(profile_id)
    monkeypatch.undo()

    assert store.list_completed(profile_id) == {card_ids[0], card_ids[1]}


class _PausingSet(set):
    """Set whose add() blocks until released, to hold a toggle mid-update."""

    def __init__(self) -> None:
        super().__init__()
        self.entered = Event()
        self.release = Event()

    def add(self, item) -> None:
        self.entered.set()
        self.release.wait(timeout=5)
        super().add(item)


def test_memory_reset_waits_for_running_toggle() -> None:
    store = InMemoryCompletionStore()
    pausing = _PausingSet()
    store._completed[1] = pausing  # noqa: SLF001
    results: dict[str, object] = {}

    toggler = Thread(target=lambda: results.setdefault("toggle", store.toggle(1, 5)))
    resetter = Thread(target=lambda: results.setdefault("reset", store.reset_all(1)))

    toggler.start()
    assert pausing.entered.wait(timeout=5)
    resetter.start()
    resetter.join(timeout=0.2)
    assert resetter.is_alive()

    pausing.release.set()
    toggler.join(timeout=5)
    resetter.join(timeout=5)

    assert results == {"toggle": True, "reset": 1}
    assert store.is_completed(1, 5) is False


def test_memory_lock_count_follows_profiles_not_pairs() -> None:
    store = InMemoryCompletionStore()
    for card_id in range(50):
        store.toggle(1, card_id)
        store.toggle(2, card_id)
    store.reset_all(1)

    assert len(store._locks) == 2  # noqa: SLF001
