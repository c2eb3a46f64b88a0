"""
Completion tracking: which cards each profile has marked as done.

Two stores share the same contract. `InMemoryCompletionStore` serializes
toggles and resets with one lock per profile. `DatabaseCompletionStore`
relies on the unique constraint of the completion table instead, so it stays
correct across processes.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportCallIssue=false
# pyright: reportArgumentType=false
import logging
from collections import defaultdict
from threading import Lock
from typing import Dict, List, Set
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlmodel import Session, select

from taskdeck.core.exceptions import TransientStoreError
from taskdeck.models import Completion

logger = logging.getLogger(__name__)


class CompletionStore:
    """Per-profile set of completed card ids. Category-agnostic."""

    def is_completed(self, profile_id: int, card_id: int) -> bool:
        raise NotImplementedError

    def toggle(self, profile_id: int, card_id: int) -> bool:
        """Flip membership of the pair and return the new completion state."""
        raise NotImplementedError

    def list_completed(self, profile_id: int) -> Set[int]:
        raise NotImplementedError

    def reset_all(self, profile_id: int) -> int:
        """Remove every completion of the profile. Returns how many were removed."""
        raise NotImplementedError


class InMemoryCompletionStore(CompletionStore):
    """
    Process-local store. One lock per profile guards that profile's set, so a
    toggle and a reset of the same profile never interleave.
    """

    def __init__(self):
        self._completed: Dict[int, Set[int]] = defaultdict(set)
        self._locks: Dict[int, Lock] = {}
        self._registry_lock = Lock()

    def _lock_for(self, profile_id: int) -> Lock:
        with self._registry_lock:
            return self._locks.setdefault(profile_id, Lock())

    def is_completed(self, profile_id: int, card_id: int) -> bool:
        return card_id in self._completed.get(profile_id, ())

    def toggle(self, profile_id: int, card_id: int) -> bool:
        with self._lock_for(profile_id):
            completed = self._completed[profile_id]
            if card_id in completed:
                completed.discard(card_id)
                return False
            completed.add(card_id)
            return True

    def list_completed(self, profile_id: int) -> Set[int]:
        with self._lock_for(profile_id):
            return set(self._completed.get(profile_id, ()))

    def reset_all(self, profile_id: int) -> int:
        with self._lock_for(profile_id):
            removed = self._completed.pop(profile_id, set())
        return len(removed)


class DatabaseCompletionStore(CompletionStore):
    """Completion store backed by the `completion` table."""

    def __init__(self, session: Session):
        self.session = session

    def _pair(self, profile_id: int, card_id: int):
        return (Completion.profile_id == profile_id, Completion.card_id == card_id)

    def is_completed(self, profile_id: int, card_id: int) -> bool:
        completion = self.session.exec(
            select(Completion).where(*self._pair(profile_id, card_id))
        ).first()
        return completion is not None

    def toggle(self, profile_id: int, card_id: int) -> bool:
        """
        Delete-or-insert the pair in one transaction.

        A delete that removes a row means the card was completed. Otherwise an
        insert is attempted; if it collides with the unique constraint, a
        concurrent toggle inserted the pair first, so this toggle is ordered
        after it and removes the pair again.
        """
        try:
            result = self.session.exec(delete(Completion).where(*self._pair(profile_id, card_id)))
            if result.rowcount:
                self.session.commit()
                return False

            self.session.add(Completion(profile_id=profile_id, card_id=card_id))
            self.session.commit()
            return True
        except IntegrityError:
            self.session.rollback()
            if not self.is_completed(profile_id, card_id):
                raise
            logger.debug(f"Concurrent toggle on profile {profile_id} card {card_id}, removing pair")
            return self._remove_after_race(profile_id, card_id)
        except OperationalError as e:
            self.session.rollback()
            raise TransientStoreError(f"Completion store unavailable: {e.orig}") from e

    def _remove_after_race(self, profile_id: int, card_id: int) -> bool:
        try:
            self.session.exec(delete(Completion).where(*self._pair(profile_id, card_id)))
            self.session.commit()
        except OperationalError as e:
            self.session.rollback()
            raise TransientStoreError(f"Completion store unavailable: {e.orig}") from e
        return False

    def list_completed(self, profile_id: int) -> Set[int]:
        card_ids = self.session.exec(
            select(Completion.card_id).where(Completion.profile_id == profile_id)
        ).all()
        return set(card_ids)

    def list_completions(self, profile_id: int) -> List[Completion]:
        """Completion rows of a profile, oldest first."""
        return list(self.session.exec(
            select(Completion)
            .where(Completion.profile_id == profile_id)
            .order_by(Completion.id)
        ).all())

    def reset_all(self, profile_id: int) -> int:
        try:
            result = self.session.exec(delete(Completion).where(Completion.profile_id == profile_id))
            self.session.commit()
        except OperationalError as e:
            self.session.rollback()
            raise TransientStoreError(f"Completion store unavailable: {e.orig}") from e

        logger.info(f"Reset {result.rowcount} completions for profile {profile_id}")
        return result.rowcount
