"""
Draw sessions: one client's decks, its active profile, and the operations on them.

A `ClientSession` is the explicit state of one client (drawn cards per
category, the active profile, the random source). `SessionController` runs
the user-facing operations against it, the card catalog and a completion
store. Sessions held by the API live in a `SessionRegistry`.
"""
import logging
import random
import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Callable, Dict, Optional, Set, Union

from taskdeck.core.config import settings
from taskdeck.core.exceptions import ConfigurationError, NotFoundError
from taskdeck.models.enums import CardCategory
from taskdeck.services.catalog_service import CatalogCard, CatalogIndex
from taskdeck.services.completion_service import CompletionStore
from taskdeck.services.draw_service import DrawPhase, DrawState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveProfile:
    """The profile a session acts as."""
    id: int
    display_name: str


class NoActiveProfile:
    """Outcome of a completion operation attempted without an active profile."""
    status = "no_active_profile"

    def __repr__(self) -> str:
        return "NoActiveProfile()"


NO_ACTIVE_PROFILE = NoActiveProfile()


@dataclass(frozen=True)
class ToggleResult:
    profile_id: int
    card_id: int
    is_completed: bool
    status: str = "ok"


@dataclass(frozen=True)
class ResetResult:
    completions_cleared: bool
    completions_removed: int = 0


@dataclass
class ClientSession:
    """State of one client: discarded with the client, never persisted."""
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    draw_state: DrawState = field(default_factory=DrawState)
    active_profile: Optional[ActiveProfile] = None
    phases: Dict[CardCategory, DrawPhase] = field(
        default_factory=lambda: {category: DrawPhase.IDLE for category in CardCategory}
    )
    current: Dict[CardCategory, int] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_used: float = field(default_factory=time.monotonic)


class SessionController:
    """
    User-facing operations of one client session.

    Args:
        catalog: Cards grouped by category
        completions: Store holding completion state per profile
        session: Client state to operate on; a fresh one is created if omitted
        rng: Random source for draws; defaults to the session's own
    """

    def __init__(
        self,
        catalog: CatalogIndex,
        completions: CompletionStore,
        session: Optional[ClientSession] = None,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog
        self.completions = completions
        self.session = session if session is not None else ClientSession()
        self.rng = rng if rng is not None else self.session.rng

    @property
    def draw_state(self) -> DrawState:
        return self.session.draw_state

    @property
    def active_profile(self) -> Optional[ActiveProfile]:
        return self.session.active_profile

    def set_active_profile(self, profile: Optional[ActiveProfile]) -> None:
        self.session.active_profile = profile
        logger.info(
            f"Session {self.session.session_id} active profile: "
            f"{profile.display_name if profile else None}"
        )

    def phase(self, category: CardCategory) -> DrawPhase:
        return self.session.phases[CardCategory(category)]

    def current_card(self, category: CardCategory) -> Optional[CatalogCard]:
        card_id = self.session.current.get(CardCategory(category))
        return self.catalog.get(card_id) if card_id is not None else None

    def draw_card(self, category: CardCategory) -> CatalogCard:
        """
        Draw one card from a category without repeating until the deck is exhausted.

        When every card of the category has been drawn, the category is
        reshuffled and the draw continues from the full deck, so the draw
        itself never fails because of exhaustion.

        Raises:
            ConfigurationError: If the category has no cards at all
        """
        category = CardCategory(category)
        all_ids = self.catalog.ids_in_category(category)
        if not all_ids:
            raise ConfigurationError(f"Category '{category.value}' has no cards in the catalog")

        previous_phase = self.session.phases[category]
        self.session.phases[category] = DrawPhase.DRAWING

        # Pick before mutating anything so a failing random source leaves the deck untouched
        available = self.draw_state.available_ids(category, all_ids)
        exhausted = not available
        try:
            card_id = self.rng.choice(all_ids if exhausted else available)
        except Exception:
            self.session.phases[category] = previous_phase
            raise

        if exhausted:
            logger.debug(f"Category '{category.value}' exhausted, reshuffling")
            self.draw_state.reset_category(category)
        self.draw_state.mark_drawn(category, card_id)

        self.session.current[category] = card_id
        self.session.phases[category] = DrawPhase.DRAWN
        logger.debug(f"Session {self.session.session_id} drew card {card_id} from '{category.value}'")
        return self.catalog.get(card_id)

    def toggle_completion(self, card_id: int) -> Union[ToggleResult, NoActiveProfile]:
        """
        Flip the completion state of a card for the active profile.

        Returns NO_ACTIVE_PROFILE instead of raising when no profile is active.

        Raises:
            NotFoundError: If the card is not in the catalog
        """
        profile = self.session.active_profile
        if profile is None:
            return NO_ACTIVE_PROFILE

        if self.catalog.get(card_id) is None:
            raise NotFoundError(f"Card with id {card_id} not found")

        is_completed = self.completions.toggle(profile.id, card_id)
        logger.debug(f"Profile {profile.id} card {card_id} completed={is_completed}")
        return ToggleResult(profile_id=profile.id, card_id=card_id, is_completed=is_completed)

    def is_completed(self, card_id: int) -> Union[bool, NoActiveProfile]:
        profile = self.session.active_profile
        if profile is None:
            return NO_ACTIVE_PROFILE
        return self.completions.is_completed(profile.id, card_id)

    def completed_ids(self) -> Union[Set[int], NoActiveProfile]:
        """Completed card ids of the active profile, for hydrating a client after a switch."""
        profile = self.session.active_profile
        if profile is None:
            return NO_ACTIVE_PROFILE
        return self.completions.list_completed(profile.id)

    def reset_session(self) -> ResetResult:
        """Clear every deck, and the active profile's completions if a profile is active."""
        profile = self.session.active_profile
        removed = 0
        if profile is not None:
            # completions first: if the store fails, the decks stay as they were
            removed = self.completions.reset_all(profile.id)

        self.draw_state.reset_all()
        self.session.current.clear()
        for category in CardCategory:
            self.session.phases[category] = DrawPhase.IDLE

        logger.info(
            f"Session {self.session.session_id} reset "
            f"(profile={profile.id if profile else None}, completions removed={removed})"
        )
        return ResetResult(completions_cleared=profile is not None, completions_removed=removed)


class SessionRegistry:
    """
    Thread-safe holder of the client sessions served over the API.

    Sessions are kept in least-recently-used order. Every `create` and `get`
    first drops the sessions idle for longer than `idle_ttl_seconds`, and
    `create` evicts the least recently used one when `max_sessions` are held.

    Args:
        idle_ttl_seconds: Idle time after which a session is dropped; None keeps it forever
        max_sessions: Upper bound on held sessions; None for no bound
        clock: Monotonic time source in seconds
    """

    def __init__(
        self,
        idle_ttl_seconds: Optional[float] = None,
        max_sessions: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_sessions is not None and max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.idle_ttl_seconds = idle_ttl_seconds
        self.max_sessions = max_sessions
        self._clock = clock
        self._sessions: "OrderedDict[str, ClientSession]" = OrderedDict()
        self._lock = Lock()

    def _evict_idle(self, now: float) -> None:
        # caller holds the lock; oldest use comes first
        if self.idle_ttl_seconds is None:
            return
        while self._sessions:
            session_id, client = next(iter(self._sessions.items()))
            if now - client.last_used <= self.idle_ttl_seconds:
                break
            del self._sessions[session_id]
            logger.info(f"Dropped idle draw session {session_id}")

    def create(self, active_profile: Optional[ActiveProfile] = None) -> ClientSession:
        now = self._clock()
        client = ClientSession(active_profile=active_profile, last_used=now)
        with self._lock:
            self._evict_idle(now)
            while self.max_sessions is not None and len(self._sessions) >= self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.info(f"Evicted draw session {evicted_id}, limit of {self.max_sessions} reached")
            self._sessions[client.session_id] = client
        logger.info(f"Created draw session {client.session_id}")
        return client

    def get(self, session_id: str) -> ClientSession:
        now = self._clock()
        with self._lock:
            self._evict_idle(now)
            client = self._sessions.get(session_id)
            if client is not None:
                client.last_used = now
                self._sessions.move_to_end(session_id)
        if client is None:
            raise NotFoundError(f"Session '{session_id}' not found")
        return client

    def discard(self, session_id: str) -> None:
        with self._lock:
            client = self._sessions.pop(session_id, None)
        if client is None:
            raise NotFoundError(f"Session '{session_id}' not found")
        logger.info(f"Discarded draw session {session_id}")

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


session_registry = SessionRegistry(
    idle_ttl_seconds=settings.session_idle_ttl_seconds,
    max_sessions=settings.session_max_count,
)
