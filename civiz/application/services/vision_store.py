"""
In-memory vision store.

Owns the vision collection and the current user's point ledger, drives the
asynchronous image generation of each submitted vision, and answers ranked
queries. Only the operations of VisionStore mutate this state.
"""
# Standard library imports
import asyncio
import logging
import random
import secrets
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

# Local application imports
from ...domain.constants.categories import Category
from ...domain.constants.media_constants import PLACEHOLDER_IMAGE_URLS
from ...domain.constants.point_values import PointValues
from ...domain.exceptions import VisionGenerationError
from ...domain.gateways.vision_generation_gateway import VisionGenerationGateway
from ...domain.models.generation import FailureReason
from ...domain.models.vision import Vision, ViewMode
from ...domain.services.category_classifier import classify
from ...domain.services.point_ledger import PointLedger, apply_like_given, apply_submission

logger = logging.getLogger(__name__)


class StoreEvent(str, Enum):
    """Kind of change a subscriber is notified about"""
    SUBMITTED = "submitted"
    GENERATION_READY = "generation_ready"
    GENERATION_FAILED = "generation_failed"
    LIKED = "liked"
    VIEW_MODE_CHANGED = "view_mode_changed"
    CLOSED = "closed"


Listener = Callable[[StoreEvent, "VisionStore"], None]


def _ranked(visions: Iterable[Vision]) -> List[Vision]:
    # Collection is newest-first, so a stable sort keeps the most recent first on ties
    return sorted(visions, key=lambda vision: -vision.points)


class VisionStore:
    """
    State container for visions and the point ledger.

    The collection is an immutable tuple (newest first) and the ledger an
    immutable PointLedger. Each mutation builds the next tuple/ledger and
    swaps them in one synchronous step, so readers always see a consistent
    snapshot even while submit() is suspended on the gateway.
    """

    def __init__(
        self,
        gateway: VisionGenerationGateway,
        current_user_id: str = "user-1",
        starting_points: int = 10,
        initial_visions: Sequence[Vision] = (),
        view_mode: ViewMode = ViewMode.MINE,
        placeholder_images: Sequence[str] = PLACEHOLDER_IMAGE_URLS,
        classifier: Callable[[str], Category] = classify,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not placeholder_images:
            raise ValueError("At least one placeholder image is required")
        ids = [vision.id for vision in initial_visions]
        if len(ids) != len(set(ids)):
            raise ValueError("Initial visions must have unique IDs")

        self._gateway = gateway
        self._current_user_id = current_user_id
        self._visions: Tuple[Vision, ...] = tuple(initial_visions)
        self._ledger = PointLedger(starting_points)
        self._view_mode = ViewMode(view_mode)
        self._placeholder_images = tuple(placeholder_images)
        self._classify = classifier
        self._rng = rng or random.Random()
        self._listeners: List[Listener] = []
        self._closed = False

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def current_user_id(self) -> str:
        return self._current_user_id

    @property
    def visions(self) -> Tuple[Vision, ...]:
        """Snapshot of every held vision, newest first."""
        return self._visions

    @property
    def ledger(self) -> PointLedger:
        return self._ledger

    @property
    def points(self) -> int:
        """Current user's running point total."""
        return self._ledger.total

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @view_mode.setter
    def view_mode(self, mode: Union[ViewMode, str]) -> None:
        mode = ViewMode(mode)
        if mode is self._view_mode:
            return
        self._view_mode = mode
        self._notify(StoreEvent.VIEW_MODE_CHANGED)

    def toggle_view_mode(self) -> ViewMode:
        self.view_mode = ViewMode.CITY if self._view_mode is ViewMode.MINE else ViewMode.MINE
        return self._view_mode

    def get(self, vision_id: str) -> Optional[Vision]:
        for vision in self._visions:
            if vision.id == vision_id:
                return vision
        return None

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called after every committed change.

        Returns:
            Callable that removes the listener (safe to call more than once)
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as e:
                logger.error(f"Vision store listener failed on {event.value}: {e}", exc_info=True)

    def _commit(
        self,
        event: StoreEvent,
        visions: Optional[Tuple[Vision, ...]] = None,
        ledger: Optional[PointLedger] = None,
    ) -> None:
        if visions is not None:
            self._visions = visions
        if ledger is not None:
            self._ledger = ledger
        self._notify(event)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _generate_vision_id(self) -> str:
        """
        Generate a vision ID not held by the store

        Returns:
            Unique vision ID string in format vision-xxxxxxxxxxxx
        """
        held = {vision.id for vision in self._visions}
        while True:
            vision_id = f"vision-{secrets.token_hex(6)}"
            if vision_id not in held:
                return vision_id

    async def submit(self, text: str, address: str) -> Optional[Vision]:
        """
        Submit a new vision and wait for its image generation.

        The record is inserted (pending, placeholder image, submission award
        applied to it and to the ledger) before the first suspension, so it
        is visible to readers immediately. Once the gateway answers, the
        record is looked up again by id and reconciled.

        Args:
            text: Vision text, already validated by the caller
            address: Street address, already validated by the caller

        Returns:
            The reconciled vision, or None if the store is closed (before the
            submission, or while its generation was in flight)

        Raises:
            VisionGenerationError: If generation failed. The vision stays in
                the store as failed and keeps its award.
        """
        if self._closed:
            logger.warning("Vision store is closed, rejecting submission")
            return None

        vision = Vision(
            id=self._generate_vision_id(),
            text=text,
            address=address,
            category=self._classify(text),
            image_url=self._rng.choice(self._placeholder_images),
            owner_id=self._current_user_id,
            points=PointValues.VISION_SUBMISSION,
        )
        self._commit(
            StoreEvent.SUBMITTED,
            visions=(vision,) + self._visions,
            ledger=apply_submission(self._ledger),
        )
        logger.info(f"Vision {vision.id} submitted in category '{vision.category.value}', generating image")

        try:
            result = await self._gateway.generate(address, text)
        except asyncio.CancelledError:
            logger.warning(f"Image generation for vision {vision.id} was cancelled")
            self._reconcile_failure(vision.id, FailureReason.UNKNOWN)
            raise
        except Exception as e:
            reason = FailureReason.TIMEOUT if isinstance(e, (asyncio.TimeoutError, TimeoutError)) else FailureReason.UNKNOWN
            logger.error(f"Image generation for vision {vision.id} raised: {e}", exc_info=True)
            self._reconcile_failure(vision.id, reason)
            raise VisionGenerationError(vision.id, reason, str(e)) from e

        if not result.ok:
            logger.warning(
                f"Image generation for vision {vision.id} failed: {result.reason.value} {result.message}"
            )
            self._reconcile_failure(vision.id, result.reason)
            raise VisionGenerationError(vision.id, result.reason, result.message)

        updated = self._replace(vision.id, lambda held: held.mark_ready(result.image_ref), StoreEvent.GENERATION_READY)
        if updated is not None:
            logger.info(f"Vision {vision.id} image ready")
        return updated

    def _reconcile_failure(self, vision_id: str, reason: FailureReason) -> None:
        self._replace(vision_id, lambda held: held.mark_failed(reason), StoreEvent.GENERATION_FAILED)

    def _replace(
        self,
        vision_id: str,
        update: Callable[[Vision], Vision],
        event: StoreEvent,
    ) -> Optional[Vision]:
        # Position is looked up at reconciliation time; other records may have been inserted since
        for index, held in enumerate(self._visions):
            if held.id == vision_id:
                updated = update(held)
                self._commit(event, visions=self._visions[:index] + (updated,) + self._visions[index + 1:])
                return updated
        logger.info(f"Vision {vision_id} is no longer held by the store, skipping reconciliation")
        return None

    def like(self, vision_id: str) -> bool:
        """
        Like a vision as the current user.

        Adds the user to liked_by, the received award to the vision and the
        given award to the ledger in a single commit. Unknown ids and repeat
        likes are silent no-ops, as is any like on a closed store. Liking
        one's own vision is allowed.

        Returns:
            True if the like was applied, False if it was a no-op
        """
        if self._closed:
            return False
        for index, held in enumerate(self._visions):
            if held.id != vision_id:
                continue
            if held.is_liked_by(self._current_user_id):
                return False
            updated = held.with_like(self._current_user_id, PointValues.IMAGE_LIKE_RECEIVED)
            self._commit(
                StoreEvent.LIKED,
                visions=self._visions[:index] + (updated,) + self._visions[index + 1:],
                ledger=apply_like_given(self._ledger),
            )
            return True
        return False

    def close(self) -> None:
        """
        Tear the store down: drop records and listeners.

        Generation calls still in flight reconcile as no-ops afterwards.
        """
        if self._closed:
            return
        self._closed = True
        self._commit(StoreEvent.CLOSED, visions=())
        self._listeners.clear()
        logger.info("Vision store closed")

    # ------------------------------------------------------------------
    # Ranked queries
    # ------------------------------------------------------------------

    def list_mine(self) -> List[Vision]:
        """Current user's visions, points descending, most recent first on ties."""
        return _ranked(v for v in self._visions if v.owner_id == self._current_user_id)

    def list_city(self) -> List[Vision]:
        """All visions, points descending, most recent first on ties."""
        return _ranked(self._visions)

    def top_by_category(self, view_mode: Optional[ViewMode] = None) -> Dict[Category, Vision]:
        """
        Top vision per category.

        In MINE mode the current user's highest-point vision in a category is
        preferred over a higher-scoring vision of someone else; otherwise the
        category's overall top is used. Categories without visions are
        omitted.

        Args:
            view_mode: Mode to rank for; defaults to the store's view mode
        """
        mode = ViewMode(view_mode) if view_mode is not None else self._view_mode
        ranked = self.list_city()
        result: Dict[Category, Vision] = {}
        for category in Category:
            in_category = [v for v in ranked if v.category is category]
            if not in_category:
                continue
            if mode is ViewMode.MINE:
                own = [v for v in in_category if v.owner_id == self._current_user_id]
                if own:
                    result[category] = own[0]
                    continue
            result[category] = in_category[0]
        return result
