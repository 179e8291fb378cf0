"""Demo visions the application store starts with."""
# Standard library imports
from datetime import datetime, timedelta
from typing import List, Optional

# Local application imports
from ...domain.constants.categories import Category
from ...domain.constants.media_constants import PLACEHOLDER_IMAGE_URLS
from ...domain.models.vision import GenerationState, Vision
from ...utils.datetime_utils import utc_now


def build_sample_visions(now: Optional[datetime] = None) -> List[Vision]:
    """
    Build the sample visions, newest first.

    They belong to other users and already have their images, so they are
    seeded in the ready state.
    """
    now = now or utc_now()
    return [
        Vision(
            id="sample-1",
            text="Transform Golden Gate Park into a sustainable urban farm with community gardens",
            address="Golden Gate Park, San Francisco, CA",
            category=Category.PARKS_AND_RECREATION,
            image_url=PLACEHOLDER_IMAGE_URLS[0],
            owner_id="user-2",
            points=15,
            liked_by=frozenset({"user-3", "user-4"}),
            created_at=now - timedelta(hours=1),
            generation_state=GenerationState.READY,
        ),
        Vision(
            id="sample-2",
            text="Create 24/7 youth mentorship centers with tech training and art programs",
            address="16th Street, Mission District, San Francisco, CA",
            category=Category.COMMUNITY_YOUTH_CENTERS,
            image_url=PLACEHOLDER_IMAGE_URLS[1],
            owner_id="user-3",
            points=12,
            liked_by=frozenset({"user-1", "user-2"}),
            created_at=now - timedelta(hours=2),
            generation_state=GenerationState.READY,
        ),
        Vision(
            id="sample-3",
            text="Build affordable micro-housing units for essential workers near transit hubs",
            address="Market Street, SOMA, San Francisco, CA",
            category=Category.AFFORDABLE_HOUSING,
            image_url=PLACEHOLDER_IMAGE_URLS[2],
            owner_id="user-4",
            points=18,
            liked_by=frozenset({"user-1", "user-2", "user-3"}),
            created_at=now - timedelta(hours=3),
            generation_state=GenerationState.READY,
        ),
    ]
