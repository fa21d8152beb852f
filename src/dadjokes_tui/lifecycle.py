from __future__ import annotations

import enum
import logging
from typing import Optional

from .favourites import FavouritesStore

logger = logging.getLogger("dadjokes")


class ScenePhase(enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BACKGROUND = "background"


class LifecycleObserver:
    """Reacts to host lifecycle transitions; only backgrounding persists."""

    def __init__(self, favourites: FavouritesStore):
        self.favourites = favourites
        self.phase: Optional[ScenePhase] = None

    def transition(self, phase: ScenePhase) -> None:
        logger.info("Lifecycle: %s -> %s", self.phase.value if self.phase else "launch", phase.value)
        self.phase = phase
        if phase is ScenePhase.BACKGROUND:
            self.favourites.save()
