from __future__ import annotations

import asyncio
import logging
from typing import Callable, List

from .datamodels import PLACEHOLDER_JOKE, DadJoke, JokeFetchError
from .favourites import FavouritesStore
from .sources.base import JokeSource

logger = logging.getLogger("dadjokes")

BoardListener = Callable[["JokeBoard"], None]


class JokeBoard:
    """The joke on display, whether it is a favourite, and the favourites.

    Listeners are called after every change so a front end can re-render.
    """

    def __init__(self, source: JokeSource, favourites: FavouritesStore):
        self.source = source
        self.favourites = favourites
        self.current_joke: DadJoke = PLACEHOLDER_JOKE
        self.added_to_favourites: bool = False
        self._listeners: List[BoardListener] = []

    def subscribe(self, listener: BoardListener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Board listener %r failed", listener)

    async def load_new_joke(self) -> bool:
        """Fetch a new joke off the event loop and make it current.

        Overlapping calls are not coalesced; whichever finishes last wins.
        On failure the current joke and flag are left alone.
        """
        try:
            joke = await asyncio.to_thread(self.source.fetch_joke)
        except JokeFetchError as e:
            logger.error("Could not retrieve or decode a joke: %s", e)
            return False

        self.current_joke = joke
        self.added_to_favourites = False
        logger.info("Loaded joke %s", joke.id)
        self._notify()
        return True

    def mark_favourite(self) -> bool:
        """Add the current joke to the favourites once per fetched joke."""
        if self.added_to_favourites:
            return False
        self.favourites.append(self.current_joke)
        self.added_to_favourites = True
        self._notify()
        return True
