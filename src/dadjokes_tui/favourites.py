"""Favourite jokes, kept in memory and persisted as a JSON array."""
from __future__ import annotations

import json
import logging
from typing import Callable, Iterable, Iterator, List

from .config import atomic_write_text
from .datamodels import DadJoke, JokeDecodeError

logger = logging.getLogger("dadjokes")

FavouritesListener = Callable[["FavouritesStore"], None]


def encode_favourites(jokes: Iterable[DadJoke]) -> str:
    """Encode jokes as a human-readable JSON array."""
    return json.dumps([j.to_dict() for j in jokes], indent=2, ensure_ascii=False)


def decode_favourites(text: str) -> List[DadJoke]:
    """Decode a JSON array of jokes, raising JokeDecodeError on bad input."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise JokeDecodeError(f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise JokeDecodeError(f"expected a JSON array, got {type(data).__name__}")
    return [DadJoke.from_dict(item) for item in data]


class FavouritesStore:
    """Ordered, duplicate-tolerant list of favourite jokes backed by one file.

    Appending only changes memory. The file is written when ``save`` is
    called, which the lifecycle observer does on backgrounding.
    """

    def __init__(self, path: str):
        self.path = path
        self._jokes: List[DadJoke] = []
        self._listeners: List[FavouritesListener] = []

    def __len__(self) -> int:
        return len(self._jokes)

    def __iter__(self) -> Iterator[DadJoke]:
        return iter(list(self._jokes))

    @property
    def items(self) -> List[DadJoke]:
        return list(self._jokes)

    def subscribe(self, listener: FavouritesListener) -> Callable[[], None]:
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
                logger.exception("Favourites listener %r failed", listener)

    def append(self, joke: DadJoke) -> None:
        self._jokes.append(joke)
        logger.debug("Added joke %s to favourites (%d total)", joke.id, len(self._jokes))
        self._notify()

    def load(self) -> bool:
        """Replace the favourites with the saved file's contents.

        Leaves the store unchanged (empty at startup) if the file is missing
        or cannot be decoded. Never raises.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError:
            logger.info("No saved favourites at %s", self.path)
            return False
        except (IOError, UnicodeDecodeError) as e:
            logger.error("Could not read favourites from %s: %s", self.path, e)
            return False

        logger.debug("Got data from %s, contents are:\n%s", self.path, text)
        try:
            jokes = decode_favourites(text)
        except JokeDecodeError as e:
            logger.error("Could not decode favourites from %s: %s", self.path, e)
            return False

        self._jokes = jokes
        logger.info("Loaded %d favourite(s) from %s", len(jokes), self.path)
        self._notify()
        return True

    def save(self) -> bool:
        """Write all favourites to disk atomically. Never raises."""
        try:
            text = encode_favourites(self._jokes)
            atomic_write_text(self.path, text + "\n")
        except (IOError, TypeError, ValueError) as e:
            logger.error("Unable to write favourites to %s: %s", self.path, e)
            return False

        logger.info("Saved %d favourite(s) to %s", len(self._jokes), self.path)
        logger.debug("Saved favourites:\n%s", text)
        return True
