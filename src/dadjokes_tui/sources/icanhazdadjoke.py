from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..config import JOKE_URL, REQUEST_HEADERS
from ..datamodels import DadJoke, JokeDecodeError, JokeFetchError
from .base import JokeSource

logger = logging.getLogger("dadjokes")


class ICanHazDadJokeSource(JokeSource):
    """Fetches random jokes from icanhazdadjoke.com.

    Config keys:
        url: endpoint to GET (defaults to ``JOKE_URL``)
        http_timeout: seconds; unset leaves the requests default in place
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(config)
        self.url = self.config.get("url") or JOKE_URL
        self.timeout = self.config.get("http_timeout")
        self.session = session or requests.Session()

    def fetch_joke(self) -> DadJoke:
        logger.debug("Fetching joke from %s", self.url)
        try:
            # Headers go on each request so injected sessions ask for JSON too
            resp = self.session.get(self.url, headers=REQUEST_HEADERS, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as e:
            raise JokeFetchError(f"Could not retrieve joke from {self.url}: {e}") from e
        except ValueError as e:
            raise JokeFetchError(f"Response from {self.url} is not JSON: {e}") from e

        try:
            joke = DadJoke.from_dict(payload)
        except JokeDecodeError as e:
            raise JokeFetchError(f"Could not decode joke from {self.url}: {e}") from e

        logger.debug("Fetched joke %s", joke.id)
        return joke
