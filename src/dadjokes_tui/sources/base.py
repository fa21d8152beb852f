from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..datamodels import DadJoke


class JokeSource(ABC):
    """Abstract base class for a joke source."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    @abstractmethod
    def fetch_joke(self) -> DadJoke:
        """Return a random joke, or raise JokeFetchError."""
        pass
