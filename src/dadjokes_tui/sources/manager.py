from __future__ import annotations

from typing import Any, Dict, Type

from ..config import DEFAULT_SOURCE
from .base import JokeSource
from .icanhazdadjoke import ICanHazDadJokeSource

AVAILABLE_SOURCES: Dict[str, Type[JokeSource]] = {
    "icanhazdadjoke": ICanHazDadJokeSource,
}


def get_source(config: Dict[str, Any]) -> JokeSource:
    """Build the joke source selected in the config."""
    source_name = config.get("source") or DEFAULT_SOURCE
    source_config = config.get("sources", {}).get(source_name, {})
    source_class = AVAILABLE_SOURCES.get(source_name)
    if not source_class:
        raise ValueError(f"Unknown source: {source_name}")
    return source_class(source_config)
