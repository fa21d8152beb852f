from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping


class JokeDecodeError(ValueError):
    """Raised when data cannot be turned into a DadJoke."""


class JokeFetchError(RuntimeError):
    """Raised by a joke source when no joke could be retrieved."""


# --- Data models ---
@dataclass(frozen=True)
class DadJoke:
    id: str
    joke: str
    status: int

    @classmethod
    def from_dict(cls, data: Any) -> "DadJoke":
        if not isinstance(data, Mapping):
            raise JokeDecodeError(f"expected a JSON object, got {type(data).__name__}")
        missing = [key for key in ("id", "joke", "status") if key not in data]
        if missing:
            raise JokeDecodeError(f"missing field(s): {', '.join(missing)}")

        joke_id, text, status = data["id"], data["joke"], data["status"]
        if not isinstance(joke_id, str):
            raise JokeDecodeError("field 'id' must be a string")
        if not isinstance(text, str):
            raise JokeDecodeError("field 'joke' must be a string")
        # bool is an int subclass
        if isinstance(status, bool) or not isinstance(status, int):
            raise JokeDecodeError("field 'status' must be an integer")
        return cls(id=joke_id, joke=text, status=status)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "joke": self.joke, "status": self.status}


PLACEHOLDER_JOKE = DadJoke(id="", joke="Knock, knock", status=0)
