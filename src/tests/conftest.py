from __future__ import annotations

import threading

import pytest

from dadjokes_tui.datamodels import DadJoke
from dadjokes_tui.favourites import FavouritesStore
from dadjokes_tui.sources.base import JokeSource


class FakeJokeSource(JokeSource):
    """Hands out queued jokes (or raises queued exceptions) in call order."""

    def __init__(self, *results):
        super().__init__({})
        self.results = list(results)
        self.calls = 0
        self._lock = threading.Lock()

    def fetch_joke(self) -> DadJoke:
        with self._lock:
            self.calls += 1
            result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture(autouse=True)
def isolated_user_dirs(tmp_path, monkeypatch):
    """Point the default config and data locations into the test's tmp dir."""
    data_dir = tmp_path / "home-data"
    monkeypatch.setattr("dadjokes_tui.config.DATA_DIR", str(data_dir))
    monkeypatch.setattr(
        "dadjokes_tui.config.CONFIG_PATH", str(tmp_path / "home-config" / "config.json")
    )
    return data_dir


@pytest.fixture
def fake_source():
    return FakeJokeSource


@pytest.fixture
def why_did():
    return DadJoke(id="abc", joke="Why did...", status=200)


@pytest.fixture
def skeleton():
    return DadJoke(
        id="R7UfaahVfFd",
        joke="Why don't skeletons ever go trick or treating? Because they have no body to go with.",
        status=200,
    )


@pytest.fixture
def store(tmp_path):
    return FavouritesStore(str(tmp_path / "savedFavourites"))
