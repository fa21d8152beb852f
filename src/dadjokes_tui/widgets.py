from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import ListItem, Static
from rich.text import Text

from .datamodels import DadJoke


# --- UI Widgets ---
class JokeCard(Static):
    """Bordered panel holding the joke on display."""

    def show(self, joke: DadJoke) -> None:
        self.update(Text(joke.joke))


class FavouriteToggle(Static):
    """Heart that turns red once the current joke is a favourite."""

    added = reactive(False)

    class Pressed(Message):
        """Posted when the heart is clicked."""

    def render(self) -> Text:
        if self.added:
            return Text("♥ Favourite", style="bold red")
        return Text("♡ Add to favourites", style="dim")

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Pressed())


class FavouriteItem(ListItem):
    def __init__(self, joke: DadJoke):
        super().__init__()
        self.joke = joke

    def compose(self) -> ComposeResult:
        yield Static(self.joke.joke, classes="favourite-text")


class StatusBar(Static):
    """One-line footer: fetch status, saved favourites, key hints."""

    loading_status = reactive("")
    favourites_count = reactive(0)
    keybinding_hint = reactive("")

    def on_mount(self) -> None:
        self.refresh_status()

    def set_keybindings(self, hint: str) -> None:
        self.keybinding_hint = hint

    def refresh_status(self) -> None:
        parts = []
        if self.loading_status:
            parts.append(self.loading_status)
        saved = "1 favourite" if self.favourites_count == 1 else f"{self.favourites_count} favourites"
        parts.append(f"♥ {saved}")
        if self.keybinding_hint:
            parts.append(self.keybinding_hint)
        self.update(" | ".join(parts))

    def watch_loading_status(self, _: str) -> None:
        self.refresh_status()

    def watch_favourites_count(self, _: int) -> None:
        self.refresh_status()

    def watch_keybinding_hint(self, _: str) -> None:
        self.refresh_status()
