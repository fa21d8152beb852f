from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header

from .favourites import FavouritesStore


class FavouritesScreen(Screen):
    """Read-only table of every favourite, in the order they were added."""

    BINDINGS = [
        Binding("escape,q,left", "app.pop_screen", "Back"),
    ]

    def __init__(self, favourites: FavouritesStore):
        super().__init__()
        self.favourites = favourites

    def compose(self) -> ComposeResult:
        yield Header()
        yield Footer()
        yield DataTable(id="favourites-table")

    def on_mount(self) -> None:
        self.title = "Favourites"
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.add_column("ID", key="id")
        table.add_column("Joke", key="joke")
        table.add_column("Status", key="status")
        # Duplicates are allowed, so rows are keyed by position
        for index, joke in enumerate(self.favourites):
            table.add_row(joke.id, joke.joke, str(joke.status), key=str(index))
        self.sub_title = f"{len(self.favourites)} saved"
