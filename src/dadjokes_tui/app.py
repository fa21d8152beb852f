from __future__ import annotations

import logging
from typing import Any, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.worker import Worker, WorkerState
from textual.widgets import Button, Header, ListView, Static

from .config import DEFAULT_THEME, UI_DEFAULTS, get_favourites_path
from .favourites import FavouritesStore
from .lifecycle import LifecycleObserver, ScenePhase
from .screens import FavouritesScreen
from .sources.base import JokeSource
from .sources.manager import get_source
from .state import JokeBoard
from .widgets import FavouriteItem, FavouriteToggle, JokeCard, StatusBar

logger = logging.getLogger("dadjokes")


class DadJokesApp(App):
    TITLE = "icanhazdadjoke?"
    SUB_TITLE = "Dad jokes, on demand"

    CSS_PATH = "app.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("n", "another_one", "Another one!"),
        Binding("f", "mark_favourite", "Favourite"),
        Binding("F", "show_favourites", "Show Favourites"),
        Binding("ctrl+z", "suspend_process", "Suspend"),
    ]

    def __init__(
        self,
        theme: Optional[str] = None,
        config: Optional[dict[str, Any]] = None,
        source: Optional[JokeSource] = None,
        favourites: Optional[FavouritesStore] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.config = config or {}
        self._theme_name = theme or DEFAULT_THEME
        self.favourites = (
            favourites
            if favourites is not None
            else FavouritesStore(get_favourites_path(self.config))
        )
        self.board = JokeBoard(source or get_source(self.config), self.favourites)
        self.lifecycle = LifecycleObserver(self.favourites)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield JokeCard(id="joke")
            yield FavouriteToggle(id="favourite-toggle")
            yield Button("Another one!", id="another-one", variant="primary")
            yield Static("Favourites", classes="pane-title")
            yield ListView(id="favourites-list")
        yield StatusBar()

    def on_mount(self) -> None:
        if self._theme_name in self.available_themes:
            self.theme = self._theme_name
        else:
            logger.warning("Unknown theme %s, keeping %s", self._theme_name, self.theme)

        keybindings_text = self.config.get("ui", {}).get(
            "statusbar_keybindings", UI_DEFAULTS["statusbar_keybindings"]
        )
        self.query_one(StatusBar).set_keybindings(
            keybindings_text.format(color="cyan")
        )

        # Load favourites from local storage before anything can append
        self.favourites.load()
        self.board.subscribe(self._on_board_changed)
        self.favourites.subscribe(self._on_favourites_changed)
        self._on_board_changed(self.board)
        self._on_favourites_changed(self.favourites)

        # Get a new joke from the web service when the app opens
        self.action_another_one()
        logger.debug("Have just attempted to load a new joke.")

    def on_ready(self) -> None:
        # ctrl+z suspends the process: the terminal equivalent of backgrounding.
        # Immediate, so the save lands before SIGTSTP stops us.
        self.app_suspend_signal.subscribe(self, self._on_app_suspend, immediate=True)
        self.app_resume_signal.subscribe(self, self._on_app_resume)

    def on_unmount(self) -> None:
        self.lifecycle.transition(ScenePhase.BACKGROUND)

    def on_app_focus(self, event: events.AppFocus) -> None:
        self.lifecycle.transition(ScenePhase.ACTIVE)

    def on_app_blur(self, event: events.AppBlur) -> None:
        self.lifecycle.transition(ScenePhase.INACTIVE)

    def _on_app_suspend(self, _: App) -> None:
        self.lifecycle.transition(ScenePhase.BACKGROUND)

    def _on_app_resume(self, _: App) -> None:
        self.lifecycle.transition(ScenePhase.ACTIVE)

    def _on_board_changed(self, board: JokeBoard) -> None:
        self.query_one(JokeCard).show(board.current_joke)
        self.query_one(FavouriteToggle).added = board.added_to_favourites

    def _on_favourites_changed(self, favourites: FavouritesStore) -> None:
        view = self.query_one("#favourites-list", ListView)
        view.clear()
        for joke in favourites:
            view.append(FavouriteItem(joke))
        self.query_one(StatusBar).favourites_count = len(favourites)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if getattr(event.worker, "name", None) != "joke_loader":
            return
        status_bar = self.query_one(StatusBar)
        if event.state is WorkerState.SUCCESS:
            loaded = getattr(event.worker, "result", False)
            status_bar.loading_status = "" if loaded else "Could not load a new joke."
        elif event.state is WorkerState.ERROR:
            logger.error("Joke worker failed: %s", getattr(event.worker, "error", None))
            status_bar.loading_status = "Could not load a new joke."
        elif event.state is WorkerState.CANCELLED:
            status_bar.loading_status = ""

    def action_another_one(self) -> None:
        self.query_one(StatusBar).loading_status = "Loading joke..."
        # Not exclusive: rapid presses race and the last to finish wins
        self.run_worker(
            self.board.load_new_joke(),
            name="joke_loader",
            group="jokes",
            exit_on_error=False,
        )

    def action_mark_favourite(self) -> None:
        if not self.board.mark_favourite():
            logger.debug("Joke %s is already a favourite", self.board.current_joke.id)

    def action_show_favourites(self) -> None:
        self.push_screen(FavouritesScreen(self.favourites))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "another-one":
            self.action_another_one()

    def on_favourite_toggle_pressed(self, event: FavouriteToggle.Pressed) -> None:
        self.action_mark_favourite()
