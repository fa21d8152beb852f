from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime
from typing import Any, Dict, Optional

# --- Configuration ---
JOKE_URL = "https://icanhazdadjoke.com/"
DEFAULT_SOURCE = "icanhazdadjoke"
DEFAULT_THEME = "dracula"

CONFIG_PATH = os.path.expanduser("~/.config/dadjokes/config.json")
DATA_DIR = os.environ.get("DADJOKES_DATA_DIR") or os.path.expanduser(
    "~/.local/share/dadjokes"
)
FAVOURITES_LABEL = "savedFavourites"

REQUEST_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "dadjokes-tui (https://github.com/dadjokes-tui/dadjokes-tui)",
}

# Default UI settings
UI_DEFAULTS = {
    "statusbar_keybindings": (
        "[b {color}]n[/] another one  [b {color}]f[/] favourite  "
        "[b {color}]F[/] favourites  [b {color}]q[/] quit"
    ),
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "theme": DEFAULT_THEME,
    "source": DEFAULT_SOURCE,
    "sources": {DEFAULT_SOURCE: {"url": JOKE_URL}},
}

# --- Logging ---
logger = logging.getLogger("dadjokes")


def setup_logging(debug: bool = False, log_dir: Optional[str] = None) -> Optional[str]:
    """Silence logging, or with ``debug`` send it to a per-run file.

    Returns the log file path when debugging. The TUI owns the terminal,
    so nothing is ever logged to it.
    """
    if not debug:
        logging.basicConfig(level=logging.CRITICAL, handlers=[logging.NullHandler()])
        return None

    stamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    debug_path = os.path.join(
        log_dir or tempfile.gettempdir(), f"dadjokes_debug_{stamp}_{os.getpid()}.log"
    )
    handler = logging.FileHandler(debug_path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
    )
    logging.basicConfig(level=logging.DEBUG, handlers=[handler])
    # Connection-pool chatter from requests drowns out the joke flow
    logging.getLogger("urllib3").setLevel(logging.INFO)

    logger.debug("Debug logging enabled to %s", debug_path)
    return debug_path


def atomic_write_text(path: str, text: str) -> None:
    """Write ``text`` to ``path`` so readers see either the old or the new file.

    The temporary file is created by :func:`tempfile.mkstemp`, which gives it
    owner-only (0600) permissions, and is moved into place with
    :func:`os.replace`. Errors propagate to the caller.
    """
    directory = os.path.dirname(path) or "."
    os.makedirs(directory, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f"{os.path.basename(path)}.", suffix=".tmp", dir=directory
    )
    try:
        with open(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    finally:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)


def get_documents_directory(config: Optional[Dict[str, Any]] = None) -> str:
    """Return the directory that user data is saved in."""
    data_dir = (config or {}).get("data_dir")
    if data_dir:
        return os.path.expanduser(data_dir)
    return DATA_DIR


def get_favourites_path(config: Optional[Dict[str, Any]] = None) -> str:
    return os.path.join(get_documents_directory(config), FAVOURITES_LABEL)


def ensure_config_file_exists() -> None:
    """Write the default config file if the user's config file is not found."""
    if not os.path.exists(CONFIG_PATH):
        logger.info("Config file not found at %s, creating default.", CONFIG_PATH)
        try:
            atomic_write_text(CONFIG_PATH, json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
        except OSError as e:
            logger.error("Failed to create default config file: %s", e)


def load_config() -> Dict[str, Any]:
    """Load the main configuration file."""
    ensure_config_file_exists()
    try:
        with open(CONFIG_PATH, "r", encoding="utf-8") as f:
            config = json.load(f)
            logger.info("Loaded config from %s", CONFIG_PATH)
    except (IOError, json.JSONDecodeError) as e:
        logger.error("Failed to load config from %s: %s", CONFIG_PATH, e)
        return {}
    if not isinstance(config, dict):
        logger.error("Ignoring config at %s: top level is not an object", CONFIG_PATH)
        return {}
    return config


def save_config(config: Dict[str, Any]) -> None:
    """Save the main configuration file."""
    try:
        atomic_write_text(CONFIG_PATH, json.dumps(config, indent=2) + "\n")
        logger.info("Saved config to %s", CONFIG_PATH)
    except (IOError, TypeError, ValueError) as e:
        logger.error("Failed to save config to %s: %s", CONFIG_PATH, e)
