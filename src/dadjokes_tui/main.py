#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
import sys

from textual.theme import BUILTIN_THEMES

from .app import DadJokesApp
from .config import DEFAULT_THEME, load_config, setup_logging

logger = logging.getLogger("dadjokes")


# --- Entrypoint ---
def main() -> None:
    parser = argparse.ArgumentParser(description="Dad Jokes TUI Client")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--theme",
        type=str,
        help=f"Set theme for this run. Available: {', '.join(BUILTIN_THEMES.keys())}",
    )
    args = parser.parse_args()

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    config = load_config()
    theme_name = args.theme or config.get("theme") or DEFAULT_THEME

    if theme_name not in BUILTIN_THEMES:
        print(f"Theme '{theme_name}' not found, falling back to {DEFAULT_THEME}.", file=sys.stderr)
        theme_name = DEFAULT_THEME

    logger.info("Using theme: %s", theme_name)

    try:
        app = DadJokesApp(theme=theme_name, config=config)
        app.run()
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        print(f"Application crashed: {e}", file=sys.stderr)


if __name__ == "__main__":
    main()
