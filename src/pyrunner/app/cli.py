"""Command-line entry point for pyrunner."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from pyrunner.domain.settings import GameSettings
from pyrunner.infra.exceptions import SettingsError
from pyrunner.infra.settings_files import load_settings_from_path, save_settings_to_path
from pyrunner.log import configure_logging, get_logger

log = get_logger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyrunner", description="Jump over obstacles for as long as you can.")
    parser.add_argument("--settings", type=Path, default=None, help="JSON settings file to play with")
    parser.add_argument(
        "--write-settings",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write the effective settings to PATH and exit",
    )
    parser.add_argument("--log-level", choices=_LOG_LEVELS, default=None, help="Override PYRUNNER_LOG_LEVEL")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = load_settings_from_path(args.settings) if args.settings else GameSettings()
        if args.write_settings is not None:
            save_settings_to_path(settings, args.write_settings)
            return 0
    except SettingsError as e:
        print(f"pyrunner: {e}", file=sys.stderr)
        return 2

    # Imported late so settings tooling works without a display.
    import tkinter as tk

    from pyrunner.app.game_app import GameApp

    log.info("starting game (spawn every %.0fms)", settings.spawn_interval_ms)
    try:
        GameApp(settings).run()
    except tk.TclError as e:
        # Usually no display to open a window on.
        print(f"pyrunner: cannot open game window: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
