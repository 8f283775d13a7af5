from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config.settings import Settings
from .engine.state import GameState
from .exceptions import ConfigError
from .input import Command, CommandMapper
from .logging_config import configure_logging
from .render.ascii import render_frame, render_plain
from .session import GameSession

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Move: w/k (north) s/j (south) d/l (east) a/h (west)\n"
    "save PATH | load PATH | new | help | quit"
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="retro-dungeon",
        description="Turn-based ASCII dungeon crawler.",
    )
    parser.add_argument("--name", default="Hero", help="Player name for a new game.")
    parser.add_argument("--seed", type=int, default=None, help="Dungeon seed for a reproducible run.")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--load", dest="load_path", type=Path, default=None, help="Start from a save file.")
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print frames without terminal escape codes.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file instead of stdout.")
    return parser.parse_args(argv)


def _apply(session: GameSession, line: str, mapper: CommandMapper, name: str, out: TextIO) -> bool:
    """Handle one input line. Returns False when the player asked to quit."""
    parsed = mapper.parse(line)
    if parsed is None:
        out.write("Unknown command. Type 'help' for the list.\n")
        return True
    if parsed.command is Command.QUIT:
        return False
    if parsed.command is Command.HELP:
        out.write(HELP_TEXT + "\n")
    elif parsed.command is Command.NEW:
        try:
            session.new_game(name)
        except ValueError as exc:
            out.write(f"Invalid name: {exc}\n")
    elif parsed.command is Command.MOVE:
        session.handle_action(parsed.direction)
    elif parsed.command in (Command.SAVE, Command.LOAD):
        if not parsed.argument:
            out.write(f"Usage: {parsed.command.name.lower()} PATH\n")
        elif parsed.command is Command.SAVE:
            ok = session.save_game(parsed.argument)
            out.write("Game saved.\n" if ok else "Save failed.\n")
        else:
            ok = session.load_game(parsed.argument)
            if not ok:
                out.write("Load failed.\n")
    return True


def run(session: GameSession, name: str, stdin: TextIO, stdout: TextIO, plain: bool = False) -> int:
    mapper = CommandMapper()
    render = render_plain if plain else render_frame

    def draw() -> None:
        view = session.view()
        if view is not None:
            stdout.write(render(view) + "\n")
            stdout.flush()

    draw()
    for line in stdin:
        if not _apply(session, line, mapper, name, stdout):
            break
        draw()
        if session.state is GameState.GAME_OVER:
            stdout.write("You died. Type 'new' to start again or 'quit' to leave.\n")
    session.shutdown()
    return 0


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.debug else logging.WARNING,
        log_file=args.log_file,
    )
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        settings = Settings.load(user_path=args.settings_path)
    except ConfigError as exc:
        logger.error("Invalid settings: %s", exc)
        stdout.write(f"Invalid settings: {exc}\n")
        return 2
    if args.seed is not None:
        settings.seed = args.seed

    session = GameSession(settings)
    if args.load_path is not None:
        if not session.load_game(args.load_path):
            stdout.write(f"Could not load {args.load_path}\n")
            return 1
    else:
        try:
            session.new_game(args.name)
        except ValueError as exc:
            stdout.write(f"Invalid name: {exc}\n")
            return 2
    return run(session, args.name, stdin, stdout, plain=args.plain)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
