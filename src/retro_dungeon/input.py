from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional

from .map.position import Direction

logger = logging.getLogger(__name__)


class Command(Enum):
    """Logical commands accepted by the game loop."""

    MOVE = auto()
    SAVE = auto()
    LOAD = auto()
    NEW = auto()
    HELP = auto()
    QUIT = auto()


@dataclass(frozen=True)
class ParsedCommand:
    command: Command
    direction: Optional[Direction] = None
    argument: Optional[str] = None


_DEFAULT_MOVES: Dict[str, Direction] = {
    "W": Direction.NORTH,
    "K": Direction.NORTH,
    "N": Direction.NORTH,
    "NORTH": Direction.NORTH,
    "UP": Direction.NORTH,
    "S": Direction.SOUTH,
    "J": Direction.SOUTH,
    "SOUTH": Direction.SOUTH,
    "DOWN": Direction.SOUTH,
    "D": Direction.EAST,
    "L": Direction.EAST,
    "E": Direction.EAST,
    "EAST": Direction.EAST,
    "RIGHT": Direction.EAST,
    "A": Direction.WEST,
    "H": Direction.WEST,
    "WEST": Direction.WEST,
    "LEFT": Direction.WEST,
}

_DEFAULT_COMMANDS: Dict[str, Command] = {
    "SAVE": Command.SAVE,
    "LOAD": Command.LOAD,
    "NEW": Command.NEW,
    "HELP": Command.HELP,
    "?": Command.HELP,
    "Q": Command.QUIT,
    "QUIT": Command.QUIT,
    "EXIT": Command.QUIT,
}


class CommandMapper:
    """Rebindable mapping from typed keys/words to commands.

    Keys are matched case-insensitively. The first word of a line selects the
    command; anything after it is passed along as the argument (e.g. the file
    name for ``save``).

        mapper = CommandMapper()
        mapper.parse("d")            # -> MOVE east
        mapper.parse("save hero.sav")  # -> SAVE with argument "hero.sav"
    """

    def __init__(
        self,
        moves: Optional[Dict[str, Direction]] = None,
        commands: Optional[Dict[str, Command]] = None,
    ) -> None:
        self._moves: Dict[str, Direction] = {}
        self._commands: Dict[str, Command] = {}
        for key, direction in (moves if moves is not None else _DEFAULT_MOVES).items():
            self.bind_move(key, direction)
        for key, command in (commands if commands is not None else _DEFAULT_COMMANDS).items():
            self.bind_command(key, command)

    @staticmethod
    def _normalize(key: str) -> Optional[str]:
        k = key.strip()
        if not k:
            return None
        return k.upper()

    def bind_move(self, key: str, direction: Direction) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._commands.pop(nk, None)
        self._moves[nk] = direction

    def bind_command(self, key: str, command: Command) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._moves.pop(nk, None)
        self._commands[nk] = command

    def parse(self, line: str) -> Optional[ParsedCommand]:
        """Translate one input line; returns None for blank or unknown input."""
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return None
        head = parts[0].upper()
        argument = parts[1].strip() if len(parts) > 1 else None
        if head in self._moves:
            return ParsedCommand(Command.MOVE, direction=self._moves[head])
        if head in self._commands:
            return ParsedCommand(self._commands[head], argument=argument)
        logger.debug("Unknown input: %r", line)
        return None


__all__ = ["Command", "CommandMapper", "ParsedCommand", "Direction"]
