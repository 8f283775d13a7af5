"""Line-oriented save files.

Layout::

    <player name>
    <health> <max_health> <attack_power> <defense>
    <level> <experience> <gold> <dungeon_level>

Only the player's name and these eight numbers are stored; the dungeon,
enemies, floor items and inventory are not.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from ..entities.models import Player
from ..exceptions import SaveFormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class SaveRecord:
    name: str
    health: int
    max_health: int
    attack_power: int
    defense: int
    level: int
    experience: int
    gold: int
    dungeon_level: int

    @classmethod
    def from_player(cls, player: Player) -> "SaveRecord":
        return cls(
            name=player.name,
            health=player.health,
            max_health=player.max_health,
            attack_power=player.attack_power,
            defense=player.defense,
            level=player.level,
            experience=player.experience,
            gold=player.gold,
            dungeon_level=player.dungeon_level,
        )

    def apply_to(self, player: Player) -> Player:
        player.name = self.name
        player.health = self.health
        player.max_health = self.max_health
        player.attack_power = self.attack_power
        player.defense = self.defense
        player.level = self.level
        player.experience = self.experience
        player.gold = self.gold
        player.dungeon_level = self.dungeon_level
        return player

    def to_text(self) -> str:
        return (
            f"{self.name}\n"
            f"{self.health} {self.max_health} {self.attack_power} {self.defense}\n"
            f"{self.level} {self.experience} {self.gold} {self.dungeon_level}\n"
        )

    @classmethod
    def from_text(cls, text: str) -> "SaveRecord":
        """Parse save text, raising SaveFormatError on anything malformed."""
        lines = text.split("\n")
        if len(lines) < 3:
            raise SaveFormatError(f"Save data has {len(lines)} lines; expected 3")
        name = lines[0]
        if not name.strip():
            raise SaveFormatError("Save data has an empty player name")
        combat = _parse_ints(lines[1], 4, "line 2")
        progress = _parse_ints(lines[2], 4, "line 3")
        record = cls(name, *combat, *progress)
        if record.max_health <= 0 or record.level <= 0 or record.dungeon_level <= 0:
            raise SaveFormatError("Save data has non-positive max health, level or dungeon level")
        return record


def _parse_ints(line: str, expected: int, where: str) -> List[int]:
    parts = line.split()
    if len(parts) != expected:
        raise SaveFormatError(f"{where}: expected {expected} integers, got {len(parts)}")
    try:
        return [int(p) for p in parts]
    except ValueError as exc:
        raise SaveFormatError(f"{where}: {exc}") from exc


def _atomic_write(file_path: Path, data: str) -> None:
    """Write via a temp file and os.replace so a crash never leaves half a save."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = file_path.with_name(file_path.name + ".tmp")
    with open(tmp_path, "w", encoding="utf-8") as fh:
        fh.write(data)
        fh.flush()
        os.fsync(fh.fileno())
    os.replace(tmp_path, file_path)


def write_save(path: PathLike, record: SaveRecord) -> None:
    """Write ``record``; OSError propagates to the caller."""
    target = Path(path)
    _atomic_write(target, record.to_text())
    logger.info("Saved %s to %s", record.name, target)


def read_save(path: PathLike) -> SaveRecord:
    """Read a save file.

    Raises OSError when the file cannot be opened and SaveFormatError when
    its content is short or malformed.
    """
    target = Path(path)
    with target.open("r", encoding="utf-8") as fh:
        text = fh.read()
    record = SaveRecord.from_text(text)
    logger.debug("Read save %s: %s", target, record)
    return record


__all__ = ["SaveRecord", "read_save", "write_save"]
