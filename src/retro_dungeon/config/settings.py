from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import yaml

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

MIN_MAP_SIZE = 8

# YAML section/key -> Settings field
_YAML_LAYOUT: Dict[Tuple[str, str], str] = {
    ("map", "width"): "map_width",
    ("map", "height"): "map_height",
    ("spawning", "base_enemy_count"): "base_enemy_count",
    ("spawning", "floor_item_count"): "floor_item_count",
    ("spawning", "walkable_spawns_only"): "walkable_spawns_only",
    ("spawning", "dragon_spawns_dead"): "dragon_spawns_dead",
    ("player", "inventory_capacity"): "inventory_capacity",
    ("player", "xp_per_level"): "xp_per_level",
    ("rules", "block_walls"): "block_walls",
    ("rules", "reap_one_per_tick"): "reap_one_per_tick",
    ("ui", "max_messages"): "max_messages",
}


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey spellings ("1", "yes", "off", ...)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off"}:
            return False
        raise ValueError(f"not a boolean: {value!r}")
    return bool(value)


def _as_seed(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in {"", "none", "null", "random"}:
        return None
    return int(value)


_ENV_MAPPING: Dict[str, Tuple[str, Callable[[Any], Any]]] = {
    "RD_MAP_WIDTH": ("map_width", int),
    "RD_MAP_HEIGHT": ("map_height", int),
    "RD_SEED": ("seed", _as_seed),
    "RD_BASE_ENEMY_COUNT": ("base_enemy_count", int),
    "RD_FLOOR_ITEM_COUNT": ("floor_item_count", int),
    "RD_MAX_MESSAGES": ("max_messages", int),
    "RD_INVENTORY_CAPACITY": ("inventory_capacity", int),
    "RD_XP_PER_LEVEL": ("xp_per_level", int),
    "RD_BLOCK_WALLS": ("block_walls", _as_bool),
    "RD_WALKABLE_SPAWNS_ONLY": ("walkable_spawns_only", _as_bool),
    "RD_REAP_ONE_PER_TICK": ("reap_one_per_tick", _as_bool),
    "RD_DRAGON_SPAWNS_DEAD": ("dragon_spawns_dead", _as_bool),
}


@dataclass
class Settings:
    """Tunable rules and dimensions for a game session.

    Load with :meth:`Settings.load`; precedence from lowest to highest is the
    packaged ``default_settings.yaml``, an optional user YAML file, then
    ``RD_*`` environment variables.

    The ``block_walls``, ``walkable_spawns_only``, ``reap_one_per_tick`` and
    ``dragon_spawns_dead`` switches select between the corrected rules
    (defaults) and the older legacy behaviour.
    """

    map_width: int = 80
    map_height: int = 24
    seed: Optional[int] = None
    base_enemy_count: int = 5
    floor_item_count: int = 3
    max_messages: int = 5
    inventory_capacity: int = 21
    xp_per_level: int = 100
    block_walls: bool = True
    walkable_spawns_only: bool = True
    reap_one_per_tick: bool = False
    dragon_spawns_dead: bool = False

    def validate(self) -> "Settings":
        if self.map_width < MIN_MAP_SIZE or self.map_height < MIN_MAP_SIZE:
            raise ConfigError(
                f"Map must be at least {MIN_MAP_SIZE}x{MIN_MAP_SIZE}; got {self.map_width}x{self.map_height}"
            )
        for name in ("max_messages", "inventory_capacity", "xp_per_level"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive; got {getattr(self, name)}")
        for name in ("base_enemy_count", "floor_item_count"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative; got {getattr(self, name)}")
        return self

    # ------------------------ Loading ------------------------
    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse settings file {path}: {exc}") from exc

    @staticmethod
    def _flatten(doc: Mapping[str, Any]) -> Dict[str, Any]:
        """Map the sectioned YAML layout onto flat field names.

        Top-level keys that already match a field name are accepted as well.
        """
        if not isinstance(doc, Mapping):
            raise ConfigError(f"Settings must be a mapping of sections; got {type(doc).__name__}")
        allowed = {f.name for f in dataclasses.fields(Settings)}
        flat: Dict[str, Any] = {}
        for key, value in doc.items():
            if isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    field_name = _YAML_LAYOUT.get((key, sub_key))
                    if field_name is None:
                        logger.warning("Ignoring unknown setting %s.%s", key, sub_key)
                        continue
                    flat[field_name] = sub_value
            elif key in allowed:
                flat[key] = value
            else:
                logger.warning("Ignoring unknown setting %s", key)
        return flat

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        out: Dict[str, Any] = {}
        for env_key, (field_name, caster) in _ENV_MAPPING.items():
            if env_key in env and env[env_key] != "":
                try:
                    out[field_name] = caster(env[env_key])
                except ValueError as exc:
                    raise ConfigError(f"Invalid value for {env_key}={env[env_key]!r}: {exc}") from exc
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        flat = cls._flatten(data)
        try:
            settings = cls(
                **{
                    name: (_as_seed(v) if name == "seed" else _coerce(cls, name, v))
                    for name, v in flat.items()
                }
            )
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid settings: {exc}") from exc
        return settings.validate()

    @classmethod
    def load(
        cls,
        user_path: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """Load packaged defaults, overlay a user file and environment overrides."""
        data: Dict[str, Any] = {}
        try:
            with resources.files("retro_dungeon.config").joinpath("default_settings.yaml").open(
                "r", encoding="utf-8"
            ) as f:
                data.update(cls._flatten(yaml.safe_load(f) or {}))
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")

        if user_path is not None:
            if user_path.exists():
                data.update(cls._flatten(cls._load_yaml(user_path)))
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        data.update(cls.from_env(env))
        settings = cls.from_dict(data)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        flat = dataclasses.asdict(self)
        doc: Dict[str, Any] = {"seed": flat.pop("seed")}
        for (section, key), field_name in _YAML_LAYOUT.items():
            doc.setdefault(section, {})[key] = flat[field_name]
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(doc, f, sort_keys=False)
        logger.info("Saved settings to %s", path)


def _coerce(cls: type, name: str, value: Any) -> Any:
    default = next(f.default for f in dataclasses.fields(cls) if f.name == name)
    if isinstance(default, bool):
        return _as_bool(value)
    if isinstance(default, int):
        return int(value)
    return value


__all__ = ["Settings", "MIN_MAP_SIZE"]
