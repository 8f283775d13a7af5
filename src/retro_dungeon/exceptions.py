class RetroDungeonError(Exception):
    """Base exception for the retro_dungeon package."""


class ConfigError(RetroDungeonError):
    """Raised when settings values are out of range."""


class SaveFormatError(RetroDungeonError):
    """Raised when a save file is readable but its content is malformed."""
