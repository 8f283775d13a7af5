from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from ..map.position import Position

logger = logging.getLogger(__name__)


class ItemType(str, Enum):
    POTION = "potion"
    WEAPON = "weapon"
    ARMOR = "armor"
    SCROLL = "scroll"


@dataclass(frozen=True)
class Item:
    """An inert item record.

    ``power`` is the primary effect magnitude (heal amount for potions),
    ``secondary`` a second magnitude, ``value`` the shop price in gold.
    """

    name: str
    type: ItemType
    symbol: str
    power: int = 0
    secondary: int = 0
    value: int = 0


def health_potion() -> Item:
    return Item("Health Potion", ItemType.POTION, "!", power=20, secondary=0, value=25)


@dataclass
class FloorItem:
    """An item lying on the map, waiting to be picked up."""

    item: Item
    position: Position


@dataclass
class Inventory:
    """Ordered, capacity-limited item storage."""

    capacity: Optional[int] = 21
    items: List[Item] = field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return self.capacity is not None and len(self.items) >= self.capacity

    def add(self, item: Item) -> bool:
        if self.is_full:
            logger.debug("Inventory full: cannot add item %s", item.name)
            return False
        self.items.append(item)
        logger.debug("Added item %s to inventory", item.name)
        return True

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)


__all__ = ["ItemType", "Item", "FloorItem", "Inventory", "health_potion"]
