from .models import FloorItem, Inventory, Item, ItemType, health_potion

__all__ = ["FloorItem", "Inventory", "Item", "ItemType", "health_potion"]
