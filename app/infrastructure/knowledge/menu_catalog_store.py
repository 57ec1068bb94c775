from __future__ import annotations

from app.application.ports.menu_catalog import MenuCatalogPort
from app.domain.entities.menu_catalog import Category, Item
from app.infrastructure.knowledge.menu_catalog_data import MENU_CATALOG


class MenuCatalogStore(MenuCatalogPort):
    def __init__(self, categories: tuple[Category, ...] | None = None) -> None:
        self._categories = categories or MENU_CATALOG
        self._items: dict[str, Item] = {
            item.id.lower(): item for category in self._categories for item in category.items
        }

    def get_item(self, item_id: str) -> Item | None:
        normalized_id = (item_id or "").lower().strip()
        return self._items.get(normalized_id)

    def get_category(self, key: str) -> Category | None:
        for category in self._categories:
            if category.key == key:
                return category
        return None

    def list_categories(self) -> list[Category]:
        return list(self._categories)
