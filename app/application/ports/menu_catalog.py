from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.menu_catalog import Category, Item


class MenuCatalogPort(ABC):
    @abstractmethod
    def get_item(self, item_id: str) -> Item | None:
        """Get catalog item by id (case-insensitive)."""
        raise NotImplementedError

    @abstractmethod
    def get_category(self, key: str) -> Category | None:
        raise NotImplementedError

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Categories in display order."""
        raise NotImplementedError
