from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    id: str
    title: str
    price: str  # display string, e.g. "Bs. 6"
    description: str = ""


@dataclass(frozen=True)
class Category:
    key: str
    title: str
    items: tuple[Item, ...]
