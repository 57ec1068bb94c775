from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ListRow:
    id: str
    title: str
    description: str | None = None


@dataclass(frozen=True)
class ListSection:
    title: str
    rows: tuple[ListRow, ...]


@dataclass(frozen=True)
class InteractiveList:
    body: str
    button: str
    sections: tuple[ListSection, ...]
    header: str | None = None


@dataclass(frozen=True)
class Reply:
    text: str  # always the full plain-text rendition
    interactive: InteractiveList | None = None
    meta: dict[str, Any] = field(default_factory=dict)
