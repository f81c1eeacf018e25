from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True)
class InMemoryMetadataStore:
    """
    Dict-backed metadata store: (item_id, key) -> value.
    """
    _rows: dict[tuple[str, str], str] = field(default_factory=dict)

    def read(self, item_id: str, key: str) -> Optional[str]:
        return self._rows.get((item_id, key))

    def write(self, item_id: str, key: str, value: str) -> None:
        self._rows[(item_id, key)] = value

    def count(self) -> int:
        return len(self._rows)
