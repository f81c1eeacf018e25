from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True, slots=True)
class DictItemResolver:
    """
    Resolves the item id from a plain view context mapping, e.g.
    {"single": True, "item_id": "42"}. Listing views resolve to None.
    """
    id_key: str = "item_id"
    single_key: str = "single"

    def current_item_id(self, context: Mapping[str, object]) -> Optional[str]:
        if not context.get(self.single_key):
            return None
        item_id = context.get(self.id_key)
        if item_id is None or item_id == "":
            return None
        return str(item_id)
