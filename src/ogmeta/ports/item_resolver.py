from __future__ import annotations

from typing import Mapping, Optional, Protocol


class ItemResolver(Protocol):
    """
    Resolves the content item being displayed from the current view context.
    Returns None when the view is not a single-item view.
    """

    def current_item_id(self, context: Mapping[str, object]) -> Optional[str]:
        ...
