from __future__ import annotations

from typing import Callable, Mapping, Optional, Protocol

from ogmeta.domain.models import Panel

AdminInitCallback = Callable[[], None]
SaveCallback = Callable[[str, Optional[object], Mapping[str, str]], None]
HeadCallback = Callable[[Mapping[str, object]], str]
PanelRenderer = Callable[[str], str]


class HookRegistry(Protocol):
    """
    Typed extension points of the host CMS request lifecycle.
    """

    def on_admin_init(self, callback: AdminInitCallback) -> None:
        ...

    def on_save(self, callback: SaveCallback) -> None:
        ...

    def on_head(self, callback: HeadCallback) -> None:
        ...

    def add_panel(self, panel: Panel, render: PanelRenderer, post_type: str) -> None:
        ...
