from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ogmeta.domain.models import Panel
from ogmeta.ports.hook_registry import AdminInitCallback, HeadCallback, PanelRenderer, SaveCallback


@dataclass(frozen=True, slots=True)
class RegisteredPanel:
    panel: Panel
    render: PanelRenderer
    post_type: str


@dataclass(slots=True)
class InMemoryHookRegistry:
    """
    Minimal host: records registrations and fires them on demand.
    Stands in for a real CMS in tests and the demo CLI.
    """
    admin_init: list[AdminInitCallback] = field(default_factory=list)
    save: list[SaveCallback] = field(default_factory=list)
    head: list[HeadCallback] = field(default_factory=list)
    panels: list[RegisteredPanel] = field(default_factory=list)

    def on_admin_init(self, callback: AdminInitCallback) -> None:
        self.admin_init.append(callback)

    def on_save(self, callback: SaveCallback) -> None:
        self.save.append(callback)

    def on_head(self, callback: HeadCallback) -> None:
        self.head.append(callback)

    def add_panel(self, panel: Panel, render: PanelRenderer, post_type: str) -> None:
        self.panels.append(RegisteredPanel(panel=panel, render=render, post_type=post_type))

    # -------------------------
    # Host side
    # -------------------------

    def fire_admin_init(self) -> None:
        for cb in list(self.admin_init):
            cb()

    def fire_save(self, item_id: str, item: Optional[object], submitted: Mapping[str, str]) -> None:
        for cb in list(self.save):
            cb(item_id, item, submitted)

    def fire_head(self, context: Mapping[str, object]) -> str:
        return "".join(cb(context) for cb in list(self.head))

    def render_panels(self, item_id: str, post_type: str) -> list[str]:
        return [p.render(item_id) for p in self.panels if p.post_type == post_type]
