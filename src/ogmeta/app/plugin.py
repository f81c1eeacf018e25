from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ogmeta.attribute_store import AttributeStore
from ogmeta.domain.models import Panel
from ogmeta.domain.schema import NONCE_ACTION, NONCE_FIELD
from ogmeta.ports import HookRegistry, ItemResolver, NonceIssuer
from ogmeta.rendering.form import FormRenderer
from ogmeta.rendering.head import MetaTagRenderer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OpenGraphPlugin:
    """
    Wires the attribute store and both renderers into a host.

    Built once per process and passed to register(); the host then calls
    admin_init on admin setup, save on every content save and render_head
    on every public page render.
    """
    attribute_store: AttributeStore
    form_renderer: FormRenderer
    meta_renderer: MetaTagRenderer
    resolver: ItemResolver
    panel: Panel = field(default_factory=Panel)
    nonces: Optional[NonceIssuer] = None

    _hooks: Optional[HookRegistry] = field(default=None, init=False, repr=False)
    _save_registered: bool = field(default=False, init=False, repr=False)

    def register(self, hooks: HookRegistry) -> None:
        self._hooks = hooks
        hooks.on_admin_init(self.admin_init)
        hooks.on_head(self.render_head)

    def admin_init(self) -> None:
        for post_type in self.panel.post_types:
            self.register_for_type(post_type)

    def register_for_type(self, post_type: str) -> None:
        """
        Attach the meta panel to another post type. The save hook is
        registered only once however many types are added.
        """
        if self._hooks is None:
            raise RuntimeError("OpenGraphPlugin.register() must be called first")

        self._hooks.add_panel(self.panel, self.render_panel, post_type)
        if not self._save_registered:
            self._hooks.on_save(self.save)
            self._save_registered = True
        logger.debug("Registered panel %s for post type %s", self.panel.panel_id, post_type)

    def render_panel(self, item_id: str) -> str:
        values = self.attribute_store.get(item_id)
        nonce = self.nonces.create(NONCE_ACTION) if self.nonces is not None else None
        return self.form_renderer.render(values, nonce=nonce)

    def save(self, item_id: str, item: Optional[object], submitted: Mapping[str, str]) -> None:
        # Host fires save for revisions/autosaves without an item object.
        if item is None:
            return

        if self.nonces is not None:
            token = submitted.get(NONCE_FIELD) or ""
            if not self.nonces.verify(token, NONCE_ACTION):
                logger.warning("Rejected OpenGraph save for item %s: bad nonce", item_id)
                return

        self.attribute_store.set(item_id, submitted)

    def render_head(self, context: Mapping[str, object]) -> str:
        item_id = self.resolver.current_item_id(context)
        if item_id is None:
            return ""
        return self.meta_renderer.render(self.attribute_store.get(item_id))
