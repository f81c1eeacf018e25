from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ogmeta import config
from ogmeta.adapters.host.dict_resolver import DictItemResolver
from ogmeta.adapters.security.hmac_nonce import HmacNonceIssuer
from ogmeta.adapters.storage.in_memory_store import InMemoryMetadataStore
from ogmeta.adapters.storage.sqlite_store import SqliteMetadataStore
from ogmeta.adapters.storage.yaml_store import YamlMetadataStore
from ogmeta.app.plugin import OpenGraphPlugin
from ogmeta.attribute_store import AttributeStore
from ogmeta.domain.errors import ConfigError
from ogmeta.ports import ItemResolver, MetadataStore, NonceIssuer
from ogmeta.rendering.form import FormRenderer
from ogmeta.rendering.head import MetaTagRenderer
from ogmeta.settings import Settings, load_settings


@dataclass(frozen=True, slots=True)
class Container:
    """
    Lightweight dependency container.
    Holds the one plugin instance plus the adapters it was built from.
    """
    settings: Settings
    store: MetadataStore
    attribute_store: AttributeStore
    form_renderer: FormRenderer
    meta_renderer: MetaTagRenderer
    resolver: ItemResolver
    nonces: Optional[NonceIssuer]
    plugin: OpenGraphPlugin


def build_store(settings: Settings, backend: str = "") -> MetadataStore:
    backend = backend or settings.storage.backend
    if backend == "memory":
        return InMemoryMetadataStore()
    if backend == "sqlite":
        return SqliteMetadataStore(db_path=settings.storage.path or Path(config.DB_PATH))
    if backend == "yaml":
        return YamlMetadataStore(path=settings.storage.path or Path(config.YAML_PATH))
    raise ConfigError(f"Unknown storage backend: {backend}")


def build_container(
    settings: Optional[Settings] = None,
    *,
    store: Optional[MetadataStore] = None,
    resolver: Optional[ItemResolver] = None,
    nonce_secret: Optional[str] = None,
) -> Container:
    settings = settings or load_settings(config.SETTINGS_PATH)
    store = store or build_store(settings, config.STORAGE_BACKEND)
    resolver = resolver or DictItemResolver()

    secret = config.NONCE_SECRET if nonce_secret is None else nonce_secret
    nonces = HmacNonceIssuer(secret=secret) if secret else None

    attribute_store = AttributeStore(
        store=store,
        attributes=settings.attributes,
        content_types=settings.content_types,
        strict_types=settings.validation.strict_types,
    )
    form_renderer = FormRenderer(
        attributes=settings.attributes,
        content_types=settings.content_types,
        panel_id=settings.panel.panel_id,
    )
    meta_renderer = MetaTagRenderer(attributes=settings.attributes)

    plugin = OpenGraphPlugin(
        attribute_store=attribute_store,
        form_renderer=form_renderer,
        meta_renderer=meta_renderer,
        resolver=resolver,
        panel=settings.panel,
        nonces=nonces,
    )
    return Container(
        settings=settings,
        store=store,
        attribute_store=attribute_store,
        form_renderer=form_renderer,
        meta_renderer=meta_renderer,
        resolver=resolver,
        nonces=nonces,
        plugin=plugin,
    )
