import pytest

from ogmeta.adapters.host.in_memory_hooks import InMemoryHookRegistry
from ogmeta.adapters.storage.in_memory_store import InMemoryMetadataStore
from ogmeta.app.container import build_container
from ogmeta.attribute_store import AttributeStore
from ogmeta.settings import default_settings


@pytest.fixture
def store():
    return InMemoryMetadataStore()


@pytest.fixture
def attribute_store(store):
    return AttributeStore(store=store)


@pytest.fixture
def container(store):
    return build_container(default_settings(), store=store, nonce_secret="")


@pytest.fixture
def hooks(container):
    """Host with the plugin registered and admin setup already fired."""
    registry = InMemoryHookRegistry()
    container.plugin.register(registry)
    registry.fire_admin_init()
    return registry
