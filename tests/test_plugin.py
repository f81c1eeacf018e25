import pytest

from ogmeta.adapters.host.in_memory_hooks import InMemoryHookRegistry
from ogmeta.adapters.storage.in_memory_store import InMemoryMetadataStore
from ogmeta.app.container import build_container
from ogmeta.domain.models import Panel
from ogmeta.domain.schema import NONCE_ACTION, NONCE_FIELD
from ogmeta.settings import Settings

POST = {"post_type": "post"}


def test_register_wires_admin_and_head(container):
    registry = InMemoryHookRegistry()
    container.plugin.register(registry)
    assert len(registry.admin_init) == 1
    assert len(registry.head) == 1
    assert registry.panels == []
    assert registry.save == []


def test_admin_init_adds_panel_and_save(hooks):
    assert [p.post_type for p in hooks.panels] == ["post"]
    assert hooks.panels[0].panel.panel_id == "fbox"
    assert hooks.panels[0].panel.title == "Facebook OpenGraph Meta"
    assert len(hooks.save) == 1


def test_register_for_more_types_keeps_single_save_hook(container, hooks):
    container.plugin.register_for_type("page")
    assert [p.post_type for p in hooks.panels] == ["post", "page"]
    assert len(hooks.save) == 1


def test_register_for_type_before_register_fails(store):
    c = build_container(Settings(), store=store, nonce_secret="")
    with pytest.raises(RuntimeError):
        c.plugin.register_for_type("post")


def test_save_then_render_head(hooks):
    hooks.fire_save("5", POST, {"title": "Hello", "type": "article", "image": "", "desc": ""})
    head = hooks.fire_head({"single": True, "item_id": "5"})
    assert head == (
        '<meta property="og:title" content="Hello" />\n'
        '<meta property="og:type" content="article" />\n'
    )


def test_save_without_item_object_is_ignored(hooks, store):
    hooks.fire_save("5", None, {"title": "Hello"})
    assert store.read("5", "title") is None


def test_head_is_empty_outside_single_views(hooks):
    hooks.fire_save("5", POST, {"title": "Hello"})
    assert hooks.fire_head({"single": False, "item_id": "5"}) == ""
    assert hooks.fire_head({}) == ""


def test_head_is_empty_for_item_without_metadata(hooks):
    assert hooks.fire_head({"single": True, "item_id": "404"}) == ""


def test_panel_renders_current_values(hooks):
    hooks.fire_save("5", POST, {"title": "Hello", "type": "book"})
    [markup] = hooks.render_panels("5", "post")
    assert 'value="Hello"' in markup
    assert '<option value="book" selected="selected">Book</option>' in markup
    assert NONCE_FIELD not in markup


def test_panel_only_for_registered_types(hooks):
    assert hooks.render_panels("5", "page") == []


def test_custom_post_types_from_settings(store):
    settings = Settings(panel=Panel(post_types=("post", "recipe")))
    c = build_container(settings, store=store, nonce_secret="")
    registry = InMemoryHookRegistry()
    c.plugin.register(registry)
    registry.fire_admin_init()
    assert [p.post_type for p in registry.panels] == ["post", "recipe"]


@pytest.fixture
def guarded():
    store = InMemoryMetadataStore()
    c = build_container(Settings(), store=store, nonce_secret="s3cret")
    registry = InMemoryHookRegistry()
    c.plugin.register(registry)
    registry.fire_admin_init()
    return c, registry, store


def test_nonce_is_embedded_in_panel(guarded):
    c, registry, _ = guarded
    [markup] = registry.render_panels("1", "post")
    assert f'name="{NONCE_FIELD}"' in markup


def test_save_with_valid_nonce(guarded):
    c, registry, store = guarded
    token = c.nonces.create(NONCE_ACTION)
    registry.fire_save("1", POST, {"title": "Hello", NONCE_FIELD: token})
    assert store.read("1", "title") == "Hello"


def test_save_with_bad_nonce_is_rejected(guarded, caplog):
    _, registry, store = guarded
    with caplog.at_level("WARNING"):
        registry.fire_save("1", POST, {"title": "Hello", NONCE_FIELD: "forged.token"})
        registry.fire_save("1", POST, {"title": "Hello"})
    assert store.read("1", "title") is None
    assert "bad nonce" in caplog.text
