from ogmeta.domain.models import MetaTag
from ogmeta.rendering.head import MetaTagRenderer


def test_no_values_renders_nothing():
    assert MetaTagRenderer().render({}) == ""
    assert MetaTagRenderer().render({"title": "", "image": "", "desc": "", "type": ""}) == ""


def test_only_set_attributes_are_emitted():
    out = MetaTagRenderer().render({"title": "Hello", "type": "article", "image": "", "desc": ""})
    assert out.count("<meta ") == 2
    assert '<meta property="og:title" content="Hello" />' in out
    assert '<meta property="og:type" content="article" />' in out
    assert "og:image" not in out
    assert "og:description" not in out


def test_tags_follow_attribute_set_order():
    tags = MetaTagRenderer().tags({"type": "book", "desc": "About", "title": "T", "image": "/a.png"})
    assert [t.property for t in tags] == ["og:title", "og:image", "og:description", "og:type"]
    assert tags[0] == MetaTag(property="og:title", content="T")


def test_values_are_escaped():
    out = MetaTagRenderer().render({"title": '"><script>alert(1)</script>'})
    assert "<script>" not in out
    assert "&quot;&gt;&lt;script&gt;" in out
    assert out.startswith('<meta property="og:title" content="')


def test_ampersand_and_single_quote_are_escaped():
    out = MetaTagRenderer().render({"desc": "Fish & Chip's"})
    assert 'content="Fish &amp; Chip&#x27;s"' in out
