from ogmeta.domain.schema import CONTENT_TYPES, NONCE_FIELD
from ogmeta.rendering.form import FormRenderer
from ogmeta.rendering.markup import type_label


def _values(**kw):
    base = {"title": "", "image": "", "desc": "", "type": ""}
    base.update(kw)
    return base


def test_one_control_per_attribute():
    out = FormRenderer().render(_values())
    assert '<input type="text" placeholder="Optional" name="title" id="title" value="" />' in out
    assert '<input type="text" placeholder="Relative Image URL" name="image" id="image" value="" />' in out
    assert '<textarea placeholder="Optional" name="desc" id="desc"></textarea>' in out
    assert '<select id="type" name="type">' in out


def test_every_content_type_is_an_option():
    out = FormRenderer().render(_values())
    assert out.count("<option ") == len(CONTENT_TYPES)
    assert '<option value="tv_show">Tv Show</option>' in out
    assert '<option value="state_province">State Province</option>' in out


def test_stored_type_is_preselected():
    out = FormRenderer().render(_values(type="book"))
    assert '<option value="book" selected="selected">Book</option>' in out
    assert out.count("selected=") == 1


def test_unknown_type_selects_nothing():
    out = FormRenderer().render(_values(type="not_a_real_type"))
    assert "selected=" not in out


def test_selection_is_case_sensitive():
    assert "selected=" not in FormRenderer().render(_values(type="Book"))


def test_empty_type_selects_nothing():
    assert "selected=" not in FormRenderer().render(_values())


def test_values_are_prefilled_and_escaped():
    out = FormRenderer().render(_values(title='A "quoted" <title>', desc="</textarea><b>x</b>"))
    assert 'value="A &quot;quoted&quot; &lt;title&gt;"' in out
    assert "&lt;/textarea&gt;&lt;b&gt;x&lt;/b&gt;</textarea>" in out


def test_labels_carry_hints():
    out = FormRenderer().render(_values())
    assert '<label for="title">Post Title <em>(leave blank for post title)</em></label>' in out
    assert '<label for="type">Post Type</label>' in out


def test_style_is_scoped_to_panel():
    out = FormRenderer(panel_id="ogbox").render(_values())
    assert "#ogbox input," in out
    assert "width: 99%;" in out


def test_nonce_field_only_when_given():
    assert NONCE_FIELD not in FormRenderer().render(_values())
    out = FormRenderer().render(_values(), nonce="abc.def")
    assert f'<input type="hidden" name="{NONCE_FIELD}" value="abc.def" />' in out


def test_type_label():
    assert type_label("article") == "Article"
    assert type_label("sports_league") == "Sports League"
    assert type_label("non_profit") == "Non Profit"
