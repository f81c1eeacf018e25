from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from ogmeta.domain.models import Attribute, AttributeSet, default_attribute_set
from ogmeta.domain.schema import (
    CONTENT_TYPES,
    NONCE_FIELD,
    PANEL_ID,
    WIDGET_SELECT,
    WIDGET_TEXTAREA,
)
from ogmeta.rendering.markup import attrs, escape_text, type_label


@dataclass(frozen=True, slots=True)
class FormRenderer:
    """
    Renders the admin meta panel for one content item:
      - text input per text attribute
      - textarea for the description
      - select over the content type enum, pre-selected only on an exact match

    Pure rendering; submission is handled by AttributeStore.set.
    """
    attributes: AttributeSet = field(default_factory=default_attribute_set)
    content_types: Sequence[str] = CONTENT_TYPES
    panel_id: str = PANEL_ID

    def render(self, values: Mapping[str, str], *, nonce: Optional[str] = None) -> str:
        lines: list[str] = [self._style()]

        if nonce is not None:
            lines.append(f"<input {attrs({'type': 'hidden', 'name': NONCE_FIELD, 'value': nonce})} />")

        for attr in self.attributes:
            lines.append(self._control(attr, values.get(attr.key) or ""))

        return "\n".join(lines) + "\n"

    def options(self, selected: str) -> list[str]:
        out: list[str] = []
        for tag in self.content_types:
            is_selected = selected != "" and selected == tag
            pairs = {"value": tag, "selected": "selected" if is_selected else None}
            out.append(f"<option {attrs(pairs)}>{escape_text(type_label(tag))}</option>")
        return out

    def _style(self) -> str:
        return "\n".join(
            [
                "<style>",
                f"\t#{self.panel_id} input,",
                f"\t#{self.panel_id} textarea",
                "\t{",
                "\t\twidth: 99%;",
                "\t}",
                "</style>",
            ]
        )

    def _label(self, attr: Attribute) -> str:
        text = escape_text(attr.label)
        if attr.hint:
            text += f" <em>({escape_text(attr.hint)})</em>"
        return f"<label {attrs({'for': attr.key})}>{text}</label>"

    def _control(self, attr: Attribute, value: str) -> str:
        lines = ["<p>", "\t" + self._label(attr), "\t<br />"]

        if attr.widget == WIDGET_SELECT:
            lines.append(f"\t<select {attrs({'id': attr.key, 'name': attr.key})}>")
            lines.extend("\t\t" + opt for opt in self.options(value))
            lines.append("\t</select>")
        elif attr.widget == WIDGET_TEXTAREA:
            pairs = {"placeholder": attr.placeholder, "name": attr.key, "id": attr.key}
            lines.append(f"\t<textarea {attrs(pairs)}>{escape_text(value)}</textarea>")
        else:
            pairs = {
                "type": "text",
                "placeholder": attr.placeholder,
                "name": attr.key,
                "id": attr.key,
                "value": value,
            }
            lines.append(f"\t<input {attrs(pairs)} />")

        lines.append("</p>")
        return "\n".join(lines)
