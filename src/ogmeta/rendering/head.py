from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ogmeta.domain.models import AttributeSet, MetaTag, default_attribute_set
from ogmeta.rendering.markup import attrs


@dataclass(frozen=True, slots=True)
class MetaTagRenderer:
    """
    Renders OpenGraph <meta> tags for the public page head.

    One tag per attribute with a non-empty value, in attribute set order.
    Property names and values are escaped.
    """
    attributes: AttributeSet = field(default_factory=default_attribute_set)

    def tags(self, values: Mapping[str, str]) -> list[MetaTag]:
        out: list[MetaTag] = []
        for attr in self.attributes:
            value = values.get(attr.key) or ""
            if not value:
                continue
            out.append(MetaTag(property=attr.property, content=value))
        return out

    def render(self, values: Mapping[str, str]) -> str:
        lines = [
            f"<meta {attrs({'property': tag.property, 'content': tag.content})} />"
            for tag in self.tags(values)
        ]
        return "\n".join(lines) + "\n" if lines else ""
