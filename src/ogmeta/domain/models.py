from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from ogmeta.domain.errors import ConfigError
from ogmeta.domain.schema import (
    ATTR_DESC,
    ATTR_IMAGE,
    ATTR_TITLE,
    ATTR_TYPE,
    DEFAULT_POST_TYPES,
    OG_PREFIX,
    PANEL_CONTEXT,
    PANEL_ID,
    PANEL_PRIORITY,
    PANEL_TITLE,
    WIDGET_SELECT,
    WIDGET_TEXT,
    WIDGET_TEXTAREA,
    WIDGETS,
)


# -------------------------
# Attribute configuration
# -------------------------

@dataclass(frozen=True, slots=True)
class Attribute:
    """
    One managed metadata field.

    key is both the storage key and the form field name; property is the
    OpenGraph property emitted in the page head.
    """
    key: str
    property: str
    label: str
    widget: str = WIDGET_TEXT
    hint: Optional[str] = None         # rendered as <em>(hint)</em> after the label
    placeholder: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AttributeSet:
    """
    Ordered, fixed list of attributes. Order governs both the admin form and
    the emitted meta tags.
    """
    attributes: tuple[Attribute, ...]

    def __post_init__(self) -> None:
        if not self.attributes:
            raise ConfigError("Attribute set must contain at least one attribute")

        seen: set[str] = set()
        selects = 0
        for attr in self.attributes:
            if not attr.key or not attr.key.strip():
                raise ConfigError("Attribute key must be non-empty")
            if attr.key in seen:
                raise ConfigError(f"Duplicate attribute key: {attr.key}")
            if attr.widget not in WIDGETS:
                raise ConfigError(f"Unknown widget {attr.widget!r} for attribute {attr.key}")
            if attr.widget == WIDGET_SELECT:
                selects += 1
            seen.add(attr.key)

        if selects > 1:
            raise ConfigError("At most one attribute may use the select widget")

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def __contains__(self, key: object) -> bool:
        return any(a.key == key for a in self.attributes)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(a.key for a in self.attributes)

    def get(self, key: str) -> Optional[Attribute]:
        for attr in self.attributes:
            if attr.key == key:
                return attr
        return None

    @property
    def type_attribute(self) -> Optional[Attribute]:
        """The attribute whose value domain is the content type enum, if any."""
        for attr in self.attributes:
            if attr.widget == WIDGET_SELECT:
                return attr
        return None


def default_attribute_set() -> AttributeSet:
    return AttributeSet(
        attributes=(
            Attribute(
                key=ATTR_TITLE,
                property=OG_PREFIX + "title",
                label="Post Title",
                hint="leave blank for post title",
                placeholder="Optional",
            ),
            Attribute(
                key=ATTR_IMAGE,
                property=OG_PREFIX + "image",
                label="Image",
                hint="relative url",
                placeholder="Relative Image URL",
            ),
            Attribute(
                key=ATTR_DESC,
                property=OG_PREFIX + "description",
                label="Description",
                widget=WIDGET_TEXTAREA,
                hint="leave blank for excerpt",
                placeholder="Optional",
            ),
            Attribute(
                key=ATTR_TYPE,
                property=OG_PREFIX + "type",
                label="Post Type",
                widget=WIDGET_SELECT,
            ),
        )
    )


# -------------------------
# Rendering objects
# -------------------------

@dataclass(frozen=True, slots=True)
class MetaTag:
    property: str
    content: str


@dataclass(frozen=True, slots=True)
class Panel:
    """
    Admin meta panel registration details handed to the host.
    """
    panel_id: str = PANEL_ID
    title: str = PANEL_TITLE
    context: str = PANEL_CONTEXT
    priority: str = PANEL_PRIORITY
    post_types: Sequence[str] = field(default_factory=lambda: DEFAULT_POST_TYPES)
