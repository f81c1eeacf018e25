from __future__ import annotations

from typing import Final

# Canonical attribute keys (storage key == form field name)
ATTR_TITLE: Final[str] = "title"
ATTR_IMAGE: Final[str] = "image"
ATTR_DESC: Final[str] = "desc"
ATTR_TYPE: Final[str] = "type"

OG_PREFIX: Final[str] = "og:"

WIDGET_TEXT: Final[str] = "text"
WIDGET_TEXTAREA: Final[str] = "textarea"
WIDGET_SELECT: Final[str] = "select"
WIDGETS: Final[tuple[str, ...]] = (WIDGET_TEXT, WIDGET_TEXTAREA, WIDGET_SELECT)

# Facebook OpenGraph object types, see https://ogp.me/#types
CONTENT_TYPES: Final[tuple[str, ...]] = (
    "activity",
    "sport",
    "bar",
    "company",
    "cafe",
    "hotel",
    "restaurant",
    "cause",
    "sports_league",
    "sports_team",
    "band",
    "government",
    "non_profit",
    "school",
    "university",
    "actor",
    "athlete",
    "author",
    "director",
    "musician",
    "politician",
    "public_figure",
    "city",
    "country",
    "landmark",
    "state_province",
    "album",
    "book",
    "drink",
    "food",
    "game",
    "product",
    "song",
    "movie",
    "tv_show",
    "blog",
    "article",
)

# Admin panel defaults
PANEL_ID: Final[str] = "fbox"
PANEL_TITLE: Final[str] = "Facebook OpenGraph Meta"
PANEL_CONTEXT: Final[str] = "side"
PANEL_PRIORITY: Final[str] = "low"
DEFAULT_POST_TYPES: Final[tuple[str, ...]] = ("post",)

NONCE_FIELD: Final[str] = "ogmeta_nonce"
NONCE_ACTION: Final[str] = "ogmeta_save_post"
