from __future__ import annotations

import html
from typing import Mapping, Optional


def escape_attr(value: object) -> str:
    """Escape a value for a double-quoted HTML attribute."""
    return html.escape(str(value), quote=True)


def escape_text(value: object) -> str:
    return html.escape(str(value), quote=False)


def type_label(tag: str) -> str:
    """
    Display label for a content type tag: underscores become spaces and each
    word gets an upper-case first letter (tv_show -> Tv Show).
    """
    return " ".join(w[:1].upper() + w[1:] for w in tag.replace("_", " ").split(" "))


def attrs(pairs: Mapping[str, Optional[object]]) -> str:
    """
    Render an ordered attribute mapping. None values are dropped.
    """
    return " ".join(f'{k}="{escape_attr(v)}"' for k, v in pairs.items() if v is not None)
