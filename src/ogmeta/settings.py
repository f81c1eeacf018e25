from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, StrictBool, ValidationError

from ogmeta.domain.errors import ConfigError
from ogmeta.domain.models import Attribute, AttributeSet, Panel, default_attribute_set
from ogmeta.domain.schema import (
    CONTENT_TYPES,
    DEFAULT_POST_TYPES,
    OG_PREFIX,
    PANEL_CONTEXT,
    PANEL_ID,
    PANEL_PRIORITY,
    PANEL_TITLE,
)


class AttributeSpec(BaseModel):
    """Shape of one [[attributes]] table in settings.toml."""
    key: str
    label: str
    property: Optional[str] = None  # defaults to og:<key>
    widget: Literal["text", "textarea", "select"] = "text"
    hint: Optional[str] = None
    placeholder: Optional[str] = None

    def to_attribute(self) -> Attribute:
        return Attribute(
            key=self.key,
            property=self.property or OG_PREFIX + self.key,
            label=self.label,
            widget=self.widget,
            hint=self.hint,
            placeholder=self.placeholder,
        )


class ValidationSpec(BaseModel):
    """Shape of the [validation] table; strict_types must be a TOML boolean."""
    strict_types: StrictBool


@dataclass(frozen=True)
class Storage:
    backend: str = "memory"
    path: Optional[Path] = None


@dataclass(frozen=True)
class Validation:
    strict_types: bool = False


@dataclass(frozen=True)
class Settings:
    attributes: AttributeSet = field(default_factory=default_attribute_set)
    content_types: tuple[str, ...] = CONTENT_TYPES
    panel: Panel = field(default_factory=Panel)
    storage: Storage = field(default_factory=Storage)
    validation: Validation = field(default_factory=Validation)


def default_settings() -> Settings:
    return Settings()


def load_settings(path: str | Path = "settings.toml") -> Settings:
    """
    Load settings.toml. A missing file yields the defaults; every section is
    optional, but a present section must carry its required keys.
    """
    path = Path(path)

    if not path.exists():
        return default_settings()

    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    return settings_from_dict(raw, base_dir=path.parent)


def _table(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw[name]
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(value).__name__}")
    return value


def settings_from_dict(raw: dict[str, Any], *, base_dir: Path = Path(".")) -> Settings:
    def expand(p: str) -> Path:
        expanded = Path(os.path.expandvars(os.path.expanduser(p)))
        return expanded if expanded.is_absolute() else (base_dir / expanded).resolve()

    try:
        attributes = default_attribute_set()
        if "attributes" in raw:
            specs = [AttributeSpec.model_validate(a) for a in raw["attributes"]]
            attributes = AttributeSet(attributes=tuple(s.to_attribute() for s in specs))

        content_types = CONTENT_TYPES
        if "content_types" in raw:
            content_types = tuple(str(t) for t in raw["content_types"])
            if not content_types:
                raise ConfigError("content_types must not be empty")

        panel = Panel()
        if "panel" in raw:
            p = _table(raw, "panel")
            panel = Panel(
                panel_id=str(p.get("id", PANEL_ID)),
                title=str(p.get("title", PANEL_TITLE)),
                context=str(p.get("context", PANEL_CONTEXT)),
                priority=str(p.get("priority", PANEL_PRIORITY)),
                post_types=tuple(str(t) for t in p.get("post_types", DEFAULT_POST_TYPES)),
            )

        storage = Storage()
        if "storage" in raw:
            s = _table(raw, "storage")
            storage = Storage(
                backend=str(s["backend"]),
                path=expand(s["path"]) if s.get("path") else None,
            )

        validation = Validation()
        if "validation" in raw:
            spec = ValidationSpec.model_validate(_table(raw, "validation"))
            validation = Validation(strict_types=spec.strict_types)
    except KeyError as e:
        raise ConfigError(f"Missing config key: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e

    return Settings(
        attributes=attributes,
        content_types=content_types,
        panel=panel,
        storage=storage,
        validation=validation,
    )
