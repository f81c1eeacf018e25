from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ogmeta.domain.errors import StorageUnavailableError


@dataclass(frozen=True, slots=True)
class YamlMetadataStore:
    """
    Flat-file store: a single YAML mapping of item_id -> {key: value}.

    Nothing is cached: every read loads the file, and every write reloads,
    updates a copy and rewrites the file through a temp file and an atomic
    replace. Null values count as unset.
    """
    path: Path

    def load(self) -> dict[str, dict[str, str]]:
        if not self.path.exists():
            return {}

        try:
            raw: Any = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise StorageUnavailableError(f"Cannot load metadata file {self.path}: {e}") from e

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise StorageUnavailableError(f"Metadata file {self.path} must contain a mapping")

        rows: dict[str, dict[str, str]] = {}
        for item_id, fields in raw.items():
            if fields is None:
                fields = {}
            if not isinstance(fields, dict):
                raise StorageUnavailableError(
                    f"Metadata for item {item_id} in {self.path} must be a mapping"
                )
            row: dict[str, str] = {}
            for k, v in fields.items():
                if v is None:
                    continue
                if isinstance(v, (dict, list)):
                    raise StorageUnavailableError(
                        f"Metadata {k} for item {item_id} in {self.path} must be a scalar"
                    )
                row[str(k)] = str(v)
            rows[str(item_id)] = row
        return rows

    def save(self, rows: dict[str, dict[str, str]]) -> None:
        tmp_file = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_file.open("w", encoding="utf-8") as f:
                yaml.safe_dump(rows, f, allow_unicode=True, sort_keys=True)
                f.flush()
            tmp_file.replace(self.path)
        except OSError as e:
            raise StorageUnavailableError(f"Cannot write metadata file {self.path}: {e}") from e

    def read(self, item_id: str, key: str) -> Optional[str]:
        return self.load().get(item_id, {}).get(key)

    def write(self, item_id: str, key: str, value: str) -> None:
        rows = self.load()
        rows[item_id] = {**rows.get(item_id, {}), key: value}
        self.save(rows)
