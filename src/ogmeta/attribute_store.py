from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from ogmeta.domain.errors import StorageUnavailableError, UnknownContentTypeError
from ogmeta.domain.models import AttributeSet, default_attribute_set
from ogmeta.domain.schema import CONTENT_TYPES
from ogmeta.ports import MetadataStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AttributeStore:
    """
    Reads and writes the configured attribute set of a content item through
    the host metadata store.

    Updates are skip-on-empty: a blank submission never clears a stored value.
    """
    store: MetadataStore
    attributes: AttributeSet = field(default_factory=default_attribute_set)
    content_types: Sequence[str] = CONTENT_TYPES
    strict_types: bool = False

    def get(self, item_id: str) -> dict[str, str]:
        """
        Current value for every attribute key. Unset keys map to "".
        """
        out: dict[str, str] = {}
        for key in self.attributes.keys:
            try:
                value = self.store.read(item_id, key)
            except StorageUnavailableError:
                logger.error("Reading %s for item %s failed", key, item_id)
                raise
            out[key] = value if value else ""
        return out

    def set(self, item_id: str, submitted: Mapping[str, str]) -> list[str]:
        """
        Persist every non-blank submitted value whose key is in the attribute set.

        Returns the keys that were written, in attribute set order.
        """
        pending: list[tuple[str, str]] = []
        for key in self.attributes.keys:
            value = submitted.get(key)
            if not isinstance(value, str) or not value.strip():
                logger.debug("Skipping empty %s for item %s", key, item_id)
                continue
            pending.append((key, value))

        self._check_type(pending)

        written: list[str] = []
        for key, value in pending:
            try:
                self.store.write(item_id, key, value)
            except StorageUnavailableError:
                logger.error("Writing %s for item %s failed", key, item_id)
                raise
            written.append(key)

        logger.debug("Saved %s for item %s", written, item_id)
        return written

    def _check_type(self, pending: Sequence[tuple[str, str]]) -> None:
        type_attr = self.attributes.type_attribute
        if type_attr is None:
            return

        for key, value in pending:
            if key != type_attr.key or value in self.content_types:
                continue
            if self.strict_types:
                raise UnknownContentTypeError(value)
            logger.warning("Storing unrecognised content type %r", value)
