from __future__ import annotations

from typing import Optional, Protocol


class MetadataStore(Protocol):
    """
    Per-item key/value metadata persistence provided by the host.

    read returns None when no value is stored. Implementations raise
    StorageUnavailableError when the backend cannot be reached.
    """

    def read(self, item_id: str, key: str) -> Optional[str]:
        ...

    def write(self, item_id: str, key: str, value: str) -> None:
        ...
