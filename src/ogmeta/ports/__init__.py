from .hook_registry import HookRegistry
from .item_resolver import ItemResolver
from .metadata_store import MetadataStore
from .nonce import NonceIssuer

__all__ = [
    "HookRegistry",
    "ItemResolver",
    "MetadataStore",
    "NonceIssuer",
]
