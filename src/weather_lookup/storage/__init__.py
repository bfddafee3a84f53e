"""Provider record storage."""

from .base import ProviderStore
from .file_store import FileProviderStore

__all__ = ["FileProviderStore", "ProviderStore"]
