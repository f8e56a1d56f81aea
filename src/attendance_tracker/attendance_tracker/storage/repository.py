from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Byte-string store addressed by short entry names."""

    def get(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    def set(self, key: str, value: bytes) -> None:
        raise NotImplementedError
