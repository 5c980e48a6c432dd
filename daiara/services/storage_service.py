"""
Object storage for uploaded artwork images.

`LocalObjectStore` writes objects under a directory on disk; any store
with the same `put(key, content) -> key` shape can be injected instead.
"""

import logging
from pathlib import Path
from typing import Protocol

from starlette.concurrency import run_in_threadpool

from daiara.core.config import settings

logger = logging.getLogger(__name__)


class ObjectStore(Protocol):
    async def put(self, key: str, content: bytes) -> str: ...


class LocalObjectStore:
    def __init__(self, root: str | Path):
        self.root = Path(root)

    def _write(self, key: str, content: bytes) -> None:
        path = self.root / key
        if path.resolve().parent != self.root.resolve():
            raise ValueError(f"object key escapes the store root: {key!r}")
        self.root.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    async def put(self, key: str, content: bytes) -> str:
        await run_in_threadpool(self._write, key, content)
        logger.debug("Stored object %s (%d bytes)", key, len(content))
        return key


def get_object_store() -> ObjectStore:
    """FastAPI dependency — overridden in tests."""
    return LocalObjectStore(settings.ARTWORK_STORAGE_DIR)
