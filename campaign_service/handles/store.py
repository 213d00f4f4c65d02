"""
Handle Stores

FileHandleStore keeps the handle in a small JSON key-value file, the
equivalent of browser local storage: one file shared by every process on
the machine, one key per value. Constructed without a path it behaves as
"no durable storage": load() returns None, save() and clear() do nothing.

MemoryHandleStore keeps the handle for the life of the process.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from ..models import is_valid_handle
from ..protocols import InvalidHandleError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "crudcrud_resource_id"


def _check_format(handle: str) -> None:
    if not is_valid_handle(handle):
        raise InvalidHandleError(
            "Invalid resource id format. Expected 32+ character hex string.",
            handle=handle,
        )


class FileHandleStore:
    """Handle persisted in a JSON key-value file"""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        key: str = DEFAULT_STORAGE_KEY,
    ):
        self.path = Path(path).expanduser() if path else None
        self.key = key

    @property
    def available(self) -> bool:
        return self.path is not None

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (ValueError, OSError) as e:
            logger.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".storage-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def load(self) -> Optional[str]:
        if not self.available:
            return None
        return self._read().get(self.key)

    def save(self, handle: str) -> None:
        _check_format(handle)
        if not self.available:
            logger.debug("No durable storage configured; resource id not persisted")
            return
        data = self._read()
        data[self.key] = handle
        self._write(data)
        logger.info(f"CrudCrud resource id stored: {handle}")

    def clear(self) -> None:
        if not self.available:
            return
        data = self._read()
        if data.pop(self.key, None) is not None:
            self._write(data)
            logger.info("CrudCrud resource id cleared")


class MemoryHandleStore:
    """Handle kept in process memory"""

    def __init__(self, handle: Optional[str] = None, key: str = DEFAULT_STORAGE_KEY):
        self.key = key
        self._handle: Optional[str] = None
        if handle is not None:
            self.save(handle)

    def load(self) -> Optional[str]:
        return self._handle

    def save(self, handle: str) -> None:
        _check_format(handle)
        self._handle = handle

    def clear(self) -> None:
        self._handle = None


__all__ = ["FileHandleStore", "MemoryHandleStore", "DEFAULT_STORAGE_KEY"]
