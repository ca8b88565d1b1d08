"""Buffered binary writer that remembers which objects it has written."""

from __future__ import annotations

import os
from typing import Any, Union

SERIAL_BUFFER_LENGTH = 4096


class Serializer:
    """Writes raw bytes to a file, truncating it on open.

    Objects are tracked by identity so each is written only once.
    """

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self._file = open(path, "wb", buffering=SERIAL_BUFFER_LENGTH)
        self._seen: dict[int, Any] = {}

    def write(self, data: bytes) -> None:
        self._file.write(bytes(data))

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def is_serialized(self, obj: Any) -> bool:
        return id(obj) in self._seen

    def add_object(self, obj: Any) -> None:
        # Holding the object keeps its id from being reused.
        self._seen[id(obj)] = obj

    def __enter__(self) -> "Serializer":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()