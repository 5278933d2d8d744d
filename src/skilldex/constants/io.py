"""Constants for file I/O helpers."""

from __future__ import annotations

FILE_HASH_CHUNK_SIZE: int = 64 * 1024
