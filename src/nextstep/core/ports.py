# src/nextstep/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the todo core.

The store depends on Protocols instead of concrete implementations,
so persistence can be swapped for an in-memory fake in tests.
"""

from typing import Protocol


class BlobStore(Protocol):
    """
    Durable key-value store of opaque blobs.

    set() overwrites the whole value for the key.
    get() returns None when the key is missing.
    """

    def get(self, key: str) -> bytes | None: ...
    def set(self, key: str, value: bytes) -> None: ...


class Clock(Protocol):
    """Returns the current time as epoch seconds (time.time-compatible)."""

    def __call__(self) -> float: ...
