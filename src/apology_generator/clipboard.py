from __future__ import annotations

from typing import Protocol


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None: ...


class MemoryClipboard:
    """In-process clipboard; keeps the last written text."""

    def __init__(self) -> None:
        self.text: str | None = None
        self.writes = 0

    async def write_text(self, text: str) -> None:
        self.text = text
        self.writes += 1
