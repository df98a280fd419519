from __future__ import annotations

import asyncio

APOLOGY_TEXT = "I sincerely apologize for missing our meeting yesterday..."


class FakeProvider:
    """Records prompts; optionally blocks on a gate or raises."""

    def __init__(
        self,
        text: str = APOLOGY_TEXT,
        error: BaseException | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.text = text
        self.error = error
        self.gate = gate
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.text


class FailingClipboard:
    async def write_text(self, text: str) -> None:
        raise PermissionError("clipboard denied")
