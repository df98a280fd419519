"""Apology request flow.

Holds the user-visible state of one generate/copy cycle:

- ``submit`` moves the flow to ``Pending`` and schedules exactly one provider
  call as an ``asyncio.Task``; the task settles the flow into ``Succeeded`` or
  ``Failed`` and never raises provider errors to its awaiter.
- ``copy_result`` writes the current result to a clipboard and raises the
  ``copied`` flag for ``copy_ack_seconds``.

``RequestState`` is a discriminated union, so a result and an error can never
be held at the same time.
"""

from __future__ import annotations

import asyncio
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from apology_generator.clipboard import Clipboard, MemoryClipboard
from apology_generator.config import GeneratorConfig
from apology_generator.errors import ApologyError, ConfigurationError, ProviderError
from apology_generator.log_config import logger
from apology_generator.prompt import DEFAULT_PROMPT_TEMPLATE, build_prompt
from apology_generator.provider import GenerationProvider, build_provider

DEFAULT_COPY_ACK_SECONDS = 2.0


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Pending(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["pending"] = "pending"


class Succeeded(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["succeeded"] = "succeeded"
    result: str


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    error: str
    reason: Literal["configuration", "provider"] = "provider"


RequestState = Annotated[Idle | Pending | Succeeded | Failed, Field(discriminator="status")]


class ApologyFlow:
    """One user's generate/copy cycle.

    Args:
        provider: Generation provider, or None when no credential is configured.
        clipboard: Clipboard to copy results into.
        prompt_template: Instruction template with a ``{description}`` placeholder.
        copy_ack_seconds: Delay before the ``copied`` flag resets.

    """

    def __init__(
        self,
        provider: GenerationProvider | None,
        clipboard: Clipboard | None = None,
        *,
        prompt_template: str = DEFAULT_PROMPT_TEMPLATE,
        copy_ack_seconds: float = DEFAULT_COPY_ACK_SECONDS,
    ) -> None:
        self.provider = provider
        self.clipboard: Clipboard = clipboard if clipboard is not None else MemoryClipboard()
        self.prompt_template = prompt_template
        self.copy_ack_seconds = copy_ack_seconds
        self.description = ""
        self.state: RequestState = Idle()
        self.copied = False
        self._task: asyncio.Task[RequestState] | None = None
        self._ack_reset: asyncio.TimerHandle | None = None

    @classmethod
    def from_config(
        cls,
        config: GeneratorConfig,
        clipboard: Clipboard | None = None,
    ) -> ApologyFlow:
        return cls(
            build_provider(config),
            clipboard,
            prompt_template=config.prompt_template,
            copy_ack_seconds=config.copy_ack_seconds,
        )

    @property
    def is_pending(self) -> bool:
        return isinstance(self.state, Pending)

    @property
    def can_submit(self) -> bool:
        """Whether the trigger is enabled: non-blank input and nothing in flight."""
        return bool(self.description.strip()) and not self.is_pending

    @property
    def result(self) -> str:
        return self.state.result if isinstance(self.state, Succeeded) else ""

    @property
    def error(self) -> str | None:
        return self.state.error if isinstance(self.state, Failed) else None

    @property
    def task(self) -> asyncio.Task[RequestState] | None:
        """The in-flight generation task, if any."""
        return self._task

    def submit(self, description: str | None = None) -> asyncio.Task[RequestState] | None:
        """Start a generation for the current (or given) description.

        Returns the scheduled task, or None when the trigger is inert: blank
        input or a request already pending. Must be called from a running loop.
        """
        if description is not None:
            self.description = description
        if not self.can_submit:
            return None

        loop = asyncio.get_running_loop()
        prompt = build_prompt(self.description, self.prompt_template)
        self.state = Pending()
        logger.info("apology submit description_chars=%d", len(self.description.strip()))
        self._task = loop.create_task(self._run(prompt))
        self._task.add_done_callback(self._on_task_done)
        return self._task

    async def generate(self, description: str) -> RequestState:
        """Submit and wait for the flow to settle."""
        task = self.submit(description)
        if task is None:
            return self.state
        return await task

    async def _run(self, prompt: str) -> RequestState:
        try:
            if self.provider is None:
                raise ConfigurationError()
            text = await self.provider.generate(prompt)
            self.state = Succeeded(result=text)
        except ApologyError as exc:
            logger.error("Apology generation failed (%s): %s", exc.reason, exc.message)
            self.state = Failed(error=exc.message, reason=exc.reason)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Apology generation raised unexpectedly")
            wrapped = ProviderError.from_exception(exc)
            self.state = Failed(error=wrapped.message, reason=wrapped.reason)
        finally:
            # Only reachable while Pending when the task was cancelled.
            if isinstance(self.state, Pending):
                self.state = Idle()
            self._task = None
        return self.state

    def _on_task_done(self, task: asyncio.Task[RequestState]) -> None:
        # A task cancelled before its first step never enters _run.
        if not task.cancelled() or self._task is not task:
            return
        if isinstance(self.state, Pending):
            self.state = Idle()
        self._task = None

    async def copy_result(self) -> bool:
        """Copy the current result; returns whether the clipboard accepted it.

        Clipboard failures are logged and leave every field untouched.
        """
        text = self.result
        if not text:
            return False
        try:
            await self.clipboard.write_text(text)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Clipboard write failed: %s", exc)
            return False

        if self._ack_reset is not None:
            self._ack_reset.cancel()
        self.copied = True
        self._ack_reset = asyncio.get_running_loop().call_later(self.copy_ack_seconds, self._clear_copied)
        return True

    def _clear_copied(self) -> None:
        self.copied = False
        self._ack_reset = None
