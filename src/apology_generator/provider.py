"""Generation provider: turns a prompt into text through any-llm."""

from __future__ import annotations

from typing import Any, Protocol, cast

from any_llm import acompletion

from apology_generator.config import GeneratorConfig
from apology_generator.errors import ProviderError
from apology_generator.log_config import logger


class GenerationProvider(Protocol):
    async def generate(self, prompt: str) -> str: ...


def extract_text(response: Any) -> str | None:
    """Pull the completion text out of a chat completion response."""
    choices = getattr(response, "choices", None) or []
    parts: list[str] = []
    for choice in choices:
        message = getattr(choice, "message", None)
        content = getattr(message, "content", None)
        if isinstance(content, str):
            parts.append(content)
        elif isinstance(content, list):
            for block in content:
                if isinstance(block, dict) and isinstance(block.get("text"), str):
                    parts.append(block["text"])
        if parts:
            break
    combined = "".join(parts)
    return combined if combined.strip() else None


class AnyLLMProvider:
    """Single-completion provider backed by ``any_llm.acompletion``."""

    def __init__(self, model: str, api_key: str) -> None:
        self.model = model
        self._api_key = api_key

    async def generate(self, prompt: str) -> str:
        completion_kwargs = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "api_key": self._api_key,
            "stream": False,
        }
        logger.info("apology completion request model=%s prompt_chars=%d", self.model, len(prompt))
        try:
            response = cast(Any, await acompletion(**completion_kwargs))
        except Exception as exc:
            raise ProviderError.from_exception(exc) from exc

        text = extract_text(response)
        if not text:
            raise ProviderError("Empty response from AI")
        return text


def build_provider(config: GeneratorConfig) -> GenerationProvider | None:
    """Build the configured provider, or None when no credential is available."""
    api_key = config.resolved_api_key()
    if not api_key:
        logger.warning("No API key configured; generation requests will fail until one is provided")
        return None
    return AnyLLMProvider(config.model, api_key)
