"""Failure modes of the apology generation flow."""

from __future__ import annotations

CONFIGURATION_ERROR_MESSAGE = "API key not configured. Please add your Gemini API key to continue."
GENERIC_ERROR_MESSAGE = "An error occurred while generating the apology"


class ApologyError(Exception):
    """Base class for errors surfaced by the generation flow."""

    reason = "provider"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or GENERIC_ERROR_MESSAGE
        super().__init__(self.message)


class ConfigurationError(ApologyError):
    """The generation provider has no credential; raised before any network call."""

    reason = "configuration"

    def __init__(self, message: str = CONFIGURATION_ERROR_MESSAGE) -> None:
        super().__init__(message)


class ProviderError(ApologyError):
    """The generation call itself failed or returned no usable text."""

    @classmethod
    def from_exception(cls, exc: BaseException) -> ProviderError:
        """Wrap an arbitrary provider failure, keeping its message when it has one."""
        return cls(str(exc).strip() or None)
