from apology_generator.config import GeneratorConfig
from apology_generator.flow import ApologyFlow

_config: GeneratorConfig | None = None


def set_config(config: GeneratorConfig) -> None:
    """Set the global config instance."""
    global _config  # noqa: PLW0603
    _config = config


def get_config() -> GeneratorConfig:
    """Get the global config instance."""
    if _config is None:
        msg = "Config not initialized"
        raise RuntimeError(msg)
    return _config


def get_flow() -> ApologyFlow:
    """Build a fresh flow for one request from the global config."""
    return ApologyFlow.from_config(get_config())
