"""Custom exceptions."""


class ConfigError(Exception):
    """Raised when configuration loading fails."""


class ProviderError(RuntimeError):
    """Raised when the model provider call fails (transport, auth, rate limit, bad payload)."""
