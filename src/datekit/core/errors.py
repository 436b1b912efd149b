"""Custom exception hierarchy for datekit.

Calendar operations report overflow and out-of-range values through
``Outcome`` / ``None`` rather than exceptions; these are for misuse.
"""


class DatekitError(Exception):
    """Base exception for all datekit errors."""


# --- Configuration ---
class ConfigError(DatekitError):
    """Invalid or missing configuration."""


class ContextAlreadyConfiguredError(ConfigError):
    """The process-wide default context was already configured or read."""


# --- Instants ---
class InvalidInstantError(DatekitError):
    """Value is not an absolute instant (e.g., a naive datetime)."""

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid instant {value!r}: {reason}")
