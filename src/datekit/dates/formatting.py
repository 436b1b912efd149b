"""Display helpers: epoch seconds in, formatted local text out."""

from __future__ import annotations

from datetime import datetime, timezone

from datekit.core.context import CalendarContext

from .components import localize

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"


def to_string(
    instant: datetime,
    fmt: str = DEFAULT_FORMAT,
    context: CalendarContext | None = None,
) -> str:
    """Format ``instant`` as wall-clock time in the context timezone."""
    return localize(instant, context).strftime(fmt)


def from_timestamp(seconds: float) -> datetime:
    """UTC instant ``seconds`` after 1970-01-01T00:00:00Z."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)
