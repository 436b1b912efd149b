"""CalendarContext: the calendar rules every operation reads.

A context is an immutable value. The process-wide default is built once,
either from ``configure_default_context()`` at startup or lazily from
settings on first read, and never changes afterwards.
"""

from __future__ import annotations

import logging
import threading
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import CalendarSystem
from .errors import ContextAlreadyConfiguredError

logger = logging.getLogger(__name__)


class CalendarContext(BaseModel):
    """Calendar system, timezone and week-numbering rules."""

    model_config = ConfigDict(frozen=True)

    system: CalendarSystem = CalendarSystem.GREGORIAN
    timezone: str = "UTC"  # IANA key
    first_weekday: int = Field(default=0, ge=0, le=6)  # 0=Monday .. 6=Sunday
    min_days_in_first_week: int = Field(default=4, ge=1, le=7)
    weekend_days: frozenset[int] = Field(
        default_factory=lambda: frozenset({5, 6})
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v!r}") from exc
        return v

    @field_validator("weekend_days")
    @classmethod
    def _weekdays_in_range(cls, v: frozenset[int]) -> frozenset[int]:
        bad = sorted(d for d in v if not 0 <= d <= 6)
        if bad:
            raise ValueError(f"Weekend days must be in 0..6, got {bad}")
        return v

    @model_validator(mode="after")
    def _iso_week_rules(self) -> CalendarContext:
        if self.system == CalendarSystem.ISO8601 and (
            self.first_weekday != 0 or self.min_days_in_first_week != 4
        ):
            raise ValueError(
                "iso8601 requires first_weekday=0 and min_days_in_first_week=4"
            )
        return self

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def iso8601(cls, timezone: str = "UTC") -> CalendarContext:
        return cls(system=CalendarSystem.ISO8601, timezone=timezone)


# ---------------------------------------------------------------------------
# Process-wide default (initialise-once, read-only afterwards)
# ---------------------------------------------------------------------------

_default: CalendarContext | None = None
_default_lock = threading.Lock()


def configure_default_context(context: CalendarContext) -> None:
    """Install the process-wide default. Allowed once, before the first read."""
    global _default
    with _default_lock:
        if _default is not None:
            raise ContextAlreadyConfiguredError(
                "Default calendar context is already set; "
                "pass a context explicitly instead."
            )
        _default = context
    logger.info(
        "Default calendar context configured: %s/%s",
        context.system.value,
        context.timezone,
    )


def get_default_context() -> CalendarContext:
    """Return the default context, loading it from settings on first use."""
    global _default
    if _default is not None:
        return _default
    with _default_lock:
        if _default is None:
            from .config import load_settings

            _default = load_settings().calendar
            logger.info(
                "Default calendar context loaded from settings: %s/%s",
                _default.system.value,
                _default.timezone,
            )
        return _default


def resolve_context(context: CalendarContext | None) -> CalendarContext:
    """Explicit context wins; otherwise the process-wide default."""
    return context if context is not None else get_default_context()


def _reset_default_context() -> None:
    """Forget the default. Test-suite hook only."""
    global _default
    with _default_lock:
        _default = None
