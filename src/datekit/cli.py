"""CLI entry point for datekit."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import click

from .core.config import load_settings
from .core.context import CalendarContext
from .core.enums import CalendarField, CalendarUnit
from .core.errors import ConfigError
from .observability.logger import get_logger, new_run_id, setup_logging

log = get_logger(__name__)

UNIT_CHOICE = click.Choice([u.value for u in CalendarUnit])


class InstantParam(click.ParamType):
    """ISO-8601 timestamp with an explicit offset."""

    name = "instant"

    def convert(self, value: Any, param: Any, ctx: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            self.fail(f"{value!r} is not an ISO-8601 timestamp", param, ctx)
        if parsed.tzinfo is None:
            self.fail(f"{value!r} needs a UTC offset (e.g. +00:00 or Z)", param, ctx)
        return parsed


INSTANT = InstantParam()


@click.group()
@click.option("--config", "config_path", default=None, help="TOML config file path")
@click.option("--timezone", default=None, help="IANA timezone, e.g. Europe/Paris")
@click.option("--first-weekday", type=click.IntRange(0, 6), default=None, help="0=Monday .. 6=Sunday")
@click.option("--min-days", type=click.IntRange(1, 7), default=None, help="Min days in first week")
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
@click.option("--log-format", type=click.Choice(["console", "json"]), default=None)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: str | None,
    timezone: str | None,
    first_weekday: int | None,
    min_days: int | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Calendar boundaries and arithmetic."""
    calendar: dict[str, Any] = {}
    if timezone:
        calendar["timezone"] = timezone
    if first_weekday is not None:
        calendar["first_weekday"] = first_weekday
    if min_days is not None:
        calendar["min_days_in_first_week"] = min_days
    observability: dict[str, Any] = {}
    if log_level:
        observability["log_level"] = log_level
    if log_format:
        observability["log_format"] = log_format

    overrides: dict[str, Any] = {}
    if calendar:
        overrides["calendar"] = calendar
    if observability:
        overrides["observability"] = observability

    try:
        settings = load_settings(config_path=config_path, overrides=overrides)
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc

    setup_logging(settings.observability.log_level, settings.observability.log_format)
    new_run_id()
    log.debug("cli.start", command=ctx.invoked_subcommand, timezone=settings.calendar.timezone)
    ctx.obj = settings.calendar


def _echo(value: datetime) -> None:
    click.echo(value.isoformat())


@main.command()
@click.argument("instant", type=INSTANT)
@click.argument("unit", type=UNIT_CHOICE)
@click.pass_obj
def beginning(context: CalendarContext, instant: datetime, unit: str) -> None:
    """First instant of UNIT containing INSTANT."""
    from .dates import boundaries

    result = boundaries.beginning(instant, CalendarUnit(unit), context)
    if result is None:
        raise click.UsageError(f"Unit {unit!r} has no boundary")
    _echo(result)


@main.command()
@click.argument("instant", type=INSTANT)
@click.argument("unit", type=UNIT_CHOICE)
@click.pass_obj
def end(context: CalendarContext, instant: datetime, unit: str) -> None:
    """Last whole second of UNIT containing INSTANT."""
    from .dates import boundaries

    result = boundaries.end(instant, CalendarUnit(unit), context)
    if result is None:
        if unit == CalendarUnit.NANOSECOND.value:
            raise click.UsageError(f"Unit {unit!r} has no boundary")
        raise click.ClickException(f"No end of {unit}: the next {unit} is past year 9999")
    _echo(result)


@main.command()
@click.argument("instant", type=INSTANT)
@click.argument("unit", type=UNIT_CHOICE)
@click.option("--delta", type=int, required=True, help="Signed number of units")
@click.pass_obj
def add(context: CalendarContext, instant: datetime, unit: str, delta: int) -> None:
    """Shift INSTANT by --delta UNITs."""
    from .dates import arithmetic

    outcome = arithmetic.try_add(instant, CalendarUnit(unit), delta, context)
    _echo(outcome.value)
    if not outcome.is_computed:
        click.echo(f"unchanged: {outcome.reason.value}", err=True)


@main.command()
@click.argument("instant", type=INSTANT)
@click.argument("unit", type=UNIT_CHOICE)
@click.option("--value", type=int, required=True, help="New absolute value")
@click.pass_obj
def change(context: CalendarContext, instant: datetime, unit: str, value: int) -> None:
    """Set UNIT of INSTANT to --value."""
    from .dates import arithmetic

    outcome = arithmetic.try_change(instant, CalendarUnit(unit), value, context)
    _echo(outcome.value)
    if not outcome.is_computed:
        click.echo(f"unchanged: {outcome.reason.value}", err=True)


@main.command()
@click.argument("instant", type=INSTANT)
@click.pass_obj
def fields(context: CalendarContext, instant: datetime) -> None:
    """Print every calendar field of INSTANT."""
    from .dates.components import fields_of

    for field, value in fields_of(instant, list(CalendarField), context).items():
        click.echo(f"{field.value}: {value}")
