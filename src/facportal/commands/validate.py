"""Command group: check a single value the way a portal form would."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from facportal.commands._base import PortalGroup
from facportal.services.validation import ValidationService

if TYPE_CHECKING:
    from facportal.commands._context import AppContext

_VALIDATE_EXAMPLES = """\
  facportal validate date 2023-05-10
  facportal validate year 1999
  facportal validate range 2020-01-01 2021-01-01
  facportal validate ongoing 2020-01-01
  facportal validate birth-date 2000-02-29
  facportal --today 2024-06-15 validate year 2025"""


@click.group(cls=PortalGroup, examples=_VALIDATE_EXAMPLES)
def validate() -> None:
    """Validate dates, years and date ranges."""


def _service(app: AppContext) -> ValidationService:
    return app.service(ValidationService, with_store=False)


@validate.command(
    examples="""\
  facportal validate date 2023-05-10
  facportal validate date 2023-05-10T08:30:00Z
  facportal --json validate date 1850-01-01"""
)
@click.argument("value")
@click.pass_obj
def date(app: AppContext, value: str) -> None:
    """Check that VALUE is a real date between the minimum year and today."""
    app.emit(_service(app).check_date(value))


@validate.command(
    examples="""\
  facportal validate year 1999
  facportal -c facportal.toml validate year 1950"""
)
@click.argument("value")
@click.pass_obj
def year(app: AppContext, value: str) -> None:
    """Check that VALUE is a whole year between the minimum year and now."""
    app.emit(_service(app).check_year(value))


@validate.command(
    name="range",
    examples="""\
  facportal validate range 2020-01-01 2021-01-01
  facportal validate range 2021-01-01 2020-01-01""",
)
@click.argument("start")
@click.argument("end")
@click.pass_obj
def range_(app: AppContext, start: str, end: str) -> None:
    """Check that START and END are past dates with START before END."""
    app.emit(_service(app).check_range(start, end))


@validate.command(
    examples="""\
  facportal validate ongoing 2020-01-01
  facportal validate ongoing 2020-01-01 2022-06-30"""
)
@click.argument("start")
@click.argument("end", required=False, default=None)
@click.pass_obj
def ongoing(app: AppContext, start: str, end: str | None) -> None:
    """Check a range whose END may be omitted while it is still running."""
    app.emit(_service(app).check_ongoing(start, end))


@validate.command(
    name="birth-date",
    examples="""\
  facportal validate birth-date 1990-04-12
  facportal --today 2024-06-15 validate birth-date 2006-06-16""",
)
@click.argument("value")
@click.pass_obj
def birth_date(app: AppContext, value: str) -> None:
    """Check that VALUE is a past date of birth of someone old enough to register."""
    app.emit(_service(app).check_birth_date(value))
