"""Command: report date issues across stored records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from facportal.commands._base import PortalCommand

if TYPE_CHECKING:
    from facportal.commands._context import AppContext


@click.command(
    cls=PortalCommand,
    examples="""\
  facportal check
  facportal check --type events
  facportal --today 2024-06-15 check
  facportal --json check""",
)
@click.option("--type", "record_type", default=None, help="Only check records of this type.")
@click.pass_obj
def check(app: AppContext, record_type: str | None) -> None:
    """Flag future dates, inverted ranges and unrealistic years."""
    from facportal.services.check import CheckService

    app.emit(app.service(CheckService).check(record_type))
