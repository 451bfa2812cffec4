"""Subcommand modules for facportal.

:func:`register_commands` imports each module only when the root group
is built, keeping the package import cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the ``validate`` and ``record`` groups and the ``check`` command."""
    from facportal.commands.check import check
    from facportal.commands.record import record
    from facportal.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(record)
    cli.add_command(check)
