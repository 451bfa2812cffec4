"""AppContext — the object every command receives via ``@click.pass_obj``.

Holds the resolved settings, opens the record store on first use, and
owns result emission (stdout for success, stderr plus exit 1 for
failure).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import click

from facportal.config.logging import configure_logging
from facportal.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from facportal.config.settings import PortalSettings
    from facportal.infrastructure.store import RecordStore
    from facportal.services.base import BaseService
    from facportal.services.result import ServiceResult

S = TypeVar("S", bound="BaseService")


class AppContext:
    """Shared state for one CLI invocation.

    The store is opened lazily so ``--help``, ``--examples`` and the
    ``validate`` commands never create a database file.
    """

    def __init__(self, settings: PortalSettings) -> None:
        self.settings = settings
        self._store: RecordStore | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> RecordStore:
        if self._store is None:
            from facportal.infrastructure.store import RecordStore

            self._store = RecordStore(self.settings.store_path)
        return self._store

    def service(self, service_cls: type[S], *, with_store: bool = True) -> S:
        """Build *service_cls* with this invocation's bounds and clock."""
        return service_cls(
            self.store if with_store else None,
            validation=self.settings.validation,
            clock=self.settings.clock,
        )

    def close(self) -> None:
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Warnings go to stderr outside JSON mode so piped stdout stays
        parseable. A failed result exits with status 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
