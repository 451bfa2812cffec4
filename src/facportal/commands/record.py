"""Command group: submit, edit, list, show and delete faculty records."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from facportal.commands._base import PortalGroup
from facportal.services.records import RecordService

if TYPE_CHECKING:
    from facportal.commands._context import AppContext

_RECORD_EXAMPLES = """\
  facportal record add award --set AwardName="Best Paper" --set YearAwarded=2021
  facportal record add event --set Title=Symposium --set StartDate=2023-03-01 \\
      --set EndDate=2023-03-03
  facportal record add teaching --set Designation=Lecturer --set StartDate=2019-08-01
  facportal record edit 3 --set EndDate=2024-01-31
  facportal record list --type events
  facportal record show 3
  facportal record delete 3"""


def _parse_fields(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> dict[str, str]:
    fields: dict[str, str] = {}
    for item in value:
        key, sep, val = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        fields[key.strip()] = val
    return fields


def _payload(fields: dict[str, str], data: str | None) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    if data:
        try:
            loaded = json.loads(data)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"invalid JSON: {exc}", param_hint="--data") from exc
        if not isinstance(loaded, dict):
            raise click.BadParameter("must be a JSON object", param_hint="--data")
        payload.update(loaded)
    payload.update(fields)
    return payload


_set_option = click.option(
    "--set",
    "fields",
    multiple=True,
    metavar="KEY=VALUE",
    callback=_parse_fields,
    help="Set one form field (repeatable).",
)
_data_option = click.option(
    "--data",
    default=None,
    metavar="JSON",
    help="Form fields as a JSON object; --set values win.",
)


@click.group(cls=PortalGroup, examples=_RECORD_EXAMPLES)
def record() -> None:
    """Manage faculty records."""


@record.command(
    examples="""\
  facportal record add award --set AwardName="Best Paper" --set YearAwarded=2021
  facportal record add publication --data '{"Title": "On Dates", "PublicationYear": 2019}'
  facportal record add signup --set Email=a@b.edu --set DateOfBirth=1990-01-01"""
)
@click.argument("record_type")
@_set_option
@_data_option
@click.pass_obj
def add(app: AppContext, record_type: str, fields: dict[str, str], data: str | None) -> None:
    """Validate and store a new RECORD_TYPE record."""
    payload = _payload(fields, data)
    app.emit(app.service(RecordService).submit(record_type, payload))


@record.command(
    examples="""\
  facportal record edit 3 --set EndDate=2024-01-31
  facportal record edit 3 --set EndDate="""
)
@click.argument("record_id", type=int)
@_set_option
@_data_option
@click.pass_obj
def edit(app: AppContext, record_id: int, fields: dict[str, str], data: str | None) -> None:
    """Change fields of record RECORD_ID and revalidate it."""
    changes = _payload(fields, data)
    app.emit(app.service(RecordService).edit(record_id, changes))


@record.command(
    name="list",
    examples="""\
  facportal record list
  facportal record list --type award
  facportal --json record list --type research""",
)
@click.option("--type", "record_type", default=None, help="Only records of this type.")
@click.pass_obj
def list_(app: AppContext, record_type: str | None) -> None:
    """List stored records with their date issues."""
    app.emit(app.service(RecordService).list_records(record_type))


@record.command(examples="  facportal record show 3")
@click.argument("record_id", type=int)
@click.pass_obj
def show(app: AppContext, record_id: int) -> None:
    """Show record RECORD_ID."""
    app.emit(app.service(RecordService).get(record_id))


@record.command(examples="  facportal record delete 3")
@click.argument("record_id", type=int)
@click.pass_obj
def delete(app: AppContext, record_id: int) -> None:
    """Delete record RECORD_ID."""
    app.emit(app.service(RecordService).delete(record_id))
