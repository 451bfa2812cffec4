"""SQLAlchemy Core table definitions for the facportal database.

A single ``records`` table holds every record type. The payload is the
record exactly as submitted, stored as a JSON object.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text

metadata = MetaData()

records = Table(
    "records",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("record_type", Text, nullable=False),
    Column("payload", Text, nullable=False),  # JSON object
    Column("created_at", Text, nullable=False),
    Column("modified_at", Text, nullable=False),
    Index("ix_records_record_type", "record_type"),
)
