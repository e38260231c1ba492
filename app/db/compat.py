"""Column types that work with both PostgreSQL and SQLite."""
from sqlalchemy import JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB as PG_JSONB

# Native uuid on PostgreSQL, CHAR(32) elsewhere
UUID = Uuid

# JSONB on PostgreSQL, JSON (serialized text) on SQLite
JSONB = JSON().with_variant(PG_JSONB(), "postgresql")
