"""Conversions shared by the mappers."""

import sqlite3
from datetime import date, datetime
from typing import Optional


class BaseMapper:
    """Holds the connection of the enclosing transaction."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored ``YYYY-MM-DD HH:MM:SS[.fff]`` timestamp."""
    if value is None:
        return None
    return datetime.fromisoformat(value)


def parse_date(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    return date.fromisoformat(value)


def format_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def has_column(row: sqlite3.Row, name: str) -> bool:
    return name in row.keys()


def escape_like(value: str) -> str:
    """Escape ``value`` for a ``LIKE ... ESCAPE '\\'`` pattern."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
