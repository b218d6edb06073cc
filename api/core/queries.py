"""
Generic read queries shared by every entity.

Each feature package declares one `Entity` (table, columns, output aliases)
and calls these helpers instead of hand-writing the same SELECT five times.
Table and column names come from code, never from a request; only filter
values are passed as parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import db


def quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def escape_like(value: str) -> str:
    """
    Escape LIKE wildcards so the value matches literally (used with ESCAPE '\\').
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class Entity:
    table: str
    columns: tuple[str, ...]
    # column name -> key used in the returned rows
    aliases: dict[str, str] = field(default_factory=dict)

    def column(self, name: str, *, prefix: str = "") -> str:
        if name not in self.columns:
            raise ValueError(f"{self.table} has no column {name!r}")
        return f"{prefix}{quote_ident(name)}"

    def select_list(self, *, prefix: str = "") -> str:
        parts = []
        for name in self.columns:
            expr = self.column(name, prefix=prefix)
            alias = self.aliases.get(name)
            parts.append(f"{expr} AS {quote_ident(alias)}" if alias else expr)
        return ", ".join(parts)

    def select_from(self) -> str:
        return f"SELECT {self.select_list()} FROM {quote_ident(self.table)}"

    async def list_all(self) -> list[dict[str, Any]]:
        return await db.fetch_all(self.select_from())

    async def get_by_id(self, entity_id: int) -> dict[str, Any] | None:
        return await self.first_where("id", entity_id)

    async def first_where(self, column: str, value: Any) -> dict[str, Any] | None:
        """
        First row (store order) whose column equals value, or None.
        """
        return await db.fetch_one(
            f"{self.select_from()} WHERE {self.column(column)} = $1 LIMIT 1",
            value,
        )

    async def all_where(self, column: str, value: Any) -> list[dict[str, Any]]:
        return await db.fetch_all(
            f"{self.select_from()} WHERE {self.column(column)} = $1",
            value,
        )

    async def all_containing(self, column: str, needle: str) -> list[dict[str, Any]]:
        """
        Rows whose column contains needle as a substring (store collation).
        """
        return await db.fetch_all(
            f"{self.select_from()} WHERE {self.column(column)} LIKE ('%' || $1 || '%') ESCAPE '\\'",
            escape_like(needle),
        )
