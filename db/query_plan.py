"""
db/query_plan.py
----------------
Builds the parameterized SQL statements the generic repository executes.

Placeholders are psycopg2 named parameters numbered in the order they are
handed out (``%(p1)s``, ``%(p2)s``, ...), so a plan's text and its bindings
always agree no matter which subset of fields a partial update touches.
Table and column names come from the static resource schemas, never from
request data.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

_PLACEHOLDER_RE = re.compile(r"%\(p(\d+)\)s")


@dataclass(frozen=True)
class QueryPlan:
    """
    SQL text plus its ordered parameter bindings.

    Attributes:
        text: Statement with named numbered placeholders.
        bindings: ``(index, value)`` pairs in placeholder order.
    """
    text: str
    bindings: tuple[tuple[int, Any], ...]

    @property
    def params(self) -> dict[str, Any]:
        """Mapping for ``cursor.execute(plan.text, plan.params)``."""
        return {f"p{index}": value for index, value in self.bindings}

    @property
    def placeholder_indices(self) -> list[int]:
        return [int(m) for m in _PLACEHOLDER_RE.findall(self.text)]


class Placeholders:
    """Hands out contiguous placeholders starting at ``start``, recording each binding."""

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError("Placeholder numbering starts at 1 or later")
        self._next = start
        self.bindings: list[tuple[int, Any]] = []

    def add(self, value: Any) -> str:
        index = self._next
        self._next += 1
        self.bindings.append((index, value))
        return f"%(p{index})s"

    def plan(self, text: str) -> QueryPlan:
        return QueryPlan(text, tuple(self.bindings))


def _column_list(schema) -> str:
    return ", ".join(schema.all_columns)


def escape_like(value: str) -> str:
    """Escape LIKE metacharacters so ``value`` matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# ── SELECT ────────────────────────────────────────────────

def build_select(
    schema,
    column: str | None = None,
    value: Any = None,
    prefix: bool = False,
    start: int = 1,
) -> QueryPlan:
    """
    Full-row SELECT, optionally filtered on one column.

    Args:
        schema: ResourceSchema of the table.
        column: Column to filter on; None selects every row.
        value: Value the column must equal (or start with, see ``prefix``).
        prefix: Match rows whose column starts with ``value`` (``LIKE value%``).
        start: First placeholder index.
    """
    ph = Placeholders(start)
    text = f"SELECT {_column_list(schema)} FROM {schema.table}"
    if column is not None:
        if prefix:
            text += f" WHERE {column} LIKE {ph.add(escape_like(value) + '%')}"
        else:
            text += f" WHERE {column} = {ph.add(value)}"
    text += " ORDER BY id"
    return ph.plan(text)


# ── INSERT ────────────────────────────────────────────────

def build_insert(schema, resource, start: int = 1) -> QueryPlan:
    """INSERT of every descriptor column plus both timestamps, returning the new id."""
    ph = Placeholders(start)
    columns = schema.columns + ("created_at", "updated_at")
    values = [ph.add(f.bind(resource)) for f in schema.fields]
    values.append(ph.add(resource.created_at))
    values.append(ph.add(resource.updated_at))
    text = (
        f"INSERT INTO {schema.table} ({', '.join(columns)}) "
        f"VALUES ({', '.join(values)}) RETURNING id"
    )
    return ph.plan(text)


# ── UPDATE ────────────────────────────────────────────────

def build_update(
    schema,
    partial,
    key_column: str,
    key_value: Any,
    always: Optional[Sequence[tuple[str, Any]]] = None,
    start: int = 1,
) -> QueryPlan:
    """
    Sparse UPDATE touching only the fields present in ``partial``.

    The ``always`` columns are assigned first, in the given order; then each
    present descriptor in schema order; the key is bound last. The statement
    returns the full updated row, so an unmatched key yields no row.

    Args:
        schema: ResourceSchema of the table.
        partial: Partial carrying the resource and its presence set.
        key_column: Column identifying the row.
        key_value: Value of the key column.
        always: ``(column, value)`` pairs assigned on every update;
            None means ``[("updated_at", datetime.now())]``.
        start: First placeholder index.

    With nothing to assign (``always=()`` and no field present) the key is
    set to itself, so the plan still runs and returns the row unchanged.
    """
    if always is None:
        always = [("updated_at", datetime.now())]
    ph = Placeholders(start)
    assignments = [f"{column} = {ph.add(value)}" for column, value in always]
    for descriptor in schema.fields:
        if descriptor.is_present(partial):
            assignments.append(f"{descriptor.column} = {ph.add(descriptor.bind(partial.resource))}")
    if not assignments:
        assignments.append(f"{key_column} = {key_column}")

    text = (
        f"UPDATE {schema.table} SET {', '.join(assignments)} "
        f"WHERE {key_column} = {ph.add(key_value)} "
        f"RETURNING {_column_list(schema)}"
    )
    return ph.plan(text)


# ── DELETE ────────────────────────────────────────────────

def build_delete(schema, key_column: str, key_value: Any, start: int = 1) -> QueryPlan:
    """DELETE by key; returns the deleted id so the caller can tell whether a row matched."""
    ph = Placeholders(start)
    text = f"DELETE FROM {schema.table} WHERE {key_column} = {ph.add(key_value)} RETURNING id"
    return ph.plan(text)
