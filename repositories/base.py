"""
repositories/base.py
--------------------
Generic data access for any resource kind described by a ResourceSchema.

Not-found is a normal outcome: ``fetch_one`` and ``update`` return None and
``delete`` returns False. Driver failures surface as StoreError, corrupt
array columns as CodecError; nothing is swallowed or retried here.
"""

from datetime import datetime
from typing import Any, Callable, Optional, Union

from db.connection import Database
from db.query_plan import QueryPlan, build_delete, build_insert, build_select, build_update
from errors import NotFoundError, ValidationError
from models.schema import KEY_COLUMN, Partial, ResourceSchema
from utils.logger import get_logger

logger = get_logger(__name__)


class Repository:
    """CRUD operations on the table described by ``schema``."""

    def __init__(
        self,
        db: Database,
        schema: ResourceSchema,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            db: Shared connection pool.
            schema: Table description.
            clock: Source of created_at/updated_at timestamps.
        """
        self.db = db
        self.schema = schema
        self._clock = clock

    # ── CREATE ────────────────────────────────────────────

    def insert(self, resource):
        """
        Insert a new row.

        Args:
            resource: Model instance to persist; its id is ignored.

        Returns:
            The same instance with ``id``, ``created_at`` and ``updated_at`` set.
        """
        now = self._clock()
        resource.created_at = now
        resource.updated_at = now
        plan = build_insert(self.schema, resource)
        with self.db.cursor() as cur:
            self._execute(cur, plan)
            resource.id = cur.fetchone()[0]
        logger.info(f"Added {self.schema.kind} #{resource.id}")
        return resource

    # ── READ ──────────────────────────────────────────────

    def fetch_all(self) -> list:
        """Every row of the table, ordered by id. Empty table gives []."""
        return self._fetch_many(build_select(self.schema))

    def fetch_one(self, key: int) -> Optional[Any]:
        """
        Fetch a single row by primary key.

        Returns:
            A model instance, or None if no row has that key.
        """
        plan = build_select(self.schema, KEY_COLUMN, key)
        with self.db.cursor() as cur:
            self._execute(cur, plan)
            row = cur.fetchone()
        return self.schema.from_row(row) if row else None

    def get(self, key: int):
        """Like fetch_one, but raises NotFoundError instead of returning None."""
        resource = self.fetch_one(key)
        if resource is None:
            raise NotFoundError(self.schema.kind, key)
        return resource

    def fetch_by(self, column: str, value: Any, prefix: bool = False) -> list:
        """
        Fetch the rows whose ``column`` equals ``value``.

        Args:
            column: Column to match; must belong to the schema.
            value: Value to match.
            prefix: Match rows whose column starts with ``value`` instead.

        Raises:
            ValidationError: Unknown column, or a non-string prefix.
        """
        column = self.schema.lookup_column(column)
        if prefix and not isinstance(value, str):
            raise ValidationError(f"Prefix search on {column} needs a string", column)
        return self._fetch_many(build_select(self.schema, column, value, prefix=prefix))

    # ── UPDATE ────────────────────────────────────────────

    def update(self, key: int, partial: Union[Partial, Any]) -> Optional[Any]:
        """
        Apply a sparse update and return the row as stored afterwards.

        Args:
            key: Primary key of the row.
            partial: A Partial (explicit presence), or a bare model instance
                whose non-zero fields are taken as the ones to change.

        Returns:
            The updated model instance, or None if no row has that key.
        """
        if not isinstance(partial, Partial):
            partial = Partial.from_instance(self.schema, partial)
        now = self._clock()
        plan = build_update(
            self.schema, partial, KEY_COLUMN, key, always=[("updated_at", now)]
        )
        with self.db.cursor() as cur:
            self._execute(cur, plan)
            row = cur.fetchone()
        if row is None:
            return None
        logger.info(
            f"Updated {self.schema.kind} #{key} "
            f"({', '.join(sorted(partial.present)) or 'timestamp only'})"
        )
        return self.schema.from_row(row)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, key: int) -> bool:
        """
        Delete a row by primary key.

        Returns:
            True if a row was deleted, False if none had that key.
        """
        plan = build_delete(self.schema, KEY_COLUMN, key)
        with self.db.cursor() as cur:
            self._execute(cur, plan)
            deleted = cur.fetchone() is not None
        if deleted:
            logger.info(f"Deleted {self.schema.kind} #{key}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    def _fetch_many(self, plan: QueryPlan) -> list:
        with self.db.cursor() as cur:
            self._execute(cur, plan)
            rows = cur.fetchall()
        return self.schema.from_rows(rows)

    @staticmethod
    def _execute(cur, plan: QueryPlan) -> None:
        logger.debug(f"SQL: {plan.text} | {plan.params}")
        cur.execute(plan.text, plan.params)
