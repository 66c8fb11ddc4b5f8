"""
models/schema.py
----------------
Declarative description of a resource table.

A ``ResourceSchema`` lists the table's columns as ``FieldDescriptor``s in the
order a full-row read returns them. Every table also carries an ``id``
identity column (first) and ``created_at``/``updated_at`` (last); those are
managed by the repository and are not described by descriptors.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence

from db import array_codec
from errors import CodecError, StoreError, ValidationError

KEY_COLUMN = "id"
TIMESTAMP_COLUMNS = ("created_at", "updated_at")
SERVER_MANAGED = frozenset((KEY_COLUMN,) + TIMESTAMP_COLUMNS)


class FieldKind(Enum):
    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"
    INT_ARRAY = "int_array"


# Zero value of each NOT NULL kind; arrays and nullable columns are zero only when None.
_ZERO_VALUES = {
    FieldKind.INTEGER: 0,
    FieldKind.STRING: "",
    FieldKind.BOOLEAN: False,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One stored column of a resource.

    Attributes:
        column: Column name in the table.
        kind: Storage kind of the column.
        nullable: Whether the column accepts NULL.
        attr: Attribute name on the model (defaults to ``column``).
    """
    column: str
    kind: FieldKind
    nullable: bool = False
    attr: str = ""

    def __post_init__(self):
        if not self.attr:
            object.__setattr__(self, "attr", self.column)

    def get(self, instance) -> Any:
        return getattr(instance, self.attr)

    def is_zero(self, value: Any) -> bool:
        """True if ``value`` equals the zero value of this field's type."""
        if value is None:
            return True
        if self.nullable:
            return False
        zero = _ZERO_VALUES.get(self.kind)
        return zero is not None and value == zero and type(value) is type(zero)

    def is_present(self, partial: "Partial") -> bool:
        """True if the caller supplied this field in the update payload."""
        return self.attr in partial.present

    def coerce(self, value: Any) -> Any:
        """
        Validate a caller-supplied value for this field.

        Raises:
            ValidationError: On a type mismatch or a NULL for a NOT NULL column.
        """
        if value is None:
            if not self.nullable:
                raise ValidationError(f"{self.attr} may not be null", self.attr)
            return None

        if self.kind is FieldKind.INT_ARRAY:
            try:
                return array_codec.encode(value)
            except CodecError as e:
                raise ValidationError(f"{self.attr}: {e}", self.attr) from e

        if self.kind is FieldKind.INTEGER:
            ok = isinstance(value, int) and not isinstance(value, bool)
        elif self.kind is FieldKind.STRING:
            ok = isinstance(value, str)
        else:
            ok = isinstance(value, bool)
        if not ok:
            raise ValidationError(
                f"{self.attr} must be {self.kind.value}, got {type(value).__name__}",
                self.attr,
            )
        return value

    def bind(self, instance) -> Any:
        """Value to hand to the driver for this field of ``instance``."""
        value = self.get(instance)
        if self.kind is FieldKind.INT_ARRAY:
            return array_codec.encode(value)
        return value

    def load(self, instance, raw: Any) -> None:
        """Store a raw column value read from the database onto ``instance``."""
        if self.kind is FieldKind.INT_ARRAY and raw is not None:
            # The registered typecaster already decodes; raw text only shows up without it.
            raw = array_codec.decode(raw) if isinstance(raw, (str, bytes)) else list(raw)
        setattr(instance, self.attr, raw)


@dataclass(frozen=True)
class Partial:
    """
    A sparse update: a resource instance plus the attributes actually supplied.

    Attributes not in ``present`` are left untouched by the update, whatever
    value the instance holds for them.
    """
    resource: Any
    present: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_instance(cls, schema: "ResourceSchema", instance) -> "Partial":
        """
        Infer presence from zero values (the legacy API behavior).

        A field holding its type's zero value (``""``, ``0``, ``None``) counts
        as omitted, so it cannot be set to that value through this path.
        Nullable columns are omitted only when None; ``0`` is written.
        """
        present = frozenset(
            f.attr for f in schema.fields if not f.is_zero(f.get(instance))
        )
        return cls(instance, present)


@dataclass(frozen=True)
class ResourceSchema:
    """
    Static description of one resource kind.

    Attributes:
        kind: Resource kind name, also its URL collection name.
        table: Table name.
        model: Dataclass the rows map onto; every field must have a default.
        fields: Column descriptors in full-row scan order.
    """
    kind: str
    table: str
    model: type
    fields: tuple[FieldDescriptor, ...]
    _by_attr: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        by_attr = {f.attr: f for f in self.fields}
        by_column = {f.column: f for f in self.fields}
        if len(by_attr) != len(self.fields) or len(by_column) != len(self.fields):
            raise ValueError(f"Duplicate field in schema for {self.table}")
        if SERVER_MANAGED & (set(by_attr) | set(by_column)):
            raise ValueError(f"Schema for {self.table} redeclares a server-managed column")
        object.__setattr__(self, "_by_attr", by_attr)

    @property
    def columns(self) -> tuple[str, ...]:
        """Descriptor columns, in scan order."""
        return tuple(f.column for f in self.fields)

    @property
    def all_columns(self) -> tuple[str, ...]:
        """Every column of a full row: id, descriptor columns, timestamps."""
        return (KEY_COLUMN,) + self.columns + TIMESTAMP_COLUMNS

    def lookup_column(self, column: str) -> str:
        """Return ``column`` if it may be used in a WHERE clause."""
        if column not in self.all_columns:
            raise ValidationError(f"Unknown column {column!r} for {self.kind}", column)
        return column

    def build(self, data: Mapping[str, Any]):
        """
        Build a new instance from a full representation (insert payload).

        Omitted fields keep the model's defaults.
        """
        return self.model(**self._coerce(data))

    def partial(self, data: Mapping[str, Any]) -> Partial:
        """Build a Partial whose presence set is exactly the supplied keys."""
        values = self._coerce(data)
        return Partial(self.model(**values), frozenset(values))

    def _coerce(self, data: Mapping[str, Any]) -> dict:
        if not isinstance(data, Mapping):
            raise ValidationError(f"{self.kind} payload must be an object")
        values = {}
        for key, value in data.items():
            if key in SERVER_MANAGED:
                continue
            descriptor = self._by_attr.get(key)
            if descriptor is None:
                raise ValidationError(f"Unknown field {key!r} for {self.kind}", key)
            values[key] = descriptor.coerce(value)
        return values

    def from_row(self, row: Sequence[Any]):
        """Map a full row (in ``all_columns`` order) onto a new model instance."""
        if len(row) != len(self.all_columns):
            raise StoreError(
                f"Expected {len(self.all_columns)} columns from {self.table}, got {len(row)}"
            )
        instance = self.model()
        instance.id = row[0]
        for descriptor, raw in zip(self.fields, row[1:-2]):
            descriptor.load(instance, raw)
        instance.created_at, instance.updated_at = row[-2], row[-1]
        return instance

    def from_rows(self, rows: Iterable[Sequence[Any]]) -> list:
        return [self.from_row(r) for r in rows]


def integer(name: str, nullable: bool = False) -> FieldDescriptor:
    """Shorthand constructors used by the model modules to declare their columns."""
    return FieldDescriptor(name, FieldKind.INTEGER, nullable)


def string(name: str, nullable: bool = False) -> FieldDescriptor:
    return FieldDescriptor(name, FieldKind.STRING, nullable)


def int_array(name: str, nullable: bool = False) -> FieldDescriptor:
    return FieldDescriptor(name, FieldKind.INT_ARRAY, nullable)

