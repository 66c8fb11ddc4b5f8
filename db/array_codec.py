"""
db/array_codec.py
-----------------
Converts between Python lists of integers and PostgreSQL's textual
integer-array representation (``{1,2,3}``).

Only flat arrays of integers are supported: no nesting, no strings and
no NULL elements. A NULL column decodes to ``None``; ``{}`` decodes to ``[]``.
"""

import re
from typing import Iterable, Optional, Union

from psycopg2 import extensions

from errors import CodecError

_INT_RE = re.compile(r"^[+-]?\d+$")

# pg_type OIDs for smallint[], integer[] and bigint[]
INT_ARRAY_OIDS = (1005, 1007, 1016)


def decode(raw: Union[str, bytes, None]) -> Optional[list[int]]:
    """
    Parse a PostgreSQL integer-array literal.

    Args:
        raw: The column text as sent by the server, or None for SQL NULL.

    Returns:
        None for NULL, an empty list for ``{}``, otherwise the integers
        in source order.

    Raises:
        CodecError: If the text is not a flat array of integers.
    """
    if raw is None:
        return None
    if isinstance(raw, (bytes, bytearray, memoryview)):
        raw = bytes(raw).decode("ascii", errors="replace")

    text = raw.strip()
    if len(text) < 2 or text[0] != "{" or text[-1] != "}":
        raise CodecError(f"Not an array literal: {raw!r}")

    inner = text[1:-1].strip()
    if not inner:
        return []

    values = []
    for part in inner.split(","):
        part = part.strip()
        if not _INT_RE.match(part):
            raise CodecError(f"Invalid integer {part!r} in array {raw!r}")
        values.append(int(part))
    return values


def encode(seq: Optional[Iterable[int]]) -> Optional[list[int]]:
    """
    Prepare a sequence of integers for binding as an array parameter.

    psycopg2 adapts the returned list to ``ARRAY[...]``; None binds as NULL.

    Raises:
        CodecError: If the sequence holds anything other than integers.
    """
    if seq is None:
        return None
    if isinstance(seq, (str, bytes)):
        raise CodecError(f"Expected a sequence of integers, got {type(seq).__name__}")

    values = list(seq)
    for value in values:
        # bool is an int subclass but never a valid stat/ID value
        if isinstance(value, bool) or not isinstance(value, int):
            raise CodecError(f"Array element {value!r} is not an integer")
    return values


def _cast(value, cursor):
    return decode(value)


INT_ARRAY = extensions.new_type(INT_ARRAY_OIDS, "INT_ARRAY", _cast)


def register(scope=None) -> None:
    """
    Route every integer-array column read through :func:`decode`.

    Args:
        scope: A connection or cursor to limit the registration to;
            None registers the typecaster process-wide.
    """
    if scope is None:
        extensions.register_type(INT_ARRAY)
    else:
        extensions.register_type(INT_ARRAY, scope)
