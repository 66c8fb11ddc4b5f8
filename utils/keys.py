"""
utils/keys.py
-------------
Parsing of resource identifiers taken from request paths.
"""

import re

from errors import ValidationError

_KEY_RE = re.compile(r"^\d+$")


def parse_key(raw, label: str = "ID") -> int:
    """
    Convert a path segment such as ``"42"`` into a row key.

    Args:
        raw: The identifier as received (string or int).
        label: Name used in the error message, e.g. ``"character ID"``.

    Raises:
        ValidationError: If ``raw`` is not a positive integer.
    """
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid {label}: {raw!r}")
    if isinstance(raw, int):
        key = raw
    elif isinstance(raw, str) and _KEY_RE.match(raw.strip()):
        key = int(raw.strip())
    else:
        raise ValidationError(f"Invalid {label}: {raw!r}")
    if key < 1:
        raise ValidationError(f"Invalid {label}: {raw!r}")
    return key
