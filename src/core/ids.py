"""Short opaque identifiers for dashboard entities."""

from __future__ import annotations

import secrets
import string
from collections.abc import Iterable

_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 8


def new_id(existing: Iterable[str] = ()) -> str:
    """Return a random base-36 id not present in ``existing``.

    Not cryptographically meaningful; collisions are only checked against the
    collection the id is about to join.
    """
    taken = set(existing)
    while True:
        candidate = "".join(secrets.choice(_ALPHABET) for _ in range(ID_LENGTH))
        if candidate not in taken:
            return candidate
