"""Identifier generation for in-memory and per-user collections."""
import time
from typing import Iterable, Optional


def generate_id(existing: Iterable[str] = (), now: Optional[float] = None) -> str:
    """
    Generate an identifier from the creation timestamp.

    The identifier is the creation time in milliseconds rendered as a
    decimal string. If it is already taken in the target collection it is
    bumped by one until it is unique.

    Args:
        existing: Identifiers already present in the collection
        now: Creation time in seconds since the epoch (defaults to now)

    Returns:
        Identifier string unique within ``existing``

    Example:
        >>> generate_id(now=1700000000.0)
        '1700000000000'
        >>> generate_id(["1700000000000"], now=1700000000.0)
        '1700000000001'
    """
    taken = set(existing)
    candidate = int((time.time() if now is None else now) * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)
