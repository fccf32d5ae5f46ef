"""Recently decoded VINs, newest first."""

from typing import List

MAX_RECENTS = 10


def push_recent(recents: List[str], vin: str) -> List[str]:
    """Return a new list with `vin` moved to the front, capped at MAX_RECENTS."""
    return ([vin] + [r for r in recents if r != vin])[:MAX_RECENTS]
