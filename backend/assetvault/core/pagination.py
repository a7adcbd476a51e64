"""Keyset Pagination — pure page-bound and cursor helpers, no IO.

Invariants:
    - first_id / last_id reflect rows actually returned, never the requested cursor
    - An empty page reports first_id == last_id == 0
    - Ascending traversal starts at cursor 0; descending has no sentinel and
      starts at max_id + 1

Design Decisions:
    - Separate from the SQL cursor logic in services/: bound computation is shared
      by plain and favourite-aware listing and tested without a database
"""

from typing import Sequence


def page_bounds(ids: Sequence[int]) -> tuple[int, int]:
    """Return (first_id, last_id) of an ordered id sequence, (0, 0) when empty."""
    if not ids:
        return 0, 0
    return ids[0], ids[-1]


def descending_start(max_id: int) -> int:
    """Cursor that makes a descending query return the newest rows first."""
    return max(max_id, 0) + 1


def next_cursor(last_id: int, is_desc: bool) -> int | None:
    """Cursor for the following page, or None when the traversal is exhausted.

    An empty page (last_id == 0) ends the traversal in either direction, and a
    descending page ending at id 1 has nothing below it.
    """
    if last_id == 0:
        return None
    if is_desc and last_id <= 1:
        return None
    return last_id
