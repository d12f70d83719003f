"""Scroll reconciliation.

After every cursor or viewport change the cursor must end up inside the
visible window and on an existing line and column of the store. The
reconciler prefers moving the viewport offset (the document scrolls) and
only clamps the cursor once the offset has reached its bound.
"""

from __future__ import annotations

from femto.lines import LineStore
from femto.viewport import Cursor, Viewport


def _reconcile_axis(
    pos: int,
    offset: int,
    visible: int,
    ceiling: int,
    limit: int,
) -> tuple[int, int]:
    """Reconcile one axis.

    Returns the new ``(pos, offset)`` with ``0 <= pos < visible``,
    ``0 <= offset <= ceiling`` and ``offset + pos <= limit``.
    """
    # Offset out of its bounds (content shrank under the viewport, or a raw
    # scroll overshot): move it back and keep the absolute coordinate.
    if offset < 0:
        pos += offset
        offset = 0
    elif offset > ceiling:
        pos += offset - ceiling
        offset = ceiling

    if pos < 0:
        shift = min(-pos, offset)
        offset -= shift
        pos = max(pos + shift, 0)
    elif pos >= visible:
        shift = min(pos - visible + 1, ceiling - offset)
        offset += shift
        pos = min(pos - shift, visible - 1)

    if offset + pos > limit:
        pos = limit - offset

    return pos, offset


def reconcile(
    cursor: Cursor,
    viewport: Viewport,
    store: LineStore,
    visible_rows: int,
    visible_cols: int,
) -> None:
    """Restore the cursor visibility invariant in place.

    Vertical first, then horizontal against the line at the reconciled
    absolute row. The store must hold at least one line.
    """
    if store.count == 0:
        raise ValueError("cannot reconcile against an empty line store")
    visible_rows = max(1, visible_rows)
    visible_cols = max(1, visible_cols)

    cursor.row, viewport.row_offset = _reconcile_axis(
        cursor.row,
        viewport.row_offset,
        visible_rows,
        ceiling=max(0, store.count - visible_rows),
        limit=store.count - 1,
    )

    size = store.line_size(viewport.row_offset + cursor.row)
    cursor.col, viewport.col_offset = _reconcile_axis(
        cursor.col,
        viewport.col_offset,
        visible_cols,
        ceiling=max(0, size - visible_cols + 1),
        limit=size,
    )
