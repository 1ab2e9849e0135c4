"""Connected regions in a grid of cells."""

from __future__ import annotations

from collections.abc import Sequence


def largest_piece(cake: Sequence[Sequence[int]]) -> int:
    """Size of the largest 4-connected region of cells equal to 1.

    Raises ValueError when the rows differ in length.
    """
    rows = [list(row) for row in cake]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows of the grid must have the same length")
    height = len(rows)
    width = len(rows[0]) if rows else 0

    seen: set[tuple[int, int]] = set()
    best = 0
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != 1 or (r, c) in seen:
                continue
            seen.add((r, c))
            stack = [(r, c)]
            size = 0
            while stack:
                y, x = stack.pop()
                size += 1
                for ny, nx in ((y + 1, x), (y, x - 1), (y - 1, x), (y, x + 1)):
                    if (
                        0 <= ny < height
                        and 0 <= nx < width
                        and (ny, nx) not in seen
                        and rows[ny][nx] == 1
                    ):
                        seen.add((ny, nx))
                        stack.append((ny, nx))
            best = max(best, size)
    return best