import functools


def neighbors(cols: int, rows: int, cell: int) -> tuple[int, ...]:
    """Cells adjacent to cell on a row-major cols x rows board.

    Order is above-left, above, above-right, left, right, below-left, below,
    below-right; cells off the board are skipped.
    """
    assert 0 <= cell < cols * rows, cell
    y, x = divmod(cell, cols)
    n = []
    for dy in range(-1, 2):
        ny = y + dy
        if ny < 0 or ny >= rows:
            continue
        for dx in range(-1, 2):
            nx = x + dx
            if nx < 0 or nx >= cols:
                continue
            if dx == 0 and dy == 0:
                continue
            n.append(ny * cols + nx)
    return tuple(n)


@functools.cache
def init_neighbors(cols: int, rows: int) -> tuple[tuple[int, ...], ...]:
    return tuple(neighbors(cols, rows, i) for i in range(0, cols * rows))
