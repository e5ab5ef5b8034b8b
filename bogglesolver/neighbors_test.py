from inline_snapshot import snapshot

from bogglesolver.neighbors import init_neighbors, neighbors


def test_neighbors44():
    # corners
    assert neighbors(4, 4, 0) == (1, 4, 5)
    assert neighbors(4, 4, 3) == (2, 6, 7)
    assert neighbors(4, 4, 12) == (8, 9, 13)
    assert neighbors(4, 4, 15) == (10, 11, 14)
    # edge
    assert neighbors(4, 4, 1) == (0, 2, 4, 5, 6)
    # center
    assert neighbors(4, 4, 5) == (0, 1, 2, 4, 6, 8, 9, 10)


def test_neighbor_counts():
    counts = [len(neighbors(5, 5, i)) for i in range(25)]
    assert counts == snapshot(
        [
            3, 5, 5, 5, 3,
            5, 8, 8, 8, 5,
            5, 8, 8, 8, 5,
            5, 8, 8, 8, 5,
            3, 5, 5, 5, 3,
        ]
    )  # fmt: skip


# This tests proper orientation: 4 columns x 5 rows is row-major.
def test_neighbors45():
    assert neighbors(4, 5, 16) == (12, 13, 17)
    assert neighbors(4, 5, 19) == (14, 15, 18)
    assert neighbors(4, 5, 9) == (4, 5, 6, 8, 10, 12, 13, 14)


def test_thin_boards():
    assert neighbors(1, 1, 0) == ()
    assert neighbors(3, 1, 1) == (0, 2)
    assert neighbors(1, 3, 1) == (0, 2)
    assert neighbors(1, 3, 2) == (1,)


def test_init_neighbors():
    table = init_neighbors(4, 5)
    assert len(table) == 20
    assert table == tuple(neighbors(4, 5, i) for i in range(20))
    assert table[0] == (1, 4, 5)
    assert init_neighbors(4, 5) is table


def test_symmetric():
    for cols, rows in ((2, 3), (4, 4), (5, 3)):
        table = init_neighbors(cols, rows)
        for i, ns in enumerate(table):
            assert i not in ns
            for j in ns:
                assert i in table[j]
