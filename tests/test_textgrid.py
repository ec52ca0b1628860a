from huffarray.huffman import build_tree
from huffarray.textgrid import format_tree, grid_height, grid_lines, layout, right_branch_offset


def test_two_symbols():
    root = build_tree({"A": 1, "B": 2})
    assert grid_lines(root) == [
        "#-B ",
        "|   ",
        "A   ",
        "    ",
    ]


def test_left_heavy_tree():
    # A y B se fusionan primero y quedan a la izquierda de C
    root = build_tree({"A": 1, "B": 2, "C": 4})
    assert grid_lines(root) == [
        "#-C   ",
        "|     ",
        "#-B   ",
        "|     ",
        "A     ",
        "      ",
    ]


def test_internal_right_child_is_shifted():
    root = build_tree({"A": 1, "B": 1, "C": 1, "D": 1})
    assert grid_lines(root) == [
        "#---#-D ",
        "|   |   ",
        "#-B C   ",
        "|       ",
        "A       ",
        "        ",
    ]


def test_grid_dimensions():
    root = build_tree({"A": 1, "B": 1, "C": 1, "D": 1})
    assert right_branch_offset(root) == 6
    assert grid_height(root) == 4
    steps, ylen, xlen = layout(root, 2, 3)
    assert (ylen, xlen) == (9, 8)
    placed = [(n.symbol, y, x) for kind, n, y, x in steps if kind == "place" and n.is_leaf]
    assert placed == [("A", 6, 0), ("B", 3, 2), ("C", 3, 4), ("D", 0, 6)]


def test_layout_is_independent_between_calls():
    big = build_tree({"A": 1, "B": 1, "C": 1, "D": 1})
    grid_lines(big)
    small = build_tree({"A": 1, "B": 2})
    assert grid_lines(small)[0] == "#-B "


def test_format_tree():
    root = build_tree({"A": 1, "B": 2})
    assert format_tree(root) == "#-B \n|   \nA   \n    \n"
