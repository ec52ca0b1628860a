import matplotlib
matplotlib.use("Agg")

from huffarray.huffman import build_tree
from huffarray.treeplot import draw_tree, node_colour, save_tree_plot


def test_node_colour_by_height():
    assert node_colour(1)[0] == 0.0
    assert node_colour(2)[0] == 128 / 255.0
    assert node_colour(1000)[0] == 254 / 255.0


def test_draw_tree_has_one_marker_per_node():
    root = build_tree({"A": 1, "B": 1, "C": 1, "D": 1})
    fig = draw_tree(root)
    ax = fig.axes[0]
    assert len(ax.collections) == 7
    assert sorted(t.get_text() for t in ax.texts) == ["A", "B", "C", "D"]


def test_save_tree_plot(tmp_path):
    root = build_tree({ord("a"): 3, ord("b"): 1, ord("c"): 1})
    out = tmp_path / "tree.png"
    save_tree_plot(root, str(out), subtitle="prueba.txt")
    assert out.exists()
    assert out.read_bytes()[:4] == b"\x89PNG"
