"""Dibujo gráfico del árbol de Huffman con Matplotlib.

Usa la misma disposición que la rejilla de texto (con más separación vertical).
El color de cada nodo y de sus ramas depende de su altura en el árbol.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

# config define MPLBACKEND; debe importarse antes que pyplot
from . import config
import matplotlib.pyplot as plt

from .freqs import glyph
from .huffman import HuffNode, tree_height
from .textgrid import EMPTY, PNODE, layout

NODE_GREEN = 120
NODE_BLUE = 120


def node_colour(height: int) -> Tuple[float, float, float]:
    """Color RGB (0..1): el rojo crece con la altura; las hojas (height=1) no tienen rojo."""
    height = min(height, 255)
    red = 255 - 255 // height
    return red / 255.0, NODE_GREEN / 255.0, NODE_BLUE / 255.0


def draw_tree(root: HuffNode, title: str = "Huffman tree", subtitle: str = "",
              xoffset: int = config.GRID_XOFFSET, yoffset: int = config.PLOT_YOFFSET):
    """Dibuja el árbol y devuelve la figura (el llamador la guarda o la cierra)."""
    steps, ylen, xlen = layout(root, xoffset, yoffset)
    grid = np.full((ylen, xlen), EMPTY, dtype="<U1")

    fig, ax = plt.subplots(figsize=(max(4.0, xlen * 0.35), max(3.0, ylen * 0.35 + 1.0)))
    for kind, n, y, x in steps:
        if kind == "place":
            grid[y, x] = glyph(n.symbol) if n.is_leaf else PNODE
            continue

        h = tree_height(n) + 1
        ax.scatter([x], [y], s=220, color=node_colour(h), zorder=3)
        if n.is_leaf:
            ax.text(x, y, glyph(n.symbol), ha="center", va="center", fontfamily="monospace", zorder=4)
            continue

        branch = node_colour(h - 1)
        ax.plot([x, x], [y, y + yoffset], color=branch, zorder=1)
        # la rama derecha llega hasta el siguiente nodo de la fila
        i = x + 1
        while i < xlen and grid[y, i] == EMPTY:
            i += 1
        ax.plot([x, i], [y, y], color=branch, zorder=1)

    ax.set_xlim(-1, xlen)
    ax.set_ylim(ylen, -1)
    ax.axis("off")
    ax.set_title(f"{title}\n{subtitle}" if subtitle else title, loc="left", fontfamily="monospace")
    fig.tight_layout()
    return fig


def save_tree_plot(root: HuffNode, fname: str, title: str = "Huffman tree", subtitle: str = ""):
    fig = draw_tree(root, title=title, subtitle=subtitle)
    fig.savefig(fname, dpi=140)
    plt.close(fig)
    return fname
