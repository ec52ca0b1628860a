"""Dibujo del árbol de Huffman en una rejilla de caracteres de ancho fijo.

Cada hijo izquierdo va YOFFSET filas por debajo de su padre y cada hijo
derecho en la misma fila, desplazado hacia la derecha. Para que el dibujo sea
compacto, el desplazamiento de un hijo derecho interno es el número de ramas
derechas del hijo izquierdo de su padre, acotado por la mayor x usada hasta el
momento, más XOFFSET.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .config import GRID_XOFFSET, GRID_YOFFSET
from .freqs import glyph
from .huffman import HuffNode, tree_height

PNODE = "#"
HBRANCH = "-"
VBRANCH = "|"
EMPTY = " "


def right_branch_offset(n: HuffNode, xoffset: int = GRID_XOFFSET) -> int:
    """Distancia de dibujo entre un nodo y su hijo derecho."""
    if n is None:
        return 0
    cnt = right_branch_offset(n.left, xoffset) + right_branch_offset(n.right, xoffset)
    return cnt + xoffset if n.right is not None else 0


def grid_height(n: HuffNode, height: int = 0, yoffset: int = GRID_YOFFSET) -> int:
    """Fila más baja alcanzada (camino con más ramas izquierdas)."""
    if n is None:
        return 0
    deepest = max(grid_height(n.left, height + yoffset, yoffset),
                  grid_height(n.right, height, yoffset))
    return max(deepest, height)


def layout(root: HuffNode, xoffset: int = GRID_XOFFSET,
           yoffset: int = GRID_YOFFSET) -> Tuple[List[Tuple[str, HuffNode, int, int]], int, int]:
    """
    Recorre el árbol asignando (fila, columna) a cada nodo.
    Devuelve (steps, ylen, xlen): steps es la secuencia ("place", n, y, x) en
    preorden intercalada con ("branches", n, y, x) en postorden, que es el
    orden en que hay que dibujar.
    """
    ylen = grid_height(root, 0, yoffset) + yoffset
    xlen = right_branch_offset(root, xoffset) + xoffset
    steps = []
    xmax = 0

    def place(n, y, x):
        nonlocal xmax
        if n is None:
            return
        xmax = max(xmax, x)
        dx = 0
        if tree_height(n.right) > 0:
            dx = right_branch_offset(n.left, xoffset)
        steps.append(("place", n, y, x))
        place(n.left, y + yoffset, x)
        # xmax ya incluye el subárbol izquierdo
        place(n.right, y, min(x + dx, xmax) + xoffset)
        steps.append(("branches", n, y, x))

    place(root, 0, 0)
    return steps, ylen, xlen


def render_grid(root: HuffNode, xoffset: int = GRID_XOFFSET, yoffset: int = GRID_YOFFSET) -> np.ndarray:
    steps, ylen, xlen = layout(root, xoffset, yoffset)
    grid = np.full((ylen, xlen), EMPTY, dtype="<U1")

    for kind, n, y, x in steps:
        if kind == "place":
            grid[y, x] = glyph(n.symbol) if n.is_leaf else PNODE
            continue
        if n.left is not None:
            grid[y + 1:y + yoffset, x] = VBRANCH
        if n.right is not None:
            i = x + 1
            while i < xlen and grid[y, i] == EMPTY:
                grid[y, i] = HBRANCH
                i += 1
    return grid


def grid_lines(root: HuffNode, xoffset: int = GRID_XOFFSET, yoffset: int = GRID_YOFFSET) -> List[str]:
    grid = render_grid(root, xoffset, yoffset)
    return ["".join(row) for row in grid]


def format_tree(root: HuffNode) -> str:
    return "\n".join(grid_lines(root)) + "\n"
