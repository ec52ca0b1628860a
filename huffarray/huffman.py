"""Árbol de Huffman sobre un arreglo ordenado de candidatos (sin heap).

El arreglo de candidatos se ordena una sola vez (orden estable por peso). En
cada paso se fusionan los dos candidatos de menor peso, se busca el punto de
inserción del padre con búsqueda binaria sobre el sufijo vivo y se hace
espacio con un único desplazamiento en bloque.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from operator import attrgetter
from typing import Callable, Dict, Iterator, List, Optional

from loguru import logger


class HuffmanError(Exception):
    """Error base del núcleo de Huffman."""


class TooFewSymbolsError(HuffmanError, ValueError):
    """Menos de dos símbolos distintos: no se puede formar un árbol binario."""


class SymbolNotFoundError(HuffmanError, LookupError):
    """Se pidió la codificación de un símbolo que no está en el árbol."""


class HuffNode:
    def __init__(self, weight: int, left: Optional[HuffNode] = None, right: Optional[HuffNode] = None):
        self.weight = weight
        self.left = left
        self.right = right
        self.owned = False  # True una vez que es hijo de otro nodo

    @property
    def is_leaf(self) -> bool:
        return False


class Leaf(HuffNode):
    def __init__(self, symbol, weight: int):
        super().__init__(weight)
        self.symbol = symbol

    @property
    def is_leaf(self) -> bool:
        return True

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.weight})"


class Internal(HuffNode):
    def __init__(self, left: HuffNode, right: HuffNode):
        super().__init__(left.weight + right.weight, left, right)

    def __repr__(self):
        return f"Internal({self.weight})"


def create_leaf(symbol, weight: int) -> Leaf:
    if weight <= 0:
        raise ValueError(f"La hoja {symbol!r} necesita frecuencia > 0 (recibido {weight})")
    return Leaf(symbol, weight)


def create_internal(left: HuffNode, right: HuffNode, weight: Optional[int] = None) -> Internal:
    """Crea el padre de `left` y `right`; la propiedad de ambos pasa al padre."""
    if left is None or right is None:
        raise ValueError("Un nodo interno necesita exactamente dos hijos")
    if left is right or left.owned or right.owned:
        raise ValueError("El nodo ya pertenece a otro padre")
    if weight is not None and weight != left.weight + right.weight:
        raise ValueError(f"Peso {weight} distinto de {left.weight} + {right.weight}")
    node = Internal(left, right)
    left.owned = right.owned = True
    return node


def release_tree(root: Optional[HuffNode]) -> int:
    """Libera (desconecta) todos los nodos alcanzables desde root. Devuelve cuántos."""
    released = 0
    stack = [root] if root is not None else []
    while stack:
        n = stack.pop()
        if n.left is not None:
            stack.append(n.left)
        if n.right is not None:
            stack.append(n.right)
        n.left = n.right = None
        released += 1
    return released


class CandidateArray:
    """Arreglo de candidatos ordenado por peso con cursor `start` explícito.

    `slots[:start]` son huecos ya consumidos (None); `slots[start:]` es el
    sufijo vivo, siempre no decreciente en peso.
    """

    def __init__(self, nodes: List[HuffNode]):
        if len(nodes) < 2:
            raise TooFewSymbolsError(f"Se necesitan al menos 2 símbolos distintos (hay {len(nodes)})")
        # sorted() es estable: en empate se conserva el orden de enumeración
        self.slots: List[Optional[HuffNode]] = sorted(nodes, key=attrgetter("weight"))
        self.start = 0

    @classmethod
    def from_frequencies(cls, freqs: Dict[object, int]) -> CandidateArray:
        nodes = []
        for sym in sorted(freqs):
            f = int(freqs[sym])
            if f < 0:
                raise ValueError(f"Frecuencia negativa para {sym!r}: {f}")
            if f:
                nodes.append(create_leaf(sym, f))
        return cls(nodes)

    def __len__(self) -> int:
        return len(self.slots) - self.start

    def suffix(self) -> List[HuffNode]:
        return list(self.slots[self.start:])

    def find_insertion_point(self, key: int, start: Optional[int] = None) -> int:
        """Búsqueda binaria de `key` en slots[start:].

        Con coincidencia exacta devuelve ese índice; si no, `low - 1`, que es
        la posición que debe ocupar el nuevo nodo tras el desplazamiento.
        """
        low = self.start if start is None else start
        high = len(self.slots) - 1
        while low <= high:
            mid = (low + high) // 2
            w = self.slots[mid].weight
            if key > w:
                low = mid + 1
            elif key < w:
                high = mid - 1
            else:
                return mid
        return low - 1

    def remove_two_insert_one(self, parent: HuffNode, at: int):
        s = self.start
        self.slots[s] = self.slots[s + 1] = None
        if at > s + 1:
            # desplazamiento en bloque: slots[s+1..at] -> slots[s..at-1]
            self.slots[s:at] = self.slots[s + 1:at + 1]
        self.slots[at] = parent
        self.start += 1


def populate_tree(index: CandidateArray,
                  observer: Optional[Callable[[CandidateArray], None]] = None) -> HuffNode:
    """Vacía el arreglo de candidatos hasta dejar una sola raíz y la devuelve."""
    if len(index) < 2:
        raise TooFewSymbolsError(f"Se necesitan al menos 2 candidatos (hay {len(index)})")

    n_leaves = len(index)
    while len(index) > 1:
        left = index.slots[index.start]
        right = index.slots[index.start + 1]
        parent = create_internal(left, right)
        at = index.find_insertion_point(parent.weight, index.start)
        index.remove_two_insert_one(parent, at)
        if observer is not None:
            observer(index)

    root = index.slots[-1]
    logger.debug("Árbol construido: {} hojas, peso total {}", n_leaves, root.weight)
    return root


def build_tree(freqs: Dict[object, int],
               observer: Optional[Callable[[CandidateArray], None]] = None) -> HuffNode:
    return populate_tree(CandidateArray.from_frequencies(freqs), observer=observer)


@contextmanager
def huffman_tree(freqs: Dict[object, int]) -> Iterator[HuffNode]:
    """Construye el árbol y garantiza su liberación al salir del bloque."""
    root = build_tree(freqs)
    try:
        yield root
    finally:
        n = release_tree(root)
        logger.debug("Liberados {} nodos", n)


@dataclass
class Encoding:
    symbol: object
    bits: str
    length: int
    freq: int
    leaf: Leaf


def find_encoding(node: Optional[HuffNode], target, path: List[str]) -> Optional[Leaf]:
    # El camino se acumula desde la hoja hacia la raíz (orden inverso)
    if node is None:
        return None
    if node.is_leaf:
        return node if node.symbol == target else None
    found = find_encoding(node.left, target, path)
    if found is not None:
        path.append("0")
        return found
    found = find_encoding(node.right, target, path)
    if found is not None:
        path.append("1")
        return found
    return None


def encode(root: HuffNode, symbol) -> Encoding:
    path: List[str] = []
    leaf = find_encoding(root, symbol, path)
    if leaf is None:
        raise SymbolNotFoundError(symbol)
    path.reverse()
    bits = "".join(path)
    return Encoding(symbol=symbol, bits=bits, length=len(bits), freq=leaf.weight, leaf=leaf)


def leaves(root: Optional[HuffNode]) -> List[Leaf]:
    out = []
    stack = [root] if root is not None else []
    while stack:
        n = stack.pop()
        if n.is_leaf:
            out.append(n)
        else:
            stack.append(n.right)
            stack.append(n.left)
    return out


def encode_all(root: HuffNode) -> List[Encoding]:
    """Codificación de cada hoja, en orden ascendente de símbolo."""
    symbols = sorted(leaf.symbol for leaf in leaves(root))
    return [encode(root, s) for s in symbols]


def total_bits(encodings: List[Encoding]) -> int:
    return sum(e.length * e.freq for e in encodings)


def storage_bytes(bits: int, bits_per_byte: int = 8) -> int:
    return bits // bits_per_byte + (bits % bits_per_byte != 0)


def tree_height(node: Optional[HuffNode]) -> int:
    if node is None:
        return -1
    return max(tree_height(node.left), tree_height(node.right)) + 1


def weighted_path_length(root: Optional[HuffNode]) -> int:
    """Σ profundidad × peso sobre las hojas (= total_bits de encode_all, sin recursión)."""
    total = 0
    stack = [(root, 0)] if root is not None else []
    while stack:
        n, depth = stack.pop()
        if n.is_leaf:
            total += depth * n.weight
        else:
            stack.append((n.left, depth + 1))
            stack.append((n.right, depth + 1))
    return total
