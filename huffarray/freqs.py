from typing import Dict, Tuple

import numpy as np

from .config import TABLE_SIZE


def count_symbols(data: bytes, letters_only: bool = False) -> Dict[int, int]:
    """
    Histograma de bytes de `data`.
    Con letters_only=True sólo cuenta letras ASCII, pasadas a mayúsculas.
    Devuelve {byte: frecuencia} con las entradas no nulas, en orden de byte.
    """
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    if letters_only:
        lower = (arr >= ord("a")) & (arr <= ord("z"))
        arr = np.where(lower, arr - 32, arr).astype(np.uint8)
        arr = arr[(arr >= ord("A")) & (arr <= ord("Z"))]
    counts = np.bincount(arr, minlength=TABLE_SIZE)
    return {int(s): int(c) for s, c in enumerate(counts) if c}


def freqs_from_file(path: str, letters_only: bool = False) -> Dict[int, int]:
    with open(path, "rb") as f:
        data = f.read()
    return count_symbols(data, letters_only=letters_only)


def entropy_stats(freqs: Dict[int, int], lengths: Dict[int, int] = None) -> Tuple[float, float]:
    """
    Calcula:
    - H: entropía de la fuente (bits/símbolo), cota inferior de Huffman
    - Lavg: longitud media de código (bits/símbolo), si se pasan las longitudes
    """
    f = np.array(list(freqs.values()), dtype=np.float64)
    total = f.sum()
    if total <= 0:
        return 0.0, float("nan")
    p = f / total
    H = float(-np.sum(p * np.log2(p)))
    if lengths is None:
        return H, float("nan")
    Lavg = sum(lengths[s] * c for s, c in freqs.items()) / total
    return H, float(Lavg)


def glyph(symbol: int) -> str:
    """Carácter imprimible para un símbolo; '?' si no lo es."""
    if isinstance(symbol, str):
        return symbol
    ch = chr(symbol)
    return ch if ch.isprintable() and symbol < 128 else "?"


def symbol_label(symbol: int) -> str:
    # Mismo formato que la tabla de códigos: 'c' o el código decimal en 3 cifras
    if isinstance(symbol, str):
        return f"'{symbol}'"
    ch = chr(symbol)
    if symbol < 128 and ch.isprintable():
        return f"'{ch}'"
    return f"{symbol:03d}"


def random_table(n: int, modulus: int, seed: int = None) -> Dict[int, int]:
    """Tabla de n frecuencias aleatorias en [0, modulus); las nulas se descartan."""
    rng = np.random.default_rng(seed)
    vals = rng.integers(0, modulus, size=n)
    return {i: int(v) for i, v in enumerate(vals) if v}
