"""Comparación de estrategias para mantener ordenado el arreglo de candidatos.

- resort:    reordenar todo el sufijo en cada paso
- insertion: colocar el padre al frente y desplazarlo elemento a elemento
- binary:    búsqueda binaria del punto de inserción + desplazamiento en bloque

Las tres parten del mismo arreglo ya ordenado; sólo se mide la fase de fusión.
"""

from __future__ import annotations

import os
import time
from operator import attrgetter
from typing import Callable, Dict

import pandas as pd
from loguru import logger

# config define MPLBACKEND; debe importarse antes que pyplot
from . import config
import matplotlib.pyplot as plt

from .freqs import random_table
from .huffman import (
    CandidateArray,
    HuffNode,
    create_internal,
    populate_tree,
    release_tree,
    weighted_path_length,
)


def _merge_front(index: CandidateArray) -> HuffNode:
    # fusiona los dos primeros vivos y deja el padre en start+1
    s = index.start
    parent = create_internal(index.slots[s], index.slots[s + 1])
    index.slots[s] = None
    index.slots[s + 1] = parent
    index.start += 1
    return parent


def populate_tree_resort(index: CandidateArray) -> HuffNode:
    while len(index) > 1:
        _merge_front(index)
        index.slots[index.start:] = sorted(index.slots[index.start:], key=attrgetter("weight"))
    return index.slots[-1]


def populate_tree_insertion(index: CandidateArray) -> HuffNode:
    while len(index) > 1:
        parent = _merge_front(index)
        i = index.start
        while i + 1 < len(index.slots) and index.slots[i + 1].weight < parent.weight:
            index.slots[i] = index.slots[i + 1]
            i += 1
        index.slots[i] = parent
    return index.slots[-1]


STRATEGIES: Dict[str, Callable[[CandidateArray], HuffNode]] = {
    "resort": populate_tree_resort,
    "insertion": populate_tree_insertion,
    "binary": populate_tree,
}


def run_benchmark(size: int = config.BENCH_SIZE, modulus: int = config.BENCH_MODULUS, seed: int = None,
                  strategies=None) -> pd.DataFrame:
    """Mide cada estrategia sobre la misma tabla aleatoria."""
    table = random_table(size, modulus, seed=seed)
    rows = []
    for name in strategies or STRATEGIES:
        populate = STRATEGIES[name]
        index = CandidateArray.from_frequencies(table)
        t0 = time.perf_counter()
        root = populate(index)
        dt = time.perf_counter() - t0
        bits = weighted_path_length(root)
        release_tree(root)
        logger.info("{}: {:.6f}s ({} bits)", name, dt, bits)
        rows.append((name, len(table), dt, bits))
    return pd.DataFrame(rows, columns=["Estrategia", "Símbolos", "Tiempo [s]", "Bits totales"])


def save_benchmark(out_dir: str, df: pd.DataFrame):
    """Guarda CSV y gráfico de barras de los tiempos."""
    os.makedirs(out_dir, exist_ok=True)
    csv_path = os.path.join(out_dir, "benchmark.csv")
    df.to_csv(csv_path, index=False)

    fig_path = os.path.join(out_dir, "benchmark.png")
    plt.figure()
    plt.bar(df["Estrategia"], df["Tiempo [s]"])
    plt.xlabel("Estrategia")
    plt.ylabel("Tiempo [s]")
    plt.title(f"Construcción del árbol ({int(df['Símbolos'].iloc[0])} símbolos)")
    plt.tight_layout()
    plt.savefig(fig_path, dpi=140)
    plt.close()
    return csv_path, fig_path
