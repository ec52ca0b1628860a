"""Parámetros del proyecto. Cada uno puede sobrescribirse con una variable de entorno."""

import os
import sys

from loguru import logger

# Forzar backend no interactivo para Matplotlib
os.environ.setdefault("MPLBACKEND", "Agg")

TABLE_SIZE = 256          # símbolos posibles (bytes)
BITS_PER_BYTE = 8

GRID_XOFFSET = 2          # separación horizontal entre nodos
GRID_YOFFSET = 2          # separación vertical en la rejilla de texto
PLOT_YOFFSET = 3          # separación vertical en el gráfico

BENCH_SIZE = int(os.environ.get("HUFFARRAY_BENCH_SIZE", "5000"))
BENCH_MODULUS = int(os.environ.get("HUFFARRAY_BENCH_MODULUS", "10000"))

OUTPUT_DIR = os.environ.get("HUFFARRAY_OUTPUT_DIR", "outputs")
LOG_LEVEL = os.environ.get("HUFFARRAY_LOG_LEVEL", "WARNING")


def configure_logging(level: str = None):
    logger.remove()
    level = level or os.environ.get("HUFFARRAY_LOG_LEVEL", LOG_LEVEL)
    logger.add(sys.stderr, level=level.upper())
