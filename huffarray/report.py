import os
from typing import List

import pandas as pd

from .config import BITS_PER_BYTE
from .freqs import entropy_stats, symbol_label
from .huffman import Encoding, storage_bytes, total_bits, tree_height


def format_code_line(enc: Encoding, width: int) -> str:
    """Una línea de la tabla: símbolo, código alineado a `width`, (longitud * frecuencia)."""
    return f"{symbol_label(enc.symbol)} :{enc.bits:>{width}} ({enc.length:3d} * {enc.freq:4d})"


def format_code_table(root, encodings: List[Encoding]) -> str:
    width = tree_height(root) + 1
    lines = [format_code_line(e, width) for e in encodings]
    nbytes = storage_bytes(total_bits(encodings), BITS_PER_BYTE)
    lines.append(f"{nbytes} Bytes")
    return "\n".join(lines) + "\n\n"


def encoding_frame(encodings: List[Encoding]) -> pd.DataFrame:
    df = pd.DataFrame(
        [(e.symbol, symbol_label(e.symbol), e.bits, e.length, e.freq, e.length * e.freq) for e in encodings],
        columns=["Símbolo", "Carácter", "Código", "Longitud", "Frecuencia", "Bits"],
    )
    return df


def save_codes_csv(out_dir: str, encodings: List[Encoding]) -> pd.DataFrame:
    os.makedirs(out_dir, exist_ok=True)
    df = encoding_frame(encodings)
    df.to_csv(os.path.join(out_dir, "codigos_huffman.csv"), index=False)
    return df


def write_markdown(out_dir: str, source: str, encodings: List[Encoding]):
    bits = total_bits(encodings)
    freqs = {e.symbol: e.freq for e in encodings}
    H, Lavg = entropy_stats(freqs, {e.symbol: e.length for e in encodings})
    md = f"""# Código de Huffman

Fuente: `{source}`

| Métrica | Valor |
|---|---|
| Símbolos distintos | {len(encodings)} |
| Símbolos totales | {sum(freqs.values())} |
| Bits codificados | {bits} |
| Bytes (redondeo hacia arriba) | {storage_bytes(bits, BITS_PER_BYTE)} |
| Entropía [bits/símbolo] | {H:.4f} |
| Longitud media [bits/símbolo] | {Lavg:.4f} |

Ver **codigos_huffman.csv** para el código de cada símbolo.
"""
    path = os.path.join(out_dir, "informe_huffman.md")
    with open(path, "w", encoding="utf-8") as f:
        f.write(md)
    return path
