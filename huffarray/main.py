import argparse
import os
import sys

from loguru import logger

from .config import BENCH_MODULUS, BENCH_SIZE, OUTPUT_DIR, configure_logging
from .freqs import freqs_from_file
from .huffman import HuffmanError, encode_all, huffman_tree
from .report import format_code_table, save_codes_csv, write_markdown
from .textgrid import format_tree


def run_codes(args) -> str:
    freqs = freqs_from_file(args.file, letters_only=args.letters_only)
    with huffman_tree(freqs) as root:
        encodings = encode_all(root)
        out = format_code_table(root, encodings)
        if args.out:
            save_codes_csv(args.out, encodings)
            write_markdown(args.out, args.file, encodings)
            logger.info("Tabla de códigos guardada en {}", args.out)
    return out


def run_grid(args) -> str:
    freqs = freqs_from_file(args.file, letters_only=args.letters_only)
    with huffman_tree(freqs) as root:
        return format_tree(root) + "\n"


def run_plot(args) -> str:
    from .treeplot import save_tree_plot

    freqs = freqs_from_file(args.file, letters_only=args.letters_only)
    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with huffman_tree(freqs) as root:
        save_tree_plot(root, args.out, subtitle=args.file)
    logger.info("Árbol dibujado en {}", args.out)
    return f"Listo. Figura en: {args.out}\n"


def run_bench(args) -> str:
    from .bench import run_benchmark, save_benchmark

    df = run_benchmark(size=args.size, modulus=args.modulus, seed=args.seed)
    lines = [f"Tabla de prueba con {args.size} frecuencias aleatorias en 0 - {args.modulus}.", ""]
    for _, row in df.iterrows():
        lines.append(f"Tiempo de la estrategia {row['Estrategia']}: {row['Tiempo [s]']:f}s")
    if args.out:
        save_benchmark(args.out, df)
    return "\n".join(lines) + "\n"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Árbol de Huffman sobre arreglo ordenado de candidatos")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log a nivel DEBUG")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("codes", help="Código de cada carácter y bytes totales")
    p.add_argument("file", help="Ruta al archivo de texto")
    p.add_argument("--letters-only", action="store_true", help="Contar sólo letras (en mayúsculas)")
    p.add_argument("--out", default=None, help="Directorio para CSV + informe")
    p.set_defaults(func=run_codes)

    p = sub.add_parser("grid", help="Árbol dibujado en texto")
    p.add_argument("file", help="Ruta al archivo de texto")
    p.add_argument("--all-bytes", dest="letters_only", action="store_false",
                   help="Contar todos los bytes, no sólo letras")
    p.set_defaults(func=run_grid, letters_only=True)

    p = sub.add_parser("plot", help="Árbol dibujado con Matplotlib (PNG)")
    p.add_argument("file", help="Ruta al archivo de texto")
    p.add_argument("--out", default=os.path.join(OUTPUT_DIR, "huffman_tree.png"), help="Archivo PNG de salida")
    p.add_argument("--all-bytes", dest="letters_only", action="store_false",
                   help="Contar todos los bytes, no sólo letras")
    p.set_defaults(func=run_plot, letters_only=True)

    p = sub.add_parser("bench", help="Compara estrategias de construcción del árbol")
    p.add_argument("--size", type=int, default=BENCH_SIZE, help="Cantidad de frecuencias aleatorias")
    p.add_argument("--modulus", type=int, default=BENCH_MODULUS, help="Frecuencias en [0, modulus)")
    p.add_argument("--seed", type=int, default=None, help="Semilla del generador")
    p.add_argument("--out", default=None, help="Directorio para CSV + gráfico")
    p.set_defaults(func=run_bench)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)
    try:
        sys.stdout.write(args.func(args))
    except OSError as e:
        print(f"ERROR: no se pudo leer o escribir el archivo: {e}", file=sys.stderr)
        return 1
    except (HuffmanError, MemoryError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
