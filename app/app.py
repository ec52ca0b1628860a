from __future__ import annotations

import io
import os
from pathlib import Path
import sys

from flask import Flask, request, jsonify, send_file

ROOT = Path(__file__).resolve().parent.parent
# Asegurar que la raíz del repo esté en sys.path al ejecutar `python app/app.py`
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Forzar backend no interactivo para Matplotlib (evita GUI en threads)
os.environ.setdefault("MPLBACKEND", "Agg")

from loguru import logger

from huffarray.config import configure_logging
from huffarray.freqs import count_symbols, symbol_label
from huffarray.huffman import TooFewSymbolsError, encode_all, huffman_tree, storage_bytes, total_bits
from huffarray.textgrid import grid_lines
from huffarray.treeplot import draw_tree


def create_app() -> Flask:
    configure_logging()
    app = Flask(__name__)

    def _read_freqs(default_letters_only: bool = False):
        payload = request.get_json(silent=True) or {}
        text = payload.get("text")
        if not isinstance(text, str):
            raise ValueError("Falta el campo 'text'")
        letters_only = payload.get("letters_only", default_letters_only)
        if not isinstance(letters_only, bool):
            raise ValueError("'letters_only' debe ser true o false")
        return count_symbols(text.encode("utf-8"), letters_only=letters_only)

    @app.errorhandler(TooFewSymbolsError)
    def too_few_symbols(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(ValueError)
    def bad_request(e):
        return jsonify({"error": str(e)}), 400

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.post("/api/codes")
    def api_codes():
        freqs = _read_freqs()
        with huffman_tree(freqs) as root:
            encodings = encode_all(root)
        bits = total_bits(encodings)
        table = [
            {"symbol": e.symbol, "char": symbol_label(e.symbol), "code": e.bits,
             "length": e.length, "freq": e.freq}
            for e in encodings
        ]
        logger.info("Códigos calculados para {} símbolos", len(encodings))
        return jsonify({
            "codes": {row["char"]: row["code"] for row in table},
            "table": table,
            "bits": bits,
            "bytes": storage_bytes(bits),
        })

    @app.post("/api/grid")
    def api_grid():
        freqs = _read_freqs(default_letters_only=True)
        with huffman_tree(freqs) as root:
            lines = grid_lines(root)
        return jsonify({"lines": lines})

    @app.post("/api/plot")
    def api_plot():
        import matplotlib.pyplot as plt

        freqs = _read_freqs(default_letters_only=True)
        with huffman_tree(freqs) as root:
            fig = draw_tree(root)
        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=140)
        plt.close(fig)
        buf.seek(0)
        return send_file(buf, mimetype="image/png", download_name="huffman_tree.png")

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
