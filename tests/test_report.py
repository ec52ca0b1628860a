from huffarray.huffman import build_tree, encode_all
from huffarray.report import (
    encoding_frame,
    format_code_line,
    format_code_table,
    save_codes_csv,
    write_markdown,
)

CLASSIC = {ord("A"): 5, ord("B"): 9, ord("C"): 12, ord("D"): 13, ord("E"): 16, ord("F"): 45}


def test_code_table():
    root = build_tree(CLASSIC)
    out = format_code_table(root, encode_all(root))
    lines = out.splitlines()
    assert lines[0] == "'A' : 1100 (  4 *    5)"
    assert lines[5] == "'F' :    0 (  1 *   45)"
    assert lines[6] == "28 Bytes"
    assert out.endswith("Bytes\n\n")


def test_non_printable_symbol_line():
    root = build_tree({10: 3, 65: 1})
    enc = encode_all(root)[0]
    assert format_code_line(enc, 2) == "010 : 1 (  1 *    3)"


def test_encoding_frame_and_csv(tmp_path):
    root = build_tree(CLASSIC)
    encodings = encode_all(root)
    df = encoding_frame(encodings)
    assert list(df.columns) == ["Símbolo", "Carácter", "Código", "Longitud", "Frecuencia", "Bits"]
    assert int(df["Bits"].sum()) == 224

    save_codes_csv(str(tmp_path), encodings)
    assert (tmp_path / "codigos_huffman.csv").exists()


def test_write_markdown(tmp_path):
    root = build_tree(CLASSIC)
    path = write_markdown(str(tmp_path), "ejemplo.txt", encode_all(root))
    text = open(path, encoding="utf-8").read()
    assert "| Bits codificados | 224 |" in text
    assert "| Bytes (redondeo hacia arriba) | 28 |" in text
    assert "`ejemplo.txt`" in text
