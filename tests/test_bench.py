import pytest

from huffarray.bench import STRATEGIES, run_benchmark, save_benchmark
from huffarray.huffman import CandidateArray, encode_all, total_bits

CLASSIC = {"A": 5, "B": 9, "C": 12, "D": 13, "E": 16, "F": 45}


@pytest.mark.parametrize("name", sorted(STRATEGIES))
def test_each_strategy_builds_optimal_tree(name):
    root = STRATEGIES[name](CandidateArray.from_frequencies(CLASSIC))
    assert root.weight == 100
    assert total_bits(encode_all(root)) == 224


def test_run_benchmark_same_totals(tmp_path):
    df = run_benchmark(size=200, modulus=1000, seed=1)
    assert list(df["Estrategia"]) == ["resort", "insertion", "binary"]
    assert df["Bits totales"].nunique() == 1
    assert (df["Tiempo [s]"] >= 0).all()

    csv_path, fig_path = save_benchmark(str(tmp_path), df)
    assert (tmp_path / "benchmark.csv").exists()
    assert (tmp_path / "benchmark.png").exists()
