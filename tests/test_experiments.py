import csv

import pytest

import experiments as exp
import huffman as huff


def test_generators_stay_inside_alphabet():
    for name in exp.GENERATOR_REGISTRY:
        dataset_name, text = exp.generate_dataset(name, 500, seed=3)
        assert dataset_name == name
        assert len(text) == 500
        assert all(ord(ch) < huff.ALPHABET_SIZE for ch in text)

def test_unknown_generator_falls_back_to_uniform():
    dataset_name, text = exp.generate_dataset("nope", 64, seed=1)
    assert dataset_name == "nope_fallback_uniform256"
    assert len(text) == 64

def test_generators_are_seeded():
    assert exp.gen_zipf_like(200, seed=5) == exp.gen_zipf_like(200, seed=5)

def test_shannon_entropy():
    assert exp.shannon_entropy("") == 0.0
    assert exp.shannon_entropy("aaaa") == 0.0
    assert exp.shannon_entropy("abab") == pytest.approx(1.0)

def test_run_one_measures_round_trip():
    text = exp.gen_english_like(2000, seed=9)
    row = exp.run_one(text)
    assert row.correctness_ok == 1
    assert row.text_length == 2000
    assert row.encoded_bits == len(huff.compress(text).bits)
    # Huffman is within one bit of the entropy
    assert row.entropy_bits <= row.bits_per_symbol < row.entropy_bits + 1
    assert row.ratio_vs_8bit == pytest.approx(row.bits_per_symbol / 8)

def test_run_one_single_symbol():
    row = exp.run_one(exp.gen_single_symbol(100))
    assert row.correctness_ok == 1
    assert row.unique_symbols == 1
    assert row.bits_per_symbol == 1.0

def test_main_writes_csv_and_charts(tmp_path, capsys):
    argv = [
        "--outdir", str(tmp_path),
        "--runs", "2",
        "--exp1_size_kb", "1",
        "--exp1_generators", "zipf64,single_symbol",
        "--exp2_min_kb", "1",
        "--exp2_max_kb", "2",
        "--exp2_generators", "repetitive90",
    ]
    assert exp.main(argv) == 0

    with (tmp_path / "metrics.csv").open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2 * 2 + 2 * 2
    assert all(r["correctness_ok"] == "1" for r in rows)

    with (tmp_path / "summary.csv").open(newline="", encoding="utf-8") as f:
        summary = list(csv.DictReader(f))
    assert len(summary) == 4
    assert all(r["n_runs"] == "2" for r in summary)

    assert (tmp_path / "exp1_bits_per_symbol.png").exists()
    assert (tmp_path / "exp1_runtime.png").exists()
    assert (tmp_path / "exp2_time_repetitive90.png").exists()
    assert "Correctness rate across all runs: 1.000" in capsys.readouterr().out
