import pandas as pd
import pytest

from disjoint_set.pipeline import ConnectivityAnalyzer, ConnectivityConfig
from disjoint_set.structures import IndexOutOfRangeError


def _analyzer(**kwargs):
    return ConnectivityAnalyzer(ConnectivityConfig(verbose=False, use_tqdm=False, **kwargs))


def test_analyze_reports_connectedness_per_element():
    pairs = pd.DataFrame({"left": [0, 2, 1, 4], "right": [1, 3, 2, 3]})
    result = _analyzer(size=6).analyze(pairs)

    assert result.dataframe["index"].tolist() == [0, 1, 2, 3, 4, 5]
    assert result.dataframe["connectedness"].tolist() == [5, 5, 5, 5, 5, 1]
    assert result.stats.total_elements == 6
    assert result.stats.merged_pairs == 4
    assert result.stats.redundant_pairs == 0
    assert result.stats.group_count == 2
    assert result.stats.largest_group == 5


def test_analyze_counts_redundant_pairs():
    pairs = pd.DataFrame({"left": [0, 1, 0], "right": [1, 2, 2]})
    stats = _analyzer().analyze(pairs).stats
    assert stats.merged_pairs == 2
    assert stats.redundant_pairs == 1
    assert stats.total_pairs == 3


def test_analyze_infers_size_from_largest_index():
    pairs = pd.DataFrame({"left": [0], "right": [7]})
    result = _analyzer().analyze(pairs)
    assert result.stats.total_elements == 8
    assert len(result.disjoint_set) == 8


def test_analyze_handles_empty_table():
    pairs = pd.DataFrame({"left": [], "right": []})
    result = _analyzer().analyze(pairs)
    assert result.dataframe.empty
    assert result.stats.group_count == 0
    assert result.stats.largest_group == 0


def test_analyze_uses_custom_columns():
    pairs = pd.DataFrame({"a": [0], "b": [1]})
    result = _analyzer(left_column="a", right_column="b", size=3).analyze(pairs)
    assert result.dataframe["connectedness"].tolist() == [2, 2, 1]


def test_analyze_rejects_missing_column():
    with pytest.raises(KeyError):
        _analyzer().analyze(pd.DataFrame({"left": [0]}))


def test_analyze_rejects_fractional_indices():
    pairs = pd.DataFrame({"left": [0.5], "right": [1]})
    with pytest.raises(ValueError):
        _analyzer().analyze(pairs)


def test_analyze_rejects_missing_values():
    pairs = pd.DataFrame({"left": [0, None], "right": [1, 2]})
    with pytest.raises(ValueError):
        _analyzer().analyze(pairs)


def test_analyze_propagates_out_of_range_index():
    pairs = pd.DataFrame({"left": [0], "right": [5]})
    with pytest.raises(IndexOutOfRangeError):
        _analyzer(size=3).analyze(pairs)


def test_analyze_writes_csv(tmp_path):
    output = tmp_path / "out.csv"
    _analyzer(size=3).analyze(pd.DataFrame({"left": [0], "right": [2]}), output)
    written = pd.read_csv(output)
    assert written["connectedness"].tolist() == [2, 1, 2]


def test_analyze_rejects_unknown_output_format(tmp_path):
    with pytest.raises(ValueError):
        _analyzer(size=2).analyze(pd.DataFrame({"left": [0], "right": [1]}), tmp_path / "out.json")


def test_verbose_run_prints_summary(capsys):
    analyzer = ConnectivityAnalyzer(ConnectivityConfig(use_tqdm=False))
    analyzer.analyze(pd.DataFrame({"left": [0], "right": [1]}))
    out = capsys.readouterr().out
    assert "Groups found: 1" in out
    assert "Largest group size: 2" in out


def test_analyze_rejects_negative_indices_with_inferred_size():
    pairs = pd.DataFrame({"left": [-5], "right": [-3]})
    with pytest.raises(IndexOutOfRangeError, match="index -5"):
        _analyzer().analyze(pairs)


def test_analyze_checks_every_pair_before_merging():
    pairs = pd.DataFrame({"left": [0, 1], "right": [1, 9]})
    with pytest.raises(IndexOutOfRangeError, match="index 9"):
        _analyzer(size=3).analyze(pairs)


def test_analyze_keeps_large_integer_indices_exact():
    pairs = pd.DataFrame({"left": [0], "right": [2**53 + 1]})
    with pytest.raises(IndexOutOfRangeError, match=str(2**53 + 1)):
        _analyzer(size=3).analyze(pairs)


def test_analyze_rejects_float_indices_beyond_exact_range():
    pairs = pd.DataFrame({"left": [0.0], "right": [1e17]})
    with pytest.raises(ValueError, match="too large"):
        _analyzer(size=3).analyze(pairs)


def test_analyze_accepts_numeric_strings():
    pairs = pd.DataFrame({"left": ["0", "1"], "right": ["1", "2"]})
    result = _analyzer().analyze(pairs)
    assert result.dataframe["connectedness"].tolist() == [3, 3, 3]


def test_analyze_rejects_duplicated_pair_column():
    pairs = pd.DataFrame([[0, 1, 2]], columns=["left", "left", "right"])
    with pytest.raises(ValueError, match="exactly once"):
        _analyzer(size=3).analyze(pairs)


def test_progress_bar_reports_merged_pairs(capsys):
    analyzer = ConnectivityAnalyzer(ConnectivityConfig(use_tqdm=True, verbose=False))
    result = analyzer.analyze(pd.DataFrame({"left": [0, 1], "right": [1, 2]}))
    assert result.stats.merged_pairs == 2
    assert "Merging Pairs" in capsys.readouterr().err
