"""Convenience helpers for running a connectivity analysis end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .pipeline import ConnectivityAnalyzer, ConnectivityConfig, ConnectivityResult
from .structures import IndexOutOfRangeError


def analyze_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[ConnectivityConfig] = None,
) -> ConnectivityResult | None:
    """Replay the pairs in `input_path` and write per-element connectedness to `output_path`."""

    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    config = config or ConnectivityConfig()
    for column in (config.left_column, config.right_column):
        if column not in dataframe.columns:
            print(f"ERROR: Column '{column}' not found in '{input_path}'.")
            return None

    analyzer = ConnectivityAnalyzer(config)
    try:
        return analyzer.analyze(dataframe, output_path)
    except (IndexOutOfRangeError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return None


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path)
    raise ValueError("unsupported format")
