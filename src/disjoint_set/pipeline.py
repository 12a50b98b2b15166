"""Replay tables of union pairs through a :class:`DisjointSet`."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .structures import DisjointSet, IndexOutOfRangeError

_MAX_EXACT_FLOAT_INDEX = 2**53


@dataclass
class ConnectivityStats:
    """Summary metrics for a connectivity run."""

    total_elements: int
    total_pairs: int
    merged_pairs: int
    redundant_pairs: int
    group_count: int
    largest_group: int
    runtime_seconds: float


@dataclass
class ConnectivityResult:
    """Result bundle returned by :class:ConnectivityAnalyzer."""

    dataframe: pd.DataFrame
    disjoint_set: DisjointSet
    stats: ConnectivityStats


@dataclass
class ConnectivityConfig:
    """Configuration parameters for :class:ConnectivityAnalyzer."""

    left_column: str = "left"
    right_column: str = "right"
    size: int | None = None
    use_tqdm: bool | None = None
    verbose: bool = True


class ConnectivityAnalyzer:
    """Merge elements pair by pair and report the group size of every element."""

    def __init__(self, config: ConnectivityConfig | None = None) -> None:
        self.config = config or ConnectivityConfig()

    def analyze(
        self,
        dataframe: pd.DataFrame,
        output_path: str | Path | None = None,
    ) -> ConnectivityResult:
        """Apply every pair in `dataframe`, optionally save results, and return them."""

        for column in (self.config.left_column, self.config.right_column):
            if column not in dataframe.columns:
                raise KeyError(f"Column '{column}' not found in dataframe")

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Connectivity Analysis Started ---")
            print("\n1. Loading and validating pairs...")

        t0 = time.time()
        pairs = self._pairs_array(dataframe)
        size = self._resolve_size(pairs)
        disjoint_set = DisjointSet(size)
        self._check_bounds(pairs, disjoint_set.size)
        if verbose:
            print(f"   Loaded {len(pairs)} pairs over {size} elements. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Merging groups...")
        merged = 0
        redundant = 0

        iterator: Iterable[Tuple[int, int]] = pairs.tolist()
        if len(pairs) and self._use_tqdm:
            iterator = tqdm(iterator, total=len(pairs), desc="   Merging Pairs", unit="pair")

        for left, right in iterator:
            if disjoint_set.union(left, right):
                merged += 1
            else:
                redundant += 1
        if verbose:
            print(f"   Merged {merged} pairs, skipped {redundant} already connected.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Measuring connectedness...")
        sizes = np.fromiter(
            (disjoint_set.connectedness(index) for index in range(size)),
            dtype=np.int64,
            count=size,
        )
        df = pd.DataFrame({"index": np.arange(size, dtype=np.int64), "connectedness": sizes})
        largest = int(sizes.max()) if size else 0
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")
            print("\n--- Results Summary ---")
            print(f"   - Total elements: {size}")
            print(f"   - Groups found: {disjoint_set.group_count}")
            print(f"   - Largest group size: {largest}")

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(df, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        elapsed = time.time() - overall_start_time
        summary = ConnectivityStats(
            total_elements=size,
            total_pairs=len(pairs),
            merged_pairs=merged,
            redundant_pairs=redundant,
            group_count=disjoint_set.group_count,
            largest_group=largest,
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"\n--- Connectivity Analysis Finished in {elapsed:.2f} seconds ---")

        return ConnectivityResult(dataframe=df, disjoint_set=disjoint_set, stats=summary)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm
        return self.config.verbose

    def _pairs_array(self, dataframe: pd.DataFrame) -> np.ndarray:
        columns = [self.config.left_column, self.config.right_column]
        frame = dataframe[columns]
        if frame.shape[1] != 2:
            raise ValueError(f"Pair columns {columns} must each appear exactly once")
        if frame.isna().to_numpy().any():
            raise ValueError("Pair columns contain missing values")
        try:
            frame = frame.apply(pd.to_numeric)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Pair columns must hold integer indices: {exc}") from exc

        if all(pd.api.types.is_signed_integer_dtype(dtype) for dtype in frame.dtypes):
            return frame.to_numpy(dtype=np.int64)

        values = frame.to_numpy(dtype=np.float64)
        if not np.isfinite(values).all() or not np.array_equal(values, np.floor(values)):
            raise ValueError("Pair columns must hold integer indices")
        # Beyond 2**53 a float no longer identifies a single integer.
        if np.abs(values).max(initial=0) > _MAX_EXACT_FLOAT_INDEX:
            raise ValueError("Pair columns hold indices too large to read exactly")
        return values.astype(np.int64)

    def _resolve_size(self, pairs: np.ndarray) -> int:
        if self.config.size is not None:
            return self.config.size
        if not len(pairs):
            return 0
        return max(int(pairs.max()) + 1, 0)

    @staticmethod
    def _check_bounds(pairs: np.ndarray, size: int) -> None:
        if not len(pairs):
            return
        for index in (int(pairs.min()), int(pairs.max())):
            if not 0 <= index < size:
                raise IndexOutOfRangeError(f"index {index} out of range for size {size}")

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix == ".xlsx":
            dataframe.to_excel(path, index=False)
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = [
    "ConnectivityAnalyzer",
    "ConnectivityConfig",
    "ConnectivityResult",
    "ConnectivityStats",
]
