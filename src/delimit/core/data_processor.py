"""
Delimit Data Processor
======================
Applies a configured splitter to a text column of a DataFrame.
"""

import logging
from pathlib import Path
from typing import Union
import pandas as pd

from ..config import DelimitConfig
from ..constants import (
    SYSTEM_RECORD_ID_COLUMN, SYSTEM_TOKEN_COLUMN, SYSTEM_TOKEN_ID_COLUMN,
    SYSTEM_PAIRS_COLUMN, SUPPORTED_FILE_SUFFIXES,
)
from ..exceptions import ConfigurationError, DataError, FileError

# Module-level logger
log = logging.getLogger(__name__)


class DataProcessor:
    """Handles data loading and token / key-value splitting of a text column."""

    def __init__(self, config: DelimitConfig):
        self.config = config
        config.logging.apply()
        self.splitter = config.build_splitter()
        self.map_splitter = config.build_map_splitter() if config.has_key_value else None

        self.target_column = config.data.target_column
        self.drop_target_column = config.data.drop_target_column
        self.expand_pairs = config.data.expand_pairs

    def process(self, data_source: Union[str, Path, pd.DataFrame]) -> pd.DataFrame:
        """Load data and split it: into key/value pairs if a separator is configured, else into tokens."""
        df = self.load_data(data_source)
        if self.map_splitter is not None:
            return self.split_pairs(df)
        return self.split_records(df)

    def load_data(self, data_source: Union[str, Path, pd.DataFrame]) -> pd.DataFrame:
        """Load data from a DataFrame, a .txt file, or a .csv file."""
        if isinstance(data_source, (str, Path)):
            df = self._load_file(Path(data_source))
        elif isinstance(data_source, pd.DataFrame):
            df = data_source.copy()
        else:
            raise DataError(
                f"Unsupported data source: {type(data_source).__name__}",
                {"data_type": type(data_source).__name__, "suggestion": "Pass a DataFrame or a file path"}
            )

        if self.target_column not in df.columns:
            raise DataError(
                f"Target column {self.target_column} not found in data",
                {"target_column": self.target_column, "columns": list(df.columns)}
            )
        df[SYSTEM_RECORD_ID_COLUMN] = range(len(df))
        log.debug(f"Loaded {len(df)} records")
        return df

    def _load_file(self, path: Path) -> pd.DataFrame:
        suffix = path.suffix.lower()
        if suffix not in SUPPORTED_FILE_SUFFIXES:
            raise FileError(
                f"Unsupported file type: {path.suffix}",
                {"file_path": str(path), "file_extension": path.suffix, "suggestion": f"Use one of {SUPPORTED_FILE_SUFFIXES}"}
            )
        log.debug(f"Loading {suffix} file: {path}")
        try:
            if suffix == ".txt":
                content = path.read_text(encoding="utf-8", errors="replace")
                return pd.DataFrame({self.target_column: [content]})
            return pd.read_csv(path, dtype={self.target_column: str}, keep_default_na=False)
        except OSError as e:
            raise FileError(f"Cannot read {path}: {e}", {"file_path": str(path)}) from e

    def split_records(self, df: pd.DataFrame) -> pd.DataFrame:
        """Explode the target column into one row per token."""
        df = df.copy()
        df[SYSTEM_TOKEN_COLUMN] = df[self.target_column].apply(self.splitter.split_to_list)
        # Records without tokens (omit_empty over blank text) disappear instead of becoming NaN rows.
        df = df[df[SYSTEM_TOKEN_COLUMN].map(len) > 0]
        df = df.explode(SYSTEM_TOKEN_COLUMN).reset_index(drop=True)
        df[SYSTEM_TOKEN_ID_COLUMN] = range(len(df))

        if self.drop_target_column:
            df = df.drop(columns=[self.target_column])
        log.debug(f"Split into {len(df)} tokens")
        return df

    def split_pairs(self, df: pd.DataFrame) -> pd.DataFrame:
        """Split each record into key/value pairs."""
        if self.map_splitter is None:
            raise ConfigurationError(
                "Cannot split pairs without a key/value separator",
                {"suggestion": "Add a 'key_value' section to the config"}
            )
        df = df.copy()
        pairs = []
        for record_id, text in zip(df[SYSTEM_RECORD_ID_COLUMN], df[self.target_column]):
            try:
                pairs.append(dict(self.map_splitter.split(text)))
            except DataError as e:
                e.details.setdefault(SYSTEM_RECORD_ID_COLUMN, record_id)
                raise
        df[SYSTEM_PAIRS_COLUMN] = pairs

        if self.expand_pairs:
            expanded = pd.DataFrame(pairs, index=df.index)
            clashes = set(expanded.columns) & set(df.columns)
            if clashes:
                raise DataError(
                    "Split keys clash with existing columns",
                    {"columns": sorted(clashes), "suggestion": "Rename the columns or set expand_pairs=False"}
                )
            df = pd.concat([df.drop(columns=[SYSTEM_PAIRS_COLUMN]), expanded], axis=1)

        if self.drop_target_column:
            df = df.drop(columns=[self.target_column])
        log.debug(f"Split {len(df)} records into key/value pairs")
        return df
