# DataSource.py

import logging
import os
import threading
from typing import List, Optional, Tuple

import pandas as pd
from PyQt5.QtCore import QObject, pyqtSignal

from EnergyPlot.CountryRecord import CountryRecord, REQUIRED_COLUMNS
from EnergyPlot.Errors import DataLoadError

logger = logging.getLogger(__name__)

# Sample dataset shipped with the repository, relative to its root.
DEFAULT_CSV = os.path.join("Examples", "scatterdata.csv")


def load_records(path: str, strict: bool = True) -> List[CountryRecord]:
    """
    Read the country CSV and return its records in file order.
    Every cell is read as text so parsing policy stays in CountryRecord.
    A header-only file yields an empty list; deciding what to show for
    it is left to the caller.
    """
    if not os.path.isfile(path):
        raise DataLoadError(f"CSV file not found: {path}")

    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError:
        raise DataLoadError(f"CSV file is empty: {path}")
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise DataLoadError(f"Could not read {path}: {e}") from e

    frame.columns = [str(c).strip() for c in frame.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise DataLoadError(f"{path} is missing column(s): {', '.join(missing)}")

    return [CountryRecord.from_row(row, strict=strict) for row in frame.to_dict("records")]


class CountryDataSource(QObject):
    data_loaded = pyqtSignal(object)
    load_failed = pyqtSignal(str)

    def __init__(self, strict: bool = True) -> None:
        super().__init__()
        self.strict = strict
        self._records: Tuple[CountryRecord, ...] = ()
        self._worker: Optional[threading.Thread] = None

    def load(self, path: str) -> Tuple[CountryRecord, ...]:
        try:
            records = load_records(path, strict=self.strict)
        except DataLoadError as e:
            logger.error("[DataSource] Load failed: %s", e)
            self.load_failed.emit(str(e))
            raise

        self._records = tuple(records)
        logger.info("[DataSource] Loaded %d record(s) from %s", len(self._records), path)
        self.data_loaded.emit(self._records)
        return self._records

    def load_async(self, path: str) -> threading.Thread:
        """
        Load `path` on a background thread.
        Results arrive through `data_loaded` / `load_failed`, which Qt
        queues onto the thread that owns this source.
        """
        if self._worker is not None and self._worker.is_alive():
            raise RuntimeError("a load is already in progress")

        def _run():
            try:
                self.load(path)
            except DataLoadError:
                pass  # already reported through load_failed
            except Exception as e:
                logger.exception("[DataSource] Unexpected error while loading %s", path)
                self.load_failed.emit(f"Unexpected error while loading {path}: {e}")

        self._worker = threading.Thread(target=_run, name="csv-loader", daemon=True)
        self._worker.start()
        return self._worker

    def get(self) -> Tuple[CountryRecord, ...]:
        return self._records

    def size(self) -> int:
        return len(self._records)
