"""
CSV dataset loading.

The dataset is read once at startup and never modified afterwards.
Each row becomes a read-only mapping of column name to string value,
and the rows are collected into a tuple so the whole dataset can be
shared between concurrent request handlers without locking.

Use :func:`load_dataset` to read a file; it raises
:class:`DatasetLoadError` for anything that would leave the service
with an undefined dataset.
"""

import csv
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple, Union

logger = logging.getLogger(__name__)

Record = Mapping[str, str]
Dataset = Tuple[Record, ...]

REQUIRED_COLUMNS = ("name", "state", "district")


class DatasetLoadError(Exception):
    """Raised when the source file is missing or cannot be parsed."""


def make_record(row: Mapping[str, str]) -> Record:
    """Freeze a row into an immutable record."""
    return MappingProxyType(dict(row))


def build_dataset(rows: Iterable[Mapping[str, str]]) -> Dataset:
    """Build a dataset from already parsed rows.

    Every row must provide the ``name``, ``state`` and ``district``
    fields.  Mainly useful for tests and for embedding the API with a
    dataset that does not come from a CSV file.
    """
    records = []
    for index, row in enumerate(rows):
        missing = [column for column in REQUIRED_COLUMNS if column not in row]
        if missing:
            raise DatasetLoadError(f"Row {index} is missing field(s): {', '.join(missing)}")
        records.append(make_record(row))
    return tuple(records)


def load_dataset(path: Union[str, "os.PathLike[str]"]) -> Dataset:
    """Read a CSV file with a header row into a :data:`Dataset`.

    Short rows are padded with empty strings.  A row carrying more
    values than the header is treated as malformed.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise DatasetLoadError(f"Dataset file not found: {file_path}")

    try:
        with file_path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle, restval="")
            header = reader.fieldnames or []
            missing = [column for column in REQUIRED_COLUMNS if column not in header]
            if missing:
                raise DatasetLoadError(
                    f"Dataset {file_path} is missing column(s): {', '.join(missing)}"
                )
            records = []
            for row in reader:
                if None in row:
                    raise DatasetLoadError(
                        f"Dataset {file_path} line {reader.line_num} has more values than the header"
                    )
                records.append(make_record(row))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise DatasetLoadError(f"Could not read dataset {file_path}: {exc}") from exc

    logger.info("Loaded %d records from %s", len(records), file_path)
    return tuple(records)
