"""Delimited dataset loading with lenient numeric coercion."""

from __future__ import annotations

import csv
import math
from pathlib import Path

from stream_regression.exceptions import DatasetReadError
from stream_regression.models import ArtistRecord, ColumnLayout


def coerce_cell(text: str | None) -> float:
    """Parse a numeric cell, treating comma separators as noise and anything else as 0.0."""
    if text is None:
        return 0.0
    cleaned = text.replace(",", "").strip()
    if not cleaned or "_" in cleaned:
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def load_records(
    path: Path | str,
    columns: ColumnLayout | None = None,
    delimiter: str = ",",
) -> list[ArtistRecord]:
    """Read every data row of a headed table into records, in file order."""
    layout = columns or ColumnLayout()
    source = Path(path)
    records: list[ArtistRecord] = []
    try:
        with source.open(encoding="utf-8-sig", newline="") as file_obj:
            reader = csv.reader(file_obj, delimiter=delimiter, strict=True)
            header_width: int | None = None
            for row in reader:
                if not row:
                    continue
                if header_width is None:
                    header_width = len(row)
                    continue
                if len(row) != header_width:
                    raise DatasetReadError(
                        f"{source}: line {reader.line_num} has {len(row)} fields, "
                        f"expected {header_width}."
                    )
                records.append(_row_to_record(row, layout))
    except DatasetReadError:
        raise
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise DatasetReadError(f"Cannot read dataset {source}: {exc}") from exc
    return records


load = load_records


def _row_to_record(row: list[str], layout: ColumnLayout) -> ArtistRecord:
    return ArtistRecord(
        total_streams=coerce_cell(_cell(row, layout.total)),
        solo_streams=coerce_cell(_cell(row, layout.solo)),
        feature_streams=coerce_cell(_cell(row, layout.feature)),
        lead_streams=coerce_cell(_cell(row, layout.lead)),
    )


def _cell(row: list[str], index: int) -> str:
    return row[index] if index < len(row) else ""
