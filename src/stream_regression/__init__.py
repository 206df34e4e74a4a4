"""Linear regressions over artist streaming statistics."""

from stream_regression.loader import coerce_cell, load, load_records
from stream_regression.models import ArtistRecord, Fit, Relationship
from stream_regression.regression import fit, fit_line

__all__ = [
    "ArtistRecord",
    "Fit",
    "Relationship",
    "coerce_cell",
    "fit",
    "fit_line",
    "load",
    "load_records",
]
