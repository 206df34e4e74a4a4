"""Relationship table, sample derivation, and output naming."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from stream_regression.models import ArtistRecord, Relationship

RELATIONSHIPS: tuple[tuple[str, Relationship], ...] = (
    ("Total Streams vs Solo Streams", Relationship.SOLO),
    ("Total Streams vs Featured Streams", Relationship.FEATURE),
    ("Total Streams vs Lead Streams", Relationship.LEAD),
)


def title_for(relationship: Relationship) -> str:
    for title, candidate in RELATIONSHIPS:
        if candidate == relationship:
            return title
    raise KeyError(relationship)


def build_samples(
    records: Iterable[ArtistRecord], relationship: Relationship
) -> list[tuple[float, float]]:
    """Pair each record's sub-metric (x) with its total streams (y)."""
    return [(record.metric(relationship), record.total_streams) for record in records]


def output_filename(title: str) -> str:
    """Map a plot title to its image file name."""
    return f"{title.replace(' ', '_').lower()}.png"


def max_value(values: Sequence[float]) -> float:
    """Largest value of a non-empty sequence."""
    if not values:
        raise ValueError("Cannot take the maximum of an empty sequence.")
    largest = values[0]
    for value in values[1:]:
        if value > largest:
            largest = value
    return largest
