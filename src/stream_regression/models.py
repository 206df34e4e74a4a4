"""Core typed models."""

from __future__ import annotations

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Relationship(StrEnum):
    """Sub-metric plotted against total streams."""

    SOLO = "solo"
    FEATURE = "feature"
    LEAD = "lead"


class RenderStatus(StrEnum):
    """Outcome of the rendering step for one relationship."""

    RENDERED = "rendered"
    FAILED = "failed"
    SKIPPED = "skipped"


class ArtistRecord(BaseModel):
    """One parsed data row."""

    model_config = ConfigDict(frozen=True)

    total_streams: float = 0.0
    solo_streams: float = 0.0
    feature_streams: float = 0.0
    lead_streams: float = 0.0

    def metric(self, relationship: Relationship) -> float:
        """Return the sub-metric used as x for a relationship."""
        if relationship == Relationship.SOLO:
            return self.solo_streams
        if relationship == Relationship.FEATURE:
            return self.feature_streams
        return self.lead_streams


class ColumnLayout(BaseModel):
    """Fixed column positions of the numeric fields; column 0 holds the artist name."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=1, ge=0)
    solo: int = Field(default=3, ge=0)
    lead: int = Field(default=4, ge=0)
    feature: int = Field(default=5, ge=0)


class Fit(BaseModel):
    """Best-fit line y = slope * x + intercept."""

    model_config = ConfigDict(frozen=True)

    slope: float
    intercept: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.slope) and math.isfinite(self.intercept)

    @property
    def equation(self) -> str:
        return f"y = {self.slope:.2f}x + {self.intercept:.2f}"

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


class RelationshipResult(BaseModel):
    """Fit and render outcome for one relationship."""

    relationship: Relationship
    title: str
    sample_count: int
    fit: Fit
    output_path: str
    status: RenderStatus
    error: str = ""


class AnalysisReport(BaseModel):
    """Result of a full analysis run."""

    source_path: str
    record_count: int
    results: list[RelationshipResult] = Field(default_factory=list)

    @property
    def failures(self) -> list[RelationshipResult]:
        return [result for result in self.results if result.status == RenderStatus.FAILED]

    @property
    def ok(self) -> bool:
        return not self.failures


class AppConfig(BaseModel):
    """Runtime configuration."""

    data_path: str = "artists.csv"
    output_root: str = "."
    delimiter: str = ","
    columns: ColumnLayout = Field(default_factory=ColumnLayout)
    relationships: list[Relationship] = Field(
        default_factory=lambda: [Relationship.SOLO, Relationship.FEATURE, Relationship.LEAD]
    )
    width: int = Field(default=1024, gt=0)
    height: int = Field(default=768, gt=0)
    dpi: int = Field(default=100, gt=0)
    marker_size: float = Field(default=5.0, gt=0)
    max_line_points: int = Field(default=10_000, ge=2)

    @field_validator("delimiter")
    @classmethod
    def single_character_delimiter(cls, value: str) -> str:
        """The csv module only accepts one-character delimiters."""
        if len(value) != 1:
            raise ValueError("delimiter must be a single character")
        return value

    @model_validator(mode="after")
    def ensure_unique_relationships(self) -> AppConfig:
        if len(set(self.relationships)) != len(self.relationships):
            raise ValueError("relationships must not repeat")
        return self
