"""Load once, then fit and render each relationship."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from stream_regression.exceptions import RenderError
from stream_regression.loader import load_records
from stream_regression.models import (
    AnalysisReport,
    AppConfig,
    RelationshipResult,
    RenderStatus,
)
from stream_regression.regression import fit_line
from stream_regression.relationships import build_samples, output_filename, title_for
from stream_regression.render import render_relationship
from stream_regression.tracing import RunTraceCollector

Renderer = Callable[..., Path]


def run_analysis(
    config: AppConfig,
    renderer: Renderer = render_relationship,
    trace: RunTraceCollector | None = None,
    render: bool = True,
) -> AnalysisReport:
    """Run every configured relationship; render failures are isolated per relationship.

    A dataset that cannot be read raises DatasetReadError before any fit happens.
    """
    records = load_records(config.data_path, columns=config.columns, delimiter=config.delimiter)
    if trace is not None:
        trace.log(
            event_type="run",
            component="loader",
            action="records_loaded",
            details={"path": config.data_path, "count": len(records)},
        )

    output_root = Path(config.output_root)
    report = AnalysisReport(source_path=config.data_path, record_count=len(records))
    for relationship in config.relationships:
        title = title_for(relationship)
        samples = build_samples(records, relationship)
        line = fit_line(samples)
        output_path = output_root / output_filename(title)
        if trace is not None:
            trace.log(
                event_type="regression",
                component="regression",
                action="fit",
                status="ok" if line.is_finite else "degenerate",
                relationship=relationship.value,
                details={"samples": len(samples), "equation": line.equation},
            )

        status = RenderStatus.SKIPPED
        error = ""
        if render:
            try:
                renderer(
                    samples,
                    line,
                    title,
                    output_path,
                    width=config.width,
                    height=config.height,
                    dpi=config.dpi,
                    marker_size=config.marker_size,
                    max_line_points=config.max_line_points,
                )
                status = RenderStatus.RENDERED
            except RenderError as exc:
                status = RenderStatus.FAILED
                error = str(exc)
            if trace is not None:
                trace.log(
                    event_type="render",
                    component="render",
                    action="save_plot",
                    status="ok" if status == RenderStatus.RENDERED else "error",
                    relationship=relationship.value,
                    details=error or {"output_path": str(output_path)},
                )

        report.results.append(
            RelationshipResult(
                relationship=relationship,
                title=title,
                sample_count=len(samples),
                fit=line,
                output_path=str(output_path),
                status=status,
                error=error,
            )
        )
    return report
