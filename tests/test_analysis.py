from __future__ import annotations

import math
from collections.abc import Callable
from pathlib import Path

import pytest

from stream_regression.analysis import run_analysis
from stream_regression.exceptions import DatasetReadError, RenderError
from stream_regression.models import AppConfig, ColumnLayout, Fit, RenderStatus
from stream_regression.tracing import RunTraceCollector


class _RecordingRenderer:
    def __init__(self, fail_titles: set[str] | None = None) -> None:
        self.calls: list[tuple[list[tuple[float, float]], Fit, str, Path]] = []
        self.fail_titles = fail_titles or set()

    def __call__(self, samples, line, title, output_path, **_kwargs) -> Path:
        self.calls.append((list(samples), line, title, output_path))
        if title in self.fail_titles:
            raise RenderError(f"{title}: boom")
        return output_path


def test_run_analysis_fits_and_renders_each_relationship(
    tmp_path: Path, compact_csv: Path, compact_layout: ColumnLayout
) -> None:
    renderer = _RecordingRenderer()
    config = AppConfig(
        data_path=str(compact_csv), output_root=str(tmp_path / "out"), columns=compact_layout
    )

    report = run_analysis(config, renderer=renderer)

    assert report.record_count == 2
    assert report.ok
    assert [call[2] for call in renderer.calls] == [
        "Total Streams vs Solo Streams",
        "Total Streams vs Featured Streams",
        "Total Streams vs Lead Streams",
    ]
    solo_samples, solo_fit, _, solo_path = renderer.calls[0]
    assert solo_samples == [(500.0, 1000.0), (800.0, 2000.0)]
    assert solo_fit.slope == pytest.approx(10 / 3)
    assert solo_fit.intercept == pytest.approx(-2000 / 3)
    assert solo_path == tmp_path / "out" / "total_streams_vs_solo_streams.png"
    feature = report.results[1]
    assert feature.fit.slope == pytest.approx(5.0)
    assert feature.fit.intercept == pytest.approx(0.0, abs=1e-9)
    assert all(result.status == RenderStatus.RENDERED for result in report.results)


def test_run_analysis_isolates_render_failures(
    tmp_path: Path, compact_csv: Path, compact_layout: ColumnLayout
) -> None:
    renderer = _RecordingRenderer(fail_titles={"Total Streams vs Solo Streams"})
    config = AppConfig(
        data_path=str(compact_csv), output_root=str(tmp_path), columns=compact_layout
    )
    trace = RunTraceCollector()

    report = run_analysis(config, renderer=renderer, trace=trace)

    assert len(renderer.calls) == 3
    assert [result.status for result in report.results] == [
        RenderStatus.FAILED,
        RenderStatus.RENDERED,
        RenderStatus.RENDERED,
    ]
    assert report.failures[0].error == "Total Streams vs Solo Streams: boom"
    assert not report.ok
    assert len(trace.by_status("error")) == 1


def test_run_analysis_aborts_on_unreadable_dataset(tmp_path: Path) -> None:
    renderer = _RecordingRenderer()
    config = AppConfig(data_path=str(tmp_path / "missing.csv"), output_root=str(tmp_path))

    with pytest.raises(DatasetReadError):
        run_analysis(config, renderer=renderer)
    assert renderer.calls == []


def test_run_analysis_degenerate_fit_does_not_crash(
    tmp_path: Path, write_artists_csv: Callable[..., Path]
) -> None:
    path = write_artists_csv("flat.csv", ["A,100,0,7,1,0", "B,200,0,7,2,0"])
    config = AppConfig(data_path=str(path), output_root=str(tmp_path / "plots"))

    report = run_analysis(config)

    solo, feature, lead = report.results
    assert not math.isfinite(solo.fit.slope)
    assert solo.status == RenderStatus.FAILED
    assert feature.status == RenderStatus.FAILED
    assert lead.status == RenderStatus.RENDERED
    assert Path(lead.output_path).exists()
    assert not Path(solo.output_path).exists()


def test_run_analysis_without_rendering(tmp_path: Path, artists_csv: Path) -> None:
    renderer = _RecordingRenderer()
    config = AppConfig(
        data_path=str(artists_csv),
        output_root=str(tmp_path / "unused"),
        relationships=["lead"],
    )

    report = run_analysis(config, renderer=renderer, render=False)

    assert renderer.calls == []
    assert len(report.results) == 1
    assert report.results[0].status == RenderStatus.SKIPPED
    assert report.results[0].sample_count == 3
