"""CLI entrypoint for artist stream regressions."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stream_regression.analysis import run_analysis
from stream_regression.config import load_config
from stream_regression.exceptions import ConfigError, DatasetReadError
from stream_regression.models import AnalysisReport, AppConfig, RenderStatus
from stream_regression.tracing import RunTraceCollector

app = typer.Typer(help="Fit and plot total streams against solo, featured, and lead streams.")
console = Console()


def _vprint(enabled: bool, message: str) -> None:
    """Print verbose progress messages."""
    if enabled:
        console.print(f"[cyan]verbose:[/cyan] {escape(message)}")


def _configure_trace_streaming(trace: RunTraceCollector, enabled: bool) -> None:
    """Enable live trace-event printing in verbose mode."""
    if not enabled:
        trace.set_live_sink(None)
        return

    def _sink(event: dict[str, Any]) -> None:
        parts = [
            f"trace[{event.get('seq', '?')}]",
            f"{event.get('component', '')}.{event.get('action', '')}",
            f"status={event.get('status', '')}",
        ]
        if event.get("relationship"):
            parts.append(f"relationship={event['relationship']}")
        if event.get("details"):
            parts.append(f"details={event['details']}")
        _vprint(True, " ".join(parts))

    trace.set_live_sink(_sink)


def _load_runtime_config(config: Path | None, overrides: dict[str, Any]) -> AppConfig:
    try:
        return load_config(config_path=config, overrides=overrides)
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc


def _run(
    runtime_config: AppConfig, trace: RunTraceCollector, render: bool
) -> AnalysisReport:
    try:
        return run_analysis(runtime_config, trace=trace, render=render)
    except DatasetReadError as exc:
        console.print(f"[red]Error parsing dataset: {escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc


@app.command("analyze")
def analyze_cmd(
    data: Annotated[Path | None, typer.Option(help="Path to the artist CSV file.")] = None,
    output_root: Annotated[
        str | None, typer.Option(help="Directory that receives the plot images.")
    ] = None,
    width: Annotated[int | None, typer.Option(help="Image width in pixels.")] = None,
    height: Annotated[int | None, typer.Option(help="Image height in pixels.")] = None,
    config: Annotated[Path | None, typer.Option(help="Optional YAML config path.")] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose/--no-verbose", help="Enable detailed logs. Enabled by default."),
    ] = True,
) -> None:
    """Fit each relationship and save one scatter plot per relationship."""
    _vprint(verbose, "Loading runtime configuration (YAML + CLI overrides).")
    runtime_config = _load_runtime_config(
        config,
        {
            "data_path": str(data) if data is not None else None,
            "output_root": output_root,
            "width": width,
            "height": height,
        },
    )
    trace = RunTraceCollector()
    _configure_trace_streaming(trace, verbose)
    _vprint(verbose, f"Reading file from path: {runtime_config.data_path}")
    report = _run(runtime_config, trace, render=True)
    _vprint(verbose, f"Successfully parsed {report.record_count} records.")

    for result in report.results:
        console.print(f"{escape(result.title)} Regression: {result.fit.equation}")
        if result.status == RenderStatus.RENDERED:
            console.print(f"[green]Scatter plot saved to[/green] {escape(result.output_path)}")
        else:
            console.print(
                f"[red]Error generating plot for {escape(result.title)}: "
                f"{escape(result.error)}[/red]"
            )
    if report.failures:
        console.print(f"Plots failed: {len(report.failures)} of {len(report.results)}")


@app.command("fit")
def fit_cmd(
    data: Annotated[Path | None, typer.Option(help="Path to the artist CSV file.")] = None,
    config: Annotated[Path | None, typer.Option(help="Optional YAML config path.")] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose/--no-verbose", help="Enable detailed logs. Enabled by default."),
    ] = False,
) -> None:
    """Print the regression for each relationship without writing plots."""
    runtime_config = _load_runtime_config(
        config, {"data_path": str(data) if data is not None else None}
    )
    trace = RunTraceCollector()
    _configure_trace_streaming(trace, verbose)
    report = _run(runtime_config, trace, render=False)

    table = Table(title=f"{report.record_count} records from {escape(report.source_path)}")
    table.add_column("Relationship")
    table.add_column("Samples", justify="right")
    table.add_column("Slope", justify="right")
    table.add_column("Intercept", justify="right")
    for result in report.results:
        table.add_row(
            escape(result.title),
            str(result.sample_count),
            f"{result.fit.slope:.4f}",
            f"{result.fit.intercept:.4f}",
        )
    console.print(table)


def main() -> None:
    """Script entrypoint."""
    app()


if __name__ == "__main__":
    main()
