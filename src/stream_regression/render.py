"""Scatter plot with fitted line, rendered to a raster image."""

from __future__ import annotations

import math
from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from stream_regression.exceptions import RenderError  # noqa: E402
from stream_regression.models import Fit  # noqa: E402
from stream_regression.regression import predict  # noqa: E402
from stream_regression.relationships import max_value  # noqa: E402


def render_relationship(
    samples: Sequence[tuple[float, float]],
    line: Fit,
    title: str,
    output_path: Path,
    *,
    width: int = 1024,
    height: int = 768,
    dpi: int = 100,
    marker_size: float = 5.0,
    max_line_points: int = 10_000,
) -> Path:
    """Draw samples and the fitted line, then save the figure as an image."""
    if not samples:
        raise RenderError(f"{title}: no samples to plot.")
    if not line.is_finite:
        raise RenderError(f"{title}: fit is not finite ({line.slope}, {line.intercept}).")

    xs = [x for x, _ in samples]
    ys = [y for _, y in samples]
    max_x = max_value(xs)
    max_y = max_value(ys)
    for axis, limit in (("x", max_x), ("y", max_y)):
        if not math.isfinite(limit) or limit <= 0:
            raise RenderError(f"{title}: cannot scale {axis} axis to 0..{limit}.")

    line_xs = line_positions(max_x, max_line_points)
    line_ys = predict(line, line_xs)

    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi, facecolor="white")
    try:
        ax = fig.add_subplot(1, 1, 1)
        ax.scatter(xs, ys, s=marker_size**2, color="red", zorder=3)
        ax.plot(line_xs, line_ys, color="blue", label=line.equation, zorder=2)
        ax.set_xlim(0.0, max_x)
        ax.set_ylim(0.0, max_y)
        ax.set_title(title, fontsize=20)
        ax.set_xlabel("X")
        ax.set_ylabel("Y")
        ax.grid(visible=True, which="major", linestyle="-", color="gray", lw=0.5)
        ax.legend(loc="upper left", framealpha=0.8, edgecolor="black")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=dpi, format="png")
    except (OSError, ValueError) as exc:
        raise RenderError(f"{title}: cannot write {output_path}: {exc}") from exc
    finally:
        plt.close(fig)
    return output_path


def line_positions(max_x: float, max_points: int) -> list[float]:
    """Integer x positions from 0 to max_x, thinned to max_points evenly spaced ones."""
    last = int(max_x)
    if last + 1 <= max_points:
        return [float(x) for x in range(last + 1)]
    step = max_x / (max_points - 1)
    return [step * index for index in range(max_points)]
