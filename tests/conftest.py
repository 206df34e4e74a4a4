from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from stream_regression.models import ColumnLayout


def build_artists_csv(path: Path, rows: list[str], header: str | None = None) -> Path:
    header_line = header or "Artist,Streams,Daily,Solo,As lead,As feature"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join([header_line, *rows]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_artists_csv(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, rows: list[str], header: str | None = None) -> Path:
        return build_artists_csv(tmp_path / name, rows, header=header)

    return _write


@pytest.fixture
def compact_layout() -> ColumnLayout:
    return ColumnLayout(total=1, solo=2, lead=3, feature=4)


@pytest.fixture
def artists_csv(tmp_path: Path) -> Path:
    return build_artists_csv(
        tmp_path / "artists.csv",
        [
            'Drake,"1,000","12,345","500","300","200"',
            'Taylor Swift,"2,000",800,"800","600","400"',
            "The Weeknd,3000,900,1100,900,600",
        ],
    )


@pytest.fixture
def compact_csv(tmp_path: Path) -> Path:
    return build_artists_csv(
        tmp_path / "compact.csv",
        ["Artist1,1000,500,300,200", "Artist2,2000,800,600,400"],
        header="Name,Total Streams,Solo Streams,Lead Streams,Feature Streams",
    )
