"""Generate a synthetic artists.csv for demo/testing."""

from __future__ import annotations

import csv
import random
from pathlib import Path


def main(output_path: Path = Path("artists.csv"), n_rows: int = 200, seed: int = 7) -> None:
    random.seed(seed)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as file_obj:
        writer = csv.writer(file_obj)
        writer.writerow(["Artist", "Streams", "Daily", "Solo", "As lead", "As feature"])
        for idx in range(n_rows):
            solo = random.uniform(50_000, 5_000_000)
            lead = solo * random.uniform(0.05, 0.4)
            feature = random.uniform(0, 2_000_000)
            total = solo + lead + feature + random.uniform(-20_000, 20_000)
            daily = total / random.uniform(800, 3_000)
            writer.writerow(
                [
                    f"Artist {idx + 1}",
                    f"{max(total, 0):,.0f}",
                    f"{daily:,.0f}",
                    f"{solo:,.0f}",
                    f"{lead:,.0f}",
                    f"{feature:,.0f}" if idx % 17 else "",
                ]
            )


if __name__ == "__main__":
    main()
