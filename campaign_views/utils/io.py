"""Export report frames to disk."""

from collections.abc import Mapping
from pathlib import Path

import pandas as pd
from rich.console import Console

type FilePath = str | Path

console = Console()

_SUFFIXES = {"csv": ".csv", "parquet": ".parquet", "excel": ".xlsx", "json": ".json"}


def _write_frame(df: pd.DataFrame, path: Path, fmt: str) -> None:
    match fmt:
        case "csv":
            df.to_csv(path, index=False)
        case "parquet":
            df.to_parquet(path, index=False)
        case "excel":
            df.to_excel(path, index=False, sheet_name=path.stem[:31])
        case "json":
            df.to_json(path, orient="records", indent=2)


def export_frames(frames: Mapping[str, pd.DataFrame], directory: FilePath, fmt: str = "csv") -> list[Path]:
    """Write each frame to ``<directory>/<name>.<ext>`` and return the paths."""
    if fmt not in _SUFFIXES:
        raise ValueError(f"Unsupported output format: {fmt}")

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    written = []
    for name, df in frames.items():
        path = directory / f"{name}{_SUFFIXES[fmt]}"
        _write_frame(df, path, fmt)
        written.append(path)

    console.print(f"  Exported {len(written)} frames ({fmt}) to {directory}")
    return written
