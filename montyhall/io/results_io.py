"""
Batch result persistence.

Batches can be exported as JSON (full game detail, reloadable) or CSV
(one row per game per strategy, for spreadsheets and data frames).
"""

import csv
import json
from pathlib import Path

from montyhall.models.game import BatchResult

CSV_COLUMNS = [
    "game",
    "strategy",
    "outcome",
    "initial_pick",
    "revealed_door",
    "final_pick",
]


class ResultsExportError(Exception):
    """Exception raised when exporting results fails."""

    pass


class ResultsLoadError(Exception):
    """Exception raised when loading results fails."""

    pass


def export_results(batch: BatchResult, path: str | Path) -> Path:
    """Export a batch to a JSON or CSV file.

    Args:
        batch: Results to export
        path: Destination (.json or .csv)

    Returns:
        Path to the written file

    Raises:
        ResultsExportError: If the format is unsupported or writing fails
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in (".json", ".csv"):
        raise ResultsExportError(
            f"Unsupported export format: {suffix}. Use .json or .csv"
        )

    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to a temp file first so a failed export never truncates
        # an existing file
        temp_path = path.with_suffix(path.suffix + ".tmp")
        with open(temp_path, "w", encoding="utf-8", newline="") as f:
            if suffix == ".json":
                f.write(batch.model_dump_json(indent=2))
            else:
                _write_csv(batch, f)

        temp_path.replace(path)
        return path

    except OSError as e:
        raise ResultsExportError(f"Failed to export results: {e}") from e


def _write_csv(batch: BatchResult, f) -> None:
    writer = csv.writer(f)
    writer.writerow(CSV_COLUMNS)
    for number, game in enumerate(batch.games, start=1):
        for strategy, outcome in game.rows():
            writer.writerow([
                number,
                strategy.value,
                outcome.value,
                game.initial_pick,
                game.revealed_door,
                game.final_picks[strategy],
            ])


def load_results(path: str | Path) -> BatchResult:
    """Load a batch previously exported as JSON.

    Args:
        path: Path to a .json export

    Returns:
        The BatchResult

    Raises:
        ResultsLoadError: If the file is missing, corrupt or not a batch
    """
    path = Path(path)

    if not path.exists():
        raise ResultsLoadError(f"Results file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return BatchResult.model_validate(data)

    except json.JSONDecodeError as e:
        raise ResultsLoadError(f"Corrupt results file: {e}") from e
    except Exception as e:
        raise ResultsLoadError(f"Failed to load results: {e}") from e
