"""
File and console I/O for the Monty Hall simulation.

This module handles:
- Console rendering of proportion tables and single games
- Batch result export (JSON/CSV) and import (JSON)
"""

from montyhall.io.report_writer import (
    build_proportion_table,
    format_proportion_table,
    print_game_result,
    print_proportion_table,
)
from montyhall.io.results_io import (
    CSV_COLUMNS,
    ResultsExportError,
    ResultsLoadError,
    export_results,
    load_results,
)

__all__ = [
    # Reports
    "build_proportion_table",
    "format_proportion_table",
    "print_game_result",
    "print_proportion_table",
    # Results
    "CSV_COLUMNS",
    "ResultsExportError",
    "ResultsLoadError",
    "export_results",
    "load_results",
]
