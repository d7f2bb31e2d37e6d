"""CSV logger for summary generation metrics."""

import csv
import threading
from datetime import UTC, datetime
from pathlib import Path

from meetingnotes.config import get_settings

HEADER = ["timestamp", "operation", "duration_ms", "input_chars", "tokens", "status"]


class CSVLogger:
    """Thread-safe CSV logger for appending timing metrics."""

    def __init__(self, filepath: str | Path) -> None:
        """Initialize CSV logger.

        Args:
            filepath: Path to CSV file (will be created if doesn't exist)
        """
        self.filepath = Path(filepath)
        self._lock = threading.Lock()
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def _write_header_if_needed(self) -> None:
        if not self.filepath.exists() or self.filepath.stat().st_size == 0:
            with open(self.filepath, "w", newline="") as f:
                csv.writer(f).writerow(HEADER)

    def log(
        self,
        operation: str,
        duration_ms: float,
        input_chars: int = 0,
        tokens: int = 0,
        status: str = "ok",
    ) -> None:
        """Append one timing row.

        Args:
            operation: Name of the operation (e.g., "generate_summary")
            duration_ms: Duration in milliseconds
            input_chars: Size of the input text
            tokens: Completion tokens reported by the API
            status: "ok" or "error"
        """
        with self._lock:
            self._write_header_if_needed()
            with open(self.filepath, "a", newline="") as f:
                csv.writer(f).writerow([
                    datetime.now(UTC).isoformat(),
                    operation,
                    f"{duration_ms:.2f}",
                    input_chars,
                    tokens,
                    status,
                ])


_metrics_logger: CSVLogger | None = None


def get_metrics_logger() -> CSVLogger | None:
    """Get the generation metrics logger, or None when METRICS_CSV_PATH is unset."""
    global _metrics_logger
    path = get_settings().metrics_csv_path
    if not path:
        return None
    if _metrics_logger is None or _metrics_logger.filepath != Path(path):
        _metrics_logger = CSVLogger(path)
    return _metrics_logger
