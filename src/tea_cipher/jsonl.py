from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from .errors import CipherError


class ResultJournal:
    """Appends cipher results and failures to daily JSON-lines files.

    Keys are never written; only the operation, where the input came from and
    the hex block before and after.
    """

    def __init__(self, log_dir: Path) -> None:
        self.log_dir = log_dir
        self.log_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def utc_now_iso() -> str:
        return datetime.now(tz=timezone.utc).isoformat()

    def record_result(self, operation: str, source: str, input_hex: str, output_hex: str) -> None:
        self._write(
            "results",
            {
                "ts_utc": self.utc_now_iso(),
                "operation": operation,
                "source": source,
                "input_hex": input_hex,
                "output_hex": output_hex,
            },
        )

    def record_error(self, operation: str, source: str, exc: CipherError) -> None:
        self._write(
            "errors",
            {
                "ts_utc": self.utc_now_iso(),
                "operation": operation,
                "source": source,
                "stage": exc.stage,
                "reason": exc.reason,
                "details": exc.details,
            },
        )

    def _write(self, stream: str, record: Dict[str, Any]) -> None:
        date_suffix = datetime.now(tz=timezone.utc).strftime("%Y%m%d")
        path = self.log_dir / f"{stream}-{date_suffix}.jsonl"
        with path.open("a", encoding="utf-8") as fp:
            fp.write(json.dumps(record, ensure_ascii=False, separators=(",", ":")) + "\n")
