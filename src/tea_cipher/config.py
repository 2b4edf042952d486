from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .inputs import DEFAULT_INPUT_FILE

MODES = ("roundtrip", "encrypt", "decrypt")


@dataclass
class CipherConfig:
    input_file: Path
    mode: str
    log_dir: Optional[Path]


def default_config() -> CipherConfig:
    return CipherConfig(input_file=Path(DEFAULT_INPUT_FILE), mode="roundtrip", log_dir=None)


def load_config(path: str | Path) -> CipherConfig:
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise ValueError(f"config file not found: {cfg_path}")

    try:
        raw = json.loads(cfg_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError("config must be a JSON object")

    input_file = raw.get("input_file", DEFAULT_INPUT_FILE)
    mode = raw.get("mode", "roundtrip")
    log_dir = raw.get("log_dir")

    if not isinstance(input_file, str) or not input_file:
        raise ValueError("input_file must be a non-empty string")
    if mode not in MODES:
        raise ValueError(f"mode must be one of: {', '.join(MODES)}")
    if log_dir is not None and (not isinstance(log_dir, str) or not log_dir):
        raise ValueError("log_dir must be null or a non-empty string")

    return CipherConfig(
        input_file=Path(input_file),
        mode=mode,
        log_dir=Path(log_dir) if log_dir is not None else None,
    )
