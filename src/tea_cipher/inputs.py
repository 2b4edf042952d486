from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

DEFAULT_INPUT_FILE = "pk.txt"


@dataclass
class CipherInput:
    plaintext: str
    key: str
    source: str


def _read_input_file(path: Path) -> CipherInput:
    lines = path.read_text(encoding="utf-8").splitlines()
    if len(lines) < 2:
        raise ValueError(f"input file must contain plaintext and key lines: {path}")
    return CipherInput(plaintext=lines[0], key=lines[1], source="file")


def _ask(prompt: Callable[[str], str], label: str) -> str:
    try:
        return prompt(f"Please enter the '{label}': ")
    except EOFError:
        return ""


def get_plaintext_and_key(
    args: Optional[Sequence[str]] = None,
    file_path: str | Path = DEFAULT_INPUT_FILE,
    prompt: Callable[[str], str] = input,
) -> CipherInput:
    """Resolve the plaintext and key from the first provider that has them.

    Providers are tried in order: the input file (line 1 plaintext, line 2
    key), then two positional arguments, then an interactive prompt.
    """
    path = Path(file_path)
    if path.is_file():
        return _read_input_file(path)

    if args is not None and len(args) > 1:
        return CipherInput(plaintext=args[0], key=args[1], source="args")

    plaintext = _ask(prompt, "Plaintext")
    key = _ask(prompt, "Key")
    return CipherInput(plaintext=plaintext, key=key, source="prompt")
