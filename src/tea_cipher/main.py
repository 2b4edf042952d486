from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import MODES, default_config, load_config
from .errors import CipherError
from .inputs import get_plaintext_and_key
from .jsonl import ResultJournal
from .runner import CipherRunner


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TEA single-block encrypt/decrypt over hex text")
    parser.add_argument("values", nargs="*", metavar="VALUE", help="Plaintext (or ciphertext) hex, then key hex")
    parser.add_argument("--config", help="Path to JSON config")
    parser.add_argument("--input-file", help="File with the plaintext and key on two lines")
    parser.add_argument("--mode", choices=MODES, help="Operation to run")
    parser.add_argument("--log-dir", help="Directory for JSONL result journal")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=("info", "debug"),
        help="Console log verbosity",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else default_config()
    except ValueError as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return 2

    input_file = args.input_file or config.input_file
    mode = args.mode or config.mode
    log_dir = args.log_dir or config.log_dir

    journal = ResultJournal(Path(log_dir)) if log_dir else None
    runner = CipherRunner(mode=mode, journal=journal, log_level=args.log_level)

    try:
        cipher_input = get_plaintext_and_key(args.values, file_path=input_file)
        lines = runner.run(cipher_input)
    except CipherError as exc:
        print(f"cipher error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"input error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"input error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 0

    for line in lines:
        print(line)
    return 0
