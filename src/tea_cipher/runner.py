from __future__ import annotations

from typing import List, Optional

from .cipher import decrypt, encrypt
from .errors import CipherError
from .inputs import CipherInput
from .jsonl import ResultJournal


class CipherRunner:
    def __init__(self, mode: str, journal: Optional[ResultJournal] = None, log_level: str = "info") -> None:
        self.mode = mode
        self.journal = journal
        self.log_level = log_level

    def run(self, cipher_input: CipherInput) -> List[str]:
        if self.log_level == "debug":
            print(f"input source: {cipher_input.source}, mode: {self.mode}")

        if self.mode == "decrypt":
            plaintext = self._apply("decrypt", cipher_input.plaintext, cipher_input)
            return [f"Plain Text: {plaintext}"]

        ciphertext = self._apply("encrypt", cipher_input.plaintext, cipher_input)
        lines = [f"Cipher Text: {ciphertext}"]
        if self.mode == "roundtrip":
            decrypted = self._apply("decrypt", ciphertext, cipher_input)
            lines.append(f"Decrypted Text: {decrypted}")
        return lines

    def _apply(self, operation: str, block_hex: str, cipher_input: CipherInput) -> str:
        func = encrypt if operation == "encrypt" else decrypt
        try:
            result = func(block_hex, cipher_input.key)
        except CipherError as exc:
            if self.journal is not None:
                self.journal.record_error(operation, cipher_input.source, exc)
            raise

        if self.journal is not None:
            self.journal.record_result(operation, cipher_input.source, block_hex, result)
        return result
