# transcoder.py
from __future__ import annotations

import string
from typing import TextIO

from enigma import Machine
from settings import MachineSettings

_LETTERS = frozenset(string.ascii_letters)


class Transcoder:
    """Feeds text through a Machine one letter at a time.

    Anything that is not A–Z / a–z is copied through untouched and does not
    move the rotors. Letters keep their case. There is no decrypt: running
    the ciphertext through a freshly rewound machine gives the plaintext.
    """

    def __init__(self, machine: Machine, settings: MachineSettings | None = None) -> None:
        self.machine = machine
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: MachineSettings) -> "Transcoder":
        return cls(Machine.from_settings(settings), settings)

    def rewind(self) -> None:
        """Replace the machine with a fresh one at the starting positions."""
        if self.settings is None:
            raise RuntimeError("Transcoder built without settings cannot rewind")
        self.machine = Machine.from_settings(self.settings)

    def encode(self, text: str) -> str:
        out: list[str] = []
        for ch in text:
            if ch not in _LETTERS:
                out.append(ch)
                continue
            result = self.machine.key(ch.upper())
            out.append(result.lower() if ch.islower() else result)
        return "".join(out)

    def transcode_stream(self, reader: TextIO, writer: TextIO, chunk_size: int = 4096) -> int:
        """Encode *reader* into *writer*; the rotors carry across chunks."""
        written = 0
        for chunk in iter(lambda: reader.read(chunk_size), ""):
            written += writer.write(self.encode(chunk))
        return written
