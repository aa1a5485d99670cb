# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Iterable, Sequence

from debug import Debug
from errors import InvalidConfiguration

debug = Debug()

ALPHABET = string.ascii_uppercase


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            sig = self.alpha_to_index[letter]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            )
        debug.log("keyboard", f"{letter}->{sig}")
        return sig

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(
        self,
        pairs: Iterable[str | Sequence[str]] = (),
        alphabet: str = ALPHABET,
    ) -> None:
        self.alphabet: str = alphabet
        self.mapping: dict[str, str] = {ch: ch for ch in alphabet}
        used: set[str] = set()

        for raw in pairs:
            # normalise to (a, b)
            if isinstance(raw, str):
                raw = tuple(raw)
            if not isinstance(raw, Sequence) or len(raw) != 2 or not all(isinstance(ch, str) for ch in raw):
                raise InvalidConfiguration(f"Pair {raw!r} must be exactly 2 symbols")
            a, b = (ch.upper() for ch in raw)

            if a not in self.mapping or b not in self.mapping:
                bad = a if a not in self.mapping else b
                raise InvalidConfiguration(f"Symbol {bad!r} not in alphabet")
            if a == b:
                raise InvalidConfiguration(f"Plugboard cannot map a symbol to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise InvalidConfiguration(f"Character {dup!r} already used in plugboard")

            # passed validation → commit swap
            self.mapping[a], self.mapping[b] = b, a
            used.update((a, b))

        self._sig_map = tuple(alphabet.index(self.mapping[ch]) for ch in alphabet)

    def swap(self, letter: str) -> str:
        """Partner of *letter* if it is plugged, otherwise *letter* itself."""
        return self.mapping.get(letter, letter)

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        mapped = self._sig_map[signal]
        debug.log("plugboard", f"{self.alphabet[signal]}->{self.alphabet[mapped]}")
        return mapped

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    @property
    def pairs(self) -> list[str]:
        return [a + b for a, b in self.mapping.items() if a < b]

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"
