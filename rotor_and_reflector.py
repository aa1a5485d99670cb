# rotor_and_reflector.py
from __future__ import annotations

from debug import Debug
from errors import InvalidConfiguration
from keyboard_and_plugboard import ALPHABET

debug = Debug()


def setting_offset(value: str | int, alphabet: str = ALPHABET) -> int:
    """Ring / ground setting → offset. Accepts a window letter or 1-based int."""
    size = len(alphabet)
    if isinstance(value, int) and not isinstance(value, bool):
        if 1 <= value <= size:
            return value - 1
    elif isinstance(value, str) and len(value) == 1 and value.upper() in alphabet:
        return alphabet.index(value.upper())
    raise InvalidConfiguration(
        f"Setting {value!r} must be a letter of the alphabet or a number 1–{size}"
    )


class RotorType:
    """Catalog entry: the fixed wiring and notches shared by every wheel of a kind."""

    def __init__(self, name: str, wiring: str, notches: str = "",
                 alphabet: str = ALPHABET) -> None:
        if len(wiring) != len(alphabet) or sorted(wiring) != sorted(alphabet):
            raise InvalidConfiguration(f"Rotor {name}: wiring must be a permutation of alphabet")
        if not set(notches) <= set(alphabet):
            raise InvalidConfiguration(f"Rotor {name}: notch characters must be in the alphabet")

        self.name = name
        self.wiring = wiring
        self.alphabet = alphabet
        self.size = len(alphabet)

        # integer lookup tables, inverse precomputed once
        self._fwd = tuple(alphabet.index(c) for c in wiring)
        self._rev = tuple(wiring.index(c) for c in alphabet)

        self.notches = frozenset(alphabet.index(c) for c in notches)

    def __repr__(self) -> str:
        notches = "".join(self.alphabet[n] for n in sorted(self.notches))
        return f"<RotorType {self.name} notches={notches or '-'}>"


class Rotor:
    """One wheel in the machine: a rotor type plus its ring and ground settings."""

    def __init__(self, rotor_type: RotorType, ring: str | int = "A",
                 ground: str | int = "A") -> None:
        self.rotor_type = rotor_type
        self.alphabet = rotor_type.alphabet
        self.size = rotor_type.size
        self.ring_setting = setting_offset(ring, self.alphabet)
        self.ground_setting = setting_offset(ground, self.alphabet)

    # ── settings ─────────────────────────────────────────────────
    @property
    def name(self) -> str:
        return self.rotor_type.name

    @property
    def window(self) -> str:
        """Letter currently visible through the machine's window."""
        return self.alphabet[self.ground_setting]

    @property
    def ring(self) -> str:
        return self.alphabet[self.ring_setting]

    def set_ground(self, ground: str | int) -> "Rotor":
        self.ground_setting = setting_offset(ground, self.alphabet)
        return self

    @property
    def offset(self) -> int:
        # ring and ground collapse into one angular offset
        return (self.ring_setting - self.ground_setting) % self.size

    # ── contacts ─────────────────────────────────────────────────
    def entry_contact(self, sig: int) -> int:
        return (sig - self.offset) % self.size

    def exit_contact(self, sig: int) -> int:
        return (sig + self.offset) % self.size

    # ── stepping ─────────────────────────────────────────────────
    @property
    def at_notch(self) -> bool:
        return self.ground_setting in self.rotor_type.notches

    def step(self) -> bool:
        """Advance one and return True if the *old* position was a notch."""
        turnover = self.at_notch
        self.ground_setting = (self.ground_setting + 1) % self.size
        debug.log("rotor", f"{self.name} -> {self.window}, turnover={turnover}")
        return turnover

    # ── signal paths ─────────────────────────────────────────────
    def forward(self, sig: int) -> int:
        """Right-to-left pass, towards the reflector."""
        return self.exit_contact(self.rotor_type._fwd[self.entry_contact(sig)])

    def backward(self, sig: int) -> int:
        """Left-to-right pass, back from the reflector."""
        return self.exit_contact(self.rotor_type._rev[self.entry_contact(sig)])

    def __repr__(self) -> str:
        return f"<Rotor {self.name} ring={self.ring} pos={self.window}>"


class Reflector:
    def __init__(self, name: str, wiring: str, alphabet: str = ALPHABET) -> None:
        if len(wiring) != len(alphabet) or not set(wiring) <= set(alphabet):
            raise InvalidConfiguration(f"Reflector {name}: wiring must cover the alphabet")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = alphabet.index(c)
            if wiring[j] != alphabet[i] or i == j:
                raise InvalidConfiguration(
                    f"Reflector {name}: wiring must be an involution with no fixed points"
                )

        self.name = name
        self.wiring = wiring
        self.alphabet = alphabet
        self.size = len(alphabet)
        self._map = tuple(alphabet.index(c) for c in wiring)

    def reflect(self, sig: int) -> int:
        mapped = self._map[sig]
        debug.log("reflector", f"{self.alphabet[sig]}->{self.alphabet[mapped]}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
