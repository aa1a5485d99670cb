# wiring.py
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping

from errors import InvalidConfiguration, UnknownReflector
from keyboard_and_plugboard import ALPHABET
from rotor_and_reflector import Reflector, RotorType

# ────────────────────────────────────────────────────────────────────────
#  1. Wheel database
# ────────────────────────────────────────────────────────────────────────

# Rotors -----------------------------------------------------------------
I    = RotorType("I",    "EKMFLGDQVZNTOWYHXUSPAIBRCJ", notches="Q")
II   = RotorType("II",   "AJDKSIRUXBLHWTMCQGZNPYFVOE", notches="E")
III  = RotorType("III",  "BDFHJLCPRTXVZNYEIWGAKMUSQO", notches="V")
IV   = RotorType("IV",   "ESOVPZJAYQUIRHXLNFTGKDCMWB", notches="J")
V    = RotorType("V",    "VZBRGITYUPSDNHLXAWMJQOFECK", notches="Z")
VI   = RotorType("VI",   "JPGVOUMFYQBENHZRDKASXLICTW", notches="ZM")
VII  = RotorType("VII",  "NZJHGRCXMYSWBOUFAIVLPEKQDT", notches="ZM")
VIII = RotorType("VIII", "FKQHTLXOCBJSPDZRAMEWNIUYGV", notches="ZM")

# Fourth-position wheels of the naval machine, no notch
BETA  = RotorType("Beta",  "LEYJVCNIXWPBQMDRTAKZGFUHOS")
GAMMA = RotorType("Gamma", "FSOKANUERHMBTIYCWLQPZXVGJD")

# Reflectors -------------------------------------------------------------
A      = Reflector("A",      "EJMZALYXVBWFCRQUONTSPIKHGD")
B      = Reflector("B",      "YRUHQSLDPXNGOKMIEBFZCWVJAT")
C      = Reflector("C",      "FVPJIAOYEDRZXWGCTKUQSBNMHL")
B_THIN = Reflector("B Thin", "ENKQAUYWJICOPBLMDXZVFTHRGS")
C_THIN = Reflector("C Thin", "RDOBJNTKVEHMLFCWZAXGYIPSUQ")

# Rotors further left than one of these are not driven by the pawls
NON_STEPPING: frozenset[str] = frozenset({"Beta", "Gamma"})

# Build the lookup dicts -------------------------------------------------

rotor_dict: Mapping[str, RotorType] = MappingProxyType({
    r.name: r for r in (I, II, III, IV, V, VI, VII, VIII, BETA, GAMMA)
})

reflector_dict: Mapping[str, Reflector] = MappingProxyType({
    r.name: r for r in (A, B, C, B_THIN, C_THIN)
})


# ────────────────────────────────────────────────────────────────────────
#  2. Machine models
# ────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Model:
    """Which wheels and reflectors a machine model accepts."""

    name: str
    rotor_count: int
    rotors: frozenset[str]
    reflectors: frozenset[str]
    fixed_leftmost: frozenset[str] = frozenset()   # non-stepping 4th wheel

    def check(self, rotor_names: list[str], reflector: str) -> None:
        """Raise InvalidConfiguration unless the wheel order fits this model."""
        if len(rotor_names) != self.rotor_count:
            raise InvalidConfiguration(
                f"Model {self.name} takes {self.rotor_count} rotors, got {len(rotor_names)}"
            )

        stepping = rotor_names
        if self.fixed_leftmost:
            leftmost, stepping = rotor_names[0], rotor_names[1:]
            if leftmost not in self.fixed_leftmost:
                allowed = ", ".join(sorted(self.fixed_leftmost))
                raise InvalidConfiguration(
                    f"Model {self.name} needs one of {allowed} as leftmost rotor, got {leftmost}"
                )

        for name in stepping:
            if name not in self.rotors:
                raise InvalidConfiguration(f"Rotor {name} does not fit model {self.name}")

        if reflector not in self.reflectors:
            raise InvalidConfiguration(f"Reflector {reflector} does not fit model {self.name}")


_ARMY = frozenset({"I", "II", "III", "IV", "V"})
_NAVY = _ARMY | {"VI", "VII", "VIII"}

model_dict: Mapping[str, Model] = MappingProxyType({
    m.name: m
    for m in (
        Model("I", 3, _ARMY, frozenset({"A", "B", "C"})),
        Model("M3", 3, _NAVY, frozenset({"B", "C"})),
        Model("M4", 4, _NAVY, frozenset({"B Thin", "C Thin"}), fixed_leftmost=NON_STEPPING),
    )
})


# ────────────────────────────────────────────────────────────────────────
#  3. Lookup helpers (case-insensitive aliases)
# ────────────────────────────────────────────────────────────────────────


def _aliases(table: Mapping[str, object]) -> Dict[str, str]:
    return {name.casefold(): name for name in table}


_ROTOR_ALIASES = _aliases(rotor_dict)
_REFLECTOR_ALIASES = _aliases(reflector_dict)
_MODEL_ALIASES = _aliases(model_dict)


def get_rotor_type(name: str) -> RotorType:
    try:
        return rotor_dict[_ROTOR_ALIASES[name.casefold()]]
    except (KeyError, AttributeError):
        raise InvalidConfiguration(
            f"Unknown rotor {name!r}. Expected one of {list(rotor_dict)}"
        ) from None


def get_reflector(name: str) -> Reflector:
    try:
        return reflector_dict[_REFLECTOR_ALIASES[name.casefold()]]
    except (KeyError, AttributeError):
        raise UnknownReflector(
            f"Unknown reflector {name!r}. Expected one of {list(reflector_dict)}"
        ) from None


def get_model(name: str) -> Model:
    try:
        return model_dict[_MODEL_ALIASES[name.casefold()]]
    except (KeyError, AttributeError):
        raise InvalidConfiguration(
            f"Unknown model {name!r}. Expected one of {list(model_dict)}"
        ) from None


__all__ = [
    "NON_STEPPING",
    "Model",
    "get_model",
    "get_reflector",
    "get_rotor_type",
    "model_dict",
    "reflector_dict",
    "rotor_dict",
]
