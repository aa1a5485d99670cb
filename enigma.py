# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from debug import Debug
from errors import InvalidConfiguration
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Rotor, setting_offset
from settings import MachineSettings
from wiring import NON_STEPPING, get_model, get_reflector, get_rotor_type

debug = Debug()


class Machine:
    """Rotor stack + plugboard + reflector. ``rotors[0]`` is the leftmost wheel,
    ``rotors[-1]`` the rightmost one, which moves on every key press."""

    def __init__(
        self,
        model: str,
        reflector: str,
        rotors: list[Rotor],
        plugboard: Plugboard | None = None,
    ) -> None:
        spec = get_model(model)
        refl = get_reflector(reflector)
        spec.check([r.name for r in rotors], refl.name)

        self.model = spec.name
        self.reflector_type = refl.name
        self.rotors = list(rotors)
        self.pb = plugboard if plugboard is not None else Plugboard()
        self.kb = Keyboard()

    @classmethod
    def from_settings(cls, settings: MachineSettings) -> "Machine":
        rotors = [
            Rotor(get_rotor_type(w.number), ring=w.ring, ground=w.ground)
            for w in settings.wheels
        ]
        return cls(
            settings.model,
            settings.reflector,
            rotors,
            Plugboard(settings.plugboard),
        )

    # ── key helpers ─────────────────────────────────────────────

    @property
    def positions(self) -> str:
        """Window letters, leftmost first."""
        return "".join(r.window for r in self.rotors)

    def set_key(self, key_part: str) -> None:
        """Rotate each rotor to its visible window letter."""
        if len(key_part) != len(self.rotors):
            raise InvalidConfiguration(
                f"Key {key_part!r} needs exactly {len(self.rotors)} letters"
            )
        for rotor, letter in zip(self.rotors, key_part):
            setting_offset(letter, rotor.alphabet)      # all or nothing
        for rotor, letter in zip(self.rotors, key_part):
            rotor.set_ground(letter)

    # ── stepping logic  ─────────────────────────────────────────

    def advance(self) -> None:
        """Move the wheels for one key press, double step included."""
        for idx in range(len(self.rotors) - 1, -1, -1):
            rotor = self.rotors[idx]
            if rotor.name in NON_STEPPING:
                break

            if rotor.step():
                continue

            # a left neighbour resting on its notch is pushed along too
            if idx > 0 and self.rotors[idx - 1].at_notch:
                continue
            break

        if debug.active("stepping"):
            debug.log("stepping", f"Rotor pos {self.positions}")

    # ── encipher one symbol  ────────────────────────────────────

    def key(self, letter: str) -> str:
        signal = self.kb.forward(letter)
        self.advance()

        signal = self.pb.forward(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = get_reflector(self.reflector_type).reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        signal = self.pb.backward(signal)
        out_ch = self.kb.backward(signal)
        debug.log("encipher", f"{letter}->{out_ch}")
        return out_ch

    def __repr__(self) -> str:
        wheels = " ".join(r.name for r in self.rotors)
        return (f"<Machine {self.model} UKW-{self.reflector_type} "
                f"[{wheels}] pos={self.positions} {self.pb!r}>")
