# settings.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from debug import Debug
from errors import InvalidConfiguration

debug = Debug()

DEFAULT_MODEL = "M3"


@dataclass(slots=True)
class WheelSettings:
    """One wheel slot: rotor name, ring setting and starting (ground) position."""

    number: str
    ring: str | int = "A"
    ground: str | int = "A"


@dataclass(slots=True)
class MachineSettings:
    """Snapshot a Machine is built from. Wheels run leftmost first."""

    reflector: str
    wheels: List[WheelSettings]
    plugboard: List[Any] = field(default_factory=list)
    model: str = DEFAULT_MODEL

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "reflector": self.reflector,
            "wheels": [
                {"number": w.number, "ring": w.ring, "ground": w.ground}
                for w in self.wheels
            ],
            "plugboard": [
                p if isinstance(p, str) else list(p) for p in self.plugboard
            ],
        }


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidConfiguration(f"{what} must be a non-empty string, got {value!r}")
    return value


def _parse_wheel(raw: Any, idx: int) -> WheelSettings:
    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"Wheel #{idx} must be an object, got {raw!r}")
    if "number" not in raw:
        raise InvalidConfiguration(f"Wheel #{idx} is missing 'number'")
    return WheelSettings(
        number=_require_str(raw["number"], f"Wheel #{idx} number"),
        ring=raw.get("ring", "A"),
        ground=raw.get("ground", "A"),
    )


def parse_settings(data: Any) -> MachineSettings:
    """Validate the *shape* of a settings document. Wheel names, letters and
    plug pairs are checked later, when the Machine is built."""
    if not isinstance(data, dict):
        raise InvalidConfiguration("Settings must be a JSON object")

    required = {"reflector", "wheels"}
    missing = required - data.keys()
    if missing:
        raise InvalidConfiguration(f"Missing keys in settings: {', '.join(sorted(missing))}")

    wheels = data["wheels"]
    if not isinstance(wheels, list) or not wheels:
        raise InvalidConfiguration("'wheels' must be a non-empty list")

    plugboard = data.get("plugboard") or []
    if not isinstance(plugboard, list):
        raise InvalidConfiguration("'plugboard' must be a list of letter pairs")

    settings = MachineSettings(
        model=_require_str(data.get("model", DEFAULT_MODEL), "model"),
        reflector=_require_str(data["reflector"], "reflector"),
        wheels=[_parse_wheel(w, i) for i, w in enumerate(wheels)],
        plugboard=plugboard,
    )
    debug.log("settings", f"{settings.model} {settings.reflector} "
                          f"{[w.number for w in settings.wheels]}")
    return settings


def load_settings(path: str | Path) -> MachineSettings:
    raw = Path(path).read_bytes()
    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise InvalidConfiguration(f"{path}: not UTF-8 text ({e})") from e
    except json.JSONDecodeError as e:
        raise InvalidConfiguration(f"{path}: not valid JSON ({e})") from e
    return parse_settings(data)


def save_settings(settings: MachineSettings, path: str | Path) -> None:
    Path(path).write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
