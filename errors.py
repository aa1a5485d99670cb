# errors.py
from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Machine settings that cannot describe a working machine."""


class UnknownReflector(InvalidConfiguration):
    """Reflector name did not resolve while a letter was being keyed.

    Rotors have already stepped when this is raised, so the machine is
    out of sync with its partner and must be thrown away.
    """
