# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = (
    "keyboard",
    "plugboard",
    "rotor",
    "reflector",
    "stepping",
    "encipher",
    "settings",
)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Debug:
    _root_configured: bool = False          # class-level guard
    _shared: Dict[str, bool] = {c: False for c in COMPONENTS}
    _enabled: bool = True

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        If `log_to` is given, messages also stream to that file.
        Every Debug() instance shares the same component map, so a switch
        flipped by the CLI reaches the modules that log.
        """
        if not Debug._root_configured:
            logging.basicConfig(
                level=logging.DEBUG,
                format=LOG_FORMAT,
                datefmt=DATE_FORMAT,
                handlers=[logging.StreamHandler()],
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")
        self.logger.setLevel(logging.DEBUG)     # components do the gating
        self.components = Debug._shared
        if log_to:
            self.add_file(log_to)

    def add_file(self, path: str) -> logging.FileHandler:
        """Copy component messages to *path* as well."""
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.logger.addHandler(handler)
        return handler

    # ── global switch ────────────────────────────────────────────
    @property
    def enabled(self) -> bool:
        return Debug._enabled

    # ── logging API ──────────────────────────────────────────────
    def active(self, component: str) -> bool:
        return self.enabled and self.components.get(component, False)

    def log(self, component: str, message: str) -> None:
        if self.active(component):
            self.logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug._enabled = state

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")
