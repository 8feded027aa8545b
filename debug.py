# debug.py
from __future__ import annotations
import logging
from typing import Dict, Iterable

COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher")


class Debug:
    """Per-component switchboard in front of the ``ENIGMA`` logger.

    Every module keeps its own ``debug = Debug()``; the switches are
    per instance, the handler setup is shared.
    """

    _root_configured: bool = False          # class-level guard

    def __init__(self, *, log_to: str | None = None, level: int = logging.DEBUG) -> None:
        if not Debug._root_configured:
            handlers: list[logging.Handler] = [logging.StreamHandler()]
            if log_to:
                handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

            logging.basicConfig(
                level=level,
                format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                handlers=handlers,
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")
        self.enabled = True
        self.components: Dict[str, bool] = dict.fromkeys(COMPONENTS, False)

    # ── logging API ──────────────────────────────────────────────
    def active(self, component: str) -> bool:
        return self.enabled and self.components.get(component, False)

    def log(self, component: str, message: str, *args) -> None:
        """Log *message* (``%``-style, formatted lazily) if *component* is on."""
        if self.active(component):
            self.logger.debug("[%s] " + message, component.upper(), *args)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        self.components[component] = not self.components[component]

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def configure(self, selection: str | Iterable[str]) -> None:
        """Enable exactly the named components.

        Accepts a comma separated string (``"rotor,stepping"``), the word
        ``"all"``, or any iterable of names.
        """
        if isinstance(selection, str):
            names = [s.strip().lower() for s in selection.split(",") if s.strip()]
        else:
            names = list(selection)
        if names == ["all"]:
            names = list(COMPONENTS)
        for n in names:
            self._require(n)
        self.components = {c: c in names for c in COMPONENTS}

    def status(self) -> Dict[str, bool]:
        return self.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"
