"""FocusController - keyboard cursor over the fixed set of controls."""
from __future__ import annotations

from tickdown.types import Focus

NAVIGATION_KEYS = frozenset({"tab", "shift+tab", "left", "right", "up", "down"})

_FIRST = Focus.INPUT
_LAST = Focus.QUIT
_FIRST_BUTTON = Focus.ADD


class FocusController:
    """Cyclic cursor plus memory of the last button reached with left/right.

    ``tab``/``shift+tab`` cycle through every control including the
    input. ``left``/``right`` move along the button row only, wrapping
    between Add and Quit, and record where they land in ``memory``.
    ``up`` jumps to the input without touching ``memory``; ``down``
    from the input returns to ``memory`` (Add if nothing remembered).
    """

    def __init__(self, index: Focus = Focus.INPUT, memory: Focus = Focus.INPUT) -> None:
        self.index = index
        self.memory = memory

    def navigate(self, key: str) -> Focus:
        """Apply a navigation key and return the new focus."""
        if key not in NAVIGATION_KEYS:
            raise ValueError(f"not a navigation key: {key!r}")

        idx = self.index
        if key == "tab":
            idx = _FIRST if idx == _LAST else Focus(idx + 1)
        elif key == "shift+tab":
            idx = _LAST if idx == _FIRST else Focus(idx - 1)
        elif key == "left":
            if idx == Focus.INPUT:
                pass
            elif idx == _FIRST_BUTTON:
                idx = _LAST
                self.memory = idx
            else:
                idx = Focus(idx - 1)
                self.memory = idx
        elif key == "right":
            if idx == Focus.INPUT:
                pass
            elif idx == _LAST:
                idx = _FIRST_BUTTON
                self.memory = idx
            else:
                idx = Focus(idx + 1)
                self.memory = idx
        elif key == "up":
            idx = Focus.INPUT
        elif key == "down":
            if idx == Focus.INPUT:
                idx = self.memory if self.memory != Focus.INPUT else _FIRST_BUTTON

        self.index = idx
        return idx

    @property
    def on_input(self) -> bool:
        return self.index == Focus.INPUT
