"""LineInput - single-line text field for the duration entry."""
from __future__ import annotations

from rich.style import Style
from rich.text import Text

PLACEHOLDER_STYLE = Style(color="color(240)")
CURSOR_STYLE = Style(reverse=True)


class LineInput:
    """Append-only editor with a placeholder and a character limit.

    Keys only have an effect while the field is focused.
    """

    def __init__(
        self,
        placeholder: str = "",
        char_limit: int = 20,
        width: int = 30,
        prompt: str = "> ",
    ) -> None:
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.width = width
        self.prompt = prompt
        self._value = ""
        self._focused = False

    @property
    def value(self) -> str:
        return self._value

    @property
    def focused(self) -> bool:
        return self._focused

    def set_value(self, value: str) -> None:
        self._value = value[: self.char_limit]

    def focus(self) -> None:
        self._focused = True

    def blur(self) -> None:
        self._focused = False

    def handle_key(self, key: str, character: str | None) -> None:
        if not self._focused:
            return
        if key == "backspace":
            self._value = self._value[:-1]
        elif key == "ctrl+u":
            self._value = ""
        elif key == "ctrl+w":
            self._value = self._value.rstrip()
            cut = self._value.rfind(" ")
            self._value = self._value[: cut + 1] if cut >= 0 else ""
        elif character is not None and len(character) == 1 and character.isprintable():
            if len(self._value) < self.char_limit:
                self._value += character

    def render(self) -> Text:
        text = Text(self.prompt)
        if self._value:
            # Show the tail when the value is wider than the field.
            text.append(self._value[-self.width:])
        elif self.placeholder:
            text.append(self.placeholder[: self.width], style=PLACEHOLDER_STYLE)
        if self._focused:
            text.append(" ", style=CURSOR_STYLE)
        return text
