"""View rendering: application state to styled text."""
from __future__ import annotations

from rich.style import Style
from rich.text import Text

from tickdown import AppState, Focus, Timer, format_duration

FOCUSED = Style(color="color(205)")
BLURRED = Style(color="color(240)")
ALARM = Style(color="color(196)", bold=True)

BUTTONS: tuple[tuple[Focus, str], ...] = (
    (Focus.ADD, "Add"),
    (Focus.START, "Start"),
    (Focus.STOP, "Stop"),
    (Focus.RESET, "Reset"),
    (Focus.QUIT, "Quit"),
)

HELP = "(Tab to navigate, Enter to select)"
EMPTY = "No timers running"
TIMES_UP = "Time's Up!"


def render_button(label: str, focused: bool) -> Text:
    if focused:
        return Text(f"[ {label} ]", style=FOCUSED)
    return Text.assemble("[ ", (label, BLURRED), " ]")


def render_timer(timer: Timer, blink: bool) -> Text:
    line = Text(f"#{timer.id}: ")
    if timer.finished:
        line.append(TIMES_UP, style=ALARM if timer.alarming and blink else None)
    else:
        status = "" if timer.running else " (Paused)"
        line.append(f"{format_duration(timer.remaining)} remaining{status}")
    return line


def center(lines: list[Text], width: int, height: int) -> Text:
    """Place the block of *lines* in the middle of a width x height area."""
    block_w = max((line.cell_len for line in lines), default=0)
    left = " " * max((width - block_w) // 2, 0)
    top = max((height - len(lines)) // 2, 0)
    out = Text("\n" * top)
    out.append(Text("\n").join(Text(left) + line for line in lines))
    return out


def render_view(state: AppState, input_line: Text) -> Text:
    """Render the whole screen. *input_line* is the rendered text field."""
    lines: list[Text] = [Text("New Timer: ") + input_line, Text()]

    timers = list(state.registry)
    if not timers:
        lines.append(Text(EMPTY, style=BLURRED))
    else:
        lines.extend(render_timer(t, state.blink) for t in timers)
    lines.append(Text())

    focus = state.focus.index
    lines.append(Text("  ").join(render_button(label, focus == f) for f, label in BUTTONS))
    lines.append(Text())
    lines.append(Text(HELP, style=BLURRED))

    return center(lines, state.width, state.height)
