"""Rich styles for result output and an in-memory console to render with."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

REG_THEME = Theme(
    {
        "reg.ok": "bold green",
        "reg.error": "bold red",
        "reg.warning": "bold yellow",
        "reg.op": "bold cyan",
        "reg.key": "dim",
        "reg.value": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console that writes into memory; read it back with :func:`get_output`.

    Rich drops color codes on its own when stdout is not a terminal.
    """
    return Console(
        file=StringIO(),
        theme=REG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console does not render into memory")
    return buffer.getvalue()
