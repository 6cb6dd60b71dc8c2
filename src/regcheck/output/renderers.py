"""Human-readable rendering of a ServiceResult.

Layout::

    OK  check_age                 ERROR  check_age: <message>
      field: age                    detail:          (verbose only)
      value: '42'                     value: 'abc'
      parsed: 42                    meta:            (verbose only)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from regcheck.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from regcheck.services.result import ServiceResult

_SHOWN_DATA = ("field", "value", "parsed")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as plain or styled text, depending on the terminal."""
    console = create_console()
    console.print(_headline(result))

    if result.ok:
        _print_pairs(console, ((k, result.data[k]) for k in _SHOWN_DATA if k in result.data))
    elif verbose and result.error and result.error.detail:
        console.print(Text("  detail:", style="dim"))
        _print_pairs(console, result.error.detail.items(), indent=4)

    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        _print_pairs(console, result.meta.items(), indent=4)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line: ``OK: <op>`` or ``ERROR: <op>: <message>``."""
    if result.ok:
        return f"OK: {result.op}"
    return f"ERROR: {result.op}: {_message(result)}"


def _message(result: ServiceResult) -> str:
    return result.error.message if result.error else "Unknown error"


def _headline(result: ServiceResult) -> Text:
    if result.ok:
        return Text.assemble(("OK", "reg.ok"), (f"  {result.op}", "reg.op"))
    return Text.assemble(
        ("ERROR", "reg.error"), (f"  {result.op}", "reg.op"), f": {_message(result)}"
    )


def _print_pairs(console: Console, pairs: Iterable[tuple[str, Any]], *, indent: int = 2) -> None:
    # Checked values are repr'd so surrounding whitespace stays visible.
    pad = " " * indent
    for key, value in pairs:
        shown = repr(value) if key == "value" else str(value)
        console.print(Text.assemble((f"{pad}{key}: ", "reg.key"), (shown, "reg.value")))
