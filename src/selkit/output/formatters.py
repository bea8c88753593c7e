"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich styling), for scripts
(``--quiet``: the bare value), or for machines (``--json``).
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from selkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from selkit.services.result import ServiceResult

# op -> data key printed on its own in quiet mode
_QUIET_KEYS: dict[str, str] = {
    "build_selector": "selector",
    "rectangle": "area",
    "encode": "json",
}


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags derived from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def _render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        return _format_value(result.data[key])
    if result.op == "decode":
        return _format_value(result.data.get("fields", {}))
    return f"OK: {result.op}"


def _render_human(result: ServiceResult, *, verbose: bool, color: bool) -> str:
    console = create_console(no_color=not color)

    if not result.ok:
        error = result.error
        console.print(
            Text("ERROR", style="selkit.error"),
            Text(f"  {result.op}", style="selkit.op"),
            Text(f" - {error.message if error else 'Unknown error'}"),
        )
        if error is not None and verbose:
            console.print(Text(f"  code: {error.code}", style="selkit.key"))
            for key, value in error.detail.items():
                console.print(Text(f"  {key}: {_format_value(value)}", style="selkit.key"))
        return get_output(console).rstrip("\n")

    console.print(Text("OK", style="selkit.ok"), Text(f"  {result.op}", style="selkit.op"))
    if result.op == "build_selector":
        console.print(Text(f"  {result.data['selector']}", style="selkit.selector"))
        if verbose:
            for index, parts in enumerate(result.data.get("parts", [])):
                rendered = ", ".join(f"{p['kind']}={p['value']}" for p in parts)
                console.print(Text(f"  [{index}] {rendered}", style="selkit.key"))
    else:
        for key, value in result.data.items():
            line = Text(f"  {key}: ", style="selkit.key")
            line.append(_format_value(value))
            console.print(line)
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode flags. Takes precedence over *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _render_quiet(result)
    return _render_human(result, verbose=settings.verbose, color=settings.color)
