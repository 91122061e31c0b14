from __future__ import annotations

from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.table import Table


def _describe(item: Any) -> str:
    if isinstance(item, dict):
        return ", ".join(f"{key}={value}" for key, value in item.items())
    if hasattr(item, "model_dump"):
        return _describe(item.model_dump())
    return str(item)


def print_match_result(result: Dict[str, Any], console: Optional[Console] = None) -> None:
    """
    Render a runner result as a rich table.

    Shows one row per match, followed by the count and timing. Failed runs
    print the error instead of a table.
    """
    console = console or Console()

    if result.get("error"):
        console.print(f"[red]Matcher '{result['matcher']}' failed:[/red] {result['error']}")
        return

    table = Table(
        title=f"{result['matcher']} matches for '{result['target']}'",
        box=box.SIMPLE_HEAVY,
    )
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Match", style="green")

    for index, item in enumerate(result["matches"], start=1):
        table.add_row(str(index), _describe(item))

    if not result["matches"]:
        console.print(f"[yellow]No matches for '{result['target']}'.[/yellow]")
    else:
        console.print(table)

    profile = result.get("profile") or {}
    console.print(
        f"count={result['count']} duration={profile.get('duration_seconds', 0.0)}s"
    )


__all__ = ["print_match_result"]
