"""Outline presentation utilities."""

from __future__ import annotations

import csv
import json
import logging
from collections.abc import Iterable
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from yamlsymbols.config import AppConfig
from yamlsymbols.document import DocumentOutline, OutlineSymbol

LOG = logging.getLogger(__name__)

CSV_FIELDS = ["path", "name", "kind", "line", "start", "end"]


def emit_report(
    outlines: list[DocumentOutline],
    config: AppConfig,
    console: Console | None = None,
) -> None:
    """Format and emit outlines based on configuration."""
    if config.output.rich_output:
        _render_rich_panels(outlines, console or Console())
    else:
        _render_plain(outlines)

    if config.output.export_json:
        export_json(outlines, config.output.export_json)
    if config.output.export_csv:
        export_csv(outlines, config.output.export_csv)


def _location(symbol: OutlineSymbol) -> str:
    # Editors count lines and columns from 1.
    start = symbol.range.start
    return f"{start.line + 1}:{start.character + 1}"


def build_tree(outline: DocumentOutline) -> Tree:
    """Nest symbols under the most recent symbol naming their parent path."""
    root = Tree(Text(str(outline.path), style="bold"))
    nodes: dict[str, Tree] = {}
    for symbol in outline.symbols:
        leaf = symbol.name.rsplit(".", 1)[-1]
        parent_name = symbol.name.rpartition(".")[0]
        parent = nodes.get(parent_name, root) if parent_name else root
        label = Text(leaf, style="cyan")
        label.append(f"  {_location(symbol)}", style="dim")
        nodes[symbol.name] = parent.add(label)
    return root


def _render_rich_panels(outlines: Iterable[DocumentOutline], console: Console) -> None:
    outlines_seq = list(outlines)
    if not outlines_seq:
        console.print(Text("No documents outlined.", style="yellow"))
        return

    for outline in outlines_seq:
        if not outline.symbols:
            body: Tree | Text = Text("No keys found.", style="yellow")
        else:
            body = build_tree(outline)
        console.print(
            Panel(
                body,
                title=f"{outline.path.name} • {len(outline.symbols)} keys",
                border_style="cyan",
                expand=False,
            ),
        )


def _render_plain(outlines: Iterable[DocumentOutline]) -> None:
    for outline in outlines:
        typer.echo(f"{outline.path}")
        for symbol in outline.symbols:
            typer.echo(f"  {_location(symbol)}\t{symbol.name}")


def _symbol_row(symbol: OutlineSymbol) -> dict[str, object]:
    return {
        "path": str(symbol.path),
        "name": symbol.name,
        "kind": symbol.kind.value,
        "line": symbol.range.start.line,
        "start": symbol.range.start.character,
        "end": symbol.range.end.character,
    }


def export_json(outlines: Iterable[DocumentOutline], path: Path) -> None:
    payload = [
        {
            "path": str(outline.path),
            "symbols": [
                {key: value for key, value in _symbol_row(symbol).items() if key != "path"}
                for symbol in outline.symbols
            ],
        }
        for outline in outlines
    ]
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    LOG.info("Wrote JSON outline to %s", path)


def export_csv(outlines: Iterable[DocumentOutline], path: Path) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for outline in outlines:
            for symbol in outline.symbols:
                writer.writerow(_symbol_row(symbol))
    LOG.info("Wrote CSV outline to %s", path)
