"""Household Tree CLI - Main entry point.

This module provides the command-line interface for the Household Tree project.
"""

import json
import logging
from pathlib import Path
from typing import Any

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.tree import Tree

from household_tree.assembly.classified import assemble_from_classified_edges
from household_tree.batch import BatchError, build_forests, group_by_household
from household_tree.config import settings
from household_tree.inference import infer_from_flat_records
from household_tree.schemas.members import HouseholdDescriptor, InputMember
from household_tree.schemas.tree import FamilyTreeViewNode

app = typer.Typer(
    name="housetree",
    help="Household Tree - Reconstruct family trees from household member records",
    add_completion=False,
)
console = Console()

_members_adapter = TypeAdapter(list[InputMember])


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.log_level, "--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Could not read {path}: {e!s}[/red]")
        raise typer.Exit(1) from e


def _write_json(payload: Any, output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


def _node_label(node: FamilyTreeViewNode) -> str:
    if node.is_virtual:
        label = f"[italic yellow]{node.name}[/italic yellow]"
    else:
        label = f"[bold blue]{node.name}[/bold blue]"
    details = [part for part in (node.role_label, node.gender) if part]
    if node.age is not None:
        details.append(str(node.age))
    if details:
        label += f" [dim]({', '.join(details)})[/dim]"
    return label


def _add_branch(parent: Tree, node: FamilyTreeViewNode) -> None:
    branch = parent.add(_node_label(node))
    if node.spouse is not None:
        spouse_branch = branch.add(f"[magenta]⚭[/magenta] {_node_label(node.spouse)}")
        for child in node.spouse.children:
            _add_branch(spouse_branch, child)
    for child in node.children:
        _add_branch(branch, child)


def _render_forest(title: str, roots: list[FamilyTreeViewNode]) -> None:
    tree_root = Tree(f"[bold cyan]{title}[/bold cyan]")
    for root in roots:
        _add_branch(tree_root, root)
    console.print(tree_root)
    console.print()


@app.command()
def infer(
    members_file: Path = typer.Argument(
        ..., help="JSON file with an array of household members", exists=True
    ),
    output: Path | None = typer.Option(
        None, "--json", "-o", help="Write the nested forest as JSON instead of printing it"
    ),
    no_virtual: bool = typer.Option(
        False, "--no-virtual", help="Do not synthesize ancestors for siblings of absent parents"
    ),
) -> None:
    """Infer a family forest for one household from flat member records.

    Members are linked by matching each stated relative name against the other
    members' names, using age and gender to tell spouses from children.
    """
    try:
        members = _members_adapter.validate_python(_load_json(members_file))
        forest = infer_from_flat_records(members, group_virtual=not no_virtual)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Invalid household: {e!s}[/red]")
        raise typer.Exit(1) from e

    if output is not None:
        _write_json(forest.to_nested(), output)
        console.print(f"[bold green]✓ Wrote {forest.member_count()} members to {output}[/bold green]\n")
        return

    house_no = members[0].house_no if members else ""
    console.print(f"\n[bold cyan]Household Tree for house:[/bold cyan] {house_no}\n")
    _render_forest(f"House {house_no}", forest.to_view_nodes())


@app.command()
def assemble(
    household_file: Path = typer.Argument(
        ..., help="JSON file with a classified household descriptor", exists=True
    ),
    output: Path | None = typer.Option(
        None, "--json", "-o", help="Write the assembled view as JSON instead of printing it"
    ),
) -> None:
    """Assemble a head-centric family tree from classified relationship edges."""
    try:
        household = HouseholdDescriptor.model_validate(_load_json(household_file))
    except ValidationError as e:
        console.print(f"[red]Invalid household descriptor: {e!s}[/red]")
        raise typer.Exit(1) from e

    view = assemble_from_classified_edges(household)

    if output is not None:
        _write_json(view.model_dump(), output)
        console.print(f"[bold green]✓ Wrote household {view.house_no} to {output}[/bold green]\n")
    else:
        console.print(
            f"\n[bold cyan]Family Tree for:[/bold cyan] {view.head.name} "
            f"[dim](ward {view.ward_no}, house {view.house_no}, {view.member_count} members)[/dim]\n"
        )
        _render_forest(f"House {view.house_no}", [view.head])

    if view.has_warnings():
        table = Table(show_header=True, header_style="bold yellow", title="Dropped Edges")
        table.add_column("Member", style="dim")
        table.add_column("Type")
        table.add_column("Related To")
        table.add_column("Reason")
        for orphan in view.warnings:
            table.add_row(
                f"{orphan.name} ({orphan.member_id})",
                orphan.relationship_type,
                orphan.related_to_id or "-",
                orphan.reason,
            )
        console.print(table)
        console.print()


@app.command()
def batch(
    input_file: Path = typer.Argument(
        ..., help="JSON array of members, or an object mapping household keys to members",
        exists=True,
    ),
    output: Path = typer.Argument(..., help="Output JSON file"),
    workers: int | None = typer.Option(
        None, "--workers", "-w", help="Worker threads (defaults to HOUSEHOLD_TREE_BATCH_MAX_WORKERS)"
    ),
) -> None:
    """Build forests for many households in parallel."""
    console.print("\n[bold cyan]Household Tree - Batch Build[/bold cyan]\n")

    raw = _load_json(input_file)
    try:
        if isinstance(raw, dict):
            households = {
                str(key): _members_adapter.validate_python(members) for key, members in raw.items()
            }
        else:
            households = group_by_household(_members_adapter.validate_python(raw))
        forests = build_forests(households, max_workers=workers)
    except (ValidationError, ValueError, BatchError) as e:
        console.print(f"[red]Batch failed: {e!s}[/red]")
        raise typer.Exit(1) from e

    _write_json({key: forest.to_nested() for key, forest in forests.items()}, output)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")
    table.add_row("Households", str(len(forests)))
    table.add_row("Members", str(sum(f.member_count() for f in forests.values())))
    table.add_row(
        "Virtual Ancestors",
        str(sum(len(f.nodes) - f.member_count() for f in forests.values())),
    )
    table.add_row("Output File", str(output.absolute()))
    console.print(table)
    console.print()


@app.command()
def version() -> None:
    """Display version information."""
    from household_tree import __version__

    console.print(f"\n[bold cyan]Household Tree[/bold cyan] version {__version__}\n")


if __name__ == "__main__":
    app()
