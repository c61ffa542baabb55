"""
Terminal output helpers for Shelver.

Includes:
- Shared rich console
- Styled message helpers
- Plan and summary tables
"""

from rich.console import Console
from rich.table import Table
from rich.tree import Tree
from rich.panel import Panel
from rich.markup import escape

from .planning import group_moves

# Global console instance
console = Console()

SAMPLE_MOVES = 10


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))


def print_plan_table(plan: dict):
    """Print the groups of a plan with file counts, plus sample moves."""
    moves = plan.get("moves", [])
    groups = group_moves(moves)

    table = Table(title="Plan Summary")
    table.add_column("Group", style="cyan")
    table.add_column("Files", style="magenta", justify="right")

    for group, group_items in groups.items():
        table.add_row(escape(group), str(len(group_items)))

    console.print(table)

    if moves:
        tree = Tree("[bold green]Sample Moves[/bold green]")
        for move in moves[:SAMPLE_MOVES]:
            tree.add(f"[yellow]{escape(move['source'])}[/yellow] -> [blue]{escape(move['dest'])}[/blue]")
        if len(moves) > SAMPLE_MOVES:
            tree.add(f"[italic]... and {len(moves) - SAMPLE_MOVES} more[/italic]")
        console.print(tree)


def print_summary(report: dict, unmatched_count: int = 0):
    """Print the final tallies of a run."""
    table = Table(title="Dry-Run Summary" if report["dry_run"] else "Summary")
    table.add_column("Result", style="cyan")
    table.add_column("Count", style="magenta", justify="right")

    if report["dry_run"]:
        table.add_row("Planned", str(report["planned_moves_count"]))
    else:
        table.add_row("Moved", str(report["executed_moves_count"]))
        table.add_row("Skipped", str(report["skipped_moves_count"]))
        table.add_row("Failed", str(report["failed_moves_count"]))

    if unmatched_count:
        table.add_row("Unmatched", str(unmatched_count))

    console.print(table)


def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {msg}")


def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {msg}")


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {msg}")
