"""Rich console display utilities for classification results."""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from abelian.core.group import Coset, Element, Group
from abelian.engine.cosets import Histogram
from abelian.engine.matcher import ClassificationResult

console = Console()


def format_quotient(group: Group, generator: Element) -> str:
    return f"{group} / <{generator}>"


def display_quotient(group: Group, generator: Element) -> None:
    console.print("[bold]Given group:[/bold]")
    console.print(f"\t{format_quotient(group, generator)}\n")


def display_candidates(title: str, groups: list[Group]) -> None:
    """Display a list of candidate groups as a tree."""
    tree = Tree(f"[bold]{title} ({len(groups)})[/bold]")
    for g in groups:
        tree.add(f"[cyan]{g}[/cyan]  [dim]largest order {g.largest_order_element}[/dim]")
    console.print(tree)


def display_histogram(histogram: Histogram, title: str = "Element Orders") -> None:
    """Display an order histogram with a bar per order."""
    table = Table(title=title)
    table.add_column("Order", style="cyan", justify="right")
    table.add_column("Elements", style="green", justify="right")
    table.add_column("Visual", style="yellow")

    for order, count in histogram.items():
        bar = "█" * min(count, 40)
        table.add_row(str(order), str(count), bar)

    console.print(table)
    console.print(f"[bold]Total:[/bold] {histogram.total()}")


def display_cosets(cosets: Iterable[Coset]) -> None:
    table = Table(title="Cosets")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Elements", style="white")
    table.add_column("Order", style="green", justify="right")

    for i, coset in enumerate(cosets, 1):
        body = ",".join(str(e) for e in coset.elements)
        table.add_row(str(i), f"{{{body}}}", str(coset.order))

    console.print(table)


def display_result(result: ClassificationResult) -> None:
    """Display the full classification report."""
    display_quotient(result.group, result.generator)
    display_candidates("Possible Isomorphic Groups", result.candidates)
    console.print()
    display_histogram(result.histogram, title="For the given group")
    console.print()
    display_candidates("Narrowed to", result.narrowed)

    invariants = " x ".join(f"Z_{d}" for d in result.match.invariant_factors()) or "Z_1"
    console.print(Panel(
        f"{format_quotient(result.group, result.generator)} is isomorphic to "
        f"[bold green]{result.match}[/bold green]\n\n"
        f"|H| = {result.subgroup_order}, |G/H| = {result.quotient_order}\n"
        f"Invariant factors: {invariants}",
        title="Classification",
        border_style="green",
    ))
