#!/usr/bin/env python3
"""Self-check sweep for the quotient classifier.

Classifies G/<g> for every group Z_n1 x ... x Z_nk with k <= max_arity and
1 <= n_i <= max_factor, and every generator g of each, verifying:

- the coset histogram sums to |G| / |<g>|
- every candidate has the quotient order and respects G's exponent
- a match is found, and its closed-form order histogram equals the quotient's

Usage:
    python3 selfcheck.py
    python3 selfcheck.py --arity 3 --max-factor 4
"""

from __future__ import annotations

import itertools
import sys
from dataclasses import dataclass, field
from typing import Iterator

from rich.console import Console
from rich.table import Table

from abelian.core.errors import ClassificationError
from abelian.core.group import Group
from abelian.engine.matcher import ClassificationResult, classify
from abelian.models.order_table import OrderTable


@dataclass
class GroupReport:
    """Tally of the checks run against one ambient group."""

    group: Group
    quotients: int = 0
    failures: list[str] = field(default_factory=list)
    classes: set[tuple[int, ...]] = field(default_factory=set)

    @property
    def passed(self) -> bool:
        return not self.failures


def sweep_groups(max_arity: int, max_factor: int) -> Iterator[Group]:
    """Every factor list up to max_arity, non-decreasing to skip reorderings."""
    for k in range(1, max_arity + 1):
        for products in itertools.combinations_with_replacement(range(1, max_factor + 1), k):
            yield Group(products)


def check_result(result: ClassificationResult) -> list[str]:
    """Problems found in one classification, empty if it is consistent."""
    problems = []
    group, q = result.group, result.quotient_order

    if group.order != result.subgroup_order * q:
        problems.append(f"|G| != |H| * |G/H| ({group.order} vs {result.subgroup_order}*{q})")
    if result.histogram.total() != q:
        problems.append(f"histogram sums to {result.histogram.total()}, expected {q}")
    for c in result.candidates:
        if c.order != q:
            problems.append(f"candidate {c} has order {c.order}, expected {q}")
        if c.largest_order_element > group.largest_order_element:
            problems.append(f"candidate {c} exceeds the exponent of {group}")
    if OrderTable.of(result.match).histogram() != result.histogram:
        problems.append(f"closed-form histogram of {result.match} disagrees with the quotient")
    return problems


def run_selfcheck(max_arity: int = 2, max_factor: int = 6) -> int:
    """Run the sweep. Returns 0 if every quotient checks out, 1 otherwise."""
    console = Console()
    console.print(
        f"\n[bold]Self-check[/bold] (arity <= {max_arity}, factor orders <= {max_factor})\n"
    )

    table = Table(title="Self-check Results")
    table.add_column("Group", style="cyan", no_wrap=True)
    table.add_column("|G|", justify="right")
    table.add_column("Quotients", justify="right")
    table.add_column("Classes", justify="right")
    table.add_column("Status", justify="center")

    reports = []
    for group in sweep_groups(max_arity, max_factor):
        report = GroupReport(group)
        for g in group.elements():
            report.quotients += 1
            try:
                result = classify(group, g)
            except ClassificationError as e:
                report.failures.append(f"{group} / <{g}>: {e}")
                continue
            report.classes.add(tuple(result.match.products))
            report.failures.extend(f"{group} / <{g}>: {p}" for p in check_result(result))
        reports.append(report)

        status = "[green]PASS[/green]" if report.passed else "[red]FAIL[/red]"
        table.add_row(
            str(group), str(group.order), str(report.quotients),
            str(len(report.classes)), status,
        )

    console.print(table)

    failed = [r for r in reports if not r.passed]
    total = sum(r.quotients for r in reports)
    console.print(
        f"\n[bold]Summary:[/bold] {len(reports)} groups, {total} quotients, "
        f"{len(failed)} group(s) with failures"
    )
    for r in failed:
        for msg in r.failures:
            console.print(f"  [red]{msg}[/red]")

    return 1 if failed else 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Classify and verify every small quotient group")
    parser.add_argument("--arity", type=int, default=2, help="Largest number of cyclic factors")
    parser.add_argument("--max-factor", type=int, default=6, help="Largest cyclic factor order")
    args = parser.parse_args()

    sys.exit(run_selfcheck(max_arity=args.arity, max_factor=args.max_factor))
