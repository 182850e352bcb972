"""CLI interface for the finite abelian quotient classifier.

Usage:
    abelclass classify 4 2 mod 1 0
    abelclass classify 6 4 mod 2 2 --show-cosets
    abelclass candidates 8 4 mod 2 0
    abelclass orders 2 2
    abelclass cosets 4 2 mod 1 0
    abelclass selfcheck --arity 2 --max-factor 6
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from abelian.core.errors import ClassificationError
from abelian.core.group import Element, Group, validate_generator

console = Console()


def parse_quotient(
    args: tuple[str, ...],
    require_generator: bool = True,
) -> tuple[Group, Element | None]:
    """Parse ``n1 ... nk mod g1 ... gk`` into a group and generator."""
    if "mod" not in args:
        if require_generator:
            raise click.UsageError('expected arguments of the form "n1 ... nk mod g1 ... gk"')
        products, components = list(args), None
    else:
        split = args.index("mod")
        products, components = list(args[:split]), list(args[split + 1:])

    if not products:
        raise click.UsageError("at least one cyclic factor order is required")
    if components is not None and len(components) != len(products):
        raise click.UsageError(
            f'expected {len(products)} generator component(s) after "mod", got {len(components)}'
        )

    try:
        orders = [int(p) for p in products]
        generator = Element(int(c) for c in components) if components is not None else None
    except ValueError as e:
        raise click.UsageError(f"arguments must be integers: {e}") from e

    for n in orders:
        if n < 1:
            raise click.UsageError(f"cyclic factor orders must be positive, got {n}")

    group = Group(orders)
    if generator is not None:
        try:
            validate_generator(group, generator)
        except ClassificationError as e:
            raise click.UsageError(str(e)) from e
    return group, generator


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log engine progress")
def main(verbose: bool) -> None:
    """Classify finite abelian quotient groups G/<g>."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, required=True)
@click.option("--show-cosets", is_flag=True, help="List every coset of <g> with its order")
@click.option("--max-order", default=1_000_000, help="Refuse groups larger than this")
@click.option("--no-narrow", is_flag=True, help="Skip narrowing by the quotient's largest order")
@click.option("--no-prune", is_flag=True, help="Keep candidates with larger exponent than G")
def classify(
    args: tuple[str, ...],
    show_cosets: bool,
    max_order: int,
    no_narrow: bool,
    no_prune: bool,
) -> None:
    """Find the group G/<g> is isomorphic to."""
    from abelian.engine.cosets import enumerate_cosets
    from abelian.engine.matcher import ClassifierConfig, classify as run_classify
    from abelian.utils.display import display_cosets, display_result

    group, generator = parse_quotient(args)
    config = ClassifierConfig(
        max_group_order=max_order,
        narrow_by_max_order=not no_narrow,
        prune_by_exponent=not no_prune,
    )

    try:
        result = run_classify(group, generator, config)
    except ClassificationError as e:
        console.print(f"[red]{type(e).__name__}: {e}[/red]")
        sys.exit(1)

    if show_cosets:
        display_cosets(enumerate_cosets(group, generator))
    display_result(result)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, required=True)
@click.option("--no-prune", is_flag=True, help="Keep candidates with larger exponent than G")
def candidates(args: tuple[str, ...], no_prune: bool) -> None:
    """List candidate isomorphism classes for G/<g>."""
    from abelian.engine.candidates import find_possible_iso_groups, quotient_order
    from abelian.utils.display import display_candidates, display_quotient

    group, generator = parse_quotient(args)
    display_quotient(group, generator)
    console.print(f"Quotient order: {quotient_order(group, generator)}\n")
    display_candidates(
        "Possible Isomorphic Groups",
        find_possible_iso_groups(group, generator, prune=not no_prune),
    )


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, required=True)
@click.option("--closed-form", is_flag=True, help="Compute orders arithmetically (no generator)")
def orders(args: tuple[str, ...], closed_form: bool) -> None:
    """Show the element-order histogram of G or G/<g>."""
    from abelian.engine.cosets import calc_element_orders
    from abelian.utils.display import display_histogram

    group, generator = parse_quotient(args, require_generator=False)
    if closed_form:
        if generator is not None:
            raise click.UsageError("--closed-form applies to G itself, omit the generator")
        from abelian.models.order_table import OrderTable

        display_histogram(OrderTable.of(group).histogram(), title=f"Element Orders: {group}")
        return

    if generator is None:
        generator = group.identity()
    display_histogram(
        calc_element_orders(group, generator),
        title=f"Element Orders: {group} / <{generator}>",
    )


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, required=True)
def cosets(args: tuple[str, ...]) -> None:
    """List the cosets of <g> in G."""
    from abelian.engine.cosets import enumerate_cosets
    from abelian.utils.display import display_cosets, display_quotient

    group, generator = parse_quotient(args)
    display_quotient(group, generator)
    display_cosets(enumerate_cosets(group, generator))


@main.command()
@click.option("--arity", default=2, help="Largest number of cyclic factors to sweep")
@click.option("--max-factor", default=6, help="Largest cyclic factor order to sweep")
def selfcheck(arity: int, max_factor: int) -> None:
    """Classify every G/<g> in a small range and verify the results."""
    from selfcheck import run_selfcheck

    sys.exit(run_selfcheck(max_arity=arity, max_factor=max_factor))


if __name__ == "__main__":
    main()
