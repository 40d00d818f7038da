"""Folio CLI application using Typer.

This module provides command-line utilities to inspect the demo portfolio:
the classification tree with its generated colors and the cash snapshot of
the demo account.
"""

from __future__ import annotations

import logging
import random
import sys
from datetime import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.tree import Tree

from folio.domain.shared.time import today_utc
from folio.domain.snapshot import AccountSnapshot
from folio.domain.taxonomy import Classification
from folio.domain.taxonomy.value_objects import format_weight
from folio_config import get_settings
from folio_demo import build_demo_account, build_demo_taxonomy

app = typer.Typer(
    name="folio",
    help="Folio - portfolio taxonomy and cash snapshot CLI",
    no_args_is_help=True,
)
console = Console()

logger = logging.getLogger(__name__)


# Create demo subcommand group
demo_app = typer.Typer(
    name="demo",
    help="Inspect the built-in demo portfolio",
    no_args_is_help=True,
)
app.add_typer(demo_app)


def configure_logging() -> None:
    """Configure logging for the CLI from settings."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("folio").setLevel(settings.logging_level)
    logging.getLogger("folio_demo").setLevel(settings.logging_level)


@app.callback()
def main() -> None:
    configure_logging()


@demo_app.command("taxonomy")
def show_taxonomy(
    seed: Optional[int] = typer.Option(
        None,
        help="Seed for the color generator (defaults to FOLIO_COLOR_SEED)",
    ),
    limit: Optional[int] = typer.Option(
        None,
        min=1,
        help="Character budget for the path names",
    ),
) -> None:
    """Assign random colors to the demo taxonomy and print it as a tree."""
    if seed is None:
        seed = get_settings().color_seed
    logger.debug("Building demo taxonomy with color seed %s", seed)
    rng = random.Random(seed)

    taxonomy = build_demo_taxonomy(rng=rng)
    taxonomy.root.assign_random_colors(rng)

    tree = Tree(f"[bold]{taxonomy.name}[/bold]")
    for child in taxonomy.root.children:
        _add_branch(tree, child, limit)

    console.print(tree)


@demo_app.command("snapshot")
def show_snapshot(
    date: Optional[datetime] = typer.Option(
        None,
        formats=["%Y-%m-%d"],
        help="Cutoff date (inclusive, defaults to today in UTC)",
    ),
) -> None:
    """Print the cash balance of the demo account as of a date."""
    cutoff = date.date() if date is not None else today_utc()
    snapshot = AccountSnapshot.create(build_demo_account(), cutoff)
    console.print(str(snapshot), markup=False, highlight=False, end="")


def _add_branch(tree: Tree, node: Classification, limit: Optional[int]) -> None:
    label = (
        f"[{node.color}]■[/] {node.get_path_name(False, limit)} "
        f"[dim]{node.color} · {format_weight(node.weight)}%[/dim]"
    )
    branch = tree.add(label)

    for assignment in node.assignments:
        branch.add(
            f"{assignment.investment_vehicle.name} "
            f"[dim]{format_weight(assignment.weight)}%[/dim]",
        )
    for child in node.children:
        _add_branch(branch, child, limit)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
