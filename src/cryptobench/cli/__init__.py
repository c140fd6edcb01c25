"""CLI entry point for the crypto benchmark engine."""

from __future__ import annotations

import click

from cryptobench.cli.commands import batch, compare, estimate, health


@click.group()
def cli() -> None:
    """RSA vs ECC round-trip latency benchmarks."""


cli.add_command(compare)
cli.add_command(batch)
cli.add_command(estimate)
cli.add_command(health)
