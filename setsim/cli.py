"""
Command-line interface for setsim.

    setsim compare "night" "nacht" --method minhash
    setsim compare 1,2,3 2,3,4 --numbers --method lsh
    setsim config init
"""

import dataclasses
import logging
import math
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigManager, DEFAULT_CONFIG_NAME, SimilarityConfig
from .engine.errors import PreconditionError, SimilarityError
from .factories import factory_for
from .utils.logging_setup import setup_logging, log_operation

console = Console()
logger = logging.getLogger(__name__)


def parse_numbers(value: str) -> List[int]:
    """Parse a comma-separated list of integers."""
    items = [item.strip() for item in value.split(",") if item.strip()]
    try:
        return [int(item) for item in items]
    except ValueError:
        raise click.BadParameter(f"expected comma-separated integers, got {value!r}")


@click.group(name="setsim")
@click.version_option(__version__, prog_name="setsim")
def main():
    """Estimate similarity of sets and strings with Jaccard, MinHash and LSH."""


@main.command(name="compare")
@click.argument("first")
@click.argument("second")
@click.option("--method", "-m",
              type=click.Choice(["jaccard", "minhash", "lsh"]),
              default="jaccard", show_default=True,
              help="Similarity algorithm")
@click.option("--numbers", is_flag=True,
              help="Treat inputs as comma-separated integers instead of text")
@click.option("--shingle-length", type=int, help="Shingle length for text inputs")
@click.option("--signature-size", type=int, help="MinHash signature length")
@click.option("--bands", type=int, help="LSH band count")
@click.option("--rows", type=int, help="LSH row count")
@click.option("--threshold", type=float, help="LSH threshold in (0, 1)")
@click.option("--domain-size", type=int, help="Distinct elements across both inputs")
@click.option("--hash-method", type=click.Choice(["blake2b", "md5", "sha1", "sha256"]),
              help="Hash for mapping shingles to integers")
@click.option("--config", "config_path", type=click.Path(dir_okay=False),
              help="Path to configuration file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def compare(first, second, method, numbers, shingle_length, signature_size, bands,
            rows, threshold, domain_size, hash_method, config_path, verbose):
    """Compare FIRST and SECOND and print the similarity index."""
    setup_logging(level="DEBUG" if verbose else "WARNING")

    overrides = {
        "shingle_length": shingle_length,
        "signature_size": signature_size,
        "bands": bands,
        "rows": rows,
        "threshold": threshold,
        "domain_size": domain_size,
        "hash_method": hash_method,
    }
    try:
        base = ConfigManager(config_path).config
        config = dataclasses.replace(
            base, **{k: v for k, v in overrides.items() if v is not None}
        )
    except PreconditionError as e:
        raise click.UsageError(e.message)

    a = parse_numbers(first) if numbers else first
    b = parse_numbers(second) if numbers else second

    log_operation(logger, "compare", method=method, numbers=numbers)
    try:
        index = factory_for(method, config).of(a, b)
    except PreconditionError as e:
        raise click.UsageError(e.message)
    except SimilarityError as e:
        raise click.ClickException(e.message)

    table = Table(title="Similarity")
    table.add_column("Method", style="cyan")
    table.add_column("Index", justify="right", style="green")
    table.add_row(method, format_index(index))
    console.print(table)


def format_index(index: float) -> str:
    if math.isnan(index):
        return "nan (both inputs empty)"
    return f"{index:.4f}"


@main.group(name="config")
def config_group():
    """Manage setsim configuration."""


@config_group.command(name="init")
@click.option("--path", type=click.Path(dir_okay=False), default=DEFAULT_CONFIG_NAME,
              show_default=True, help="Path for config file")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def config_init(path, force):
    """Write a default configuration file."""
    config_path = Path(path)
    if config_path.exists() and not force:
        if not click.confirm(f"Config file {path} already exists. Overwrite?"):
            console.print("[yellow]Aborted[/yellow]")
            return

    SimilarityConfig().save_to_file(config_path)
    console.print(f"[green]✓ Created config file at {path}[/green]")


@config_group.command(name="show")
@click.option("--path", type=click.Path(exists=True, dir_okay=False),
              help="Path to config file")
def config_show(path: Optional[str]):
    """Display the effective configuration."""
    try:
        config = ConfigManager(path).config
    except PreconditionError as e:
        raise click.ClickException(e.message)

    table = Table(title="setsim configuration")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")
    for key, value in config.to_dict().items():
        table.add_row(key, "auto" if value is None else str(value))
    console.print(table)


if __name__ == "__main__":
    main()
