# SPDX-FileCopyrightText: 2026 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Command line interface: batch recovery and fixture generation."""

from __future__ import annotations

import json
import logging
import sys

import click
from tqdm import tqdm

from .combinations import count_combinations
from .dealer import add_decoys, split_secret
from .decoding import Decoded, decode_file, encode_value
from .policy import policy
from .selector import recover_secret

_logger = logging.getLogger(__name__)

SEPARATOR = "-------------------------"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at DEBUG level.")
def main(verbose: bool) -> None:
    """Recover threshold secrets from share documents containing decoys."""
    # secrets and share values may exceed the default int/str digit limit
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)
    level = logging.DEBUG if verbose else getattr(logging, policy.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _recover_one(path: str, workers: int | None, progress: bool) -> bool:
    try:
        result = decode_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        _logger.warning("Could not read %s: %s", path, exc)
        click.echo(f"Could not read {path}")
        return False

    if not isinstance(result, Decoded):
        _logger.warning("Could not parse %s: %s", path, result.reason)
        click.echo(f"Could not parse {path}: {result.reason}")
        return False

    total = count_combinations(len(result.shares), result.k)
    if progress and total:
        with tqdm(total=total, desc=path, unit="comb", leave=False) as bar:
            secret = recover_secret(result.shares, result.k, workers=workers, progress=bar.update)
    else:
        secret = recover_secret(result.shares, result.k, workers=workers)

    if secret is None:
        click.echo("Failed to find a valid positive integer secret.")
        return False
    click.echo(f"Recovered Secret: {secret}")
    return True


@main.command()
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Worker processes.")
@click.option("--progress", is_flag=True, help="Show a progress bar per file.")
@click.pass_context
def recover(ctx: click.Context, files: tuple[str, ...], workers: int | None, progress: bool) -> None:
    """Recover the secret from each share document in FILES."""
    if not files:
        click.echo("No input files provided.")
        ctx.exit(1)

    failures = 0
    for path in files:
        click.echo(f"Processing {path}...")
        if not _recover_one(path, workers, progress):
            failures += 1
        click.echo(SEPARATOR)

    if failures:
        ctx.exit(1)


@main.command()
@click.argument("secret", type=click.IntRange(min=1))
@click.option("-k", "k", type=click.IntRange(min=1), required=True, help="Threshold.")
@click.option("-n", "n", type=click.IntRange(min=1), required=True, help="Genuine shares.")
@click.option("--decoys", type=click.IntRange(min=0), default=0, show_default=True)
@click.option("--base", type=click.IntRange(2, 36), default=10, show_default=True)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
def split(secret: int, k: int, n: int, decoys: int, base: int, seed: int | None) -> None:
    """Write a share document for SECRET to stdout."""
    try:
        coeffs, shares = split_secret(secret, n=n, k=k, seed=seed)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    points = add_decoys(coeffs, shares, decoys, seed=seed)

    document: dict[str, object] = {"keys": {"n": len(points), "k": k}}
    for x, y in points:
        document[str(x)] = {"base": str(base), "value": encode_value(y, base)}
    click.echo(json.dumps(document, indent=2))


if __name__ == "__main__":
    main()
