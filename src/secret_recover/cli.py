# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

"""Command line interface: recover the secret stored in a share document."""

from __future__ import annotations

import logging

import click

from .digits import int_to_str
from .document import load_document
from .errors import (
    DocumentError,
    DuplicateXCoordinateError,
    InexactDivisionError,
    InsufficientPointsError,
    InvalidThresholdError,
    ShareDecodeError,
)
from .interpolation import reconstruct_secret
from .points import select_points
from .policy import STRATEGIES, policy

_logger = logging.getLogger(__name__)

RULE = "-" * 36


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(policy.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@click.command(name="secret-recover")
@click.argument("filename", type=click.Path(dir_okay=False))
@click.option(
    "--strategy",
    type=click.Choice(STRATEGIES),
    default=None,
    help="How basis-term divisions are carried out (default: from SECRET_RECOVER_STRATEGY or rational).",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-vv for debug).")
def main(filename: str, strategy: str | None, verbose: int) -> None:
    """Reconstruct the secret from the shares stored in FILENAME."""

    _configure_logging(verbose)
    try:
        document = load_document(filename)
        _logger.info("Loaded %d shares from %s", len(document.points), filename)
        click.echo(f"Threshold (k) is: {document.k}")
        selected = select_points(document.points, document.k)
        click.echo(f"Using the first {document.k} sorted points for calculation:")
        for point in selected:
            click.echo(str(point))
        secret = reconstruct_secret(selected, document.k, strategy=strategy)
    except DocumentError as exc:
        raise click.ClickException(str(exc)) from exc
    except ShareDecodeError as exc:
        raise click.ClickException(f"Error with a number in the share document: {exc}") from exc
    except InvalidThresholdError as exc:
        raise click.ClickException(f"Invalid threshold: {exc}") from exc
    except InsufficientPointsError as exc:
        raise click.ClickException(f"Not enough shares: {exc}") from exc
    except DuplicateXCoordinateError as exc:
        raise click.ClickException(f"Duplicate share: {exc}") from exc
    except InexactDivisionError as exc:
        raise click.ClickException(f"Calculation error, shares are inconsistent: {exc}") from exc

    click.echo("")
    click.echo(RULE)
    click.echo(f"The calculated secret is: {int_to_str(secret)}")
    click.echo(RULE)


if __name__ == "__main__":
    main()
