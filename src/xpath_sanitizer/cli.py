"""Command line entry point: sanitize each argument and print the result."""

# Standard library imports
import os
from pathlib import Path
from typing import Optional, Tuple

import click
from dotenv import load_dotenv

from .config import ConfigError, get_config, get_env_file
from .core import InvalidInputError, InvalidInputPolicy, Sanitizer
from .utils.logger import get_logger, set_logger

# Get the logger for this module
logger = get_logger(__name__)

USAGE = "Usage: xpath-sanitizer <value1> [value2 ...]"


def load_environment_variables(env_path: Path) -> None:
    """
    Load environment variables from a .env file if it exists.

    Only variables starting with XPATH_SANITIZER_ are logged at debug level.
    """
    if env_path.exists():
        load_dotenv(env_path)
        logger.info("Loaded environment from %s", env_path)

        for key, value in os.environ.items():
            if key.startswith("XPATH_SANITIZER_"):
                logger.debug("Loaded env var: %s=%s", key, value)


@click.command()
@click.argument("values", nargs=-1)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on absent, blank or all-dots values instead of dropping them",
)
@click.option("--separator", default=None, help="Text placed between results")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.option("-d", "--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Log file path",
)
def cli(
    values: Tuple[str, ...],
    strict: bool = False,
    separator: Optional[str] = None,
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[Path] = None,
):
    """Sanitize VALUES and print them concatenated on one line.

    Each value is sanitized independently, in the order given.
    """
    load_environment_variables(get_env_file())

    try:
        config = get_config()
    except ConfigError as e:
        click.secho(f"✗ Configuration error: {e}", fg="red", err=True)
        raise click.Abort() from e

    set_logger(
        log_file=log_file,
        verbose=verbose or config.verbose,
        debug=debug or config.debug,
    )

    if not values:
        click.echo(USAGE)
        return

    policy = InvalidInputPolicy.RAISE_ERROR if strict else config.policy
    sanitizer = Sanitizer(policy, max_length=config.max_length)
    if separator is None:
        separator = config.separator

    logger.info("Sanitizing %d value(s) with %r", len(values), sanitizer)

    try:
        output = sanitizer.sanitize_all(values, separator=separator)
    except InvalidInputError as e:
        click.secho(f"✗ {e}", fg="red", err=True)
        raise click.Abort() from e

    click.echo(output)


if __name__ == "__main__":
    cli()
