"""smb-mkdirp CLI.

Inspection commands for path decomposition and the effective retry
configuration. Creating directories needs a connected dispatcher and is done
through the library API (RemoteShare.mkdirp).
"""

import logging
import sys
from pathlib import Path

import click
import yaml

from .config.loader import create_default_config
from .config.loader import load_config
from .config.settings import MkdirpSettings
from .errors import InvalidPathError
from .paths.decomposer import decompose_path


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: $SMB_MKDIRP_HOME/config/mkdirp.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """Recursive directory creation for SMB shares."""
    settings = load_config(config_path)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = settings


@cli.command()
@click.argument("path")
def decompose(path: str) -> None:
    """Print every directory mkdirp would ensure for PATH, shallowest first."""
    try:
        ancestors = decompose_path(path)
    except InvalidPathError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    for ancestor in ancestors:
        click.echo(ancestor)


@cli.command()
@click.pass_obj
def backoff(settings: MkdirpSettings) -> None:
    """Print the retry schedule for pending operations."""
    policy = settings.retry_policy()
    if policy.max_retries == 0:
        click.echo("Retries disabled")
        return

    for attempt in range(policy.max_retries):
        click.echo(f"retry {attempt + 1}: {policy.delay_ms(attempt)}ms")


@cli.command(name="config")
@click.option("--init", "init", is_flag=True, help="Write a commented default config file first")
@click.pass_context
def show_config(ctx: click.Context, init: bool) -> None:
    """Print the effective configuration as YAML."""
    settings: MkdirpSettings = ctx.obj
    if init:
        config_path = create_default_config(ctx.parent.params["config_path"] if ctx.parent else None)
        click.echo(f"# {config_path}")
        settings = load_config(config_path)

    data = settings.model_dump()
    data["default_mode"] = oct(settings.default_mode)
    click.echo(yaml.safe_dump(data, sort_keys=False).rstrip())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
