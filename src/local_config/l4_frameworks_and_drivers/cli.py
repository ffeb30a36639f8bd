"""CLI entry point for local-config — inspect what the overrides provide."""

from __future__ import annotations

import json
import logging
import sys

import click

from local_config import __version__

_MASK = '********'


@click.group()
@click.option(
    '-f',
    '--file',
    'files',
    multiple=True,
    type=click.Path(dir_okay=False),
    help='YAML override file (repeatable; first wins). Replaces the default file locations only.',
)
@click.option(
    '-m',
    '--module',
    default=None,
    help='Python override module exposing populate(entries). Replaces the default module only.',
)
@click.option('-v', '--verbose', is_flag=True, help='Log override discovery to stderr.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, files, module, verbose):
    """local-config -- inspect configuration supplied by local overrides."""
    from local_config.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_logging,
    )

    if verbose:
        setup_logging(logging.DEBUG)
    ctx.obj = {'files': list(files), 'module': module}


@cli.command()
@click.option('--reveal', is_flag=True, help='Print values instead of masking them.')
@click.pass_obj
def show(obj, reveal):
    """List configured keys (values masked unless --reveal)."""
    store = _build_store(obj['files'], obj['module'])
    if not len(store):
        click.echo('No configuration entries.')
        return
    for key in store.keys():
        value = store.get(key)
        shown = _format_value(value) if reveal else _MASK
        click.echo(f'{key} = {shown} ({type(value).__name__})')


@cli.command()
@click.argument('key')
@click.pass_obj
def get(obj, key):
    """Print the value of KEY; exit 1 if it is not set."""
    store = _build_store(obj['files'], obj['module'])
    if key not in store:
        click.echo(f"Error: '{key}' is not set.", err=True)
        sys.exit(1)
    click.echo(_format_value(store.get(key)))


def _build_store(files: list[str], module: str | None):
    from local_config.l1_entities.errors import OverrideLoadError  # noqa: PLC0415 -- deferred: not needed for --help
    from local_config.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: discovery stack not loaded on --help
        DependencyContainer,
    )
    from local_config.l4_frameworks_and_drivers.override_settings import (  # noqa: PLC0415 -- deferred: pydantic not loaded on --help
        OverrideSettings,
    )

    settings = OverrideSettings.from_env()
    update: dict = {}
    if files:
        update['files'] = files
    if module:
        update['module'] = module
    if update:
        settings = OverrideSettings.model_validate({**settings.model_dump(), **update})
    try:
        return DependencyContainer(settings=settings).store
    except OverrideLoadError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)


def _format_value(value) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, sort_keys=True, default=str)
