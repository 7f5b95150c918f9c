import logging
import sys

import click

from . import serialisation
from .exceptions import PathError
from .path import OsPath, parse
from .platform import Platform


def _load(text: str, platform: Platform) -> OsPath:
    try:
        return parse(text, platform)
    except PathError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option(
    "--platform",
    type=click.Choice([p.value for p in Platform]),
    envvar="OS_PATH_PLATFORM",
    default=lambda: Platform.native().value,
    show_default="native",
    help="Path convention to parse and render with.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx, platform, verbose=False):
    """Parse, join and resolve paths without touching the filesystem."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    ctx.obj = Platform(platform)


@cli.command("parse")
@click.argument("path")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON encoding.")
@click.pass_obj
def parse_command(platform, path, as_json=False):
    """Print the canonical form of PATH."""
    path = _load(path, platform)

    if as_json:
        click.echo(serialisation.dumps(path))
        return

    click.echo(str(path))
    click.echo(f"absolute: {str(path.is_absolute).lower()}")
    click.echo(f"directory: {str(path.is_dir).lower()}")


@cli.command("join")
@click.argument("base")
@click.argument("others", nargs=-1, required=True)
@click.pass_obj
def join_command(platform, base, others):
    """Join OTHERS onto BASE, one after another."""
    path = _load(base, platform)
    for other in others:
        path.push(_load(other, platform))

    click.echo(str(path))


@cli.command("resolve")
@click.argument("path")
@click.pass_obj
def resolve_command(platform, path):
    """Collapse every '..' and '.' in PATH."""
    click.echo(str(_load(path, platform).resolve()))


def main(as_module=False):  # pragma: nocover
    prog_name = as_module and "python -m os_path" or sys.argv[0]
    cli.main(sys.argv[1:], prog_name=prog_name)


if __name__ == "__main__":
    main(as_module=True)
