"""LogTree CLI entry point - assembles all commands."""
import logging

import click

from . import __version__
from .tree_cmd import build, path, verify


@click.group()
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log progress to stderr')
def cli(verbose: bool):
    """LogTree: Merkle tree commitments over text logs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


cli.add_command(build)
cli.add_command(verify)
cli.add_command(path)


if __name__ == "__main__":
    cli()
