"""
Entry point for python -m blocksort
"""

import click
from blocksort.cli import bwt, mtf, pipeline, csa

@click.group()
@click.version_option(version='1.0.0')
def cli():
    """blocksort - Burrows-Wheeler and Move-To-Front block transforms"""
    pass

cli.add_command(bwt)
cli.add_command(mtf)
cli.add_command(pipeline)
cli.add_command(csa)

if __name__ == '__main__':
    cli()
