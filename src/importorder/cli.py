"""
Command line script for merging classified import statements into a single
ordered block.
"""

# std
from pathlib import Path

# third-party
import click
from loguru import logger

# relative
from .errors import OrderError
from .sequence import merge
from .config import resolve_no_separator, resolve_order


# ---------------------------------------------------------------------------- #

def read_lines(filename):
    """Read the non-empty lines of a file, or nothing if no file was given."""
    if filename is None:
        return []

    lines = Path(filename).read_text().splitlines()
    return [line.rstrip() for line in lines if line.strip()]


# ---------------------------------------------------------------------------- #

_file = click.Path(exists=True, dir_okay=False)


@click.command()
@click.option('-o', '--order', default=None,
              help='Comma-separated import group order, eg: '
                   '"std,general,company,project".')
@click.option('-c', '--config', 'config_file', default=None, type=_file,
              help='Config file to use instead of the user config.')
@click.option('--std', type=_file, help='File with standard library imports.')
@click.option('--general', type=_file, help='File with third-party imports.')
@click.option('--company', type=_file, help='File with organization imports.')
@click.option('--project', type=_file, help='File with project imports.')
@click.option('-v', '--verbose', is_flag=True, help='Print debug messages.')
def main(order, config_file, std, general, company, project, verbose):
    """
    Merge import statements that have already been sorted into groups, and
    print the ordered import block. Each file should contain one import
    statement per line.
    """

    # turn on logging
    logger.configure(activation=[('importorder', True)])
    logger.remove()
    logger.add(lambda message: click.echo(message, err=True, nl=False),
               level=('INFO', 'DEBUG')[verbose], format='{level}: {message}')

    try:
        groups = resolve_order(order, config_file)
    except OrderError as err:
        raise click.BadParameter(str(err), param_hint="'--order'") from err

    try:
        no_separator = resolve_no_separator(config_file)
    except OrderError as err:
        raise click.BadParameter(str(err), param_hint="'--config'") from err

    logger.debug('Ordering imports: {}.', ', '.join(map(str, groups)))
    block = merge(groups,
                  read_lines(std),
                  read_lines(general),
                  read_lines(company),
                  read_lines(project),
                  no_separator=no_separator)

    click.echo(block)
    return 0


if __name__ == '__main__':
    main()
