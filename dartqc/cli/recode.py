import click

from dartqc.cli.generic_opt import universal_options, output_options, cascade_options


def what_option(f):
    f = click.option('--what', type=click.Choice(['pop', 'ind']), default='pop',
                     show_default=True, help='Recode populations or individuals.')(f)
    return f


@click.group(short_help='Recoding of population and individual names')
def recode():
    """
    Create and apply recode tables.
    """
    pass


@recode.command('make-table')
@universal_options
@what_option
@click.option('--out', type=click.Path(dir_okay=False), required=True,
              help='Output file path of recode table (.csv).')
def make_table(*args, **kwargs):
    """
    Write a recode table of current names. Edit the second column,
    enter 'Delete' to remove a population or individual.
    """
    from dartqc.cli.generic_func import generic_make_recode_table
    generic_make_recode_table(*args, **kwargs)


@recode.command()
@universal_options
@output_options
@what_option
@cascade_options
@click.option('--table', type=click.Path(exists=True, dir_okay=False), required=True,
              help='Edited recode table (.csv).')
def apply(*args, **kwargs):
    """Apply a recode table."""
    from dartqc.cli.generic_func import generic_recode
    generic_recode(*args, **kwargs)
