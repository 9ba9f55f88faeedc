from functools import partial

import click

from dartqc.cli.generic_opt import universal_options, output_options, cascade_options, method_option

click.option = partial(click.option, show_default=True)


@click.group("filter", context_settings=dict(help_option_names=["-h", "--help"]),
             short_help="Filtering of loci and individuals")
def filter_group():
    """
    Filter loci or individuals of a genotype container.
    """
    pass


@filter_group.command()
@universal_options
@output_options
@method_option
@cascade_options
@click.option('--threshold', type=click.FloatRange(min=0.0, max=1.0), default=0.95,
              help='Minimum call rate retained.')
def callrate(*args, **kwargs):
    """Filter loci or individuals on call rate."""
    from dartqc.cli.generic_func import generic_filter_callrate
    generic_filter_callrate(*args, **kwargs)


@filter_group.command()
@universal_options
@output_options
def monomorphs(*args, **kwargs):
    """Remove monomorphic loci."""
    from dartqc.cli.generic_func import generic_filter_monomorphs
    generic_filter_monomorphs(*args, **kwargs)
