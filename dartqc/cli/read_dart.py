import click

from dartqc.io.dart import DEFAULT_NAS


@click.command(context_settings=dict(help_option_names=["-h", "--help"]),
               short_help="Import a DArT report into a genotype container.")
@click.argument('dart_file', required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--out', type=click.Path(dir_okay=False), required=True,
              help='Output file path of genotype container (.pkl).')
@click.option('--metadata', type=click.Path(exists=True, dir_okay=False),
              help='Individual metadata file (.csv) with an "id" column.')
@click.option('--nas', type=str, default=DEFAULT_NAS, show_default=True,
              help='String marking missing values.')
@click.option('--topskip', type=int, default=None,
              help='Number of header lines to skip. Guessed from leading "*" lines if not given.')
@click.option('--lastmetric', type=str, default=None,
              help='Name or 1-based index of the last locus metadata column '
                   '[default: RepAvg, or Reproducibility for SilicoDArT].')
@click.option('--nrows', type=click.Choice(['1', '2']), default=None,
              help='Number of report rows per SNP. Guessed from the data if not given.')
@click.option('--silicodart', is_flag=True, help='The report holds SilicoDArT data.')
@click.option('--overwrite', is_flag=True, help='Overwrite existing output file.')
@click.option('--verb', is_flag=True)
def read_dart(*args, **kwargs):
    """
    Read a DArT SNP (1-row or 2-row format) or SilicoDArT report
    and save it as a genotype container for the other commands.
    """
    from dartqc.cli.generic_func import generic_read
    generic_read(*args, **kwargs)
