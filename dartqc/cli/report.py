import click

from dartqc.cli.generic_opt import universal_options, method_option


@click.group(short_help='Reporting of data quality')
def report():
    """
    Report quality metrics of a genotype container.
    """
    pass


@report.command()
@universal_options
@method_option
@click.option('--out', type=click.Path(dir_okay=False),
              help='Output file path of report table. If not given, print the table.')
@click.option('--plot', type=click.Path(dir_okay=False),
              help='Output file path of call rate histogram (optional).')
def callrate(*args, **kwargs):
    """Report call rates of loci or individuals."""
    from dartqc.cli.generic_func import generic_report_callrate
    generic_report_callrate(*args, **kwargs)
