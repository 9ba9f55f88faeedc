import click

from dartqc import __version__
from dartqc.cli.read_dart import read_dart
from dartqc.cli.filter import filter_group
from dartqc.cli.report import report
from dartqc.cli.recode import recode


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(__version__)
def cli():
    """
    Import, filter and recode DArT SNP and SilicoDArT data.
    """
    pass


cli.add_command(read_dart)
cli.add_command(filter_group)
cli.add_command(report)
cli.add_command(recode)


def main():
    cli()


if __name__ == '__main__':
    main()
