import click


def universal_options(f):
    """Options required by every command working on a saved genotype container."""
    f = click.option('--input', 'input_file', type=click.Path(exists=True, dir_okay=False),
                     required=True, help='Genotype container file path (.pkl).')(f)
    f = click.option('--verb', is_flag=True)(f)
    return f


def output_options(f):
    """Options to save the resulting genotype container."""
    f = click.option('--overwrite', is_flag=True, help='Overwrite existing output file.')(f)
    f = click.option('--out', type=click.Path(dir_okay=False), required=True,
                     help='Output file path of genotype container (.pkl).')(f)
    return f


def cascade_options(f):
    """Options controlling the clean-up after individuals were deleted."""
    f = click.option('--recalc/--no-recalc', default=True,
                     help='Recalculate locus metrics after deleting individuals.')(f)
    f = click.option('--mono-rm/--no-mono-rm', default=True,
                     help='Remove monomorphic loci after deleting individuals.')(f)
    return f


def method_option(f):
    """Choice between loci and individuals."""
    f = click.option('--method', type=click.Choice(['loc', 'ind']), default='loc',
                     help='Work on loci (loc) or individuals (ind).')(f)
    return f
