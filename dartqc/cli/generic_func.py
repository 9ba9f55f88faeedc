from functools import wraps

import click

from dartqc.io.dart import gl_read_dart, read_silicodart
from dartqc.io.flat import write_report_file
from dartqc.io.serialization import load_container, save_container
from dartqc.filter import filter_callrate, filter_monomorphs
from dartqc.report import report_callrate
from dartqc.transforms import (make_recode_pop_table, make_recode_ind_table, recode_pop,
                               recode_ind)
from dartqc.util.logging import get_logger

logger = get_logger("dartqc", verb=True)


def report_errors(f):
    """
    Show errors raised on bad input as a short CLI message instead of a traceback.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (ValueError, TypeError, RuntimeError) as e:
            raise click.ClickException(str(e)) from e
    return wrapper


@report_errors
def generic_read(dart_file, out, metadata, nas, topskip, lastmetric, nrows, silicodart, overwrite,
                 verb):
    """
    Read a DArT SNP or SilicoDArT report and save it as a genotype container.
    """
    kwargs = {} if lastmetric is None else {'lastmetric': lastmetric}
    if silicodart:
        x = read_silicodart(dart_file, ind_metafile=metadata, nas=nas, topskip=topskip,
                            probar=verb, verb=verb, **kwargs)
    else:
        x = gl_read_dart(dart_file, ind_metafile=metadata, nas=nas, topskip=topskip,
                         nrows=None if nrows is None else int(nrows), probar=verb, verb=verb,
                         **kwargs)
    save_container(x, out, overwrite=overwrite, verb=verb)
    logger.info(f'{x} written to {out}.')


@report_errors
def generic_filter_callrate(input_file, out, method, threshold, recalc, mono_rm, overwrite,
                            verb):
    """
    Filter a saved genotype container on call rate.
    """
    x = load_container(input_file, verb=verb)
    x2 = filter_callrate(x, method=method, threshold=threshold, recalc=recalc, mono_rm=mono_rm,
                         verb=verb)
    save_container(x2, out, overwrite=overwrite, verb=verb)
    logger.info(f'Filtered {x} to {x2}.')


@report_errors
def generic_filter_monomorphs(input_file, out, overwrite, verb):
    """
    Remove monomorphic loci from a saved genotype container.
    """
    x = load_container(input_file, verb=verb)
    x2 = filter_monomorphs(x, verb=verb)
    save_container(x2, out, overwrite=overwrite, verb=verb)
    logger.info(f'Filtered {x} to {x2}.')


@report_errors
def generic_report_callrate(input_file, method, out, plot, verb):
    """
    Report call rates of a saved genotype container.
    """
    x = load_container(input_file, verb=verb)
    report = report_callrate(x, method=method, plot_file=plot, verb=verb)
    if out is not None:
        write_report_file(report, out)
    else:
        click.echo(report.to_string(index=False))


@report_errors
def generic_make_recode_table(input_file, out, what, verb):
    """
    Write a recode proforma for populations or individuals.
    """
    x = load_container(input_file, verb=verb)
    if what == 'pop':
        make_recode_pop_table(x, out)
    else:
        make_recode_ind_table(x, out)
    logger.info(f'Recode table for {what} written to {out}.')


@report_errors
def generic_recode(input_file, table, out, what, recalc, mono_rm, overwrite, verb):
    """
    Apply a recode table to populations or individuals.
    """
    x = load_container(input_file, verb=verb)
    recode = recode_pop if what == 'pop' else recode_ind
    x2 = recode(x, table, recalc=recalc, mono_rm=mono_rm, verb=verb)
    save_container(x2, out, overwrite=overwrite, verb=verb)
    logger.info(f'Recoded {x} to {x2}.')
