#
# Created by dartqc developers on 14/08/2026.
#
import warnings
from itertools import takewhile
from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np
import pandas as pd
from tqdm.auto import tqdm

from dartqc.io.flat import load_ind_metafile, default_ind_metrics
from dartqc.structure.records import DataType, GenotypeContainer
from dartqc.util.logging import get_logger

DEFAULT_NAS = '-'
DEFAULT_LASTMETRIC = 'RepAvg'
DEFAULT_SILICODART_LASTMETRIC = 'Reproducibility'
TOPSKIP_GUESS_LINES = 20

SNP_REQUIRED_METRICS = ['AlleleID', 'CloneID', 'SNP', 'SnpPosition']
SNP_STANDARD_METRICS = [
    'CallRate', 'OneRatioRef', 'OneRatioSnp', 'FreqHomRef', 'FreqHomSnp', 'FreqHets',
    'PICRef', 'PICSnp', 'AvgPIC', 'AvgCountRef', 'AvgCountSnp', 'RepAvg'
]
SILICODART_REQUIRED_METRICS = ['CloneID']
SILICODART_STANDARD_METRICS = ['CallRate', 'OneRatio', 'PIC', 'Reproducibility']

# DArT 1-row format codes homozygous SNP as 1 and heterozygotes as 2
ONE_ROW_CODES = {0.: 0., 1.: 2., 2.: 1.}


@dataclass
class DartReport:
    """
    A DArT report split into locus metadata and raw genotype rows.
    `genotypes` has one row per report row and one column per sample.
    """
    filename: str
    covmetrics: pd.DataFrame
    genotypes: np.ndarray
    sample_names: List[str]
    n_rows: int

    def __repr__(self):
        return (f"{self.filename} n_rows={self.n_rows} n_samples={len(self.sample_names)} "
                f"n_loci={len(self.covmetrics) // self.n_rows}")


def guess_topskip(filename: str) -> int:
    """
    Count the header lines of a DArT report, i.e. the leading lines starting with '*'.
    """
    with open(filename) as fin:
        head = [line for _, line in zip(range(TOPSKIP_GUESS_LINES), fin)]
    return len(list(takewhile(lambda x: x.startswith('*'), head)))


def _numeric_where_possible(df: pd.DataFrame) -> pd.DataFrame:
    for col in df.columns:
        converted = pd.to_numeric(df[col], errors='coerce')
        if converted.notna().sum() == df[col].notna().sum():
            df[col] = converted
    return df


def _resolve_lastmetric(header: List[str], lastmetric: Union[str, int]) -> int:
    """Return the number of metadata columns."""
    if isinstance(lastmetric, str) and not lastmetric.isdigit():
        if lastmetric not in header:
            raise ValueError(f'Last metric column "{lastmetric}" not found in report. '
                             'Check the lastmetric parameter.')
        return header.index(lastmetric) + 1
    n_meta = int(lastmetric)
    if not 1 <= n_meta < len(header):
        raise ValueError(f'Last metric column index {n_meta} out of range '
                         f'(report has {len(header)} columns).')
    return n_meta


def _read_report(filename, nas, topskip, lastmetric, required, standard, logger):
    if topskip is None:
        topskip = guess_topskip(filename)
        logger.info(f'Topskip not provided. Guessing topskip: {topskip} lines.')
    # sample names such as 'NA' or '-' must not become missing values
    try:
        header = pd.read_csv(filename, skiprows=topskip, header=None, nrows=1, dtype=str,
                             keep_default_na=False, skipinitialspace=True)
        raw = pd.read_csv(filename, skiprows=topskip + 1, header=None, dtype=str,
                          na_values=[nas], skipinitialspace=True)
    except pd.errors.EmptyDataError:
        raise ValueError(f'No data rows found in {filename} after skipping {topskip} lines.')
    header = [str(x).strip() for x in header.iloc[0]]
    n_meta = _resolve_lastmetric(header, lastmetric)

    covmetrics = raw.iloc[:, :n_meta].reset_index(drop=True)
    covmetrics.columns = header[:n_meta]
    missing = [x for x in required if x not in covmetrics.columns]
    if missing:
        raise ValueError(f'Required locus metadata missing from report: {missing}')
    missing = [x for x in standard if x not in covmetrics.columns]
    if missing:
        logger.warning(f'Standard locus metrics not found in report: {missing}')
    covmetrics = _numeric_where_possible(covmetrics)

    sample_names = header[n_meta:]
    dupes = sorted(set(x for x in sample_names if sample_names.count(x) > 1))
    if dupes:
        raise ValueError(f'Individual names are not unique: {dupes}. You need to change them.')
    genotypes = raw.iloc[:, n_meta:].apply(pd.to_numeric, errors='coerce').to_numpy(dtype=float)
    logger.info(f'Read {covmetrics.shape[0]} rows, {n_meta} metadata columns and '
                f'{len(sample_names)} samples from {filename}.')
    return covmetrics, genotypes, sample_names


def _is_row_paired(covmetrics: pd.DataFrame) -> bool:
    """
    True if the rows form (reference, SNP) pairs: an even number of rows,
    no SNP on the first row of each pair, a SNP on the second, same CloneID on both.
    """
    if covmetrics.shape[0] % 2:
        return False
    snp = covmetrics['SNP']
    clone_ids = covmetrics['CloneID'].astype(str).values
    return bool(snp.iloc[0::2].isna().all() and snp.iloc[1::2].notna().all()
                and (clone_ids[0::2] == clone_ids[1::2]).all())


def guess_nrows(covmetrics: pd.DataFrame, genotypes: np.ndarray) -> int:
    """
    Guess the number of report rows per SNP locus. Only the 1-row format holds
    genotype code 2 (heterozygote); without it, the 2-row format is recognized
    by its reference rows lacking a SNP.
    """
    if (genotypes == 2).any():
        return 1
    if _is_row_paired(covmetrics):
        return 2
    if covmetrics['SNP'].notna().all():
        return 1
    raise ValueError('Could not detect the report format. Rows must either each carry a SNP '
                     '(1-row format) or come in pairs of a reference row without SNP followed '
                     'by a SNP row (2-row format). Set nrows to choose the format.')


def _check_nrows(covmetrics: pd.DataFrame, nrows: int):
    if nrows not in (1, 2):
        raise ValueError(f'nrows must be 1 or 2, got {nrows}.')
    if nrows == 2 and not _is_row_paired(covmetrics):
        raise ValueError('Report is not in 2-row format: rows must come in pairs of a '
                         'reference row without SNP followed by a SNP row of the same CloneID.')


def _warn_unexpected_codes(genotypes: np.ndarray, allowed, logger) -> int:
    unexpected = int((~np.isnan(genotypes) & ~np.isin(genotypes, allowed)).sum())
    if unexpected:
        logger.warning(f'{unexpected} genotype code(s) outside {sorted(int(a) for a in allowed)} '
                       'set to missing. Check that the report type is correct.')
    return unexpected


def read_dart(
    filename: str,
    nas: str = DEFAULT_NAS,
    topskip: Optional[int] = None,
    lastmetric: Union[str, int] = DEFAULT_LASTMETRIC,
    nrows: Optional[int] = None,
    verb: bool = False
) -> DartReport:
    """
    Read a DArT SNP report (.csv) in 1-row or 2-row format.

    :param filename: The path to the DArT report.
    :param nas: The string marking missing values.
    :param topskip: The number of header lines to skip. If not given, the number
                    of leading lines starting with '*' is used.
    :param lastmetric: The name or 1-based index of the last locus metadata column.
                       All columns after it are taken as samples.
    :param nrows: The number of report rows per SNP (1 or 2). Guessed if not given.
    :param verb: toggle verbosity.
    :return: A DartReport of the locus metadata and the raw genotype rows.
    """
    logger = get_logger(__name__, verb=verb)
    covmetrics, genotypes, sample_names = _read_report(
        filename, nas, topskip, lastmetric,
        required=SNP_REQUIRED_METRICS, standard=SNP_STANDARD_METRICS, logger=logger
    )
    if nrows is None:
        nrows = guess_nrows(covmetrics, genotypes)
        logger.info(f'nrows not provided. Guessing {nrows}-row format.')
    else:
        nrows = int(nrows)
        _check_nrows(covmetrics, nrows)
    allowed = (0., 1., 2.) if nrows == 1 else (0., 1.)
    _warn_unexpected_codes(genotypes, allowed, logger)
    logger.info(f'{nrows}-row format: {covmetrics.shape[0] // nrows} loci.')
    return DartReport(filename=str(filename), covmetrics=covmetrics, genotypes=genotypes,
                      sample_names=sample_names, n_rows=nrows)


def _convert_two_rows(ref: np.ndarray, snp: np.ndarray) -> np.ndarray:
    out = np.full(ref.shape, np.nan)
    out[(ref == 1) & (snp == 0)] = 0.
    out[(ref == 1) & (snp == 1)] = 1.
    out[(ref == 0) & (snp == 1)] = 2.
    return out


def _convert_one_row(calls: np.ndarray) -> np.ndarray:
    out = np.full(calls.shape, np.nan)
    for code, dosage in ONE_ROW_CODES.items():
        out[calls == code] = dosage
    return out


def _parse_alleles(snp: pd.Series) -> np.ndarray:
    """'17:G>A' -> 'G/A'"""
    return np.array([
        str(x).split(':')[-1].replace('>', '/') if pd.notna(x) else None for x in snp
    ], dtype=object)


def _attach_individuals(ind_names, ind_metafile, verb):
    if ind_metafile is None:
        ind_metrics, pop = default_ind_metrics(ind_names)
        return ind_metrics, pop, None
    return load_ind_metafile(ind_metafile, ind_names, verb=verb)


def dart_to_container(
    report: DartReport,
    ind_metafile: Optional[str] = None,
    probar: bool = False,
    verb: bool = False
) -> GenotypeContainer:
    """
    Convert a DartReport of SNP data into a GenotypeContainer,
    optionally adding individual metadata from file.

    :param report: The DartReport returned by `read_dart`.
    :param ind_metafile: A .csv file of individual metadata with an `id` column. Optional.
    :param probar: Show a progress bar while converting.
    :param verb: toggle verbosity.
    :return: The GenotypeContainer.
    """
    logger = get_logger(__name__, verb=verb)
    raw = report.genotypes
    columns = range(raw.shape[1])
    if report.n_rows == 2:
        metrics = report.covmetrics.iloc[1::2].reset_index(drop=True)
        ref, snp = raw[0::2], raw[1::2]
        calls = [_convert_two_rows(ref[:, i], snp[:, i])
                 for i in tqdm(columns, disable=not probar, desc='Converting individuals')]
    elif report.n_rows == 1:
        metrics = report.covmetrics.reset_index(drop=True)
        calls = [_convert_one_row(raw[:, i])
                 for i in tqdm(columns, disable=not probar, desc='Converting individuals')]
    else:
        raise ValueError(f'Unsupported number of rows per locus: {report.n_rows}')
    gt = np.vstack(calls) if calls else np.empty((0, len(metrics)))

    ind_metrics, pop, latlon = _attach_individuals(report.sample_names, ind_metafile, verb)
    x = GenotypeContainer(
        data_type=DataType.SNP,
        gt=gt,
        ind_names=report.sample_names,
        loc_names=metrics['AlleleID'].astype(str).values,
        pop=pop,
        loc_metrics=metrics,
        ind_metrics=ind_metrics,
        latlon=latlon,
        position=metrics['SnpPosition'].values,
        alleles=_parse_alleles(metrics['SNP']),
    )
    logger.info(f'Genotype container created: {x}')
    return x.with_history(f'read_dart({report.filename})')


def read_silicodart(
    filename: str,
    ind_metafile: Optional[str] = None,
    nas: str = DEFAULT_NAS,
    topskip: Optional[int] = None,
    lastmetric: Union[str, int] = DEFAULT_SILICODART_LASTMETRIC,
    probar: bool = False,
    verb: bool = False
) -> GenotypeContainer:
    """
    Read a DArT SilicoDArT (presence/absence) report into a GenotypeContainer.

    :param filename: The path to the SilicoDArT report.
    :param ind_metafile: A .csv file of individual metadata with an `id` column. Optional.
    :param nas: The string marking missing values.
    :param topskip: The number of header lines to skip. Guessed if not given.
    :param lastmetric: The name or 1-based index of the last locus metadata column.
    :param probar: Show a progress bar while converting.
    :param verb: toggle verbosity.
    :return: The GenotypeContainer.
    """
    logger = get_logger(__name__, verb=verb)
    covmetrics, raw, sample_names = _read_report(
        filename, nas, topskip, lastmetric,
        required=SILICODART_REQUIRED_METRICS, standard=SILICODART_STANDARD_METRICS,
        logger=logger
    )
    clone_ids = covmetrics['CloneID'].astype(str)
    if clone_ids.duplicated().any():
        raise ValueError('SilicoDArT reports must have one row per CloneID. Duplicated: '
                         f'{sorted(set(clone_ids[clone_ids.duplicated()]))}')
    _warn_unexpected_codes(raw, (0., 1.), logger)
    calls = [np.where(np.isin(raw[:, i], (0., 1.)), raw[:, i], np.nan)
             for i in tqdm(range(raw.shape[1]), disable=not probar, desc='Converting individuals')]
    gt = np.vstack(calls) if calls else np.empty((0, len(covmetrics)))

    ind_metrics, pop, latlon = _attach_individuals(sample_names, ind_metafile, verb)
    x = GenotypeContainer(
        data_type=DataType.SILICODART,
        gt=gt,
        ind_names=sample_names,
        loc_names=covmetrics['CloneID'].astype(str).values,
        pop=pop,
        loc_metrics=covmetrics,
        ind_metrics=ind_metrics,
        latlon=latlon,
    )
    logger.info(f'Genotype container created: {x}')
    return x.with_history(f'read_silicodart({filename})')


def gl_read_dart(
    filename: str,
    ind_metafile: Optional[str] = None,
    covfilename: Optional[str] = None,
    nas: str = DEFAULT_NAS,
    topskip: Optional[int] = None,
    lastmetric: Union[str, int] = DEFAULT_LASTMETRIC,
    nrows: Optional[int] = None,
    probar: bool = True,
    verb: bool = False
) -> GenotypeContainer:
    """
    Read a DArT SNP report and convert it to a GenotypeContainer in one step.

    :param filename: The path to the DArT report.
    :param ind_metafile: A .csv file of individual metadata with an `id` column. Optional.
    :param covfilename: Deprecated alias of `ind_metafile`.
    :param nas: The string marking missing values.
    :param topskip: The number of header lines to skip. Guessed if not given.
    :param lastmetric: The name or 1-based index of the last locus metadata column.
    :param nrows: The number of report rows per SNP (1 or 2). Guessed if not given.
    :param probar: Show a progress bar while converting.
    :param verb: toggle verbosity.
    :return: The GenotypeContainer.
    """
    if covfilename is not None:
        warnings.warn('covfilename is deprecated, use ind_metafile instead.', DeprecationWarning)
        if ind_metafile is None:
            ind_metafile = covfilename
    report = read_dart(filename, nas=nas, topskip=topskip, lastmetric=lastmetric, nrows=nrows,
                       verb=verb)
    return dart_to_container(report, ind_metafile=ind_metafile, probar=probar, verb=verb)
