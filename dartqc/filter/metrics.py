#
# Created by dartqc developers on 21/08/2026.
#
from dataclasses import replace
from typing import Dict

import numpy as np

from dartqc.structure.records import DataType, GenotypeContainer
from dartqc.util.helpers import check_container
from dartqc.util.logging import get_logger


def _counts(x: GenotypeContainer) -> Dict[str, np.ndarray]:
    gt = x.gt
    return {
        'n0': (gt == 0).sum(axis=0),
        'n1': (gt == 1).sum(axis=0),
        'n2': (gt == 2).sum(axis=0),
        'called': (~np.isnan(gt)).sum(axis=0),
    }


def _pic(ratio: np.ndarray) -> np.ndarray:
    return 1. - ratio ** 2 - (1. - ratio) ** 2


def monomorphic_loci(x: GenotypeContainer) -> np.ndarray:
    """
    Boolean mask of loci without polymorphism among the called genotypes.
    Loci without any call are reported as monomorphic.
    """
    c = _counts(x)
    if x.data_type is DataType.SNP:
        alt = c['n1'] + 2 * c['n2']
        return (alt == 0) | (alt == 2 * c['called'])
    return (c['n1'] == 0) | (c['n1'] == c['called'])


def utils_callrate(x: GenotypeContainer) -> GenotypeContainer:
    """
    Refresh the CallRate locus metric only.
    """
    loc_metrics = x.loc_metrics.copy()
    loc_metrics['CallRate'] = x.loc_callrate()
    return replace(x, loc_metrics=loc_metrics, history=list(x.history))


def recalc_metrics(x: GenotypeContainer, verb: bool = False) -> GenotypeContainer:
    """
    Recalculate the locus metrics from the current genotype matrix,
    typically after individuals were removed.

    SNP data: CallRate, FreqHomRef, FreqHomSnp, FreqHets, OneRatioRef, OneRatioSnp,
    PICRef, PICSnp, AvgPIC, maf and monomorphs.
    SilicoDArT data: CallRate, OneRatio, PIC and monomorphs.
    Loci without any call get NaN frequencies.

    :param x: the GenotypeContainer.
    :param verb: toggle verbosity.
    :return: a GenotypeContainer with updated locus metrics.
    """
    check_container(x, 'recalc_metrics')
    logger = get_logger(__name__, verb=verb)
    logger.info('Recalculating locus metrics')
    c = _counts(x)
    loc_metrics = x.loc_metrics.copy()
    loc_metrics['CallRate'] = x.loc_callrate()
    with np.errstate(divide='ignore', invalid='ignore'):
        called = np.where(c['called'] > 0, c['called'], np.nan)
        if x.data_type is DataType.SNP:
            loc_metrics['FreqHomRef'] = c['n0'] / called
            loc_metrics['FreqHomSnp'] = c['n2'] / called
            loc_metrics['FreqHets'] = c['n1'] / called
            loc_metrics['OneRatioRef'] = (c['n0'] + c['n1']) / called
            loc_metrics['OneRatioSnp'] = (c['n2'] + c['n1']) / called
            loc_metrics['PICRef'] = _pic(loc_metrics['OneRatioRef'].values)
            loc_metrics['PICSnp'] = _pic(loc_metrics['OneRatioSnp'].values)
            loc_metrics['AvgPIC'] = (loc_metrics['PICRef'] + loc_metrics['PICSnp']) / 2
            alt_freq = (c['n1'] + 2 * c['n2']) / (2 * called)
            loc_metrics['maf'] = np.minimum(alt_freq, 1. - alt_freq)
        else:
            loc_metrics['OneRatio'] = c['n1'] / called
            loc_metrics['PIC'] = _pic(loc_metrics['OneRatio'].values)
    loc_metrics['monomorphs'] = monomorphic_loci(x)
    logger.info(f'Locus metrics recalculated for {x.n_loc} loci')
    return replace(x, loc_metrics=loc_metrics, history=list(x.history)).with_history(
        'recalc_metrics'
    )
