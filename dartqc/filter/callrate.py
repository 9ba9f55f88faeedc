#
# Created by dartqc developers on 21/08/2026.
#
from dartqc.filter.metrics import recalc_metrics, utils_callrate
from dartqc.filter.monomorphs import filter_monomorphs
from dartqc.structure.records import GenotypeContainer
from dartqc.util.helpers import check_container, check_threshold, passes_threshold
from dartqc.util.logging import get_logger, log_summary

METHODS = ('loc', 'ind')


def filter_callrate(
    x: GenotypeContainer,
    method: str = 'loc',
    threshold: float = 0.95,
    recalc: bool = True,
    mono_rm: bool = True,
    verb: bool = False
) -> GenotypeContainer:
    """
    Filter loci or individuals on call rate.

    Missing values in DArT SNP data mostly arise from mutations at the restriction
    enzyme recognition sites; in SilicoDArT data, from low coverage. Loci (or individuals)
    with a call rate below `threshold` are removed.
    When individuals are removed, loci may become monomorphic and locus metrics stale,
    so monomorphic loci are removed (`mono_rm`) and metrics recalculated (`recalc`).

    :param x: the GenotypeContainer of SNP or SilicoDArT data.
    :param method: 'loc' to filter loci, 'ind' to filter individuals.
    :param threshold: minimum call rate retained, between 0 and 1.
    :param recalc: recalculate locus metrics if individuals were removed.
    :param mono_rm: remove monomorphic loci if individuals were removed.
    :param verb: toggle verbosity.
    :return: the filtered GenotypeContainer.
    """
    check_container(x, 'filter_callrate')
    threshold = check_threshold(threshold)
    logger = get_logger(__name__, verb=verb)
    logger.info(f'Starting filter_callrate on {x.data_type.value} data: Filtering on Call Rate')
    if method not in METHODS:
        logger.warning(f'Unknown method "{method}". Method set to loc.')
        method = 'loc'

    if method == 'loc':
        logger.info(f'  Removing loci based on Call Rate, threshold = {threshold}')
        logger.info(f'  Initial no. of loci = {x.n_loc}')
        keep = passes_threshold(x.loc_callrate(), threshold)
        x2 = x.subset(loc=keep)
        if 'CallRate' in x2.loc_metrics.columns:
            x2 = utils_callrate(x2)
        logger.info(f'  No. of loci deleted = {x.n_loc - x2.n_loc}')
    else:
        logger.info(f'  Removing individuals based on Call Rate, threshold = {threshold}')
        logger.info(f'  Initial no. of individuals = {x.n_ind}')
        ind_callrate = x.ind_callrate()
        keep = passes_threshold(ind_callrate, threshold)
        if not keep.any():
            max_rate = ind_callrate.max() if x.n_ind else float('nan')
            raise ValueError(f'Maximum individual call rate = {max_rate}. Nominated threshold of '
                             f'{threshold} too stringent. No individuals remain.')
        x2 = x.subset(ind=keep)
        logger.info(f'  No. of individuals deleted = {x.n_ind - x2.n_ind}, '
                    f'individuals retained = {x2.n_ind}')
        if not keep.all():
            logger.info('  List of individuals deleted because of low call rate: '
                        f'{", ".join(str(i) for i in x.ind_names[~keep])}')
            logger.info('  from populations: '
                        f'{", ".join(str(p) for p in x.pop[~keep])}')
            if mono_rm:
                x2 = filter_monomorphs(x2, verb=verb)
            if recalc:
                x2 = recalc_metrics(x2, verb=verb)

    log_summary(logger, x2)
    logger.info('filter_callrate completed')
    return x2.with_history(f'filter_callrate(method={method}, threshold={threshold})')
