#
# Created by dartqc developers on 21/08/2026.
#
from dartqc.filter.metrics import monomorphic_loci
from dartqc.structure.records import GenotypeContainer
from dartqc.util.helpers import check_container
from dartqc.util.logging import get_logger


def filter_monomorphs(x: GenotypeContainer, verb: bool = False) -> GenotypeContainer:
    """
    Remove monomorphic loci, including loci where every call is missing.

    :param x: the GenotypeContainer.
    :param verb: toggle verbosity.
    :return: the GenotypeContainer without monomorphic loci.
    """
    check_container(x, 'filter_monomorphs')
    logger = get_logger(__name__, verb=verb)
    logger.info('Identifying monomorphic loci')
    mono = monomorphic_loci(x)
    if not mono.any():
        logger.info('  No monomorphic loci to remove')
        return x.subset().with_history('filter_monomorphs')
    x2 = x.subset(loc=~mono)
    logger.info(f'  No. of monomorphic loci deleted = {int(mono.sum())}, '
                f'loci retained = {x2.n_loc}')
    return x2.with_history('filter_monomorphs')
