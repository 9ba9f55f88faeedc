#
# Created by dartqc developers on 3/9/26.
#
from dataclasses import replace
from typing import Dict

import numpy as np

from dartqc.filter.metrics import recalc_metrics
from dartqc.filter.monomorphs import filter_monomorphs
from dartqc.io.flat import load_recode_table, write_recode_table, RECODE_DELETE
from dartqc.structure.records import GenotypeContainer
from dartqc.util.helpers import check_container
from dartqc.util.logging import get_logger, log_summary


def make_recode_pop_table(x: GenotypeContainer, out_recode_file: str):
    """
    Write a proforma recode table of the current population names.
    Edit the second column to rename populations, or enter 'Delete'
    to remove a population, then apply with `recode_pop`.
    """
    check_container(x, 'make_recode_pop_table')
    write_recode_table(x.pop_names, out_recode_file)


def make_recode_ind_table(x: GenotypeContainer, out_recode_file: str):
    """
    Write a proforma recode table of the current individual names,
    to be applied with `recode_ind`.
    """
    check_container(x, 'make_recode_ind_table')
    write_recode_table([str(i) for i in x.ind_names], out_recode_file)


def _is_delete(name: str) -> bool:
    return name.strip().lower() == RECODE_DELETE


def _delete(x, deleted, logger):
    if deleted.all():
        raise ValueError('Recode table deletes every individual. No individuals remain.')
    logger.info(f'  Deleting {int(deleted.sum())} individual(s): '
                f'{", ".join(str(i) for i in x.ind_names[deleted])}')
    return x.subset(ind=~deleted)


def _after_deletion(x, recalc, mono_rm, verb):
    if mono_rm:
        x = filter_monomorphs(x, verb=verb)
    if recalc:
        x = recalc_metrics(x, verb=verb)
    return x


def recode_pop_from_mapping(
    x: GenotypeContainer,
    mapping: Dict[str, str],
    recalc: bool = True,
    mono_rm: bool = True,
    verb: bool = False
) -> GenotypeContainer:
    """
    Rename populations after `mapping`. Individuals of populations mapped to
    'Delete' are removed.
    """
    check_container(x, 'recode_pop')
    logger = get_logger(__name__, verb=verb)
    pops = np.array([str(p) for p in x.pop], dtype=object)
    missing = sorted(set(pops) - set(mapping))
    if missing:
        raise ValueError(f'Populations missing from recode table: {missing}')
    new_pop = np.array([mapping[p] for p in pops], dtype=object)
    deleted = np.array([_is_delete(p) for p in new_pop], dtype=bool)

    ind_metrics = x.ind_metrics.copy()
    ind_metrics['pop'] = new_pop
    x2 = replace(x, pop=new_pop, ind_metrics=ind_metrics, history=list(x.history))
    renamed = {k: v for k, v in mapping.items() if k != v and not _is_delete(v) and k in set(pops)}
    for old, new in renamed.items():
        logger.info(f'  Population {old} recoded to {new}')
    if deleted.any():
        x2 = _after_deletion(_delete(x2, deleted, logger), recalc, mono_rm, verb)
    log_summary(logger, x2, title='Summary of recoded dataset')
    return x2.with_history('recode_pop')


def recode_pop(
    x: GenotypeContainer,
    pop_recode_file: str,
    recalc: bool = True,
    mono_rm: bool = True,
    verb: bool = False
) -> GenotypeContainer:
    """
    Recode population names from a two-column recode table (old, new),
    as written by `make_recode_pop_table`.

    :param x: the GenotypeContainer.
    :param pop_recode_file: the recode table.
    :param recalc: recalculate locus metrics if individuals were deleted.
    :param mono_rm: remove monomorphic loci if individuals were deleted.
    :param verb: toggle verbosity.
    :return: the recoded GenotypeContainer.
    """
    mapping = load_recode_table(pop_recode_file)
    return recode_pop_from_mapping(x, mapping, recalc=recalc, mono_rm=mono_rm, verb=verb)


def recode_ind(
    x: GenotypeContainer,
    ind_recode_file: str,
    recalc: bool = True,
    mono_rm: bool = True,
    verb: bool = False
) -> GenotypeContainer:
    """
    Recode individual names from a two-column recode table (old, new),
    as written by `make_recode_ind_table`. Individuals recoded to 'Delete' are removed.

    :param x: the GenotypeContainer.
    :param ind_recode_file: the recode table.
    :param recalc: recalculate locus metrics if individuals were deleted.
    :param mono_rm: remove monomorphic loci if individuals were deleted.
    :param verb: toggle verbosity.
    :return: the recoded GenotypeContainer.
    """
    check_container(x, 'recode_ind')
    logger = get_logger(__name__, verb=verb)
    mapping = load_recode_table(ind_recode_file)
    names = [str(i) for i in x.ind_names]
    missing = [i for i in names if i not in mapping]
    if missing:
        raise ValueError(f'Individuals missing from recode table: {missing}')
    new_names = np.array([mapping[i] for i in names], dtype=object)
    deleted = np.array([_is_delete(i) for i in new_names], dtype=bool)
    kept = new_names[~deleted]
    dupes = sorted(set(i for i in kept if list(kept).count(i) > 1))
    if dupes:
        raise ValueError(f'Recoded individual names are not unique: {dupes}')

    # delete before renaming, new names may reuse the names of deleted individuals
    x2 = _delete(x, deleted, logger) if deleted.any() else x
    ind_metrics = x2.ind_metrics.copy()
    ind_metrics['id'] = kept
    x2 = replace(x2, ind_names=kept, ind_metrics=ind_metrics, history=list(x2.history))
    logger.info(f'  No. of individuals recoded = '
                f'{int(sum(o != n for o, n in zip(np.array(names)[~deleted], kept)))}')
    if deleted.any():
        x2 = _after_deletion(x2, recalc, mono_rm, verb)
    log_summary(logger, x2, title='Summary of recoded dataset')
    return x2.with_history('recode_ind')
