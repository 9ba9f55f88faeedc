#
# Created by dartqc developers on 14/08/2026.
#
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from dartqc.util.logging import get_logger

DEFAULT_POP = 'A'
MISSING_POP = 'NA'
RECODE_DELETE = 'delete'


def load_ind_metafile(
    input_file: str, ind_names: Sequence[str], verb: bool = False
) -> Tuple[pd.DataFrame, np.ndarray, Optional[pd.DataFrame]]:
    """
    Load a .csv file of individual metadata and align it to the individuals of a dataset.
    The file requires an `id` column; `pop`, `lat` and `lon` are picked up if present,
    any other column is kept as a covariate.

    :param input_file: The path to the individual metadata file.
    :param ind_names: The individual names of the dataset, in matrix order.
    :param verb: toggle verbosity.
    :return: A tuple of the aligned metadata table, the population labels
             and the coordinates (None if the file has no lat/lon columns).
    """
    logger = get_logger(__name__, verb=verb)
    meta = pd.read_csv(input_file)
    meta.columns = [str(x).strip() for x in meta.columns]
    if 'id' not in meta.columns:
        raise ValueError(f'Individual metadata file {input_file} requires an "id" column.')
    meta['id'] = meta['id'].astype(str).str.strip()
    dupes = meta['id'][meta['id'].duplicated()].tolist()
    if dupes:
        raise ValueError(f'Duplicate entries found in individual metadata file: {dupes}')

    ind_names = [str(x) for x in ind_names]
    meta = meta.set_index('id')
    matched = [x for x in ind_names if x in meta.index]
    if not matched:
        raise ValueError('Ids of the individual metadata file do not match any individual '
                         'of the dataset. Check the "id" column.')
    unmatched = [x for x in ind_names if x not in meta.index]
    if unmatched:
        logger.warning(f'No metadata found for {len(unmatched)} individual(s): {unmatched}')
    extra = [x for x in meta.index if x not in set(ind_names)]
    if extra:
        logger.warning(f'Ignoring metadata of {len(extra)} individual(s) not in the dataset: '
                       f'{extra}')
    logger.info(f'Metadata matched for {len(matched)} of {len(ind_names)} individuals.')

    ind_metrics = meta.reindex(pd.Index(ind_names, name='id')).reset_index()
    if 'pop' in ind_metrics.columns:
        pop = np.array([MISSING_POP if pd.isna(x) else str(x).strip()
                        for x in ind_metrics['pop']], dtype=object)
    else:
        logger.warning('No "pop" column in individual metadata. '
                       f'All individuals assigned to population "{DEFAULT_POP}".')
        pop = np.array([DEFAULT_POP] * len(ind_names), dtype=object)
    ind_metrics['pop'] = pop

    latlon = None
    if 'lat' in ind_metrics.columns and 'lon' in ind_metrics.columns:
        latlon = ind_metrics[['lat', 'lon']].astype(float).reset_index(drop=True)
        logger.info('Coordinates added from individual metadata.')
    return ind_metrics, pop, latlon


def default_ind_metrics(ind_names: Sequence[str]) -> Tuple[pd.DataFrame, np.ndarray]:
    """
    Individual metadata used when no metadata file is given:
    every individual belongs to population 'A'.
    """
    pop = np.array([DEFAULT_POP] * len(ind_names), dtype=object)
    return pd.DataFrame({'id': list(ind_names), 'pop': pop}), pop


def write_recode_table(names: List[str], output_file: str):
    """
    Write a two-column recode proforma: current names, repeated as the new names.
    Edit the second column and apply with the recode functions.

    :param names: The current names.
    :param output_file: The output file path.
    """
    pd.DataFrame({'old': names, 'new': names}).to_csv(output_file, header=False, index=False)


def load_recode_table(input_file: str) -> Dict[str, str]:
    """
    Load a two-column recode table (old name, new name) without header.

    :param input_file: The path to the recode table.
    :return: A Dict mapping old names to new names, in file order.
    """
    table = pd.read_csv(input_file, header=None, dtype=str, skipinitialspace=True,
                        keep_default_na=False, na_values=[''])
    if table.shape[1] != 2:
        raise ValueError(f'Recode table {input_file} must have exactly two columns, '
                         f'found {table.shape[1]}.')
    table = table.dropna(how='all')
    if table.isna().any().any():
        raise ValueError(f'Recode table {input_file} contains empty cells.')
    old, new = [x.str.strip() for _, x in table.items()]
    dupes = old[old.duplicated()].tolist()
    if dupes:
        raise ValueError(f'Duplicate entries found in recode table: {dupes}')
    return dict(zip(old, new))


def write_report_file(report: pd.DataFrame, output_file: str):
    """
    Save a report table in tab-separated fashion with header.
    """
    report.to_csv(output_file, sep='\t', index=False)
