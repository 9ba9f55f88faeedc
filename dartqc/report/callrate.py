from typing import Optional

import numpy as np
import pandas as pd

from dartqc.structure.records import GenotypeContainer
from dartqc.util.helpers import check_container, passes_threshold
from dartqc.util.logging import get_logger

REPORT_THRESHOLDS = (1.0, 0.95, 0.9, 0.85, 0.8, 0.75, 0.7)


def report_callrate(
    x: GenotypeContainer,
    method: str = 'loc',
    plot_file: Optional[str] = None,
    verb: bool = False
) -> pd.DataFrame:
    """
    Summarize the call rate of loci or individuals, to help choose a filtering threshold.

    :param x: the GenotypeContainer.
    :param method: 'loc' to report on loci, 'ind' to report on individuals.
    :param plot_file: If given, save a histogram of call rates to this file.
    :param verb: toggle verbosity.
    :return: a table of the number and percentage of loci (or individuals)
             retained and filtered at a series of thresholds.
    """
    check_container(x, 'report_callrate')
    logger = get_logger(__name__, verb=verb)
    if method not in ('loc', 'ind'):
        logger.warning(f'Unknown method "{method}". Method set to loc.')
        method = 'loc'
    what = 'loci' if method == 'loc' else 'individuals'
    rates = x.loc_callrate() if method == 'loc' else x.ind_callrate()
    n = len(rates)
    if n == 0:
        raise ValueError(f'No {what} to report on.')

    logger.info(f'Reporting Call Rate by {what} for {x.data_type.value} data')
    logger.info(f'  No. of {what} = {n}')
    logger.info(f'  Mean Call Rate = {rates.mean():.4f}')
    logger.info(f'  Minimum Call Rate = {rates.min():.4f}')
    logger.info(f'  Maximum Call Rate = {rates.max():.4f}')
    logger.info(f'  No. of {what} with no missing values = {int((rates == 1.).sum())}')

    rows = []
    for threshold in REPORT_THRESHOLDS:
        retained = int(passes_threshold(rates, threshold).sum())
        rows.append({
            'Threshold': threshold,
            'Retained': retained,
            'Percent': round(100 * retained / n, 1),
            'Filtered': n - retained,
            'Percent.filtered': round(100 * (n - retained) / n, 1),
        })
    report = pd.DataFrame(rows)
    logger.info('\n' + report.to_string(index=False))

    if plot_file is not None:
        from dartqc.util.plotting import callrate_histogram
        callrate_histogram(np.asarray(rates), title=f'Call Rate by {what}',
                           xlabel=f'Call rate ({what})', save_path=plot_file)
        logger.info(f'Call rate histogram saved to {plot_file}')
    return report
