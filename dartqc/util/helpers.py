#
# Created by dartqc developers on 12/08/2026.
#
import numpy as np

from dartqc.structure.records import GenotypeContainer

CALLRATE_TOLERANCE = 1e-9


def check_container(x, caller: str) -> GenotypeContainer:
    """
    Ensure `x` is a GenotypeContainer before processing.

    :param x: the object passed by the user.
    :param caller: the name of the calling function, for the error message.
    :return: x
    """
    if not isinstance(x, GenotypeContainer):
        raise TypeError(f'{caller}: expected a GenotypeContainer of SNP or SilicoDArT data, '
                        f'got {type(x).__name__}.')
    return x


def check_threshold(threshold: float) -> float:
    threshold = float(threshold)
    if not 0. <= threshold <= 1.:
        raise ValueError(f'Call rate threshold must lie between 0 and 1, got {threshold}.')
    return threshold


def passes_threshold(rates: np.ndarray, threshold: float) -> np.ndarray:
    """
    Boolean mask of call rates at or above `threshold`.
    Rates within floating point noise of the threshold count as passing.
    """
    return np.asarray(rates) >= threshold - CALLRATE_TOLERANCE
