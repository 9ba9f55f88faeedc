#
# Created by dartqc developers on 14/08/2026.
#
import os

import joblib

from dartqc.structure.records import GenotypeContainer
from dartqc.util.logging import get_logger


def save_container(obj: GenotypeContainer, filename: str, overwrite=False, verb=False):
    """
    Save a GenotypeContainer as a pickled object.

    :param obj: the GenotypeContainer to be saved.
    :param filename: Output filename
    :param overwrite: Overwrite existing files with same name
    :param verb: Toggle verbosity
    """
    logger = get_logger(initname=__name__, verb=verb)
    basefolder = os.path.dirname(os.path.abspath(filename))
    if not os.path.exists(basefolder):
        raise RuntimeError(f"Output folder does not exist: {basefolder}")
    if os.path.isfile(filename):
        if overwrite:
            logger.warning("Overwriting existing file.")
        else:
            raise RuntimeError(f"Output file exists: {filename}")
    joblib.dump(obj, filename=filename)
    logger.info(f"Genotype container saved to {filename}.")


def load_container(filename: str, verb=False) -> GenotypeContainer:
    """
    Load a pickled GenotypeContainer.

    :param filename: Input filename
    :param verb: Toggle verbosity
    :return: the unpickled GenotypeContainer
    """
    logger = get_logger(initname=__name__, verb=verb)
    if not os.path.isfile(filename):
        raise RuntimeError(f"Input file does not exist: {filename}")
    obj = joblib.load(filename)
    if not isinstance(obj, GenotypeContainer):
        raise RuntimeError(f"{filename} does not hold a GenotypeContainer "
                           f"(found {type(obj).__name__}).")
    logger.info(f"Successfully loaded genotype container ({obj}).")
    return obj
