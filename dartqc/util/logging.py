#
# Created by dartqc developers on 12/08/2026.
#
import logging

logging.addLevelName(logging.DEBUG, "\033[1;32m%s\033[1;0m" % logging.getLevelName(logging.DEBUG))
logging.addLevelName(logging.INFO, "\033[1;34m%s\033[1;0m" % logging.getLevelName(logging.INFO))
logging.addLevelName(logging.WARNING, "\033[1;33m%s\033[1;0m" % logging.getLevelName(logging.WARNING))
logging.addLevelName(logging.ERROR, "\033[1;41m%s\033[1;0m" % logging.getLevelName(logging.ERROR))

LOG_FORMAT = '\033[1;32m[%(asctime)s]\033[1;0m \033[1m%(name)s\033[1;0m - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(initname: str, verb: bool = False) -> logging.Logger:
    """
    Provide a logger for the modules of this package.
    Progress reports are logged at INFO and only shown when `verb` is set;
    warnings are always shown.

    :param initname: The name of the logger to show up in log.
    :param verb: Toggle verbosity
    :return: the finished Logger object.
    """
    level = logging.INFO if verb else logging.WARNING
    logger = logging.getLogger(initname)
    logger.setLevel(level)
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(ch)
    logger.propagate = False
    return logger


def log_summary(logger: logging.Logger, x, title: str = 'Summary of filtered dataset'):
    """
    Log locus, individual and population counts of a GenotypeContainer.
    """
    logger.info(title)
    logger.info(f'  No. of loci: {x.n_loc}')
    logger.info(f'  No. of individuals: {x.n_ind}')
    logger.info(f'  No. of populations: {x.n_pop}')
