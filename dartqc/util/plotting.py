#
# Created by dartqc developers on 3/9/26.
#
from pathlib import Path
from typing import Union

import numpy as np

DEFAULT_BINS = 50


def callrate_histogram(
    callrates: np.ndarray,
    title: str = "",
    xlabel: str = "Call rate",
    threshold: float = None,
    bins: int = DEFAULT_BINS,
    fontsize: int = 14,
    figsize=(8, 5),
    color: str = 'lightblue',
    save_path: Union[str, Path] = None,
    **kwargs
):
    """
    Plot a histogram of call rates per locus or per individual.

    :param callrates: the call rates to plot
    :param title: The plot title
    :param xlabel: The label of the x axis
    :param threshold: If given, draw a vertical line at this call rate
    :param bins: The number of histogram bins
    :param fontsize: The fontsize of the plot
    :param figsize: The figure size (tuple of width, height)
    :param color: The bar color
    :param save_path: The save path of the plot; if None, display it with plt.show()
    :param kwargs: any further keyword arguments passed to plt.hist()
    :return: None
    """
    if save_path is not None:
        save_path = Path(str(save_path))
        if not save_path.parent.is_dir():
            raise RuntimeError(f"Output folder does not exist: {save_path.parent}")
        import matplotlib
        matplotlib.use('Agg')
    import matplotlib.pyplot as plt  # must import this after setting backend if we want to save

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.hist(callrates, bins=bins, range=(0., 1.), color=color, edgecolor='black', **kwargs)
    if threshold is not None:
        ax.axvline(threshold, color='red', linestyle='--')
    ax.set_title(title, fontsize=fontsize * 1.2)
    ax.set_xlabel(xlabel, fontsize=fontsize)
    ax.set_ylabel("Count", fontsize=fontsize)
    ax.set_xlim(0., 1.)
    plt.tight_layout()
    if save_path is not None:
        plt.savefig(save_path)
        plt.close(fig)
    else:
        plt.show()
