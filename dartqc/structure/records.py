#
# Created by dartqc developers on 12/08/2026.
#
from enum import Enum
from typing import List, Optional, Union, Sequence
from dataclasses import dataclass, field, replace

import numpy as np
import pandas as pd

Selector = Optional[Union[np.ndarray, Sequence[int], Sequence[bool]]]


class DataType(Enum):
    """
    Kind of marker data held by a GenotypeContainer.
    """
    SNP = 'SNP'
    SILICODART = 'SilicoDArT'

    @property
    def allowed_values(self):
        return (0., 1., 2.) if self is DataType.SNP else (0., 1.)


def _as_index(selector: Selector, n: int, what: str) -> np.ndarray:
    """
    Turn a boolean mask or an integer index into an integer index array.
    """
    if selector is None:
        return np.arange(n)
    selector = np.asarray(selector)
    if selector.dtype == bool:
        if selector.shape != (n,):
            raise ValueError(f'Boolean {what} mask of length {selector.shape[0]} '
                             f'does not match {n} {what}s.')
        return np.flatnonzero(selector)
    if selector.size and (selector.min() < -n or selector.max() >= n):
        raise ValueError(f'{what.capitalize()} index out of range.')
    return selector.astype(int)


@dataclass
class GenotypeContainer:
    """
    Genotype calls of `n_ind` individuals at `n_loc` loci, together with
    per-locus and per-individual metadata kept aligned with the matrix.

    For SNP data, calls are 0 (homozygous reference), 1 (heterozygous) and
    2 (homozygous SNP allele). For SilicoDArT data, calls are 1 (present) and
    0 (absent). Missing calls are NaN.
    """
    data_type: DataType
    gt: np.ndarray
    ind_names: np.ndarray
    loc_names: np.ndarray
    pop: np.ndarray
    loc_metrics: pd.DataFrame
    ind_metrics: pd.DataFrame
    latlon: Optional[pd.DataFrame] = None
    position: Optional[np.ndarray] = None
    alleles: Optional[np.ndarray] = None
    history: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.gt = np.asarray(self.gt, dtype=float)
        self.ind_names = np.asarray(self.ind_names, dtype=object)
        self.loc_names = np.asarray(self.loc_names, dtype=object)
        self.pop = np.asarray(self.pop, dtype=object)
        if self.gt.ndim != 2:
            raise ValueError(f'Genotype matrix must be two-dimensional, got {self.gt.ndim} dims.')
        n_ind, n_loc = self.gt.shape
        if len(self.ind_names) != n_ind or len(self.loc_names) != n_loc:
            raise ValueError(
                f'Genotype matrix of shape {self.gt.shape} does not match '
                f'{len(self.ind_names)} individual and {len(self.loc_names)} locus names.'
            )
        if len(self.pop) != n_ind:
            raise ValueError(f'Got {len(self.pop)} population labels for {n_ind} individuals.')
        if len(self.ind_metrics) != n_ind:
            raise ValueError(f'Individual metadata has {len(self.ind_metrics)} rows, '
                             f'expected {n_ind}.')
        if len(self.loc_metrics) != n_loc:
            raise ValueError(f'Locus metadata has {len(self.loc_metrics)} rows, expected {n_loc}.')
        if self.latlon is not None and len(self.latlon) != n_ind:
            raise ValueError(f'Coordinates have {len(self.latlon)} rows, expected {n_ind}.')
        for name in ('position', 'alleles'):
            arr = getattr(self, name)
            if arr is not None:
                arr = np.asarray(arr)
                if len(arr) != n_loc:
                    raise ValueError(f'Locus {name} has {len(arr)} entries, expected {n_loc}.')
                setattr(self, name, arr)
        if len(set(self.ind_names)) != n_ind:
            raise ValueError('Individual names are not unique.')
        if len(set(self.loc_names)) != n_loc:
            raise ValueError('Locus names are not unique.')
        called = self.gt[~np.isnan(self.gt)]
        if not np.isin(called, self.data_type.allowed_values).all():
            raise ValueError(f'Unexpected genotype values for {self.data_type.value} data: '
                             f'{sorted(set(called) - set(self.data_type.allowed_values))}')

    def __repr__(self):
        return (f"{self.data_type.value} n_ind={self.n_ind} n_loc={self.n_loc} "
                f"n_pop={self.n_pop}")

    @property
    def n_ind(self) -> int:
        return self.gt.shape[0]

    @property
    def n_loc(self) -> int:
        return self.gt.shape[1]

    @property
    def pop_names(self) -> List[str]:
        """Sorted unique population labels."""
        return sorted(set(str(x) for x in self.pop))

    @property
    def n_pop(self) -> int:
        return len(self.pop_names)

    def loc_na_count(self) -> np.ndarray:
        return np.isnan(self.gt).sum(axis=0)

    def ind_na_count(self) -> np.ndarray:
        return np.isnan(self.gt).sum(axis=1)

    def loc_callrate(self) -> np.ndarray:
        """Fraction of individuals with a call, per locus."""
        if self.n_ind == 0:
            return np.zeros(self.n_loc)
        return 1. - self.loc_na_count() / self.n_ind

    def ind_callrate(self) -> np.ndarray:
        """Fraction of loci with a call, per individual."""
        if self.n_loc == 0:
            return np.zeros(self.n_ind)
        return 1. - self.ind_na_count() / self.n_loc

    def subset(self, ind: Selector = None, loc: Selector = None) -> 'GenotypeContainer':
        """
        Select individuals and/or loci, slicing every metadata table in step with the matrix.

        :param ind: boolean mask or integer index of individuals to keep. None keeps all.
        :param loc: boolean mask or integer index of loci to keep. None keeps all.
        :return: a new GenotypeContainer
        """
        ind_idx = _as_index(ind, self.n_ind, 'individual')
        loc_idx = _as_index(loc, self.n_loc, 'locus')
        return replace(
            self,
            gt=self.gt[np.ix_(ind_idx, loc_idx)],
            ind_names=self.ind_names[ind_idx],
            loc_names=self.loc_names[loc_idx],
            pop=self.pop[ind_idx],
            loc_metrics=self.loc_metrics.iloc[loc_idx].reset_index(drop=True),
            ind_metrics=self.ind_metrics.iloc[ind_idx].reset_index(drop=True),
            latlon=None if self.latlon is None else self.latlon.iloc[ind_idx].reset_index(drop=True),
            position=None if self.position is None else self.position[loc_idx],
            alleles=None if self.alleles is None else self.alleles[loc_idx],
            history=list(self.history),
        )

    def with_history(self, entry: str) -> 'GenotypeContainer':
        """Return a copy with `entry` appended to the history; `self` is left unchanged."""
        return replace(self, history=self.history + [entry])
