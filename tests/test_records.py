import numpy as np
import pandas as pd
import pytest

from dartqc.structure.records import DataType, GenotypeContainer


def make_container(gt, data_type=DataType.SNP, **kwargs):
    gt = np.asarray(gt, dtype=float)
    n_ind, n_loc = gt.shape
    ind_names = [f'ind{i}' for i in range(n_ind)]
    fields = dict(
        data_type=data_type,
        gt=gt,
        ind_names=ind_names,
        loc_names=[f'loc{i}' for i in range(n_loc)],
        pop=['P1'] * (n_ind - 1) + ['P2'],
        loc_metrics=pd.DataFrame({'CallRate': np.ones(n_loc)}),
        ind_metrics=pd.DataFrame({'id': ind_names}),
    )
    fields.update(kwargs)
    return GenotypeContainer(**fields)


class TestGenotypeContainer:
    def test_properties(self):
        x = make_container([[0, 1, 2], [np.nan, 1, 0]])
        assert (x.n_ind, x.n_loc, x.n_pop) == (2, 3, 2)
        assert x.pop_names == ['P1', 'P2']
        assert list(x.loc_na_count()) == [1, 0, 0]
        assert list(x.ind_na_count()) == [0, 1]
        assert repr(x) == 'SNP n_ind=2 n_loc=3 n_pop=2'

    def test_with_history_copies(self):
        x = make_container([[0, 1], [2, 0]], history=['read_dart(a.csv)'])
        x2 = x.with_history('filter_monomorphs')
        assert x2 is not x
        assert x2.history == ['read_dart(a.csv)', 'filter_monomorphs']
        assert x.history == ['read_dart(a.csv)']

    def test_subset_keeps_metadata_aligned(self):
        x = make_container([[0, 1, 2], [np.nan, 1, 0], [2, 2, 0]],
                           position=np.array([5, 6, 7]),
                           latlon=pd.DataFrame({'lat': [1., 2., 3.], 'lon': [4., 5., 6.]}))
        x2 = x.subset(ind=np.array([True, False, True]), loc=[2, 0])
        assert list(x2.ind_names) == ['ind0', 'ind2']
        assert list(x2.loc_names) == ['loc2', 'loc0']
        assert list(x2.ind_metrics['id']) == ['ind0', 'ind2']
        assert list(x2.position) == [7, 5]
        assert list(x2.latlon['lat']) == [1., 3.]
        np.testing.assert_array_equal(x2.gt, [[2, 0], [0, 2]])
        assert x.n_ind == 3

    @pytest.mark.parametrize('kwargs', [
        dict(ind_metrics=pd.DataFrame({'id': ['a']})),
        dict(loc_metrics=pd.DataFrame({'CallRate': [1.]})),
        dict(pop=['P1']),
        dict(loc_names=['a', 'a']),
        dict(ind_names=['a', 'a']),
        dict(position=np.arange(5)),
    ], ids=['ind_metrics', 'loc_metrics', 'pop', 'dup_loc', 'dup_ind', 'position'])
    def test_misaligned(self, kwargs):
        with pytest.raises(ValueError):
            make_container([[0, 1], [1, 2]], **kwargs)

    def test_invalid_values(self):
        with pytest.raises(ValueError, match='Unexpected genotype values'):
            make_container([[0, 1], [1, 2]], data_type=DataType.SILICODART)
        with pytest.raises(ValueError):
            make_container([[0, 3], [1, 2]])

    def test_bad_mask(self):
        x = make_container([[0, 1], [1, 2]])
        with pytest.raises(ValueError):
            x.subset(ind=np.array([True, False, True]))
        with pytest.raises(ValueError):
            x.subset(loc=[5])
