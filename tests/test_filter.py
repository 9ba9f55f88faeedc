import numpy as np
import pytest

from dartqc.filter import (filter_callrate, filter_monomorphs, recalc_metrics,
                           monomorphic_loci)
from dartqc.io.dart import gl_read_dart, read_silicodart

from . import SNP_2ROW, SILICODART, IND_METAFILE
from .targets import (snp_loc_callrate, snp_ind_callrate, snp_loci_retained,
                      silicodart_monomorphs)


@pytest.fixture
def snp_data():
    return gl_read_dart(SNP_2ROW, ind_metafile=IND_METAFILE, probar=False)


@pytest.fixture
def silicodart_data():
    return read_silicodart(SILICODART, ind_metafile=IND_METAFILE)


def assert_aligned(x):
    assert len(x.loc_metrics) == x.n_loc == len(x.loc_names)
    assert len(x.ind_metrics) == x.n_ind == len(x.ind_names) == len(x.pop)
    assert list(x.ind_metrics['id']) == list(x.ind_names)


class TestFilterCallrate:
    def test_callrates(self, snp_data):
        np.testing.assert_allclose(snp_data.loc_callrate(), snp_loc_callrate)
        np.testing.assert_allclose(snp_data.ind_callrate(), snp_ind_callrate)

    @pytest.mark.parametrize('threshold', list(snp_loci_retained.keys()))
    def test_filter_loci(self, snp_data, threshold):
        x2 = filter_callrate(snp_data, method='loc', threshold=threshold, verb=True)
        assert x2.n_loc == snp_loci_retained[threshold]
        assert x2.n_ind == snp_data.n_ind
        assert (x2.loc_callrate() >= threshold).all()
        assert_aligned(x2)

    def test_filter_loci_refreshes_callrate(self, snp_data):
        x2 = filter_callrate(snp_data, method='loc', threshold=0.6)
        np.testing.assert_allclose(x2.loc_metrics['CallRate'], x2.loc_callrate())

    def test_threshold_one_removes_all_missing(self, snp_data):
        loci = filter_callrate(snp_data, method='loc', threshold=1.0)
        assert not np.isnan(loci.gt).any()
        inds = filter_callrate(snp_data, method='ind', threshold=1.0, mono_rm=False)
        assert list(inds.ind_names) == ['AA01']
        assert not np.isnan(inds.gt).any()

    @pytest.mark.parametrize('method', ['loc', 'ind'])
    def test_threshold_zero_removes_nothing(self, snp_data, method):
        x2 = filter_callrate(snp_data, method=method, threshold=0.0)
        assert (x2.n_ind, x2.n_loc) == (snp_data.n_ind, snp_data.n_loc)
        np.testing.assert_array_equal(x2.gt, snp_data.gt)

    @pytest.mark.parametrize('method,threshold', [('loc', 0.8), ('loc', 0.5), ('ind', 0.7)])
    def test_idempotent(self, snp_data, method, threshold):
        once = filter_callrate(snp_data, method=method, threshold=threshold)
        twice = filter_callrate(once, method=method, threshold=threshold)
        np.testing.assert_array_equal(once.gt, twice.gt)
        assert list(once.loc_names) == list(twice.loc_names)
        assert list(once.ind_names) == list(twice.ind_names)

    def test_filter_individuals_cascade(self, snp_data):
        x2 = filter_callrate(snp_data, method='ind', threshold=0.8, verb=True)
        assert 'BB02' not in set(x2.ind_names)
        assert x2.n_ind == 5
        # locus 100004 is only polymorphic through BB02
        assert x2.n_loc == 4
        assert not any(name.startswith('100004') for name in x2.loc_names)
        assert not x2.loc_metrics['monomorphs'].any()
        assert x2.latlon.shape == (5, 2)
        assert_aligned(x2)

    def test_filter_individuals_no_cascade(self, snp_data):
        x2 = filter_callrate(snp_data, method='ind', threshold=0.8, mono_rm=False, recalc=False)
        assert (x2.n_ind, x2.n_loc) == (5, 5)
        assert 'monomorphs' not in x2.loc_metrics.columns

    def test_no_individuals_remain(self, snp_data):
        without_complete = snp_data.subset(ind=np.arange(1, 6))
        with pytest.raises(ValueError, match='too stringent'):
            filter_callrate(without_complete, method='ind', threshold=1.0)

    def test_unknown_method_falls_back_to_loci(self, snp_data):
        x2 = filter_callrate(snp_data, method='individuals', threshold=0.95)
        assert x2.n_loc == 2
        assert x2.n_ind == snp_data.n_ind

    def test_bad_threshold(self, snp_data):
        with pytest.raises(ValueError):
            filter_callrate(snp_data, threshold=1.5)

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            filter_callrate(np.zeros((3, 3)))

    def test_silicodart(self, silicodart_data):
        loci = filter_callrate(silicodart_data, method='loc', threshold=0.8)
        assert list(loci.loc_names) == ['200001', '200003', '200004']
        inds = filter_callrate(silicodart_data, method='ind', threshold=0.8, verb=True)
        assert list(inds.ind_names) == ['AA01', 'BB01', 'BB03']
        # every remaining locus is monomorphic among AA01, BB01 and BB03
        assert inds.n_loc == 0
        assert_aligned(inds)

    def test_history(self, snp_data):
        x2 = filter_callrate(snp_data, threshold=0.9)
        assert x2.history[-1] == 'filter_callrate(method=loc, threshold=0.9)'
        assert len(snp_data.history) == 1


class TestMonomorphs:
    def test_snp_none_monomorphic(self, snp_data):
        assert not monomorphic_loci(snp_data).any()
        assert filter_monomorphs(snp_data).n_loc == snp_data.n_loc

    def test_nothing_removed_returns_new_container(self, snp_data):
        x2 = filter_monomorphs(snp_data)
        assert x2 is not snp_data
        assert x2.history[-1] == 'filter_monomorphs'
        assert len(snp_data.history) == 1
        np.testing.assert_array_equal(x2.gt, snp_data.gt)
        x2.gt[0, 0] = 2.
        assert snp_data.gt[0, 0] == 0.

    def test_silicodart(self, silicodart_data):
        assert list(monomorphic_loci(silicodart_data)) == silicodart_monomorphs
        x2 = filter_monomorphs(silicodart_data, verb=True)
        assert list(x2.loc_names) == ['200001', '200003']
        assert_aligned(x2)

    def test_all_heterozygous_is_polymorphic(self, snp_data):
        x = snp_data.subset(ind=[1, 5], loc=[0])
        assert list(x.gt[:, 0]) == [1., 1.]
        assert not monomorphic_loci(x).any()

    def test_all_missing_is_monomorphic(self, snp_data):
        x = snp_data.subset(ind=[2, 3, 4], loc=[4])
        assert np.isnan(x.gt).all()
        assert filter_monomorphs(x).n_loc == 0


class TestRecalcMetrics:
    def test_snp(self, snp_data):
        x = recalc_metrics(snp_data.subset(ind=[0, 1, 2, 3, 5]))
        first = x.loc_metrics.iloc[0]
        assert first['CallRate'] == pytest.approx(1.)
        assert first['FreqHomRef'] == pytest.approx(.4)
        assert first['FreqHets'] == pytest.approx(.4)
        assert first['FreqHomSnp'] == pytest.approx(.2)
        assert first['OneRatioRef'] == pytest.approx(.8)
        assert first['OneRatioSnp'] == pytest.approx(.6)
        assert first['PICRef'] == pytest.approx(.32)
        assert first['PICSnp'] == pytest.approx(.48)
        assert first['AvgPIC'] == pytest.approx(.4)
        assert first['maf'] == pytest.approx(.4)
        assert list(x.loc_metrics['monomorphs']) == [False, False, False, True, False]
        assert x.history[-1] == 'recalc_metrics'

    def test_no_calls(self, snp_data):
        x = recalc_metrics(snp_data.subset(ind=[2, 3, 4], loc=[4]))
        assert x.loc_metrics['CallRate'].iloc[0] == 0.
        assert np.isnan(x.loc_metrics['FreqHets'].iloc[0])

    def test_silicodart(self, silicodart_data):
        x = recalc_metrics(silicodart_data)
        np.testing.assert_allclose(x.loc_metrics['OneRatio'], [4 / 6, 1., .4, 1.])
        np.testing.assert_allclose(x.loc_metrics['PIC'], [4 / 9, 0., .48, 0.])
        np.testing.assert_allclose(x.loc_metrics['CallRate'], [1., 4 / 6, 5 / 6, 1.])
