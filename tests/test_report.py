from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
import matplotlib as mpl
mpl.use('Agg')

from dartqc.io.dart import gl_read_dart, read_silicodart
from dartqc.report import report_callrate

from . import SNP_2ROW, SILICODART


@pytest.fixture
def snp_data():
    return gl_read_dart(SNP_2ROW, probar=False)


class TestReportCallrate:
    def test_loci(self, snp_data):
        report = report_callrate(snp_data, method='loc', verb=True)
        assert list(report.columns) == ['Threshold', 'Retained', 'Percent', 'Filtered',
                                        'Percent.filtered']
        assert list(report['Retained']) == [2, 2, 2, 2, 3, 3, 3]
        assert list(report['Filtered']) == [3, 3, 3, 3, 2, 2, 2]
        assert report['Percent'].iloc[0] == 40.0

    def test_individuals(self, snp_data):
        report = report_callrate(snp_data, method='ind')
        assert list(report['Retained']) == [1, 1, 1, 1, 5, 5, 5]

    def test_silicodart(self):
        report = report_callrate(read_silicodart(SILICODART), method='ind')
        assert report['Retained'].iloc[0] == 3

    def test_plot(self, snp_data):
        with TemporaryDirectory() as tmpdir:
            plot = Path(tmpdir)/'callrate.png'
            report_callrate(snp_data, plot_file=plot)
            assert plot.is_file()
