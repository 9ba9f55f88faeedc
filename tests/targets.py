#
# Created by dartqc developers on 14/08/2026.
#
import numpy as np

nan = np.nan

ind_names = ['AA01', 'AA02', 'AA03', 'BB01', 'BB02', 'BB03']

snp_loc_names = [
    '100001|F|0-12:A>G-12:A>G',
    '100002|F|0-31:C>T-31:C>T',
    '100003|F|0-5:G>A-5:G>A',
    '100004|F|0-44:T>C-44:T>C',
    '100005|F|0-60:A>C-60:A>C',
]

snp_gt = np.array([
    [0., 0., 2., 0., 0.],
    [1., 0., nan, 0., 2.],
    [2., 2., 0., 0., nan],
    [0., 1., 1., 0., nan],
    [0., 0., nan, 2., nan],
    [1., nan, 0., 0., 1.],
])

snp_alleles = ['A/G', 'C/T', 'G/A', 'T/C', 'A/C']
snp_positions = [12, 31, 5, 44, 60]

snp_loc_callrate = [1., 5 / 6, 4 / 6, 1., 3 / 6]
snp_ind_callrate = [1., .8, .8, .8, .6, .8]

# number of loci retained by locus call rate filtering at each threshold
snp_loci_retained = {1.0: 2, 0.95: 2, 0.8: 3, 0.6: 4, 0.5: 5, 0.0: 5}

silicodart_gt = np.array([
    [1., 1., 0., 1.],
    [0., nan, 1., 1.],
    [1., 1., nan, 1.],
    [1., 1., 0., 1.],
    [0., nan, 1., 1.],
    [1., 1., 0., 1.],
])

silicodart_loc_names = ['200001', '200002', '200003', '200004']
silicodart_monomorphs = [False, True, False, True]
